"""Custom exception hierarchy for cofrin."""


class CofrinError(Exception):
    """Base exception for all cofrin errors."""


class InvalidArgumentError(CofrinError, ValueError):
    """Raised when a numeric input is outside its domain."""


class ValidationError(CofrinError):
    """Raised when user-supplied form data is rejected."""


class EntityNotFoundError(CofrinError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class DuplicateEntityError(CofrinError):
    """Raised when an entity with the same unique key already exists."""


class ConfigurationError(CofrinError):
    """Raised when configuration is invalid or missing."""
