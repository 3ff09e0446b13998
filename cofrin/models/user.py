"""App user model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Registered user; the CPF digits double as an alternate login key."""

    user_id: str
    name: str
    cpf: str  # 11 digits, no mask
    email: str
    created_at: datetime
