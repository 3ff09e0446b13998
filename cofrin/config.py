"""Configuration management for cofrin."""

from dataclasses import dataclass, field
from pathlib import Path

from cofrin.exceptions import ConfigurationError


@dataclass
class OutputConfig:
    """Output configuration for exported sample data."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class SampleConfig:
    """Sizing of generated sample ledgers."""

    num_owners: int = 3
    transactions_per_owner: int = 40
    goals_per_owner: int = 2
    installment_purchases_per_owner: int = 2
    locale: str = "pt_BR"


@dataclass
class CofrinConfig:
    """Main configuration for cofrin."""

    output: OutputConfig = field(default_factory=OutputConfig)
    sample: SampleConfig = field(default_factory=SampleConfig)
    currency_symbol: str = "R$"
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CofrinConfig":
        """Create config from environment variables."""
        import os

        output = OutputConfig(
            json_output_dir=Path(os.getenv("COFRIN_OUTPUT_DIR", "output")),
            pretty_json=os.getenv("COFRIN_PRETTY_JSON", "false").lower() == "true",
        )

        sample = SampleConfig(
            num_owners=_int_env("COFRIN_SAMPLE_OWNERS", 3),
            transactions_per_owner=_int_env("COFRIN_SAMPLE_TRANSACTIONS", 40),
            goals_per_owner=_int_env("COFRIN_SAMPLE_GOALS", 2),
            installment_purchases_per_owner=_int_env("COFRIN_SAMPLE_INSTALLMENTS", 2),
            locale=os.getenv("COFRIN_LOCALE", "pt_BR"),
        )

        seed = os.getenv("COFRIN_SEED")

        return cls(
            output=output,
            sample=sample,
            currency_symbol=os.getenv("COFRIN_CURRENCY_SYMBOL", "R$"),
            seed=_int_env("COFRIN_SEED", 0) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
