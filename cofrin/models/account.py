"""Account ("bank") and credit card models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

# Implicit account every owner has without a stored record
DEFAULT_ACCOUNT_NAME = "Dia a Dia"


@dataclass
class Account:
    """Named bucket partitioning an owner's transactions."""

    account_id: str
    owner_id: str
    name: str  # Unique per owner
    created_at: datetime | None = None


@dataclass
class CreditCard:
    """Credit card used as a label on expense transactions.

    The limit is informational only; nothing enforces it.
    """

    card_id: str
    owner_id: str
    name: str
    due_day: int  # 1-31
    limit: Decimal
    created_at: datetime | None = None

    @property
    def due_day_label(self) -> str:
        return f"{self.due_day}º dia do mês"
