"""In-memory ledger store."""

from cofrin.store.ledger import LedgerStore

__all__ = ["LedgerStore"]
