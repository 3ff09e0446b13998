"""Pre-built data scenarios."""

from cofrin.scenarios.sample_ledger import SampleLedgerScenario

__all__ = ["SampleLedgerScenario"]
