#!/usr/bin/env python3
"""Generate a sample ledger and export it for manual inspection.

Builds seeded users with accounts, transactions, installment purchases
and goals, then writes the records plus per-user dashboard summaries
(balance, category totals, goal progress) to JSON files or stdout.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cofrin.config import CofrinConfig
from cofrin.logging import setup_logging
from cofrin.scenarios import SampleLedgerScenario
from cofrin.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments; defaults come from the environment."""
    config = CofrinConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample Cofrin ledger")
    parser.add_argument(
        "--users",
        type=int,
        default=config.sample.num_owners,
        help=f"Number of users to generate (default: {config.sample.num_owners})",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=config.sample.transactions_per_owner,
        help="Plain transactions per user",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Directory for JSON files",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print records to stdout instead of writing files",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument("--log-level", default=config.log_level, help="Log level")
    args = parser.parse_args(argv)
    args.config = config
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the sample ledger scenario and export it."""
    args = parse_args(argv)
    config = args.config
    setup_logging(level=args.log_level, format_type=config.log_format)

    config.sample.num_owners = args.users
    config.sample.transactions_per_owner = args.transactions

    scenario = SampleLedgerScenario(
        config=config.sample,
        seed=args.seed,
        currency_symbol=config.currency_symbol,
    )
    scenario.generate()

    if args.console:
        sink = ConsoleSink(pretty=args.pretty, max_records=5)
    else:
        sink = JsonFileSink(args.output_dir, pretty=args.pretty)

    scenario.export([sink])
    sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
