"""JSON file sink for exporting records and summaries."""

import json
import logging
from pathlib import Path
from typing import Any

from cofrin.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output records to one JSON file per entity type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)

        self._counts[entity_type] = len(records)
        return file_path

    def close(self) -> dict[str, int]:
        """Log a summary and return record counts per entity type."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
        return dict(self._counts)
