"""Output sinks for exporting records."""

from cofrin.sinks.console import ConsoleSink
from cofrin.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
