"""Ingest package - tabular parsing and channel detection.

This package handles:
- Parsing frequency-response CSV text into a validated Table
- Grouping X/Y/Z response columns by measurement node
- Generating synthetic sweeps for demos and tests

Key classes:
- CsvSweepReader: Lenient CSV reader (bad rows are skipped, not fatal)
- AxisGroups: Result of name-driven axis grouping

Design principle:
- Readers produce validated Table objects
- Skipped rows are logged and kept in Table.diagnostics
- Nothing is renamed: header text becomes the channel name verbatim
"""

from .channel_detect import AxisGroup, AxisGroups, ChannelMapping, classify, node_ids, rss_channel_name
from .csv_reader import CsvReaderConfig, CsvSweepReader, parse, parse_csv_text, read_csv_file

__all__ = [
    "AxisGroup",
    "AxisGroups",
    "ChannelMapping",
    "classify",
    "node_ids",
    "rss_channel_name",
    "CsvReaderConfig",
    "CsvSweepReader",
    "parse",
    "parse_csv_text",
    "read_csv_file",
]
