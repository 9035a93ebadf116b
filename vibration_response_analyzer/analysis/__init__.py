"""Analysis package.

Design principle:
  - Ingest produces validated :class:`~vibration_response_analyzer.models.records.Table` objects.
  - Analysis consumes Tables and produces new Tables or plain result mappings;
    nothing is modified in place.

Project-wide policy:
  - A channel value missing from a record counts as 0, both for RSS and for RMS.
"""

from .bands import RMSResult, aggregate_bands, band_rms, rms_for_node
from .pipeline import AnalysisResult, analyze_table, run_analysis
from .rss import derive_rss, rss_values
from .scaling import scale

__all__ = [
    "RMSResult",
    "aggregate_bands",
    "band_rms",
    "rms_for_node",
    "AnalysisResult",
    "analyze_table",
    "run_analysis",
    "derive_rss",
    "rss_values",
    "scale",
]
