"""Structured export payload consumed by external report tooling.

The JSON field names are a contract with that tooling; keep them stable:

.. code-block:: text

    {
      "metadata": {"fileName", "startNode", "endNode", "magnificationFactor",
                   "unitLabel", "nodeCount", "frequencyRange": [min, max]},
      "plotData": [{"frequency": ..., "<channel>": ...}, ...],
      "rssColumns": [...],
      "rmsData": {"<rss channel>": {"DNS_1_100": ..., ...}},
      "nodeTitles": {"<node id>": "<title>"}
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from vibration_response_analyzer.analysis.bands import RMSResult, aggregate_bands
from vibration_response_analyzer.analysis.pipeline import AnalysisResult
from vibration_response_analyzer.models.bands import DEFAULT_BANDS, DNS_BANDS, FrequencyBand
from vibration_response_analyzer.models.nodes import NODE_TITLE_MAP


@dataclass(frozen=True)
class ExportMetadata:
    file_name: str
    start_node: int
    end_node: int
    magnification_factor: float
    unit_label: str
    node_count: int
    frequency_range: Tuple[float, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "startNode": self.start_node,
            "endNode": self.end_node,
            "magnificationFactor": self.magnification_factor,
            "unitLabel": self.unit_label,
            "nodeCount": self.node_count,
            "frequencyRange": [self.frequency_range[0], self.frequency_range[1]],
        }


@dataclass(frozen=True)
class ExportPayload:
    """Scaled table, RSS channel list, band RMS and metadata of one run."""

    metadata: ExportMetadata
    plot_data: Tuple[Dict[str, float], ...]
    rss_columns: Tuple[str, ...]
    rms_data: RMSResult
    node_titles: Dict[int, str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "plotData": [dict(row) for row in self.plot_data],
            "rssColumns": list(self.rss_columns),
            "rmsData": {ch: dict(bands) for ch, bands in self.rms_data.items()},
            "nodeTitles": {str(k): v for k, v in self.node_titles.items()},
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def payload_bands(result: AnalysisResult) -> Tuple[FrequencyBand, ...]:
    """DNS-labelled bands for the default intervals, the profile's bands otherwise."""
    if tuple(result.profile.bands) == DEFAULT_BANDS:
        return DNS_BANDS
    return tuple(result.profile.bands)


def build_export_payload(
    result: AnalysisResult,
    bands: Optional[Sequence[FrequencyBand]] = None,
) -> ExportPayload:
    """Bundle an :class:`AnalysisResult` for report generation."""
    bands = payload_bands(result) if bands is None else tuple(bands)
    profile = result.profile
    metadata = ExportMetadata(
        file_name=result.source_label,
        start_node=profile.start_node,
        end_node=profile.end_node,
        magnification_factor=profile.magnification_factor,
        unit_label=profile.resolved_unit_label,
        node_count=len(result.rss_columns),
        frequency_range=result.parsed.frequency_range(),
    )
    plot_data: List[Dict[str, float]] = [rec.as_dict() for rec in result.scaled.records]
    return ExportPayload(
        metadata=metadata,
        plot_data=tuple(plot_data),
        rss_columns=tuple(result.rss_columns),
        rms_data=aggregate_bands(result.scaled, result.rss_columns, bands),
        node_titles=dict(NODE_TITLE_MAP),
    )


def payload_filename(source_label: str) -> str:
    """``sweep.csv`` -> ``sweep_ppt_data.json``."""
    stem = Path(source_label).stem or "data"
    return f"{stem}_ppt_data.json"
