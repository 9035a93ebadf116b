"""Band-limited RMS energy per channel.

RMS over a band is ``sqrt(sum(v^2) / count)`` over the records whose
frequency falls inside the band.  An empty band yields 0.0 so that callers
never need to handle NaN, and a channel missing from a record counts as 0.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np

from vibration_response_analyzer.models.bands import DEFAULT_BANDS, FrequencyBand
from vibration_response_analyzer.models.records import Table

from .scaling import scale

RMSResult = Dict[str, Dict[str, float]]


def band_rms(values: np.ndarray, mask: np.ndarray) -> float:
    n = int(np.count_nonzero(mask))
    if n == 0:
        return 0.0
    v = values[mask]
    return float(np.sqrt(np.sum(v * v) / n))


def aggregate_bands(
    table: Table,
    channels: Sequence[str],
    bands: Sequence[FrequencyBand] = DEFAULT_BANDS,
) -> RMSResult:
    """RMS of each channel in each band: ``{channel: {band_label: rms}}``."""
    f = table.frequencies()
    masks = [(b.label, b.mask(f)) for b in bands]
    result: RMSResult = {}
    for ch in channels:
        values = table.column_values(ch)
        result[ch] = {label: band_rms(values, m) for label, m in masks}
    return result


def rms_for_node(
    table: Table,
    node_id: int,
    factor: float = 1.0,
    bands: Optional[Sequence[FrequencyBand]] = None,
) -> Dict[str, float]:
    """Band RMS of the ``RSS_<node_id>`` channel after dividing by *factor*."""
    column = f"RSS_{int(node_id)}"
    scaled = scale(table, factor)
    rms = aggregate_bands(scaled, [column], DEFAULT_BANDS if bands is None else bands)
    return rms[column]
