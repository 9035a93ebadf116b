"""Band RMS tables shaped for report builders (header list + row lists)."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from vibration_response_analyzer.analysis.bands import RMSResult
from vibration_response_analyzer.models.nodes import node_title

_RSS_NODE = re.compile(r"RSS_(\d+)")


def rms_dataframe(rms: RMSResult, band_labels: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """One row per channel, one column per band."""
    df = pd.DataFrame.from_dict(rms, orient="index")
    if band_labels is not None:
        df = df.reindex(columns=list(band_labels), fill_value=0.0)
    df.index.name = "channel"
    return df


def rms_table_rows(
    rms: RMSResult,
    band_labels: Optional[Sequence[str]] = None,
    fmt: str = "{:.4g}",
) -> Tuple[List[str], List[List[str]]]:
    """Return ``(headers, rows)`` with a location column and formatted RMS values.

    Channels named ``RSS_<node id>`` get the node's mounting position as
    location; other channels get an empty string.
    """
    df = rms_dataframe(rms, band_labels)
    headers = ["Channel", "Location"] + [str(c) for c in df.columns]
    rows: List[List[str]] = []
    for channel, values in df.iterrows():
        m = _RSS_NODE.fullmatch(str(channel))
        location = node_title(int(m.group(1))) if m else ""
        rows.append([str(channel), location] + [fmt.format(float(v)) for v in values])
    return headers, rows
