from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from vibration_response_analyzer.models.records import FREQUENCY, Table


def export_csv(table: Table, columns: Optional[Sequence[str]] = None) -> str:
    """Render *table* as ``Frequency,<c1>,<c2>,...`` CSV text.

    A value missing from a record is written as 0.  Floats are written at
    full precision, so parsing the text back reproduces the values.
    """
    df = table.to_dataframe(columns).rename(columns={FREQUENCY: "Frequency"})
    return df.to_csv(index=False, lineterminator="\n")


def export_filename(source_label: str) -> str:
    """``sweep.csv`` -> ``sweep_with_RSS.csv``."""
    stem = Path(source_label).stem or "data"
    return f"{stem}_with_RSS.csv"
