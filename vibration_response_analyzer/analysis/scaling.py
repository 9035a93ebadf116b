from __future__ import annotations

import math

from vibration_response_analyzer.errors import InvalidScaleError
from vibration_response_analyzer.models.records import Record, Table


def scale(table: Table, factor: float) -> Table:
    """Divide every channel value by *factor*; frequencies are left as they are.

    Raises InvalidScaleError for a zero or non-finite factor.
    """
    factor = float(factor)
    if factor == 0.0:
        raise InvalidScaleError("Scale factor must be non-zero.")
    if not math.isfinite(factor):
        raise InvalidScaleError(f"Scale factor must be finite, got {factor}.")
    if factor == 1.0:
        return table.with_records(table.records)
    records = [
        Record(rec.frequency, {k: v / factor for k, v in rec.values.items()})
        for rec in table.records
    ]
    return table.with_records(records)
