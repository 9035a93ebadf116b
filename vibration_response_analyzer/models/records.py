from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


FREQUENCY = "frequency"


@dataclass(frozen=True)
class Record:
    """
    One row of a frequency sweep: the frequency (Hz) plus channel values by name.

    Notes
    - values is a read-only view; build a new Record to change anything.
    - A channel absent from values reads as 0.0 through value().
    """
    frequency: float
    values: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", float(self.frequency))
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def value(self, channel: str) -> float:
        return float(self.values.get(channel, 0.0))

    def has(self, channel: str) -> bool:
        return channel in self.values

    def updated(self, extra: Mapping[str, float]) -> Record:
        """Return a copy with *extra* channels added (existing names overwritten)."""
        merged = dict(self.values)
        merged.update(extra)
        return Record(self.frequency, merged)

    def as_dict(self) -> dict:
        d = {FREQUENCY: self.frequency}
        d.update(self.values)
        return d


@dataclass(frozen=True)
class DroppedRow:
    """
    A data row rejected by the parser.

    line_number: 1-indexed physical line (the header is line 1).
    reason: "field_count" | "frequency" | "value"
    column: offending column name for reason == "value", else None.
    """
    line_number: int
    reason: str
    message: str
    column: Optional[str] = None
    raw: str = ""


@dataclass(frozen=True)
class ParseDiagnostics:
    n_data_rows: int
    dropped: Tuple[DroppedRow, ...] = ()

    @property
    def n_dropped(self) -> int:
        return len(self.dropped)

    @property
    def n_valid(self) -> int:
        return self.n_data_rows - self.n_dropped

    def summary(self) -> str:
        return f"{self.n_valid} valid rows, {self.n_dropped} dropped (of {self.n_data_rows})"


@dataclass(frozen=True)
class Table:
    """
    Ordered sequence of Records sharing one channel schema.

    Notes
    - columns is the Column Schema: source order, frequency excluded.
    - Records are in source order. Ascending frequency is expected from producers
      but never relied upon here.
    - diagnostics is set by the parser and carried along by derived tables.
    """
    records: Tuple[Record, ...]
    columns: Tuple[str, ...]
    diagnostics: Optional[ParseDiagnostics] = None
    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    @property
    def n_records(self) -> int:
        return len(self.records)

    def frequencies(self) -> np.ndarray:
        return np.array([r.frequency for r in self.records], dtype=np.float64)

    def column_values(self, channel: str) -> np.ndarray:
        """Values of *channel* for every record, 0.0 where a record lacks it."""
        return np.array([r.value(channel) for r in self.records], dtype=np.float64)

    def frequency_range(self) -> Tuple[float, float]:
        f = self.frequencies()
        if f.size == 0:
            return float("nan"), float("nan")
        return float(np.min(f)), float(np.max(f))

    def to_dataframe(self, columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
        """Return a float64 DataFrame with ``frequency`` first, missing values as 0."""
        cols = list(self.columns if columns is None else columns)
        data = {FREQUENCY: self.frequencies()}
        for c in cols:
            data[c] = self.column_values(c)
        return pd.DataFrame(data, columns=[FREQUENCY] + cols)

    def with_records(
        self,
        records: Iterable[Record],
        columns: Optional[Sequence[str]] = None,
        extra_warnings: Sequence[str] = (),
    ) -> Table:
        return replace(
            self,
            records=tuple(records),
            columns=tuple(self.columns if columns is None else columns),
            warnings=self.warnings + tuple(extra_warnings),
        )
