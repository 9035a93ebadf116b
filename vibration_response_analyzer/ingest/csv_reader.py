from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from vibration_response_analyzer.errors import EmptyResultError, FormatError
from vibration_response_analyzer.models.records import (
    FREQUENCY,
    DroppedRow,
    ParseDiagnostics,
    Record,
    Table,
)

logger = logging.getLogger(__name__)

# Plain decimal or exponential notation. float() alone would also take
# "nan", "inf", "1_000" and surrounding whitespace.
_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def parse_number(token: str) -> Optional[float]:
    """Return the finite float spelled by *token*, or ``None``."""
    if not _NUMBER.match(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class CsvReaderConfig:
    """
    Reader configuration for frequency-response CSV text.

    delimiter:
      Field separator. Quoted fields may not contain it (no CSV escaping).
    quote_char:
      Stripped from both ends of every field.
    """
    delimiter: str = ","
    quote_char: str = '"'


class CsvSweepReader:
    """
    Lenient reader for frequency sweeps exported as delimited text:

      <frequency label>,<channel 1>,<channel 2>,...
      1.0,0.12,0.40,...

    Contract:
      - Header + at least one data row, header with at least two columns,
        otherwise FormatError.
      - Column 0 is the frequency; its header text is ignored.
      - A malformed data row is skipped (logged and recorded in diagnostics),
        never fatal. A row is kept whole or not at all.
      - No surviving rows -> EmptyResultError.
      - Rows are neither sorted nor de-duplicated.
    """

    def __init__(self, config: Optional[CsvReaderConfig] = None):
        self.config = config or CsvReaderConfig()

    def _split(self, line: str) -> List[str]:
        q = self.config.quote_char
        return [f.strip().strip(q).strip() for f in line.split(self.config.delimiter)]

    def _header(self, line: str) -> List[str]:
        header = self._split(line)
        if len(header) < 2:
            raise FormatError("CSV must have at least 2 columns (frequency + responses)")
        columns = header[1:]
        empty = [i + 2 for i, c in enumerate(columns) if not c]
        if empty:
            raise FormatError(f"Empty column name in header at column(s) {empty}")
        seen = set()
        dupes = []
        for c in columns:
            if c in seen and c not in dupes:
                dupes.append(c)
            seen.add(c)
        if dupes:
            raise FormatError(f"Duplicate column name(s) in header: {', '.join(dupes)}")
        if FREQUENCY in seen:
            raise FormatError(f"'{FREQUENCY}' is reserved and cannot be a response column name")
        return header

    def _parse_row(
        self, line_number: int, line: str, header: List[str]
    ) -> Tuple[Optional[Record], Optional[DroppedRow]]:
        values = self._split(line)
        if len(values) != len(header):
            msg = f"Row {line_number} has {len(values)} values but expected {len(header)}, skipping"
            return None, DroppedRow(line_number, "field_count", msg, raw=line)

        frequency = parse_number(values[0])
        if frequency is None:
            msg = f"Invalid frequency value in row {line_number}: {values[0]!r}, skipping"
            return None, DroppedRow(line_number, "frequency", msg, raw=values[0])

        channels = {}
        for name, token in zip(header[1:], values[1:]):
            v = parse_number(token)
            if v is None:
                msg = f"Invalid response value in row {line_number}, column {name}: {token!r}, skipping"
                return None, DroppedRow(line_number, "value", msg, column=name, raw=token)
            channels[name] = v
        return Record(frequency, channels), None

    def read_text(self, raw_text: str) -> Table:
        text = raw_text.strip()
        if not text:
            raise FormatError("CSV must have at least 2 rows (header + data)")
        lines = [ln.strip() for ln in _LINE_BREAK.split(text)]

        header = self._header(lines[0])
        if len(lines) < 2:
            raise EmptyResultError("CSV must have at least 2 rows (header + data)")

        records: List[Record] = []
        dropped: List[DroppedRow] = []
        for i, line in enumerate(lines[1:], start=2):
            rec, bad = self._parse_row(i, line, header)
            if bad is not None:
                logger.warning(bad.message)
                dropped.append(bad)
            else:
                records.append(rec)

        if not records:
            raise EmptyResultError("No valid data rows found in CSV")

        diagnostics = ParseDiagnostics(n_data_rows=len(lines) - 1, dropped=tuple(dropped))
        logger.info(
            "Parsed CSV: %d rows, %d response columns (%d rows dropped)",
            len(records), len(header) - 1, diagnostics.n_dropped,
        )
        return Table(
            records=tuple(records),
            columns=tuple(header[1:]),
            diagnostics=diagnostics,
            warnings=tuple(d.message for d in dropped),
        )

    def read(self, path: str | Path) -> Table:
        """Read a ``.csv`` file from disk (UTF-8, optional BOM)."""
        p = Path(path).expanduser()
        if p.suffix.lower() != ".csv":
            raise FormatError(f"Not a CSV file: {p.name}")
        return self.read_text(p.read_bytes().decode("utf-8-sig"))


def parse_csv_text(raw_text: str, config: Optional[CsvReaderConfig] = None) -> Table:
    return CsvSweepReader(config).read_text(raw_text)


def parse(raw_text: str) -> Tuple[Table, Tuple[str, ...]]:
    """Parse *raw_text* into a Table and its column schema."""
    table = parse_csv_text(raw_text)
    return table, table.columns


def read_csv_file(path: str | Path, config: Optional[CsvReaderConfig] = None) -> Table:
    return CsvSweepReader(config).read(path)
