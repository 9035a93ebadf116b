"""Tests for the lenient CSV sweep reader."""

from __future__ import annotations

import logging

import pytest

from vibration_response_analyzer.errors import EmptyResultError, FormatError
from vibration_response_analyzer.ingest.csv_reader import (
    CsvReaderConfig,
    CsvSweepReader,
    parse,
    parse_csv_text,
    parse_number,
    read_csv_file,
)


# -----------------------------------------------------------------------
# parse_number
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "token, expected",
    [("1", 1.0), ("-2.5", -2.5), ("+3.", 3.0), (".5", 0.5), ("1e3", 1000.0), ("2.5E-2", 0.025)],
)
def test_parse_number_accepts_decimal_and_exponential(token: str, expected: float) -> None:
    assert parse_number(token) == expected


@pytest.mark.parametrize("token", ["NaN", "nan", "inf", "-Infinity", "", "abc", "1_000", "12abc", "1e999", "0x10"])
def test_parse_number_rejects_non_finite_and_junk(token: str) -> None:
    assert parse_number(token) is None


# -----------------------------------------------------------------------
# Structure
# -----------------------------------------------------------------------


def test_parse_basic_table() -> None:
    table, columns = parse("Freq (Hz),a,b\n1,2,3\n2,4,5\n")
    assert columns == ("a", "b")
    assert table.columns == columns
    assert table.n_records == 2
    assert table.records[0].frequency == 1.0
    assert dict(table.records[1].values) == {"a": 4.0, "b": 5.0}
    assert table.diagnostics.n_dropped == 0


def test_header_label_is_positional_only() -> None:
    table, columns = parse("whatever,x\n10,1\n")
    assert columns == ("x",)
    assert table.records[0].frequency == 10.0


def test_quotes_and_whitespace_are_stripped() -> None:
    text = '"Frequency", "Node_1_X" ,"Node_1_Y"\r\n "5" , "1.5",2\r\n'
    table, columns = parse(text)
    assert columns == ("Node_1_X", "Node_1_Y")
    assert table.records[0].frequency == 5.0
    assert table.records[0].value("Node_1_X") == 1.5


def test_empty_input_is_format_error() -> None:
    with pytest.raises(FormatError):
        parse_csv_text("   \n  ")


def test_single_column_header_is_format_error() -> None:
    with pytest.raises(FormatError, match="at least 2 columns"):
        parse_csv_text("frequency\n1\n2\n")


def test_header_only_is_empty_result() -> None:
    with pytest.raises(EmptyResultError):
        parse_csv_text("frequency,a")


def test_duplicate_column_names_rejected() -> None:
    with pytest.raises(FormatError, match="Duplicate"):
        parse_csv_text("f,a,a\n1,2,3\n")


def test_empty_column_name_rejected() -> None:
    with pytest.raises(FormatError, match="Empty column"):
        parse_csv_text("f,a,,b\n1,2,3,4\n")


# -----------------------------------------------------------------------
# Row-level leniency
# -----------------------------------------------------------------------


def test_row_drop_tolerance() -> None:
    text = "frequency,a,b\n1,2,3\nx,2,3\n2,bad,3\n3,4,5\n"
    table = parse_csv_text(text)

    assert table.n_records == 2
    assert table.records[0].frequency == 1.0
    assert dict(table.records[0].values) == {"a": 2.0, "b": 3.0}
    assert table.records[1].frequency == 3.0
    assert dict(table.records[1].values) == {"a": 4.0, "b": 5.0}

    diag = table.diagnostics
    assert diag.n_data_rows == 4
    assert diag.n_valid == 2
    assert diag.n_dropped == 2
    assert [d.reason for d in diag.dropped] == ["frequency", "value"]
    assert [d.line_number for d in diag.dropped] == [3, 4]
    assert diag.dropped[1].column == "a"
    assert "2 dropped" in diag.summary()


def test_field_count_mismatch_skips_row() -> None:
    table = parse_csv_text("f,a,b\n1,2\n2,3,4\n3,4,5,6\n")
    assert [r.frequency for r in table.records] == [2.0]
    assert [d.reason for d in table.diagnostics.dropped] == ["field_count", "field_count"]


def test_nan_value_drops_whole_row() -> None:
    table = parse_csv_text("f,a,b\n1,NaN,3\n2,3,4\n")
    assert table.n_records == 1
    assert table.records[0].frequency == 2.0


def test_blank_interior_line_is_skipped() -> None:
    table = parse_csv_text("f,a\n1,2\n\n3,4\n")
    assert table.n_records == 2
    assert table.diagnostics.n_dropped == 1


def test_all_rows_bad_is_empty_result() -> None:
    with pytest.raises(EmptyResultError, match="No valid data rows"):
        parse_csv_text("f,a\nx,1\n2,y\n")


def test_rows_not_sorted_or_deduplicated() -> None:
    table = parse_csv_text("f,a\n3,1\n1,1\n1,1\n")
    assert [r.frequency for r in table.records] == [3.0, 1.0, 1.0]


def test_dropped_rows_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="vibration_response_analyzer.ingest.csv_reader"):
        table = parse_csv_text("f,a\n1,2\n2,oops\n")
    assert any("row 3" in r.getMessage() and "column a" in r.getMessage() for r in caplog.records)
    assert len(table.warnings) == 1


# -----------------------------------------------------------------------
# Config and files
# -----------------------------------------------------------------------


def test_custom_delimiter() -> None:
    reader = CsvSweepReader(CsvReaderConfig(delimiter=";"))
    table = reader.read_text("f;a\n1;2\n")
    assert table.records[0].value("a") == 2.0


def test_read_csv_file(tmp_path) -> None:
    p = tmp_path / "sweep.csv"
    p.write_bytes(b"\xef\xbb\xbffrequency,a\n1,2\n")
    table = read_csv_file(p)
    assert table.columns == ("a",)


def test_read_rejects_non_csv_extension(tmp_path) -> None:
    p = tmp_path / "sweep.txt"
    p.write_text("f,a\n1,2\n")
    with pytest.raises(FormatError, match="Not a CSV"):
        read_csv_file(p)
