"""Tests for frequency bands and band RMS aggregation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from vibration_response_analyzer.analysis.bands import aggregate_bands, band_rms, rms_for_node
from vibration_response_analyzer.models.bands import DEFAULT_BANDS, DNS_BANDS, FrequencyBand, make_bands
from vibration_response_analyzer.models.records import Record, Table


def _table(freqs, channel="c", value=2.0) -> Table:
    return Table(records=tuple(Record(f, {channel: value}) for f in freqs), columns=(channel,))


# -----------------------------------------------------------------------
# FrequencyBand
# -----------------------------------------------------------------------


def test_default_band_layout() -> None:
    assert [b.label for b in DEFAULT_BANDS] == ["1-100Hz", "100-150Hz", "150-300Hz"]
    assert [b.label for b in DNS_BANDS] == ["DNS_1_100", "DNS_100_150", "DNS_150_300"]
    assert [b.include_low for b in DEFAULT_BANDS] == [False, True, True]


def test_band_membership_edges() -> None:
    low, mid, high = DEFAULT_BANDS
    assert not low.contains(0.0)
    assert low.contains(0.5)
    assert not low.contains(100.0)
    assert mid.contains(100.0)
    assert not mid.contains(150.0)
    assert high.contains(150.0)
    assert not high.contains(300.0)


def test_band_mask_matches_contains() -> None:
    f = np.array([0.0, 50.0, 100.0, 150.0, 200.0, 300.0])
    for b in DEFAULT_BANDS:
        assert b.mask(f).tolist() == [b.contains(x) for x in f]


def test_band_validation() -> None:
    with pytest.raises(ValueError):
        FrequencyBand("bad", 10.0, 10.0)
    with pytest.raises(ValueError):
        FrequencyBand("bad", 0.0, math.inf)


def test_make_bands_label_count() -> None:
    with pytest.raises(ValueError):
        make_bands((0.0, 10.0, 20.0), ("one",))


# -----------------------------------------------------------------------
# aggregate_bands
# -----------------------------------------------------------------------


def test_band_rms_boundaries() -> None:
    table = _table([0, 50, 100, 150, 200, 300])
    rms = aggregate_bands(table, ["c"])
    assert rms == {"c": {"1-100Hz": 2.0, "100-150Hz": 2.0, "150-300Hz": 2.0}}


def test_band_rms_counts_only_in_band_rows() -> None:
    # 0 Hz and 300 Hz carry huge values; they must not leak into any band.
    rows = [Record(0.0, {"c": 1000.0}), Record(50.0, {"c": 3.0}), Record(60.0, {"c": 4.0}),
            Record(300.0, {"c": 1000.0})]
    table = Table(records=tuple(rows), columns=("c",))
    rms = aggregate_bands(table, ["c"])["c"]
    assert rms["1-100Hz"] == pytest.approx(math.sqrt((9.0 + 16.0) / 2.0))
    assert rms["100-150Hz"] == 0.0
    assert rms["150-300Hz"] == 0.0


def test_empty_band_is_zero_not_nan() -> None:
    rms = aggregate_bands(_table([10.0, 20.0]), ["c"])["c"]
    assert rms["150-300Hz"] == 0.0
    assert not any(math.isnan(v) for v in rms.values())


def test_missing_channel_counts_as_zero() -> None:
    rows = [Record(10.0, {"c": 2.0}), Record(20.0, {})]
    table = Table(records=tuple(rows), columns=("c",))
    rms = aggregate_bands(table, ["c"])["c"]
    assert rms["1-100Hz"] == pytest.approx(math.sqrt(4.0 / 2.0))


def test_unsorted_records_supported() -> None:
    table = _table([200.0, 10.0, 120.0, 5.0])
    rms = aggregate_bands(table, ["c"])["c"]
    assert rms == {"1-100Hz": 2.0, "100-150Hz": 2.0, "150-300Hz": 2.0}


def test_custom_bands() -> None:
    bands = make_bands((0.0, 10.0, 1000.0), ("lo", "hi"))
    rms = aggregate_bands(_table([5.0, 500.0]), ["c"], bands)["c"]
    assert rms == {"lo": 2.0, "hi": 2.0}


def test_results_are_python_floats() -> None:
    rms = aggregate_bands(_table([50.0]), ["c"])
    assert all(type(v) is float for v in rms["c"].values())


def test_band_rms_helper() -> None:
    v = np.array([1.0, 2.0, 3.0])
    assert band_rms(v, np.array([False, False, False])) == 0.0
    assert band_rms(v, np.array([True, False, True])) == pytest.approx(math.sqrt(5.0))


def test_aggregate_is_deterministic() -> None:
    table = Table(
        records=tuple(Record(f, {"c": math.sin(f)}) for f in np.linspace(0, 299, 300)),
        columns=("c",),
    )
    assert aggregate_bands(table, ["c"]) == aggregate_bands(table, ["c"])


# -----------------------------------------------------------------------
# rms_for_node
# -----------------------------------------------------------------------


def test_rms_for_node_scales_first() -> None:
    table = _table([50.0, 120.0], channel="RSS_8000001", value=1000.0)
    rms = rms_for_node(table, 8000001, factor=1000.0)
    assert rms == {"1-100Hz": 1.0, "100-150Hz": 1.0, "150-300Hz": 0.0}
