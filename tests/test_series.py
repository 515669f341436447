from __future__ import annotations

import numpy as np
import pytest

from trajectory import ChannelLengthMismatch, TrajectorySeries


def test_series_exposes_channels_and_length():
    series = TrajectorySeries("rec.txt", {
        "cath_tip": [[0, 0, 0], [1, 2, 3]],
        "head_brow": [[5, 5, 5], [6, 6, 6]],
    })

    assert len(series) == 2
    assert series.original_length == 2
    assert series.channel_names == ("cath_tip", "head_brow")
    assert "cath_tip" in series
    np.testing.assert_array_equal(series["cath_tip"][1], [1.0, 2.0, 3.0])


def test_channel_length_mismatch_is_rejected():
    with pytest.raises(ChannelLengthMismatch):
        TrajectorySeries("bad.txt", {
            "cath_tip": np.zeros((3, 3)),
            "head_brow": np.zeros((2, 3)),
        })


def test_channel_must_hold_triples():
    with pytest.raises(ChannelLengthMismatch):
        TrajectorySeries("bad.txt", {"cath_tip": np.zeros((3, 2))})


def test_series_without_channels_is_rejected():
    with pytest.raises(ChannelLengthMismatch):
        TrajectorySeries("empty.txt", {})


def test_arrays_are_copied_and_read_only():
    source = np.zeros((2, 3))
    series = TrajectorySeries("rec.txt", {"cath_tip": source})
    source[0, 0] = 99.0

    assert series["cath_tip"][0, 0] == 0.0
    with pytest.raises(ValueError):
        series["cath_tip"][0, 0] = 1.0


def test_sample_clamps_index(series_factory):
    series = series_factory("rec.txt", 4)

    assert series.sample(-3)["cath_tip"][0] == 0.0
    assert series.sample(10)["cath_tip"][0] == 30.0
    np.testing.assert_array_equal(series.last()["cath_tip"], series["cath_tip"][3])
