from __future__ import annotations

import numpy as np
import pytest

from trajectory import trace_window


def test_window_at_start_has_no_past(series_factory):
    series = series_factory("rec.txt", 50)

    window = trace_window(series, 0, 10)

    assert window.past_count == 0
    assert window.future_count == 5
    assert window.start == 0


def test_window_at_last_sample_has_one_future(series_factory):
    series = series_factory("rec.txt", 50)

    window = trace_window(series, 49, 10)

    assert window.future_count == 1
    assert window.past_count == 5
    np.testing.assert_array_equal(window.points[-1], series["cath_tip"][49])


def test_window_in_the_middle_is_centred(series_factory):
    series = series_factory("rec.txt", 50)

    window = trace_window(series, 20, 10)

    assert (window.past_count, window.future_count) == (5, 5)
    np.testing.assert_array_equal(window.points, series["cath_tip"][15:25])
    np.testing.assert_array_equal(window.points[window.past_count], series["cath_tip"][20])


def test_exhausted_series_has_no_future(series_factory):
    series = series_factory("rec.txt", 50)

    window = trace_window(series, 50, 10)

    assert window.future_count == 0
    assert window.past_count == 5
    np.testing.assert_array_equal(window.points, series["cath_tip"][45:50])


@pytest.mark.parametrize("size", [0, 1, 2, 3, 9, 10, 200])
def test_window_never_leaves_the_series(series_factory, size):
    length = 12
    series = series_factory("rec.txt", length)

    for index in range(-2, length + 3):
        window = trace_window(series, index, size)
        assert len(window) <= size
        assert len(window.points) == window.past_count + window.future_count
        assert 0 <= window.start <= window.stop <= length
        np.testing.assert_array_equal(window.points, series["cath_tip"][window.start:window.stop])


def test_window_reads_the_requested_channel(series_factory):
    series = series_factory("rec.txt", 10)

    window = trace_window(series, 5, 4, channel="head_brow")

    np.testing.assert_array_equal(window.points, series["head_brow"][3:7])
