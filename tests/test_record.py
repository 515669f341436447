from __future__ import annotations

import numpy as np
import pytest

from config import replay as config
from tools.record import load_recording, parse_rows, recording_summary
from trajectory import RecordingFormatError


def test_load_recording_swaps_file_axes(recording_factory):
    path = recording_factory("catheter003.txt", 4)

    series = load_recording(path)

    assert len(series) == 4
    assert series.key == str(path)
    assert set(series.channel_names) == set(config.CHANNELS)
    k = list(config.CHANNELS).index("cath_tip")
    np.testing.assert_allclose(series["cath_tip"][2], [2 + k, 4 + k, 6 + k])


@pytest.mark.parametrize("first_frame", [0, 1])
def test_rows_are_stored_in_file_order(recording_factory, first_frame):
    path = recording_factory("rec.txt", 3, first_frame=first_frame)

    series = load_recording(path)

    assert len(series) == 3
    np.testing.assert_allclose(series["head_top_left"][0], [0.0, 0.0, 0.0])


def test_parsing_stops_at_first_empty_line(recording_factory):
    path = recording_factory("rec.txt", 5)
    lines = path.read_text(encoding="utf-8").splitlines()
    path.write_text("\n".join(lines[:3] + [""] + lines[3:]) + "\n", encoding="utf-8")

    series = load_recording(path)

    assert len(series) == 2


def test_short_row_is_rejected():
    with pytest.raises(RecordingFormatError, match="columns"):
        parse_rows(["0\t0.0\t1.0\t2.0"], config.CHANNELS)


def test_bad_number_is_rejected():
    fields = ["0"] * 32
    fields[17] = "not-a-number"
    with pytest.raises(RecordingFormatError):
        parse_rows(["\t".join(fields)], config.CHANNELS)


def test_recording_without_rows_is_rejected(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("Frame\tTime\n", encoding="utf-8")

    with pytest.raises(RecordingFormatError):
        load_recording(path)


def test_missing_recording(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_recording(tmp_path / "missing.txt")


def test_custom_channel_layout():
    frames, arrays = parse_rows(["7\t0.1\t1\t3\t2"], {"probe": 2}, axis_order=(0, 1, 2))

    assert frames == [7]
    np.testing.assert_array_equal(arrays["probe"], [[1.0, 3.0, 2.0]])


def test_recording_summary(recording_factory):
    series = load_recording(recording_factory("rec.txt", 3))

    summary = recording_summary(series)

    assert summary["samples"] == 3
    assert summary["channels"] == len(config.CHANNELS)
    assert summary["extents"]["head_top_left"]["max"] == (2.0, 4.0, 6.0)
