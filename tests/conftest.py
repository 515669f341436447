from __future__ import annotations

import numpy as np
import pytest

from config import replay as config
from trajectory import TrajectorySeries


def make_series(key: str, length: int, channels=("cath_tip", "head_brow"), step=10.0):
    """Series whose channel k moves along x by `step` mm per sample, offset by k on y."""
    t = np.arange(length, dtype=np.float64)
    data = {}
    for k, name in enumerate(channels):
        data[name] = np.stack([t * step, np.full(length, float(k)), np.zeros(length)], axis=1)
    return TrajectorySeries(key, data)


def write_recording(path, positions: dict, first_frame: int = 0, header: bool = True):
    """
    Write a recording in the on-disk layout: frame, time, then X, Z, Y per
    marker at the configured columns.
    """
    n = len(next(iter(positions.values())))
    width = max(config.CHANNELS.values()) + 3
    lines = []
    if header:
        lines.append("\t".join(["Frame", "Time"] + [f"c{i}" for i in range(2, width)]))
    for i in range(n):
        fields = ["0.0"] * width
        fields[0] = str(first_frame + i)
        fields[1] = f"{i / 100.0:.2f}"
        for name, column in config.CHANNELS.items():
            x, y, z = positions.get(name, np.zeros((n, 3)))[i]
            fields[column] = repr(float(x))
            fields[column + 1] = repr(float(z))
            fields[column + 2] = repr(float(y))
        lines.append("\t".join(fields))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def series_factory():
    return make_series


@pytest.fixture
def recording_factory(tmp_path):
    def factory(name: str, length: int, first_frame: int = 0):
        t = np.arange(length, dtype=np.float64)
        positions = {}
        for k, channel in enumerate(config.CHANNELS):
            positions[channel] = np.stack([t + k, 2 * t + k, 3 * t + k], axis=1)
        return write_recording(tmp_path / name, positions, first_frame=first_frame)
    return factory
