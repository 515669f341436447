from __future__ import annotations

from config import replay as config


def test_camera_orbit_stays_in_front_of_its_target():
    assert 0.0 < config.CAMERA["min_radius"] <= config.CAMERA["initial_radius"]
    assert config.CAMERA["initial_radius"] <= config.CAMERA["max_radius"]


def test_outlines_only_name_known_channels():
    for corners in config.OUTLINES.values():
        assert len(corners) == 4
        assert set(corners) <= set(config.CHANNELS)
