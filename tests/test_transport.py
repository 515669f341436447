"""
Tests for the playback transport state machine.
"""

from __future__ import annotations

import pytest

from trajectory import (
    Direction,
    PlaybackControls,
    SeriesCursor,
    TickGate,
    Transport,
    TransportState,
    advance,
)


def test_forward_to_end_then_restart_after_settle_delay():
    restarts = []
    transport = Transport([10, 10], restart_delay=1.0, on_restart=lambda: restarts.append(True))

    for _ in range(9):
        transport.tick()
        assert transport.state is TransportState.PLAYING_FORWARD
    transport.tick()

    assert transport.state is TransportState.ENDED
    assert transport.position == 10
    assert transport.index == 9
    assert not transport.has_more_data
    assert transport.tick() is False

    assert transport.elapse(0.5) is False
    assert transport.state is TransportState.ENDED
    assert transport.elapse(0.5) is True

    assert restarts == [True]
    assert transport.state is TransportState.PLAYING_FORWARD
    assert transport.index == 0
    assert transport.has_more_data


def test_rewind_clamps_at_zero():
    transport = Transport([5])
    transport.tick()
    transport.tick()
    transport.set_direction(forward=False, rewind=True)

    for _ in range(5):
        transport.tick()

    assert transport.index == 0
    assert transport.state is TransportState.PLAYING_REWIND


def test_forward_wins_when_both_directions_requested():
    transport = Transport([5])
    transport.set_direction(forward=False, rewind=True)

    transport.set_direction(forward=True, rewind=True)

    assert transport.direction is Direction.FORWARD


def test_reverse_takes_effect_on_next_tick():
    transport = Transport([10])
    transport.tick()
    transport.tick()

    transport.reverse()
    assert transport.index == 2
    transport.tick()

    assert transport.index == 1
    transport.reverse()
    transport.tick()
    assert transport.index == 2


def test_paused_transport_does_not_move_but_accepts_commands():
    transport = Transport([10])
    transport.toggle_pause()

    assert transport.tick() is False
    transport.set_direction(forward=False, rewind=True)
    transport.adjust_speed(2.0)

    assert transport.state is TransportState.PLAYING_REWIND  # speeding up resumes
    transport.toggle_pause()
    transport.adjust_speed(-0.5)
    assert transport.state is TransportState.PAUSED
    assert transport.speed == pytest.approx(2.5)
    assert transport.index == 0


def test_speed_is_clamped_and_zero_speed_pauses():
    transport = Transport([10], speed=1.0, max_speed=50.0)

    transport.adjust_speed(100.0)
    assert transport.speed == 50.0

    transport.adjust_speed(-80.0)
    assert transport.speed == 0.0
    assert transport.paused
    assert transport.state is TransportState.PAUSED
    assert transport.tick() is False


def test_unpausing_from_zero_speed_uses_resume_speed():
    transport = Transport([10], resume_speed=0.5)
    transport.set_speed(0.0)

    transport.toggle_pause()

    assert not transport.paused
    assert transport.speed == 0.5


def test_requested_restart_waits_for_settle_delay():
    transport = Transport([10], restart_delay=1.0)
    for _ in range(4):
        transport.tick()

    transport.request_restart()
    transport.tick()
    assert transport.index == 5
    transport.elapse(1.0)

    assert transport.index == 0
    assert not transport.restart_pending


def test_restart_resets_direction_to_forward():
    transport = Transport([3], restart_delay=0.0)
    transport.tick()
    transport.set_direction(forward=False, rewind=True)

    transport.request_restart()
    transport.elapse(0.0)

    assert transport.state is TransportState.PLAYING_FORWARD


def test_independent_series_exhaust_separately():
    transport = Transport([3, 5], warp=False)

    for _ in range(3):
        transport.tick()

    assert transport.cursor_for(0).exhausted
    assert transport.index_for(0) == 2
    assert transport.cursor_for(1).has_more_data
    assert transport.state is TransportState.PLAYING_FORWARD

    transport.tick()
    transport.tick()

    assert transport.cursor_for(1).exhausted
    assert transport.state is TransportState.ENDED


def test_exhausted_series_stays_put_when_rewinding():
    transport = Transport([2, 6], warp=False)
    for _ in range(3):
        transport.tick()

    transport.set_direction(forward=False, rewind=True)
    transport.tick()

    assert transport.cursor_for(0).exhausted
    assert transport.cursor_for(0).index == 2
    assert transport.index_for(1) == 2


def test_restart_clears_exhaustion_in_independent_mode():
    transport = Transport([2, 4], warp=False, restart_delay=0.0)
    for _ in range(4):
        transport.tick()
    assert transport.state is TransportState.ENDED

    transport.elapse(0.0)

    assert [transport.index_for(i) for i in range(2)] == [0, 0]
    assert all(cursor.has_more_data for cursor in transport.cursors)


def test_warp_mode_shares_one_cursor():
    transport = Transport([8, 8, 8])
    transport.tick()

    assert transport.cursor_for(0) is transport.cursor_for(2)
    assert transport.index_for(1) == 1


def test_advance_is_pure():
    cursors = [SeriesCursor(4, 1), SeriesCursor(2, 1)]

    moved = advance(cursors, PlaybackControls(direction=Direction.FORWARD))

    assert cursors == [SeriesCursor(4, 1), SeriesCursor(2, 1)]
    assert moved == [SeriesCursor(4, 2), SeriesCursor(2, 2, exhausted=True)]


def test_advance_does_nothing_when_halted():
    cursors = [SeriesCursor(4, 1)]

    assert advance(cursors, PlaybackControls(paused=True)) == cursors
    assert advance(cursors, PlaybackControls(speed=0.0)) == cursors


def test_tick_gate_interval_scales_with_speed():
    gate = TickGate(interval=1.0)
    normal = PlaybackControls(speed=1.0)
    fast = PlaybackControls(speed=4.0)

    assert gate.update(0.5, normal) is False
    assert gate.update(0.5, normal) is True
    assert gate.update(0.25, fast) is True
    assert gate.update(0.1, fast) is False


def test_tick_gate_holds_while_paused():
    gate = TickGate(interval=0.1)

    assert gate.update(1.0, PlaybackControls(paused=True)) is False
    assert gate.update(0.0, PlaybackControls()) is True
