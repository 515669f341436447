"""Playback transport: the shared cursor over a synchronized set of recordings."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence


class Direction(Enum):
    FORWARD = "forward"
    REWIND = "rewind"


class TransportState(Enum):
    PLAYING_FORWARD = "playing_forward"
    PLAYING_REWIND = "playing_rewind"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass(frozen=True)
class PlaybackControls:
    """User-facing playback flags, passed explicitly to every tick."""
    direction: Direction = Direction.FORWARD
    speed: float = 1.0
    paused: bool = False
    
    @property
    def halted(self) -> bool:
        return self.paused or self.speed <= 0.0


@dataclass(frozen=True)
class SeriesCursor:
    """
    Playback position inside one series.
    
    index may equal length once the series is exhausted; current is the
    index clamped to the last readable sample.
    """
    length: int
    index: int = 0
    exhausted: bool = False
    
    @property
    def current(self) -> int:
        return max(0, min(self.index, self.length - 1))
    
    @property
    def has_more_data(self) -> bool:
        return not self.exhausted


def step_cursor(cursor: SeriesCursor, direction: Direction) -> SeriesCursor:
    """Move one cursor by a single sample, clamping instead of failing."""
    if cursor.exhausted:
        return cursor
    
    index = cursor.index
    if direction is Direction.FORWARD:
        index += 1
    elif index > 0:
        index -= 1
    
    if index >= cursor.length:
        return SeriesCursor(cursor.length, cursor.length, exhausted=True)
    return SeriesCursor(cursor.length, index)


def advance(cursors: Sequence[SeriesCursor], controls: PlaybackControls) -> List[SeriesCursor]:
    """
    Commit one simulation tick.
    
    Pure function of the cursors and the controls: nothing moves while the
    controls are paused or at zero speed, otherwise every cursor steps once in
    the controls' direction. Exhausted cursors stay where they are.
    """
    if controls.halted:
        return list(cursors)
    return [step_cursor(cursor, controls.direction) for cursor in cursors]


def resolve_direction(forward: bool, rewind: bool, current: Direction) -> Direction:
    """Collapse the two input flags into one direction; forward wins a tie."""
    if forward:
        return Direction.FORWARD
    if rewind:
        return Direction.REWIND
    return current


class TickGate:
    """
    Decides when the next simulation tick is due.
    
    Frame time accumulates on every update; a tick is committed once
    interval / speed seconds have passed and the timer then starts over, so
    higher speeds shorten the wait without changing the step size. At most
    one tick is committed per update.
    """
    
    def __init__(self, interval: float):
        self.interval = interval
        self.timer = 0.0
    
    def update(self, dt: float, controls: PlaybackControls) -> bool:
        """Accumulate dt seconds; True when a tick should be committed now."""
        self.timer += dt
        if controls.halted:
            return False
        if self.timer >= self.interval / controls.speed:
            self.timer = 0.0
            return True
        return False
    
    def reset(self):
        self.timer = 0.0


class Transport:
    """
    Shared playback cursor over N recordings.
    
    In warp mode every series has the common length, so a single global
    cursor addresses all of them. Without warping each series keeps its own
    cursor and runs out on its own; the session ends once every series is
    exhausted, which is when the longest one reaches the common length.
    
    Reaching the end schedules a restart after restart_delay seconds of
    elapsed time (see elapse). The restart rewinds every cursor to 0, clears
    the exhausted flags, plays forward again and notifies on_restart.
    """
    
    def __init__(self, lengths: Sequence[int], common_length: Optional[int] = None,
                 warp: bool = True, speed: float = 1.0, max_speed: float = 50.0,
                 resume_speed: float = 0.5, restart_delay: float = 1.0,
                 on_restart: Optional[Callable[[], None]] = None):
        self.lengths = list(lengths)
        self.common_length = max(self.lengths) if common_length is None else common_length
        self.warp = warp
        self.max_speed = max_speed
        self.resume_speed = resume_speed
        self.restart_delay = restart_delay
        self.on_restart = on_restart
        
        speed = max(0.0, min(max_speed, speed))
        self.controls = PlaybackControls(speed=speed, paused=speed <= 0.0)
        self.restart_pending = False
        self._restart_timer = 0.0
        self._reset_cursors()
    
    @classmethod
    def for_sync_set(cls, sync_set, **kwargs) -> "Transport":
        return cls(sync_set.lengths, sync_set.common_length, warp=sync_set.warp, **kwargs)
    
    def _reset_cursors(self):
        self.global_cursor = SeriesCursor(self.common_length)
        if self.warp:
            self.cursors = []
        else:
            self.cursors = [SeriesCursor(length) for length in self.lengths]
    
    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    
    @property
    def index(self) -> int:
        """Global cursor position, clamped to [0, common_length)."""
        return self.global_cursor.current
    
    @property
    def position(self) -> int:
        """Raw global position; equals common_length once playback ended."""
        return self.global_cursor.index
    
    @property
    def direction(self) -> Direction:
        return self.controls.direction
    
    @property
    def speed(self) -> float:
        return self.controls.speed
    
    @property
    def paused(self) -> bool:
        return self.controls.paused
    
    @property
    def ended(self) -> bool:
        if self.warp:
            return self.global_cursor.exhausted
        return all(cursor.exhausted for cursor in self.cursors)
    
    @property
    def has_more_data(self) -> bool:
        return not self.ended
    
    @property
    def state(self) -> TransportState:
        if self.ended:
            return TransportState.ENDED
        if self.controls.paused:
            return TransportState.PAUSED
        if self.controls.direction is Direction.FORWARD:
            return TransportState.PLAYING_FORWARD
        return TransportState.PLAYING_REWIND
    
    def cursor_for(self, series_number: int) -> SeriesCursor:
        """Cursor of the n-th managed series (the global cursor in warp mode)."""
        if self.warp:
            return self.global_cursor
        return self.cursors[series_number]
    
    def index_for(self, series_number: int) -> int:
        """Sample index to display for the n-th series."""
        return self.cursor_for(series_number).current
    
    # ------------------------------------------------------------------
    # Ticks and time
    # ------------------------------------------------------------------
    
    def tick(self) -> bool:
        """
        Commit one simulation step. Returns False when nothing moved because
        playback is paused, halted at zero speed or has ended.
        """
        if self.ended or self.controls.halted:
            return False
        
        self.global_cursor = advance([self.global_cursor], self.controls)[0]
        if not self.warp:
            self.cursors = advance(self.cursors, self.controls)
        
        if self.ended:
            print(f"[Transport] End of data at frame {self.common_length}, "
                  f"restarting in {self.restart_delay:.1f}s")
            self._schedule_restart()
        return True
    
    def elapse(self, dt: float) -> bool:
        """
        Let dt seconds of wall time pass for a pending restart.
        Returns True when the restart happened during this call.
        """
        if not self.restart_pending:
            return False
        self._restart_timer -= dt
        if self._restart_timer > 0.0:
            return False
        self.restart()
        return True
    
    def _schedule_restart(self):
        if not self.restart_pending:
            self.restart_pending = True
            self._restart_timer = self.restart_delay
    
    def restart(self):
        """Rewind every series to the first sample and play forward."""
        print("[Transport] Restart")
        self.restart_pending = False
        self._restart_timer = 0.0
        self._reset_cursors()
        self.controls = replace(self.controls, direction=Direction.FORWARD)
        if self.on_restart is not None:
            self.on_restart()
    
    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    
    def set_direction(self, forward: bool = True, rewind: bool = False):
        direction = resolve_direction(forward, rewind, self.controls.direction)
        self.controls = replace(self.controls, direction=direction)
    
    def reverse(self):
        if self.controls.direction is Direction.FORWARD:
            self.set_direction(forward=False, rewind=True)
        else:
            self.set_direction(forward=True, rewind=False)
    
    def set_speed(self, speed: float):
        """Set the speed, clamped to [0, max_speed]; zero speed pauses."""
        speed = max(0.0, min(self.max_speed, speed))
        paused = self.controls.paused
        if speed <= 0.0:
            paused = True
        elif speed > self.controls.speed:
            paused = False
        self.controls = replace(self.controls, speed=speed, paused=paused)
    
    def adjust_speed(self, delta: float):
        self.set_speed(self.controls.speed + delta)
    
    def toggle_pause(self):
        if self.controls.paused:
            speed = self.controls.speed if self.controls.speed > 0.0 else self.resume_speed
            self.controls = replace(self.controls, speed=speed, paused=False)
        else:
            self.controls = replace(self.controls, paused=True)
    
    def request_restart(self):
        """Restart once the settle delay has elapsed, as at the end of data."""
        self._schedule_restart()
