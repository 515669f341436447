"""Bounded path trail around the current playback position."""

from dataclasses import dataclass

import numpy as np

from .series import TrajectorySeries


DEFAULT_CHANNEL = "cath_tip"


@dataclass(frozen=True)
class TraceWindow:
    """
    Contiguous slice of one channel, ordered from earliest to latest.
    
    Attributes:
        points: (past_count + future_count, 3) positions
        start: Series index of points[0]
        past_count: Samples strictly before the current index
        future_count: Samples from the current index onwards (current included)
    """
    points: np.ndarray
    start: int
    past_count: int
    future_count: int
    
    def __len__(self) -> int:
        return self.past_count + self.future_count
    
    @property
    def stop(self) -> int:
        return self.start + len(self)


def trace_window(series: TrajectorySeries, current_index: int, desired_size: int,
                 channel: str = DEFAULT_CHANNEL) -> TraceWindow:
    """
    Extract up to desired_size samples of channel straddling current_index.
    
    Half of the window looks back, half looks forward (the current sample
    counts towards the forward half). Both halves are cut short at the
    series boundaries, so the slice never leaves [0, len(series)).
    """
    length = len(series)
    current_index = max(0, min(length, current_index))
    half = max(0, desired_size) // 2
    
    past_count = min(half, current_index)
    future_count = min(half, length - current_index)
    start = current_index - past_count
    
    points = series[channel][start:current_index + future_count]
    return TraceWindow(points, start, past_count, future_count)
