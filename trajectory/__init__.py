"""Lockstep replay of recorded marker trajectories."""

from .errors import (
    ChannelLengthMismatch,
    DuplicateStreamKey,
    EmptyStreamSet,
    GridMismatch,
    InvalidLength,
    RecordingFormatError,
    ReplayError,
)
from .series import TrajectorySeries
from .resample import resample
from .sync import SynchronizationSet, synchronize
from .transport import (
    Direction,
    PlaybackControls,
    SeriesCursor,
    TickGate,
    Transport,
    TransportState,
    advance,
)
from .trace import TraceWindow, trace_window
from .density import DensityGrid

__all__ = [
    "ChannelLengthMismatch",
    "DensityGrid",
    "Direction",
    "DuplicateStreamKey",
    "EmptyStreamSet",
    "GridMismatch",
    "InvalidLength",
    "PlaybackControls",
    "RecordingFormatError",
    "ReplayError",
    "SeriesCursor",
    "SynchronizationSet",
    "TickGate",
    "TraceWindow",
    "Transport",
    "TransportState",
    "TrajectorySeries",
    "advance",
    "resample",
    "synchronize",
    "trace_window",
]
