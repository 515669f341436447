"""Per-recording container of marker channel positions."""

from typing import Dict, Iterator, Mapping, Optional

import numpy as np

from .errors import ChannelLengthMismatch


class TrajectorySeries:
    """
    One recorded stream: a mapping of channel name to an (N, 3) array of
    positions in millimetres.

    Every channel holds the same number of samples, so index i refers to the
    same time step on all channels. The arrays are copied and frozen on
    construction; a series is never mutated afterwards and can be shared
    freely with the renderer.

    Attributes:
        key: Stable identifier of the recording (usually its file path)
        original_length: Sample count of the recording before any resampling
    """
    
    def __init__(self, key: str, channels: Mapping[str, np.ndarray],
                 original_length: Optional[int] = None):
        self.key = key
        self._channels: Dict[str, np.ndarray] = {}
        
        length = None
        for name, samples in channels.items():
            array = np.array(samples, dtype=np.float64)
            if array.ndim != 2 or array.shape[1] != 3:
                raise ChannelLengthMismatch(
                    f"{key}: channel '{name}' must be an (N, 3) array, got shape {array.shape}"
                )
            if length is None:
                length = array.shape[0]
            elif array.shape[0] != length:
                raise ChannelLengthMismatch(
                    f"{key}: channel '{name}' has {array.shape[0]} samples, expected {length}"
                )
            array.setflags(write=False)
            self._channels[name] = array
        
        if not self._channels:
            raise ChannelLengthMismatch(f"{key}: series has no channels")

        self._length = length
        self.original_length = length if original_length is None else original_length
    
    def __len__(self) -> int:
        return self._length
    
    def __getitem__(self, channel: str) -> np.ndarray:
        return self._channels[channel]
    
    def __contains__(self, channel: str) -> bool:
        return channel in self._channels
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._channels)
    
    def __repr__(self) -> str:
        return (f"TrajectorySeries(key={self.key!r}, length={self._length}, "
                f"channels={len(self._channels)})")
    
    @property
    def channel_names(self) -> tuple:
        return tuple(self._channels)
    
    def items(self):
        return self._channels.items()
    
    def sample(self, index: int) -> Dict[str, np.ndarray]:
        """Positions of every channel at one index, clamped into the series."""
        index = max(0, min(self._length - 1, index))
        return {name: samples[index] for name, samples in self._channels.items()}
    
    def last(self) -> Dict[str, np.ndarray]:
        return self.sample(self._length - 1)
    
    def allclose(self, other: "TrajectorySeries", atol: float = 1e-9) -> bool:
        """Whether both series hold the same channels with matching samples."""
        if len(self) != len(other) or self.channel_names != other.channel_names:
            return False
        return all(np.allclose(self[name], other[name], rtol=0.0, atol=atol)
                   for name in self.channel_names)
