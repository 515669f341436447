"""Normalization of several recordings onto one shared timeline."""

from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import DuplicateStreamKey, EmptyStreamSet, InvalidLength
from .resample import resample
from .series import TrajectorySeries


class SynchronizationSet:
    """
    Every loaded recording, keyed by its series key, sharing one common length.
    
    The common length is the longest native recording. With warping enabled
    every shorter (or longer) series is resampled to it, so one global index
    addresses the same relative moment in every recording. Without warping
    the series keep their native lengths and the common length only bounds
    the transport's global cursor.
    
    Built once at load time; never modified afterwards.
    """
    
    def __init__(self, series: Sequence[TrajectorySeries], common_length: int, warp: bool):
        self._series: Dict[str, TrajectorySeries] = {s.key: s for s in series}
        self.common_length = common_length
        self.warp = warp
    
    @classmethod
    def build(cls, streams: Sequence[TrajectorySeries], warp: bool = True) -> "SynchronizationSet":
        """
        Validate the streams and resample them onto the common length.
        
        Raises:
            EmptyStreamSet: no streams were given
            DuplicateStreamKey: two streams share a key
            InvalidLength: a stream has no samples
        """
        streams = list(streams)
        if not streams:
            raise EmptyStreamSet("at least one recording is required")
        
        seen = set()
        for stream in streams:
            if stream.key in seen:
                raise DuplicateStreamKey(f"recording '{stream.key}' was given twice")
            seen.add(stream.key)
            if len(stream) < 1:
                raise InvalidLength(f"{stream.key}: recording has no samples")
        
        common_length = max(len(stream) for stream in streams)
        
        if warp:
            series = [stream if len(stream) == common_length else resample(stream, common_length)
                      for stream in streams]
        else:
            series = streams
        
        return cls(series, common_length, warp)
    
    def __len__(self) -> int:
        return len(self._series)
    
    def __iter__(self) -> Iterator[TrajectorySeries]:
        return iter(self._series.values())
    
    def __getitem__(self, key: str) -> TrajectorySeries:
        return self._series[key]
    
    @property
    def keys(self) -> List[str]:
        return list(self._series)
    
    @property
    def lengths(self) -> List[int]:
        """Playback length of every series, in insertion order."""
        return [len(s) for s in self._series.values()]


def synchronize(streams: Sequence[TrajectorySeries],
                warp: bool = True) -> Tuple[int, List[TrajectorySeries]]:
    """Functional form of SynchronizationSet.build: (common_length, series)."""
    sync_set = SynchronizationSet.build(streams, warp)
    return sync_set.common_length, list(sync_set)
