"""Playback session: synchronized recordings driven by one transport."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

from config import replay as config
from trajectory import (
    DensityGrid,
    SynchronizationSet,
    TickGate,
    TraceWindow,
    TrajectorySeries,
    Transport,
    trace_window,
)
from trajectory.pose import barycenter, euler_matrix, marker_frame


def skull_offset(key: str) -> dict:
    """Skull model placement for a recording; zero offset when unknown."""
    offset = config.SKULL_OFFSETS.get(Path(key).name)
    if offset is None:
        return {"position": (0.0, 0.0, 0.0), "rotation": (0.0, 0.0, 0.0)}
    return offset


@dataclass
class SeriesView:
    """What the renderer needs to draw one recording at the current tick (scene units)."""
    key: str
    index: int
    has_more_data: bool
    markers: Dict[str, np.ndarray]
    trace: TraceWindow
    trace_points: np.ndarray
    
    def group_center(self, group: str) -> np.ndarray:
        names = [name for name in config.MARKER_GROUPS[group] if name in self.markers]
        return barycenter(self.markers, names)
    
    def outline(self, group: str) -> List[np.ndarray]:
        return [self.markers[name] for name in config.OUTLINES[group]]
    
    def catheter_frame(self):
        return marker_frame(self.markers["cath_top_left"], self.markers["cath_top_right"],
                            self.markers["cath_bottom_right"])
    
    def skull_frame(self):
        """Origin and axes of the skull model placed by the recording's offset."""
        offset = skull_offset(self.key)
        rotation = euler_matrix(offset["rotation"])
        origin = self.group_center("head") + np.asarray(offset["position"]) * config.MARKERS["skull_model_scale"]
        return origin, (rotation[:, 0], rotation[:, 1], rotation[:, 2])


class ReplaySession:
    """
    Owns the synchronized recordings, the transport and its tick gate.
    
    update() is called once per rendered frame with the frame time; it
    commits at most one transport tick and lets a pending restart settle.
    views() then reports, for every recording, the sample at its current
    index and the path trail around it.
    """
    
    def __init__(self, streams: Sequence[TrajectorySeries], warp: bool = config.PLAYBACK["warp"],
                 speed: float = config.PLAYBACK["initial_speed"],
                 max_speed: float = config.PLAYBACK["max_speed"],
                 tick_interval: float = config.PLAYBACK["tick_interval"],
                 restart_delay: float = config.PLAYBACK["restart_delay"],
                 trace_size: int = config.TRACE["size"],
                 trace_channel: str = config.TRACE["channel"],
                 scale: float = config.RECORDING["scale"]):
        self.sync_set = SynchronizationSet.build(streams, warp)
        self.gate = TickGate(tick_interval)
        self.transport = Transport.for_sync_set(
            self.sync_set,
            speed=speed,
            max_speed=max_speed,
            resume_speed=config.PLAYBACK["resume_speed"],
            restart_delay=restart_delay,
            on_restart=self._on_restart,
        )
        self.trace_size = trace_size
        self.trace_channel = trace_channel
        self.scale = scale
        self.restarts = 0
        
        mode = "warped" if warp else "independent"
        print(f"[Replay] {len(self.sync_set)} recordings, {self.sync_set.common_length} frames ({mode})")
    
    def _on_restart(self):
        self.gate.reset()
        self.restarts += 1
    
    @property
    def common_length(self) -> int:
        return self.sync_set.common_length
    
    def update(self, dt: float) -> bool:
        """Advance by dt seconds of frame time. Returns True if a tick was committed."""
        # The settle delay counts from the frame after the one that ended playback
        pending = self.transport.restart_pending
        committed = False
        if self.gate.update(dt, self.transport.controls):
            committed = self.transport.tick()
        if pending:
            self.transport.elapse(dt)
        return committed
    
    def resize_trace(self, delta: int):
        self.trace_size = max(config.TRACE["min_size"],
                              min(config.TRACE["max_size"], self.trace_size + delta))
    
    def views(self) -> List[SeriesView]:
        views = []
        for i, series in enumerate(self.sync_set):
            cursor = self.transport.cursor_for(i)
            window = trace_window(series, cursor.index, self.trace_size, self.trace_channel)
            markers = {name: position * self.scale
                       for name, position in series.sample(cursor.current).items()}
            views.append(SeriesView(
                key=series.key,
                index=cursor.current,
                has_more_data=cursor.has_more_data,
                markers=markers,
                trace=window,
                trace_points=window.points * self.scale,
            ))
        return views
    
    def build_density(self, channel: Optional[str] = None) -> DensityGrid:
        """
        Voxel density of channel's full path, one grid per recording,
        summed and averaged over the recordings.
        """
        channel = self.trace_channel if channel is None else channel
        total = self._density_grid()
        for series in self.sync_set:
            grid = self._density_grid()
            grid.accumulate(series[channel] * self.scale, config.DENSITY["ks"])
            total.add(grid)
        total.normalize(len(self.sync_set))
        return total
    
    @staticmethod
    def _density_grid() -> DensityGrid:
        return DensityGrid(config.DENSITY["n_per_dim"], config.DENSITY["length_per_dim"],
                           config.DENSITY["origin"])
