"""
Motion Capture Recording Loader
===============================

Reads tab-separated marker recordings into TrajectorySeries.

File layout:
    line 1            - column headers (skipped)
    following lines   - frame, time, then one X/Z/Y triple per marker (mm)
    first empty line  - end of data

Rows are stored in file order, so sample 0 is the first data row whether
the frame column counts from 0 or from 1.

Usage:
    python -m tools.record <recording> [<recording> ...]   # Print summaries
"""

import argparse
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

# Get project root (parent of tools/)
PROJECT_ROOT = Path(__file__).parent.parent

from config import replay as config
from trajectory import RecordingFormatError, TrajectorySeries


def resolve_recording(name) -> Path:
    """Path of a recording, falling back to the project recordings/ directory."""
    path = Path(name)
    if path.exists():
        return path
    candidate = PROJECT_ROOT / "recordings" / path
    if candidate.exists():
        return candidate
    raise FileNotFoundError(f"Recording not found: {name}")


def parse_rows(lines, channels: Mapping[str, int], axis_order: Sequence[int] = config.AXIS_ORDER,
               separator: str = config.RECORDING["separator"],
               source: str = "<recording>") -> Tuple[List[int], Dict[str, np.ndarray]]:
    """
    Decode data rows into per-channel (N, 3) arrays.
    
    Args:
        lines: Iterable of data lines (headers already skipped)
        channels: Channel name -> first column of its triple
        axis_order: Column offset within a triple for scene x, y and z
        separator: Field separator
        source: Name used in error messages
    
    Returns:
        (frame numbers, channel arrays)
    """
    min_columns = max(channels.values()) + max(axis_order) + 1
    frames = []
    values: Dict[str, List[Tuple[float, float, float]]] = {name: [] for name in channels}
    
    for line_no, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if line == "":
            break
        
        fields = line.split(separator)
        if len(fields) < min_columns:
            raise RecordingFormatError(
                f"{source}: row {line_no} has {len(fields)} columns, expected at least {min_columns}"
            )
        
        try:
            frames.append(int(fields[0]))
            for name, column in channels.items():
                values[name].append(tuple(float(fields[column + offset]) for offset in axis_order))
        except ValueError as e:
            raise RecordingFormatError(f"{source}: row {line_no}: {e}") from e
    
    arrays = {name: np.array(rows, dtype=np.float64).reshape(-1, 3) for name, rows in values.items()}
    return frames, arrays


def load_recording(path, channels: Optional[Mapping[str, int]] = None,
                   axis_order: Sequence[int] = config.AXIS_ORDER,
                   separator: str = config.RECORDING["separator"],
                   header_lines: int = config.RECORDING["header_lines"]) -> TrajectorySeries:
    """
    Load one recording file.
    
    The series key is the path exactly as given, so per-recording offsets can
    be looked up from it later.
    
    Raises:
        FileNotFoundError: the recording does not exist
        RecordingFormatError: the file holds no rows or a row is malformed
    """
    path = resolve_recording(path)
    channels = config.CHANNELS if channels is None else channels
    
    with open(path, "r", encoding="utf-8") as f:
        for _ in range(header_lines):
            f.readline()
        frames, arrays = parse_rows(f, channels, axis_order, separator, source=str(path))
    
    if not frames:
        raise RecordingFormatError(f"{path}: no data rows")
    
    print(f"[Loader] {path.name}: {len(frames)} samples, {len(channels)} markers "
          f"(frames {frames[0]}-{frames[-1]})")
    return TrajectorySeries(str(path), arrays)


def load_recordings(paths: Sequence, **kwargs) -> List[TrajectorySeries]:
    return [load_recording(path, **kwargs) for path in paths]


def recording_summary(series: TrajectorySeries) -> dict:
    """Sample counts and per-channel extents of a series, in millimetres."""
    extents = {}
    for name, samples in series.items():
        extents[name] = {
            "min": tuple(float(v) for v in samples.min(axis=0)),
            "max": tuple(float(v) for v in samples.max(axis=0)),
        }
    return {
        "key": series.key,
        "samples": len(series),
        "original_samples": series.original_length,
        "channels": len(series.channel_names),
        "extents": extents,
    }


def main():
    parser = argparse.ArgumentParser(description="Marker recording summary")
    parser.add_argument("recordings", nargs="+", help="Recording files (.txt/.tsv)")
    args = parser.parse_args()
    
    for series in load_recordings(args.recordings):
        summary = recording_summary(series)
        print(f"\n{'=' * 60}")
        print(f"  {summary['key']}")
        print(f"{'=' * 60}")
        print(f"  Samples:  {summary['samples']}")
        print(f"  Markers:  {summary['channels']}")
        for name, extent in summary["extents"].items():
            lo = ", ".join(f"{v:8.1f}" for v in extent["min"])
            hi = ", ".join(f"{v:8.1f}" for v in extent["max"])
            print(f"    {name:<18} [{lo}] .. [{hi}]")


if __name__ == "__main__":
    main()
