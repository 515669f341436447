"""
Marker Trajectory Playback
==========================

Replays one or more motion capture recordings in lockstep.

Usage:
    python -m tools.playback <recording> [<recording> ...]      # Playback with defaults
    python -m tools.playback rec1.txt rec2.txt --speed 2.0      # 2x playback speed
    python -m tools.playback rec1.txt --trace 400               # Longer path trail
    python -m tools.playback rec1.txt rec2.txt --no-warp        # Native lengths, independent ends
    python -m tools.playback rec1.txt rec2.txt --info           # Print summary, no window

Controls during playback:
    RIGHT/LEFT  - Play forward / rewind
    UP/DOWN     - Adjust playback speed (zero speed pauses)
    SPACE       - Pause/Resume
    R           - Restart from the beginning
    [ / ]       - Shorter / longer path trail
    T           - Toggle head marker transparency
    V           - Toggle path density voxels
    H           - Toggle help line
    Mouse drag  - Rotate camera
    Scroll      - Zoom in/out
    WASD        - Rotate camera
    Q/E         - Zoom in/out
    ESC         - Quit
"""

import argparse
import sys

from config import replay as config
from tools.record import load_recordings, recording_summary
from trajectory import ReplayError


def print_info(session):
    """Print the synchronized set without opening a window."""
    sync_set = session.sync_set
    print(f"\n{'=' * 60}")
    print(f"  REPLAY: {len(sync_set)} recordings")
    print(f"{'=' * 60}")
    print(f"  Common length: {sync_set.common_length} frames")
    print(f"  Warp:          {'Yes' if sync_set.warp else 'No'}")
    for series in sync_set:
        summary = recording_summary(series)
        print(f"  {summary['key']}: {summary['original_samples']} -> {summary['samples']} samples")
    
    duration = sync_set.common_length * config.PLAYBACK["tick_interval"]
    print(f"  Duration:      {duration:.1f}s at 1.0x")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Synchronized marker trajectory playback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tools.playback catheter003.txt catheter005.txt
  python -m tools.playback catheter003.txt --speed 4 --trace 500
  python -m tools.playback catheter003.txt catheter005.txt --no-warp
        """
    )
    parser.add_argument("recordings", nargs="*", help="Recording files")
    parser.add_argument("--speed", type=float, default=config.PLAYBACK["initial_speed"],
                        help="Initial playback speed multiplier (default: 1.0)")
    parser.add_argument("--max-speed", type=float, default=config.PLAYBACK["max_speed"],
                        help="Maximum playback speed (default: 50.0)")
    parser.add_argument("--trace", type=int, default=config.TRACE["size"],
                        help="Path trail size in samples (default: 200)")
    parser.add_argument("--no-warp", action="store_true",
                        help="Keep native recording lengths instead of resampling to the longest")
    parser.add_argument("--fps", type=int, default=60,
                        help="Render FPS (default: 60)")
    parser.add_argument("--zoom", type=float, default=config.CAMERA["initial_radius"],
                        help="Camera distance from the head markers")
    parser.add_argument("--camera-angle", type=float, default=config.CAMERA["initial_phi"],
                        help="Camera vertical angle (0=horizon, 90=top-down)")
    parser.add_argument("--camera-theta", type=float, default=config.CAMERA["initial_theta"],
                        help="Camera horizontal starting angle in degrees")
    parser.add_argument("--info", action="store_true",
                        help="Print the synchronized recordings and exit")
    
    args = parser.parse_args(argv)
    
    if not args.recordings:
        print("[Replay] Error: at least one recording is required")
        print("[Replay] Usage: python -m tools.playback <recording> [<recording> ...] [options]")
        return 1
    
    if args.speed < 0.0 or args.speed > args.max_speed:
        print(f"[Replay] Warning: Speed {args.speed} out of range, clamping to 0-{args.max_speed}")
        args.speed = max(0.0, min(args.max_speed, args.speed))
    
    # Imported late so --info works without a display
    from core.session import ReplaySession
    
    try:
        streams = load_recordings(args.recordings)
        session = ReplaySession(
            streams,
            warp=not args.no_warp,
            speed=args.speed,
            max_speed=args.max_speed,
            trace_size=args.trace,
        )
    except (ReplayError, FileNotFoundError) as e:
        print(f"[Replay] Error: {e}")
        return 1
    
    if args.info:
        print_info(session)
        return 0
    
    from core.application import Application
    
    app = Application(
        session,
        fps=args.fps,
        camera_radius=args.zoom,
        camera_theta=args.camera_theta,
        camera_phi=args.camera_angle,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
