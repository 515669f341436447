"""
Catheter Trajectory Replay
==========================

Replays recorded catheter and skull marker trajectories in lockstep, with a
trailing path of the catheter tip.

Controls:
    - RIGHT/LEFT: Play forward / rewind
    - UP/DOWN: Playback speed
    - SPACE: Pause/Resume
    - R: Restart
    - W/S, A/D, Q/E, mouse: Camera
    - ESC: Quit

See `python -m tools.playback --help` for options.
"""

import sys

from tools.playback import main


if __name__ == "__main__":
    sys.exit(main())
