#!/usr/bin/env python3
"""
Convenience entry point for trajectory playback.

Usage:
    python playback.py <recording> [<recording> ...]   # Playback recordings
    python playback.py rec1.txt --speed 2.0            # 2x speed
    python playback.py rec1.txt rec2.txt --no-warp     # Independent lengths
    python playback.py rec1.txt rec2.txt --info        # Summary only
"""

import sys

from tools.playback import main

if __name__ == "__main__":
    sys.exit(main())
