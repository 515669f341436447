#!/usr/bin/env python3
"""
Convenience entry point for recording summaries.

Usage:
    python record.py <recording> [<recording> ...]   # Print samples and marker extents
"""

from tools.record import main

if __name__ == "__main__":
    main()
