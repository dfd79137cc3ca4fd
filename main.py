#!/usr/bin/env python3
"""
Box Score Keeper - Main Entry Point
Gesture-driven basketball box score tracking.
"""

import sys

from boxscore_keeper.ui.board import main

if __name__ == "__main__":
    sys.exit(main())
