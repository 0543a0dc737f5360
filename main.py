#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py WIDTH HEIGHT MINES [--seed N] [-v]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
