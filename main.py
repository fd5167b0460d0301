#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [rows cols mines] [--seed N] [--verbose]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
