"""
Central defaults for the Hidato hill climber.

This module provides:
 - PUZZLES: built-in puzzles as (values, width) pairs, 0 marking an empty cell
 - DEFAULT_PUZZLE / DEFAULT_SEED: what the CLI solves when given no options
 - run defaults for repeated solves, progress output and trace files
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

# Built-in puzzles. Every one of these has at least one solution.
PUZZLES: Dict[str, Tuple[List[int], int]] = {
    "tiny": (
        [0, 0, 1,
         0, 2, 0,
         9, 0, 0],
        3,
    ),
    "snake4": (
        [1, 0, 0, 0,
         0, 7, 0, 0,
         0, 0, 0, 12,
         16, 0, 0, 0],
        4,
    ),
    "snake5": (
        [1, 0, 0, 0, 5,
         0, 9, 0, 0, 0,
         0, 0, 13, 0, 0,
         0, 0, 0, 17, 0,
         21, 0, 0, 0, 25],
        5,
    ),
}

DEFAULT_PUZZLE = "tiny"

# None = process-seeded generator; set an int for reproducible runs.
DEFAULT_SEED = None

# Optional wall-clock time limit (in seconds). None = search until solved.
TIME_LIMIT_S = None

SOLVE_REPEATS = 1             # Default number of times to solve the puzzle
PROGRESS_EVERY = 100          # Print a progress line every N restarts when verbose

# Location for per-restart traces written by --trace-run
TRACE_DIR = Path("traces")
