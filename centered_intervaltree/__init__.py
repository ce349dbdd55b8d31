"""
Centered interval tree for indexing half-open integer intervals [start, end)

- interval_tree.py - the tree itself, intervals and errors
- render.py - drawing and depth of the built node structure
"""

from .interval_tree import (
    Interval,
    IntervalTree,
    IntervalTreeError,
    InvalidBoundsError,
    InvalidIntervalError,
    SlotState,
)
from .render import depth, draw_tree, render_tree

__all__ = [
    "Interval",
    "IntervalTree",
    "IntervalTreeError",
    "InvalidBoundsError",
    "InvalidIntervalError",
    "SlotState",
    "depth",
    "draw_tree",
    "render_tree",
]
