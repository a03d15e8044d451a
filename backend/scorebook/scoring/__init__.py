"""Scoring engine for ten-pin bowling games."""

from . import bowling, display, frames
from .bowling import compute_game, running_totals
from .display import frame_glyphs
from .frames import TenthFrameKind, classify_tenth_frame

__all__ = [
    "bowling",
    "display",
    "frames",
    "compute_game",
    "running_totals",
    "frame_glyphs",
    "TenthFrameKind",
    "classify_tenth_frame",
]
