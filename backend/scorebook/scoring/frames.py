"""Helpers shared by the score engine and the scoreboard display."""
import logging
from enum import Enum
from typing import Iterable, List, Optional

from ..config import FRAMES_PER_GAME, PINS_PER_RACK
from ..schemas import Frame

logger = logging.getLogger(__name__)


class TenthFrameKind(str, Enum):
    """How the final frame played out, decided by its first two balls."""

    STRIKE = "strike"
    SPARE = "spare"
    OPEN = "open"


def classify_tenth_frame(frame: Frame) -> Optional[TenthFrameKind]:
    """Return the final frame's path, or ``None`` before ball 2 is known.

    A strike is known from ball 1 alone.
    """
    if frame.ball1_score == PINS_PER_RACK:
        return TenthFrameKind.STRIKE
    if frame.ball2_score is None:
        return None
    if frame.ball1_score + frame.ball2_score == PINS_PER_RACK:
        return TenthFrameKind.SPARE
    return TenthFrameKind.OPEN


def slot_frames(frames: Iterable[Frame]) -> List[Optional[Frame]]:
    """Place frames into ten positional slots; missing frames stay ``None``."""
    slots: List[Optional[Frame]] = [None] * FRAMES_PER_GAME
    for frame in sorted(frames, key=lambda f: f.frame_number):
        index = frame.frame_number - 1
        if slots[index] is not None:
            logger.warning(
                "Frame %d supplied more than once; using the last entry",
                frame.frame_number,
            )
        slots[index] = frame
    return slots
