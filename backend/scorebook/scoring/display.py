"""Scoreboard glyphs for a single frame: ``X`` strike, ``/`` spare, ``–`` miss."""
from typing import NamedTuple, Optional

from .. import config
from ..schemas import Frame, FrameGlyphs
from .frames import TenthFrameKind, classify_tenth_frame


class GlyphSet(NamedTuple):
    strike: str
    spare: str
    miss: str


def default_glyphs() -> GlyphSet:
    return GlyphSet(config.STRIKE_GLYPH, config.SPARE_GLYPH, config.MISS_GLYPH)


def _fresh(pins: Optional[int], glyphs: GlyphSet) -> str:
    """Glyph for a delivery at a full rack."""
    if pins is None:
        return ""
    if pins == config.PINS_PER_RACK:
        return glyphs.strike
    if pins == 0:
        return glyphs.miss
    return str(pins)


def _follow_up(first: int, pins: Optional[int], glyphs: GlyphSet) -> str:
    """Glyph for a delivery at the pins left standing by ``first``."""
    if pins is None:
        return ""
    if first + pins == config.PINS_PER_RACK:
        return glyphs.spare
    if pins == 0:
        return glyphs.miss
    return str(pins)


def _tenth_frame_glyphs(frame: Frame, glyphs: GlyphSet) -> FrameGlyphs:
    kind = classify_tenth_frame(frame)
    ball1 = _fresh(frame.ball1_score, glyphs)
    if kind is TenthFrameKind.STRIKE:
        ball2 = _fresh(frame.ball2_score, glyphs)
        if frame.ball2_score == config.PINS_PER_RACK or frame.ball2_score is None:
            ball3 = _fresh(frame.ball3_score, glyphs)
        else:
            ball3 = _follow_up(frame.ball2_score, frame.ball3_score, glyphs)
    else:
        ball2 = _follow_up(frame.ball1_score, frame.ball2_score, glyphs)
        # After a spare the fill ball gets a fresh rack
        ball3 = _fresh(frame.ball3_score, glyphs)
    return FrameGlyphs(ball1=ball1, ball2=ball2, ball3=ball3)


def frame_glyphs(frame: Frame, glyphs: Optional[GlyphSet] = None) -> FrameGlyphs:
    """Render the balls of one frame for a scoreboard cell.

    Absent balls render blank. Frames 1–9 never render a third ball.
    """
    glyphs = glyphs or default_glyphs()
    if frame.is_tenth:
        return _tenth_frame_glyphs(frame, glyphs)
    return FrameGlyphs(
        ball1=_fresh(frame.ball1_score, glyphs),
        ball2=_follow_up(frame.ball1_score, frame.ball2_score, glyphs),
    )
