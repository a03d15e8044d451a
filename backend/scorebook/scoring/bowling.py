"""Ten-pin bowling score engine."""
from typing import Iterable, List, Optional

from ..config import FRAMES_PER_GAME, PINS_PER_RACK
from ..schemas import Frame, GameResult
from .display import frame_glyphs
from .frames import TenthFrameKind, classify_tenth_frame, slot_frames


def _bonus_balls(frame: Frame) -> List[int]:
    """Deliveries a frame can lend to an earlier strike or spare.

    The final frame lends at most its first two balls; its fill ball only
    ever counts towards the final frame itself.
    """
    if frame.is_tenth:
        balls = [frame.ball1_score, frame.ball2_score]
    elif frame.is_strike:
        balls = [frame.ball1_score]
    else:
        balls = [frame.ball1_score, frame.ball2_score]
    return [b for b in balls if b is not None]


def _next_balls(
    slots: List[Optional[Frame]], index: int, count: int
) -> Optional[List[int]]:
    """Return the next ``count`` deliveries after frame ``index`` (0-based).

    Walks forward over at most two frames, stopping at the first frame that
    has not been recorded. Returns ``None`` when not enough balls are known.
    """
    balls: List[int] = []
    for nxt in range(index + 1, min(index + 3, FRAMES_PER_GAME)):
        frame = slots[nxt]
        if frame is None:
            break
        lent = _bonus_balls(frame)
        balls.extend(lent)
        if len(balls) >= count:
            return balls[:count]
        # A frame that still owes a ball cannot be skipped over
        if not frame.is_strike or frame.is_tenth:
            break
    return None


def _tenth_frame_score(frame: Frame) -> Optional[int]:
    kind = classify_tenth_frame(frame)
    if kind is None:
        return None
    if kind is TenthFrameKind.OPEN:
        return frame.ball1_score + (frame.ball2_score or 0)
    if frame.ball2_score is None or frame.ball3_score is None:
        return None
    return frame.ball1_score + frame.ball2_score + frame.ball3_score


def frame_score(slots: List[Optional[Frame]], index: int) -> Optional[int]:
    """Score of a single frame including its bonus, or ``None`` if undetermined."""
    frame = slots[index]
    if frame is None:
        return None
    if frame.is_tenth:
        return _tenth_frame_score(frame)
    if frame.is_strike:
        bonus = _next_balls(slots, index, 2)
        return None if bonus is None else PINS_PER_RACK + sum(bonus)
    if frame.ball2_score is None:
        return None
    if frame.is_spare:
        bonus = _next_balls(slots, index, 1)
        return None if bonus is None else PINS_PER_RACK + sum(bonus)
    return frame.ball1_score + frame.ball2_score


def running_totals(frames: Iterable[Frame]) -> List[Optional[int]]:
    """Return the ten cumulative frame totals for one bowler's game.

    Once a frame cannot be scored yet, it and every later frame are ``None``.
    """
    return _totals(slot_frames(frames))


def _totals(slots: List[Optional[Frame]]) -> List[Optional[int]]:
    totals: List[Optional[int]] = [None] * FRAMES_PER_GAME
    cumulative = 0
    for index in range(FRAMES_PER_GAME):
        score = frame_score(slots, index)
        if score is None:
            break
        cumulative += score
        totals[index] = cumulative
    return totals


def compute_game(frames: Iterable[Frame]) -> GameResult:
    """Running totals plus ball glyphs for a possibly partial game."""
    slots = slot_frames(frames)
    return GameResult(
        totals=_totals(slots),
        display=[frame_glyphs(f) if f is not None else None for f in slots],
    )
