import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ..config import FRAMES_PER_GAME, PINS_PER_RACK
from ..exceptions import (
    DuplicateFrame,
    FrameOverflow,
    FrameValidationError,
    InvalidBallValue,
    InvalidFrameNumber,
    MissingBall,
)
from ..schemas import Frame, FrameInput

logger = logging.getLogger(__name__)

RawFrame = Union[Frame, FrameInput, Mapping[str, Any]]


def _coerce_frame_number(raw: Any) -> int:
    if isinstance(raw, bool) or raw is None:
        raise InvalidFrameNumber("Frame number must be an integer.")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidFrameNumber("Frame number must be an integer.")
    if not 1 <= value <= FRAMES_PER_GAME:
        raise InvalidFrameNumber(
            f"Frame number must be between 1 and {FRAMES_PER_GAME}.",
            frame_number=value,
        )
    return value


def _coerce_ball(raw: Any, ball: int, frame_number: int) -> Optional[int]:
    """Return the pin count for ``raw`` or ``None`` when it was not supplied.

    Empty strings count as "not supplied" since form fields submit them for
    balls that were never thrown.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(raw, bool):
        raise InvalidBallValue(
            f"Frame {frame_number} ball {ball} must be an integer (not a boolean).",
            frame_number=frame_number,
            ball=ball,
        )
    if isinstance(raw, float) and not raw.is_integer():
        raise InvalidBallValue(
            f"Frame {frame_number} ball {ball} must be a whole number of pins.",
            frame_number=frame_number,
            ball=ball,
        )
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidBallValue(
            f"Frame {frame_number} ball {ball} must be an integer.",
            frame_number=frame_number,
            ball=ball,
        )

    if not 0 <= value <= PINS_PER_RACK:
        raise InvalidBallValue(
            f"Frame {frame_number} ball {ball} must be 0–{PINS_PER_RACK}.",
            frame_number=frame_number,
            ball=ball,
        )
    return value


def _require(value: Optional[int], ball: int, frame_number: int, reason: str) -> int:
    if value is None:
        raise MissingBall(
            f"Frame {frame_number} ball {ball} is required {reason}.",
            frame_number=frame_number,
            ball=ball,
        )
    return value


def _check_rack(first: int, second: int, balls: Tuple[int, int], frame_number: int) -> None:
    if first + second > PINS_PER_RACK:
        raise FrameOverflow(
            f"Frame {frame_number} ball {balls[0]} + ball {balls[1]} cannot exceed "
            f"{PINS_PER_RACK} (got {first + second}).",
            frame_number=frame_number,
            ball=balls[1],
        )


def _entry(raw: RawFrame) -> FrameInput:
    if isinstance(raw, FrameInput):
        return raw
    if isinstance(raw, Frame):
        raw = raw.model_dump()
    try:
        return FrameInput.model_validate(raw)
    except PydanticValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors() if err["loc"]
        )
        raise FrameValidationError(
            f"Frame entry is malformed ({fields or 'not an object'})."
        )


def _ignored(frame_number: int, ball: int, raw: Any) -> None:
    if raw is not None and raw != "":
        logger.debug("Ignoring ball %d (%r) supplied for frame %d", ball, raw, frame_number)


def _validate(
    ball1: Any,
    ball2: Any,
    ball3: Any,
    frame_number: int,
    is_ball1_split: bool,
) -> Frame:
    b1 = _require(
        _coerce_ball(ball1, 1, frame_number), 1, frame_number, "for every frame"
    )

    if frame_number < FRAMES_PER_GAME:
        _ignored(frame_number, 3, ball3)
        if b1 == PINS_PER_RACK:
            _ignored(frame_number, 2, ball2)
            return Frame(
                frame_number=frame_number,
                ball1_score=b1,
                is_ball1_split=is_ball1_split,
            )
        b2 = _require(
            _coerce_ball(ball2, 2, frame_number),
            2,
            frame_number,
            "unless ball 1 is a strike",
        )
        _check_rack(b1, b2, (1, 2), frame_number)
        return Frame(
            frame_number=frame_number,
            ball1_score=b1,
            ball2_score=b2,
            is_ball1_split=is_ball1_split,
        )

    b2 = _require(
        _coerce_ball(ball2, 2, frame_number), 2, frame_number, "in the final frame"
    )
    if b1 < PINS_PER_RACK:
        _check_rack(b1, b2, (1, 2), frame_number)

    b3: Optional[int] = None
    needs_fill = b1 == PINS_PER_RACK or b1 + b2 == PINS_PER_RACK
    if not needs_fill:
        _ignored(frame_number, 3, ball3)
    else:
        b3 = _require(
            _coerce_ball(ball3, 3, frame_number),
            3,
            frame_number,
            "after a strike or spare",
        )
        # After a strike, balls 2 and 3 share a rack unless ball 2 also strikes
        if b1 == PINS_PER_RACK and b2 < PINS_PER_RACK:
            _check_rack(b2, b3, (2, 3), frame_number)

    return Frame(
        frame_number=frame_number,
        ball1_score=b1,
        ball2_score=b2,
        ball3_score=b3,
        is_ball1_split=is_ball1_split,
    )


def validate_frame(raw: RawFrame, frame_number: Optional[int] = None) -> Frame:
    """Validate one frame's ball entries and return the normalized :class:`Frame`.

    ``raw`` is a :class:`FrameInput`, an existing :class:`Frame` or a mapping
    using either the camelCase collaborator keys (``ball1Score``) or the
    snake_case field names; anything else raises :class:`FrameValidationError`.
    ``frame_number`` overrides any frame number carried by ``raw``.

    Rules:
    - Ball 1 is always required and must be 0–10
    - Frames 1–9: a strike ends the frame (later balls are dropped); otherwise
      ball 2 is required and the two balls may not exceed 10 pins
    - Frame 10: ball 2 is always required; ball 3 is required after a strike
      or spare and dropped on an open frame; after a strike, balls 2 and 3 may
      not exceed 10 pins unless ball 2 is also a strike

    Ball 3 is never an error in frames 1–9; it is dropped.
    """

    entry = _entry(raw)
    number = _coerce_frame_number(
        frame_number if frame_number is not None else entry.frame_number
    )
    try:
        return _validate(
            entry.ball1_score,
            entry.ball2_score,
            entry.ball3_score,
            number,
            bool(entry.is_ball1_split),
        )
    except FrameValidationError as exc:
        logger.debug("Rejected frame %d: %s (%s)", number, exc.detail, exc.code)
        raise


def validate_game_frames(raw_frames: Iterable[RawFrame]) -> Tuple[Frame, ...]:
    """Validate a whole game's frames, e.g. from a parsed scorecard.

    Returns the frames ordered by frame number. Gaps are allowed since games
    may still be in progress; a frame number appearing twice is not.
    """

    seen: Dict[int, Frame] = {}
    for raw in raw_frames:
        frame = validate_frame(raw)
        if frame.frame_number in seen:
            logger.warning("Duplicate entry for frame %d", frame.frame_number)
            raise DuplicateFrame(
                f"Frame {frame.frame_number} was entered more than once.",
                frame_number=frame.frame_number,
            )
        seen[frame.frame_number] = frame
    return tuple(seen[number] for number in sorted(seen))
