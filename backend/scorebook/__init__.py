"""League bowling scorebook: frame validation and game scoring."""

from .exceptions import (
    DomainException,
    DuplicateFrame,
    FrameOverflow,
    FrameValidationError,
    InvalidBallValue,
    InvalidFrameNumber,
    MissingBall,
)
from .schemas import BowlerGame, Frame, FrameGlyphs, GameResult
from .scoring import compute_game
from .services import validate_frame, validate_game_frames

__all__ = [
    "DomainException",
    "DuplicateFrame",
    "FrameOverflow",
    "FrameValidationError",
    "InvalidBallValue",
    "InvalidFrameNumber",
    "MissingBall",
    "BowlerGame",
    "Frame",
    "FrameGlyphs",
    "GameResult",
    "compute_game",
    "validate_frame",
    "validate_game_frames",
]
