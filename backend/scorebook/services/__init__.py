"""Internal application services (pure helpers, no I/O)."""

from .validation import validate_frame, validate_game_frames
from .stats import (
    aggregate_bowler_stats,
    aggregate_team_stats,
    game_stats,
    high_game,
    rolling_average,
)
from .scoreboard import build_scoreboard, group_frames_by_bowler

__all__ = [
    "validate_frame",
    "validate_game_frames",
    "aggregate_bowler_stats",
    "aggregate_team_stats",
    "game_stats",
    "high_game",
    "rolling_average",
    "build_scoreboard",
    "group_frames_by_bowler",
]
