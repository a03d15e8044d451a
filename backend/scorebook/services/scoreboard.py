"""Per-game scoreboard rows for every bowler in a match game."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..schemas import BowlerGame, Frame, Scoreboard, ScoreboardRow
from ..scoring import compute_game

logger = logging.getLogger(__name__)


def group_frames_by_bowler(rows: Iterable[Tuple[str, Frame]]) -> Dict[str, List[Frame]]:
    """Group flat ``(bowler_id, frame)`` rows, keeping first-seen bowler order."""
    grouped: Dict[str, List[Frame]] = defaultdict(list)
    for bowler_id, frame in rows:
        grouped[bowler_id].append(frame)
    return {
        bowler_id: sorted(frames, key=lambda f: f.frame_number)
        for bowler_id, frames in grouped.items()
    }


def build_scoreboard(
    games: Iterable[BowlerGame],
    names: Optional[Mapping[str, str]] = None,
) -> Scoreboard:
    """Score each bowler's game and total the team's pins to date.

    ``names`` fills in display names for games that do not carry one.
    Bowlers appear in the order given.
    """
    names = names or {}
    rows: List[ScoreboardRow] = []
    team_total = 0
    for game in games:
        result = compute_game(game.frames)
        if not result.is_complete:
            logger.debug(
                "Game for bowler %s in progress (total to date %s)",
                game.bowler_id,
                result.total,
            )
        rows.append(
            ScoreboardRow(
                bowler_id=game.bowler_id,
                bowler_name=game.bowler_name or names.get(game.bowler_id),
                result=result,
            )
        )
        team_total += result.total or 0
    return Scoreboard(rows=rows, team_total=team_total)
