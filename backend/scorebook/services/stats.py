from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Sequence, Set, Tuple

from ..schemas import BowlerGame, BowlerStats, Frame, GameResult, TeamStats
from ..scoring import compute_game
from ..scoring.display import GlyphSet, frame_glyphs

logger = logging.getLogger(__name__)

# Fixed glyphs so counting does not depend on the configured scoreboard look
_COUNT_GLYPHS = GlyphSet(strike="X", spare="/", miss="-")


@dataclass
class _TeamGame:
    pins: int = 0
    complete: bool = True


def _score(frames: Sequence[Frame]) -> Tuple[GameResult, Dict[str, int]]:
    result = compute_game(frames)
    strikes = spares = gutters = 0
    for frame in frames:
        glyphs = frame_glyphs(frame, _COUNT_GLYPHS)
        marks = (glyphs.ball1, glyphs.ball2, glyphs.ball3)
        strikes += marks.count(_COUNT_GLYPHS.strike)
        spares += marks.count(_COUNT_GLYPHS.spare)
        gutters += frame.balls().count(0)
    return result, {
        "pins": result.total or 0,
        "strikes": strikes,
        "spares": spares,
        "gutters": gutters,
    }


def game_stats(frames: Sequence[Frame]) -> Dict[str, int]:
    """Count pins, strikes, spares and gutters for one bowler's game.

    ``pins`` is the game total to date. Strikes and spares are counted per
    delivery, so fill balls in the final frame count too; every delivery that
    knocked down no pins is a gutter.
    """
    return _score(frames)[1]


def aggregate_bowler_stats(games: Iterable[BowlerGame]) -> Dict[str, BowlerStats]:
    """Sum per-game stats for each bowler across many games.

    Games without any recorded frames are skipped. Games still in progress
    count towards the totals but not towards the average.
    """
    totals: Dict[str, Dict[str, int]] = defaultdict(
        lambda: {
            "games": 0,
            "pins": 0,
            "strikes": 0,
            "spares": 0,
            "gutters": 0,
            "completed_games": 0,
            "completed_pins": 0,
        }
    )
    for game in games:
        if not game.frames:
            continue
        result, stats = _score(game.frames)
        row = totals[game.bowler_id]
        row["games"] += 1
        for key, value in stats.items():
            row[key] += value
        if result.is_complete:
            row["completed_games"] += 1
            row["completed_pins"] += stats["pins"]
    return {
        bowler_id: BowlerStats(bowler_id=bowler_id, **row)
        for bowler_id, row in totals.items()
    }


def aggregate_team_stats(
    games: Iterable[BowlerGame], team_of: Mapping[str, str]
) -> Dict[str, TeamStats]:
    """Season stats per team from its bowlers' games.

    Args:
        games: Bowler games; those sharing ``(match_id, game_number)`` form
            one team game.
        team_of: Maps bowler id to team id.

    A team game is won on pins once both teams have finished it. A match is
    won on game wins once every team game in it is finished.
    """
    totals: Dict[str, Dict[str, int]] = defaultdict(
        lambda: {
            "games": 0,
            "pins": 0,
            "pins_against": 0,
            "strikes": 0,
            "spares": 0,
            "gutters": 0,
            "game_wins": 0,
            "match_wins": 0,
        }
    )
    team_games: Dict[Tuple[Optional[str], Optional[int]], Dict[str, _TeamGame]] = (
        defaultdict(dict)
    )
    for game in games:
        if not game.frames:
            continue
        team_id = team_of.get(game.bowler_id)
        if team_id is None:
            logger.warning("Bowler %s has no team; skipping game", game.bowler_id)
            continue
        result, stats = _score(game.frames)
        row = totals[team_id]
        for key in ("strikes", "spares", "gutters"):
            row[key] += stats[key]
        side = team_games[(game.match_id, game.game_number)].setdefault(
            team_id, _TeamGame()
        )
        side.pins += stats["pins"]
        side.complete = side.complete and result.is_complete

    match_game_wins: Dict[str, Dict[str, int]] = defaultdict(dict)
    undecided_matches: Set[Optional[str]] = set()
    for (match_id, _), sides in team_games.items():
        for team_id, side in sides.items():
            totals[team_id]["games"] += 1
            totals[team_id]["pins"] += side.pins
        if len(sides) != 2:
            continue
        (home, home_side), (away, away_side) = sides.items()
        totals[home]["pins_against"] += away_side.pins
        totals[away]["pins_against"] += home_side.pins

        if match_id is not None:
            wins = match_game_wins[match_id]
            wins.setdefault(home, 0)
            wins.setdefault(away, 0)
        if not (home_side.complete and away_side.complete):
            undecided_matches.add(match_id)
            continue
        if home_side.pins == away_side.pins:
            continue
        winner = home if home_side.pins > away_side.pins else away
        totals[winner]["game_wins"] += 1
        if match_id is not None:
            match_game_wins[match_id][winner] += 1

    for match_id, wins in match_game_wins.items():
        if match_id in undecided_matches or len(wins) != 2:
            continue
        (home, home_wins), (away, away_wins) = wins.items()
        if home_wins != away_wins:
            totals[home if home_wins > away_wins else away]["match_wins"] += 1

    return {
        team_id: TeamStats(team_id=team_id, **row) for team_id, row in totals.items()
    }


def rolling_average(game_totals: Sequence[Optional[int]], span: int) -> list[float]:
    """Return the rolling average of completed game totals.

    Args:
        game_totals: Game totals in the order bowled; ``None`` entries (games
            still in progress) are skipped.
        span: Size of the rolling window.
    """
    if span <= 0:
        raise ValueError("span must be positive")
    pins = 0
    window: deque[int] = deque()
    averages: list[float] = []
    for total in game_totals:
        if total is None:
            continue
        window.append(total)
        pins += total
        if len(window) > span:
            pins -= window.popleft()
        averages.append(pins / len(window))
    return averages


def high_game(games: Iterable[BowlerGame]) -> Dict[str, int]:
    """Highest completed game total per bowler."""
    best: Dict[str, int] = {}
    for game in games:
        result = compute_game(game.frames)
        if not result.is_complete or result.total is None:
            continue
        if result.total > best.get(game.bowler_id, -1):
            best[game.bowler_id] = result.total
    return best
