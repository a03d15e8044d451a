from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .config import FRAMES_PER_GAME, PINS_PER_RACK


class FrameInput(BaseModel):
    """Raw ball entry as submitted by a form, bulk import or re-scan."""

    frame_number: Any = Field(None, alias="frameNumber")
    ball1_score: Any = Field(None, alias="ball1Score")
    ball2_score: Any = Field(None, alias="ball2Score")
    ball3_score: Any = Field(None, alias="ball3Score")
    is_ball1_split: bool = Field(False, alias="isBall1Split")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Frame(BaseModel):
    """One bowler's attempt at one frame.

    Field ranges are enforced here; the rules tying the balls of a frame
    together live in :func:`scorebook.services.validation.validate_frame`.
    """

    frame_number: int = Field(..., ge=1, le=FRAMES_PER_GAME, alias="frameNumber")
    ball1_score: int = Field(..., ge=0, le=PINS_PER_RACK, alias="ball1Score")
    ball2_score: Optional[int] = Field(
        None, ge=0, le=PINS_PER_RACK, alias="ball2Score"
    )
    ball3_score: Optional[int] = Field(
        None, ge=0, le=PINS_PER_RACK, alias="ball3Score"
    )
    is_ball1_split: bool = Field(False, alias="isBall1Split")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_tenth(self) -> bool:
        return self.frame_number == FRAMES_PER_GAME

    @property
    def is_strike(self) -> bool:
        return self.ball1_score == PINS_PER_RACK

    @property
    def is_spare(self) -> bool:
        if self.ball2_score is None or self.is_strike:
            return False
        return self.ball1_score + self.ball2_score == PINS_PER_RACK

    def balls(self) -> List[int]:
        """Deliveries recorded for this frame, in order."""
        return [
            b
            for b in (self.ball1_score, self.ball2_score, self.ball3_score)
            if b is not None
        ]


class FrameGlyphs(BaseModel):
    ball1: str = ""
    ball2: str = ""
    ball3: str = ""

    model_config = ConfigDict(frozen=True)


class GameResult(BaseModel):
    totals: List[Optional[int]]
    display: List[Optional[FrameGlyphs]]

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> Optional[int]:
        """Game total to date: the last determinable running total."""
        for value in reversed(self.totals):
            if value is not None:
                return value
        return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_complete(self) -> bool:
        return self.totals[-1] is not None


class BowlerGame(BaseModel):
    bowler_id: str = Field(..., min_length=1, alias="bowlerId")
    bowler_name: Optional[str] = Field(None, alias="bowlerName")
    match_id: Optional[str] = Field(None, alias="matchId")
    game_number: Optional[int] = Field(None, ge=1, alias="gameNumber")
    frames: List[Frame] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class BowlerStats(BaseModel):
    bowler_id: str
    games: int = 0
    pins: int = 0
    strikes: int = 0
    spares: int = 0
    gutters: int = 0
    completed_games: int = 0
    completed_pins: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average(self) -> float:
        """Average over finished games only."""
        if not self.completed_games:
            return 0.0
        return self.completed_pins / self.completed_games


class TeamStats(BaseModel):
    team_id: str
    games: int = 0
    pins: int = 0
    pins_against: int = 0
    strikes: int = 0
    spares: int = 0
    gutters: int = 0
    game_wins: int = 0
    match_wins: int = 0


class ScoreboardRow(BaseModel):
    bowler_id: str
    bowler_name: Optional[str] = None
    result: GameResult


class Scoreboard(BaseModel):
    rows: List[ScoreboardRow]
    team_total: int

    def totals_by_bowler(self) -> Dict[str, Optional[int]]:
        return {row.bowler_id: row.result.total for row in self.rows}
