from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            status=self.status_code,
            instance=instance,
            code=self.code,
        )


class FrameValidationError(DomainException, ValueError):
    """Raised when ball entries do not form a legal frame."""

    title = "Invalid frame"
    code = "invalid_frame"

    def __init__(
        self,
        detail: str,
        *,
        frame_number: int | None = None,
        ball: int | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            title=type(self).title,
            detail=detail,
            code=type(self).code,
        )
        self.frame_number = frame_number
        self.ball = ball


class InvalidBallValue(FrameValidationError):
    title = "Invalid ball value"
    code = "invalid_ball_value"


class MissingBall(FrameValidationError):
    title = "Missing ball"
    code = "missing_ball"


class FrameOverflow(FrameValidationError):
    title = "Frame overflow"
    code = "frame_overflow"


class InvalidFrameNumber(FrameValidationError):
    title = "Invalid frame number"
    code = "invalid_frame_number"


class DuplicateFrame(FrameValidationError):
    title = "Duplicate frame"
    code = "duplicate_frame"
