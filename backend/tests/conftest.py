import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from scorebook.schemas import Frame  # noqa: E402


def _frame(frame_number, *balls, split=False):
    padded = list(balls) + [None] * (3 - len(balls))
    return Frame(
        frame_number=frame_number,
        ball1_score=padded[0],
        ball2_score=padded[1],
        ball3_score=padded[2],
        is_ball1_split=split,
    )


def _frames(*balls):
    """Frames 1..n from ball tuples, e.g. ``(10,), (7, 3), (10, 10, 10)``."""
    return [_frame(number, *b) for number, b in enumerate(balls, start=1)]


@pytest.fixture
def make_frame():
    return _frame


@pytest.fixture
def make_frames():
    return _frames


@pytest.fixture
def perfect_game():
    return _frames(*([(10,)] * 9), (10, 10, 10))
