import os, sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from scorebook import config
from scorebook.scoring.display import GlyphSet, frame_glyphs


def _glyphs(frame):
    g = frame_glyphs(frame)
    return (g.ball1, g.ball2, g.ball3)


@pytest.mark.parametrize(
    "balls, expected",
    [
        ((10,), ("X", "", "")),
        ((7, 3), ("7", "/", "")),
        ((0, 10), ("–", "/", "")),
        ((9, 0), ("9", "–", "")),
        ((0, 0), ("–", "–", "")),
        ((4, 5), ("4", "5", "")),
    ],
    ids=["strike", "spare", "gutter-spare", "miss", "double-gutter", "open"],
)
def test_early_frame_glyphs(make_frame, balls, expected):
    assert _glyphs(make_frame(4, *balls)) == expected


@pytest.mark.parametrize(
    "balls, expected",
    [
        ((10, 10, 10), ("X", "X", "X")),
        ((10, 7, 2), ("X", "7", "2")),
        ((10, 3, 7), ("X", "3", "/")),
        ((10, 0, 10), ("X", "–", "/")),
        ((10, 0, 0), ("X", "–", "–")),
        ((10, 10, 0), ("X", "X", "–")),
        ((10, 10, 4), ("X", "X", "4")),
        ((6, 4, 10), ("6", "/", "X")),
        ((0, 10, 5), ("–", "/", "5")),
        ((6, 4, 0), ("6", "/", "–")),
        ((6, 3), ("6", "3", "")),
        ((0, 0), ("–", "–", "")),
        ((10,), ("X", "", "")),
    ],
    ids=[
        "turkey",
        "strike-then-open",
        "strike-then-spare",
        "strike-miss-spare",
        "strike-then-gutters",
        "double-then-gutter",
        "double-then-count",
        "spare-then-strike",
        "gutter-spare-then-count",
        "spare-then-gutter",
        "open",
        "gutters",
        "strike-in-progress",
    ],
)
def test_tenth_frame_glyphs(make_frame, balls, expected):
    assert _glyphs(make_frame(10, *balls)) == expected


def test_split_flag_does_not_change_glyphs(make_frame):
    assert _glyphs(make_frame(2, 7, 2, split=True)) == _glyphs(make_frame(2, 7, 2))


def test_explicit_glyph_set(make_frame):
    glyphs = GlyphSet(strike="x", spare="s", miss="-")
    result = frame_glyphs(make_frame(10, 10, 0, 10), glyphs)
    assert (result.ball1, result.ball2, result.ball3) == ("x", "-", "s")


def test_configured_miss_glyph(make_frame, monkeypatch):
    monkeypatch.setattr(config, "MISS_GLYPH", "-")
    assert _glyphs(make_frame(1, 0, 0)) == ("-", "-", "")
