import os

FRAMES_PER_GAME = 10
PINS_PER_RACK = 10


def _canon_glyph(val, default):
    """
    Normalize a scoreboard glyph to a single visible character:
      - falls back to ``default`` when unset/blank
      - keeps only the first character of longer values
    """
    val = (val or "").strip()
    if not val:
        return default
    return val[0]


STRIKE_GLYPH = _canon_glyph(os.getenv("SCOREBOOK_STRIKE_GLYPH"), "X")
SPARE_GLYPH = _canon_glyph(os.getenv("SCOREBOOK_SPARE_GLYPH"), "/")
MISS_GLYPH = _canon_glyph(os.getenv("SCOREBOOK_MISS_GLYPH"), "–")
