import importlib

import pytest

from scorebook import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ("SCOREBOOK_STRIKE_GLYPH", "SCOREBOOK_SPARE_GLYPH", "SCOREBOOK_MISS_GLYPH"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_default_glyphs(reload_config):
    cfg = reload_config()
    assert (cfg.STRIKE_GLYPH, cfg.SPARE_GLYPH, cfg.MISS_GLYPH) == ("X", "/", "–")


def test_glyphs_from_environment(reload_config):
    cfg = reload_config(SCOREBOOK_MISS_GLYPH=" - ", SCOREBOOK_STRIKE_GLYPH="Strike")
    assert cfg.MISS_GLYPH == "-"
    assert cfg.STRIKE_GLYPH == "S"


def test_blank_glyph_falls_back(reload_config):
    cfg = reload_config(SCOREBOOK_SPARE_GLYPH="   ")
    assert cfg.SPARE_GLYPH == "/"
