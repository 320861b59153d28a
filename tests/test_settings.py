from __future__ import annotations

import pytest

from aocgraph.canvas import CanvasSpec
from aocgraph.settings import Settings, get_env_int


def test_get_env_int_falls_back_on_missing_or_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AOC_TEST_INT", raising=False)
    assert get_env_int("AOC_TEST_INT", 7) == 7

    monkeypatch.setenv("AOC_TEST_INT", "abc")
    assert get_env_int("AOC_TEST_INT", 7) == 7

    monkeypatch.setenv("AOC_TEST_INT", " 42 ")
    assert get_env_int("AOC_TEST_INT", 7) == 42


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AOC_SESSION", "cookie")
    monkeypatch.setenv("AOC_YEAR", "2022")
    monkeypatch.setenv("AOC_LEADERBOARD_ID", "951576")
    monkeypatch.setenv("AOC_CHART_TYPE", "area")
    monkeypatch.delenv("AOC_THEME_PATH", raising=False)
    monkeypatch.delenv("AOC_OUTPUT_DIR", raising=False)

    settings = Settings.from_env()

    assert settings.session_token == "cookie"
    assert (settings.year, settings.leaderboard_id) == (2022, 951576)
    assert settings.chart_type == "area"
    assert settings.theme_path is None
    assert settings.output_dir == "./out/graphs"
    assert settings.missing() == []


def test_settings_report_missing_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AOC_SESSION", "AOC_YEAR", "AOC_LEADERBOARD_ID"):
        monkeypatch.delenv(name, raising=False)

    assert Settings.from_env().missing() == ["AOC_SESSION", "AOC_YEAR", "AOC_LEADERBOARD_ID"]


def test_canvas_spec_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AOC_GRAPH_WIDTH", "1000")
    monkeypatch.setenv("AOC_GRAPH_MARGIN_TOP", "120")
    monkeypatch.delenv("AOC_GRAPH_HEIGHT", raising=False)

    spec = CanvasSpec.from_env()

    assert spec.width == 1000
    assert spec.margin_top == 120
    assert spec.height == 1200
