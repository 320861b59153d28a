from __future__ import annotations

import json
from pathlib import Path

import pytest

from aocgraph.errors import ConfigError, ConfigurationError
from aocgraph.theme import DEFAULT_THEME, Theme, load_theme, parse_color


def test_parse_color_accepts_hex_and_sequences() -> None:
    assert parse_color("#0F0F23") == (15, 15, 35, 255)
    assert parse_color("ff808080") == (255, 128, 128, 128)
    assert parse_color([1, 2, 3]) == (1, 2, 3, 255)
    assert parse_color((1, 2, 3, 4)) == (1, 2, 3, 4)


@pytest.mark.parametrize("value", ["#12345", "#GGGGGG", [1, 2], [0, 0, 256], "", None, 12])
def test_parse_color_rejects_garbage(value) -> None:
    with pytest.raises(ConfigurationError):
        parse_color(value)


def test_default_theme_colors() -> None:
    assert DEFAULT_THEME.background == (15, 15, 35, 255)
    assert DEFAULT_THEME.state_colors() == ((255, 255, 102, 255), (153, 153, 204, 255), (255, 128, 128, 255))
    assert DEFAULT_THEME.text == (255, 255, 255, 255)


def test_theme_from_document() -> None:
    theme = Theme.from_dict(
        {"background": "#000000", "bar_gold": "#FFD700", "bar_silver": [192, 192, 192], "bar_grey": "#808080"}
    )

    assert theme.gold == (255, 215, 0, 255)
    assert theme.silver == (192, 192, 192, 255)
    assert theme.text == (255, 255, 255, 255)


def test_theme_missing_field_is_config_error() -> None:
    with pytest.raises(ConfigError, match="bar_grey"):
        Theme.from_dict({"background": "#000000", "bar_gold": "#FFD700", "bar_silver": "#C0C0C0"})


def test_theme_invalid_field_names_key() -> None:
    with pytest.raises(ConfigurationError, match="bar_gold"):
        Theme.from_dict({"background": "#000000", "bar_gold": "gold", "bar_silver": "#C0C0C0", "bar_grey": "#808080"})


def test_load_theme_round_trips_document(tmp_path: Path) -> None:
    path = tmp_path / "theme.json"
    path.write_text(json.dumps(DEFAULT_THEME.to_dict()), encoding="utf-8")

    assert load_theme(path) == DEFAULT_THEME


def test_load_theme_rejects_missing_and_malformed_files(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_theme(tmp_path / "absent.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_theme(broken)


def test_bundled_dark_theme_loads() -> None:
    theme = load_theme(Path(__file__).resolve().parents[1] / "themes" / "aoc_dark.json")

    assert theme.background == DEFAULT_THEME.background
    assert theme.text == (204, 204, 204, 255)
