from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def get_env_int(name: str, default: int) -> int:
    """Read integer from environment variables with a safe fallback."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.getenv(name, "").strip()
    return raw or default


def load_environment_variables(dotenv_path: str | Path | None = None) -> None:
    # utf-8-sig tolerates the BOM some editors write
    load_dotenv(dotenv_path=dotenv_path, encoding="utf-8-sig")


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@dataclass(frozen=True)
class Settings:
    """Runtime options of the command-line tools, read from the environment.

    AOC_SESSION        session cookie of an account that can see the leaderboard
    AOC_YEAR           event year
    AOC_LEADERBOARD_ID private leaderboard id
    AOC_CHART_TYPE     bar / stacked / area
    AOC_THEME_PATH     optional JSON theme document
    AOC_GRAPH_FONT     optional font file or family
    AOC_OUTPUT_DIR     directory for rendered images
    """

    session_token: Optional[str] = None
    year: Optional[int] = None
    leaderboard_id: Optional[int] = None
    chart_type: str = "stacked"
    theme_path: Optional[str] = None
    font: Optional[str] = None
    output_dir: str = "./out/graphs"

    @classmethod
    def from_env(cls) -> "Settings":
        year = get_env_int("AOC_YEAR", 0)
        leaderboard_id = get_env_int("AOC_LEADERBOARD_ID", 0)
        return cls(
            session_token=get_env_str("AOC_SESSION"),
            year=year or None,
            leaderboard_id=leaderboard_id or None,
            chart_type=get_env_str("AOC_CHART_TYPE", "stacked") or "stacked",
            theme_path=get_env_str("AOC_THEME_PATH"),
            font=get_env_str("AOC_GRAPH_FONT"),
            output_dir=get_env_str("AOC_OUTPUT_DIR", "./out/graphs") or "./out/graphs",
        )

    def missing(self) -> list[str]:
        """Names of the variables a fetch cannot do without."""
        required = {
            "AOC_SESSION": self.session_token,
            "AOC_YEAR": self.year,
            "AOC_LEADERBOARD_ID": self.leaderboard_id,
        }
        return [name for name, value in required.items() if not value]
