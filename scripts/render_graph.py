from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path


def output_path(directory: str, now: datetime | None = None) -> Path:
	now = now or datetime.now()
	return Path(directory) / f"aoc_{now:%Y-%m-%d_%H.%M.%S}.png"


def main(argv: list[str] | None = None) -> int:
	repo_root = Path(__file__).resolve().parents[1]
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from aocgraph.errors import ChartError
	from aocgraph.canvas import CanvasSpec
	from aocgraph.factory import create_graph
	from aocgraph.settings import Settings, configure_logging, load_environment_variables
	from aocgraph.theme import load_theme

	load_environment_variables()
	configure_logging()
	settings = Settings.from_env()

	parser = argparse.ArgumentParser(description="Render an Advent of Code participation chart")
	parser.add_argument("--type", default=settings.chart_type, help="bar, stacked or area")
	parser.add_argument("--year", type=int, default=settings.year)
	parser.add_argument("--leaderboard", type=int, default=settings.leaderboard_id)
	parser.add_argument("--theme", default=settings.theme_path, help="JSON theme document")
	parser.add_argument("--background", default=None, help="override the theme background, e.g. #0F0F23")
	parser.add_argument("--font", default=settings.font, help="font file or family")
	parser.add_argument("--out", default=settings.output_dir, help="output directory")
	args = parser.parse_args(argv)

	if not settings.session_token or not args.year or not args.leaderboard:
		logging.error("AOC_SESSION, a year and a leaderboard id are required")
		return 1

	try:
		theme = load_theme(args.theme) if args.theme else None
		graph = create_graph(
			args.type,
			args.year,
			args.leaderboard,
			settings.session_token,
			theme=theme,
			spec=CanvasSpec.from_env(),
			font=args.font,
		)
		if args.background:
			graph.set_background(args.background)
		image = graph.generate_image()
	except ChartError as exc:
		logging.error("Rendering failed: %s", exc)
		return 1

	path = output_path(args.out)
	path.parent.mkdir(parents=True, exist_ok=True)
	image.save(path, format="PNG")
	logging.info("Saved %s", path)
	return 0


if __name__ == "__main__":
	sys.exit(main())
