import sys
from pathlib import Path


def main() -> int:
	repo_root = Path(__file__).resolve().parents[1]
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from aocgraph.errors import ChartError
	from aocgraph.leaderboard import fetch_day_series
	from aocgraph.settings import Settings, load_environment_variables

	load_environment_variables()
	settings = Settings.from_env()
	missing = settings.missing()
	if missing:
		print(f"Missing environment variables: {', '.join(missing)}")
		return 1

	try:
		series = fetch_day_series(settings.year, settings.leaderboard_id, settings.session_token)
	except ChartError as exc:
		print(f"Fetch failed: {exc}")
		return 1

	print(f"Participants: {series.participants}")
	for record in series:
		print(f"day {record.day:>2}: both={record.both:<4} one={record.one:<4} none={record.none}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
