"""Private leaderboard client.

Turns the leaderboard JSON into per-day star counts. Every member appears on
every day, so ``both + one + none`` is the member count for each record.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

from aocgraph.errors import FetchError, ParseError
from aocgraph.models import DayRecord, DaySeries, MAX_DAYS

logger = logging.getLogger(__name__)

BASE_URL = "https://adventofcode.com"
USER_AGENT = "aocgraph (participation chart renderer)"


def leaderboard_url(year: int, leaderboard_id: int) -> str:
    return f"{BASE_URL}/{year}/leaderboard/private/view/{leaderboard_id}.json"


def parse_day_series(payload: Mapping[str, Any]) -> DaySeries:
    if not isinstance(payload, Mapping):
        raise ParseError(f"Leaderboard payload must be an object, got {type(payload).__name__}")
    members = payload.get("members")
    if not isinstance(members, Mapping):
        raise ParseError("Leaderboard payload has no 'members' object")

    total = len(members)
    both = [0] * MAX_DAYS
    one = [0] * MAX_DAYS
    for member_id, member in members.items():
        if not isinstance(member, Mapping):
            raise ParseError(f"Member {member_id} is not an object")
        completion = member.get("completion_day_level") or {}
        if not isinstance(completion, Mapping):
            raise ParseError(f"Member {member_id} has a malformed 'completion_day_level'")
        for day_key, parts in completion.items():
            try:
                day = int(day_key)
            except (TypeError, ValueError) as exc:
                raise ParseError(f"Member {member_id} has an invalid day key {day_key!r}") from exc
            if not 1 <= day <= MAX_DAYS:
                raise ParseError(f"Member {member_id} has day {day} outside 1..{MAX_DAYS}")
            if not isinstance(parts, Mapping):
                raise ParseError(f"Member {member_id} day {day} is not an object")
            if "2" in parts:
                both[day - 1] += 1
            elif "1" in parts:
                one[day - 1] += 1

    return DaySeries(
        DayRecord(day, both[day - 1], one[day - 1], total - both[day - 1] - one[day - 1])
        for day in range(1, MAX_DAYS + 1)
    )


def fetch_day_series(year: int, leaderboard_id: int, session_token: str, timeout: int = 10) -> DaySeries:
    """Download a private leaderboard and count stars per day.

    Raises:
        FetchError: network failure, HTTP error or a rejected session
        ParseError: body is not the expected JSON document
    """
    url = leaderboard_url(year, leaderboard_id)
    logger.info("Fetching leaderboard %s for %s", leaderboard_id, year)
    try:
        response = requests.get(
            url,
            cookies={"session": session_token},
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            allow_redirects=False,
        )
    except requests.exceptions.RequestException as exc:
        logger.error("Leaderboard request failed: %s", exc)
        raise FetchError(f"Request to {url} failed: {exc}") from exc

    # An expired session is answered with a redirect to the login page
    if response.is_redirect or 300 <= response.status_code < 400:
        raise FetchError(f"Leaderboard {leaderboard_id} redirected; the session token was rejected")
    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as exc:
        raise FetchError(f"Leaderboard {leaderboard_id} returned HTTP {response.status_code}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(f"Leaderboard {leaderboard_id} did not return JSON") from exc
    series = parse_day_series(payload)
    logger.info("Leaderboard %s has %s participants", leaderboard_id, series.participants)
    return series
