"""ESPN scoreboard ingestion.

Pulls postseason results from ESPN's public NFL scoreboard endpoint and
folds them into a bracket snapshot. Free, no auth required. This is a
one-shot refresh: the result becomes the new snapshot for the session.
"""

import json
import os
import re
from dataclasses import dataclass

import requests

import config
from engine.compiler import compile_bracket
from exceptions import ScoreboardError
from models.bracket import BaseBracket
from models.team import Team

RAW_DIR = os.path.join(config.DATA_DIR, "raw")


@dataclass(frozen=True)
class GameResult:
    home_id: str
    away_id: str
    home_score: int | None
    away_score: int | None
    completed: bool


def fetch_playoff_results(season: int, week: int | None = None,
                          save: bool = False) -> list[GameResult]:
    """Fetch postseason games from the ESPN scoreboard.

    Args:
        season: Season year (e.g. 2025 for the 2025-26 season)
        week: Postseason week (1 = wild card ... 5 = Super Bowl); all weeks if None
        save: Whether to save the raw JSON to data/raw/

    Returns:
        List of GameResult, one per game on the scoreboard
    """
    params = {"seasontype": config.ESPN_POSTSEASON_TYPE, "dates": season}
    if week is not None:
        params["week"] = week
    print(f"Fetching ESPN scoreboard for {season} postseason...")

    headers = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    }
    try:
        resp = requests.get(config.ESPN_SCOREBOARD_URL, params=params,
                            headers=headers, timeout=config.REQUEST_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        raise ScoreboardError(f"Could not fetch ESPN scoreboard: {e}") from e
    except ValueError as e:
        raise ScoreboardError(f"ESPN scoreboard returned invalid JSON: {e}") from e

    if save:
        os.makedirs(RAW_DIR, exist_ok=True)
        path = os.path.join(RAW_DIR, f"espn_scoreboard_{season}.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    return parse_scoreboard(data)


def parse_scoreboard(data: dict) -> list[GameResult]:
    """Parse the events of an ESPN scoreboard response."""
    results = []
    for event in data.get("events", []):
        competitions = event.get("competitions") or []
        if not competitions:
            continue
        competitors = competitions[0].get("competitors", [])
        home = next((c for c in competitors if c.get("homeAway") == "home"), None)
        away = next((c for c in competitors if c.get("homeAway") == "away"), None)
        if home is None or away is None:
            continue

        status = (event.get("status") or competitions[0].get("status") or {}).get("type", {})
        results.append(GameResult(
            home_id=team_slug(home.get("team", {}).get("displayName", "")),
            away_id=team_slug(away.get("team", {}).get("displayName", "")),
            home_score=_parse_score(home.get("score")),
            away_score=_parse_score(away.get("score")),
            completed=bool(status.get("completed", False)),
        ))

    if not results:
        print("Warning: No games found on the ESPN scoreboard.")

    return results


def apply_results(base: BaseBracket, results: list[GameResult]) -> BaseBracket:
    """Return a new snapshot with completed results written into matching games.

    Pairings for later rounds are taken from the bracket resolved on real
    results alone, so a divisional result can land once the wild-card round
    is final. A game matches a result when its two team ids are the result's
    home and away teams, in either slot order. Games whose teams are not yet
    known are left alone. Passes repeat until one applies nothing, so a whole
    postseason lands in one call.
    """
    updated = base.copy()
    by_pair = {frozenset((r.home_id, r.away_id)): r for r in results if r.completed}

    applied = 0
    changed = True
    while changed:
        changed = False
        resolved = compile_bracket(updated, {})
        for matchup_id, matchup in updated.matchups.items():
            current = resolved.matchup(matchup_id)
            if matchup.completed or current is None or not current.is_populated:
                continue
            result = by_pair.get(frozenset((current.team1.team_id, current.team2.team_id)))
            if result is None or result.home_score is None or result.away_score is None:
                continue
            if result.home_score == result.away_score:
                print(f"Warning: Skipping tied result for {matchup_id}")
                continue

            scores = {result.home_id: result.home_score, result.away_id: result.away_score}
            matchup.team1 = _with_score(current.team1, scores[current.team1.team_id])
            matchup.team2 = _with_score(current.team2, scores[current.team2.team_id])
            matchup.completed = True
            applied += 1
            changed = True

    print(f"Applied {applied} completed result(s) to the bracket")
    return updated


def team_slug(display_name: str) -> str:
    """'San Francisco 49ers' -> 'san-francisco-49ers'."""
    return re.sub(r"[^a-z0-9]+", "-", display_name.lower()).strip("-")


def _parse_score(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _with_score(team: Team, score: int) -> Team:
    return Team(seed=team.seed, name=team.name, team_id=team.team_id, score=score)
