"""Bracket loader - read and write the playoff snapshot.

Supports:
1. JSON file input
2. Programmatic construction from a dict

Round and conference come from the bracket schema, so the file only needs
ids, teams, and results.
"""

import json
import os

import config
from exceptions import InvalidBracketError, TiedScoreError
from models.bracket import BaseBracket, BracketSchema, NFL_SCHEMA
from models.matchup import Matchup
from models.team import Team


def load_bracket_from_json(filepath: str, schema: BracketSchema = NFL_SCHEMA) -> BaseBracket:
    """Load a bracket snapshot from a JSON file.

    Expected format:
    {
        "season": "2025-26",
        "byes": {"AFC": {"seed": 1, "name": "Broncos", "team_id": "denver-broncos"}, ...},
        "matchups": [
            {
                "id": "afc-wc-1",
                "team1": {"seed": 4, "name": "Steelers", "team_id": "pittsburgh-steelers", "score": 6},
                "team2": {"seed": 5, "name": "Texans", "team_id": "houston-texans", "score": 30},
                "completed": true,
                "date": "Mon, Jan 12"
            },
            ...
        ]
    }
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise InvalidBracketError(f"Bracket file not found: {filepath}") from e
    except json.JSONDecodeError as e:
        raise InvalidBracketError(f"{filepath} is not valid JSON: {e}") from e

    bracket = bracket_from_dict(data, schema)
    print(f"Loaded bracket from {filepath}: {sum(1 for m in bracket.matchups.values() if m.completed)} "
          f"of {len(bracket.matchups)} games completed")
    return bracket


def bracket_from_dict(data: dict, schema: BracketSchema = NFL_SCHEMA) -> BaseBracket:
    """Build and validate a snapshot from parsed JSON."""
    if not isinstance(data, dict) or not isinstance(data.get("matchups", []), list):
        raise InvalidBracketError("Snapshot must be an object with a 'matchups' list")
    if not isinstance(data.get("byes") or {}, dict):
        raise InvalidBracketError("'byes' must map conference -> team")

    byes = {}
    for conference, team_data in (data.get("byes") or {}).items():
        if conference not in schema.conferences:
            raise InvalidBracketError(f"Unknown conference in byes: {conference}")
        team = _parse_team(team_data, f"byes.{conference}")
        if team is not None and team.seed != config.BYE_SEED:
            raise InvalidBracketError(f"Bye team for {conference} must be seed {config.BYE_SEED}: {team}")
        if team is not None:
            byes[conference] = team

    given = {}
    for entry in data.get("matchups", []):
        if not isinstance(entry, dict):
            raise InvalidBracketError(f"Matchup entry must be an object: {entry!r}")
        matchup_id = entry.get("id")
        if not isinstance(matchup_id, str) or matchup_id not in schema:
            raise InvalidBracketError(f"Unknown matchup id: {matchup_id}")
        if matchup_id in given:
            raise InvalidBracketError(f"Duplicate matchup id: {matchup_id}")
        given[matchup_id] = entry

    matchups = {}
    for info in schema.matchups():
        entry = given.get(info.id)
        if entry is None:
            # A missing wild-card game stays missing; later rounds default to TBD
            if info.round == config.WILD_CARD:
                continue
            entry = {}
        matchup = Matchup(
            id=info.id,
            round=info.round,
            conference=info.conference,
            team1=_parse_team(entry.get("team1"), f"{info.id}.team1"),
            team2=_parse_team(entry.get("team2"), f"{info.id}.team2"),
            completed=bool(entry.get("completed", False)),
            date=entry.get("date"),
            venue=entry.get("venue"),
        )
        validate_matchup(matchup)
        matchups[info.id] = matchup

    bracket = BaseBracket(matchups=matchups, byes=byes, season=data.get("season"))
    validate_progression(bracket, schema)
    return bracket


def validate_matchup(matchup: Matchup):
    """Check the per-game invariants of a snapshot."""
    if matchup.team1 is None and matchup.team2 is not None \
            or matchup.team1 is not None and matchup.team2 is None:
        raise InvalidBracketError(f"{matchup.id} has only one team; use null for both or neither")

    if matchup.completed:
        if not matchup.is_populated:
            raise InvalidBracketError(f"{matchup.id} is completed but has no teams")
        if matchup.team1.score is None or matchup.team2.score is None:
            raise InvalidBracketError(f"{matchup.id} is completed but is missing a score")
        if matchup.team1.score == matchup.team2.score:
            raise TiedScoreError(matchup.id, matchup.team1.score)


def validate_progression(bracket: BaseBracket, schema: BracketSchema = NFL_SCHEMA):
    """A game after the wild-card round may hold teams only once every game feeding it is final."""
    for matchup in bracket.matchups.values():
        if matchup.round == config.WILD_CARD or matchup.is_tbd:
            continue
        if matchup.round == config.DIVISIONAL:
            if matchup.conference not in bracket.byes:
                raise InvalidBracketError(f"{matchup.id} has teams but {matchup.conference} has no bye team")
            feeder_ids = schema.wild_card_ids(matchup.conference)
        else:
            feeder_ids = [edge.source for edge in schema.feeders(matchup.id)]

        open_feeders = [mid for mid in feeder_ids
                        if mid not in bracket.matchups or not bracket.matchups[mid].completed]
        if open_feeders:
            raise InvalidBracketError(
                f"{matchup.id} has teams before {', '.join(open_feeders)} finished")


def bracket_to_dict(bracket: BaseBracket) -> dict:
    data = {"byes": {conf: team.to_dict() for conf, team in bracket.byes.items()}, "matchups": []}
    if bracket.season:
        data["season"] = bracket.season
    for m in bracket.matchups.values():
        entry = {
            "id": m.id,
            "team1": m.team1.to_dict() if m.team1 else None,
            "team2": m.team2.to_dict() if m.team2 else None,
            "completed": m.completed,
        }
        if m.date:
            entry["date"] = m.date
        if m.venue:
            entry["venue"] = m.venue
        data["matchups"].append(entry)
    return data


def save_bracket_to_json(bracket: BaseBracket, filepath: str):
    """Save a bracket snapshot to JSON."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(bracket_to_dict(bracket), f, indent=2)
    print(f"Saved bracket to {filepath}")


def _parse_team(data: dict | None, where: str) -> Team | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise InvalidBracketError(f"Bad team at {where}: {data!r}")
    try:
        team = Team.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidBracketError(f"Bad team at {where}: {data!r}") from e
    if not 1 <= team.seed <= config.MAX_SEED:
        raise InvalidBracketError(f"Seed out of range at {where}: {team.seed}")
    return team
