# tests/conftest.py
import pytest

import config
from engine.compiler import compile_bracket
from ingestion.bracket_loader import load_bracket_from_json
from models.bracket import NFL_SCHEMA
from models.team import Team

# 2025-26 playoff field: seed -> (name, team_id)
AFC_FIELD = {
    1: ("Broncos", "denver-broncos"),
    2: ("Patriots", "new-england-patriots"),
    3: ("Jaguars", "jacksonville-jaguars"),
    4: ("Steelers", "pittsburgh-steelers"),
    5: ("Texans", "houston-texans"),
    6: ("Bills", "buffalo-bills"),
    7: ("Chargers", "los-angeles-chargers"),
}
NFC_FIELD = {
    1: ("Seahawks", "seattle-seahawks"),
    2: ("Bears", "chicago-bears"),
    3: ("Eagles", "philadelphia-eagles"),
    4: ("Panthers", "carolina-panthers"),
    5: ("Rams", "los-angeles-rams"),
    6: ("49ers", "san-francisco-49ers"),
    7: ("Packers", "green-bay-packers"),
}
FIELDS = {config.AFC: AFC_FIELD, config.NFC: NFC_FIELD}

# Wild-card pairings by game number: (team1 seed, team2 seed)
WILD_CARD_PAIRS = {1: (4, 5), 2: (3, 6), 3: (2, 7)}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that touch files or the CLI")


@pytest.fixture
def schema():
    return NFL_SCHEMA


@pytest.fixture
def make_team():
    """Factory: make_team("AFC", 6) -> Bills."""
    def _make(conference, seed, score=None):
        name, team_id = FIELDS[conference][seed]
        return Team(seed=seed, name=name, team_id=team_id, score=score)
    return _make


@pytest.fixture
def open_base(schema, make_team):
    """Every wild-card game set but unplayed; later rounds TBD."""
    byes = {conf: make_team(conf, 1) for conf in schema.conferences}
    base = schema.empty_bracket(byes)
    for conf in schema.conferences:
        for game, (s1, s2) in WILD_CARD_PAIRS.items():
            matchup = base.matchups[config.wild_card_id(conf, game)]
            matchup.team1 = make_team(conf, s1)
            matchup.team2 = make_team(conf, s2)
    return base


@pytest.fixture
def completed_base():
    """The bundled 2025-26 snapshot: all six wild-card games final."""
    return load_bracket_from_json(config.DEFAULT_BRACKET_FILE)


@pytest.fixture
def play():
    """Factory: record a real result for a game whose teams are already known."""
    def _play(base, matchup_id, score1, score2):
        resolved = compile_bracket(base, {}).matchup(matchup_id)
        assert resolved.is_populated, f"{matchup_id} has no teams yet"
        updated = base.copy()
        matchup = updated.matchups[matchup_id]
        matchup.team1 = Team(resolved.team1.seed, resolved.team1.name, resolved.team1.team_id, score1)
        matchup.team2 = Team(resolved.team2.seed, resolved.team2.name, resolved.team2.team_id, score2)
        matchup.completed = True
        return updated
    return _play
