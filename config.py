"""Central configuration for the NFL playoff bracket engine."""

import os

# Conferences
AFC = "AFC"
NFC = "NFC"
CONFERENCES = [AFC, NFC]

# Rounds, in the order they are played
WILD_CARD = "WildCard"
DIVISIONAL = "Divisional"
CONFERENCE_CHAMPIONSHIP = "ConferenceChampionship"
SUPER_BOWL = "SuperBowl"
ROUND_ORDER = [WILD_CARD, DIVISIONAL, CONFERENCE_CHAMPIONSHIP, SUPER_BOWL]

ROUND_LABELS = {
    WILD_CARD: "Wild Card",
    DIVISIONAL: "Divisional",
    CONFERENCE_CHAMPIONSHIP: "Conference Championship",
    SUPER_BOWL: "Super Bowl",
}

# Bracket structure
WILD_CARD_GAMES_PER_CONFERENCE = 3
DIVISIONAL_GAMES_PER_CONFERENCE = 2
BYE_SEED = 1
MAX_SEED = 7

SUPER_BOWL_ID = "superbowl"


def wild_card_id(conference: str, game: int) -> str:
    """Matchup id for a wild-card game, e.g. ``afc-wc-1``."""
    return f"{conference.lower()}-wc-{game}"


def divisional_id(conference: str, game: int) -> str:
    """Matchup id for a divisional game. Game 1 hosts the bye team."""
    return f"{conference.lower()}-div-{game}"


def championship_id(conference: str) -> str:
    return f"{conference.lower()}-conf"


# Files
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
STATE_FILE = os.path.join(DATA_DIR, "state.pkl")
DEFAULT_BRACKET_FILE = os.path.join(DATA_DIR, "playoffs_2025_26.json")

# ESPN scoreboard (seasontype 3 = postseason)
ESPN_SCOREBOARD_URL = "https://site.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard"
ESPN_POSTSEASON_TYPE = 3
REQUEST_TIMEOUT = 30

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
