"""Manual pick entry and CSV loading.

Used to preview a bracket from a prepared pick sheet instead of entering
picks one at a time.
"""

import pandas as pd

from exceptions import InvalidPickError
from models.matchup import SLOTS


def load_picks_from_csv(filepath: str) -> dict[str, str]:
    """Load hypothetical picks from a user-prepared CSV.

    Expected columns: matchup_id, slot
    Slot must be team1 or team2. Blank slots are skipped.
    """
    try:
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
    except FileNotFoundError as e:
        raise InvalidPickError(f"Picks file not found: {filepath}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise InvalidPickError(f"{filepath} is not a readable picks CSV: {e}") from e
    picks = {}

    for _, row in df.iterrows():
        matchup_id = str(row.iloc[0]).strip()
        slot = str(row.iloc[1]).strip().lower() if len(row) > 1 else ""
        if not matchup_id or not slot:
            continue
        if slot not in SLOTS:
            raise InvalidPickError(f"{filepath}: invalid slot {slot!r} for {matchup_id}")
        picks[matchup_id] = slot

    print(f"Loaded {len(picks)} picks from {filepath}")
    return picks


def parse_pick_args(values: list[str] | None) -> dict[str, str]:
    """Parse ``--pick afc-wc-1=team2`` style arguments."""
    picks = {}
    for value in values or []:
        matchup_id, sep, slot = value.partition("=")
        slot = slot.strip().lower()
        if not sep or slot not in SLOTS:
            raise InvalidPickError(f"Bad pick {value!r}; expected MATCHUP_ID=team1|team2")
        picks[matchup_id.strip()] = slot
    return picks
