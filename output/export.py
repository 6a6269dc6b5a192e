"""Export a resolved bracket as CSV or JSON."""

import csv
import json
import os

from models.bracket import DerivedBracket


def export_bracket_csv(bracket: DerivedBracket, filepath: str):
    """Export one row per game.

    Columns: matchup_id, round, conference, team1, team2, completed, pick, winner
    """
    _ensure_dir(filepath)
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["matchup_id", "round", "conference", "team1", "team2",
                         "completed", "pick", "winner"])

        for matchup in bracket.matchups.values():
            winner = bracket.winners.get(matchup.id)
            writer.writerow([
                matchup.id,
                matchup.round,
                matchup.conference or "",
                matchup.team1.name if matchup.team1 else "TBD",
                matchup.team2.name if matchup.team2 else "TBD",
                matchup.completed,
                bracket.picks.get(matchup.id, ""),
                winner.name if winner else "",
            ])

    print(f"Exported {len(bracket.matchups)} games to {filepath}")


def export_bracket_json(bracket: DerivedBracket, filepath: str):
    _ensure_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(bracket.to_dict(), f, indent=2)
    print(f"Exported bracket to {filepath}")


def _ensure_dir(filepath: str):
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
