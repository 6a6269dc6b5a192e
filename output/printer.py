"""Pretty-print bracket output."""

from tabulate import tabulate

import config
from models.bracket import DerivedBracket
from models.matchup import Matchup, TEAM1, TEAM2


def print_bracket(bracket: DerivedBracket, title: str = "NFL PLAYOFF BRACKET"):
    """Print the resolved bracket, conference by conference.

    Args:
        bracket: A compiled bracket
        title: Banner text
    """
    print("\n" + "=" * 60)
    print(f"           {title}")
    print("=" * 60)

    conferences = [c for c in config.CONFERENCES
                   if any(m.conference == c for m in bracket.matchups.values())]
    for conference in conferences:
        print(f"\n--- {conference} ---")
        for round_name in config.ROUND_ORDER[:-1]:
            games = bracket.by_round(round_name, conference)
            if not games:
                continue
            print(f"\n  {config.ROUND_LABELS[round_name]}:")
            for matchup in games:
                print(f"    {format_matchup(bracket, matchup)}")

    print(f"\n{'=' * 60}")
    print("           SUPER BOWL")
    print("=" * 60)
    sb = bracket.matchup(config.SUPER_BOWL_ID)
    if sb is not None:
        print(f"\n  {format_matchup(bracket, sb)}")

    label = "YOUR WINNER" if bracket.champion_from_pick else "CHAMPION"
    print(f"\n  {label}: {bracket.champion if bracket.champion else 'TBD'}")
    print("\n" + "=" * 60)


def format_matchup(bracket: DerivedBracket, matchup: Matchup) -> str:
    """One line per game: teams, scores, the pick marker and the winner."""
    pick = bracket.picks.get(matchup.id)
    sides = []
    for slot in (TEAM1, TEAM2):
        team = matchup.team(slot)
        text = str(team) if team else "TBD"
        if team is not None and team.score is not None:
            text += f" {team.score}"
        if pick == slot:
            text += " *"
        sides.append(text)

    line = f"{sides[0]} vs {sides[1]}"
    winner = bracket.winners.get(matchup.id)
    if winner:
        line += f"  ->  {winner}"
    return line


def print_summary_table(bracket: DerivedBracket):
    """Print every game in a table with its status."""
    print("\n=== BRACKET SUMMARY ===\n")

    rows = []
    for matchup in bracket.matchups.values():
        winner = bracket.winners.get(matchup.id)
        if matchup.completed:
            status = "Final"
        elif matchup.id in bracket.picks:
            status = "Picked"
        elif bracket.can_pick(matchup.id):
            status = "Open"
        else:
            status = "TBD"
        rows.append([
            matchup.id,
            config.ROUND_LABELS.get(matchup.round, matchup.round),
            str(matchup.team1) if matchup.team1 else "TBD",
            str(matchup.team2) if matchup.team2 else "TBD",
            status,
            str(winner) if winner else "",
        ])

    headers = ["Game", "Round", "Team 1", "Team 2", "Status", "Winner"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
