"""Winner resolution for a single game."""

from collections.abc import Mapping

from exceptions import TiedScoreError
from models.matchup import Matchup, TEAM1, TEAM2
from models.team import Team


def resolve(matchup: Matchup, picks: Mapping[str, str]) -> Team | None:
    """Decide the winner of a game, if it can be decided.

    A real result always wins over a pick. A pick only counts once both
    teams are known.

    Args:
        matchup: The game to resolve
        picks: {matchup_id: "team1" | "team2"} hypothetical picks

    Returns:
        The winning team, or None while the game is undecided

    Raises:
        TiedScoreError: if a completed game has equal scores
    """
    if matchup.completed:
        if not matchup.has_final_score():
            return None
        s1, s2 = matchup.team1.score, matchup.team2.score
        if s1 == s2:
            raise TiedScoreError(matchup.id, s1)
        return matchup.team1 if s1 > s2 else matchup.team2

    pick = picks.get(matchup.id)
    if pick is None or not matchup.is_populated:
        return None
    if pick == TEAM1:
        return matchup.team1
    if pick == TEAM2:
        return matchup.team2
    return None
