"""Wild card -> divisional reseeding.

The divisional round is not a fixed continuation of the wild-card games.
Once all three wild-card games of a conference are decided, the weakest
surviving seed travels to the #1 seed, and the other two winners play each
other. Until then both divisional games stay TBD.
"""

import logging
from collections.abc import Mapping

from engine.resolver import resolve
from models.bracket import BaseBracket, BracketSchema, NFL_SCHEMA
from models.matchup import Matchup, TEAM1, TEAM2
from models.team import Team

logger = logging.getLogger(__name__)


def reseed_conference(bracket: BaseBracket, conference: str,
                      picks: Mapping[str, str],
                      schema: BracketSchema = NFL_SCHEMA) -> bool:
    """Fill a conference's divisional games from its wild-card winners.

    Mutates ``bracket`` in place; callers pass a working copy.

    Returns:
        True if the divisional games were paired, False if left TBD
    """
    winners = []
    for wc_id in schema.wild_card_ids(conference):
        matchup = bracket.get(wc_id)
        if matchup is None:
            continue
        winner = resolve(matchup, picks)
        if winner is not None:
            winners.append(winner)

    div_games = [bracket.get(mid) for mid in schema.divisional_ids(conference)]
    bye_team = bracket.byes.get(conference)

    if len(winners) < len(schema.wild_card_ids(conference)):
        logger.debug("%s: %d of %d wild-card games resolved, divisional round stays TBD",
                     conference, len(winners), len(schema.wild_card_ids(conference)))
        _reset_all(div_games)
        return False
    if bye_team is None:
        logger.debug("%s: no bye team in snapshot, divisional round stays TBD", conference)
        _reset_all(div_games)
        return False

    div_a, div_b = div_games
    if div_a is None or div_b is None:
        _reset_all(div_games)
        return False

    ordered = sorted(winners, key=lambda t: t.seed)
    weakest = ordered[-1]

    _place_pair(div_a, bye_team, weakest)
    _place_pair(div_b, ordered[0], ordered[1])
    logger.debug("%s reseeded: %s | %s", conference, div_a, div_b)
    return True


def _reset_all(matchups: list[Matchup | None]):
    for matchup in matchups:
        if matchup is not None and matchup.reset():
            logger.debug("%s reset to TBD", matchup.id)


def _place_pair(matchup: Matchup, team1: Team, team2: Team):
    """Seat two teams in a game unless a real result already sits there."""
    if matchup.completed:
        return
    for slot, team in ((TEAM1, team1), (TEAM2, team2)):
        existing = matchup.team(slot)
        if existing is not None and existing.score is not None:
            logger.debug("Not overwriting scored slot %s.%s", matchup.id, slot)
            continue
        matchup.set_team(slot, team.entrant())
