"""Fixed progression for the rounds after reseeding.

Divisional winners fill the conference championship, conference champions
fill the Super Bowl. Edges are walked in round order because each stage
reads the winners the previous stage just placed.
"""

import logging
from collections.abc import Mapping

from engine.resolver import resolve
from models.bracket import BaseBracket, BracketSchema, NFL_SCHEMA

logger = logging.getLogger(__name__)


def propagate(bracket: BaseBracket, picks: Mapping[str, str],
              schema: BracketSchema = NFL_SCHEMA):
    """Copy resolved winners along every linear edge, in round order.

    A target game is filled only when every game feeding it is resolved, so
    a game never shows one known team and one TBD; an unplayed target whose
    feeders are open goes back to TBD. Mutates ``bracket``.
    """
    targets = []
    for edge in schema.progression_edges():
        if edge.target not in targets:
            targets.append(edge.target)

    for target_id in targets:
        target = bracket.get(target_id)
        if target is None or target.completed:
            continue

        placements = []
        for feeder in schema.feeders(target_id):
            source = bracket.get(feeder.source)
            winner = resolve(source, picks) if source is not None else None
            placements.append((feeder.slot, winner))

        if any(winner is None for _, winner in placements):
            logger.debug("%s waits on an unresolved feeder game", target_id)
            target.reset()
            continue

        for slot, winner in placements:
            existing = target.team(slot)
            if existing is not None and existing.score is not None:
                logger.debug("Not overwriting scored slot %s.%s", target_id, slot)
                continue
            target.set_team(slot, winner.entrant())
