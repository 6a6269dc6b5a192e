"""Bracket compiler: snapshot + picks -> resolved bracket.

Runs the whole pipeline on a fresh copy of the snapshot every time it is
called. The bracket is small enough that a full recompute after each pick is
simpler than patching the previous result.
"""

import logging
from collections.abc import Mapping

import config
from engine.progression import propagate
from engine.reseeding import reseed_conference
from engine.resolver import resolve
from models.bracket import BaseBracket, BracketSchema, DerivedBracket, NFL_SCHEMA

logger = logging.getLogger(__name__)


def compile_bracket(base: BaseBracket, picks: Mapping[str, str],
                    schema: BracketSchema = NFL_SCHEMA) -> DerivedBracket:
    """Resolve the full bracket from a snapshot and a pick overlay.

    Pure and deterministic: ``base`` is never mutated, and repeated calls with
    equal inputs return equal results.

    Args:
        base: Snapshot of real games
        picks: {matchup_id: slot} hypothetical picks, or a PickOverlay
        schema: Bracket topology

    Returns:
        DerivedBracket with every game's teams, winners, applied picks and champion
    """
    picks = dict(picks)
    working = base.copy()

    for conference in schema.conferences:
        reseed_conference(working, conference, picks, schema)

    propagate(working, picks, schema)

    matchups = {mid: working.matchups[mid] for mid in schema.ids() if mid in working.matchups}
    winners = {mid: resolve(m, picks) for mid, m in matchups.items()}
    applied = {
        mid: slot for mid, slot in picks.items()
        if mid in matchups and matchups[mid].is_populated and not matchups[mid].completed
    }

    sb = matchups.get(config.SUPER_BOWL_ID)
    champion = resolve(sb, picks) if sb is not None else None

    stale = len(picks) - len(applied)
    if stale:
        logger.debug("Ignored %d stale pick(s)", stale)

    return DerivedBracket(matchups=matchups, winners=winners, picks=applied, champion=champion)
