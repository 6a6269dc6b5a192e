"""User pick overlay with cascading invalidation.

Picks are hypothetical winners for games that have not been played. When a
pick changes, every pick that was made on top of it is cleared, since the
teams in those later games may no longer be the same.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from exceptions import InvalidPickError
from models.bracket import (BracketSchema, DerivedBracket, LinearEdge,
                            NFL_SCHEMA, ReseededGroupEdge)
from models.matchup import SLOTS

logger = logging.getLogger(__name__)


class PickOverlay(Mapping):
    """Mapping of matchup id -> picked slot ("team1" / "team2")."""

    def __init__(self, schema: BracketSchema = NFL_SCHEMA,
                 picks: Mapping[str, str] | None = None):
        self.schema = schema
        self._picks: dict[str, str] = {}
        for matchup_id, slot in (picks or {}).items():
            if matchup_id not in schema:
                continue
            self._check_slot(slot)
            self._picks[matchup_id] = slot

    def __getitem__(self, matchup_id: str) -> str:
        return self._picks[matchup_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._picks)

    def __len__(self) -> int:
        return len(self._picks)

    def __repr__(self):
        return f"PickOverlay({self._picks!r})"

    def as_dict(self) -> dict[str, str]:
        return dict(self._picks)

    def set_pick(self, matchup_id: str, slot: str):
        """Pick ``slot`` to win ``matchup_id``; picking the same slot again deselects it.

        Either way, every pick downstream of the game is cleared. Unknown
        matchup ids are ignored.
        """
        if matchup_id not in self.schema:
            logger.debug("Ignoring pick for unknown matchup %s", matchup_id)
            return
        self._check_slot(slot)

        if self._picks.get(matchup_id) == slot:
            del self._picks[matchup_id]
        else:
            self._picks[matchup_id] = slot
        self.invalidate_downstream(matchup_id)

    def clear(self):
        """Reset all picks."""
        self._picks.clear()

    def invalidate_downstream(self, matchup_id: str):
        """Clear every pick that depends on the outcome of ``matchup_id``."""
        edge = self.schema.edge(matchup_id)
        if isinstance(edge, ReseededGroupEdge):
            # Divisional pairings depend on all three wild-card results at once
            for target in edge.targets:
                self._discard(target)
        elif isinstance(edge, LinearEdge):
            self._discard(edge.target)
            self.invalidate_downstream(edge.target)

    def prune(self, derived: DerivedBracket):
        """Drop picks the compiler could not apply (TBD or completed games)."""
        for matchup_id in list(self._picks):
            if matchup_id not in derived.picks:
                self._discard(matchup_id)

    def _discard(self, matchup_id: str):
        if self._picks.pop(matchup_id, None) is not None:
            logger.debug("Cleared downstream pick %s", matchup_id)

    @staticmethod
    def _check_slot(slot: str):
        if slot not in SLOTS:
            raise InvalidPickError(f"Invalid slot {slot!r}; expected one of {', '.join(SLOTS)}")
