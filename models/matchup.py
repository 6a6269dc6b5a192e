"""Matchup data model.

A matchup is one playoff game. Its two team slots are either both empty
("TBD") or both filled. Once ``completed`` is set, the scores on the two
teams are the real result and nothing downstream may change it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from models.team import Team

TEAM1 = "team1"
TEAM2 = "team2"
SLOTS = (TEAM1, TEAM2)


@dataclass
class Matchup:
    id: str
    round: str
    conference: str | None
    team1: Team | None = None
    team2: Team | None = None
    completed: bool = False
    # Display only
    date: str | None = None
    venue: str | None = None

    @property
    def is_tbd(self) -> bool:
        return self.team1 is None and self.team2 is None

    @property
    def is_populated(self) -> bool:
        return self.team1 is not None and self.team2 is not None

    def team(self, slot: str) -> Team | None:
        if slot == TEAM1:
            return self.team1
        if slot == TEAM2:
            return self.team2
        raise ValueError(f"Invalid slot: {slot}")

    def set_team(self, slot: str, team: Team | None):
        if slot == TEAM1:
            self.team1 = team
        elif slot == TEAM2:
            self.team2 = team
        else:
            raise ValueError(f"Invalid slot: {slot}")

    def has_final_score(self) -> bool:
        return (self.completed
                and self.team1 is not None and self.team1.score is not None
                and self.team2 is not None and self.team2.score is not None)

    def reset(self) -> bool:
        """Put an unplayed game back to TBD. Games carrying a score are left alone."""
        if self.completed or any(t is not None and t.score is not None
                                 for t in (self.team1, self.team2)):
            return False
        self.team1 = None
        self.team2 = None
        return True

    def copy(self) -> Matchup:
        # Team is frozen, so sharing team instances between copies is safe
        return replace(self)

    def __str__(self):
        t1 = str(self.team1) if self.team1 else "TBD"
        t2 = str(self.team2) if self.team2 else "TBD"
        return f"{self.id}: {t1} vs {t2}"
