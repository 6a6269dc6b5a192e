"""Bracket data structures.

The NFL playoff bracket has 13 games: per conference three wild-card games,
two divisional games and a conference championship, plus the Super Bowl.
The #1 seed of each conference gets a bye and enters in the divisional round.

Ids follow a fixed pattern:
- ``afc-wc-1`` .. ``afc-wc-3``: wild card
- ``afc-div-1``: divisional game hosted by the #1 seed (divisional A)
- ``afc-div-2``: the other divisional game (divisional B)
- ``afc-conf``: conference championship
- ``superbowl``

Progression between rounds comes in two kinds:
- Wild card -> divisional is a reseeded group. The divisional pairings depend
  on all three wild-card results together, so every wild-card game points at
  the whole set of downstream games of its conference.
- Divisional -> conference and conference -> Super Bowl are linear: the winner
  of the source game fills one slot of the target game.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import config
from models.matchup import Matchup, TEAM1, TEAM2
from models.team import Team


@dataclass(frozen=True)
class LinearEdge:
    """Winner of ``source`` fills ``slot`` of ``target``."""
    source: str
    target: str
    slot: str


@dataclass(frozen=True)
class ReseededGroupEdge:
    """A wild-card game's outcome feeds every game in ``targets`` jointly."""
    conference: str
    targets: tuple[str, ...]


Edge = LinearEdge | ReseededGroupEdge


@dataclass(frozen=True)
class MatchupInfo:
    id: str
    round: str
    conference: str | None


class BracketSchema:
    """Fixed topology of the bracket: which games exist and how they connect."""

    def __init__(self, conferences: list[str] | None = None):
        self.conferences = list(conferences or config.CONFERENCES)
        self._info: dict[str, MatchupInfo] = {}
        self._edges: dict[str, Edge] = {}

        for conf in self.conferences:
            for game in range(1, config.WILD_CARD_GAMES_PER_CONFERENCE + 1):
                self._add(config.wild_card_id(conf, game), config.WILD_CARD, conf)
        for conf in self.conferences:
            for game in range(1, config.DIVISIONAL_GAMES_PER_CONFERENCE + 1):
                self._add(config.divisional_id(conf, game), config.DIVISIONAL, conf)
        for conf in self.conferences:
            self._add(config.championship_id(conf), config.CONFERENCE_CHAMPIONSHIP, conf)
        self._add(config.SUPER_BOWL_ID, config.SUPER_BOWL, None)

        for index, conf in enumerate(self.conferences):
            downstream = tuple(self.divisional_ids(conf)) + (
                config.championship_id(conf), config.SUPER_BOWL_ID)
            group = ReseededGroupEdge(conference=conf, targets=downstream)
            for wc_id in self.wild_card_ids(conf):
                self._edges[wc_id] = group

            div_a, div_b = self.divisional_ids(conf)
            conf_id = config.championship_id(conf)
            self._edges[div_a] = LinearEdge(div_a, conf_id, TEAM1)
            self._edges[div_b] = LinearEdge(div_b, conf_id, TEAM2)
            # First conference fills team1 of the Super Bowl
            sb_slot = TEAM1 if index == 0 else TEAM2
            self._edges[conf_id] = LinearEdge(conf_id, config.SUPER_BOWL_ID, sb_slot)

    def _add(self, matchup_id: str, round_name: str, conference: str | None):
        self._info[matchup_id] = MatchupInfo(matchup_id, round_name, conference)

    def __contains__(self, matchup_id) -> bool:
        return matchup_id in self._info

    def matchups(self) -> list[MatchupInfo]:
        """All games, ordered by round."""
        return list(self._info.values())

    def ids(self) -> list[str]:
        return list(self._info)

    def edge(self, matchup_id: str) -> Edge | None:
        """Where the outcome of a game flows. None for the Super Bowl and unknown ids."""
        return self._edges.get(matchup_id)

    def round_of(self, matchup_id: str) -> str:
        return self._info[matchup_id].round

    def wild_card_ids(self, conference: str) -> list[str]:
        return [config.wild_card_id(conference, g)
                for g in range(1, config.WILD_CARD_GAMES_PER_CONFERENCE + 1)]

    def divisional_ids(self, conference: str) -> list[str]:
        """[divisional A (hosted by the bye team), divisional B]."""
        return [config.divisional_id(conference, g)
                for g in range(1, config.DIVISIONAL_GAMES_PER_CONFERENCE + 1)]

    def championship_id(self, conference: str) -> str:
        return config.championship_id(conference)

    def progression_edges(self) -> list[LinearEdge]:
        """Linear edges ordered by the round of their source game."""
        edges = [e for e in self._edges.values() if isinstance(e, LinearEdge)]
        order = {r: i for i, r in enumerate(config.ROUND_ORDER)}
        return sorted(edges, key=lambda e: order[self.round_of(e.source)])

    def feeders(self, target: str) -> list[LinearEdge]:
        """Linear edges that fill ``target``, team1 first."""
        edges = [e for e in self.progression_edges() if e.target == target]
        return sorted(edges, key=lambda e: e.slot)

    def empty_bracket(self, byes: dict[str, Team] | None = None) -> BaseBracket:
        """A snapshot with every game TBD."""
        matchups = {
            info.id: Matchup(id=info.id, round=info.round, conference=info.conference)
            for info in self.matchups()
        }
        return BaseBracket(matchups=matchups, byes=dict(byes or {}))


NFL_SCHEMA = BracketSchema()


@dataclass
class BaseBracket:
    """Snapshot of real games as known to the schedule source.

    ``byes`` maps each conference to its #1 seed.
    """
    matchups: dict[str, Matchup] = field(default_factory=dict)
    byes: dict[str, Team] = field(default_factory=dict)
    season: str | None = None

    def get(self, matchup_id: str) -> Matchup | None:
        return self.matchups.get(matchup_id)

    def copy(self) -> BaseBracket:
        """Structural copy. Matchups are cloned; teams are immutable and shared."""
        return BaseBracket(
            matchups={mid: m.copy() for mid, m in self.matchups.items()},
            byes=dict(self.byes),
            season=self.season,
        )


@dataclass
class DerivedBracket:
    """A resolved view of the bracket, rebuilt on every recompute.

    Attributes:
        matchups: every game with the teams that reach it
        winners: matchup id -> resolved winner (from a result or a pick)
        picks: the overlay entries that were applied
        champion: Super Bowl winner, if resolvable
    """
    matchups: dict[str, Matchup]
    winners: dict[str, Team | None]
    picks: dict[str, str]
    champion: Team | None = None

    def matchup(self, matchup_id: str) -> Matchup | None:
        return self.matchups.get(matchup_id)

    def by_round(self, round_name: str, conference: str | None = None) -> list[Matchup]:
        return [m for m in self.matchups.values()
                if m.round == round_name and (conference is None or m.conference == conference)]

    def can_pick(self, matchup_id: str) -> bool:
        """A game can take a pick once both teams are known and it is not played."""
        m = self.matchups.get(matchup_id)
        return m is not None and m.is_populated and not m.completed

    @property
    def champion_from_pick(self) -> bool:
        sb = self.matchups.get(config.SUPER_BOWL_ID)
        return self.champion is not None and sb is not None and not sb.completed

    def to_dict(self) -> dict:
        games = []
        for m in self.matchups.values():
            winner = self.winners.get(m.id)
            games.append({
                "id": m.id,
                "round": m.round,
                "conference": m.conference,
                "team1": m.team1.to_dict() if m.team1 else None,
                "team2": m.team2.to_dict() if m.team2 else None,
                "completed": m.completed,
                "pick": self.picks.get(m.id),
                "winner": winner.to_dict() if winner else None,
            })
        return {
            "matchups": games,
            "champion": self.champion.to_dict() if self.champion else None,
        }
