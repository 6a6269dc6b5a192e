"""Team data model."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Team:
    seed: int
    name: str
    team_id: str
    score: int | None = None  # Only set for completed real games

    def __str__(self):
        return f"({self.seed}) {self.name}"

    def entrant(self) -> "Team":
        """The same team without a score, as it enters its next game."""
        if self.score is None:
            return self
        return replace(self, score=None)

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        score = data.get("score")
        team_id = data.get("team_id") or data.get("teamId")
        if not team_id:
            raise KeyError("team_id")
        return cls(
            seed=int(data["seed"]),
            name=str(data["name"]),
            team_id=str(team_id),
            score=int(score) if score is not None else None,
        )

    def to_dict(self) -> dict:
        data = {"seed": self.seed, "name": self.name, "team_id": self.team_id}
        if self.score is not None:
            data["score"] = self.score
        return data
