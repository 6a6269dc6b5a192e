"""
Custom exceptions for the playoff bracket engine.
"""


class BracketError(Exception):
    """Base exception for all custom errors."""
    pass


# Snapshot errors
class InvalidBracketError(BracketError):
    """Raised when a bracket snapshot is malformed."""
    pass


class TiedScoreError(InvalidBracketError):
    """Raised when a completed matchup has equal scores."""
    def __init__(self, matchup_id: str = None, score: int = None):
        self.matchup_id = matchup_id
        self.score = score
        msg = "Completed matchup cannot end tied"
        if matchup_id:
            msg += f": {matchup_id}"
        if score is not None:
            msg += f" ({score}-{score})"
        super().__init__(msg)


# Pick errors
class InvalidPickError(BracketError):
    """Raised when a pick names a slot other than team1/team2."""
    pass


# Ingestion errors
class ScoreboardError(BracketError):
    """Raised when the ESPN scoreboard cannot be fetched or parsed."""
    pass
