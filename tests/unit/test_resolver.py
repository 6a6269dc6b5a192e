"""
Unit tests for winner resolution.
"""
import pytest

from engine.resolver import resolve
from exceptions import TiedScoreError
from models.matchup import Matchup
from models.team import Team


@pytest.fixture
def jaguars():
    return Team(3, "Jaguars", "jacksonville-jaguars")


@pytest.fixture
def bills():
    return Team(6, "Bills", "buffalo-bills")


def _game(team1, team2, completed=False, scores=None):
    if scores:
        team1 = Team(team1.seed, team1.name, team1.team_id, scores[0])
        team2 = Team(team2.seed, team2.name, team2.team_id, scores[1])
    return Matchup(id="afc-wc-2", round="WildCard", conference="AFC",
                   team1=team1, team2=team2, completed=completed)


class TestResolve:

    def test_completed_higher_score_wins(self, jaguars, bills):
        game = _game(jaguars, bills, completed=True, scores=(24, 27))
        assert resolve(game, {}).name == "Bills"

    @pytest.mark.parametrize("pick", ["team1", "team2"])
    def test_completed_result_beats_any_pick(self, jaguars, bills, pick):
        game = _game(jaguars, bills, completed=True, scores=(31, 10))
        assert resolve(game, {"afc-wc-2": pick}).name == "Jaguars"

    def test_tied_completed_game_raises(self, jaguars, bills):
        game = _game(jaguars, bills, completed=True, scores=(20, 20))
        with pytest.raises(TiedScoreError) as exc:
            resolve(game, {})
        assert exc.value.matchup_id == "afc-wc-2"

    def test_completed_without_scores_is_unresolved(self, jaguars, bills):
        game = _game(jaguars, bills, completed=True)
        assert resolve(game, {"afc-wc-2": "team1"}) is None

    def test_pick_decides_open_game(self, jaguars, bills):
        game = _game(jaguars, bills)
        assert resolve(game, {"afc-wc-2": "team1"}) == jaguars
        assert resolve(game, {"afc-wc-2": "team2"}) == bills

    def test_no_pick_is_unresolved(self, jaguars, bills):
        assert resolve(_game(jaguars, bills), {"afc-wc-1": "team1"}) is None

    def test_pick_on_tbd_game_is_unresolved(self):
        game = Matchup(id="afc-conf", round="ConferenceChampionship", conference="AFC")
        assert resolve(game, {"afc-conf": "team1"}) is None
