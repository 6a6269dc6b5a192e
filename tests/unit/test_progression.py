"""
Unit tests for divisional -> conference -> Super Bowl progression.
"""
from engine.progression import propagate
from engine.reseeding import reseed_conference
from models.team import Team


def _reseeded(base):
    work = base.copy()
    for conf in ("AFC", "NFC"):
        reseed_conference(work, conf, {})
    return work


class TestPropagate:

    def test_divisional_winners_fill_championship(self, completed_base):
        work = _reseeded(completed_base)
        propagate(work, {"afc-div-1": "team1", "afc-div-2": "team1"})

        conf = work.matchups["afc-conf"]
        assert conf.team1.name == "Broncos"
        assert conf.team2.name == "Patriots"

    def test_one_feeder_missing_keeps_game_tbd(self, completed_base):
        work = _reseeded(completed_base)
        propagate(work, {"afc-div-1": "team1"})
        assert work.matchups["afc-conf"].is_tbd

    def test_runs_through_to_super_bowl_in_one_pass(self, completed_base):
        picks = {
            "afc-div-1": "team1", "afc-div-2": "team1", "afc-conf": "team2",
            "nfc-div-1": "team2", "nfc-div-2": "team2", "nfc-conf": "team1",
        }
        work = _reseeded(completed_base)
        propagate(work, picks)

        sb = work.matchups["superbowl"]
        assert sb.team1.name == "Patriots"
        assert sb.team2.name == "49ers"

    def test_completed_target_is_not_overwritten(self, completed_base):
        work = _reseeded(completed_base)
        conf = work.matchups["afc-conf"]
        conf.team1 = Team(6, "Bills", "buffalo-bills", 21)
        conf.team2 = Team(5, "Texans", "houston-texans", 17)
        conf.completed = True

        propagate(work, {"afc-div-1": "team1", "afc-div-2": "team1"})

        assert work.matchups["afc-conf"].team1.name == "Bills"
        assert work.matchups["afc-conf"].team2.name == "Texans"

    def test_real_results_propagate(self, completed_base, play):
        base = play(completed_base, "afc-div-1", 33, 30)
        base = play(base, "afc-div-2", 28, 16)

        work = _reseeded(base)
        propagate(work, {})

        conf = work.matchups["afc-conf"]
        assert conf.team1.name == "Broncos" and conf.team1.score is None
        assert conf.team2.name == "Patriots"
