"""
Unit tests for the bracket compiler, including the bracket-wide invariants.
"""
from itertools import product

import pytest

from engine.compiler import compile_bracket
from engine.overlay import PickOverlay
from models.matchup import SLOTS

AFC_PATH = {"afc-div-1": "team1", "afc-div-2": "team1", "afc-conf": "team2"}
NFC_PATH = {"nfc-div-1": "team2", "nfc-div-2": "team2", "nfc-conf": "team1"}


class TestCompileBracket:

    def test_real_results_only(self, completed_base):
        derived = compile_bracket(completed_base, {})

        assert str(derived.matchup("afc-div-1")) == "afc-div-1: (1) Broncos vs (6) Bills"
        assert str(derived.matchup("nfc-div-2")) == "nfc-div-2: (2) Bears vs (5) Rams"
        assert derived.matchup("afc-conf").is_tbd
        assert derived.champion is None

    def test_full_path_to_champion(self, completed_base):
        picks = {**AFC_PATH, **NFC_PATH, "superbowl": "team2"}
        derived = compile_bracket(completed_base, picks)

        sb = derived.matchup("superbowl")
        assert (sb.team1.name, sb.team2.name) == ("Patriots", "49ers")
        assert derived.champion.name == "49ers"
        assert derived.champion_from_pick
        assert derived.picks == picks

    def test_winners_map(self, completed_base):
        derived = compile_bracket(completed_base, AFC_PATH)
        assert derived.winners["afc-wc-2"].name == "Bills"
        assert derived.winners["afc-conf"].name == "Patriots"
        assert derived.winners["nfc-conf"] is None

    def test_accepts_pick_overlay(self, completed_base):
        overlay = PickOverlay(picks=AFC_PATH)
        assert compile_bracket(completed_base, overlay) == compile_bracket(completed_base, AFC_PATH)

    def test_base_is_not_mutated(self, completed_base):
        snapshot = completed_base.copy()
        compile_bracket(completed_base, {**AFC_PATH, **NFC_PATH, "superbowl": "team1"})
        assert completed_base == snapshot

    def test_stale_picks_are_not_applied(self, completed_base):
        derived = compile_bracket(completed_base, {"afc-conf": "team1", "afc-wc-3": "team2"})
        assert derived.picks == {}
        assert derived.winners["afc-wc-3"].name == "Patriots"

    def test_can_pick(self, completed_base):
        derived = compile_bracket(completed_base, {})
        assert not derived.can_pick("afc-wc-1")
        assert derived.can_pick("afc-div-1")
        assert not derived.can_pick("afc-conf")
        assert not derived.can_pick("nope")

    def test_completed_super_bowl_champion(self, completed_base, play):
        base = completed_base
        for matchup_id, scores in [("afc-div-1", (33, 30)), ("afc-div-2", (28, 16)),
                                   ("nfc-div-1", (41, 6)), ("nfc-div-2", (17, 20)),
                                   ("afc-conf", (7, 10)), ("nfc-conf", (31, 27)),
                                   ("superbowl", (13, 29))]:
            base = play(base, matchup_id, *scores)

        derived = compile_bracket(base, {"superbowl": "team1"})

        assert derived.champion.name == "Seahawks"
        assert not derived.champion_from_pick
        assert derived.picks == {}

    def test_to_dict(self, completed_base):
        data = compile_bracket(completed_base, {"afc-div-1": "team2"}).to_dict()
        games = {g["id"]: g for g in data["matchups"]}
        assert games["afc-div-1"]["pick"] == "team2"
        assert games["afc-div-1"]["winner"]["name"] == "Bills"
        assert games["afc-wc-1"]["team2"]["score"] == 30
        assert data["champion"] is None


class TestBracketProperties:

    def test_deterministic(self, open_base):
        picks = {"afc-wc-1": "team2", "afc-wc-2": "team1", "afc-wc-3": "team1", "afc-div-2": "team1"}
        first = compile_bracket(open_base, picks)
        for _ in range(5):
            assert compile_bracket(open_base, picks) == first

    @pytest.mark.parametrize("choices", list(product([None, *SLOTS], repeat=3)))
    def test_never_half_populated(self, open_base, choices):
        picks = {f"nfc-wc-{i + 1}": c for i, c in enumerate(choices) if c}
        picks.update({"nfc-div-1": "team1", "nfc-div-2": "team2", "nfc-conf": "team1"})
        derived = compile_bracket(open_base, picks)

        for matchup in derived.matchups.values():
            assert matchup.is_tbd or matchup.is_populated

    @pytest.mark.parametrize("pick", SLOTS)
    def test_completed_result_supremacy(self, completed_base, play, pick):
        base = play(completed_base, "afc-div-2", 30, 3)
        derived = compile_bracket(base, {"afc-div-2": pick})
        assert derived.winners["afc-div-2"].name == "Patriots"

    @pytest.mark.parametrize("sb_pick", [None, "team1", "team2"])
    @pytest.mark.parametrize("afc_conf", [None, "team1"])
    def test_champion_consistency(self, completed_base, sb_pick, afc_conf):
        picks = {**AFC_PATH, **NFC_PATH}
        if afc_conf:
            picks["afc-conf"] = afc_conf
        else:
            picks.pop("afc-conf")
        if sb_pick:
            picks["superbowl"] = sb_pick

        derived = compile_bracket(completed_base, picks)

        sb = derived.matchup("superbowl")
        resolvable = sb.is_populated and sb_pick is not None
        assert (derived.champion is not None) == resolvable


class TestStaleSnapshotTeams:
    """Teams sitting in an unplayed game whose feeders are still open are dropped."""

    def test_prefilled_divisional_game_goes_back_to_tbd(self, open_base, make_team):
        base = open_base.copy()
        div_b = base.matchups["afc-div-2"]
        div_b.team1 = make_team("AFC", 2)
        div_b.team2 = make_team("AFC", 3)

        derived = compile_bracket(base, {})

        assert derived.matchup("afc-div-1").is_tbd
        assert derived.matchup("afc-div-2").is_tbd
        assert base.matchups["afc-div-2"].is_populated

    def test_prefilled_championship_goes_back_to_tbd(self, completed_base, make_team):
        base = completed_base.copy()
        conf = base.matchups["afc-conf"]
        conf.team1 = make_team("AFC", 1)
        conf.team2 = make_team("AFC", 2)

        derived = compile_bracket(base, {"afc-div-1": "team1"})

        assert derived.matchup("afc-conf").is_tbd

    def test_scored_game_is_kept(self, open_base, make_team):
        base = open_base.copy()
        div_b = base.matchups["afc-div-2"]
        div_b.team1 = make_team("AFC", 2, score=7)
        div_b.team2 = make_team("AFC", 3, score=3)

        derived = compile_bracket(base, {})

        assert derived.matchup("afc-div-2").team1.score == 7
