import pytest

from bracketengine.exceptions import (
    EmptyRoundException,
    InvalidRoundException,
    NoRoundFoundException,
    OddWinnerCountException,
    RoundAlreadyExistsException,
    RoundIncompleteException,
    RuleViolationException,
)
from bracketengine.models.match import make_match_id
from bracketengine.models.tournament import Tournament

from conftest import build_raw_state, play_round


# ========== current_round / rounds_present ==========


def test_current_round_is_first_unfinished(eight_player_tournament):
    assert eight_player_tournament.current_round() == "R32"


def test_current_round_defaults_to_final():
    assert Tournament.from_dict({}).current_round() == "F"


def test_current_round_when_everything_is_played(tournament):
    play_round(tournament, "R16")
    assert tournament.current_round() == "F"


def test_current_round_moves_on_after_generation(tournament):
    play_round(tournament, "R16")
    tournament.generate_next_round("R16", "QF")
    assert tournament.current_round() == "QF"


def test_rounds_present_sorted_by_stage(raw_state):
    raw_state["matches"][0]["round"] = "QF"
    tournament = Tournament.from_dict(raw_state)
    assert tournament.rounds_present() == ["R16", "QF"]


def test_rounds_present_without_matches():
    assert Tournament.from_dict({}).rounds_present() == ["R32"]


# ========== generate_next_round ==========


def test_generate_pairs_the_two_winners(tournament):
    tournament.validate_match("m01", 3, 1)
    tournament.validate_match("m02", 0, 2)

    created = tournament.generate_next_round("R16", "QF", "Admin")

    assert len(created) == 1
    match = created[0]
    assert (match.a_id, match.b_id) == ("p1", "p4")
    assert match.round == "QF"
    assert match.status == "A_JOUER"
    assert match.id == "m03"
    assert tournament.matches[-1] is match

    entry = tournament.history[0]
    assert entry.type == "ROUND_GENERATE"
    assert entry.message == "Round QF généré depuis R16 (1 matchs)."
    assert len(tournament.history) == 3


def test_winners_are_paired_in_source_match_order(eight_player_tournament):
    t = eight_player_tournament
    t.validate_match("m01", 1, 0)  # p1
    t.validate_match("m02", 0, 1)  # p4
    t.validate_match("m03", 0, 1)  # p6
    t.validate_match("m04", 1, 0)  # p7

    created = t.generate_next_round("R32", "R16")

    assert [(m.a_id, m.b_id) for m in created] == [("p1", "p4"), ("p6", "p7")]
    assert [m.id for m in created] == ["m05", "m06"]


def test_ids_continue_global_sequence(eight_player_tournament):
    t = eight_player_tournament
    play_round(t, "R32")
    t.generate_next_round("R32", "R16")
    play_round(t, "R16", a_wins=False)

    created = t.generate_next_round("R16", "QF")

    assert [m.id for m in created] == ["m07"]
    assert (created[0].a_id, created[0].b_id) == ("p3", "p7")


def test_match_id_padding():
    assert make_match_id(3) == "m03"
    assert make_match_id(42) == "m42"
    assert make_match_id(100) == "m100"


def test_duplicate_generation_is_rejected(tournament):
    play_round(tournament, "R16")
    tournament.generate_next_round("R16", "QF")
    before = tournament.to_dict()

    with pytest.raises(RoundAlreadyExistsException) as excinfo:
        tournament.generate_next_round("R16", "QF")

    assert isinstance(excinfo.value, RuleViolationException)
    assert tournament.to_dict() == before
    assert len(tournament.matches_in_round("QF")) == 1


def test_empty_source_round(tournament):
    with pytest.raises(EmptyRoundException):
        tournament.generate_next_round("QF", "SF")


def test_incomplete_source_round(tournament):
    tournament.validate_match("m01", 2, 0)
    before = tournament.to_dict()

    with pytest.raises(RoundIncompleteException):
        tournament.generate_next_round("R16", "QF")
    assert tournament.to_dict() == before


def test_odd_winner_count():
    tournament = Tournament.from_dict(build_raw_state(num_players=6))
    play_round(tournament, "R16")
    before = tournament.to_dict()

    with pytest.raises(OddWinnerCountException):
        tournament.generate_next_round("R16", "QF")
    assert tournament.to_dict() == before


def test_repeated_winner_is_counted_once():
    # p1 appears in two R16 matches and wins both
    raw = build_raw_state(num_players=6)
    raw["matches"][1]["aId"] = "p1"
    tournament = Tournament.from_dict(raw)
    play_round(tournament, "R16")
    assert tournament.winners_of_round("R16") == ["p1", "p5"]

    created = tournament.generate_next_round("R16", "QF")

    assert [(m.a_id, m.b_id) for m in created] == [("p1", "p5")]


def test_distinct_winner_count_must_be_even():
    raw = build_raw_state(num_players=8)
    raw["matches"][1]["aId"] = "p1"
    tournament = Tournament.from_dict(raw)
    play_round(tournament, "R16")
    before = tournament.to_dict()

    with pytest.raises(OddWinnerCountException) as excinfo:
        tournament.generate_next_round("R16", "QF")
    assert "(3)" in str(excinfo.value)
    assert tournament.to_dict() == before


def test_unknown_round_code(tournament):
    with pytest.raises(InvalidRoundException):
        tournament.generate_next_round("R8", "QF")


# ========== generate_next_round_from_current ==========


def test_auto_advance_detects_rounds(tournament):
    play_round(tournament, "R16")

    advance = tournament.generate_next_round_from_current("Bob")

    assert advance.current_round == "R16"
    assert advance.next_round == "QF"
    assert not advance.tournament_complete
    assert len(advance.created) == 1
    assert advance.message == "1 matchs générés pour le round QF"
    assert tournament.history[0].type == "ROUND_GENERATE"
    assert tournament.history[0].actor == "Bob"


def test_auto_advance_requires_finished_round(tournament):
    tournament.validate_match("m01", 2, 0)

    with pytest.raises(RoundIncompleteException):
        tournament.generate_next_round_from_current()


def test_auto_advance_without_matches():
    with pytest.raises(NoRoundFoundException):
        Tournament.from_dict({}).generate_next_round_from_current()


def test_auto_advance_after_final_is_complete():
    tournament = Tournament.from_dict(build_raw_state(num_players=2, round_code="F"))
    tournament.validate_match("m01", 1, 0)
    before = tournament.to_dict()

    advance = tournament.generate_next_round_from_current()

    assert advance.tournament_complete
    assert advance.created == []
    assert advance.current_round == "F"
    assert advance.next_round is None
    assert tournament.to_dict() == before


def test_auto_advance_reports_existing_next_round(tournament):
    play_round(tournament, "R16")
    tournament.generate_next_round("R16", "QF")

    with pytest.raises(RoundAlreadyExistsException):
        tournament.generate_next_round_from_current()


# ========== Full bracket ==========


def test_full_bracket_produces_champion():
    t = Tournament.from_dict(build_raw_state(num_players=8, round_code="QF"))
    play_round(t, "QF")
    t.generate_next_round("QF", "SF")
    play_round(t, "SF")

    assert t.champion() is None
    t.generate_next_round("SF", "F")
    play_round(t, "F", a_wins=False)

    assert t.champion().id == "p5"
    assert t.rounds_present() == ["QF", "SF", "F"]
    assert t.count_players().qualified == 1
    assert t.count_players().eliminated == 7
    assert t.count_matches().completed == 7
