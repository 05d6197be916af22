import pytest

from bracketengine.exceptions import (
    InvalidInputException,
    InvalidProofUrlException,
    InvalidScoreException,
    MatchNotFoundException,
    NotFoundException,
    PlayerNotFoundException,
    RuleViolationException,
    TiedScoreException,
)
from bracketengine.models.tournament import Tournament


def test_validate_records_outcome(tournament):
    match = tournament.validate_match("m01", "3", "1", actor="Alice")

    assert match.status == "TERMINE"
    assert match.score_a == 3 and match.score_b == 1
    assert isinstance(match.score_a, int)
    assert match.winner_id == "p1"
    assert match.loser_id == "p2"
    assert match.validated_by == "Alice"
    assert match.proof_url == ""
    assert match.played_at_datetime is not None

    assert tournament.get_player("p1").status == "QUALIFIE"
    assert tournament.get_player("p2").status == "ELIMINE"


def test_higher_score_b_wins(tournament):
    match = tournament.validate_match("m02", 0, 2)

    assert match.winner_id == "p4"
    assert match.loser_id == "p3"
    assert {match.winner_id, match.loser_id} == {match.a_id, match.b_id}
    assert tournament.get_player("p4").is_qualified
    assert tournament.get_player("p3").is_eliminated


def test_validate_prepends_history_entry(tournament):
    tournament.validate_match("m01", "3", "1")
    tournament.validate_match("m02", "0", "2", actor="Bob")

    assert len(tournament.history) == 2
    latest = tournament.history[0]
    assert latest.type == "MATCH_VALIDATE"
    assert latest.actor == "Bob"
    assert latest.message == "Match m02 validé: Player 3 0-2 Player 4."
    assert tournament.history[1].actor == "Admin"
    assert tournament.history[1].message == "Match m01 validé: Player 1 3-1 Player 2."
    assert latest.timestamp is not None


def test_actor_defaults_to_admin(tournament):
    match = tournament.validate_match("m01", 1, 0, actor="")
    assert match.validated_by == "Admin"


def test_fractional_scores_are_kept(tournament):
    match = tournament.validate_match("m01", "2.5", "1")
    assert match.score_a == 2.5


def test_unknown_match(tournament):
    with pytest.raises(MatchNotFoundException) as excinfo:
        tournament.validate_match("m99", 1, 0)
    assert isinstance(excinfo.value, NotFoundException)
    assert "m99" in str(excinfo.value)


def test_unknown_player(raw_state):
    raw_state["matches"][0]["bId"] = "ghost"
    tournament = Tournament.from_dict(raw_state)
    before = tournament.to_dict()

    with pytest.raises(PlayerNotFoundException):
        tournament.validate_match("m01", 1, 0)
    assert tournament.to_dict() == before


@pytest.mark.parametrize("bad", ["abc", "", "   ", None, "inf", "nan", True, 10**400])
def test_invalid_scores(tournament, bad):
    before = tournament.to_dict()

    with pytest.raises(InvalidScoreException) as excinfo:
        tournament.validate_match("m01", bad, 1)
    assert isinstance(excinfo.value, InvalidInputException)
    assert tournament.to_dict() == before


def test_tie_is_rejected_without_mutation(tournament):
    before = tournament.to_dict()

    with pytest.raises(TiedScoreException) as excinfo:
        tournament.validate_match("m01", "3", "3")

    assert isinstance(excinfo.value, RuleViolationException)
    assert tournament.to_dict() == before
    assert tournament.history == []


def test_tie_across_representations(tournament):
    with pytest.raises(TiedScoreException):
        tournament.validate_match("m01", "2", 2.0)


def test_gif_proof_is_rejected(tournament):
    before = tournament.to_dict()

    with pytest.raises(InvalidProofUrlException) as excinfo:
        tournament.validate_match("m01", 3, 1, proof_url="http://x.com/img.gif")

    assert isinstance(excinfo.value, InvalidInputException)
    assert tournament.to_dict() == before


@pytest.mark.parametrize(
    "url",
    [
        "https://i.imgur.com/abc.png",
        "https://cdn.example.com/shot.JPG",
        "https://cdn.example.com/shot.jpeg?width=800&v=2",
        "https://cdn.example.com/shot.webp",
    ],
)
def test_direct_image_proofs_are_accepted(tournament, url):
    match = tournament.validate_match("m01", 3, 1, proof_url=url)
    assert match.proof_url == url


def test_revalidation_overwrites_previous_result(tournament):
    tournament.validate_match("m01", 3, 1, proof_url="https://x.com/a.png")
    match = tournament.validate_match("m01", 0, 4)

    assert match.winner_id == "p2"
    assert match.loser_id == "p1"
    assert match.proof_url == "https://x.com/a.png"
    assert tournament.get_player("p2").status == "QUALIFIE"
    assert tournament.get_player("p1").status == "ELIMINE"
    assert len(tournament.history) == 2
