import pytest

from bracketengine.models.tournament import Tournament


def build_raw_state(num_players=4, round_code="R16"):
    """Raw document with players p1..pN paired in order into ``round_code``."""
    players = [
        {"id": f"p{i}", "name": f"Player {i}", "status": "EN_ATTENTE"}
        for i in range(1, num_players + 1)
    ]
    matches = [
        {
            "id": f"m{n:02d}",
            "round": round_code,
            "aId": f"p{2 * n - 1}",
            "bId": f"p{2 * n}",
            "status": "A_JOUER",
        }
        for n in range(1, num_players // 2 + 1)
    ]
    return {
        "players": players,
        "matches": matches,
        "history": [],
        "config": {
            "tournamentName": "Coupe Test",
            "mode": "Élimination directe",
            "rules": ["BO1", "Preuve obligatoire"],
        },
    }


def play_round(tournament, round_code, a_wins=True):
    """Validate every match of a round; player A wins unless told otherwise."""
    for match in tournament.matches_in_round(round_code):
        if a_wins:
            tournament.validate_match(match.id, 2, 1)
        else:
            tournament.validate_match(match.id, 0, 1)


@pytest.fixture
def raw_state():
    return build_raw_state()


@pytest.fixture
def tournament(raw_state):
    return Tournament.from_dict(raw_state)


@pytest.fixture
def eight_player_tournament():
    return Tournament.from_dict(build_raw_state(num_players=8, round_code="R32"))
