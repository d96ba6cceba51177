import json
from datetime import date

import pytest

from gambitrating.controllers import RatingLedger
from gambitrating.exceptions import (
    DuplicatePlayerException,
    InvalidResultException,
    PlayerNotFoundException,
    RatingValidationException,
    ValidationException,
)
from gambitrating.rating import RatingCategory


@pytest.fixture
def ledger():
    ledger = RatingLedger()
    ledger.add_player("Alice", 1500, player_id="alice")
    ledger.add_player("Bob", 1500, player_id="bob")
    ledger.add_player("Carol", 1600, player_id="carol")
    ledger.add_player("Dave", 1400, player_id="dave")
    return ledger


def test_add_player_records_starting_rating():
    ledger = RatingLedger()
    player = ledger.add_player(
        "  Eve ", "1850", rating_type="fide_standard", effective_date=date(2024, 1, 1)
    )

    assert player.name == "Eve"
    assert player.rating == 1850
    assert player.id in ledger
    assert player.id.startswith("RatedPlayer_")
    assert len(player.history) == 1
    entry = player.history.entries[0]
    assert entry.rating == 1850
    assert entry.rating_type == "fide_standard"
    assert entry.change is None


@pytest.mark.parametrize("rating", [99, 4001, 1500.5, None, "strong"])
def test_add_player_rejects_invalid_rating(rating):
    with pytest.raises(RatingValidationException):
        RatingLedger().add_player("Eve", rating)


def test_add_player_rejects_empty_name():
    with pytest.raises(ValidationException):
        RatingLedger().add_player(" ", 1500)


def test_add_player_rejects_duplicate_id(ledger):
    with pytest.raises(DuplicatePlayerException):
        ledger.add_player("Alice again", 1500, player_id="alice")


def test_get_unknown_player(ledger):
    with pytest.raises(PlayerNotFoundException):
        ledger.get_player("zoe")


def test_win_between_equal_players(ledger):
    changes = ledger.record_game("alice", "bob", 1.0, effective_date=date(2024, 5, 1))

    alice = ledger.get_player("alice")
    bob = ledger.get_player("bob")
    assert changes == (16, -16)
    assert alice.rating == 1516
    assert bob.rating == 1484
    assert alice.category is RatingCategory.INTERMEDIATE
    assert alice.games_played == bob.games_played == 1

    last = alice.history.entries[-1]
    assert last.change == 16
    assert last.opponent_id == "bob"
    assert last.effective_date == date(2024, 5, 1)


def test_draw_between_equal_players_changes_nothing(ledger):
    assert ledger.record_game("alice", "bob", "0.5") == (0, 0)
    assert ledger.get_player("alice").rating == 1500


def test_low_rated_player_loss():
    ledger = RatingLedger()
    ledger.add_player("Junior", 800, player_id="junior")
    ledger.add_player("Coach", 1000, player_id="coach")

    assert ledger.record_game("junior", "coach", 0.0) == (-8, 8)


@pytest.mark.parametrize("outcome", [0.7, 2, -1, "maybe"])
def test_invalid_outcome_is_rejected(ledger, outcome):
    with pytest.raises(InvalidResultException):
        ledger.record_game("alice", "bob", outcome)
    assert ledger.get_player("alice").rating == 1500
    assert not ledger.games


def test_player_cannot_play_themself(ledger):
    with pytest.raises(InvalidResultException):
        ledger.record_game("alice", "alice", 1.0)


def test_game_with_unknown_opponent(ledger):
    with pytest.raises(PlayerNotFoundException):
        ledger.record_game("alice", "zoe", 1.0)


def test_round_uses_pre_round_ratings(ledger):
    changes = ledger.record_round(
        [("alice", "bob", 1.0), ("carol", "dave", 0.0)]
    )

    assert changes == [(16, -16), (-24, 24)]
    assert ledger.get_player("carol").rating == 1576
    assert ledger.get_player("dave").rating == 1424
    assert len(ledger.games) == 2


def test_round_with_repeated_player_applies_nothing(ledger):
    with pytest.raises(InvalidResultException, match="more than once"):
        ledger.record_round([("alice", "bob", 1.0), ("alice", "carol", 0.5)])

    assert ledger.get_player("alice").rating == 1500
    assert not ledger.games


def test_round_with_invalid_outcome_applies_nothing(ledger):
    with pytest.raises(InvalidResultException):
        ledger.record_round([("alice", "bob", 1.0), ("carol", "dave", 0.3)])
    assert ledger.get_player("alice").rating == 1500


def test_undo_last_game(ledger):
    ledger.record_game("alice", "bob", 1.0)
    ledger.record_game("carol", "dave", 1.0)

    game = ledger.undo_last_game()

    assert game.player_id == "carol"
    assert ledger.get_player("carol").rating == 1600
    assert ledger.get_player("dave").rating == 1400
    assert ledger.get_player("carol").games_played == 0
    assert len(ledger.get_player("carol").history) == 1
    assert ledger.get_player("alice").rating == 1516


def test_undo_with_no_games(ledger):
    assert ledger.undo_last_game() is None


def test_remove_player(ledger):
    removed = ledger.remove_player("dave")
    assert removed.name == "Dave"
    assert "dave" not in ledger
    assert len(ledger) == 3


def test_standings_sorted_by_rating_then_name(ledger):
    ledger.record_game("bob", "alice", 1.0)
    names = [player.name for player in ledger.standings()]
    assert names == ["Carol", "Bob", "Alice", "Dave"]


def test_ledger_survives_json_round_trip(ledger):
    ledger.record_game("alice", "carol", 1.0, effective_date=date(2024, 5, 1))

    restored = RatingLedger.from_dict(json.loads(json.dumps(ledger.to_dict())))

    assert restored.to_dict() == ledger.to_dict()
    assert restored.get_player("alice").rating == ledger.get_player("alice").rating
    assert restored.undo_last_game().opponent_id == "carol"
    assert restored.get_player("alice").rating == 1500


def test_custom_k_factor():
    ledger = RatingLedger(k_factor=20)
    ledger.add_player("A", 1500, player_id="a")
    ledger.add_player("B", 1500, player_id="b")
    assert ledger.record_game("a", "b", 1.0) == (10, -10)


def test_malformed_game_date_leaves_ratings_untouched(ledger):
    with pytest.raises(ValidationException, match="Invalid effective date"):
        ledger.record_game("alice", "bob", 1.0, effective_date="not-a-date")

    assert ledger.get_player("alice").rating == 1500
    assert not ledger.games


def test_malformed_starting_date_is_rejected():
    ledger = RatingLedger()
    with pytest.raises(ValidationException):
        ledger.add_player("Eve", 1500, effective_date="2024/99/99")
    assert len(ledger) == 0
