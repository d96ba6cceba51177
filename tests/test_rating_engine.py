import math
import sys
from decimal import Decimal
from fractions import Fraction

import pytest

from gambitrating.rating import (
    RatingCategory,
    classify_rating,
    compute_rating_change,
    expected_score,
    is_valid_rating,
    round_half_away_from_zero,
)


@pytest.mark.parametrize("rating", [100, 800, 1500, 2400, 4000])
def test_equal_ratings_give_symmetric_changes(rating):
    assert compute_rating_change(rating, rating, 1.0) == 16
    assert compute_rating_change(rating, rating, 0.0) == -16
    assert compute_rating_change(rating, rating, 0.5) == 0


def test_underdog_win_gains_more_than_equal_win():
    change = compute_rating_change(1400, 1600, 1.0)
    assert change > 16
    assert change == 24


def test_underdog_loss_costs_less_than_equal_loss():
    change = compute_rating_change(1400, 1600, 0.0)
    assert change > -16
    assert change == -8


def test_favourite_loss_costs_more_than_equal_loss():
    assert compute_rating_change(1600, 1400, 0.0) == -24


def test_low_rated_loss_matches_formula():
    expected = 1 / (1 + 10 ** (200 / 400))
    assert expected == pytest.approx(0.2403, abs=1e-4)
    assert compute_rating_change(800, 1000, 0.0) == -8


@pytest.mark.parametrize(
    "a, b",
    [(1500, 1500), (1400, 1600), (800, 1000), (2700, 1200), (100, 4000)],
)
@pytest.mark.parametrize("outcome", [0.0, 0.5, 1.0])
def test_pairwise_changes_are_nearly_zero_sum(a, b, outcome):
    gain = compute_rating_change(a, b, outcome)
    other = compute_rating_change(b, a, 1 - outcome)
    assert abs(gain + other) <= 1


def test_ties_round_away_from_zero():
    # 25 * 0.5 = 12.5 exactly; banker's rounding would give 12
    assert compute_rating_change(1500, 1500, 1.0, k_factor=25) == 13
    assert compute_rating_change(1500, 1500, 0.0, k_factor=25) == -13


@pytest.mark.parametrize(
    "value, rounded",
    [
        (2.5, 3),
        (-2.5, -3),
        (0.5, 1),
        (-0.5, -1),
        (2.4, 2),
        (-2.6, -3),
        (0.0, 0),
        # Largest double below 0.5; adding 0.5 to it rounds up to 1.0
        (0.49999999999999994, 0),
        (-0.49999999999999994, 0),
        (1.4999999999999998, 1),
    ],
)
def test_round_half_away_from_zero(value, rounded):
    assert round_half_away_from_zero(value) == rounded


def test_rounding_clamps_non_finite_values():
    assert round_half_away_from_zero(math.nan) == 0
    assert round_half_away_from_zero(math.inf) == sys.maxsize
    assert round_half_away_from_zero(-math.inf) == -sys.maxsize
    assert round_half_away_from_zero(10**400) == sys.maxsize


@pytest.mark.parametrize(
    "player, opponent, outcome, change",
    [
        (1500, 1500, math.nan, 0),
        (1500, 1500, math.inf, sys.maxsize),
        (1500, 1500, -math.inf, -sys.maxsize),
        (1500, 1500, 1e308, sys.maxsize),
        (1500, 1500, 10**400, sys.maxsize),
        (0, 10**400, 1.0, 32),
        (10**400, 0, 0.0, -32),
        (-(10**400), 0, 1.0, 32),
        (math.nan, 1500, 1.0, 0),
        (math.inf, 1500, 1.0, 0),
        (1500, math.inf, 0.0, 0),
    ],
)
def test_change_is_total_over_numeric_input(player, opponent, outcome, change):
    result = compute_rating_change(player, opponent, outcome)
    assert isinstance(result, int)
    assert result == change


def test_expected_score_saturates_for_gaps_beyond_float_range():
    assert expected_score(0, 10**400) == 0.0
    assert expected_score(10**400, 0) == 1.0
    assert math.isnan(expected_score(math.nan, 1500))


def test_expected_score_of_equal_players_is_half():
    assert expected_score(1500, 1500) == 0.5


def test_expected_scores_of_both_players_sum_to_one():
    assert expected_score(1400, 1600) + expected_score(1600, 1400) == pytest.approx(1.0)


def test_huge_rating_gap_saturates_without_error():
    assert expected_score(0, 1_000_000) == 0.0
    assert expected_score(1_000_000, 0) == 1.0
    assert compute_rating_change(0, 1_000_000, 1.0) == 32
    assert compute_rating_change(1_000_000, 0, 1.0) == 0


def test_change_is_not_range_checked():
    # Invalid ratings are the caller's concern
    assert compute_rating_change(50, 50, 1.0) == 16
    assert compute_rating_change(5000, 5000, 0.0) == -16


@pytest.mark.parametrize(
    "rating, category",
    [
        (100, RatingCategory.BEGINNER),
        (800, RatingCategory.BEGINNER),
        (1199, RatingCategory.BEGINNER),
        (1200, RatingCategory.INTERMEDIATE),
        (1799, RatingCategory.INTERMEDIATE),
        (1800, RatingCategory.ADVANCED),
        (2199, RatingCategory.ADVANCED),
        (2200, RatingCategory.EXPERT),
        (2399, RatingCategory.EXPERT),
        (2400, RatingCategory.MASTER),
        (3000, RatingCategory.MASTER),
        (4000, RatingCategory.MASTER),
    ],
)
def test_classify_rating_boundaries(rating, category):
    assert classify_rating(rating) is category


def test_classify_rating_outside_valid_range():
    assert classify_rating(99) is RatingCategory.BEGINNER
    assert classify_rating(-100) is RatingCategory.BEGINNER
    assert classify_rating(5000) is RatingCategory.MASTER


def test_every_valid_rating_has_exactly_one_category():
    counts = {category: 0 for category in RatingCategory}
    for rating in range(100, 4001):
        counts[classify_rating(rating)] += 1

    assert sum(counts.values()) == 3901
    assert counts[RatingCategory.BEGINNER] == 1100
    assert counts[RatingCategory.INTERMEDIATE] == 600
    assert counts[RatingCategory.ADVANCED] == 400
    assert counts[RatingCategory.EXPERT] == 200
    assert counts[RatingCategory.MASTER] == 1601


def test_category_displays_as_its_name():
    assert str(RatingCategory.INTERMEDIATE) == "Intermediate"


@pytest.mark.parametrize(
    "value", [100, 1000, 2000, 3000, 4000, 1500.0, Decimal("1500"), Fraction(3000, 2)]
)
def test_is_valid_rating_accepts(value):
    assert is_valid_rating(value) is True


@pytest.mark.parametrize(
    "value",
    [
        99,
        0,
        -100,
        4001,
        5000,
        1500.5,
        1200.1,
        math.nan,
        math.inf,
        Fraction(3001, 2),
        Decimal("1500.5"),
        Decimal("NaN"),
        Decimal("sNaN"),
        1500 + 0j,
        "1500",
    ],
)
def test_is_valid_rating_rejects(value):
    assert is_valid_rating(value) is False


def test_is_valid_rating_rejects_booleans():
    assert is_valid_rating(True) is False


def test_win_between_equal_players_scenario():
    change = compute_rating_change(1500, 1500, 1.0)
    new_rating = 1500 + change

    assert change == 16
    assert new_rating == 1516
    assert classify_rating(new_rating) is RatingCategory.INTERMEDIATE
    assert is_valid_rating(new_rating)
