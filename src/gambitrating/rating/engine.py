"""Elo rating engine: expected score, rating change, category and validity."""

# Gambit Rating
# Copyright (C) 2025  Gambit Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import math
import sys
from decimal import Decimal
from numbers import Integral, Real
from typing import Sequence

from gambitrating.constants import K_FACTOR, MAX_RATING, MIN_RATING, RATING_SCALE_FACTOR
from gambitrating.rating.categories import (
    DEFAULT_RATING_BANDS,
    RatingBand,
    RatingCategory,
)
from gambitrating.type_hints import Outcome
from gambitrating.utils import setup_logger

logger = setup_logger(__name__)


def expected_score(player_rating: float, opponent_rating: float) -> float:
    """Probability-of-win estimate for the player against the opponent.

    Uses the logistic Elo curve ``1 / (1 + 10^((opponent - player) / 400))``.
    Very large rating gaps saturate at 0.0 or 1.0 instead of overflowing.
    A NaN rating gives NaN.

    Args:
        player_rating: Rating of the rated player
        opponent_rating: Rating of the opponent

    Returns:
        Expected score in the closed interval [0.0, 1.0]
    """
    try:
        exponent = float(opponent_rating - player_rating) / RATING_SCALE_FACTOR
        return 1.0 / (1.0 + 10.0**exponent)
    except OverflowError:
        # Gap too large for a float: the stronger side is a certain winner
        return 0.0 if opponent_rating > player_rating else 1.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with .5 going away from zero.

    Python's built-in ``round`` uses banker's rounding, so ``round(2.5) == 2``.
    Here ``2.5 -> 3`` and ``-2.5 -> -3``.

    Results are clamped to ``[-sys.maxsize, sys.maxsize]``; infinities
    saturate at those bounds and NaN rounds to 0.
    """
    if isinstance(value, Integral):
        return max(-sys.maxsize, min(sys.maxsize, int(value)))
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return sys.maxsize if value > 0 else -sys.maxsize

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    whole = min(whole, sys.maxsize)
    return whole if value >= 0 else -whole


def compute_rating_change(
    player_rating: float,
    opponent_rating: float,
    outcome: Outcome,
    k_factor: float = K_FACTOR,
) -> int:
    """Compute the rating change for one game.

    The same K-factor applies to every player. Ratings are not range-checked
    here; use :func:`is_valid_rating` for that. Any numeric input yields an
    int: NaN gives 0 and infinite changes are clamped (see
    :func:`round_half_away_from_zero`).

    Args:
        player_rating: Rating of the rated player before the game
        opponent_rating: Rating of the opponent before the game
        outcome: Score of the rated player (1.0 win, 0.5 draw, 0.0 loss)
        k_factor: Scale of the change per game

    Returns:
        Signed integer to add to the player's rating

    Example:
        >>> compute_rating_change(1500, 1500, 1.0)
        16
        >>> compute_rating_change(800, 1000, 0.0)
        -8
    """
    expected = expected_score(player_rating, opponent_rating)
    try:
        raw_change = float(k_factor) * (float(outcome) - expected)
    except OverflowError:
        # Integer outcome or K-factor too large for a float
        gains = (outcome > expected) == (k_factor > 0)
        raw_change = math.inf if gains else -math.inf
    change = round_half_away_from_zero(raw_change)
    logger.debug(
        "Rating change %s vs %s (outcome %s, expected %.4f): %+d",
        player_rating,
        opponent_rating,
        outcome,
        expected,
        change,
    )
    return change


def classify_rating(
    rating: float, bands: Sequence[RatingBand] = DEFAULT_RATING_BANDS
) -> RatingCategory:
    """Map a rating onto its category.

    Bands are half-open, so a boundary value belongs to the higher band
    (1199 is Beginner, 1200 is Intermediate). Ratings below the first band
    fall into the first category and ratings above the last band into the
    last one, so every number gets a category.

    Args:
        rating: Rating to classify
        bands: Ordered, contiguous band table (see ``validate_bands``)

    Returns:
        The matching RatingCategory
    """
    for band in bands:
        if band.contains(rating):
            return band.category

    if rating < bands[0].lower:
        return bands[0].category
    return bands[-1].category


def is_valid_rating(
    value: float, min_rating: int = MIN_RATING, max_rating: int = MAX_RATING
) -> bool:
    """Check that ``value`` is a whole number within ``[min_rating, max_rating]``.

    Floats and Decimals with no fractional part (``1500.0``) count as whole
    numbers. Booleans, complex numbers, NaN and infinities are never valid.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False

    if not isinstance(value, Integral):
        try:
            if not math.isfinite(value) or value != math.floor(value):
                return False
        except (ValueError, OverflowError):
            # Signalling NaN, or a value too large for a float
            return False

    return min_rating <= value <= max_rating
