"""Rating engine for Gambit Rating.

Pure functions only: nothing in this package keeps state between calls.
"""

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


from gambitrating.rating.categories import (
    DEFAULT_RATING_BANDS,
    RatingBand,
    RatingCategory,
    validate_bands,
)
from gambitrating.rating.engine import (
    classify_rating,
    compute_rating_change,
    expected_score,
    is_valid_rating,
    round_half_away_from_zero,
)

__all__ = [
    "DEFAULT_RATING_BANDS",
    "RatingBand",
    "RatingCategory",
    "classify_rating",
    "compute_rating_change",
    "expected_score",
    "is_valid_rating",
    "round_half_away_from_zero",
    "validate_bands",
]
