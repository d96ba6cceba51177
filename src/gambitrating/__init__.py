"""Gambit Rating: Elo rating engine for chess tournament software."""

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


from gambitrating.rating import (
    RatingCategory,
    classify_rating,
    compute_rating_change,
    expected_score,
    is_valid_rating,
)

__version__ = "0.1.0"

__all__ = [
    "RatingCategory",
    "classify_rating",
    "compute_rating_change",
    "expected_score",
    "is_valid_rating",
]
