"""Rating categories and the band table that maps ratings onto them."""

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


from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from gambitrating.constants import (
    ADVANCED_THRESHOLD,
    CATEGORY_ADVANCED,
    CATEGORY_BEGINNER,
    CATEGORY_EXPERT,
    CATEGORY_INTERMEDIATE,
    CATEGORY_MASTER,
    EXPERT_THRESHOLD,
    INTERMEDIATE_THRESHOLD,
    MASTER_THRESHOLD,
    MIN_RATING,
)
from gambitrating.exceptions import InvalidConfigurationException


class RatingCategory(Enum):
    """Skill label derived from a rating."""

    BEGINNER = CATEGORY_BEGINNER
    INTERMEDIATE = CATEGORY_INTERMEDIATE
    ADVANCED = CATEGORY_ADVANCED
    EXPERT = CATEGORY_EXPERT
    MASTER = CATEGORY_MASTER

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RatingBand:
    """A half-open rating interval mapped to a category.

    Attributes
    ----------
    category : RatingCategory
        Category assigned to ratings inside the band
    lower : int
        Inclusive lower bound
    upper : Optional[int]
        Exclusive upper bound, ``None`` for the open-ended top band
    """

    category: RatingCategory
    lower: int
    upper: Optional[int] = None

    def contains(self, rating: float) -> bool:
        """Check whether ``rating`` falls inside this band."""
        if rating < self.lower:
            return False
        return self.upper is None or rating < self.upper


# Beginner nominally starts at MIN_RATING; lower ratings are still Beginner.
DEFAULT_RATING_BANDS: Tuple[RatingBand, ...] = (
    RatingBand(RatingCategory.BEGINNER, MIN_RATING, INTERMEDIATE_THRESHOLD),
    RatingBand(RatingCategory.INTERMEDIATE, INTERMEDIATE_THRESHOLD, ADVANCED_THRESHOLD),
    RatingBand(RatingCategory.ADVANCED, ADVANCED_THRESHOLD, EXPERT_THRESHOLD),
    RatingBand(RatingCategory.EXPERT, EXPERT_THRESHOLD, MASTER_THRESHOLD),
    RatingBand(RatingCategory.MASTER, MASTER_THRESHOLD, None),
)


def validate_bands(bands: Sequence[RatingBand]) -> Tuple[RatingBand, ...]:
    """Check that a band table is ordered, contiguous and non-overlapping.

    Only the last band may be open-ended.

    Args:
        bands: Candidate band table, lowest band first

    Returns:
        The bands as a tuple

    Raises:
        InvalidConfigurationException: If the table has gaps, overlaps,
            empty bands or an open-ended band that is not the last one
    """
    bands = tuple(bands)
    if not bands:
        raise InvalidConfigurationException("Rating band table is empty")

    for index, band in enumerate(bands):
        is_last = index == len(bands) - 1
        if band.upper is None:
            if not is_last:
                raise InvalidConfigurationException(
                    f"Only the last band may be open-ended: {band.category}"
                )
            continue
        if band.upper <= band.lower:
            raise InvalidConfigurationException(
                f"Band {band.category} is empty: [{band.lower}, {band.upper})"
            )
        if not is_last and bands[index + 1].lower != band.upper:
            raise InvalidConfigurationException(
                f"Bands {band.category} and {bands[index + 1].category} "
                f"are not contiguous at {band.upper}"
            )
    return bands
