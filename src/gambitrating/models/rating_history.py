"""Rating history for a single player."""

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
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from dateutil.parser import isoparse

from gambitrating.constants import (
    DEFAULT_RATING_TYPE,
    RATING_TYPE_NAMES,
    TREND_DOWN,
    TREND_STABLE,
    TREND_UP,
)
from gambitrating.exceptions import ValidationException
from gambitrating.type_hints import TrendDirection


def parse_effective_date(value: Union[str, date, datetime, None]) -> date:
    """Normalize an effective date given as a date, datetime or ISO string.

    ``None`` means today.

    Raises:
        ValidationException: If the value is not a date or a valid ISO date string
    """
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationException(f"Invalid effective date: {value!r}")
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError) as e:
        raise ValidationException(f"Invalid effective date: {value!r}") from e


def rating_type_label(rating_type: str) -> str:
    """Display name for a rating type; unknown types are upper-cased."""
    return RATING_TYPE_NAMES.get(rating_type, rating_type.upper())


@dataclass
class RatingHistoryEntry:
    """A rating a player held from a given date.

    Attributes
    ----------
    rating : int
        Rating value
    rating_type : str
        Rating list the value belongs to (``fide_standard``, ``club``, ...)
    effective_date : date
        Date the rating took effect
    is_provisional : bool
        Whether the rating is still provisional
    change : Optional[int]
        Rating change that produced this entry, if it came from a game
    opponent_id : Optional[str]
        Opponent of that game
    """

    rating: int
    rating_type: str = DEFAULT_RATING_TYPE
    effective_date: Optional[date] = None
    is_provisional: bool = False
    change: Optional[int] = None
    opponent_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.effective_date = parse_effective_date(self.effective_date)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize history entry to dictionary."""
        return {
            "rating": self.rating,
            "rating_type": self.rating_type,
            "effective_date": self.effective_date.isoformat(),
            "is_provisional": self.is_provisional,
            "change": self.change,
            "opponent_id": self.opponent_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingHistoryEntry":
        """Deserialize history entry from dictionary."""
        return cls(
            rating=data["rating"],
            rating_type=data.get("rating_type", DEFAULT_RATING_TYPE),
            effective_date=data.get("effective_date"),
            is_provisional=data.get("is_provisional", False),
            change=data.get("change"),
            opponent_id=data.get("opponent_id"),
        )


@dataclass(frozen=True)
class RatingTrend:
    """Direction and size of the latest move in one rating list."""

    direction: TrendDirection
    change: int


class RatingHistory:
    """Ordered collection of a player's rating history entries.

    Entries are kept in insertion order. Queries that talk about "newest"
    sort by effective date; entries sharing a date keep their insertion
    order, so the one added last counts as the newest.
    """

    def __init__(self, entries: Optional[Iterable[RatingHistoryEntry]] = None):
        self.entries: List[RatingHistoryEntry] = list(entries or [])

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def add(self, entry: RatingHistoryEntry) -> None:
        """Append an entry."""
        self.entries.append(entry)

    def by_type(self) -> Dict[str, List[RatingHistoryEntry]]:
        """Group entries by rating type, newest first within each group."""
        grouped: Dict[str, List[Tuple[int, RatingHistoryEntry]]] = {}
        for position, entry in enumerate(self.entries):
            grouped.setdefault(entry.rating_type, []).append((position, entry))

        return {
            rating_type: [
                entry
                for _, entry in sorted(
                    items,
                    key=lambda item: (item[1].effective_date, item[0]),
                    reverse=True,
                )
            ]
            for rating_type, items in grouped.items()
        }

    def current(self) -> Dict[str, RatingHistoryEntry]:
        """Most recent entry for each rating type."""
        return {
            rating_type: entries[0]
            for rating_type, entries in self.by_type().items()
            if entries
        }

    def trend(self, rating_type: str) -> Optional[RatingTrend]:
        """Compare the two newest ratings of one type.

        Returns:
            RatingTrend, or None when fewer than two entries exist
        """
        entries = self.by_type().get(rating_type, [])
        if len(entries) < 2:
            return None

        diff = entries[0].rating - entries[1].rating
        if diff > 0:
            direction = TREND_UP
        elif diff < 0:
            direction = TREND_DOWN
        else:
            direction = TREND_STABLE
        return RatingTrend(direction=direction, change=abs(diff))

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize all entries, in insertion order."""
        return [entry.to_dict() for entry in self.entries]

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, Any]]) -> "RatingHistory":
        """Deserialize entries produced by :meth:`to_list`."""
        return cls(RatingHistoryEntry.from_dict(item) for item in data)
