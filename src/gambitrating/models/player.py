"""A player whose rating is tracked by the rating ledger."""

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


from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from gambitrating.constants import DEFAULT_RATING_TYPE
from gambitrating.models.rating_history import RatingHistory, RatingHistoryEntry
from gambitrating.rating import RatingCategory, classify_rating
from gambitrating.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class RatedPlayer:
    """Represents a rated player.

    Attributes:
        id: Unique identifier for the player
        name: Player's full name
        rating: Current rating
        rating_type: Rating list that game results update
        games_played: Number of rated games recorded
        history: Rating history across all rating types
    """

    def __init__(
        self,
        name: str,
        rating: int,
        rating_type: str = DEFAULT_RATING_TYPE,
        player_id: Optional[str] = None,
        games_played: int = 0,
        history: Optional[RatingHistory] = None,
    ) -> None:
        self.id: str = player_id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.rating: int = rating
        self.rating_type: str = rating_type
        self.games_played: int = games_played
        self.history: RatingHistory = (
            history if history is not None else RatingHistory()
        )

    @property
    def category(self) -> RatingCategory:
        """Category of the current rating."""
        return classify_rating(self.rating)

    def apply_change(
        self,
        change: int,
        opponent_id: Optional[str] = None,
        effective_date: Optional[date] = None,
    ) -> RatingHistoryEntry:
        """Add a game's rating change and log it in the history.

        Args:
            change: Signed rating change
            opponent_id: Opponent of the game
            effective_date: Date of the game, today if omitted

        Returns:
            The new history entry
        """
        old_rating = self.rating
        self.rating += change
        self.games_played += 1
        entry = RatingHistoryEntry(
            rating=self.rating,
            rating_type=self.rating_type,
            effective_date=effective_date,
            change=change,
            opponent_id=opponent_id,
        )
        self.history.add(entry)
        logger.debug(
            "%s: %d -> %d (%+d)", self.name, old_rating, self.rating, change
        )
        return entry

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "rating_type": self.rating_type,
            "games_played": self.games_played,
            "history": self.history.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RatedPlayer:
        """Deserialize player from dictionary."""
        return cls(
            name=data["name"],
            rating=data["rating"],
            rating_type=data.get("rating_type", DEFAULT_RATING_TYPE),
            player_id=data["id"],
            games_played=data.get("games_played", 0),
            history=RatingHistory.from_list(data.get("history", [])),
        )

    def __repr__(self) -> str:
        return f"RatedPlayer(id={self.id!r}, name={self.name!r}, rating={self.rating})"
