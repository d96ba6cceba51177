"""Rating ledger: applies game results to a set of rated players.

This module keeps rating state outside the pure rating engine.
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


from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from gambitrating.constants import DEFAULT_RATING_TYPE, K_FACTOR, WIN_SCORE
from gambitrating.exceptions import (
    DuplicatePlayerException,
    InvalidResultException,
    PlayerNotFoundException,
    ValidationException,
)
from gambitrating.models.player import RatedPlayer
from gambitrating.models.rating_history import RatingHistoryEntry, parse_effective_date
from gambitrating.rating import compute_rating_change
from gambitrating.type_hints import LedgerDict, RatingChanges
from gambitrating.utils import setup_logger
from gambitrating.utils.validation import (
    validate_non_empty,
    validate_rating_strict,
    validate_score,
)

logger = setup_logger(__name__)


@dataclass
class GameRecord:
    """A rated game as recorded by the ledger.

    Attributes
    ----------
    player_id : str
        ID of the player whose outcome was entered
    opponent_id : str
        ID of the opponent
    outcome : float
        Score of ``player_id`` (1.0 = win, 0.5 = draw, 0.0 = loss)
    player_change : int
        Rating change applied to the player
    opponent_change : int
        Rating change applied to the opponent
    """

    player_id: str
    opponent_id: str
    outcome: float
    player_change: int
    opponent_change: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game record to dictionary."""
        return {
            "player_id": self.player_id,
            "opponent_id": self.opponent_id,
            "outcome": self.outcome,
            "player_change": self.player_change,
            "opponent_change": self.opponent_change,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameRecord":
        """Deserialize game record from dictionary."""
        return cls(
            player_id=data["player_id"],
            opponent_id=data["opponent_id"],
            outcome=data["outcome"],
            player_change=data["player_change"],
            opponent_change=data["opponent_change"],
        )


class RatingLedger:
    """Owns the rated players and applies game results to them.

    This class is responsible for:
    - Registering players with a validated starting rating
    - Recording single games and whole rounds
    - Undoing the most recent game
    - Producing standings and a serializable snapshot
    """

    def __init__(self, k_factor: float = K_FACTOR) -> None:
        self.k_factor = k_factor
        self.players: Dict[str, RatedPlayer] = {}
        self.games: List[GameRecord] = []

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, player_id: str) -> bool:
        return player_id in self.players

    def add_player(
        self,
        name: str,
        rating,
        rating_type: str = DEFAULT_RATING_TYPE,
        effective_date: Optional[date] = None,
        player_id: Optional[str] = None,
        is_provisional: bool = False,
    ) -> RatedPlayer:
        """Register a player with a starting rating.

        Args:
            name: Player's name
            rating: Starting rating, must pass ``is_valid_rating``
            rating_type: Rating list the starting rating comes from
            effective_date: Date of the starting rating, today if omitted
            player_id: Explicit ID, generated if omitted
            is_provisional: Whether the starting rating is provisional

        Returns:
            The new player

        Raises:
            ValidationException: If the name is empty
            RatingValidationException: If the rating is invalid
            DuplicatePlayerException: If ``player_id`` is already registered
        """
        name_result = validate_non_empty(name, "Player name")
        if not name_result:
            raise ValidationException(name_result.error_message)
        starting_rating = validate_rating_strict(rating)

        if player_id is not None and player_id in self.players:
            raise DuplicatePlayerException(f"Player already registered: {player_id}")

        player = RatedPlayer(
            name=name_result.sanitized_value,
            rating=starting_rating,
            rating_type=rating_type,
            player_id=player_id,
        )
        player.history.add(
            RatingHistoryEntry(
                rating=starting_rating,
                rating_type=rating_type,
                effective_date=effective_date,
                is_provisional=is_provisional,
            )
        )
        self.players[player.id] = player
        logger.info("Added player %s (%d)", player.name, player.rating)
        return player

    def get_player(self, player_id: str) -> RatedPlayer:
        """Look up a player by ID.

        Raises:
            PlayerNotFoundException: If no such player is registered
        """
        player = self.players.get(player_id)
        if player is None:
            raise PlayerNotFoundException(f"Cannot find player: {player_id}")
        return player

    def remove_player(self, player_id: str) -> RatedPlayer:
        """Remove a player from the ledger. Recorded games are kept."""
        player = self.get_player(player_id)
        del self.players[player_id]
        logger.info("Removed player %s", player.name)
        return player

    def _validate_game(
        self, player_id: str, opponent_id: str, outcome
    ) -> Tuple[RatedPlayer, RatedPlayer, float]:
        """Check a game entry before anything is changed.

        Raises:
            PlayerNotFoundException: If either player is unknown
            InvalidResultException: If the outcome is not 0, 0.5 or 1, or a
                player is paired against themself
        """
        if player_id == opponent_id:
            raise InvalidResultException(
                f"Player {player_id} cannot play against themself"
            )
        player = self.get_player(player_id)
        opponent = self.get_player(opponent_id)

        score_result = validate_score(outcome)
        if not score_result:
            logger.error(
                "Invalid outcome for %s vs %s: %s", player.name, opponent.name, outcome
            )
            raise InvalidResultException(score_result.error_message)
        return player, opponent, float(score_result.sanitized_value)

    def record_game(
        self,
        player_id: str,
        opponent_id: str,
        outcome,
        effective_date: Optional[date] = None,
    ) -> RatingChanges:
        """Record one rated game and update both players.

        Both changes are computed from the ratings held before the game.

        Args:
            player_id: ID of the player the outcome refers to
            opponent_id: ID of the opponent
            outcome: Player's score (1.0 = win, 0.5 = draw, 0.0 = loss)
            effective_date: Date of the game, today if omitted

        Returns:
            ``(player_change, opponent_change)``
        """
        player, opponent, score = self._validate_game(player_id, opponent_id, outcome)
        changes = self._compute_changes(player, opponent, score)
        game_date = parse_effective_date(effective_date)
        self._apply(player, opponent, score, changes, game_date)
        return changes

    def record_round(
        self,
        results: Sequence[Tuple[str, str, float]],
        effective_date: Optional[date] = None,
    ) -> List[RatingChanges]:
        """Record all games of a round.

        Every change in the round is computed from the ratings held before
        the round started, so game order inside a round does not matter.
        The whole batch is validated first; nothing is applied if any entry
        is invalid or a player appears twice.

        Args:
            results: ``(player_id, opponent_id, outcome)`` tuples
            effective_date: Date of the round, today if omitted

        Returns:
            ``(player_change, opponent_change)`` per entry, in input order
        """
        seen = set()
        validated = []
        for player_id, opponent_id, outcome in results:
            for pid in (player_id, opponent_id):
                if pid in seen:
                    raise InvalidResultException(
                        f"Player {pid} appears more than once in the round"
                    )
                seen.add(pid)
            validated.append(self._validate_game(player_id, opponent_id, outcome))

        planned = [
            (player, opponent, score, self._compute_changes(player, opponent, score))
            for player, opponent, score in validated
        ]

        game_date = parse_effective_date(effective_date)
        for player, opponent, score, changes in planned:
            self._apply(player, opponent, score, changes, game_date)

        logger.info("Recorded round with %d games", len(planned))
        return [changes for _, _, _, changes in planned]

    def _compute_changes(
        self, player: RatedPlayer, opponent: RatedPlayer, score: float
    ) -> RatingChanges:
        player_change = compute_rating_change(
            player.rating, opponent.rating, score, self.k_factor
        )
        opponent_change = compute_rating_change(
            opponent.rating, player.rating, WIN_SCORE - score, self.k_factor
        )
        return player_change, opponent_change

    def _apply(
        self,
        player: RatedPlayer,
        opponent: RatedPlayer,
        score: float,
        changes: RatingChanges,
        effective_date: date,
    ) -> None:
        player_change, opponent_change = changes
        player.apply_change(player_change, opponent.id, effective_date)
        opponent.apply_change(opponent_change, player.id, effective_date)
        self.games.append(
            GameRecord(
                player_id=player.id,
                opponent_id=opponent.id,
                outcome=score,
                player_change=player_change,
                opponent_change=opponent_change,
            )
        )
        logger.debug(
            "Recorded: %s (%s, %+d) vs %s (%s, %+d)",
            player.name,
            score,
            player_change,
            opponent.name,
            WIN_SCORE - score,
            opponent_change,
        )

    def undo_last_game(self) -> Optional[GameRecord]:
        """Revert the most recently recorded game.

        Returns:
            The reverted game, or None if nothing has been recorded
        """
        if not self.games:
            logger.warning("Cannot undo: no games recorded")
            return None

        game = self.games.pop()
        for pid, change in (
            (game.player_id, game.player_change),
            (game.opponent_id, game.opponent_change),
        ):
            player = self.players.get(pid)
            if player is None:
                logger.warning("Cannot undo rating of removed player %s", pid)
                continue
            self._undo_player_change(player, change)

        logger.info("Undid game %s vs %s", game.player_id, game.opponent_id)
        return game

    def _undo_player_change(self, player: RatedPlayer, change: int) -> None:
        player.rating -= change
        player.games_played = max(0, player.games_played - 1)
        # Latest game entry is the one to drop
        for index in range(len(player.history.entries) - 1, -1, -1):
            if player.history.entries[index].change is not None:
                del player.history.entries[index]
                break

    def standings(self) -> List[RatedPlayer]:
        """Players sorted by rating (highest first), then by name."""
        return sorted(self.players.values(), key=lambda p: (-p.rating, p.name))

    def to_dict(self) -> LedgerDict:
        """Serialize the ledger to plain data."""
        return {
            "players": [player.to_dict() for player in self.players.values()],
            "games": [game.to_dict() for game in self.games],
        }

    @classmethod
    def from_dict(cls, data: LedgerDict, k_factor: float = K_FACTOR) -> "RatingLedger":
        """Rebuild a ledger produced by :meth:`to_dict`."""
        ledger = cls(k_factor=k_factor)
        for player_data in data.get("players", []):
            player = RatedPlayer.from_dict(player_data)
            ledger.players[player.id] = player
        ledger.games = [GameRecord.from_dict(game) for game in data.get("games", [])]
        return ledger
