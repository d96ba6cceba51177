"""Exceptions for use in Gambit Rating"""

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



# ========== Base Application Exception ==========


class GambitRatingException(Exception):
    """Base exception for all Gambit Rating errors.

    All custom exceptions in the package should inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Player Exceptions ==========


class PlayerException(GambitRatingException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class DuplicatePlayerException(PlayerException):
    """Raised when attempting to add a player that already exists."""

    pass


# ========== Result Exceptions ==========


class ResultException(GambitRatingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., score out of range)."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(GambitRatingException):
    """Base exception for validation errors."""

    pass


class RatingValidationException(ValidationException):
    """Raised when a rating value is invalid."""

    pass


class ScoreValidationException(ValidationException):
    """Raised when a game score is not 0.0, 0.5 or 1.0."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GambitRatingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid (e.g., overlapping rating bands)."""

    pass
