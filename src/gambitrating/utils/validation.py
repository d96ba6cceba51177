"""Validation utilities for Gambit Rating.

This module provides reusable validation functions with consistent error handling.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Optional, Union

from gambitrating.constants import MAX_RATING, MIN_RATING, VALID_SCORES
from gambitrating.exceptions import (
    RatingValidationException,
    ScoreValidationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[Union[int, float, str]] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _to_number(value) -> Optional[float]:
    """Coerce a number or numeric string to float, or None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)):
        try:
            return float(value)
        except (ValueError, OverflowError):
            return None
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


# ========== Rating Validation ==========


def validate_rating(
    rating,
    min_rating: int = MIN_RATING,
    max_rating: int = MAX_RATING,
    required: bool = True,
) -> ValidationResult:
    """Validate a chess rating.

    A rating must be a whole number within ``[min_rating, max_rating]``.
    Numeric strings such as ``"1500"`` are accepted.

    Args:
        rating: Rating value to validate
        min_rating: Minimum allowed rating
        max_rating: Maximum allowed rating
        required: Whether a missing rating is an error

    Returns:
        ValidationResult with the rating as an int in ``sanitized_value``

    Example:
        >>> result = validate_rating("1516")
        >>> if result:
        ...     print(f"Valid rating: {result.sanitized_value}")
    """
    if rating is None or (isinstance(rating, str) and not rating.strip()):
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Rating is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    number = _to_number(rating)
    if number is None or math.isnan(number):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a number: {rating}",
        )

    if math.isinf(number) or not number.is_integer():
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a whole number: {rating}",
        )

    rating_int = int(number)
    if rating_int < min_rating or rating_int > max_rating:
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be between {min_rating} and {max_rating}: {rating_int}",
        )

    return ValidationResult(is_valid=True, sanitized_value=rating_int)


def validate_rating_strict(
    rating, min_rating: int = MIN_RATING, max_rating: int = MAX_RATING
) -> int:
    """Validate rating and return integer or raise exception.

    Args:
        rating: Rating value to validate
        min_rating: Minimum allowed rating
        max_rating: Maximum allowed rating

    Returns:
        Validated rating as integer

    Raises:
        RatingValidationException: If rating is invalid
    """
    result = validate_rating(rating, min_rating, max_rating, required=True)
    if not result.is_valid:
        raise RatingValidationException(result.error_message)
    return int(result.sanitized_value)


# ========== Score Validation ==========


def validate_score(score) -> ValidationResult:
    """Validate a game score (must be 0.0, 0.5, or 1.0).

    Args:
        score: Score to validate

    Returns:
        ValidationResult with the score as a float in ``sanitized_value``
    """
    float_score = _to_number(score)
    if float_score is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a number: {score}",
        )

    if float_score not in VALID_SCORES:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be 0.0, 0.5, or 1.0: {score}",
        )
    return ValidationResult(is_valid=True, sanitized_value=float_score)


def validate_score_strict(score) -> float:
    """Validate score and return it as a float or raise exception.

    Raises:
        ScoreValidationException: If score is not 0.0, 0.5 or 1.0
    """
    result = validate_score(score)
    if not result.is_valid:
        raise ScoreValidationException(result.error_message)
    return float(result.sanitized_value)


# ========== Generic Validation ==========


def validate_non_empty(
    value: Optional[str], field_name: str = "Field"
) -> ValidationResult:
    """Validate that a field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if not value or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())
