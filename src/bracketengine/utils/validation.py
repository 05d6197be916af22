"""Validation utilities for Bracket Engine.

This module provides reusable validation functions with consistent error handling.
"""

import math
from typing import Any, Optional, Union

from bracketengine.constants import PROOF_URL_PATTERN, ROUND_RANK
from bracketengine.exceptions import (
    InvalidProofUrlException,
    InvalidRoundException,
    InvalidScoreException,
)
from bracketengine.type_hints import RawScore


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[Any] = None,
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


# ========== Score Validation ==========


def parse_score(score: RawScore) -> Optional[Union[int, float]]:
    """Parse a raw score into a finite number.

    Integral values come back as ``int`` so "3" and 3.0 both store as 3.

    Returns:
        The parsed number, or None if the value is not a finite number
    """
    if score is None or isinstance(score, bool):
        return None

    if isinstance(score, str):
        score = score.strip()
        if not score:
            return None

    try:
        value = float(score)
    except (ValueError, TypeError, OverflowError):
        return None

    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def validate_score(score: RawScore) -> ValidationResult:
    """Validate a match score (any finite number).

    Args:
        score: Score to validate, as a number or numeric string

    Returns:
        ValidationResult whose sanitized_value is the parsed number
    """
    value = parse_score(score)
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message="Score invalide.",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_score_strict(score: RawScore) -> Union[int, float]:
    """Validate a score and raise exception if invalid.

    Raises:
        InvalidScoreException: If the score is not a finite number
    """
    result = validate_score(score)
    if not result.is_valid:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


# ========== Proof Link Validation ==========


def validate_proof_url(proof_url: Optional[str]) -> ValidationResult:
    """Validate an optional proof link.

    An empty link is valid. Otherwise it must end with a png/jpg/jpeg/webp
    extension, optionally followed by a query string.

    Example:
        >>> bool(validate_proof_url("https://i.imgur.com/abc.PNG?x=1"))
        True
        >>> bool(validate_proof_url("http://x.com/img.gif"))
        False
    """
    if not proof_url:
        return ValidationResult(is_valid=True, sanitized_value="")

    if PROOF_URL_PATTERN.search(proof_url):
        return ValidationResult(is_valid=True, sanitized_value=proof_url)

    return ValidationResult(
        is_valid=False,
        error_message="proofUrl doit être un lien image direct (.png/.jpg/.webp).",
    )


def validate_proof_url_strict(proof_url: Optional[str]) -> str:
    """Validate a proof link and raise exception if invalid.

    Raises:
        InvalidProofUrlException: If the link is not a direct image link
    """
    result = validate_proof_url(proof_url)
    if not result.is_valid:
        raise InvalidProofUrlException(result.error_message)
    return result.sanitized_value


# ========== Round Validation ==========


def validate_round_code(round_code: Optional[str]) -> ValidationResult:
    """Validate that a round code is one of the bracket stages."""
    if round_code in ROUND_RANK:
        return ValidationResult(is_valid=True, sanitized_value=round_code)
    return ValidationResult(
        is_valid=False,
        error_message=f"Round inconnu: {round_code}",
    )


def validate_round_code_strict(round_code: Optional[str]) -> str:
    """Validate a round code and raise exception if invalid.

    Raises:
        InvalidRoundException: If the code is not a bracket stage
    """
    result = validate_round_code(round_code)
    if not result.is_valid:
        raise InvalidRoundException(result.error_message)
    return result.sanitized_value
