"""Input guards shared by the rating calculators."""

from __future__ import annotations

from math import isfinite
from numbers import Integral, Real

from rating_engine.errors import InvalidInputError, InvalidOutcomeError


def require_rating(value: float, *, field_name: str = "rating") -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{field_name} must be a real number, got {value!r}")
    if not isfinite(value):
        raise InvalidInputError(f"{field_name} must be finite, got {value!r}")
    return float(value)


def require_games_played(value: int, *, field_name: str = "games_played") -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{field_name} must be >= 0, got {value!r}")
    return int(value)


def require_positive(value: float, *, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{field_name} must be a real number, got {value!r}")
    if not isfinite(value) or value <= 0.0:
        raise InvalidInputError(f"{field_name} must be finite and > 0, got {value!r}")
    return float(value)


def require_actual_score(value: float) -> float:
    """Accept only a declared win (1) or loss (0); draws are not modelled."""
    if isinstance(value, bool) or not isinstance(value, Real) or value not in (0, 1):
        raise InvalidOutcomeError(f"actual_score must be exactly 0 or 1, got {value!r}")
    return float(value)


def require_expected_score(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"expected_score must be a real number, got {value!r}")
    if not isfinite(value) or value < 0.0 or value > 1.0:
        raise InvalidInputError(f"expected_score must be between 0 and 1, got {value!r}")
    return float(value)


def require_flag(value: bool, *, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidOutcomeError(f"{field_name} must be True or False, got {value!r}")
    return value
