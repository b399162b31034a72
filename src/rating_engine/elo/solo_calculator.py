"""One-on-one Elo resolution."""

from __future__ import annotations

import logging

from rating_engine.common import SoloMatchOutcome
from rating_engine.elo.calculator import (
    EloParameters,
    calculate_expected_score,
    calculate_rating_update,
)
from rating_engine.validation import require_flag

logger = logging.getLogger(__name__)


class SoloEloCalculator:
    """Stateless one-on-one calculator using the fixed K-factor."""

    def __init__(self, params: EloParameters | None = None) -> None:
        self.params = params or EloParameters()

    def resolve(
        self,
        rating_a: float,
        rating_b: float,
        a_won: bool,
        *,
        multiplier_a: float = 1.0,
        multiplier_b: float = 1.0,
    ) -> SoloMatchOutcome:
        a_won = require_flag(a_won, field_name="a_won")

        # Each side is evaluated from its own point of view rather than as 1 - other.
        expected_a = calculate_expected_score(rating_a, rating_b, self.params.solo_scale_factor)
        expected_b = calculate_expected_score(rating_b, rating_a, self.params.solo_scale_factor)

        actual_a = 1.0 if a_won else 0.0
        actual_b = 1.0 - actual_a

        player_a = calculate_rating_update(
            rating_a, expected_a, actual_a, self.params.k_factor, multiplier_a
        )
        player_b = calculate_rating_update(
            rating_b, expected_b, actual_b, self.params.k_factor, multiplier_b
        )
        logger.debug(
            "solo match resolved a=%s->%s b=%s->%s a_won=%s expected_a=%.4f",
            player_a.old_rating,
            player_a.new_rating,
            player_b.old_rating,
            player_b.new_rating,
            a_won,
            expected_a,
        )
        return SoloMatchOutcome(
            player_a=player_a,
            player_b=player_b,
            expected_a=expected_a,
            expected_b=expected_b,
        )


def resolve_solo_match(
    rating_a: float,
    rating_b: float,
    a_won: bool,
    multiplier: float = 1.0,
    *,
    params: EloParameters | None = None,
) -> SoloMatchOutcome:
    """Resolve a one-on-one match, applying ``multiplier`` to both players."""
    return SoloEloCalculator(params).resolve(
        rating_a,
        rating_b,
        a_won,
        multiplier_a=multiplier,
        multiplier_b=multiplier,
    )
