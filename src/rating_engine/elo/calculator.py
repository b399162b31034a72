"""Elo expectation, sensitivity and rating-update logic."""

from __future__ import annotations

from dataclasses import dataclass
from math import floor

from rating_engine.common import RatingChange
from rating_engine.protocol import SweepPolicy, TeamModel
from rating_engine.validation import (
    require_actual_score,
    require_expected_score,
    require_games_played,
    require_positive,
    require_rating,
)


@dataclass(frozen=True)
class EloParameters:
    initial_rating: float = 1000.0
    k_factor: float = 32.0
    solo_scale_factor: float = 400.0
    team_scale_factor: float = 500.0
    dynamic_k_base: float = 50.0
    dynamic_k_games_scale: float = 300.0
    sweep_multiplier: float = 1.2
    sweep_policy: SweepPolicy = SweepPolicy.BOTH_SIDES
    team_model: TeamModel = TeamModel.INDIVIDUAL


def calculate_expected_score(
    rating: float,
    opponent_rating: float,
    scale_factor: float = 400.0,
) -> float:
    """Compute the Elo expected score for one side."""
    rating = require_rating(rating)
    opponent_rating = require_rating(opponent_rating, field_name="opponent_rating")
    scale_factor = require_positive(scale_factor, field_name="scale_factor")
    try:
        return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / scale_factor))
    except OverflowError:
        # Rating gap beyond float range; the stronger side is a certain winner.
        return 0.0


def calculate_expected_score_vs_team(
    rating: float,
    opponent1_rating: float,
    opponent2_rating: float,
    scale_factor: float = 500.0,
) -> float:
    """Average of the pairwise expectations against each individual opponent."""
    expected_vs_opponent1 = calculate_expected_score(rating, opponent1_rating, scale_factor)
    expected_vs_opponent2 = calculate_expected_score(rating, opponent2_rating, scale_factor)
    return (expected_vs_opponent1 + expected_vs_opponent2) / 2.0


def calculate_sensitivity(
    games_played: int,
    base: float = 50.0,
    games_scale: float = 300.0,
) -> float:
    """Experience-based K-factor: ``base`` at zero games, halved at ``games_scale`` games."""
    games_played = require_games_played(games_played)
    base = require_positive(base, field_name="dynamic_k_base")
    games_scale = require_positive(games_scale, field_name="dynamic_k_games_scale")
    return base / (1.0 + games_played / games_scale)


def round_rating(value: float) -> int:
    """Round half up toward positive infinity (1000.5 -> 1001, -2.5 -> -2)."""
    return int(floor(value + 0.5))


def calculate_rating_update(
    current_rating: float,
    expected_score: float,
    actual_score: float,
    sensitivity: float,
    multiplier: float = 1.0,
) -> RatingChange:
    current_rating = require_rating(current_rating, field_name="current_rating")
    expected_score = require_expected_score(expected_score)
    actual_score = require_actual_score(actual_score)
    sensitivity = require_positive(sensitivity, field_name="sensitivity")
    multiplier = require_positive(multiplier, field_name="multiplier")

    new_rating = round_rating(
        current_rating + sensitivity * (actual_score - expected_score) * multiplier
    )
    return RatingChange(
        old_rating=current_rating,
        new_rating=new_rating,
        delta=new_rating - current_rating,
    )
