"""Unit tests for both two-versus-two Elo models."""

from __future__ import annotations

import pytest

from rating_engine.elo.calculator import EloParameters
from rating_engine.elo.team_calculator import (
    IndividualMatchupCalculator,
    TeamAverageCalculator,
    resolve_team_match,
)
from rating_engine.errors import InvalidInputError, InvalidOutcomeError
from rating_engine.protocol import TeamModel


def test_individual_model_new_players_even_match() -> None:
    outcome = resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, 0, 0, 0, 0)
    assert outcome.expected_scores == pytest.approx((0.5, 0.5, 0.5, 0.5))
    assert outcome.deltas == (25, 25, -25, -25)
    assert outcome.team_a_player1.new_rating == 1225
    assert outcome.team_b_player2.new_rating == 1175


def test_individual_model_scales_with_experience() -> None:
    # K=25 at 300 games, so +/-12.5 rounds half up to +13 / -12.
    outcome = resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, 300, 0, 300, 0)
    assert outcome.deltas == (13, 25, -12, -25)


def test_individual_model_rates_each_player_against_both_opponents() -> None:
    outcome = resolve_team_match(1300.0, 1100.0, 1200.0, 1200.0, True)
    assert outcome.expected_scores[0] == pytest.approx(0.6131368, abs=1e-6)
    assert outcome.expected_scores[1] == pytest.approx(0.3868632, abs=1e-6)
    assert outcome.expected_scores[2] == pytest.approx(0.5)
    assert outcome.deltas == (19, 31, -25, -25)


def test_team_average_model_shares_one_delta_per_team() -> None:
    outcome = resolve_team_match(
        1300.0, 1100.0, 1200.0, 1200.0, True, model=TeamModel.TEAM_AVERAGE
    )
    assert outcome.deltas == (16, 16, -16, -16)
    assert outcome.team_a_player1.new_rating == 1316
    assert outcome.team_a_player2.new_rating == 1116


def test_team_average_model_uses_pairwise_curve_on_means() -> None:
    outcome = TeamAverageCalculator().resolve(1300.0, 1100.0, 1000.0, 1000.0, True)
    assert outcome.expected_scores[0] == pytest.approx(0.7597469, abs=1e-6)
    assert outcome.deltas == (8, 8, -8, -8)


def test_team_average_model_ignores_experience() -> None:
    fresh = TeamAverageCalculator().resolve(1200.0, 1200.0, 1200.0, 1200.0, False, (0, 0, 0, 0))
    veteran = TeamAverageCalculator().resolve(
        1200.0, 1200.0, 1200.0, 1200.0, False, (900, 900, 900, 900)
    )
    assert fresh.deltas == veteran.deltas == (-16, -16, 16, 16)


def test_models_disagree_on_the_same_match() -> None:
    individual = resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, model="individual")
    average = resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, model="team_average")
    assert individual.deltas != average.deltas


def test_model_defaults_to_parameters() -> None:
    params = EloParameters(team_model=TeamModel.TEAM_AVERAGE)
    outcome = resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, params=params)
    assert outcome.deltas == (16, 16, -16, -16)


def test_multiplier_applies_to_both_team_models() -> None:
    individual = IndividualMatchupCalculator().resolve(
        1200.0, 1200.0, 1200.0, 1200.0, True, multiplier_a=1.2, multiplier_b=1.2
    )
    average = TeamAverageCalculator().resolve(
        1200.0, 1200.0, 1200.0, 1200.0, True, multiplier_a=1.2, multiplier_b=1.2
    )
    assert individual.deltas == (30, 30, -30, -30)
    assert average.deltas == (19, 19, -19, -19)


def test_unknown_team_model_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, model="blended")


def test_negative_experience_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, True, -3, 0, 0, 0)


def test_non_finite_team_rating_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        resolve_team_match(1200.0, float("inf"), 1200.0, 1200.0, True)


def test_non_boolean_team_result_is_rejected() -> None:
    with pytest.raises(InvalidOutcomeError):
        resolve_team_match(1200.0, 1200.0, 1200.0, 1200.0, "team1")  # type: ignore[arg-type]
