"""Registry coverage tests for team models."""

from __future__ import annotations

import pytest

from rating_engine.elo.calculator import EloParameters
from rating_engine.elo.team_calculator import IndividualMatchupCalculator, TeamAverageCalculator
from rating_engine.errors import InvalidInputError
from rating_engine.protocol import TeamModel, TeamRatingModel
from rating_engine.registry import available, create_team_model, register


def test_both_team_models_are_registered() -> None:
    assert available() == [TeamModel.INDIVIDUAL, TeamModel.TEAM_AVERAGE]


def test_create_team_model_binds_parameters() -> None:
    params = EloParameters(k_factor=24.0)
    individual = create_team_model("individual", params)
    average = create_team_model(TeamModel.TEAM_AVERAGE, params)

    assert isinstance(individual, IndividualMatchupCalculator)
    assert isinstance(average, TeamAverageCalculator)
    assert isinstance(individual, TeamRatingModel)
    assert isinstance(average, TeamRatingModel)
    assert average.params is params


def test_duplicate_registration_raises_error() -> None:
    with pytest.raises(ValueError):
        register(TeamModel.INDIVIDUAL, IndividualMatchupCalculator)


def test_unknown_model_lists_available_models() -> None:
    with pytest.raises(InvalidInputError, match="individual"):
        create_team_model("average_of_averages", EloParameters())
