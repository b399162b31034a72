"""Registry of team-play rating models."""

from __future__ import annotations

from typing import Callable

from rating_engine.elo.calculator import EloParameters
from rating_engine.elo.team_calculator import IndividualMatchupCalculator, TeamAverageCalculator
from rating_engine.errors import InvalidInputError
from rating_engine.protocol import TeamModel, TeamRatingModel

CreateTeamModelFn = Callable[[EloParameters], TeamRatingModel]

_REGISTRY: dict[TeamModel, CreateTeamModelFn] = {}


def register(model: TeamModel, factory: CreateTeamModelFn) -> None:
    """Register one team-model factory."""
    if model in _REGISTRY:
        raise ValueError(f"Duplicate team model registration for model={model.value}")
    _REGISTRY[model] = factory


def available() -> list[TeamModel]:
    """Return all registered team models in deterministic order."""
    return sorted(_REGISTRY.keys(), key=lambda item: item.value)


def parse_team_model(model: TeamModel | str) -> TeamModel:
    if isinstance(model, TeamModel):
        return model
    try:
        return TeamModel(str(model).strip().lower())
    except ValueError as exc:
        names = ", ".join(item.value for item in TeamModel)
        raise InvalidInputError(f"Unknown team model {model!r}. Available: {names}") from exc


def create_team_model(model: TeamModel | str, params: EloParameters) -> TeamRatingModel:
    """Build the registered calculator for ``model`` bound to ``params``."""
    key = parse_team_model(model)
    try:
        factory = _REGISTRY[key]
    except KeyError as exc:
        names = ", ".join(item.value for item in available())
        raise InvalidInputError(
            f"No team model registered for {key.value}. Available: {names}"
        ) from exc
    return factory(params)


def _register_defaults() -> None:
    if _REGISTRY:
        return
    register(TeamModel.INDIVIDUAL, IndividualMatchupCalculator)
    register(TeamModel.TEAM_AVERAGE, TeamAverageCalculator)


_register_defaults()
