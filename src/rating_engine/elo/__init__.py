"""Elo rating modules."""

from rating_engine.elo.calculator import (
    EloParameters,
    calculate_expected_score,
    calculate_expected_score_vs_team,
    calculate_rating_update,
    calculate_sensitivity,
    round_rating,
)
from rating_engine.elo.config import EloSystemConfig, load_elo_system_configs
from rating_engine.elo.solo_calculator import SoloEloCalculator, resolve_solo_match
from rating_engine.elo.team_calculator import (
    IndividualMatchupCalculator,
    TeamAverageCalculator,
    resolve_team_match,
)

__all__ = [
    "EloParameters",
    "EloSystemConfig",
    "IndividualMatchupCalculator",
    "SoloEloCalculator",
    "TeamAverageCalculator",
    "calculate_expected_score",
    "calculate_expected_score_vs_team",
    "calculate_rating_update",
    "calculate_sensitivity",
    "load_elo_system_configs",
    "resolve_solo_match",
    "resolve_team_match",
    "round_rating",
]
