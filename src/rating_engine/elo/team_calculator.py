"""Two-versus-two Elo resolution.

Two models coexist and are selected by the caller:

* ``IndividualMatchupCalculator`` rates each player against both opponents
  individually with a wider divisor and an experience-based K-factor.
* ``TeamAverageCalculator`` rates the teams by their mean rating with the
  pairwise divisor and the fixed K-factor, moving both teammates by the same
  delta.
"""

from __future__ import annotations

import logging

from rating_engine.common import RatingChange, TeamMatchOutcome
from rating_engine.elo.calculator import (
    EloParameters,
    calculate_expected_score,
    calculate_expected_score_vs_team,
    calculate_rating_update,
    calculate_sensitivity,
    round_rating,
)
from rating_engine.errors import InvalidInputError
from rating_engine.protocol import TeamModel
from rating_engine.validation import (
    require_flag,
    require_games_played,
    require_positive,
    require_rating,
)

logger = logging.getLogger(__name__)


class TeamCalculatorMixin:
    """Shared validation for team calculators."""

    @staticmethod
    def _validate_team_inputs(
        ratings: tuple[float, float, float, float],
        team_a_won: bool,
        games_played: tuple[int, int, int, int],
    ) -> tuple[tuple[float, float, float, float], tuple[int, int, int, int]]:
        require_flag(team_a_won, field_name="team_a_won")
        if len(games_played) != 4:
            raise InvalidInputError(f"games_played must hold four counts, got {len(games_played)}")
        labels = ("a1", "a2", "b1", "b2")
        checked_ratings = tuple(
            require_rating(rating, field_name=f"rating_{label}")
            for rating, label in zip(ratings, labels)
        )
        checked_games = tuple(
            require_games_played(games, field_name=f"games_played_{label}")
            for games, label in zip(games_played, labels)
        )
        return checked_ratings, checked_games  # type: ignore[return-value]


class IndividualMatchupCalculator(TeamCalculatorMixin):
    """Per-player team Elo with dynamic sensitivity."""

    name = TeamModel.INDIVIDUAL

    def __init__(self, params: EloParameters | None = None) -> None:
        self.params = params or EloParameters()

    def _sensitivity(self, games_played: int) -> float:
        return calculate_sensitivity(
            games_played,
            base=self.params.dynamic_k_base,
            games_scale=self.params.dynamic_k_games_scale,
        )

    def resolve(
        self,
        rating_a1: float,
        rating_a2: float,
        rating_b1: float,
        rating_b2: float,
        team_a_won: bool,
        games_played: tuple[int, int, int, int] = (0, 0, 0, 0),
        *,
        multiplier_a: float = 1.0,
        multiplier_b: float = 1.0,
    ) -> TeamMatchOutcome:
        (a1, a2, b1, b2), (games_a1, games_a2, games_b1, games_b2) = self._validate_team_inputs(
            (rating_a1, rating_a2, rating_b1, rating_b2), team_a_won, games_played
        )
        scale = self.params.team_scale_factor

        expected_a1 = calculate_expected_score_vs_team(a1, b1, b2, scale)
        expected_a2 = calculate_expected_score_vs_team(a2, b1, b2, scale)
        expected_b1 = calculate_expected_score_vs_team(b1, a1, a2, scale)
        expected_b2 = calculate_expected_score_vs_team(b2, a1, a2, scale)

        team_a_actual = 1.0 if team_a_won else 0.0
        team_b_actual = 1.0 - team_a_actual

        outcome = TeamMatchOutcome(
            team_a_player1=calculate_rating_update(
                a1, expected_a1, team_a_actual, self._sensitivity(games_a1), multiplier_a
            ),
            team_a_player2=calculate_rating_update(
                a2, expected_a2, team_a_actual, self._sensitivity(games_a2), multiplier_a
            ),
            team_b_player1=calculate_rating_update(
                b1, expected_b1, team_b_actual, self._sensitivity(games_b1), multiplier_b
            ),
            team_b_player2=calculate_rating_update(
                b2, expected_b2, team_b_actual, self._sensitivity(games_b2), multiplier_b
            ),
            expected_scores=(expected_a1, expected_a2, expected_b1, expected_b2),
        )
        logger.debug(
            "team match resolved model=%s team_a_won=%s deltas=%s",
            self.name.value,
            team_a_won,
            outcome.deltas,
        )
        return outcome


class TeamAverageCalculator(TeamCalculatorMixin):
    """Team-mean Elo with the fixed K-factor; teammates share one delta."""

    name = TeamModel.TEAM_AVERAGE

    def __init__(self, params: EloParameters | None = None) -> None:
        self.params = params or EloParameters()

    def _team_delta(self, expected: float, actual: float, multiplier: float) -> int:
        multiplier = require_positive(multiplier, field_name="multiplier")
        return round_rating(self.params.k_factor * (actual - expected) * multiplier)

    @staticmethod
    def _apply(rating: float, delta: int) -> RatingChange:
        return RatingChange(old_rating=rating, new_rating=rating + delta, delta=delta)

    def resolve(
        self,
        rating_a1: float,
        rating_a2: float,
        rating_b1: float,
        rating_b2: float,
        team_a_won: bool,
        games_played: tuple[int, int, int, int] = (0, 0, 0, 0),
        *,
        multiplier_a: float = 1.0,
        multiplier_b: float = 1.0,
    ) -> TeamMatchOutcome:
        # Experience is validated for a uniform contract but does not affect this model.
        (a1, a2, b1, b2), _ = self._validate_team_inputs(
            (rating_a1, rating_a2, rating_b1, rating_b2), team_a_won, games_played
        )
        team_a_average = (a1 + a2) / 2.0
        team_b_average = (b1 + b2) / 2.0

        scale = self.params.solo_scale_factor
        team_a_expected = calculate_expected_score(team_a_average, team_b_average, scale)
        team_b_expected = calculate_expected_score(team_b_average, team_a_average, scale)

        team_a_actual = 1.0 if team_a_won else 0.0
        team_b_actual = 1.0 - team_a_actual

        team_a_delta = self._team_delta(team_a_expected, team_a_actual, multiplier_a)
        team_b_delta = self._team_delta(team_b_expected, team_b_actual, multiplier_b)

        outcome = TeamMatchOutcome(
            team_a_player1=self._apply(a1, team_a_delta),
            team_a_player2=self._apply(a2, team_a_delta),
            team_b_player1=self._apply(b1, team_b_delta),
            team_b_player2=self._apply(b2, team_b_delta),
            expected_scores=(team_a_expected, team_a_expected, team_b_expected, team_b_expected),
        )
        logger.debug(
            "team match resolved model=%s team_a_won=%s deltas=%s",
            self.name.value,
            team_a_won,
            outcome.deltas,
        )
        return outcome


def resolve_team_match(
    rating_a1: float,
    rating_a2: float,
    rating_b1: float,
    rating_b2: float,
    team_a_won: bool,
    games_played_a1: int = 0,
    games_played_a2: int = 0,
    games_played_b1: int = 0,
    games_played_b2: int = 0,
    multiplier: float = 1.0,
    *,
    params: EloParameters | None = None,
    model: TeamModel | str | None = None,
) -> TeamMatchOutcome:
    """Resolve a two-versus-two match with the selected (or configured) team model."""
    # Imported lazily: the registry imports this module to register the calculators.
    from rating_engine.registry import create_team_model

    params = params or EloParameters()
    calculator = create_team_model(model or params.team_model, params)
    return calculator.resolve(
        rating_a1,
        rating_a2,
        rating_b1,
        rating_b2,
        team_a_won,
        (games_played_a1, games_played_a2, games_played_b1, games_played_b2),
        multiplier_a=multiplier,
        multiplier_b=multiplier,
    )
