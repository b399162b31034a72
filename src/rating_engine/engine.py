"""Rating engine bound to one Elo configuration.

``RatingEngine`` is the single entry point callers use to preview or persist a
result: it resolves the series (if any), derives the sweep multiplier under the
configured policy and dispatches team play to the configured team model.
Instances are immutable and hold no state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rating_engine.common import (
    ParticipantRating,
    RatingChange,
    SeriesResult,
    Side,
    SoloMatchOutcome,
    TeamMatchOutcome,
)
from rating_engine.elo.calculator import (
    EloParameters,
    calculate_expected_score,
    calculate_expected_score_vs_team,
    calculate_rating_update,
    calculate_sensitivity,
)
from rating_engine.elo.config import EloSystemConfig
from rating_engine.elo.solo_calculator import SoloEloCalculator
from rating_engine.errors import InvalidInputError
from rating_engine.protocol import MatchType, SeriesFormat, SweepPolicy, TeamModel, TeamRatingModel
from rating_engine.registry import create_team_model
from rating_engine.series import resolve_series
from rating_engine.validation import require_rating

logger = logging.getLogger(__name__)


class RatingEngine:
    def __init__(self, params: EloParameters | None = None) -> None:
        self.params = params or EloParameters()
        self._solo = SoloEloCalculator(self.params)

    @classmethod
    def from_config(cls, config: EloSystemConfig) -> RatingEngine:
        return cls(config.parameters)

    @property
    def initial_rating(self) -> float:
        return self.params.initial_rating

    def rating_or_initial(self, rating: float | None) -> float:
        """Stored rating, or the configured baseline for a participant without history."""
        if rating is None:
            return self.params.initial_rating
        return require_rating(rating)

    def expected_score(self, rating: float, opponent_rating: float) -> float:
        return calculate_expected_score(rating, opponent_rating, self.params.solo_scale_factor)

    def expected_score_vs_team(
        self,
        rating: float,
        opponent1_rating: float,
        opponent2_rating: float,
    ) -> float:
        return calculate_expected_score_vs_team(
            rating,
            opponent1_rating,
            opponent2_rating,
            self.params.team_scale_factor,
        )

    def sensitivity(self, games_played: int) -> float:
        return calculate_sensitivity(
            games_played,
            base=self.params.dynamic_k_base,
            games_scale=self.params.dynamic_k_games_scale,
        )

    def update_rating(
        self,
        current_rating: float,
        expected_score: float,
        actual_score: float,
        multiplier: float = 1.0,
        *,
        sensitivity: float | None = None,
    ) -> RatingChange:
        """Apply one result; ``sensitivity`` defaults to the fixed K-factor."""
        return calculate_rating_update(
            current_rating,
            expected_score,
            actual_score,
            self.params.k_factor if sensitivity is None else sensitivity,
            multiplier,
        )

    def team_model(self, model: TeamModel | str | None = None) -> TeamRatingModel:
        return create_team_model(model or self.params.team_model, self.params)

    def resolve_solo_match(
        self,
        rating_a: float,
        rating_b: float,
        a_won: bool,
        multiplier: float = 1.0,
    ) -> SoloMatchOutcome:
        return self._solo.resolve(
            rating_a,
            rating_b,
            a_won,
            multiplier_a=multiplier,
            multiplier_b=multiplier,
        )

    def resolve_team_match(
        self,
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
        model: TeamModel | str | None = None,
    ) -> TeamMatchOutcome:
        return self.team_model(model).resolve(
            rating_a1,
            rating_a2,
            rating_b1,
            rating_b2,
            team_a_won,
            (games_played_a1, games_played_a2, games_played_b1, games_played_b2),
            multiplier_a=multiplier,
            multiplier_b=multiplier,
        )

    def sweep_multipliers(self, series: SeriesResult) -> tuple[float, float]:
        """Return (winner_multiplier, loser_multiplier) for a decided series."""
        if not series.is_sweep:
            return 1.0, 1.0
        bonus = self.params.sweep_multiplier
        if self.params.sweep_policy is SweepPolicy.WINNERS_ONLY:
            return bonus, 1.0
        return bonus, bonus

    def _side_multipliers(self, series: SeriesResult) -> tuple[float, float]:
        """Return (side_a_multiplier, side_b_multiplier)."""
        winner_multiplier, loser_multiplier = self.sweep_multipliers(series)
        if series.winning_side is Side.A:
            return winner_multiplier, loser_multiplier
        return loser_multiplier, winner_multiplier

    def resolve_solo_series(
        self,
        rating_a: float,
        rating_b: float,
        game_winners: Sequence[Side | str],
        best_of: int | str | SeriesFormat = 3,
    ) -> tuple[SeriesResult, SoloMatchOutcome]:
        series = resolve_series(game_winners, best_of)
        multiplier_a, multiplier_b = self._side_multipliers(series)
        outcome = self._solo.resolve(
            rating_a,
            rating_b,
            series.winning_side is Side.A,
            multiplier_a=multiplier_a,
            multiplier_b=multiplier_b,
        )
        logger.info(
            "solo series %s best_of=%d sweep=%s delta_a=%s delta_b=%s",
            series.score_label,
            series.best_of,
            series.is_sweep,
            outcome.delta_a,
            outcome.delta_b,
        )
        return series, outcome

    def resolve_team_series(
        self,
        rating_a1: float,
        rating_a2: float,
        rating_b1: float,
        rating_b2: float,
        game_winners: Sequence[Side | str],
        best_of: int | str | SeriesFormat = 3,
        games_played: tuple[int, int, int, int] = (0, 0, 0, 0),
        *,
        model: TeamModel | str | None = None,
    ) -> tuple[SeriesResult, TeamMatchOutcome]:
        series = resolve_series(game_winners, best_of)
        multiplier_a, multiplier_b = self._side_multipliers(series)
        calculator = self.team_model(model)
        outcome = calculator.resolve(
            rating_a1,
            rating_a2,
            rating_b1,
            rating_b2,
            series.winning_side is Side.A,
            games_played,
            multiplier_a=multiplier_a,
            multiplier_b=multiplier_b,
        )
        logger.info(
            "team series %s best_of=%d sweep=%s model=%s deltas=%s",
            series.score_label,
            series.best_of,
            series.is_sweep,
            calculator.name.value,
            outcome.deltas,
        )
        return series, outcome

    def resolve_recorded_match(
        self,
        match_type: MatchType | str,
        side_a: Sequence[ParticipantRating],
        side_b: Sequence[ParticipantRating],
        game_winners: Sequence[Side | str],
        series_format: int | str | SeriesFormat = SeriesFormat.BO1,
        *,
        model: TeamModel | str | None = None,
    ) -> tuple[SeriesResult, SoloMatchOutcome | TeamMatchOutcome]:
        """Resolve a recorded match from participant snapshots.

        Participants without a stored rating start from the configured baseline.
        """
        match_type = _parse_match_type(match_type)
        expected_size = 1 if match_type is MatchType.SOLO else 2
        if len(side_a) != expected_size or len(side_b) != expected_size:
            raise InvalidInputError(
                f"{match_type.value} match requires {expected_size} participant(s) per side, "
                f"got {len(side_a)} and {len(side_b)}"
            )

        ratings_a = [self.rating_or_initial(participant.rating) for participant in side_a]
        ratings_b = [self.rating_or_initial(participant.rating) for participant in side_b]

        if match_type is MatchType.SOLO:
            return self.resolve_solo_series(ratings_a[0], ratings_b[0], game_winners, series_format)

        games_played = (
            side_a[0].games_played,
            side_a[1].games_played,
            side_b[0].games_played,
            side_b[1].games_played,
        )
        return self.resolve_team_series(
            ratings_a[0],
            ratings_a[1],
            ratings_b[0],
            ratings_b[1],
            game_winners,
            series_format,
            games_played,
            model=model,
        )


def _parse_match_type(value: MatchType | str) -> MatchType:
    if isinstance(value, MatchType):
        return value
    try:
        return MatchType(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidInputError(
            f"Invalid match type {value!r}. Must be '1v1' or '2v2'"
        ) from exc
