"""Shared value types for the rating engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rating_engine.experience import total_games_played


class Side(str, Enum):
    """One of the two opposing sides of a match or series."""

    A = "A"
    B = "B"

    @property
    def opponent(self) -> Side:
        return Side.B if self is Side.A else Side.A


@dataclass(frozen=True)
class ParticipantRating:
    """Rating and experience snapshot for one participant in one discipline."""

    rating: float | None = None
    games_played: int = 0

    @classmethod
    def from_tallies(
        cls,
        rating: float | None = None,
        *,
        singles_wins: int = 0,
        singles_losses: int = 0,
        doubles_wins: int = 0,
        doubles_losses: int = 0,
    ) -> ParticipantRating:
        """Build a snapshot whose experience counts games in both disciplines."""
        return cls(
            rating=rating,
            games_played=total_games_played(
                singles_wins, singles_losses, doubles_wins, doubles_losses
            ),
        )


@dataclass(frozen=True)
class RatingChange:
    """Old and new rating for one participant, with the applied delta."""

    old_rating: float
    new_rating: float
    delta: float


@dataclass(frozen=True)
class SoloMatchOutcome:
    """Rating changes for a one-on-one match."""

    player_a: RatingChange
    player_b: RatingChange
    expected_a: float
    expected_b: float

    @property
    def delta_a(self) -> float:
        return self.player_a.delta

    @property
    def delta_b(self) -> float:
        return self.player_b.delta


@dataclass(frozen=True)
class TeamMatchOutcome:
    """Rating changes for a two-versus-two match."""

    team_a_player1: RatingChange
    team_a_player2: RatingChange
    team_b_player1: RatingChange
    team_b_player2: RatingChange
    expected_scores: tuple[float, float, float, float]

    @property
    def deltas(self) -> tuple[float, float, float, float]:
        """Return (delta_a1, delta_a2, delta_b1, delta_b2)."""
        return (
            self.team_a_player1.delta,
            self.team_a_player2.delta,
            self.team_b_player1.delta,
            self.team_b_player2.delta,
        )


@dataclass(frozen=True)
class SeriesResult:
    """Aggregate result of a decided best-of-N series."""

    decided: bool
    winning_side: Side
    score: dict[Side, int] = field(hash=False)
    is_sweep: bool
    best_of: int

    @property
    def losing_side(self) -> Side:
        return self.winning_side.opponent

    @property
    def score_label(self) -> str:
        """Series score from side A's point of view, e.g. ``"2-1"``."""
        return f"{self.score[Side.A]}-{self.score[Side.B]}"

    def actual_score(self, side: Side) -> float:
        """Binary series result credited to ratings for one side."""
        return 1.0 if side is self.winning_side else 0.0
