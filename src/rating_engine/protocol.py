"""Shared protocols and enums for the rating engine."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from rating_engine.common import TeamMatchOutcome


class MatchType(str, Enum):
    """Discipline a match is played in."""

    SOLO = "1v1"
    TEAM = "2v2"


class SeriesFormat(str, Enum):
    """Supported best-of-N series formats."""

    BO1 = "bo1"
    BO3 = "bo3"

    @property
    def best_of(self) -> int:
        return 3 if self is SeriesFormat.BO3 else 1


class SeriesState(str, Enum):
    """Lifecycle of a best-of-N series."""

    IN_PROGRESS = "in_progress"
    DECIDED = "decided"


class TeamModel(str, Enum):
    """How team play moves individual ratings."""

    INDIVIDUAL = "individual"
    TEAM_AVERAGE = "team_average"


class SweepPolicy(str, Enum):
    """Which side of a swept series receives the sweep multiplier."""

    BOTH_SIDES = "both_sides"
    WINNERS_ONLY = "winners_only"


@runtime_checkable
class TeamRatingModel(Protocol):
    """Contract every two-versus-two rating strategy satisfies."""

    name: TeamModel

    def resolve(
        self,
        rating_a1: float,
        rating_a2: float,
        rating_b1: float,
        rating_b2: float,
        team_a_won: bool,
        games_played: tuple[int, int, int, int],
        *,
        multiplier_a: float = 1.0,
        multiplier_b: float = 1.0,
    ) -> TeamMatchOutcome: ...
