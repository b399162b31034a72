"""Foosball rating engine: Elo expectations, K-factors and series resolution."""

from rating_engine.common import (
    ParticipantRating,
    RatingChange,
    SeriesResult,
    Side,
    SoloMatchOutcome,
    TeamMatchOutcome,
)
from rating_engine.engine import RatingEngine
from rating_engine.errors import (
    AmbiguousSeriesError,
    InvalidInputError,
    InvalidOutcomeError,
    RatingEngineError,
    SeriesNotDecidedError,
)
from rating_engine.protocol import MatchType, SeriesFormat, SeriesState, SweepPolicy, TeamModel
from rating_engine.series import SeriesTracker, resolve_series

__all__ = [
    "AmbiguousSeriesError",
    "InvalidInputError",
    "InvalidOutcomeError",
    "MatchType",
    "ParticipantRating",
    "RatingChange",
    "RatingEngine",
    "RatingEngineError",
    "SeriesFormat",
    "SeriesNotDecidedError",
    "SeriesResult",
    "SeriesState",
    "SeriesTracker",
    "Side",
    "SoloMatchOutcome",
    "SweepPolicy",
    "TeamMatchOutcome",
    "TeamModel",
    "resolve_series",
]
