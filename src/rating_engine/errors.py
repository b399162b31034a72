"""Error taxonomy for rating computations."""

from __future__ import annotations


class RatingEngineError(ValueError):
    """Base class for every error raised by the rating engine."""


class InvalidInputError(RatingEngineError):
    """A rating, experience count, factor or identifier is out of its domain."""


class InvalidOutcomeError(RatingEngineError):
    """A match or series outcome is not a valid declared result."""


class SeriesNotDecidedError(InvalidOutcomeError):
    """A series was submitted for rating before either side reached the win threshold."""


class AmbiguousSeriesError(RatingEngineError):
    """A series has no games, too many games, or games after the deciding one."""
