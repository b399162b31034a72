"""Best-of-N series resolution.

A series is an ordered list of game winners. It is decided the moment one side
reaches the majority threshold (two wins in a best-of-3); no game may be
recorded after that point. Only decided series can be credited to ratings.
"""

from __future__ import annotations

from collections.abc import Iterable

from rating_engine.common import SeriesResult, Side
from rating_engine.errors import AmbiguousSeriesError, InvalidInputError, SeriesNotDecidedError
from rating_engine.protocol import SeriesFormat, SeriesState

SUPPORTED_BEST_OF = (1, 3)


def parse_side(value: Side | str) -> Side:
    """Coerce ``"A"``/``"B"`` (any case) into a ``Side``."""
    if isinstance(value, Side):
        return value
    if isinstance(value, str) and value.strip().upper() in (Side.A.value, Side.B.value):
        return Side(value.strip().upper())
    raise InvalidInputError(f"unknown side {value!r}; expected 'A' or 'B'")


def parse_best_of(value: int | str | SeriesFormat) -> int:
    """Accept ``1``/``3`` or the ``"bo1"``/``"bo3"`` series-type labels."""
    if isinstance(value, SeriesFormat):
        return value.best_of
    if isinstance(value, str):
        try:
            return SeriesFormat(value.strip().lower()).best_of
        except ValueError as exc:
            raise InvalidInputError(
                f"invalid series type {value!r}; must be 'bo1' or 'bo3'"
            ) from exc
    if isinstance(value, bool) or not isinstance(value, int) or value not in SUPPORTED_BEST_OF:
        raise InvalidInputError(f"best_of must be one of {SUPPORTED_BEST_OF}, got {value!r}")
    return value


class SeriesTracker:
    """State machine over the game winners of one best-of-N series."""

    def __init__(self, best_of: int | str | SeriesFormat = 3) -> None:
        self.best_of = parse_best_of(best_of)
        self.threshold = self.best_of // 2 + 1
        self._wins: dict[Side, int] = {Side.A: 0, Side.B: 0}
        self._games: list[Side] = []

    @property
    def state(self) -> SeriesState:
        if max(self._wins.values()) >= self.threshold:
            return SeriesState.DECIDED
        return SeriesState.IN_PROGRESS

    @property
    def games_recorded(self) -> int:
        return len(self._games)

    def wins(self, side: Side | str) -> int:
        return self._wins[parse_side(side)]

    def record_game(self, winner: Side | str) -> SeriesState:
        side = parse_side(winner)
        game_number = len(self._games) + 1
        if self.state is SeriesState.DECIDED:
            raise AmbiguousSeriesError(
                f"game {game_number} recorded after the best-of-{self.best_of} series "
                f"was already decided at {self._wins[Side.A]}-{self._wins[Side.B]}"
            )
        if game_number > self.best_of:
            raise AmbiguousSeriesError(
                f"game {game_number} exceeds the best-of-{self.best_of} format"
            )
        self._games.append(side)
        self._wins[side] += 1
        return self.state

    def result(self) -> SeriesResult:
        if not self._games:
            raise AmbiguousSeriesError("series has no recorded games")
        if self.state is not SeriesState.DECIDED:
            raise SeriesNotDecidedError(
                f"best-of-{self.best_of} series is not decided at "
                f"{self._wins[Side.A]}-{self._wins[Side.B]}; "
                f"{self.threshold} wins are required"
            )

        winning_side = Side.A if self._wins[Side.A] >= self.threshold else Side.B
        losing_wins = self._wins[winning_side.opponent]
        return SeriesResult(
            decided=True,
            winning_side=winning_side,
            score=dict(self._wins),
            is_sweep=self.best_of == 3 and losing_wins == 0,
            best_of=self.best_of,
        )


def resolve_series(
    game_winners: Iterable[Side | str],
    best_of: int | str | SeriesFormat = 3,
) -> SeriesResult:
    """Resolve an ordered list of game winners into a decided series result."""
    if isinstance(game_winners, str):
        raise InvalidInputError(
            f"game_winners must be a sequence of sides, got the string {game_winners!r}"
        )
    tracker = SeriesTracker(best_of)
    winners = list(game_winners)
    if not winners:
        raise AmbiguousSeriesError("series has no recorded games")
    if len(winners) > tracker.best_of:
        raise AmbiguousSeriesError(
            f"{len(winners)} games recorded for a best-of-{tracker.best_of} series"
        )
    for winner in winners:
        tracker.record_game(winner)
    return tracker.result()
