"""Preview rating changes for a match or series from the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from rating_engine.common import RatingChange, SeriesResult
from rating_engine.config_base import select_system_config
from rating_engine.elo.config import EloSystemConfig, default_elo_config_dir, load_elo_system_configs
from rating_engine.engine import RatingEngine
from rating_engine.errors import RatingEngineError
from rating_engine.log import setup_logging
from rating_engine.protocol import TeamModel

DEFAULT_CONFIG_NAME = "general"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Preview Elo rating changes for foosball matches.",
)

ConfigDirOption = Annotated[
    Path | None,
    typer.Option(
        "--config-dir",
        help="Directory of Elo system TOML files. Defaults to the bundled configs/elo.",
    ),
]
ConfigNameOption = Annotated[
    str,
    typer.Option("--config-name", help="System name or file name to use."),
]
WinnerOption = Annotated[
    str | None,
    typer.Option("--winner", help="Winning side (A or B) of a single game."),
]
GamesOption = Annotated[
    str | None,
    typer.Option(
        "--games",
        help="Comma-separated game winners in order, e.g. A,B,A. Overrides --winner.",
    ),
]
BestOfOption = Annotated[
    int,
    typer.Option("--best-of", help="Series length (1 or 3)."),
]


@app.callback()
def main() -> None:
    setup_logging()


def _load_configs(config_dir: Path | None) -> list[EloSystemConfig]:
    try:
        return load_elo_system_configs(config_dir or default_elo_config_dir())
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config-dir") from exc


def _load_config(config_dir: Path | None, config_name: str) -> EloSystemConfig:
    configs = _load_configs(config_dir)
    try:
        return select_system_config(configs, config_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--config-name") from exc


def _game_winners(winner: str | None, games: str | None, best_of: int) -> list[str]:
    if games:
        winners = [game.strip() for game in games.split(",")]
        if not all(winners):
            raise typer.BadParameter(f"{games!r} contains an empty game winner", param_hint="--games")
        return winners
    if winner is None:
        raise typer.BadParameter("either --winner or --games is required")
    if best_of != 1:
        raise typer.BadParameter("--winner only describes a best-of-1; use --games for a series")
    return [winner]


def _parse_int_list(raw: str, *, expected: int, param_hint: str) -> tuple[int, ...]:
    try:
        values = tuple(int(value.strip()) for value in raw.split(","))
    except ValueError as exc:
        raise typer.BadParameter(f"{raw!r} is not a list of integers", param_hint=param_hint) from exc
    if len(values) != expected:
        raise typer.BadParameter(
            f"expected {expected} comma-separated values, got {len(values)}",
            param_hint=param_hint,
        )
    return values


def _echo_series(series: SeriesResult) -> None:
    typer.echo(
        f"series best_of={series.best_of} score={series.score_label} "
        f"winner={series.winning_side.value} sweep={series.is_sweep}"
    )


def _echo_change(label: str, change: RatingChange) -> None:
    typer.echo(
        f"{label}: {change.old_rating:g} -> {change.new_rating:g} ({change.delta:+g})"
    )


@app.command()
def solo(
    rating_a: Annotated[float, typer.Argument(help="Current rating of player A.")],
    rating_b: Annotated[float, typer.Argument(help="Current rating of player B.")],
    winner: WinnerOption = None,
    games: GamesOption = None,
    best_of: BestOfOption = 1,
    config_dir: ConfigDirOption = None,
    config_name: ConfigNameOption = DEFAULT_CONFIG_NAME,
) -> None:
    """Preview a one-on-one match or series."""
    config = _load_config(config_dir, config_name)
    engine = RatingEngine.from_config(config)
    try:
        series, outcome = engine.resolve_solo_series(
            rating_a,
            rating_b,
            _game_winners(winner, games, best_of),
            best_of,
        )
    except RatingEngineError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo(f"system={config.name} expected_a={outcome.expected_a:.4f} expected_b={outcome.expected_b:.4f}")
    _echo_series(series)
    _echo_change("A", outcome.player_a)
    _echo_change("B", outcome.player_b)


@app.command()
def team(
    rating_a1: Annotated[float, typer.Argument(help="Team A, player 1 rating.")],
    rating_a2: Annotated[float, typer.Argument(help="Team A, player 2 rating.")],
    rating_b1: Annotated[float, typer.Argument(help="Team B, player 1 rating.")],
    rating_b2: Annotated[float, typer.Argument(help="Team B, player 2 rating.")],
    winner: WinnerOption = None,
    games: GamesOption = None,
    best_of: BestOfOption = 1,
    experience: Annotated[
        str,
        typer.Option(
            "--experience",
            help="Games played by a1,a2,b1,b2 (drives the dynamic K-factor).",
        ),
    ] = "0,0,0,0",
    model: Annotated[
        TeamModel | None,
        typer.Option("--model", help="Team model. Defaults to the system config."),
    ] = None,
    config_dir: ConfigDirOption = None,
    config_name: ConfigNameOption = DEFAULT_CONFIG_NAME,
) -> None:
    """Preview a two-versus-two match or series."""
    games_played = _parse_int_list(experience, expected=4, param_hint="--experience")
    config = _load_config(config_dir, config_name)
    engine = RatingEngine.from_config(config)
    try:
        series, outcome = engine.resolve_team_series(
            rating_a1,
            rating_a2,
            rating_b1,
            rating_b2,
            _game_winners(winner, games, best_of),
            best_of,
            games_played,  # type: ignore[arg-type]
            model=model,
        )
    except RatingEngineError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo(f"system={config.name} model={(model or config.parameters.team_model).value}")
    _echo_series(series)
    _echo_change("A1", outcome.team_a_player1)
    _echo_change("A2", outcome.team_a_player2)
    _echo_change("B1", outcome.team_b_player1)
    _echo_change("B2", outcome.team_b_player2)


@app.command()
def configs(config_dir: ConfigDirOption = None) -> None:
    """List the loaded Elo systems."""
    target_dir = config_dir or default_elo_config_dir()
    loaded = _load_configs(target_dir)
    typer.echo(f"loaded_configs={len(loaded)} config_dir={target_dir}")
    for config in loaded:
        settings = " ".join(f"{key}={value}" for key, value in config.as_config_json().items())
        typer.echo(f"{config.name} ({config.file_path.name}): {settings}")


if __name__ == "__main__":
    app()
