"""Tests for the rating preview CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rating_engine.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("RATING_ENGINE_CONFIG_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    yield
    logger = logging.getLogger("rating_engine")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_solo_single_game() -> None:
    result = runner.invoke(app, ["solo", "1000", "1000", "--winner", "A"])
    assert result.exit_code == 0, result.output
    assert "A: 1000 -> 1016 (+16)" in result.output
    assert "B: 1000 -> 984 (-16)" in result.output


def test_solo_sweep_series() -> None:
    result = runner.invoke(app, ["solo", "1000", "1000", "--games", "A,A", "--best-of", "3"])
    assert result.exit_code == 0, result.output
    assert "score=2-0" in result.output
    assert "sweep=True" in result.output
    assert "A: 1000 -> 1019 (+19)" in result.output


def test_team_uses_selected_system_and_model() -> None:
    individual = runner.invoke(
        app,
        ["team", "1200", "1200", "1200", "1200", "--winner", "A", "--config-name", "server"],
    )
    assert individual.exit_code == 0, individual.output
    assert "system=server model=individual" in individual.output
    assert "A1: 1200 -> 1225 (+25)" in individual.output
    assert "B2: 1200 -> 1175 (-25)" in individual.output

    average = runner.invoke(
        app,
        ["team", "1200", "1200", "1200", "1200", "--winner", "B", "--model", "team_average"],
    )
    assert average.exit_code == 0, average.output
    assert "A1: 1200 -> 1184 (-16)" in average.output
    assert "B1: 1200 -> 1216 (+16)" in average.output


def test_team_experience_option() -> None:
    result = runner.invoke(
        app,
        ["team", "1200", "1200", "1200", "1200", "--winner", "A", "--experience", "300,0,300,0"],
    )
    assert result.exit_code == 0, result.output
    assert "A1: 1200 -> 1213 (+13)" in result.output
    assert "B1: 1200 -> 1188 (-12)" in result.output


def test_undecided_series_is_a_usage_error() -> None:
    result = runner.invoke(app, ["solo", "1000", "1000", "--games", "A", "--best-of", "3"])
    assert result.exit_code == 2


def test_missing_winner_is_a_usage_error() -> None:
    result = runner.invoke(app, ["solo", "1000", "1000"])
    assert result.exit_code == 2


def test_bad_experience_is_a_usage_error() -> None:
    result = runner.invoke(
        app, ["team", "1200", "1200", "1200", "1200", "--winner", "A", "--experience", "1,2"]
    )
    assert result.exit_code == 2


def test_unknown_config_name_is_a_usage_error() -> None:
    result = runner.invoke(app, ["solo", "1000", "1000", "--winner", "A", "--config-name", "nope"])
    assert result.exit_code == 2


def test_configs_lists_bundled_systems() -> None:
    result = runner.invoke(app, ["configs"])
    assert result.exit_code == 0, result.output
    assert "loaded_configs=2" in result.output
    assert "general (general.toml)" in result.output
    assert "server (server.toml)" in result.output
    assert "initial_rating=1200.0" in result.output


def test_missing_config_dir_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["solo", "1000", "1000", "--winner", "A", "--config-dir", str(tmp_path / "absent")]
    )
    assert result.exit_code == 2
    assert not isinstance(result.exception, FileNotFoundError)


def test_config_dir_without_toml_files_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["configs", "--config-dir", str(tmp_path)])
    assert result.exit_code == 2


def test_empty_game_entry_is_a_usage_error() -> None:
    result = runner.invoke(app, ["solo", "1000", "1000", "--games", "A,,A", "--best-of", "3"])
    assert result.exit_code == 2


def test_unknown_log_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    result = runner.invoke(app, ["solo", "1000", "1000", "--winner", "A"])

    assert result.exit_code == 0, result.output
    assert "A: 1000 -> 1016 (+16)" in result.output
    assert logging.getLogger("rating_engine").level == logging.INFO
