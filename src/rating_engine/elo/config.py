"""Load Elo system definitions from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from pathlib import Path
from typing import Any

from rating_engine.config_base import BaseSystemConfig, default_config_dir, load_system_configs
from rating_engine.elo.calculator import EloParameters
from rating_engine.protocol import SweepPolicy, TeamModel


@dataclass(frozen=True)
class EloSystemConfig(BaseSystemConfig):
    """Configuration for one Elo rating system."""

    parameters: EloParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            "initial_rating": self.parameters.initial_rating,
            "k_factor": self.parameters.k_factor,
            "solo_scale_factor": self.parameters.solo_scale_factor,
            "team_scale_factor": self.parameters.team_scale_factor,
            "dynamic_k_base": self.parameters.dynamic_k_base,
            "dynamic_k_games_scale": self.parameters.dynamic_k_games_scale,
            "sweep_multiplier": self.parameters.sweep_multiplier,
            "sweep_policy": self.parameters.sweep_policy.value,
            "team_model": self.parameters.team_model.value,
        }


def default_elo_config_dir() -> Path:
    return default_config_dir("elo")


def load_elo_system_configs(config_dir: Path | None = None) -> list[EloSystemConfig]:
    """Load and validate all Elo system TOML config files in a directory."""
    return load_system_configs(
        config_dir or default_elo_config_dir(),
        _parse_elo_system_config,
        duplicate_name_label="elo",
    )


def _parse_enum(raw_value: Any, enum_type: type, *, file_path: Path, key: str) -> Any:
    try:
        return enum_type(str(raw_value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(item.value for item in enum_type)
        raise ValueError(f"{file_path}: [elo].{key} must be one of: {choices}") from exc


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    system_raw = raw.get("system", {})
    elo_raw = raw.get("elo", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    parameters = EloParameters(
        initial_rating=float(elo_raw.get("initial_rating", 1000.0)),
        k_factor=float(elo_raw.get("k_factor", 32.0)),
        solo_scale_factor=float(elo_raw.get("solo_scale_factor", 400.0)),
        team_scale_factor=float(elo_raw.get("team_scale_factor", 500.0)),
        dynamic_k_base=float(elo_raw.get("dynamic_k_base", 50.0)),
        dynamic_k_games_scale=float(elo_raw.get("dynamic_k_games_scale", 300.0)),
        sweep_multiplier=float(elo_raw.get("sweep_multiplier", 1.2)),
        sweep_policy=_parse_enum(
            elo_raw.get("sweep_policy", SweepPolicy.BOTH_SIDES.value),
            SweepPolicy,
            file_path=file_path,
            key="sweep_policy",
        ),
        team_model=_parse_enum(
            elo_raw.get("team_model", TeamModel.INDIVIDUAL.value),
            TeamModel,
            file_path=file_path,
            key="team_model",
        ),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: EloParameters) -> None:
    if not isfinite(parameters.initial_rating):
        raise ValueError(f"{file_path}: [elo].initial_rating must be finite")
    if parameters.k_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].k_factor must be > 0")
    if parameters.solo_scale_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].solo_scale_factor must be > 0")
    if parameters.team_scale_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].team_scale_factor must be > 0")
    if parameters.dynamic_k_base <= 0.0:
        raise ValueError(f"{file_path}: [elo].dynamic_k_base must be > 0")
    if parameters.dynamic_k_games_scale <= 0.0:
        raise ValueError(f"{file_path}: [elo].dynamic_k_games_scale must be > 0")
    if parameters.sweep_multiplier <= 0.0:
        raise ValueError(f"{file_path}: [elo].sweep_multiplier must be > 0")
