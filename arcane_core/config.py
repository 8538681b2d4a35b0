"""Simple configuration loader for arcane_core."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"
DATA_DIR = Path(__file__).resolve().parent / "data"
# Environment variable that points at an alternative config file.
CONFIG_ENV_VAR = "ARCANE_CORE_CONFIG"


@dataclass
class ManaConfig:
    """Mana pool sizing and regeneration constants."""

    mana_per_magic_power: int = 2
    min_regen: int = 5
    regen_per_level: int = 2


@dataclass
class ProgressionConfig:
    """Experience curve and per-level stat growth."""

    base_xp: int = 100
    level_multiplier: float = 1.25
    early_game_scaling: float = 1.2
    early_game_threshold: int = 5
    health_per_level: int = 10
    magic_per_level: int = 5
    strength_per_level: int = 3
    agility_per_level: int = 3


@dataclass
class CatalogConfig:
    """Locations of the static ability and class tables."""

    abilities_path: Path = DATA_DIR / "abilities.yaml"
    classes_path: Path = DATA_DIR / "classes.yaml"


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    mana: ManaConfig
    progression: ProgressionConfig
    catalog: CatalogConfig
    logging: LoggingConfig
    tick_rate: float = 10.0


def _resolve_path(value: Optional[str], default: Path, base: Path) -> Path:
    if not value:
        return default
    path = Path(value)
    if not path.is_absolute():
        path = base / path
    return path


def _parse_config(data: dict[str, Any], base_dir: Path = CONFIG_PATH.parent) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    mana_data = data.get("mana", {}) or {}
    mana = ManaConfig(
        mana_per_magic_power=int(mana_data.get("mana_per_magic_power", 2)),
        min_regen=int(mana_data.get("min_regen", 5)),
        regen_per_level=int(mana_data.get("regen_per_level", 2)),
    )

    prog_data = data.get("progression", {}) or {}
    growth = prog_data.get("stat_growth", {}) or {}
    progression = ProgressionConfig(
        base_xp=int(prog_data.get("base_xp", 100)),
        level_multiplier=float(prog_data.get("level_multiplier", 1.25)),
        early_game_scaling=float(prog_data.get("early_game_scaling", 1.2)),
        early_game_threshold=int(prog_data.get("early_game_threshold", 5)),
        health_per_level=int(growth.get("health", 10)),
        magic_per_level=int(growth.get("magic_power", 5)),
        strength_per_level=int(growth.get("strength", 3)),
        agility_per_level=int(growth.get("agility", 3)),
    )
    if progression.level_multiplier < max(1.0, progression.early_game_scaling):
        # XP requirements must never decrease from one level to the next.
        raise ValueError(
            f"progression.level_multiplier ({progression.level_multiplier}) must be >= 1 and >= "
            f"early_game_scaling ({progression.early_game_scaling}); requirements would dip"
        )

    catalog_data = data.get("catalog", {}) or {}
    catalog = CatalogConfig(
        abilities_path=_resolve_path(
            catalog_data.get("abilities_path"), DATA_DIR / "abilities.yaml", base_dir
        ),
        classes_path=_resolve_path(
            catalog_data.get("classes_path"), DATA_DIR / "classes.yaml", base_dir
        ),
    )

    log_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(
        mana=mana,
        progression=progression,
        catalog=catalog,
        logging=log_cfg,
        tick_rate=float(data.get("tick_rate", 10.0)),
    )


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`.

    When ``path`` is ``None`` the ``ARCANE_CORE_CONFIG`` environment variable
    is consulted before falling back to ``config.yaml`` at the repo root.
    """

    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else CONFIG_PATH
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw, base_dir=path.parent)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_ENV_VAR",
    "Config",
    "ManaConfig",
    "ProgressionConfig",
    "CatalogConfig",
    "LoggingConfig",
    "load_config",
]
