"""Runtime configuration resolved from LABYRINTH_* environment variables.

A local ``.env`` file is loaded by the package on import (python-dotenv), so
any of these can be set there instead of the shell:

    LABYRINTH_MAPS_DIR          Directory scanned for map files (default: maps)
    LABYRINTH_RIDDLES_FILE      Riddle pool for ENIGMA rooms (default: maps/enigmas.json)
    LABYRINTH_REPORTS_DIR       Where mission reports are written (default: .)
    LABYRINTH_LOG_FILE          Append-only game log (default: game_log.txt)
    LABYRINTH_STARTING_POWER    Power each player starts with (default: 100)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class GameConfig:
    maps_dir: str = "maps"
    riddles_file: str = os.path.join("maps", "enigmas.json")
    reports_dir: str = "."
    log_file: str = "game_log.txt"
    starting_power: int = 100


def _int_or_default(raw: Optional[str], default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_config(env: Optional[Mapping[str, str]] = None, **overrides) -> GameConfig:
    """Build a GameConfig from the environment; keyword overrides win (CLI flags).

    Overrides set to None are ignored so argparse defaults can be passed through.
    """
    env = os.environ if env is None else env
    defaults = GameConfig()
    cfg = GameConfig(
        maps_dir=env.get("LABYRINTH_MAPS_DIR") or defaults.maps_dir,
        riddles_file=env.get("LABYRINTH_RIDDLES_FILE") or defaults.riddles_file,
        reports_dir=env.get("LABYRINTH_REPORTS_DIR") or defaults.reports_dir,
        log_file=env.get("LABYRINTH_LOG_FILE") or defaults.log_file,
        starting_power=_int_or_default(env.get("LABYRINTH_STARTING_POWER"), defaults.starting_power),
    )
    for key, value in overrides.items():
        if value is None:
            continue
        if not hasattr(cfg, key):
            raise TypeError(f"Unknown config key: {key}")
        setattr(cfg, key, value)
    return cfg


__all__ = ["GameConfig", "load_config"]
