"""Structured key=value diagnostics for loaders, exporters and the CLI.

This is the developer-facing channel (stderr/stdout); the player-facing game
log lives in ``labyrinth.services.game_logger``.

Usage:
    from labyrinth.logging_utils import get_logger
    log = get_logger("map_loader")
    log.warn(event="corridor_skipped", source="E1", target="X9", reason="unknown_room")

Settings are read on every call so tests can monkeypatch the environment:
    LABYRINTH_LOG_LEVEL   debug | info | warn | error   (default: info)
    LABYRINTH_LOG_JSON    1/true/yes/on to emit one JSON object per line

Reserved keys: level, ts, logger. None values are dropped.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _threshold() -> int:
    return LEVELS.get(os.getenv("LABYRINTH_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("LABYRINTH_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _format(level: str, **fields) -> str:
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str, ensure_ascii=False)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str, context: dict | None = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **context) -> "_Logger":
        """Return a logger that adds ``context`` to every record."""
        merged = dict(self.context)
        merged.update(context)
        return _Logger(self.name, merged)

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < _threshold():
            return
        record = {"logger": self.name}
        record.update(self.context)
        record.update(fields)
        print(_format(lvl, **record), file=sys.stderr if lvl in ("warn", "error") else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("labyrinth")
