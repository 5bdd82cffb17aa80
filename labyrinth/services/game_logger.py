"""Append-only, human readable game log (``game_log.txt`` by default).

Each line is ``[YYYY-mm-dd HH:MM:SS] message``. Every GameLogger owns a
private, unregistered stdlib logger with its own FileHandler, so several
sessions (or tests) can write to different files in the same process.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from labyrinth.logging_utils import get_logger

log = get_logger("game_logger")

LINE_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SESSION_BANNER = "=== LABIRINTO DA GLÓRIA - INÍCIO DA SESSÃO ==="
RULE = "=" * 50

GAME_LOG_NAME = "labyrinth.game_log"


class GameLogger:
    def __init__(self, path: Union[str, Path] = "game_log.txt", echo: bool = False):
        self.path = Path(path)
        # built directly, not through logging.getLogger: nothing keeps it once closed
        self._logger = logging.Logger(GAME_LOG_NAME, logging.INFO)
        self._logger.propagate = False
        self._handlers = []
        formatter = logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT)
        try:
            if self.path.parent != Path(""):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        except OSError as e:
            log.error(event="game_log_unavailable", path=str(self.path), error=str(e))
        else:
            file_handler.setFormatter(formatter)
            self._handlers.append(file_handler)
        if echo:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._handlers.append(console)
        for h in self._handlers:
            self._logger.addHandler(h)

    @property
    def available(self) -> bool:
        return any(isinstance(h, logging.FileHandler) for h in self._handlers)

    def log(self, message: str) -> None:
        self._logger.info(message)

    def start_session(self, map_name: Optional[str] = None) -> None:
        self.log(SESSION_BANNER)
        if map_name:
            self.log(f"Mapa: {map_name}")
        self.log("-" * 51)

    def log_victory(self, winner: str, moves: int) -> None:
        self.log(f"VITÓRIA! Jogador '{winner}' encontrou o tesouro em {moves} movimentos!")
        self.log(f"=== FIM DA PARTIDA - VENCEDOR: {winner} ===")
        self.log(RULE)

    def log_defeat(self, reason: str = "todos os jogadores ficaram sem poder") -> None:
        self.log(f"DERROTA: {reason}")
        self.log(RULE)

    def close(self) -> None:
        """Flush and release the handlers; later ``log`` calls are dropped."""
        for h in self._handlers:
            h.flush()
            self._logger.removeHandler(h)
            h.close()
        self._handlers = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


__all__ = ["GameLogger", "LINE_FORMAT", "DATE_FORMAT", "SESSION_BANNER"]
