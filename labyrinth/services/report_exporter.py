"""Mission report export.

One JSON file per player, ``report_<Name_With_Underscores>.json``, plus an
optional ``report_match.json`` summary for the whole session. A failed write
is logged and reported by returning None; it never interrupts the game.
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from labyrinth.logging_utils import get_logger
from labyrinth.player import Player

log = get_logger("report_exporter")

MATCH_REPORT_NAME = "report_match.json"


def report_filename(player_name: str) -> str:
    return "report_" + re.sub(r"\s+", "_", player_name) + ".json"


def _reached_treasure(player: Player) -> bool:
    return player.current_room is not None and player.current_room.is_treasure


def build_mission_report(player: Player, victory: Optional[bool] = None) -> Dict[str, Any]:
    if victory is None:
        victory = _reached_treasure(player)
    riddles = list(player.solved_riddles)
    effects = list(player.applied_effects)
    events = list(player.encountered_events)
    return {
        "player": player.name,
        "date": datetime.now().isoformat(timespec="seconds"),
        "result": "VICTORY" if victory else "DEFEAT",
        "final_room": player.current_room.id if player.current_room else None,
        "path_taken": player.path_taken(),
        "final_power": player.power,
        "moves": player.moves,
        "riddles_solved": riddles,
        "effects_applied": effects,
        "events_encountered": events,
        "inventory": [item.name for item in player.inventory],
        "statistics": {
            "total_riddles_solved": len(riddles),
            "total_effects_applied": len(effects),
            "total_events_encountered": len(events),
            "rooms_visited": len(set(player.path_taken())),
            "game_status": "COMPLETED_SUCCESSFULLY" if victory else "ABANDONED_OR_DEFEATED",
        },
    }


def _write_json(path: Path, payload: Dict[str, Any]) -> Optional[Path]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False)
    except OSError as e:
        log.error(event="report_write_failed", path=str(path), error=str(e))
        return None
    log.info(event="report_written", path=str(path))
    return path


def export_mission_report(
    player: Player, reports_dir: Union[str, Path] = ".", victory: Optional[bool] = None
) -> Optional[Path]:
    """Write the mission report for ``player``.

    ``victory`` defaults to whether the player is standing in the treasure room.
    """
    path = Path(reports_dir) / report_filename(player.name)
    return _write_json(path, build_mission_report(player, victory))


def export_match_summary(
    players: Iterable[Player], winner: Optional[Player] = None, reports_dir: Union[str, Path] = "."
) -> Optional[Path]:
    summary = {
        "date": datetime.now().isoformat(timespec="seconds"),
        "winner": winner.name if winner is not None else "NONE",
        "players": [
            {
                "name": p.name,
                "power": p.power,
                "current_room": p.current_room.id if p.current_room else "UNKNOWN",
                "moves": p.moves,
                "path_taken": p.path_taken(),
                "riddles_solved": list(p.solved_riddles),
                "effects_applied": list(p.applied_effects),
                "events_encountered": list(p.encountered_events),
            }
            for p in players
        ],
    }
    return _write_json(Path(reports_dir) / MATCH_REPORT_NAME, summary)


__all__ = [
    "report_filename",
    "build_mission_report",
    "export_mission_report",
    "export_match_summary",
    "MATCH_REPORT_NAME",
]
