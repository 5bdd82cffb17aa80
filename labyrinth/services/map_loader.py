"""Read and write maze map files.

Map document:

    {
      "nome": "Labirinto Simples",
      "salas":   [{"id": "E1", "tipo": "ENTRADA", "descricao": "..."}],
      "ligacoes": [{"de": "E1", "para": "S1", "custo": 2.0,
                    "evento": {"descricao": "...", "efeito": "HEAL",
                               "item": {"nome": "...", "efeito": "..."}}}]
    }

Older maps use ``origem``/``destino`` instead of ``de``/``para``; both are
read, ``de``/``para`` are written. A missing or non-numeric ``custo`` is 1.0.

Loading never raises: a missing or malformed file gives an empty Maze, and
individual bad rooms or corridors are skipped with a warning.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from labyrinth.errors import MapFormatError, MazeStructureError
from labyrinth.logging_utils import get_logger
from labyrinth.maze import DEFAULT_EVENT_DESCRIPTION, Effect, Item, Maze, RandomEvent, Riddle, Room, RoomType

log = get_logger("map_loader")

DEFAULT_MAP_NAME = "Mapa Desconhecido"
DEFAULT_WEIGHT = 1.0


def _parse_weight(raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        return DEFAULT_WEIGHT
    try:
        weight = float(str(raw).replace(",", ".")) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        return DEFAULT_WEIGHT
    return DEFAULT_WEIGHT if math.isnan(weight) else weight


def _parse_effect(raw: Any, where: str) -> Effect:
    try:
        return Effect.from_label(raw)
    except ValueError:
        log.warn(event="unknown_effect", effect=raw, where=where)
        return Effect.NONE


def parse_event(raw: Any, where: str = "") -> Optional[RandomEvent]:
    """Build a RandomEvent from an ``evento`` object (None when absent or not an object)."""
    if not isinstance(raw, dict):
        if raw is not None:
            log.warn(event="event_ignored", where=where, reason="not_an_object")
        return None
    item = None
    raw_item = raw.get("item")
    if isinstance(raw_item, dict) and raw_item.get("nome"):
        item = Item(str(raw_item["nome"]), _parse_effect(raw_item.get("efeito"), where))
    description = raw.get("descricao") or DEFAULT_EVENT_DESCRIPTION
    return RandomEvent(str(description), _parse_effect(raw.get("efeito"), where), item)


def _read_document(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise MapFormatError(f"{path}: top-level value must be an object")
    for key in ("salas", "ligacoes"):
        if key in data and not isinstance(data[key], list):
            raise MapFormatError(f"{path}: '{key}' must be a list")
    return data


def _load_rooms(maze: Maze, entries: Iterable[Any], riddles: List[Riddle]) -> None:
    next_riddle = 0
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            log.warn(event="room_skipped", index=index, reason="not_an_object")
            continue
        room_id = entry.get("id")
        if not isinstance(room_id, str) or not room_id.strip():
            log.warn(event="room_skipped", index=index, reason="missing_id")
            continue
        room_type = RoomType.from_label(entry.get("tipo"))
        room = Room(room_id, str(entry.get("descricao") or ""), room_type)
        if room.is_riddle and riddles:
            # pool is handed out in order and recycled once exhausted
            room.assign_riddle(riddles[next_riddle % len(riddles)])
            next_riddle += 1
        try:
            maze.add_room(room)
        except MazeStructureError as e:
            log.warn(event="room_skipped", room=room_id, reason=str(e))


def _load_corridors(maze: Maze, entries: Iterable[Any]) -> None:
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            log.warn(event="corridor_skipped", index=index, reason="not_an_object")
            continue
        source = entry.get("de", entry.get("origem"))
        target = entry.get("para", entry.get("destino"))
        where = f"{source}->{target}"
        try:
            maze.add_corridor(
                source,
                target,
                _parse_weight(entry.get("custo")),
                parse_event(entry.get("evento"), where),
            )
        except MazeStructureError as e:
            log.warn(event="corridor_skipped", source=source, target=target, reason=str(e))


def load_maze(path: Union[str, Path], riddles: Optional[Iterable[Riddle]] = None) -> Maze:
    """Load a map file into a new Maze.

    ``riddles`` is the pool handed to ENIGMA rooms in file order. Any file
    level failure (missing, unreadable, not JSON, wrong shape) is logged and
    yields an empty maze.
    """
    path = Path(path)
    pool = list(riddles) if riddles is not None else []
    try:
        data = _read_document(path)
    except FileNotFoundError:
        log.warn(event="map_missing", path=str(path))
        return Maze()
    except (OSError, ValueError, MapFormatError) as e:
        log.error(event="map_unreadable", path=str(path), error=str(e))
        return Maze()

    maze = Maze(str(data.get("nome") or DEFAULT_MAP_NAME))
    _load_rooms(maze, data.get("salas") or [], pool)
    _load_corridors(maze, data.get("ligacoes") or [])
    log.info(
        event="map_loaded",
        path=str(path),
        name=maze.name,
        rooms=maze.room_count,
        corridors=maze.corridor_count,
    )
    return maze


def _event_to_dict(event: RandomEvent) -> Dict[str, Any]:
    out: Dict[str, Any] = {"descricao": event.description, "efeito": event.direct_effect.value}
    if event.item is not None:
        out["item"] = {"nome": event.item.name, "efeito": event.item.effect.value}
    return out


def maze_to_dict(maze: Maze) -> Dict[str, Any]:
    rooms = [{"id": r.id, "tipo": r.room_type.label, "descricao": r.description} for r in maze.rooms()]
    corridors = []
    for c in maze.corridors():
        entry: Dict[str, Any] = {"de": c.source.id, "para": c.target.id, "custo": c.weight}
        if c.event is not None:
            entry["evento"] = _event_to_dict(c.event)
        corridors.append(entry)
    return {"nome": maze.name, "salas": rooms, "ligacoes": corridors}


def save_maze(maze: Maze, path: Union[str, Path]) -> Optional[Path]:
    """Write ``maze`` as a map file; returns the path written or None on failure."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(maze_to_dict(maze), fh, indent=2, ensure_ascii=False)
    except OSError as e:
        log.error(event="map_save_failed", path=str(path), error=str(e))
        return None
    log.info(event="map_saved", path=str(path), rooms=maze.room_count, corridors=maze.corridor_count)
    return path


def list_maps(maps_dir: Union[str, Path]) -> List[Path]:
    """Map files (``*.json``) in ``maps_dir``, sorted by name; riddle files excluded."""
    root = Path(maps_dir)
    if not root.is_dir():
        return []
    return sorted(p for p in root.glob("*.json") if not p.name.startswith("enigma"))


__all__ = ["load_maze", "save_maze", "maze_to_dict", "parse_event", "list_maps", "DEFAULT_WEIGHT"]
