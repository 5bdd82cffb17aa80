"""Interactive map editor.

Menu:
  1. Adicionar Sala
  2. Adicionar Corredor
  3. Listar Salas
  4. Guardar Mapa
  5. Adicionar Corredor com Evento
  6. Validar Mapa
  0. Sair

Structural errors (duplicate id, unknown room, bad weight) are printed and
the loop carries on; nothing typed here can abort the editor.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from labyrinth.errors import MazeStructureError
from labyrinth.logging_utils import get_logger
from labyrinth.maze import DEFAULT_EVENT_DESCRIPTION, Effect, Item, Maze, RandomEvent, Room, RoomType, validate_maze
from labyrinth.services.map_loader import DEFAULT_MAP_NAME, save_maze

from .prompts import InputFn, OutputFn, confirm, read_float, read_int, read_text

log = get_logger("map_editor")

MENU = """
1. Adicionar Sala
2. Adicionar Corredor
3. Listar Salas
4. Guardar Mapa
5. Adicionar Corredor com Evento
6. Validar Mapa
0. Sair"""

ROOM_TYPE_PROMPT = "Tipo (" + ", ".join(t.label for t in RoomType) + "): "


class MapEditor:
    def __init__(
        self,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        maps_dir: Union[str, Path] = "maps",
        maze: Optional[Maze] = None,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.maps_dir = Path(maps_dir)
        self.maze = maze if maze is not None else Maze()
        self.last_saved: Optional[Path] = None

    def run(self) -> Maze:
        actions = {
            1: self.add_room,
            2: self.add_corridor,
            3: self.list_rooms,
            4: self.save,
            5: self.add_corridor_with_event,
            6: self.validate,
        }
        while True:
            self.output_fn(MENU)
            option = read_int(self.input_fn, self.output_fn, "\nEscolha uma opção: ")
            if option is None or option == 0:
                return self.maze
            action = actions.get(option)
            if action is None:
                self.output_fn("Opção inválida.")
                continue
            try:
                action()
            except MazeStructureError as e:
                self.output_fn(f"[ERROR] {e}")

    # ------------------------------------------------------------------
    def add_room(self) -> Optional[Room]:
        room_id = read_text(self.input_fn, "ID: ")
        if not room_id:
            self.output_fn("[ERROR] O ID não pode ser vazio.")
            return None
        room_type = RoomType.from_label(read_text(self.input_fn, ROOM_TYPE_PROMPT))
        description = read_text(self.input_fn, "Descrição: ") or ""
        room = self.maze.add_room(Room(room_id, description, room_type))
        self.output_fn("Sala adicionada!")
        log.debug(event="room_added", room=room.id, type=room_type.label)
        return room

    def _corridor_ends(self):
        source = read_text(self.input_fn, "De (ID): ")
        target = read_text(self.input_fn, "Para (ID): ")
        if source is None or target is None:
            return None
        weight = read_float(self.input_fn, self.output_fn, "Custo: ", default=1.0)
        if weight is None:
            return None
        return source, target, weight

    def add_corridor(self):
        ends = self._corridor_ends()
        if ends is None:
            return None
        corridor = self.maze.add_corridor(*ends)
        self.output_fn(f"Corredor adicionado: {corridor}")
        return corridor

    def add_corridor_with_event(self):
        ends = self._corridor_ends()
        if ends is None:
            return None
        corridor = self.maze.add_corridor(*ends, event=self.prompt_event())
        self.output_fn(f"Corredor adicionado: {corridor}")
        return corridor

    def prompt_event(self) -> Optional[RandomEvent]:
        if not confirm(self.input_fn, "Adicionar evento ao corredor (S/N)? "):
            return None
        description = read_text(self.input_fn, "Descrição do evento: ") or DEFAULT_EVENT_DESCRIPTION
        self.output_fn("Efeito (opcional). Escolhe uma das opções ou deixa vazio:")
        for effect in Effect:
            self.output_fn(f" - {effect.name}")
        effect = self._read_effect("Efeito: ")
        item = None
        item_name = read_text(self.input_fn, "Item (nome, vazio para nenhum): ")
        if item_name:
            item = Item(item_name, self._read_effect("Efeito do item: "))
        return RandomEvent(description, effect, item)

    def _read_effect(self, prompt: str) -> Effect:
        raw = read_text(self.input_fn, prompt)
        try:
            return Effect.from_label(raw)
        except ValueError:
            self.output_fn("Efeito desconhecido. O evento será apenas descritivo.")
            return Effect.NONE

    def list_rooms(self) -> None:
        if self.maze.is_empty():
            self.output_fn("(sem salas)")
            return
        self.output_fn(str(self.maze))

    def save(self) -> Optional[Path]:
        name = read_text(self.input_fn, "Nome do ficheiro (sem .json): ")
        if not name:
            self.output_fn("[ERROR] Nome inválido.")
            return None
        if name.endswith(".json"):
            name = name[: -len(".json")]
        if self.maze.name == DEFAULT_MAP_NAME:
            self.maze.name = name
        path = save_maze(self.maze, self.maps_dir / f"{name}.json")
        if path is None:
            self.output_fn("[ERROR] Erro ao guardar o mapa.")
        else:
            self.output_fn(f"[OK] Mapa guardado como {path}")
            self.last_saved = path
        return path

    def validate(self):
        report = validate_maze(self.maze)
        if report.ok:
            self.output_fn(f"[OK] Mapa válido. Caminho: {report.path}")
        else:
            for error in report.errors:
                self.output_fn(f"[ERROR] {error}")
        if report.unreachable_rooms:
            self.output_fn("Salas inalcançáveis: " + ", ".join(report.unreachable_rooms))
        return report


__all__ = ["MapEditor", "MENU"]
