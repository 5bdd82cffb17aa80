"""Main console menu: new game, map editor, exit."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from labyrinth.config import GameConfig
from labyrinth.errors import MazeStructureError
from labyrinth.logging_utils import get_logger
from labyrinth.maze import Maze, validate_maze
from labyrinth.player import Player
from labyrinth.services.game_engine import GameEngine
from labyrinth.services.game_logger import GameLogger
from labyrinth.services.map_loader import list_maps, load_maze
from labyrinth.services.riddle_loader import load_riddles

from .map_editor import MapEditor
from .prompts import InputFn, OutputFn, read_int, read_text

log = get_logger("text_menu")

TITLE = "Labirinto da Glória!"
MAIN_MENU = """Menu Principal:

1. Novo Jogo
2. Editor de Mapas
3. Sair
"""
NEW_GAME, EDITOR, EXIT = 1, 2, 3


def resolve_map_path(name: str, maps_dir: str) -> Path:
    """Turn a typed map name into a path; bare names are looked up in ``maps_dir``."""
    if not name.endswith(".json"):
        name += ".json"
    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    return Path(maps_dir) / path


def choose_map(input_fn: InputFn, output_fn: OutputFn, maps_dir: str) -> Optional[Path]:
    maps: List[Path] = list_maps(maps_dir)
    output_fn("\nSeleção de Mapa:\n")
    if not maps:
        output_fn(f"Nenhum mapa encontrado em {maps_dir}.")
    for number, path in enumerate(maps, start=1):
        output_fn(f"{number}. {path.stem}")
    custom = len(maps) + 1
    output_fn(f"{custom}. Carregar Mapa Personalizado")
    output_fn("0. Voltar\n")
    choice = read_int(input_fn, output_fn, "Escolha uma Opção: ")
    if choice is None or choice == 0:
        return None
    if 1 <= choice <= len(maps):
        return maps[choice - 1]
    if choice == custom:
        name = read_text(input_fn, "\nNome do ficheiro .json: ")
        return resolve_map_path(name, maps_dir) if name else None
    output_fn("Opção inválida. A voltar ao menu...")
    return None


def read_players(input_fn: InputFn, output_fn: OutputFn, starting_power: int) -> List[Player]:
    count = read_int(input_fn, output_fn, "Quantos jogadores? ", minimum=1)
    if count is None:
        return []
    players = []
    for number in range(1, count + 1):
        name = read_text(input_fn, f"Nome do Jogador {number}: ")
        if name is None:
            return []
        players.append(Player(name or f"Jogador_{number}", starting_power))
    return players


def prepare_maze(path: Path, config: GameConfig, output_fn: OutputFn) -> Optional[Maze]:
    """Load and certify a map; prints the problems and returns None when it is not playable."""
    output_fn(">>> A carregar o Labirinto...")
    maze = load_maze(path, load_riddles(config.riddles_file))
    report = validate_maze(maze)
    if not report.ok:
        output_fn(f"CRÍTICO: o mapa {path} não pode ser jogado.")
        for error in report.errors:
            output_fn(f"  - {error}")
        return None
    output_fn(f"Mapa '{maze.name}': {maze.room_count} salas, {maze.corridor_count} corredores.")
    return maze


def new_game(
    input_fn: InputFn,
    output_fn: OutputFn,
    config: GameConfig,
    game_log: Optional[GameLogger] = None,
    map_path: Optional[Path] = None,
) -> Optional[GameEngine]:
    if map_path is None:
        map_path = choose_map(input_fn, output_fn, config.maps_dir)
        if map_path is None:
            return None
    maze = prepare_maze(Path(map_path), config, output_fn)
    if maze is None:
        return None
    players = read_players(input_fn, output_fn, config.starting_power)
    if not players:
        output_fn("Sem jogadores, o jogo não pode começar.")
        return None
    engine = GameEngine(
        maze,
        players,
        input_fn=input_fn,
        output_fn=output_fn,
        game_log=game_log,
        reports_dir=config.reports_dir,
    )
    try:
        engine.run()
    except MazeStructureError as e:
        output_fn(f"[ERROR] {e}")
        log.error(event="game_aborted", map=str(map_path), error=str(e))
    return engine


def main_menu(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    config: Optional[GameConfig] = None,
    game_log: Optional[GameLogger] = None,
) -> None:
    config = config or GameConfig()
    output_fn(TITLE + "\n")
    while True:
        output_fn(MAIN_MENU)
        option = read_int(input_fn, output_fn, "Escolha uma opção: ")
        if option is None or option == EXIT:
            output_fn("Obrigado por jogar! Até à próxima.")
            return
        if option == NEW_GAME:
            new_game(input_fn, output_fn, config, game_log)
        elif option == EDITOR:
            MapEditor(input_fn, output_fn, config.maps_dir).run()
        else:
            output_fn("Opção inválida. Tenta novamente.")


__all__ = ["main_menu", "new_game", "choose_map", "read_players", "prepare_maze", "resolve_map_path"]
