"""Labyrinth of Glory CLI entry point.

Provides subcommands for the interactive menu, playing a map directly,
editing maps and validating map files. Accepts configuration via flags and
LABYRINTH_* environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import sys
from pathlib import Path
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open(Path(__file__).resolve().parent / "VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Labyrinth of Glory

    Explore a maze of rooms and weighted corridors, solve riddles and reach the
    treasure. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          LABYRINTH_MAPS_DIR        Directory with map files (default: maps)
          LABYRINTH_RIDDLES_FILE    Riddle pool for ENIGMA rooms (default: maps/enigmas.json)
          LABYRINTH_REPORTS_DIR     Where mission reports are written (default: .)
          LABYRINTH_LOG_FILE        Append-only game log (default: game_log.txt)
          LABYRINTH_STARTING_POWER  Starting power per player (default: 100)
          LABYRINTH_LOG_LEVEL       Diagnostics level: debug|info|warn|error (default: info)

        Examples:
          # Open the main menu
          python run.py

          # Play a map straight away
          python run.py play maps/map_v1.json

          # Check that a map is playable
          python run.py validate maps/map_v1.json

          # Load variables from .env then open the map editor
          python run.py --env-file .env editor
        """
    )

    parser = argparse.ArgumentParser(
        prog="Labyrinth",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Labyrinth of Glory {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    menu_parser = subparsers.add_parser(
        "menu",
        help="Open the interactive main menu",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    menu_parser.set_defaults(command="menu")

    play_parser = subparsers.add_parser(
        "play",
        help="Play a map file directly",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    play_parser.add_argument("map", help="Path to a map .json file (or a name inside the maps directory)")
    play_parser.add_argument(
        "--riddles",
        dest="riddles_file",
        default=None,
        help="Riddle pool file (default: env LABYRINTH_RIDDLES_FILE or maps/enigmas.json)",
    )
    play_parser.add_argument(
        "--reports-dir",
        dest="reports_dir",
        default=None,
        help="Directory for mission reports (default: env LABYRINTH_REPORTS_DIR or .)",
    )
    play_parser.add_argument(
        "--power",
        dest="starting_power",
        type=int,
        default=None,
        help="Starting power for each player (default: env LABYRINTH_STARTING_POWER or 100)",
    )
    play_parser.set_defaults(command="play")

    editor_parser = subparsers.add_parser(
        "editor",
        help="Open the interactive map editor",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Build a map room by room and save it into the maps directory.

            Editor options:
              1  add room          4  save map
              2  add corridor      5  add corridor with event
              3  list rooms        6  validate
              0  exit
            """
        ),
    )
    editor_parser.set_defaults(command="editor")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that a map has an entrance and a reachable treasure",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    validate_parser.add_argument("map", help="Path to a map .json file")
    validate_parser.set_defaults(command="validate")

    for sub in (menu_parser, play_parser, editor_parser):
        sub.add_argument(
            "--maps-dir",
            dest="maps_dir",
            default=None,
            help="Directory with map files (default: env LABYRINTH_MAPS_DIR or maps)",
        )
        sub.add_argument(
            "--log-file",
            dest="log_file",
            default=None,
            help="Game log file (default: env LABYRINTH_LOG_FILE or game_log.txt)",
        )

    # If no subcommand provided, default to the menu
    if len(argv) == 0:
        argv = ["menu"]

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "menu"
    return args


def _banner(mode: str, cfg) -> str:
    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Labirinto da Glória{Style.RESET_ALL}" if _COLOR_ENABLED else "Labirinto da Glória"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Maps:'):12} {value(cfg.maps_dir)}",
        f"  {label('Riddles:'):12} {value(cfg.riddles_file)}",
        f"  {label('Reports:'):12} {value(cfg.reports_dir)}",
        f"  {label('Log file:'):12} {value(cfg.log_file)}",
        divider,
        "",
    ]
    return "\n".join(lines)


def _validate(map_arg: str) -> int:
    from labyrinth.maze import validate_maze
    from labyrinth.services.map_loader import load_maze

    path = Path(map_arg)
    if not path.exists():
        print(f"[ERROR] File not found: {path}")
        return 1
    maze = load_maze(path)
    report = validate_maze(maze)
    print(f"Map '{maze.name}': {maze.room_count} rooms, {maze.corridor_count} corridors")
    for error in report.errors:
        print(f"[ERROR] {error}")
    if report.unreachable_rooms:
        print("[WARN] Unreachable rooms: " + ", ".join(report.unreachable_rooms))
    if not report.ok:
        return 1
    print(f"[OK] Path: {report.path}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested, otherwise the default .env if present
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    from labyrinth.config import load_config
    from labyrinth.logging_utils import log

    cfg = load_config(
        maps_dir=getattr(args, "maps_dir", None),
        log_file=getattr(args, "log_file", None),
        riddles_file=getattr(args, "riddles_file", None),
        reports_dir=getattr(args, "reports_dir", None),
        starting_power=getattr(args, "starting_power", None),
    )
    mode = args.command

    if mode == "validate":
        return _validate(args.map)

    print(_banner(mode, cfg))
    log.info(event="startup", mode=mode, maps=cfg.maps_dir, log_file=cfg.log_file)

    from labyrinth.services.game_logger import GameLogger
    from labyrinth.ui import MapEditor, main_menu, new_game
    from labyrinth.ui.text_menu import resolve_map_path

    game_log = GameLogger(cfg.log_file)
    try:
        if mode == "editor":
            MapEditor(maps_dir=cfg.maps_dir).run()
            return 0
        if mode == "play":
            path = resolve_map_path(args.map, cfg.maps_dir)
            if not path.exists():
                print(f"[ERROR] File not found: {path}")
                return 1
            engine = new_game(input, print, cfg, game_log, map_path=path)
            return 0 if engine is not None else 1
        main_menu(input, print, cfg, game_log)
        return 0
    except KeyboardInterrupt:
        print("\n[INFO] Interrompido pelo utilizador.")
        return 130
    finally:
        game_log.close()


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
