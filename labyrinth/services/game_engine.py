"""
project: Labyrinth of Glory
module: game_engine.py
License: MIT

Turn based session for human players.

Players take turns from a LinkedQueue. On each turn the current player sees
the exits of their room and types a room id (``move <id>`` also works,
``look`` reprints the status, ``sair``/``exit``/``q`` ends the game).

- The event on a corridor fires only the first time anybody walks it.
- Entering an unsolved ENIGMA room asks its riddle; a wrong answer keeps the
  player there and the riddle is asked again at the start of their next turn.
  A solved riddle stays solved for everybody.
- SWAP_POSITION asks the mover to pick a partner; SWAP_ALL rotates every
  player still in play. A player swapped onto the treasure wins.
- Reaching the treasure room wins. When every player's power reaches 0 the
  mission is lost.

Input and output go through ``input_fn``/``output_fn`` so the loop can be
driven by a script. End of input counts as leaving the game.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Set

from labyrinth.errors import MazeStructureError
from labyrinth.logging_utils import get_logger
from labyrinth.maze import Corridor, Maze, Room
from labyrinth.player import Player
from labyrinth.structures import LinkedQueue

from .effects import apply_event
from .game_logger import GameLogger
from .report_exporter import export_match_summary, export_mission_report

log = get_logger("game_engine")

QUIT_COMMANDS = {"sair", "exit", "quit", "q"}
LOOK_COMMANDS = {"look", "olhar", "ver"}


class GameEngine:
    def __init__(
        self,
        maze: Maze,
        players: Optional[Iterable[Player]] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        game_log: Optional[GameLogger] = None,
        reports_dir: str = ".",
        export_reports: bool = True,
    ):
        self.maze = maze
        self.players: List[Player] = list(players or [])
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.game_log = game_log
        self.reports_dir = reports_dir
        self.export_reports = export_reports
        self.turns: LinkedQueue[Player] = LinkedQueue()
        self.traversed: Set[Corridor] = set()
        self.solved_rooms: Set[str] = set()
        self.running = False
        self.abandoned = False
        self.winner: Optional[Player] = None
        self.rounds = 0

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def _say(self, text: str = "") -> None:
        self.output_fn(text)

    def _record(self, message: str) -> None:
        if self.game_log is not None:
            self.game_log.log(message)

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt).strip()
        except EOFError:
            return None

    def add_player(self, player: Player) -> None:
        if player not in self.players:
            self.players.append(player)

    def start(self) -> None:
        """Place every player at the entrance and open the turn queue."""
        entrance = self.maze.get_entrance()
        if entrance is None:
            raise MazeStructureError(f"maze '{self.maze.name}' has no entrance room")
        if self.maze.get_treasure_room() is None:
            raise MazeStructureError(f"maze '{self.maze.name}' has no treasure room")
        if not self.players:
            raise ValueError("a game needs at least one player")
        if self.game_log is not None:
            self.game_log.start_session(self.maze.name)
        for player in self.players:
            player.place(entrance)
            self.turns.enqueue(player)
            self._say(f">> {player.name} entrou no jogo em: {entrance.id}")
            self._record(f"{player.name} entrou no labirinto em {entrance.id}")
        self.running = True
        log.info(event="game_started", maze=self.maze.name, players=len(self.players))

    # ------------------------------------------------------------------
    # Turn loop
    # ------------------------------------------------------------------
    def run(self) -> Optional[Player]:
        """Play until someone wins, everybody is out of power, or input ends."""
        if not self.running:
            self.start()
        self._say("\n=== O JOGO COMEÇOU! ===")
        while self.running and not self.turns.is_empty():
            player = self.turns.dequeue()
            self.play_turn(player)
            if not self.running:
                break
            if player.alive:
                self.turns.enqueue(player)
            else:
                self._say(f"(X) {player.name} ficou sem poder e foi eliminado.")
                self._record(f"{player.name} foi eliminado (poder 0)")
        self.running = False
        self.finish()
        return self.winner

    def play_turn(self, player: Player) -> None:
        self.rounds += 1
        self._say(f"\n>>> Turno de: {player.name} <<<")
        if player.skip_next_turn:
            player.skip_next_turn = False
            self._say(f"{player.name} está atordoado e perde esta jogada.")
            self._record(f"{player.name} perdeu a jogada")
            return
        if not self._riddle_gate(player):
            return
        extra = True
        while extra and self.running and player.alive:
            extra = self._take_move(player)

    def _take_move(self, player: Player) -> bool:
        """Read commands until a legal move is made; returns True for an extra move."""
        self.print_status(player)
        if not self.maze.get_corridors(player.current_room):
            self._say(f"{player.name} está encurralado: não há saídas.")
            self._record(f"{player.name} ficou encurralado em {player.current_room.id}")
            self.running = False
            return False
        while True:
            raw = self._ask("> ")
            if raw is None:
                self.quit(player)
                return False
            if not raw:
                continue
            command = raw.lower()
            if command in QUIT_COMMANDS:
                self.quit(player)
                return False
            if command in LOOK_COMMANDS:
                self.print_status(player)
                continue
            # room ids may contain spaces: the target is the rest of the line
            target = raw
            if raw.split(None, 1)[0].lower() == "move":
                target = raw[len("move"):].strip()
                if not target:
                    self._say("Uso incorreto. Tenta: move <ID_DA_SALA>")
                    continue
            moved, extra = self.move(player, target)
            if moved:
                return extra

    def _match_neighbor(self, room: Room, target_id: str) -> Optional[Room]:
        fallback = None
        for neighbor in self.maze.get_neighbors(room):
            if neighbor.id == target_id:
                return neighbor
            if fallback is None and neighbor.id.casefold() == target_id.casefold():
                fallback = neighbor
        return fallback

    def move(self, player: Player, target_id: str):
        """Move ``player`` to the neighbor ``target_id``.

        Returns ``(moved, extra_turn)``; an illegal target leaves the player
        where they are and returns ``(False, False)``.
        """
        origin = player.current_room
        destination = self._match_neighbor(origin, target_id) if origin is not None else None
        if destination is None:
            self._say(f"(!) Movimento inválido: {target_id}")
            return False, False
        corridor = self.maze.get_corridor_between(origin, destination)
        player.move_to(destination)
        self._say(f">> {player.name} entrou em: {destination.id}")
        self._record(f"{player.name} moveu-se de {origin.id} para {destination.id} (custo {corridor.weight:g})")

        extra = False
        displaced: List[Player] = []
        if corridor.event is not None and corridor not in self.traversed:
            outcome = apply_event(player, corridor.event, self.maze, self.players, self._choose_swap_target)
            for line in outcome.messages:
                self._say(line)
            self._record(f"{player.name}: evento '{corridor.event.description}' ({outcome.effect.value})")
            extra = outcome.extra_turn
            displaced = outcome.displaced
            for other in displaced:
                self._record(f"{other.name} foi levado para {other.current_room.id}")
        self.traversed.add(corridor)

        if not player.alive:
            return True, False
        if player.current_room.is_treasure:
            self._declare_winner(player)
            return True, False
        # a swap can drop another player onto the treasure
        for other in displaced:
            if other.current_room.is_treasure:
                self._declare_winner(other)
                return True, False
        if not self._riddle_gate(player):
            return True, False
        return True, extra

    def _choose_swap_target(self, player: Player, candidates: List[Player]) -> Optional[Player]:
        self._say("\nEscolhe um jogador para trocar de posição:")
        for number, other in enumerate(candidates, start=1):
            self._say(f"{number}. {other.name} (em {other.current_room.id})")
        raw = self._ask(f"Escolha (1-{len(candidates)}): ")
        if raw is None or not raw.isdigit() or not 1 <= int(raw) <= len(candidates):
            self._say("Escolha inválida.")
            return None
        return candidates[int(raw) - 1]

    # ------------------------------------------------------------------
    # Riddles
    # ------------------------------------------------------------------
    def _riddle_gate(self, player: Player) -> bool:
        """Ask the riddle of the player's room if it is still unsolved.

        Returns True when the player is free to move on.
        """
        room = player.current_room
        if room is None or not room.is_riddle or room.riddle is None or room.id in self.solved_rooms:
            return True
        riddle = room.riddle
        self._say("\n--- ENIGMA ---")
        self._say(riddle.question)
        for number, option in enumerate(riddle.options, start=1):
            self._say(f"{number}. {option}")
        raw = self._ask("Resposta: ")
        if raw is None:
            self.quit(player)
            return False
        answer = raw
        if riddle.is_multiple_choice and raw.isdigit():
            answer = int(raw) - 1
        if riddle.check_answer(answer):
            self.solved_rooms.add(room.id)
            player.record_solved_riddle(riddle.question)
            self._say("Correto! Podes continuar.")
            self._record(f"{player.name} resolveu o enigma de {room.id}")
            return True
        self._say("Errado! Estás bloqueado nesta sala até responder corretamente.")
        self._record(f"{player.name} falhou o enigma de {room.id}")
        return False

    # ------------------------------------------------------------------
    # Ending
    # ------------------------------------------------------------------
    def _declare_winner(self, player: Player) -> None:
        self.winner = player
        self.running = False
        self._say(f"\nVITÓRIA! {player.name} encontrou o tesouro!")
        if self.game_log is not None:
            self.game_log.log_victory(player.name, player.moves)
        log.info(event="victory", player=player.name, moves=player.moves)

    def quit(self, player: Optional[Player] = None) -> None:
        self.running = False
        self.abandoned = True
        who = player.name if player else "?"
        self._say("A sair do jogo...")
        self._record(f"Jogo abandonado por {who}")

    def finish(self) -> None:
        if self.winner is None and not self.abandoned:
            self._say("\nDERROTA: nenhum jogador chegou ao tesouro.")
            if self.game_log is not None:
                self.game_log.log_defeat()
            log.info(event="defeat", maze=self.maze.name)
        if self.export_reports:
            for player in self.players:
                path = export_mission_report(player, self.reports_dir, victory=player is self.winner)
                if path is not None:
                    self._say(f"Relatório guardado: {path}")
            if len(self.players) > 1:
                export_match_summary(self.players, self.winner, self.reports_dir)
        self._say("Jogo terminado.")

    def print_status(self, player: Player) -> None:
        room = player.current_room
        self._say(f"\n--- Estado de {player.name} ---")
        if room is None:
            self._say("Local: (fora do labirinto)")
        else:
            self._say(f"Local: {room.id} ({room.description})")
        self._say(f"Poder: {player.power}")
        self._say(f"Saídas: [{self.maze.available_exits(room)}]")


__all__ = ["GameEngine", "QUIT_COMMANDS"]
