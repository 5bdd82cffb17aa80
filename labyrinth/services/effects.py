"""Apply corridor events to players.

Each Effect has a handler in EFFECT_HANDLERS with signature
(player, effect, outcome, context) -> None; handlers update the players and
fill in the EventOutcome. The corridor and its event are never modified;
deciding whether a traversal is the first one belongs to the caller.

Baseline effects:
- HEAL / BONUS_POWER: add the effect magnitude to power.
- DAMAGE / TRAP: subtract the absolute magnitude (power floors at 0).
- SKIP_TURN: the player loses their next turn.
- EXTRA_TURN: outcome.extra_turn is set; the session lets the player move again.
- RECEDE: walk the movement history back ``magnitude`` rooms (needs the maze).
- SWAP_POSITION: trade rooms with another player of the roster.
- SWAP_ALL: every player in the roster moves to the next player's room.
- NONE: descriptive event only.

Items carried by an event go straight to the inventory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from labyrinth.logging_utils import get_logger
from labyrinth.maze import Effect, Item, Maze, RandomEvent
from labyrinth.player import Player

log = get_logger("effects")

# (active player, candidates) -> chosen player, or None to cancel the swap
SwapChooser = Callable[[Player, List[Player]], Optional[Player]]


@dataclass
class EffectContext:
    maze: Optional[Maze] = None
    players: Sequence[Player] = ()
    choose: Optional[SwapChooser] = None


@dataclass
class EventOutcome:
    effect: Effect = Effect.NONE
    power_delta: int = 0
    item: Optional[Item] = None
    extra_turn: bool = False
    receded_to: Optional[str] = None
    died: bool = False
    # other players whose room changed because of the event
    displaced: List[Player] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)


def _gain(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    outcome.power_delta = player.update_power(abs(effect.magnitude))
    outcome.messages.append(f"{player.name} recupera poder: {player.power - outcome.power_delta} -> {player.power}")


def _harm(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    outcome.power_delta = player.update_power(-abs(effect.magnitude))
    outcome.messages.append(f"{player.name} perde poder: {player.power - outcome.power_delta} -> {player.power}")


def _skip(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    player.skip_next_turn = True
    outcome.messages.append(f"{player.name} ficou atordoado e perde a próxima jogada!")


def _extra(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    outcome.extra_turn = True
    outcome.messages.append(f"{player.name} ganhou uma jogada extra!")


def _recede(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    target = recede(player, abs(effect.magnitude), context.maze)
    if target is None:
        outcome.messages.append(f"{player.name} não conseguiu recuar.")
    else:
        outcome.receded_to = target
        outcome.messages.append(f"{player.name} foi forçado a recuar para {target}!")


def _in_play(players: Sequence[Player]) -> List[Player]:
    return [p for p in players if p.alive and p.current_room is not None]


def _swap_position(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    others = [p for p in _in_play(context.players) if p is not player]
    if not others or player.current_room is None:
        outcome.messages.append("Não há mais ninguém com quem trocar!")
        return
    target = context.choose(player, others) if context.choose is not None else others[0]
    if target is None or target not in others:
        outcome.messages.append("Troca cancelada.")
        return
    mine, theirs = player.current_room, target.current_room
    player.swap_to(theirs)
    target.swap_to(mine)
    outcome.displaced.append(target)
    outcome.messages.append(f"{player.name} trocou de lugar com {target.name}")
    outcome.messages.append(f"{player.name} está agora em: {theirs.id}")


def _swap_all(player: Player, effect: Effect, outcome: EventOutcome, context: EffectContext) -> None:
    placed = _in_play(context.players)
    if len(placed) < 2:
        outcome.messages.append("Não há jogadores suficientes para trocar.")
        return
    outcome.messages.append("Todos os jogadores trocam de posição!")
    rooms = [p.current_room for p in placed]
    for index, other in enumerate(placed):
        new_room = rooms[(index + 1) % len(rooms)]
        other.swap_to(new_room)
        outcome.messages.append(f"  {other.name} -> {new_room.id}")
        if other is not player:
            outcome.displaced.append(other)


EFFECT_HANDLERS: Dict[Effect, Callable[[Player, Effect, EventOutcome, EffectContext], None]] = {
    Effect.HEAL: _gain,
    Effect.BONUS_POWER: _gain,
    Effect.DAMAGE: _harm,
    Effect.TRAP: _harm,
    Effect.SKIP_TURN: _skip,
    Effect.EXTRA_TURN: _extra,
    Effect.RECEDE: _recede,
    Effect.SWAP_POSITION: _swap_position,
    Effect.SWAP_ALL: _swap_all,
}


def recede(player: Player, steps: int, maze: Optional[Maze]) -> Optional[str]:
    """Move ``player`` back up to ``steps`` rooms along their history.

    The walk stops early at the room a swap last put the player in. Returns
    the id of the room they end up in, or None when there is nowhere to go
    back to (no maze, or no earlier room recorded).
    """
    if maze is None or steps <= 0 or player.history.size() < 2:
        return None
    player.history.pop()  # the room the player is standing in
    target_id = None
    taken = 0
    while taken < steps and not player.history.is_empty():
        target_id = player.history.pop()
        taken += 1
        if target_id == player.swap_anchor:
            break
    room = maze.get_room(target_id)
    if room is None:
        log.warn(event="recede_target_missing", player=player.name, room=target_id)
        return None
    player.place(room)
    return room.id


def apply_event(
    player: Player,
    event: Optional[RandomEvent],
    maze: Optional[Maze] = None,
    players: Optional[Sequence[Player]] = None,
    choose: Optional[SwapChooser] = None,
) -> EventOutcome:
    """Apply ``event`` to ``player`` and report what happened.

    ``players`` is the roster the swap effects work on and ``choose`` picks
    the SWAP_POSITION partner (the first other player when omitted).
    """
    outcome = EventOutcome()
    if event is None:
        return outcome
    context = EffectContext(maze, players or (), choose)
    effect = event.direct_effect
    outcome.effect = effect
    outcome.messages.append(f"EVENTO: {event.description}")
    player.record_encountered_event(event.description)
    handler = EFFECT_HANDLERS.get(effect)
    if handler:
        handler(player, effect, outcome, context)
        player.record_applied_effect(effect.value)
    if event.item is not None:
        player.add_item(event.item)
        outcome.item = event.item
        outcome.messages.append(f"Encontraste: {event.item}")
    outcome.died = not player.alive
    log.debug(
        event="event_applied",
        player=player.name,
        effect=effect.value,
        delta=outcome.power_delta,
        item=event.item.name if event.item else None,
        displaced=len(outcome.displaced) or None,
    )
    return outcome


__all__ = ["EffectContext", "EventOutcome", "EFFECT_HANDLERS", "SwapChooser", "apply_event", "recede"]
