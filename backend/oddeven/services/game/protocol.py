"""Inbound intent decoding and the game state machine.

States run ``awaiting_players -> in_progress -> over``. Increments are only
applied while a game is in progress with both roles filled; anything else,
including out-of-range squares, is dropped without a reply. Reset is always
honored and restarts play immediately when both roles are filled.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from . import events
from .board import Line, apply_increment, evaluate_win
from .errors import MalformedMessage, OutOfRangeError, UnknownIntentType
from .events import Event
from .state import GameState, Phase

logger = logging.getLogger(__name__)

INCREMENT = 'INCREMENT'
RESET = 'RESET'


@dataclass(frozen=True)
class Increment:
    square: object


@dataclass(frozen=True)
class Reset:
    pass


Intent = Union[Increment, Reset]


@dataclass
class Outcome:
    state: GameState
    events: List[Event] = field(default_factory=list)
    # (square, value) of an applied increment
    move: Optional[tuple] = None
    restarted: bool = False


def decode_intent(raw) -> Intent:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise MalformedMessage(f"payload is not utf-8: {exc}") from exc
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise MalformedMessage(f"payload is not JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise MalformedMessage(f"expected an object, got {type(raw).__name__}")

    kind = raw.get('type')
    if kind == INCREMENT:
        return Increment(square=raw.get('square'))
    if kind == RESET:
        return Reset()
    raise UnknownIntentType(f"unknown message type: {kind!r}")


def apply_intent(state: GameState, intent: Intent, players_ready: bool, lines: Sequence[Line]) -> Outcome:
    if isinstance(intent, Reset):
        return _reset(state, players_ready)
    if isinstance(intent, Increment):
        return _increment(state, intent.square, players_ready, lines)
    raise UnknownIntentType(f"unsupported intent {intent!r}")


def _reset(state: GameState, players_ready: bool) -> Outcome:
    fresh = state.reset(players_ready)
    emitted = [events.game_reset(fresh.board)]
    if players_ready:
        emitted.append(events.game_start(fresh.board))
    return Outcome(fresh, emitted, restarted=True)


def _increment(state: GameState, square, players_ready: bool, lines: Sequence[Line]) -> Outcome:
    if state.phase is not Phase.IN_PROGRESS:
        logger.debug(f"[increment-ignored] phase={state.phase.value} square={square!r}")
        return Outcome(state)
    if not players_ready:
        logger.info(f"[increment-ignored] waiting for both players square={square!r}")
        return Outcome(state)
    try:
        board = apply_increment(state.board, square)
    except OutOfRangeError as exc:
        logger.info(f"[increment-ignored] {exc}")
        return Outcome(state)

    value = board[square]
    result = evaluate_win(board, lines)
    if result.winner:
        finished = state.with_board(board).finish(result.winner, result.line)
        return Outcome(finished, [events.game_over(result.winner, result.line, board)], (square, value))
    return Outcome(state.with_board(board), [events.update(square, value, board)], (square, value))
