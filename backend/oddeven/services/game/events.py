"""Outbound event records.

Every event is a flat dict with a ``type`` tag next to its payload fields, so
clients can dispatch on the tag and ignore fields they do not know.
"""

from typing import Any, Dict, Optional, Sequence

from .roles import Role

PLAYER_ASSIGNED = 'PLAYER_ASSIGNED'
PLAYER_CONNECTED = 'PLAYER_CONNECTED'
GAME_START = 'GAME_START'
UPDATE = 'UPDATE'
GAME_OVER = 'GAME_OVER'
GAME_RESET = 'GAME_RESET'
PLAYER_DISCONNECTED = 'PLAYER_DISCONNECTED'
ERROR = 'ERROR'

Event = Dict[str, Any]


def _event(tag: str, **payload) -> Event:
    return {'type': tag, **payload}


def player_assigned(role: Role, board: Sequence[int]) -> Event:
    return _event(PLAYER_ASSIGNED, player=role.value, board=list(board))


def player_connected(role: Role, both_connected: bool) -> Event:
    return _event(PLAYER_CONNECTED, player=role.value, bothPlayersConnected=both_connected)


def game_start(board: Sequence[int]) -> Event:
    return _event(GAME_START, board=list(board))


def update(square: int, value: int, board: Sequence[int]) -> Event:
    return _event(UPDATE, square=square, value=value, board=list(board))


def game_over(winner: Role, line: Sequence[int], board: Sequence[int]) -> Event:
    return _event(GAME_OVER, winner=winner.value, winningLine=list(line), board=list(board))


def game_reset(board: Sequence[int]) -> Event:
    return _event(GAME_RESET, board=list(board))


def player_disconnected(role: Role, message: Optional[str] = None) -> Event:
    return _event(
        PLAYER_DISCONNECTED,
        player=role.value,
        message=message or f"{role.value} player disconnected. Game ended.",
    )


def error(message: str) -> Event:
    return _event(ERROR, message=message)
