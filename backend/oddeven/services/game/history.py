import time
from dataclasses import dataclass
from string import ascii_uppercase
from typing import List, Optional

from .roles import Role


@dataclass(frozen=True)
class Move:
    number: int
    square: int
    player: Optional[Role]
    value: int
    timestamp: float

    def to_dict(self, side: int):
        return {
            'moveNumber': self.number,
            'square': self.square,
            'coordinate': square_to_coordinate(self.square, side),
            'player': self.player.value if self.player else None,
            'value': self.value,
            'timestamp': self.timestamp,
        }


def square_to_coordinate(square: int, side: int) -> str:
    """Row letter plus 1-based column, e.g. square 7 on a 5x5 board is B3."""
    row, col = divmod(square, side)
    return f"{ascii_uppercase[row]}{col + 1}"


class MoveHistory:
    """Applied increments of the current game, oldest first."""

    def __init__(self, side: int):
        self.side = side
        self._moves: List[Move] = []

    def record(self, square: int, player: Optional[Role], value: int) -> Move:
        move = Move(number=len(self._moves) + 1, square=square, player=player, value=value, timestamp=time.time())
        self._moves.append(move)
        return move

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def to_list(self):
        return [m.to_dict(self.side) for m in self._moves]
