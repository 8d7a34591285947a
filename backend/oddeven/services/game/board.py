"""Board engine: pure functions over an immutable board.

A board is a tuple of non-negative cell values for a square grid. The only
mutation is incrementing one cell, which produces a new tuple. A winning line
is completed when all of its cells are positive and share one parity; odd
cells win for the odd role and even cells for the even role.
"""

import math
from functools import lru_cache
from typing import NamedTuple, Optional, Sequence, Tuple

from .errors import BoardSizeError, OutOfRangeError
from .roles import Role

Board = Tuple[int, ...]
Line = Tuple[int, ...]

MIN_SIDE = 3
# Rows are labelled A..Z in move coordinates
MAX_SIDE = 26


class WinResult(NamedTuple):
    winner: Optional[Role]
    line: Optional[Line]


def board_side(size: int) -> int:
    side = math.isqrt(size) if isinstance(size, int) and size >= 0 else -1
    if side < MIN_SIDE or side > MAX_SIDE or side * side != size:
        raise BoardSizeError(
            f"unsupported board size {size!r}: expected a perfect square of side {MIN_SIDE}..{MAX_SIDE}"
        )
    return side


@lru_cache(maxsize=None)
def winning_lines(side: int) -> Tuple[Line, ...]:
    """Rows, then columns, then the main and anti diagonals."""
    if not MIN_SIDE <= side <= MAX_SIDE:
        raise BoardSizeError(f"unsupported board side {side}")
    rows = [tuple(r * side + c for c in range(side)) for r in range(side)]
    cols = [tuple(r * side + c for r in range(side)) for c in range(side)]
    diagonals = [
        tuple(i * side + i for i in range(side)),
        tuple(i * side + (side - 1 - i) for i in range(side)),
    ]
    return tuple(rows + cols + diagonals)


def create_empty_board(size: int) -> Board:
    board_side(size)
    return (0,) * size


def apply_increment(board: Board, index) -> Board:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(board):
        raise OutOfRangeError(f"square {index!r} outside [0, {len(board)})")
    cells = list(board)
    cells[index] += 1
    return tuple(cells)


def evaluate_win(board: Sequence[int], lines: Sequence[Line]) -> WinResult:
    for line in lines:
        values = [board[i] for i in line]
        if all(v > 0 and v % 2 == 1 for v in values):
            return WinResult(Role.ODD, tuple(line))
        if all(v > 0 and v % 2 == 0 for v in values):
            return WinResult(Role.EVEN, tuple(line))
    return WinResult(None, None)
