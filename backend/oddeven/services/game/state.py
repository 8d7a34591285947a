from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .board import Board, create_empty_board
from .roles import Role


class Phase(str, Enum):
    AWAITING_PLAYERS = 'awaiting_players'
    IN_PROGRESS = 'in_progress'
    OVER = 'over'


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of the authoritative game.

    Every transition returns a new snapshot; the lifecycle controller is the
    only holder of the current one.
    """

    board: Board
    phase: Phase = Phase.AWAITING_PLAYERS
    winner: Optional[Role] = None
    winning_line: Optional[Tuple[int, ...]] = None

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.OVER

    @classmethod
    def fresh(cls, size: int, phase: Phase = Phase.AWAITING_PLAYERS) -> 'GameState':
        return cls(board=create_empty_board(size), phase=phase)

    def reset(self, players_ready: bool) -> 'GameState':
        phase = Phase.IN_PROGRESS if players_ready else Phase.AWAITING_PLAYERS
        return GameState.fresh(len(self.board), phase)

    def with_board(self, board: Board) -> 'GameState':
        return replace(self, board=board)

    def finish(self, winner: Optional[Role] = None, line: Optional[Tuple[int, ...]] = None) -> 'GameState':
        return replace(self, phase=Phase.OVER, winner=winner, winning_line=line)

    def to_dict(self):
        return {
            'phase': self.phase.value,
            'board': list(self.board),
            'gameOver': self.game_over,
            'winner': self.winner.value if self.winner else None,
            'winningLine': list(self.winning_line) if self.winning_line else None,
        }
