import logging
import threading
from typing import Optional

from . import events
from .board import board_side, winning_lines
from .errors import MalformedMessage, SessionCapacityExceeded, UnknownIntentType
from .history import MoveHistory
from .protocol import apply_intent, decode_intent
from .registry import SessionRegistry
from .roles import Role
from .state import GameState, Phase
from .transport import Broadcaster, Transport

logger = logging.getLogger(__name__)


class GameAuthority:
    """Owns the game state and the session registry for one server process.

    Every public method runs under a single re-entrant lock, event delivery
    included, so clients observe events in the order state changed.
    """

    def __init__(self, transport: Transport, size: int = 25, scores=None):
        self.side = board_side(size)
        self.lines = winning_lines(self.side)
        self.broadcaster = Broadcaster(transport)
        self.registry = SessionRegistry(transport.is_open)
        self.history = MoveHistory(self.side)
        self.scores = scores
        self._state = GameState.fresh(size)
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        return self._state

    def connect(self, sid: str) -> Optional[Role]:
        """Admit a new session; returns None when the game is full."""
        with self._lock:
            try:
                role = self.registry.admit(sid)
            except SessionCapacityExceeded as exc:
                logger.info(f"[reject] {sid}: {exc}")
                self.broadcaster.send_to(sid, events.error(str(exc)))
                return None

            logger.info(f"[admit] {sid} assigned role={role.value}")
            self.broadcaster.send_to(sid, events.player_assigned(role, self._state.board))
            both = self.registry.both_roles_filled()
            self._broadcast(events.player_connected(role, both))
            if both:
                logger.info("[start] both players connected")
                self._start_new_game(players_ready=True)
                self._broadcast(events.game_start(self._state.board))
            return role

    def disconnect(self, sid: str) -> Optional[Role]:
        with self._lock:
            role = self.registry.release(sid)
            if role is None:
                return None
            logger.info(f"[disconnect] {sid} released role={role.value}")
            # No winner is awarded when a player leaves
            if self._state.phase is not Phase.OVER:
                self._state = self._state.finish()
            self._broadcast(events.player_disconnected(role))
            if len(self.registry) == 0:
                logger.info("[reset] no sessions left")
                self._start_new_game(players_ready=False)
            return role

    def handle_message(self, sid: str, raw) -> None:
        with self._lock:
            role = self.registry.role_of(sid)
            if role is None:
                logger.info(f"[ignored] message from unadmitted session {sid}")
                return
            try:
                intent = decode_intent(raw)
            except MalformedMessage as exc:
                logger.warning(f"[malformed] from {sid}: {exc}")
                return
            except UnknownIntentType as exc:
                logger.warning(f"[unknown-intent] from {sid}: {exc}")
                return

            outcome = apply_intent(self._state, intent, self.registry.both_roles_filled(), self.lines)
            if outcome.restarted:
                self.history.clear()
                logger.info(f"[reset] requested by {role.value}")
            self._state = outcome.state
            if outcome.move:
                square, value = outcome.move
                self.history.record(square, role, value)
                logger.info(f"[increment] {role.value} square={square} value={value}")
            if self._state.winner and outcome.move:
                logger.info(f"[game-over] winner={self._state.winner.value} line={list(self._state.winning_line)}")
                self._record_result(self._state.winner)
            for event in outcome.events:
                self._broadcast(event)

    def snapshot(self):
        with self._lock:
            occupancy = self.registry.occupancy()
            data = self._state.to_dict()
            data.update({
                'players': {role.value: filled for role, filled in occupancy.items()},
                'bothPlayersConnected': all(occupancy.values()),
                'moveCount': len(self.history),
            })
            return data

    def moves(self):
        with self._lock:
            return self.history.to_list()

    def _start_new_game(self, players_ready: bool) -> None:
        self._state = self._state.reset(players_ready)
        self.history.clear()

    def _broadcast(self, event) -> None:
        self.broadcaster.broadcast(self.registry.live_sids(), event)

    def _record_result(self, winner: Role) -> None:
        if self.scores is None:
            return
        try:
            self.scores.record_result(winner)
        except Exception:
            logger.exception(f"[score] failed to record win for {winner.value}")
