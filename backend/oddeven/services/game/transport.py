import logging
from typing import Iterable

from .errors import TransportWriteFailure
from .events import Event

logger = logging.getLogger(__name__)

EVENT_NAME = 'game_event'


class Transport:
    """Duplex channel seen from the server: liveness and one-shot delivery."""

    def is_open(self, sid: str) -> bool:
        raise NotImplementedError

    def deliver(self, sid: str, event: Event) -> None:
        raise NotImplementedError


class SocketIOTransport(Transport):
    """Delivers events as ``game_event`` Socket.IO messages on one namespace.

    The Socket.IO server is looked up on every call because
    ``SocketIO.init_app`` replaces it for each application.
    """

    def __init__(self, socketio, namespace: str = '/ws'):
        self.socketio = socketio
        self.namespace = namespace

    def is_open(self, sid: str) -> bool:
        server = self.socketio.server
        if server is None:
            return False
        return bool(server.manager.is_connected(sid, self.namespace))

    def deliver(self, sid: str, event: Event) -> None:
        try:
            self.socketio.emit(EVENT_NAME, event, to=sid, namespace=self.namespace)
        except Exception as exc:
            raise TransportWriteFailure(sid, exc) from exc


class Broadcaster:
    def __init__(self, transport: Transport):
        self.transport = transport

    def send_to(self, sid: str, event: Event) -> bool:
        """Deliver to one session; stale sends to closed transports are dropped."""
        if not self.transport.is_open(sid):
            logger.debug(f"[send-drop] {event.get('type')} to closed session {sid}")
            return False
        try:
            self.transport.deliver(sid, event)
        except TransportWriteFailure as exc:
            logger.warning(f"[send-fail] {event.get('type')} to {sid}: {exc}")
            return False
        return True

    def broadcast(self, sids: Iterable[str], event: Event) -> int:
        delivered = 0
        for sid in list(sids):
            if self.send_to(sid, event):
                delivered += 1
        return delivered
