from flask import current_app, request
from flask_socketio import ConnectionRefusedError, emit

from oddeven import socketio
from oddeven.services.game import events
from oddeven.services.game.errors import SessionCapacityExceeded


def _authority():
    return current_app.extensions['game_authority']


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    role = _authority().connect(_get_sid())
    if role is None:
        # The ERROR record rides on the connect_error packet; events emitted
        # before the connection is acknowledged never reach the client
        reason = SessionCapacityExceeded.reason
        raise ConnectionRefusedError(reason, events.error(reason))


def handle_disconnect(reason=None):
    _authority().disconnect(_get_sid())


def handle_intent(data=None):
    _authority().handle_message(_get_sid(), data)


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on the game namespace.

    Inbound intents arrive as ``intent`` events carrying a tagged record;
    outbound events are sent by the game authority as ``game_event``.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('intent', handle_intent, namespace=namespace)
    socketio.on_event('ping', handle_ping, namespace=namespace)
