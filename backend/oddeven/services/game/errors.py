class GameError(Exception):
    """Base class for game server errors."""


class BoardSizeError(GameError, ValueError):
    pass


class OutOfRangeError(GameError, IndexError):
    pass


class MalformedMessage(GameError):
    """Inbound payload could not be decoded into a record."""


class UnknownIntentType(GameError):
    """Inbound record carries a missing or unrecognized type tag."""


class SessionCapacityExceeded(GameError):
    reason = 'Game is full. Only 2 players allowed.'

    def __init__(self, message=None):
        super().__init__(message or self.reason)


class TransportWriteFailure(GameError):
    def __init__(self, sid, cause=None):
        super().__init__(f"delivery to {sid} failed: {cause}")
        self.sid = sid
        self.cause = cause
