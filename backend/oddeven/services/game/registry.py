import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .errors import SessionCapacityExceeded
from .roles import ROLE_PRIORITY, Role

logger = logging.getLogger(__name__)


@dataclass
class Session:
    sid: str
    role: Role


class SessionRegistry:
    """Tracks admitted sessions and which of them holds each role.

    ``is_live`` reports whether a session's transport is still open. Sessions
    whose transport has closed are purged before every admission so a dead
    occupant never blocks its role.
    """

    def __init__(self, is_live: Callable[[str], bool]):
        self._is_live = is_live
        self._sessions: Dict[str, Session] = {}
        self._roles: Dict[Role, Optional[str]] = {role: None for role in ROLE_PRIORITY}
        self._lock = threading.Lock()

    def admit(self, sid: str) -> Role:
        with self._lock:
            existing = self._sessions.get(sid)
            if existing:
                return existing.role
            self._purge_dead()
            for role in ROLE_PRIORITY:
                if self._roles[role] is None:
                    self._roles[role] = sid
                    self._sessions[sid] = Session(sid=sid, role=role)
                    return role
            raise SessionCapacityExceeded()

    def release(self, sid: str) -> Optional[Role]:
        with self._lock:
            return self._drop(sid)

    def both_roles_filled(self) -> bool:
        with self._lock:
            return all(self._occupant_live(role) for role in ROLE_PRIORITY)

    def occupancy(self) -> Dict[Role, bool]:
        with self._lock:
            return {role: self._occupant_live(role) for role in ROLE_PRIORITY}

    def role_of(self, sid: str) -> Optional[Role]:
        with self._lock:
            session = self._sessions.get(sid)
            return session.role if session else None

    def live_sids(self) -> List[str]:
        with self._lock:
            return [sid for sid in self._sessions if self._is_live(sid)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _occupant_live(self, role: Role) -> bool:
        sid = self._roles[role]
        return sid is not None and self._is_live(sid)

    def _purge_dead(self) -> None:
        for sid in [s for s in self._sessions if not self._is_live(s)]:
            role = self._drop(sid)
            logger.info(f"[purge] dead session {sid} released role={role.value if role else None}")

    def _drop(self, sid: str) -> Optional[Role]:
        session = self._sessions.pop(sid, None)
        if not session:
            return None
        if self._roles.get(session.role) == sid:
            self._roles[session.role] = None
        return session.role
