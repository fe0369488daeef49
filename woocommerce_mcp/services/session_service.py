"""Session registry mapping MCP session ids to live connection contexts"""

import uuid
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from ..utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def generate_session_id() -> str:
    """Generate an opaque session id"""
    return str(uuid.uuid4())


class SessionRegistry(Generic[T]):
    """In-memory owner of active sessions

    A session id is either absent or active. It becomes active when
    registered after a successful initialize handshake and absent again
    when its connection closes.
    """

    def __init__(self, id_generator: Callable[[], str] = generate_session_id):
        self._sessions: Dict[str, T] = {}
        self._id_generator = id_generator

    def new_session_id(self) -> str:
        """Return an id not used by any active session"""
        session_id = self._id_generator()
        while session_id in self._sessions:
            session_id = self._id_generator()
        return session_id

    def register(self, session_id: str, context: T) -> None:
        """Activate ``session_id``"""
        if session_id in self._sessions:
            raise KeyError(f"Session already active: {session_id}")
        self._sessions[session_id] = context
        logger.info(f"MCP Session created: {session_id}")

    def create(self, context: T) -> str:
        """Activate a new session for ``context`` and return its id"""
        session_id = self.new_session_id()
        self.register(session_id, context)
        return session_id

    def get(self, session_id: Optional[str]) -> Optional[T]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> Optional[T]:
        """Deactivate ``session_id``; unknown ids are ignored"""
        context = self._sessions.pop(session_id, None)
        if context is not None:
            logger.info(f"MCP Session closed: {session_id}")
        return context

    def session_ids(self) -> List[str]:
        return list(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
