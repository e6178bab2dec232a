import logging
from threading import Lock

from dtree_mcp.models.session import OsState

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages the directory tree states of all client sessions."""

    def __init__(self) -> None:
        # Simple dict as an in-process session storage; nothing outlives the process.
        self._storage: dict[str, OsState] = {}
        self._lock = Lock()

    def get_fs_state(self, session_id: str = "default") -> OsState:
        """Returns or creates the state for a given session."""
        with self._lock:
            state = self._storage.get(session_id)
            if state is None:
                logger.info("Creating directory tree for session '%s'", session_id)
                state = OsState()
                self._storage[session_id] = state
            return state

    def reset_fs_state(self, session_id: str = "default") -> OsState:
        """Replaces the state of a session with an empty tree rooted at `/`."""
        with self._lock:
            logger.info("Resetting directory tree for session '%s'", session_id)
            state = OsState()
            self._storage[session_id] = state
            return state

    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._storage)
