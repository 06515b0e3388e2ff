"""In-memory store for chat widget sessions"""

import time
import uuid
from typing import Callable, Dict
from altscore_gateway.domain.chat import ChatSession
from altscore_gateway.domain.exceptions import ChatSessionNotFoundError, ChatSessionLimitError
from altscore_gateway.infrastructure.observability.metrics import chat_sessions_gauge


class ChatSessionStore:
    """
    Holds open chat sessions for the lifetime of the process.

    Nothing is persisted: reopening the widget fresh creates a new
    session and a restart drops them all. Sessions idle for longer than
    ttl_seconds are dropped, since a closed browser tab never says goodbye.
    """

    def __init__(
        self,
        max_sessions: int,
        ttl_seconds: float = 1800.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_sessions = max_sessions
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, ChatSession] = {}
        self._last_active: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def _discard(self, session_id: str) -> None:
        del self._sessions[session_id]
        del self._last_active[session_id]
        chat_sessions_gauge.dec()

    def expire_idle(self) -> int:
        """Drop sessions with no activity within the TTL; returns how many went"""
        cutoff = self._clock() - self.ttl_seconds
        idle = [sid for sid, seen in self._last_active.items() if seen <= cutoff]
        for session_id in idle:
            self._discard(session_id)
        return len(idle)

    def create(self) -> ChatSession:
        """Open a new session with the welcome message already posted"""
        self.expire_idle()
        if len(self._sessions) >= self.max_sessions:
            raise ChatSessionLimitError(f"Session limit of {self.max_sessions} reached")

        session = ChatSession(uuid.uuid4().hex)
        session.open()
        self._sessions[session.session_id] = session
        self._last_active[session.session_id] = self._clock()
        chat_sessions_gauge.inc()
        return session

    def get(self, session_id: str) -> ChatSession:
        """
        Look up a session and mark it active.

        Raises:
            ChatSessionNotFoundError: If the session is unknown, closed or expired
        """
        self.expire_idle()
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise ChatSessionNotFoundError(f"Chat session {session_id} not found") from None

        self._last_active[session_id] = self._clock()
        return session

    def close(self, session_id: str) -> None:
        """Discard a session and its messages"""
        if session_id not in self._sessions:
            raise ChatSessionNotFoundError(f"Chat session {session_id} not found")
        self._discard(session_id)
