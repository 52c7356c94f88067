"""In-memory, process-local session store with expiry."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from .identifier import SessionIdentifier
from .state import SessionNotFoundError, SessionState

R = TypeVar("R")


@dataclass
class SessionEntry:
    """A session held in the store."""

    state: SessionState
    last_updated: float


class SessionStore:
    """Sessions keyed by identifier, dropped once idle longer than ``ttl`` seconds."""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self.sessions: dict[SessionIdentifier, SessionEntry] = {}
        self._clock = clock
        self._lock = threading.Lock()

    def create(self) -> SessionIdentifier:
        """Create a new session and return its identifier."""
        identifier = SessionIdentifier.new()
        with self._lock:
            self.sessions[identifier] = SessionEntry(SessionState(), self._clock())
        return identifier

    def with_session(
        self, identifier: SessionIdentifier, func: Callable[[SessionState], R]
    ) -> R:
        """Run ``func`` on the session's state under the store lock.

        Raises SessionNotFoundError if the session is unknown or expired.
        The session's timestamp is refreshed only when ``func`` succeeds.
        """
        with self._lock:
            entry = self.sessions.get(identifier)
            if entry is None:
                raise SessionNotFoundError(str(identifier))
            if self._clock() - entry.last_updated > self.ttl:
                del self.sessions[identifier]
                raise SessionNotFoundError(str(identifier))
            result = func(entry.state)
            entry.last_updated = self._clock()
            return result

    def remove(self, identifier: SessionIdentifier) -> None:
        """Remove a session if present."""
        with self._lock:
            self.sessions.pop(identifier, None)