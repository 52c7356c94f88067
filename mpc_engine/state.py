"""Session state machine enforcing valid round ordering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionError(Exception):
    """Base class for session errors."""


class InvalidRoundError(SessionError):
    """A round arrived out of order."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"Invalid round: expected {expected}, got {received}.")
        self.expected = expected
        self.received = received


class SessionTerminatedError(SessionError):
    """The session is finalized or aborted and accepts no more rounds."""

    def __init__(self) -> None:
        super().__init__("Session is already finalized or aborted.")


class SessionNotFinalizableError(SessionError):
    """The session cannot be finalized from its current state."""

    def __init__(self) -> None:
        super().__init__("Session cannot be finalized from its current state.")


class SessionNotFoundError(SessionError):
    """No live session exists with the given identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Session not found: {identifier}")
        self.identifier = identifier


class Phase(Enum):
    """Lifecycle phase of a session."""

    INITIALIZED = "initialized"
    IN_PROGRESS = "in_progress"
    FINALIZED = "finalized"
    ABORTED = "aborted"


@dataclass
class SessionState:
    """Current phase of a session and its last processed round."""

    phase: Phase = Phase.INITIALIZED
    current_round: int | None = None

    def validate_round(self, round_number: int) -> None:
        """Raise unless ``round_number`` is the next round to process."""
        if self.phase is Phase.INITIALIZED:
            if round_number != 0:
                raise InvalidRoundError(0, round_number)
        elif self.phase is Phase.IN_PROGRESS:
            expected = self.current_round + 1
            if round_number != expected:
                raise InvalidRoundError(expected, round_number)
        else:
            raise SessionTerminatedError()

    def advance_round(self, round_number: int) -> None:
        """Record that ``round_number`` was processed."""
        self.phase = Phase.IN_PROGRESS
        self.current_round = round_number

    def finalize(self) -> None:
        """Move to the finalized phase."""
        if self.phase not in (Phase.INITIALIZED, Phase.IN_PROGRESS):
            raise SessionNotFinalizableError()
        self.phase = Phase.FINALIZED
        self.current_round = None

    def abort(self) -> None:
        """Move to the aborted phase."""
        self.phase = Phase.ABORTED
        self.current_round = None