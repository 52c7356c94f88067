"""Typed identifiers for authentication sessions."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field

_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
_UUID_FORMS = re.compile(
    rf"(?:{_HYPHENATED}|[0-9a-fA-F]{{32}}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED})"
)


@dataclass(frozen=True, slots=True)
class SessionIdentifier:
    """Unique identifier for a signing session."""

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def new(cls) -> SessionIdentifier:
        """Generate a new random session identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, text: str) -> SessionIdentifier | None:
        """Parse an identifier from text; return None if it is not a valid UUID."""
        if not isinstance(text, str) or _UUID_FORMS.fullmatch(text) is None:
            return None
        return cls(uuid.UUID(text))

    def as_bytes(self) -> bytes:
        """Return the 16 raw bytes of the identifier."""
        return self.value.bytes

    def __str__(self) -> str:
        return str(self.value)