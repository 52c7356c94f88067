"""Attaching bearer tokens to outgoing gRPC request metadata."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .config import AuthConfig

AUTHORIZATION = "authorization"
_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*")


class InvalidTokenError(ValueError):
    """The configured token cannot be sent as a bearer authorization value."""


@dataclass
class ClientAuthInterceptor:
    """Adds ``authorization: Bearer <token>`` to outgoing request metadata."""

    config: AuthConfig

    def call(
        self, metadata: Mapping[str, str] | Iterable[tuple[str, str]]
    ) -> dict[str, str]:
        """Return a copy of ``metadata`` with the authorization entry set."""
        value = f"Bearer {self.config.token}"
        if _HEADER_VALUE.fullmatch(value) is None:
            raise InvalidTokenError(
                "Failed to create Bearer authorization: invalid bearer token"
            )
        result = dict(metadata)
        result[AUTHORIZATION] = value
        return result