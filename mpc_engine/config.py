"""Runtime configuration for the controller and nodes."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from typing import Any

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class ConfigError(Exception):
    """Configuration could not be read or is invalid."""


@dataclass
class AuthConfig:
    """Shared token for IPC authentication."""

    token: str


@dataclass
class NodeIpcConfig:
    """IPC settings of a node."""

    node_identifier: str
    participant_identifier: int
    auth: AuthConfig
    address: str
    ttl_seconds: int


@dataclass
class ControllerIpcConfig:
    """IPC settings of the controller."""

    address: str
    auth: AuthConfig


@dataclass
class NodeConfig:
    """A node the controller connects to."""

    endpoint: str
    participant_identifier: int
    auth: AuthConfig


def _field(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigError(f"missing field `{key}`")
    return data[key]


def _table(value: Any, key: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"invalid type for `{key}`: expected a table")
    return value


def _string(data: dict[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ConfigError(f"invalid type for `{key}`: expected a string")
    return value


def _unsigned(data: dict[str, Any], key: str, maximum: int) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"invalid type for `{key}`: expected an integer")
    if not 0 <= value <= maximum:
        raise ConfigError(f"invalid value for `{key}`: {value} is out of range")
    return value


def _auth(data: dict[str, Any]) -> AuthConfig:
    return AuthConfig(token=_string(_table(_field(data, "auth"), "auth"), "token"))


def _node(data: dict[str, Any]) -> NodeConfig:
    return NodeConfig(
        endpoint=_string(data, "endpoint"),
        participant_identifier=_unsigned(data, "participant_identifier", _U32_MAX),
        auth=_auth(data),
    )


def _node_ipc(data: dict[str, Any]) -> NodeIpcConfig:
    return NodeIpcConfig(
        node_identifier=_string(data, "node_identifier"),
        participant_identifier=_unsigned(data, "participant_identifier", _U32_MAX),
        auth=_auth(data),
        address=_string(data, "address"),
        ttl_seconds=_unsigned(data, "ttl_seconds", _U64_MAX),
    )


@dataclass
class ControllerRuntimeConfig:
    """Controller configuration: its own IPC settings and the nodes it drives."""

    ipc: ControllerIpcConfig
    nodes: list[NodeConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ControllerRuntimeConfig:
        """Build the configuration from parsed TOML data."""
        data = _table(data, "configuration")
        ipc = _table(_field(data, "ipc"), "ipc")
        nodes = _field(data, "nodes")
        if not isinstance(nodes, list):
            raise ConfigError("invalid type for `nodes`: expected an array")
        return cls(
            ipc=ControllerIpcConfig(address=_string(ipc, "address"), auth=_auth(ipc)),
            nodes=[_node(_table(node, "nodes")) for node in nodes],
        )

    @classmethod
    def load_from_file(cls, path: str) -> ControllerRuntimeConfig:
        """Read and parse a TOML configuration file."""
        try:
            with open(path, encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as error:
            raise ConfigError(str(error)) from error
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as error:
            raise ConfigError(str(error)) from error
        return cls.from_dict(data)