# mpc_engine

Building blocks for a multi-party computation signing engine:

- `mpc_engine.identifier`: random session identifiers.
- `mpc_engine.state`: a session state machine that enforces round order.
- `mpc_engine.store`: a thread-safe, in-memory session store whose sessions
  expire when idle.
- `mpc_engine.config`: controller runtime configuration read from TOML.
- `mpc_engine.bearer`: adds a bearer token to outgoing request metadata.
- `mpc_engine.log_setup`: console and JSON file logging setup.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Session identifiers

```python
from mpc_engine.identifier import SessionIdentifier

session_id = SessionIdentifier.new()
text = str(session_id)
assert SessionIdentifier.parse(text) == session_id
assert len(session_id.as_bytes()) == 16
```

`SessionIdentifier` is a frozen, hashable dataclass that wraps a
`uuid.UUID` in its `value` field. `new()` makes a random (version 4)
identifier. `parse(text)` reads the hyphenated form, 32 bare hex digits,
the braced form or the `urn:uuid:` form. It returns `None` for anything
else, and for input that is not a string.

## Session state

`SessionState` holds a `phase` (a `Phase`: `INITIALIZED`, `IN_PROGRESS`,
`FINALIZED` or `ABORTED`) and, while in progress, the `current_round`
last processed.

- `validate_round(n)`: in `INITIALIZED` only round 0 is accepted. In
  `IN_PROGRESS` only `current_round + 1` is accepted. Either way a wrong
  round raises `InvalidRoundError`, which carries `expected` and
  `received`. A finalized or aborted session raises
  `SessionTerminatedError`.
- `advance_round(n)`: moves to `IN_PROGRESS` with `current_round = n`.
- `finalize()`: allowed from `INITIALIZED` or `IN_PROGRESS`. From any
  other phase it raises `SessionNotFinalizableError`.
- `abort()`: always moves to `ABORTED`.

All of these errors, and `SessionNotFoundError`, derive from
`SessionError`.

## Session store

```python
from mpc_engine.state import InvalidRoundError
from mpc_engine.store import SessionStore

store = SessionStore(ttl=600)  # seconds
session_id = store.create()

def run_round(state):
    state.validate_round(0)
    state.advance_round(0)

store.with_session(session_id, run_round)

try:
    store.with_session(session_id, lambda state: state.validate_round(5))
except InvalidRoundError as error:
    print(error)  # Invalid round: expected 1, got 5.

store.with_session(session_id, lambda state: state.finalize())
store.remove(session_id)
```

`with_session(identifier, func)` runs `func` on the session's state while
it holds the store's lock, and returns what `func` returns. It raises
`SessionNotFoundError` in two cases: the identifier is unknown, or the
session has gone unused for longer than `ttl` seconds. An expired session
is removed at that point. The session's timestamp is refreshed only when
`func` returns without raising. Any exception from `func` is passed on
unchanged.

`remove(identifier)` drops a session, and does nothing if the session is
absent. `SessionStore` also accepts a `clock` callable that returns
seconds; the default is `time.monotonic`. Each entry is a `SessionEntry`
with `state` and `last_updated`, and all entries are kept in the
`sessions` dictionary.

## Configuration

A controller configuration file:

```toml
[ipc]
address = "[::1]:50050"

[ipc.auth]
token = "token"

[[nodes]]
endpoint = "http://[::1]:50051"
participant_identifier = 1

[nodes.auth]
token = "token"
```

```python
from mpc_engine.config import ControllerRuntimeConfig

config = ControllerRuntimeConfig.load_from_file("controller.toml")
print(config.ipc.address, [node.endpoint for node in config.nodes])
```

`load_from_file(path)` raises `ConfigError` in these cases:

- the file cannot be read;
- the file is not valid TOML;
- a required field is missing;
- a field has the wrong type;
- a participant identifier is outside the unsigned 32-bit range.

`from_dict(data)` builds the configuration from data that has already
been parsed.

The module also defines these dataclasses:

- `AuthConfig` (`token`)
- `ControllerIpcConfig` (`address`, `auth`)
- `NodeConfig` (`endpoint`, `participant_identifier`, `auth`)
- `NodeIpcConfig` (`node_identifier`, `participant_identifier`, `auth`,
  `address`, `ttl_seconds`)

## Bearer authentication

```python
from mpc_engine.bearer import ClientAuthInterceptor
from mpc_engine.config import AuthConfig

interceptor = ClientAuthInterceptor(AuthConfig(token="token"))
metadata = interceptor.call({"x-request-id": "1"})
# {"x-request-id": "1", "authorization": "Bearer token"}
```

`call(metadata)` takes a mapping or an iterable of key/value pairs and
returns a new dictionary with `authorization` set. If the resulting value
holds characters other than tab and printable ASCII, it raises
`InvalidTokenError`, a subclass of `ValueError`.

## Logging

```python
from mpc_engine.log_setup import init_logging

init_logging("controller", "logs")
```

This adds two handlers to the root logger:

- a console handler;
- a JSON handler that writes `history.log` in the given directory and
  rotates it at midnight. The directory is created if needed and defaults
  to `logs`.

The level comes from the `LOG_LEVEL` environment variable, which accepts
`trace`, `debug`, `info`, `warn`, `warning`, `error` and `off`. When the
variable is unset or invalid the level is `INFO`, and a warning is
logged. `init_logging` returns `False` and changes nothing if it has
already been installed.

## What this package does not do

This package covers only the pieces listed above. It does not include:

- a gRPC server or client;
- a controller or node runtime;
- key generation or signing protocols;
- secret or key-share storage;
- a loader for node configuration files;
- a command-line program.

It also does not generate the authorization credentials that these
pieces use or check.