import pytest

from mpc_engine.identifier import SessionIdentifier
from mpc_engine.state import InvalidRoundError, Phase, SessionNotFoundError
from mpc_engine.store import SessionStore


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(ttl=10.0, clock=clock)


def test_create_starts_initialized(store):
    identifier = store.create()
    assert store.with_session(identifier, lambda state: state.phase) is Phase.INITIALIZED


def test_created_identifiers_are_unique(store):
    identifiers = {store.create() for _ in range(20)}
    assert len(identifiers) == 20
    assert len(store.sessions) == 20


def test_mutations_persist(store):
    identifier = store.create()
    store.with_session(identifier, lambda state: state.advance_round(0))
    assert store.with_session(identifier, lambda state: state.current_round) == 0


def test_unknown_identifier_raises(store):
    identifier = SessionIdentifier.new()
    with pytest.raises(SessionNotFoundError) as info:
        store.with_session(identifier, lambda state: state.phase)
    assert info.value.identifier == str(identifier)


def test_expired_session_is_removed(store, clock):
    identifier = store.create()
    clock.now = 10.5
    with pytest.raises(SessionNotFoundError):
        store.with_session(identifier, lambda state: state.phase)
    assert identifier not in store.sessions


def test_session_at_exact_ttl_is_alive(store, clock):
    identifier = store.create()
    clock.now = 10.0
    assert store.with_session(identifier, lambda state: state.phase) is Phase.INITIALIZED


def test_success_refreshes_timestamp(store, clock):
    identifier = store.create()
    clock.now = 5.0
    store.with_session(identifier, lambda state: state.validate_round(0))
    clock.now = 12.0
    assert store.with_session(identifier, lambda state: state.phase) is Phase.INITIALIZED


def test_failure_does_not_refresh_timestamp(store, clock):
    identifier = store.create()
    clock.now = 5.0
    with pytest.raises(InvalidRoundError):
        store.with_session(identifier, lambda state: state.validate_round(3))
    clock.now = 12.0
    with pytest.raises(SessionNotFoundError):
        store.with_session(identifier, lambda state: state.phase)


def test_remove(store):
    identifier = store.create()
    store.remove(identifier)
    with pytest.raises(SessionNotFoundError):
        store.with_session(identifier, lambda state: state.phase)


def test_remove_unknown_leaves_others(store):
    kept = store.create()
    store.remove(SessionIdentifier.new())
    assert list(store.sessions) == [kept]