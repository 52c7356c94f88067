import pytest

from mpc_engine.state import (
    InvalidRoundError,
    Phase,
    SessionError,
    SessionNotFinalizableError,
    SessionTerminatedError,
    SessionState,
)


def test_new_state_is_initialized():
    state = SessionState()
    assert state.phase is Phase.INITIALIZED
    assert state.current_round is None


def test_initialized_accepts_round_zero_then_advances():
    state = SessionState()
    state.validate_round(0)
    state.advance_round(0)
    assert state.phase is Phase.IN_PROGRESS
    assert state.current_round == 0


def test_initialized_rejects_non_zero_round():
    state = SessionState()
    with pytest.raises(InvalidRoundError) as info:
        state.validate_round(1)
    assert info.value.expected == 0
    assert info.value.received == 1


def test_in_progress_requires_next_round():
    state = SessionState()
    state.advance_round(2)
    with pytest.raises(InvalidRoundError) as info:
        state.validate_round(4)
    assert info.value.expected == 3
    assert info.value.received == 4


def test_in_progress_rejects_replayed_round():
    state = SessionState()
    state.advance_round(5)
    with pytest.raises(InvalidRoundError) as info:
        state.validate_round(5)
    assert info.value.received == 5


def test_sequential_rounds_walk():
    state = SessionState()
    for round_number in range(6):
        state.validate_round(round_number)
        state.advance_round(round_number)
    assert state.current_round == 5
    state.finalize()
    assert state.phase is Phase.FINALIZED


def test_finalize_from_initialized():
    state = SessionState()
    state.finalize()
    assert state.phase is Phase.FINALIZED
    with pytest.raises(SessionTerminatedError):
        state.validate_round(0)


def test_double_finalize_rejected():
    state = SessionState()
    state.advance_round(0)
    state.finalize()
    with pytest.raises(SessionNotFinalizableError):
        state.finalize()


def test_abort_is_terminal():
    state = SessionState()
    state.advance_round(0)
    state.abort()
    assert state.phase is Phase.ABORTED
    with pytest.raises(SessionTerminatedError):
        state.validate_round(1)
    with pytest.raises(SessionNotFinalizableError):
        state.finalize()


def test_errors_share_base_class():
    state = SessionState()
    with pytest.raises(SessionError):
        state.validate_round(7)