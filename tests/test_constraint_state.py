# tests/test_constraint_state.py
import pytest

from doublespairing.pairing import ConstraintState


def test_new_state_is_empty():
    state = ConstraintState(8)
    assert state.used_pair_count() == 0
    assert not state.is_complete()
    assert all(state.row_count(i) == 0 for i in range(8))


def test_mark_used_is_symmetric():
    state = ConstraintState(8)
    state.mark_used(2, 5)
    assert state.is_used(2, 5)
    assert state.is_used(5, 2)
    assert not state.is_used(2, 4)
    assert state.row_count(2) == 1
    assert state.row_count(5) == 1
    assert state.used_pair_count() == 1


def test_marking_twice_counts_once():
    state = ConstraintState(8)
    state.mark_used(0, 1)
    state.mark_used(1, 0)
    assert state.used_pair_count() == 1


def test_self_pair_rejected():
    state = ConstraintState(8)
    with pytest.raises(ValueError):
        state.mark_used(3, 3)


def test_complete_when_every_pair_used():
    state = ConstraintState(8)
    for i in range(8):
        for j in range(i + 1, 8):
            assert not state.is_complete()
            state.mark_used(i, j)
    assert state.is_complete()
    assert state.used_pair_count() == 28


def test_one_full_row_is_not_complete():
    state = ConstraintState(8)
    for j in range(1, 8):
        state.mark_used(0, j)
    assert state.row_count(0) == 7
    assert not state.is_complete()
