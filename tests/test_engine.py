# tests/test_engine.py
from collections import Counter
from itertools import combinations

import pytest

from doublespairing.constants import (
    DEFAULT_ROSTER,
    EXAMPLE_ROSTER,
    NUMBER_OF_ROUNDS,
    PAIRS_PER_ROUND,
    TOTAL_PAIRS,
)
from doublespairing.exceptions import (
    InvalidRosterError,
    PairingException,
    ScheduleCompleteError,
    SchedulingExhaustedError,
)
from doublespairing.pairing import Pair, PairingEngine, PossibleRound, create_schedule

EXPECTED_NUMBERED = [
    [("1", "2"), ("3", "4"), ("5", "6"), ("7", "8")],
    [("1", "3"), ("2", "4"), ("5", "7"), ("6", "8")],
    [("1", "4"), ("2", "3"), ("5", "8"), ("6", "7")],
    [("1", "5"), ("2", "6"), ("3", "7"), ("4", "8")],
    [("1", "6"), ("2", "5"), ("3", "8"), ("4", "7")],
    [("1", "7"), ("2", "8"), ("3", "5"), ("4", "6")],
    [("1", "8"), ("2", "7"), ("3", "6"), ("4", "5")],
]


def as_tuples(schedule):
    return [[pair.players for pair in configuration] for configuration in schedule]


def test_numbered_roster_schedule(numbered_engine):
    schedule = numbered_engine.generate_schedule()
    assert as_tuples(schedule) == EXPECTED_NUMBERED


def test_first_round_is_first_found():
    engine = PairingEngine(DEFAULT_ROSTER)
    first = engine.next_round()
    assert first == (Pair("1", "2"), Pair("3", "4"), Pair("5", "6"), Pair("7", "8"))


@pytest.mark.parametrize("roster", [DEFAULT_ROSTER, EXAMPLE_ROSTER, tuple("hgfedcba")])
def test_every_pair_exactly_once(roster):
    schedule = PairingEngine(roster).generate_schedule()
    counts = Counter(pair for configuration in schedule for pair in configuration)
    expected = {Pair(a, b) for a, b in combinations(roster, 2)}
    assert set(counts) == expected
    assert all(n == 1 for n in counts.values())
    assert sum(counts.values()) == TOTAL_PAIRS


def test_rounds_partition_the_roster(named_schedule):
    for configuration in named_schedule:
        assert len(configuration) == PAIRS_PER_ROUND
        members = [p for pair in configuration for p in pair]
        assert len(members) == 8
        assert set(members) == set(EXAMPLE_ROSTER)


def test_seven_rounds(named_schedule):
    assert len(named_schedule) == NUMBER_OF_ROUNDS


def test_schedule_is_deterministic():
    first = PairingEngine(EXAMPLE_ROSTER).generate_schedule()
    second = PairingEngine(list(EXAMPLE_ROSTER)).generate_schedule()
    assert as_tuples(first) == as_tuples(second)


@pytest.mark.parametrize(
    "roster",
    [
        DEFAULT_ROSTER[:7],
        DEFAULT_ROSTER + ("9",),
        (),
        ("1", "2", "3", "4", "5", "6", "7", "1"),
        EXAMPLE_ROSTER[:7] + ("Alice", "Alice"),
        ("", "2", "3", "4", "5", "6", "7", "8"),
        ("1", "2", "3", "4", None, "6", "7", "8"),
    ],
)
def test_invalid_roster_rejected(roster):
    with pytest.raises(InvalidRosterError):
        PairingEngine(roster)


def test_duplicates_reported_before_size():
    with pytest.raises(InvalidRosterError, match="unique"):
        PairingEngine(["A", "A", "B"])


def test_roster_is_immutable_copy():
    players = list(DEFAULT_ROSTER)
    engine = PairingEngine(players)
    players[0] = "changed"
    assert engine.players == DEFAULT_ROSTER
    assert isinstance(engine.players, tuple)


def test_generate_schedule_twice_returns_same(numbered_engine):
    first = numbered_engine.generate_schedule()
    assert numbered_engine.generate_schedule() == first
    assert numbered_engine.is_complete()


def test_next_round_after_complete_raises(numbered_engine):
    numbered_engine.generate_schedule()
    with pytest.raises(ScheduleCompleteError):
        numbered_engine.next_round()


def test_generate_continues_from_partial(numbered_engine):
    numbered_engine.next_round()
    numbered_engine.next_round()
    schedule = numbered_engine.generate_schedule()
    assert as_tuples(schedule) == EXPECTED_NUMBERED


def test_stuck_state_raises_instead_of_looping(numbered_engine):
    # player "1" has partnered everyone but the schedule is not complete
    for j in range(1, 8):
        numbered_engine.constraints.mark_used(0, j)
    with pytest.raises(SchedulingExhaustedError) as excinfo:
        numbered_engine.generate_schedule()
    assert excinfo.value.rounds_generated == 0
    assert numbered_engine.schedule == ()


def test_search_reports_impossible_for_used_last_pair(numbered_engine):
    numbered_engine.constraints.mark_used(0, 1)
    result = numbered_engine.search_round((Pair("1", "2"),), DEFAULT_ROSTER[2:])
    assert result == PossibleRound(False)
    assert result.configuration == ()


def test_search_with_no_choices_left_is_complete(numbered_engine):
    team = (Pair("1", "2"), Pair("3", "4"), Pair("5", "6"), Pair("7", "8"))
    result = numbered_engine.search_round(team, ())
    assert result.possible
    assert result.configuration == team


def test_every_pair_is_checked_before_it_is_extended():
    checked = []

    class RecordingEngine(PairingEngine):
        def _already_used(self, pair):
            checked.append(pair)
            return super()._already_used(pair)

    engine = RecordingEngine(DEFAULT_ROSTER)
    for _ in range(engine.number_of_rounds):
        checked.clear()
        configuration = engine.next_round()
        for pair in configuration:
            assert pair in checked


def test_search_does_not_touch_constraints(numbered_engine):
    result = numbered_engine.search_round((), numbered_engine.players)
    assert result.possible
    assert numbered_engine.constraints.used_pair_count() == 0
    assert numbered_engine.schedule == ()


def test_get_round(numbered_engine):
    numbered_engine.generate_schedule()
    assert numbered_engine.get_round(7)[0] == Pair("1", "8")
    with pytest.raises(PairingException):
        numbered_engine.get_round(0)
    with pytest.raises(PairingException):
        numbered_engine.get_round(8)


def test_player_schedule_lists_each_teammate_once(numbered_engine):
    numbered_engine.generate_schedule()
    schedule = numbered_engine.get_player_schedule("1")
    assert schedule == [(i, str(i + 1)) for i in range(1, 8)]
    teammates = [mate for _, mate in numbered_engine.get_player_schedule("5")]
    assert sorted(teammates) == ["1", "2", "3", "4", "6", "7", "8"]
    with pytest.raises(PairingException):
        numbered_engine.get_player_schedule("9")


def test_create_schedule():
    engine = create_schedule(EXAMPLE_ROSTER)
    assert engine.is_complete()
    assert engine.schedule[0][0] == Pair("Alice", "Bob")
    assert engine.schedule[-1][-1] == Pair("Daniel", "Ellie")
    assert "7/7 rounds" in str(engine)
    assert repr(engine) == "PairingEngine(players=8, rounds=7/7)"


def test_missing_player_rejected_at_construction():
    with pytest.raises(InvalidRosterError, match="empty"):
        PairingEngine(["1", "2", "3", "", "5", "6", "7", "8"])


def test_number_of_rounds(numbered_engine):
    assert numbered_engine.number_of_rounds == NUMBER_OF_ROUNDS
    assert len(numbered_engine.generate_schedule()) == NUMBER_OF_ROUNDS
