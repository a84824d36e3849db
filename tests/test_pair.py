# tests/test_pair.py
import pytest

from doublespairing.exceptions import InvalidPairError, PairingException
from doublespairing.pairing import Pair


def test_pair_equality_ignores_order():
    assert Pair("A", "B") == Pair("B", "A")
    assert hash(Pair("A", "B")) == hash(Pair("B", "A"))
    assert Pair("A", "B") != Pair("A", "C")
    assert len({Pair("A", "B"), Pair("B", "A"), Pair("A", "C")}) == 2


def test_pair_keeps_construction_order_for_display():
    pair = Pair("Bob", "Alice")
    assert pair.players == ("Bob", "Alice")
    assert list(pair) == ["Bob", "Alice"]
    assert str(pair) == "Bob and Alice"
    assert repr(pair) == "Pair('Bob', 'Alice')"


@pytest.mark.parametrize(
    "first, second", [("A", "A"), ("A", None), (None, "B"), ("", "B"), (None, None)]
)
def test_pair_rejects_equal_or_missing_players(first, second):
    with pytest.raises(InvalidPairError):
        Pair(first, second)


def test_invalid_pair_is_a_pairing_exception():
    with pytest.raises(PairingException):
        Pair("A", "A")


def test_membership_and_partner():
    pair = Pair("A", "B")
    assert "A" in pair and "B" in pair
    assert "C" not in pair
    assert pair.partner_of("A") == "B"
    assert pair.partner_of("B") == "A"
    with pytest.raises(InvalidPairError):
        pair.partner_of("C")


def test_pair_not_equal_to_other_types():
    assert Pair("A", "B") != ("A", "B")
