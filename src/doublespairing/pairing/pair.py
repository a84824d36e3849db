"""A teammate pair."""

# Doubles Pairing
# Copyright (C) 2025  Doubles Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Iterator, Tuple

from doublespairing.exceptions import InvalidPairError
from doublespairing.type_hints import Player
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


class Pair:
    """Two distinct players who play on the same team for a round.

    Equality and hashing ignore member order, so ``Pair("A", "B")`` equals
    ``Pair("B", "A")``. The construction order is kept for display.

    Example:
        >>> Pair("Alice", "Bob") == Pair("Bob", "Alice")
        True
    """

    __slots__ = ("_players",)

    def __init__(self, first: Player, second: Player) -> None:
        if not first or not second or first == second:
            logger.error("Invalid pair requested: (%r, %r)", first, second)
            raise InvalidPairError(
                f"A pair must include two unique players, got {first!r} and {second!r}"
            )
        self._players: Tuple[Player, Player] = (first, second)

    @property
    def first(self) -> Player:
        return self._players[0]

    @property
    def second(self) -> Player:
        return self._players[1]

    @property
    def players(self) -> Tuple[Player, Player]:
        """Both members in construction order."""
        return self._players

    def partner_of(self, player: Player) -> Player:
        """Return the teammate of ``player``.

        Raises
        ------
        InvalidPairError
            if ``player`` is not in this pair
        """
        if player == self.first:
            return self.second
        if player == self.second:
            return self.first
        raise InvalidPairError(f"{player!r} is not part of {self}")

    def __contains__(self, player: object) -> bool:
        return player in self._players

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return frozenset(self._players) == frozenset(other._players)

    def __hash__(self) -> int:
        return hash(frozenset(self._players))

    def __str__(self) -> str:
        return f"{self.first} and {self.second}"

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"
