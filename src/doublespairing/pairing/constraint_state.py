"""Record of which players have already been teammates."""

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

from typing import List


class ConstraintState:
    """Symmetric matrix of pairs used in committed rounds.

    Indexed by roster position. ``used[i][j]`` is true once players ``i`` and
    ``j`` have been teammates in a completed round. The diagonal is never set.

    Parameters
    ----------
    size : int
        number of players on the roster
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self._used: List[List[bool]] = [[False] * size for _ in range(size)]

    def is_used(self, i: int, j: int) -> bool:
        """Check if players ``i`` and ``j`` have already been teammates."""
        return self._used[i][j]

    def mark_used(self, i: int, j: int) -> None:
        """Record that players ``i`` and ``j`` have been teammates."""
        if i == j:
            raise ValueError(f"A player cannot be paired with themselves: {i}")
        self._used[i][j] = True
        self._used[j][i] = True

    def row_count(self, i: int) -> int:
        """Number of distinct teammates player ``i`` has had."""
        return sum(self._used[i])

    def is_complete(self) -> bool:
        """Check if every player has partnered all of the others."""
        return all(self.row_count(i) == self.size - 1 for i in range(self.size))

    def used_pair_count(self) -> int:
        """Number of distinct pairs used so far."""
        return sum(self.row_count(i) for i in range(self.size)) // 2

    def __repr__(self) -> str:
        return (
            f"ConstraintState(size={self.size}, "
            f"used_pairs={self.used_pair_count()})"
        )
