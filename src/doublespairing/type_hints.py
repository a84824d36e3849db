"""Type hints used in Doubles Pairing."""

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

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from doublespairing.pairing.pair import Pair

# players are opaque identifiers, names or numbers as text
Player = str
Players = Tuple[Player, ...]

# four disjoint pairs covering the roster
Round = Tuple["Pair", ...]
Schedule = Tuple[Round, ...]

# (round number, teammate) for one player
PlayerSchedule = List[Tuple[int, Player]]

#  LocalWords:  PlayerSchedule
