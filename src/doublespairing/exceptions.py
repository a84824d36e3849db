"""Exceptions raised by Doubles Pairing."""

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

from typing import Optional


class PairingException(Exception):
    """Base exception for everything that goes wrong while pairing."""


class InvalidRosterError(PairingException):
    """The roster has the wrong number of players or repeats a player."""


class RosterFileError(InvalidRosterError):
    """A roster file could not be read."""


class InvalidPairError(PairingException):
    """A pair was built from a missing player or from one player twice."""


class SchedulingExhaustedError(PairingException):
    """No valid next round exists although some pairs are still unused.

    Parameters
    ----------
    message : str
        Description of the failure
    rounds_generated : int, optional
        How many rounds had been committed when the search gave up
    """

    def __init__(self, message: str, rounds_generated: Optional[int] = None) -> None:
        super().__init__(message)
        self.rounds_generated = rounds_generated


class ScheduleCompleteError(PairingException):
    """Another round was requested after every pair has been used."""


#  LocalWords:  PairingException InvalidRosterError
