"""Reading rosters from the command line and from files."""

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


import csv
from pathlib import Path
from typing import List, Optional, Sequence, Union

from doublespairing.constants import (
    DEFAULT_ROSTER,
    EXAMPLE_ROSTER,
    ROSTER_COMMENT_PREFIX,
)
from doublespairing.exceptions import RosterFileError
from doublespairing.pairing.engine import validate_roster
from doublespairing.type_hints import Player, Players
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


def parse_roster_lines(lines: Sequence[str]) -> List[Player]:
    """Parse roster text, one name per line or comma separated.

    Blank entries and lines starting with ``#`` are skipped.

    Parameters
    ----------
    lines : Sequence[str]
        raw lines of a roster file

    Returns
    -------
    List[Player]
        the player identifiers in order
    """
    players: List[Player] = []
    for row in csv.reader(lines, skipinitialspace=True):
        if not row or row[0].strip().startswith(ROSTER_COMMENT_PREFIX):
            continue
        players.extend(cell.strip() for cell in row if cell.strip())
    return players


def read_roster_file(path: Union[str, Path]) -> Players:
    """Read and validate a roster file.

    Parameters
    ----------
    path : str or Path
        a text or csv file

    Returns
    -------
    Players
        the validated roster

    Raises
    ------
    RosterFileError
        When the file can not be read
    InvalidRosterError
        When the roster in the file is not valid
    """
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.error("Could not read roster file %s: %s", path, e)
        raise RosterFileError(f"Could not read roster file {path}: {e}") from e

    logger.info("Read roster file: %s", path)
    return validate_roster(parse_roster_lines(lines))


def resolve_roster(
    players: Optional[Sequence[Player]] = None,
    roster_file: Optional[Union[str, Path]] = None,
    example: bool = False,
) -> Players:
    """Pick the roster from the command line options.

    A roster file wins over players given on the command line, which win over
    the example roster. With nothing given the players are numbered 1 to 8.

    Returns
    -------
    Players
        the validated roster
    """
    if roster_file is not None:
        return read_roster_file(roster_file)
    if players:
        return validate_roster(players)
    if example:
        return EXAMPLE_ROSTER
    return DEFAULT_ROSTER


#  LocalWords:  csv
