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

"""
Doubles Pairing Engine

This module builds teammate schedules for a game played on two tables of
2 vs 2. With eight players there are 28 possible teammate pairs and each
round uses four of them, so seven rounds cover every pair exactly once.

Rounds are found one at a time by a depth-first backtracking search:

- pairs are chosen from the players still unassigned in the round, in roster
  order, first index before second
- a branch is abandoned as soon as its newest pair was already used in an
  earlier round
- the first complete round found is committed and its pairs are marked used

Example:
    >>> engine = PairingEngine(["1", "2", "3", "4", "5", "6", "7", "8"])
    >>> schedule = engine.generate_schedule()
    >>> len(schedule)
    7
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterable, List, Tuple

from doublespairing.constants import NUMBER_OF_ROUNDS, ROSTER_SIZE
from doublespairing.exceptions import (
    InvalidRosterError,
    PairingException,
    ScheduleCompleteError,
    SchedulingExhaustedError,
)
from doublespairing.pairing.constraint_state import ConstraintState
from doublespairing.pairing.pair import Pair
from doublespairing.type_hints import (
    Player,
    Players,
    PlayerSchedule,
    Round,
    Schedule,
)
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PossibleRound:
    """Result of a round search.

    ``configuration`` holds the round when ``possible`` is true and is empty
    otherwise, so check the flag first.
    """

    possible: bool
    configuration: Round = ()


IMPOSSIBLE = PossibleRound(False)


def validate_roster(players: Iterable[Player]) -> Players:
    """Check a roster can be scheduled.

    Args:
        players: player identifiers in roster order

    Returns:
        The roster as a tuple

    Raises:
        InvalidRosterError: If a player is repeated or there are not exactly
            eight players, or a player is missing
    """
    roster = tuple(players)
    if len(set(roster)) != len(roster):
        duplicates = sorted({p for p in roster if roster.count(p) > 1})
        logger.error("Duplicate players in roster: %s", duplicates)
        raise InvalidRosterError(f"Player identifiers must be unique: {duplicates}")

    missing = [i + 1 for i, p in enumerate(roster) if not p]
    if missing:
        logger.error("Missing player identifiers at positions: %s", missing)
        raise InvalidRosterError(f"Player identifiers must not be empty: {missing}")

    if len(roster) != ROSTER_SIZE:
        logger.error("Invalid player count for doubles pairing: %d", len(roster))
        raise InvalidRosterError(
            f"{ROSTER_SIZE} players needed. You provided {len(roster)}."
        )
    return roster


class PairingEngine:
    """
    Teammate schedule for eight players on two tables of 2 vs 2.

    Attributes:
        players: Immutable tuple of players in roster order
        constraints: Teammate pairs used by committed rounds
        number_of_rounds: Rounds in a complete schedule

    Example:
        >>> engine = PairingEngine("ABCDEFGH")
        >>> engine.next_round()
        (Pair('A', 'B'), Pair('C', 'D'), Pair('E', 'F'), Pair('G', 'H'))
    """

    def __init__(self, players: Iterable[Player]) -> None:
        """
        Initialize an engine for a roster.

        Args:
            players: Iterable of eight unique player identifiers

        Raises:
            InvalidRosterError: If the roster has duplicates or is not eight long
        """
        self.players: Players = validate_roster(players)
        self._index: Dict[Player, int] = {p: i for i, p in enumerate(self.players)}
        self.constraints = ConstraintState(len(self.players))
        self.number_of_rounds = NUMBER_OF_ROUNDS
        self._rounds: List[Round] = []
        logger.debug("PairingEngine created for roster %s", self.players)

    @property
    def schedule(self) -> Schedule:
        """Rounds committed so far, in order."""
        return tuple(self._rounds)

    def is_complete(self) -> bool:
        """Check if every player has partnered every other player."""
        return self.constraints.is_complete()

    def generate_schedule(self) -> Schedule:
        """
        Generate rounds until every pair has been used.

        Returns:
            The complete schedule

        Raises:
            SchedulingExhaustedError: If no valid next round exists before
                the schedule is complete
        """
        while not self.is_complete():
            self.next_round()

        logger.info(
            "Generated %d rounds for %d players", len(self._rounds), len(self.players)
        )
        return self.schedule

    def next_round(self) -> Round:
        """
        Search for one more round and commit it.

        Returns:
            The committed round

        Raises:
            ScheduleCompleteError: If every pair has already been used
            SchedulingExhaustedError: If no valid round exists
        """
        if self.is_complete():
            raise ScheduleCompleteError(
                f"All {self.constraints.used_pair_count()} pairs have been used"
            )

        result = self.search_round((), self.players)
        if not result.possible:
            logger.error(
                "No valid round %d, %d pairs used: %s",
                len(self._rounds) + 1,
                self.constraints.used_pair_count(),
                self.constraints,
            )
            raise SchedulingExhaustedError(
                f"No valid round can follow round {len(self._rounds)}",
                rounds_generated=len(self._rounds),
            )

        self._commit(result.configuration)
        logger.info(
            "Round %d: %s",
            len(self._rounds),
            ", ".join(str(pair) for pair in result.configuration),
        )
        return result.configuration

    def search_round(self, team: Round, choices: Players) -> PossibleRound:
        """
        Extend a partial round until it covers every player.

        Only the newest pair of ``team`` is checked against earlier rounds.
        Every pair is the newest one in exactly one call, which checks it
        before anything else is added.

        Args:
            team: pairs chosen so far for this round
            choices: players not yet in ``team``, in roster order

        Returns:
            PossibleRound with the completed round, or IMPOSSIBLE
        """
        if team and self._already_used(team[-1]):
            return IMPOSSIBLE

        if not choices:
            return PossibleRound(True, team)

        for first, second in combinations(choices, 2):
            remaining = tuple(p for p in choices if p != first and p != second)
            result = self.search_round(team + (Pair(first, second),), remaining)
            if result.possible:
                return result
        return IMPOSSIBLE

    def _already_used(self, pair: Pair) -> bool:
        return self.constraints.is_used(
            self._index[pair.first], self._index[pair.second]
        )

    def _commit(self, configuration: Round) -> None:
        """Append a round and mark its pairs used."""
        self._rounds.append(configuration)
        for pair in configuration:
            self.constraints.mark_used(
                self._index[pair.first], self._index[pair.second]
            )

    def get_round(self, round_number: int) -> Round:
        """
        Get a committed round.

        Args:
            round_number: 1-indexed round number

        Raises:
            PairingException: If the round has not been generated
        """
        if not (1 <= round_number <= len(self._rounds)):
            raise PairingException(
                f"Round {round_number} is not valid. {len(self._rounds)} rounds "
                "have been generated"
            )
        return self._rounds[round_number - 1]

    def get_player_schedule(self, player: Player) -> PlayerSchedule:
        """
        Get a player's teammate in every committed round.

        Args:
            player: The player to get the schedule for

        Returns:
            List of (round_number, teammate) tuples

        Raises:
            PairingException: If player is not on the roster
        """
        if player not in self._index:
            raise PairingException(f"Player {player} is not on the roster")

        schedule: List[Tuple[int, Player]] = []
        for round_idx, configuration in enumerate(self._rounds):
            for pair in configuration:
                if player in pair:
                    schedule.append((round_idx + 1, pair.partner_of(player)))
                    break
        return schedule

    def __str__(self) -> str:
        lines = [
            f"Doubles Pairing: {len(self.players)} players, "
            f"{len(self._rounds)}/{self.number_of_rounds} rounds"
        ]
        for i, configuration in enumerate(self._rounds):
            lines.append(f"  Round {i + 1}: " + ", ".join(map(str, configuration)))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PairingEngine(players={len(self.players)}, "
            f"rounds={len(self._rounds)}/{self.number_of_rounds})"
        )


def create_schedule(players: Iterable[Player]) -> PairingEngine:
    """
    Build an engine and generate its complete schedule.

    Args:
        players: eight unique player identifiers

    Returns:
        the engine holding the complete schedule

    Raises:
        InvalidRosterError: If the roster is not valid
        SchedulingExhaustedError: If the search gets stuck
    """
    engine = PairingEngine(players)
    engine.generate_schedule()
    logger.debug("Schedule created: %s", engine)
    return engine


#  LocalWords:  PairingEngine PossibleRound
