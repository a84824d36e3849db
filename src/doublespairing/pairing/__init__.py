"""Teammate pairing for two tables of 2 vs 2."""

from doublespairing.pairing.constraint_state import ConstraintState
from doublespairing.pairing.engine import (
    PairingEngine,
    PossibleRound,
    create_schedule,
    validate_roster,
)
from doublespairing.pairing.pair import Pair

__all__ = [
    "ConstraintState",
    "Pair",
    "PairingEngine",
    "PossibleRound",
    "create_schedule",
    "validate_roster",
]
