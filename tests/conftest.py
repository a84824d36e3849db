# tests/conftest.py
import pytest

from doublespairing.constants import DEFAULT_ROSTER, EXAMPLE_ROSTER
from doublespairing.pairing import PairingEngine


@pytest.fixture
def numbered_engine():
    return PairingEngine(DEFAULT_ROSTER)


@pytest.fixture
def named_schedule():
    return PairingEngine(EXAMPLE_ROSTER).generate_schedule()
