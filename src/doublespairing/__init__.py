"""Doubles Pairing: teammate schedules for two tables of 2 vs 2."""

from doublespairing.constants import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "APP_VERSION", "__version__"]
