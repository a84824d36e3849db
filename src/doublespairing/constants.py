"""Constants used in Doubles Pairing."""

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

APP_NAME = "Doubles Pairing"
APP_VERSION = "0.1.0"

# --- Game shape ---
# two tables of 2 vs 2
ROSTER_SIZE = 8
PLAYERS_PER_TEAM = 2
TEAMS_PER_TABLE = 2
NUMBER_OF_TABLES = ROSTER_SIZE // (PLAYERS_PER_TEAM * TEAMS_PER_TABLE)
PAIRS_PER_ROUND = ROSTER_SIZE // PLAYERS_PER_TEAM
# every player partners each of the others once, one per round
NUMBER_OF_ROUNDS = ROSTER_SIZE - 1
TOTAL_PAIRS = ROSTER_SIZE * (ROSTER_SIZE - 1) // 2

# --- Rosters ---
DEFAULT_ROSTER = ("1", "2", "3", "4", "5", "6", "7", "8")
EXAMPLE_ROSTER = (
    "Alice",
    "Bob",
    "Charlie",
    "Daniel",
    "Ellie",
    "Frank",
    "George",
    "Helga",
)
ROSTER_COMMENT_PREFIX = "#"

# --- Logging ---
LOG_FILE_NAME = "doubles-pairing.log"
DEBUG_ENV_VAR = "DOUBLESPAIRING_DEBUG"
