"""Doubles Pairing entry point."""

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

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from doublespairing.constants import APP_NAME, APP_VERSION
from doublespairing.exceptions import PairingException
from doublespairing.pairing.engine import create_schedule
from doublespairing.roster import resolve_roster
from doublespairing.utils import set_log_level, setup_logger
from doublespairing.utils.print import format_schedule, schedule_to_html

logger = setup_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="doubles-pairing",
        description="Pair eight players into 2 vs 2 teams so that everyone "
        "partners everyone else exactly once.",
    )
    p.add_argument("players", nargs="*", help="eight unique player names")
    p.add_argument(
        "--roster-file",
        type=Path,
        help="text or csv file with the player names",
    )
    p.add_argument(
        "--example",
        action="store_true",
        help="use the example roster (Alice, Bob, ...) when no players are given",
    )
    p.add_argument("--html", type=Path, help="also write a printable html page")
    p.add_argument("--gui", action="store_true", help="show the schedule in a window")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    args = parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        roster = resolve_roster(args.players, args.roster_file, args.example)
        engine = create_schedule(roster)
    except PairingException as e:
        logger.error("Could not create schedule: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_schedule(engine.schedule))

    if args.html:
        try:
            args.html.write_text(schedule_to_html(engine.schedule), encoding="utf-8")
        except OSError as e:
            logger.error("Could not write html schedule to %s: %s", args.html, e)
            print(f"error: could not write {args.html}: {e}", file=sys.stderr)
            return 1
        logger.info("Wrote html schedule to %s", args.html)

    if args.gui:
        # Qt widgets are only loaded when asked for
        from doublespairing.gui.schedule_window import run_app

        return run_app(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
