"""
Printing utilities for doubles schedules.
This module renders a schedule as plain text and as a printable html page.
"""

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


from html import escape
from typing import List

from doublespairing.constants import NUMBER_OF_TABLES, TEAMS_PER_TABLE
from doublespairing.pairing.pair import Pair
from doublespairing.type_hints import Round, Schedule

INDENT = "    "


def team_text(pair: Pair) -> str:
    """Render a team as ``A and B``."""
    return " and ".join(map(str, pair.players))


def tables(configuration: Round) -> List[List[Pair]]:
    """Split a round into tables, the first two pairs sit at Table 1."""
    return [
        list(configuration[t * TEAMS_PER_TABLE : (t + 1) * TEAMS_PER_TABLE])
        for t in range(NUMBER_OF_TABLES)
    ]


def format_round(round_number: int, configuration: Round) -> str:
    """
    Render one round as text.

    Args:
        round_number: 1-indexed round number
        configuration: the four pairs of the round

    Returns:
        Round heading followed by one line per table
    """
    lines = [f"Round {round_number}"]
    for table_number, teams in enumerate(tables(configuration), start=1):
        matchup = " vs ".join(team_text(team) for team in teams)
        lines.append(f"{INDENT}Table {table_number}: {matchup}.")
    return "\n".join(lines)


def format_schedule(schedule: Schedule) -> str:
    """Render every round, separated by blank lines."""
    return "\n\n".join(
        format_round(i, configuration) for i, configuration in enumerate(schedule, 1)
    )


def schedule_to_html(schedule: Schedule, title: str = "Doubles Pairings") -> str:
    """
    Render a schedule as an ink friendly html page.

    Args:
        schedule: the rounds to print
        title: page heading

    Returns:
        html document with one table per round
    """
    body: List[str] = []
    for round_number, configuration in enumerate(schedule, 1):
        rows = []
        for table_number, teams in enumerate(tables(configuration), start=1):
            cells = "".join(f"<td>{escape(team_text(team))}</td>" for team in teams)
            rows.append(f"<tr><td class='table-no'>{table_number}</td>{cells}</tr>")
        body.append(
            f"<h3>Round {round_number}</h3>\n"
            "<table class='pairings'>\n"
            "<tr><th>Table</th><th>Team A</th><th>Team B</th></tr>\n"
            + "\n".join(rows)
            + "\n</table>"
        )

    body_html = "\n".join(body)
    return f"""
        <html>
        <head>
            <style>
                body {{
                    font-family: Arial, sans-serif;
                    color: #000;
                    background: #fff;
                    margin: 0;
                    padding: 0;
                }}
                h2 {{
                    text-align: center;
                    margin: 0 0 0.5em 0;
                    font-size: 1.35em;
                    font-weight: normal;
                    letter-spacing: 0.03em;
                }}
                h3 {{
                    font-size: 1.1em;
                    margin: 1em 0 0.3em 0;
                }}
                table.pairings {{
                    border-collapse: collapse;
                    width: 100%;
                    margin: 0 auto 1.5em auto;
                }}
                table.pairings th, table.pairings td {{
                    border: 1px solid #222;
                    padding: 6px 10px;
                    text-align: left;
                    font-size: 11pt;
                    white-space: nowrap;
                }}
                table.pairings th {{
                    font-weight: bold;
                }}
                td.table-no {{
                    width: 3em;
                    text-align: center;
                }}
            </style>
        </head>
        <body>
            <h2>{escape(title)}</h2>
            {body_html}
        </body>
        </html>
        """


#  LocalWords:  html
