"""Window showing a doubles schedule, with print preview."""

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


import sys
from typing import List, Optional

from PyQt6 import QtGui, QtWidgets
from PyQt6.QtGui import QAction
from PyQt6.QtPrintSupport import QPrinter, QPrintPreviewDialog

from doublespairing.constants import APP_NAME, APP_VERSION
from doublespairing.pairing.engine import PairingEngine
from doublespairing.utils import setup_logger
from doublespairing.utils.print import schedule_to_html

logger = setup_logger(__name__)


# --- Main Application Window ---
class ScheduleWindow(QtWidgets.QMainWindow):
    """Read only view of a generated schedule."""

    def __init__(self, engine: PairingEngine) -> None:
        super().__init__()
        self.engine = engine
        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setGeometry(100, 100, 700, 800)
        self.browser = QtWidgets.QTextBrowser()
        self.browser.setHtml(self.html())
        self.setCentralWidget(self.browser)

        file_menu = self.menuBar().addMenu("&File")
        self.print_action = self._create_action(
            "&Print...", self.print_schedule, "Ctrl+P"
        )
        self.quit_action = self._create_action("&Quit", self.close, "Ctrl+Q")
        file_menu.addAction(self.print_action)
        file_menu.addSeparator()
        file_menu.addAction(self.quit_action)

        self.statusBar().showMessage(
            f"{len(self.engine.schedule)} rounds for {len(self.engine.players)} players"
        )

    def _create_action(
        self, text: str, slot, shortcut: Optional[str] = None
    ) -> QAction:
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(QtGui.QKeySequence(shortcut))
        action.triggered.connect(slot)
        return action

    def html(self) -> str:
        return schedule_to_html(self.engine.schedule)

    def print_schedule(self) -> None:
        """Open a print preview of the schedule."""
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        preview = QPrintPreviewDialog(printer, self)
        preview.setWindowTitle("Print Preview - Doubles Pairings")

        def render_preview(printer_obj):
            doc = QtGui.QTextDocument()
            doc.setHtml(self.html())
            doc.print(printer_obj)

        preview.paintRequested.connect(render_preview)
        preview.exec()
        logger.info("Print preview closed")


def run_app(engine: PairingEngine, argv: Optional[List[str]] = None) -> int:
    """Show the schedule window.

    Returns
    -------
    int
        the exit code from app.exec()
    """
    app = QtWidgets.QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(APP_NAME)
    app.setStyle("fusion")

    window = ScheduleWindow(engine)
    window.show()

    exit_code = app.exec()
    logger.info("run_app() exited with code: %s", exit_code)
    return exit_code


#  LocalWords:  QTextBrowser
