from __future__ import annotations

import logging
import sys
import uuid

from PySide6.QtCore import QObject, QThread, Qt, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from ..core.layout import GameLayout, LayoutError, load_layout
from ..core.selection import SelectionStateMachine
from ..core.types import AwaitingDestination
from ..logging_setup import TRACE_ID_VAR, configure_logging
from ..remote.client import ValidationClient, ValidationTransportError
from ..remote.schema import ValidationResponse
from .cells import CellLabel, QtBoard

log = logging.getLogger("sizetac.ui")

PALETTE_COLUMNS = 9
BOARD_COLUMNS = 3
SHUTDOWN_WAIT_MS = 2000

# vlákna, ktoré pri zatvorení okna ešte čakali na server
_DETACHED_THREADS: list[tuple[QThread, QObject]] = []


class ValidationWorker(QObject):
    """Volanie servera mimo GUI vlákna; výsledok ide späť cez signály."""

    finished: Signal = Signal(int, object)
    failed: Signal = Signal(int, object)

    def __init__(self, client: ValidationClient, encoded: str, sequence: int, trace_id: str) -> None:
        super().__init__()
        self.client = client
        self.encoded = encoded
        self.sequence = sequence
        self.trace_id = trace_id

    def run(self) -> None:
        TRACE_ID_VAR.set(self.trace_id)
        try:
            resp = self.client.fetch(self.encoded)
        except ValidationTransportError as e:
            self.failed.emit(self.sequence, e)
            return
        self.finished.emit(self.sequence, resp)


class MainWindow(QMainWindow):
    def __init__(self, layout: GameLayout) -> None:
        super().__init__()
        self.setWindowTitle("Sizetac")
        self.resize(1100, 900)
        self.game_layout = layout
        # bežiace požiadavky (môže ich byť viac naraz)
        self._workers: list[tuple[QThread, ValidationWorker]] = []

        self.toolbar = QToolBar()
        self.addToolBar(self.toolbar)
        self.act_restart = QAction("🔄 Reštart", self)
        self.act_restart.triggered.connect(self.restart)
        self.toolbar.addAction(self.act_restart)

        central = QWidget()
        self.setCentralWidget(central)
        v = QVBoxLayout(central)

        widgets: list[CellLabel] = []
        palette = QGridLayout()
        for i, cell_id in enumerate(layout.source_ids):
            w = CellLabel(cell_id)
            widgets.append(w)
            palette.addWidget(w, i // PALETTE_COLUMNS, i % PALETTE_COLUMNS)
        v.addLayout(palette)

        h = QHBoxLayout()
        grid = QGridLayout()
        for i, cell_id in enumerate(layout.destination_ids):
            w = CellLabel(cell_id)
            w.setMinimumSize(160, 160)
            widgets.append(w)
            grid.addWidget(w, i // BOARD_COLUMNS, i % BOARD_COLUMNS)
        h.addLayout(grid, 3)

        self.lbl_message = QLabel("")
        self.lbl_message.setWordWrap(True)
        self.lbl_message.setTextFormat(Qt.TextFormat.PlainText)
        self.lbl_message.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.lbl_message.setStyleSheet("QLabel{font-size:17px;}")
        h.addWidget(self.lbl_message, 2)
        v.addLayout(h, 1)

        self.status = QStatusBar()
        self.setStatusBar(self.status)

        self.qt_board = QtBoard(widgets, self.lbl_message)
        self.client = ValidationClient(layout.host, self.qt_board.show_message)
        self.machine = SelectionStateMachine(
            self.qt_board,
            source_ids=layout.source_ids,
            destination_ids=layout.destination_ids,
            submit=self._submit_in_background,
        )
        for w in widgets:
            w.clicked.connect(self.on_cell_clicked)

        self.restart()

    def restart(self) -> None:
        """Obnoví všetky bunky z layoutu a vráti výber do Idle."""
        self.qt_board.load_cells(self.game_layout.build_cells())
        self.machine.reset()
        # odpovede na ťahy z predchádzajúcej hry sa už nevykreslia
        self.client.invalidate()
        self.status.showMessage("Vyber figúrku z palety.")
        log.info("game_restart")

    def on_cell_clicked(self, cell_id: str) -> None:
        state = self.machine.handle_click(cell_id)
        if isinstance(state, AwaitingDestination):
            self.status.showMessage(f"Vybraté {state.source_id}, klikni na políčko.")
        elif not self._workers:
            self.status.clearMessage()

    def _submit_in_background(self, encoded: str) -> None:
        trace_id = uuid.uuid4().hex[:8]
        TRACE_ID_VAR.set(trace_id)
        sequence = self.client.next_sequence()
        log.info("submit seq=%d board=%s", sequence, encoded)

        thread = QThread(self)
        worker = ValidationWorker(self.client, encoded, sequence, trace_id)
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(self._on_validation_ok)
        worker.failed.connect(self._on_validation_fail)
        # uklon thread po dokonceni
        worker.finished.connect(thread.quit)
        worker.failed.connect(thread.quit)
        thread.finished.connect(self._forget_finished_workers)
        self._workers.append((thread, worker))
        self.status.showMessage("Overujem ťah…")
        thread.start()

    def _forget_finished_workers(self) -> None:
        done = [(t, w) for (t, w) in self._workers if t.isFinished()]
        self._workers = [(t, w) for (t, w) in self._workers if not t.isFinished()]
        for thread, worker in done:
            worker.deleteLater()
            thread.deleteLater()

    def _on_validation_ok(self, sequence: int, resp: ValidationResponse) -> None:
        if self.client.deliver(sequence, resp):
            self.status.showMessage("Ťah overený.", 2000)

    def _on_validation_fail(self, sequence: int, err: Exception) -> None:
        # plocha ostáva v poslednom úspešnom stave
        log.error("Validácia zlyhala seq=%d: %s", sequence, err)
        self.status.showMessage("Server neodpovedá.", 3000)

    def closeEvent(self, ev) -> None:  # type: ignore[no-untyped-def]  # noqa: N802
        for thread, worker in list(self._workers):
            thread.quit()
            if thread.wait(SHUTDOWN_WAIT_MS):
                continue
            # server neodpovedá; vlákno nesmie zaniknúť spolu s oknom
            log.warning("Validácia stále beží pri zatvorení okna, odpájam vlákno")
            worker.finished.disconnect()
            worker.failed.disconnect()
            thread.finished.disconnect()
            thread.setParent(None)
            _DETACHED_THREADS.append((thread, worker))
        self._workers = []
        super().closeEvent(ev)


def stop_detached_threads() -> None:
    """Pri ukončení procesu zastaví vlákna, ktoré stále čakajú na server."""
    while _DETACHED_THREADS:
        thread, _worker = _DETACHED_THREADS.pop()
        if thread.isRunning():
            log.warning("Ukončujem visiace validačné vlákno")
            thread.terminate()
            thread.wait()


def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)

    # Globálny excepthook: log + toast
    def _excepthook(exc_type, exc, tb):  # type: ignore[no-untyped-def]
        logging.getLogger("sizetac").error("Unhandled exception", exc_info=(exc_type, exc, tb))
        QMessageBox.critical(None, "Neošetrená výnimka", str(exc))

    sys.excepthook = _excepthook

    try:
        layout = load_layout()
    except LayoutError as e:
        log.error("%s", e)
        QMessageBox.critical(None, "Neplatný layout", str(e))
        sys.exit(1)

    w = MainWindow(layout)
    w.show()
    code = app.exec()
    stop_detached_threads()
    sys.exit(code)


if __name__ == "__main__":
    main()
