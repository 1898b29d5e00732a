"""Pytest configuration and fixtures.

Provides:
- default layout and a fresh in-memory board per test
- a recording submitter in place of the validation server
- a session-wide QApplication on the offscreen platform
"""

from __future__ import annotations

import os

import pytest

from sizetac.core.board import Board
from sizetac.core.layout import GameLayout, load_layout
from sizetac.core.selection import SelectionStateMachine
from sizetac.core.types import Cell, SizeClass

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingSubmitter:
    """Zachytí zakódované dosky namiesto HTTP volania."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def __call__(self, encoded: str) -> None:
        self.calls.append(encoded)


@pytest.fixture
def layout(monkeypatch: pytest.MonkeyPatch) -> GameLayout:
    monkeypatch.delenv("SIZETAC_HOST", raising=False)
    return load_layout()


@pytest.fixture
def board(layout: GameLayout) -> Board:
    return layout.build_board()


@pytest.fixture
def submitter() -> RecordingSubmitter:
    return RecordingSubmitter()


@pytest.fixture
def machine(board: Board, layout: GameLayout, submitter: RecordingSubmitter) -> SelectionStateMachine:
    return SelectionStateMachine(
        board,
        source_ids=layout.source_ids,
        destination_ids=layout.destination_ids,
        submit=submitter,
    )


@pytest.fixture
def tiny_board() -> Board:
    """Jedna figúrka a jedno políčko."""
    return Board([Cell(id="XS1", text="X", size=SizeClass.SMALL), Cell(id="1")])


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
