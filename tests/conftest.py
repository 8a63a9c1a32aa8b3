"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from fairychess.core.board import Board
from fairychess.core.enums import Color, PieceKind
from fairychess.core.game import Game
from fairychess.core.pieces import piece_type
from fairychess.core.types import Position

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


PlacementSpec = dict[tuple[int, int], tuple[Color, PieceKind]]


def build_game(pieces: PlacementSpec, turn: Color = Color.WHITE) -> Game:
    """Game on an otherwise empty board with *pieces* placed."""
    board = Board.empty()
    for (row, col), (color, kind) in pieces.items():
        board.place_piece(Position(row, col), piece_type(kind).create(color))
    game = Game(board=board)
    game.set_turn(turn)
    return game


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Factory fixture wrapping :func:`build_game`."""
    return build_game


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
