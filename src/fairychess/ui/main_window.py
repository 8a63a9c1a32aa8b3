"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from fairychess.core.enums import Color, GameStatus
from fairychess.core.types import Position
from fairychess.game.model import Model
from fairychess.ui.board.board_view import BoardView
from fairychess.ui.panels.control_panel import ControlPanel
from fairychess.ui.panels.score_panel import ScorePanel
from fairychess.ui.settings import AppSettings, apply_settings


class MainWindow(QMainWindow):
    """Main application window: board, action buttons and scores."""

    def __init__(
        self,
        model: Model | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Fairy Chess")
        self.setMinimumSize(560, 660)

        self._model = model if model is not None else Model()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()
        self._board_view.board_scene.set_model(self._model)
        self._update_panels()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        self._score_panel = ScorePanel()
        root.addWidget(self._score_panel)

        self._status_label = QLabel()
        status_bar = QStatusBar()
        status_bar.addWidget(self._status_label)
        self.setStatusBar(status_bar)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)

        cp = self._control_panel
        cp.reset_clicked.connect(self._model.reset)
        cp.resign_clicked.connect(self._model.resign)
        cp.undo_clicked.connect(self._model.undo)
        cp.redo_clicked.connect(self._model.redo)
        cp.fairy_clicked.connect(self._model.fairy)

        self._model.events.on_changed.append(self._on_model_changed)

    def _apply_settings(self) -> None:
        apply_settings(self)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, pos: Position) -> None:
        self._model.update_game(pos)

    def _on_model_changed(self) -> None:
        self._board_view.board_scene.refresh()
        self._update_panels()

    # ── Status ───────────────────────────────────────────────────────────

    def _update_panels(self) -> None:
        model = self._model
        self._control_panel.set_new_game(model.is_new_game())
        self._control_panel.set_history(model.can_undo, model.can_redo)
        self._score_panel.set_scores(model.get_score(0), model.get_score(1))
        self._status_label.setText(self._status_text())

    def _status_text(self) -> str:
        model = self._model
        status = model.status
        side = "White" if model.turn == Color.WHITE else "Black"
        if status == GameStatus.CHECKMATE:
            return f"Checkmate: {side} has no safe move"
        if status == GameStatus.DRAW:
            return "Draw: neither side can move"
        suffix = " (help on)" if model.get_help() else ""
        return f"{side} to move{suffix}"
