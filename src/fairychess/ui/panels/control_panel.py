"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtBoundSignal, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: reset, resign, undo, redo, fairy/help."""

    reset_clicked = pyqtSignal()
    resign_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    redo_clicked = pyqtSignal()
    fairy_clicked = pyqtSignal()

    FAIRY_TEXT = "Fairy"
    HELP_TEXT = "Help"

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._btn_reset = self._make_button("Reset", self.reset_clicked)
        self._btn_resign = self._make_button("Resign", self.resign_clicked)
        self._btn_resign.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_undo = self._make_button("Undo", self.undo_clicked)
        self._btn_redo = self._make_button("Redo", self.redo_clicked)
        self._btn_fairy = self._make_button(self.FAIRY_TEXT, self.fairy_clicked)

        for btn in (
            self._btn_reset,
            self._btn_resign,
            self._btn_undo,
            self._btn_redo,
            self._btn_fairy,
        ):
            layout.addWidget(btn)

    def _make_button(self, text: str, signal: pyqtBoundSignal) -> QPushButton:
        btn = QPushButton(text)
        btn.setMinimumHeight(36)
        btn.clicked.connect(signal)
        return btn

    def set_new_game(self, is_new: bool) -> None:
        """Label the fairy button "Fairy" for a fresh game, "Help" afterwards."""
        self._btn_fairy.setText(self.FAIRY_TEXT if is_new else self.HELP_TEXT)

    def set_history(self, can_undo: bool, can_redo: bool) -> None:
        self._btn_undo.setEnabled(can_undo)
        self._btn_redo.setEnabled(can_redo)
