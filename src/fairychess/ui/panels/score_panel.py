"""ScorePanel — per-player score labels."""

from __future__ import annotations

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget


class ScorePanel(QWidget):
    """Shows "Player 1" (Black) and "Player 2" (White) scores."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        self._labels = (QLabel(), QLabel())
        for label in self._labels:
            layout.addWidget(label)
        self.set_scores(0, 0)

    def set_scores(self, player_1: int, player_2: int) -> None:
        self._labels[0].setText(f"Player 1: {player_1}")
        self._labels[1].setText(f"Player 2: {player_2}")

    def text(self, player: int) -> str:
        return self._labels[player].text()
