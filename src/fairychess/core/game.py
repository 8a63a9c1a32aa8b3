"""Game - a board plus the color whose turn it is."""

from __future__ import annotations

from fairychess.core.board import Board
from fairychess.core.enums import Color


class Game:
    """Board and turn. Copies are independent snapshots."""

    __slots__ = ("board", "_turn")

    def __init__(self, fairy: bool = False, *, board: Board | None = None) -> None:
        self.board = board if board is not None else Board(fairy)
        self._turn = Color.WHITE

    @property
    def turn(self) -> Color:
        return self._turn

    def get_turn(self) -> Color:
        return self._turn

    def set_turn(self, color: Color) -> None:
        self._turn = color

    def end_turn(self) -> None:
        self._turn = self._turn.opposite

    def copy(self) -> Game:
        g = Game(board=self.board.copy())
        g._turn = self._turn
        return g

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self._turn == other._turn and self.board == other.board

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self._turn} to move"
