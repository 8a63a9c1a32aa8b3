"""Core enumerations for the fairy chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Closed set of piece kinds, standard first, fairy last."""

    ROOK = 0
    KNIGHT = 1
    BISHOP = 2
    QUEEN = 3
    KING = 4
    PAWN = 5
    PALADIN = 6
    COWARD = 7
    SAMURAI = 8


class GameStatus(IntEnum):
    """Summary of a game as seen by a renderer."""

    NEW = auto()
    IN_PROGRESS = auto()
    CHECKMATE = auto()
    DRAW = auto()
