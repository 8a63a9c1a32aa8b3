"""Piece value object and the PieceType template that produces it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from fairychess.core.enums import Color, PieceKind
from fairychess.core.types import MoveSet, Position

if TYPE_CHECKING:
    from fairychess.core.game import Game

Movement: TypeAlias = Callable[["Game", Position], MoveSet]

# Fairy kinds borrow the glyph of the standard piece they resemble.
_GLYPHS: dict[PieceKind, tuple[str, str]] = {
    # kind: (white, black)
    PieceKind.ROOK: ("♖", "♜"),
    PieceKind.KNIGHT: ("♘", "♞"),
    PieceKind.BISHOP: ("♗", "♝"),
    PieceKind.QUEEN: ("♕", "♛"),
    PieceKind.KING: ("♔", "♚"),
    PieceKind.PAWN: ("♙", "♟"),
    PieceKind.PALADIN: ("♘", "♞"),
    PieceKind.COWARD: ("♙", "♟"),
    PieceKind.SAMURAI: ("♖", "♜"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece on the board.

    Two pieces compare equal when kind and color match; the bound
    movement rule is fixed by the :class:`PieceType` that created it.
    """

    kind: PieceKind
    color: Color
    movement: Movement = field(compare=False, repr=False)

    def possible_moves(self, game: Game, pos: Position) -> MoveSet:
        """Pseudo-legal destinations for this piece standing on *pos*."""
        return self.movement(game, pos)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        white, black = _GLYPHS[self.kind]
        return white if self.color == Color.WHITE else black

    def __str__(self) -> str:
        return f"{self.color} {self.kind.name.lower()}"


@dataclass(frozen=True, slots=True)
class PieceType:
    """Template for one piece kind holding a movement rule per color."""

    kind: PieceKind
    white_movement: Movement
    black_movement: Movement

    @classmethod
    def symmetric(cls, kind: PieceKind, movement: Movement) -> PieceType:
        """Kind whose pieces move identically for both colors."""
        return cls(kind, movement, movement)

    def movement_for(self, color: Color) -> Movement:
        return self.white_movement if color == Color.WHITE else self.black_movement

    def create(self, color: Color) -> Piece:
        """Make a new :class:`Piece` of this kind for *color*."""
        return Piece(self.kind, color, self.movement_for(color))
