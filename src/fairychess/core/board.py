"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from fairychess.core.enums import Color
from fairychess.core.piece import Piece, PieceType
from fairychess.core.pieces import FAIRY_BACK_RANK, PAWN, STANDARD_BACK_RANK
from fairychess.core.types import BOARD_SIZE, Position, in_range

_WHITE_BACK_ROW = 0
_WHITE_PAWN_ROW = 1
_BLACK_PAWN_ROW = 6
_BLACK_BACK_ROW = 7


class Board:
    """Mutable 8x8 grid where each cell holds zero or one :class:`Piece`.

    Off-board positions are never addressed: reads return ``None`` and
    writes are ignored.
    """

    __slots__ = ("_cells",)

    def __init__(self, fairy: bool = False) -> None:
        self._cells: list[list[Piece | None]] = _empty_cells()
        back_rank = FAIRY_BACK_RANK if fairy else STANDARD_BACK_RANK
        self._setup(back_rank)

    def _setup(self, back_rank: Sequence[PieceType]) -> None:
        for col, pt in enumerate(back_rank):
            self._cells[_WHITE_BACK_ROW][col] = pt.create(Color.WHITE)
            self._cells[_BLACK_BACK_ROW][col] = pt.create(Color.BLACK)
            self._cells[_WHITE_PAWN_ROW][col] = PAWN.create(Color.WHITE)
            self._cells[_BLACK_PAWN_ROW][col] = PAWN.create(Color.BLACK)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        """Board without any pieces."""
        b = cls.__new__(cls)
        b._cells = _empty_cells()
        return b

    # -- Element access -----------------------------------------------------

    @staticmethod
    def valid_pos(pos: Position) -> bool:
        return in_range(pos[0]) and in_range(pos[1])

    def get_piece(self, pos: Position) -> Piece | None:
        if not self.valid_pos(pos):
            return None
        return self._cells[pos[0]][pos[1]]

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.get_piece(pos)

    def place_piece(self, pos: Position, piece: Piece | None) -> None:
        """Put *piece* on *pos*, replacing any occupant."""
        if not self.valid_pos(pos):
            return
        self._cells[pos[0]][pos[1]] = piece

    def remove_piece(self, pos: Position) -> None:
        self.place_piece(pos, None)

    def move_piece(self, start: Position, end: Position) -> None:
        """Relocate the piece on *start* to *end* without legality checks.

        Whatever stood on *end* is discarded. No-op when either position is
        off the board or *start* is empty.
        """
        if not self.valid_pos(start) or not self.valid_pos(end):
            return
        piece = self._cells[start[0]][start[1]]
        if piece is None:
            return
        self._cells[end[0]][end[1]] = piece
        self._cells[start[0]][start[1]] = None

    def is_empty(self, pos: Position) -> bool:
        return self.get_piece(pos) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """``(position, piece)`` pairs in row-major order, optionally by color."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._cells[row][col]
                if piece is not None and (color is None or piece.color == color):
                    yield Position(row, col), piece

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board.empty()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [p.symbol if p else "." for p in self._cells[row]]
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(col) for col in range(BOARD_SIZE)))
        return "\n".join(rows)


def _empty_cells() -> list[list[Piece | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
