"""Board coordinates and step displacements.

Board layout (row, col), row 0 at the top:
    row 0   White back rank
    row 1   White pawns
    row 6   Black pawns
    row 7   Black back rank

White advances toward increasing rows, Black toward decreasing rows.
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

BOARD_SIZE = 8


class Displacement(NamedTuple):
    """A single step offset (row delta, column delta)."""

    drow: int
    dcol: int

    def __add__(self, other: object) -> Displacement:  # type: ignore[override]
        if not isinstance(other, Displacement):
            return NotImplemented
        return Displacement(self.drow + other.drow, self.dcol + other.dcol)


class Position(NamedTuple):
    """A (row, col) board coordinate.

    Positions produced by stepping may lie off the board; use
    :attr:`is_valid` before addressing a board with them.
    """

    row: int
    col: int

    def __add__(self, other: object) -> Position:  # type: ignore[override]
        if not isinstance(other, Displacement):
            return NotImplemented
        return Position(self.row + other.drow, self.col + other.dcol)

    @property
    def is_valid(self) -> bool:
        return in_range(self.row) and in_range(self.col)

    @property
    def is_light(self) -> bool:
        """Whether the square is drawn in the light checker colour."""
        return (self.row + self.col) % 2 != 0


MoveSet: TypeAlias = set[Position]


def in_range(x: int, lower: int = 0, upper: int = BOARD_SIZE - 1) -> bool:
    """Whether ``lower <= x <= upper``."""
    return lower <= x <= upper


def all_positions() -> list[Position]:
    """Every on-board position in row-major order."""
    return [Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named displacements ─────────────────────────────────────────────────────

U = Displacement(-1, 0)
D = Displacement(1, 0)
L = Displacement(0, -1)
R = Displacement(0, 1)
UL = Displacement(-1, -1)
UR = Displacement(-1, 1)
DL = Displacement(1, -1)
DR = Displacement(1, 1)

STRAIGHT: tuple[Displacement, ...] = (U, D, L, R)
DIAGONAL: tuple[Displacement, ...] = (UL, DL, UR, DR)
ALL: tuple[Displacement, ...] = DIAGONAL + STRAIGHT
UPWARDS: tuple[Displacement, ...] = (U, UL, UR)
DOWNWARDS: tuple[Displacement, ...] = (D, DL, DR)

KNIGHT_JUMPS: tuple[Displacement, ...] = (
    Displacement(1, 2),
    Displacement(1, -2),
    Displacement(-1, 2),
    Displacement(-1, -2),
    Displacement(2, 1),
    Displacement(2, -1),
    Displacement(-2, 1),
    Displacement(-2, -1),
)
