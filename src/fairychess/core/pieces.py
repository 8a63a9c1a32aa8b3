"""Registry of piece types, built once at import and never mutated."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from fairychess.core.enums import PieceKind
from fairychess.core.movement import (
    black_pawn_movement,
    directional_movement,
    white_pawn_movement,
)
from fairychess.core.piece import PieceType
from fairychess.core.types import (
    ALL,
    DIAGONAL,
    DOWNWARDS,
    KNIGHT_JUMPS,
    STRAIGHT,
    UPWARDS,
)

KING = PieceType.symmetric(PieceKind.KING, directional_movement(ALL, 1))
QUEEN = PieceType.symmetric(PieceKind.QUEEN, directional_movement(ALL))
ROOK = PieceType.symmetric(PieceKind.ROOK, directional_movement(STRAIGHT))
BISHOP = PieceType.symmetric(PieceKind.BISHOP, directional_movement(DIAGONAL))
KNIGHT = PieceType.symmetric(PieceKind.KNIGHT, directional_movement(KNIGHT_JUMPS, 1))
PAWN = PieceType(PieceKind.PAWN, white_pawn_movement, black_pawn_movement)

# Fairy kinds. A paladin may repeat its knight jump once more; cowards and
# samurai slide forward or forward-diagonally toward the enemy back rank.
PALADIN = PieceType.symmetric(PieceKind.PALADIN, directional_movement(KNIGHT_JUMPS, 2))
COWARD = PieceType(
    PieceKind.COWARD,
    directional_movement(DOWNWARDS),
    directional_movement(UPWARDS),
)
SAMURAI = PieceType(
    PieceKind.SAMURAI,
    directional_movement(DOWNWARDS),
    directional_movement(UPWARDS),
)

PIECE_TYPES: Mapping[PieceKind, PieceType] = MappingProxyType(
    {
        pt.kind: pt
        for pt in (ROOK, KNIGHT, BISHOP, QUEEN, KING, PAWN, PALADIN, COWARD, SAMURAI)
    }
)

STANDARD_BACK_RANK: tuple[PieceType, ...] = (
    ROOK,
    KNIGHT,
    BISHOP,
    QUEEN,
    KING,
    BISHOP,
    KNIGHT,
    ROOK,
)

FAIRY_BACK_RANK: tuple[PieceType, ...] = (
    SAMURAI,
    PALADIN,
    BISHOP,
    QUEEN,
    KING,
    BISHOP,
    PALADIN,
    SAMURAI,
)


def piece_type(kind: PieceKind) -> PieceType:
    """Look up the registered :class:`PieceType` for *kind*."""
    return PIECE_TYPES[kind]
