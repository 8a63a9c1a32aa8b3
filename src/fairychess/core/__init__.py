"""Core domain layer — pure rules logic with zero external dependencies.

Quick start::

    from fairychess.core import Game, Position, all_moves, Color

    game = Game()
    moves = all_moves(game, Color.WHITE)
"""

from fairychess.core.board import Board
from fairychess.core.enums import Color, GameStatus, PieceKind
from fairychess.core.game import Game
from fairychess.core.move_generator import (
    all_moves,
    has_possible_moves,
    legal_moves,
    possible_moves,
    safe_move,
)
from fairychess.core.movement import (
    directional_movement,
    move_direction,
    pawn_movement,
)
from fairychess.core.piece import Movement, Piece, PieceType
from fairychess.core.pieces import (
    FAIRY_BACK_RANK,
    PIECE_TYPES,
    STANDARD_BACK_RANK,
    piece_type,
)
from fairychess.core.rules import Rules
from fairychess.core.types import Displacement, MoveSet, Position

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceKind",
    # Types
    "Displacement",
    "MoveSet",
    "Position",
    # Domain objects
    "Board",
    "Game",
    "Movement",
    "Piece",
    "PieceType",
    "Rules",
    # Registry
    "FAIRY_BACK_RANK",
    "PIECE_TYPES",
    "STANDARD_BACK_RANK",
    "piece_type",
    # Movement / legality
    "all_moves",
    "directional_movement",
    "has_possible_moves",
    "legal_moves",
    "move_direction",
    "pawn_movement",
    "possible_moves",
    "safe_move",
]
