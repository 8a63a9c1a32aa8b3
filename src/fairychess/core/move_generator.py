"""Aggregate move generation and king-safety testing.

Pseudo-legal destinations come straight from each piece's movement rule.
A destination is fully legal once :func:`safe_move` confirms that the
mover's king is not capturable afterwards. Every probe runs on a copy;
the caller's game is never mutated.
"""

from __future__ import annotations

from fairychess.core.enums import Color, PieceKind
from fairychess.core.game import Game
from fairychess.core.movement import mover_color
from fairychess.core.types import MoveSet, Position


def possible_moves(game: Game, pos: Position) -> MoveSet:
    """Pseudo-legal destinations of the piece on *pos* (empty if none)."""
    piece = game.board.get_piece(pos)
    if piece is None:
        return set()
    return piece.possible_moves(game, pos)


def all_moves(game: Game, color: Color) -> MoveSet:
    """Union of the pseudo-legal destinations of every *color* piece."""
    moves: MoveSet = set()
    for pos, piece in game.board.pieces(color):
        moves |= piece.possible_moves(game, pos)
    return moves


def safe_move(game: Game, start: Position, end: Position) -> bool:
    """Whether moving *start* -> *end* leaves the mover's king uncapturable."""
    player = mover_color(game, start)
    probe = game.copy()
    probe.board.move_piece(start, end)

    for pos in all_moves(probe, player.opposite):
        piece = probe.board.get_piece(pos)
        if piece is not None and piece.color == player and piece.kind == PieceKind.KING:
            return False
    return True


def legal_moves(game: Game, pos: Position) -> MoveSet:
    """Destinations of the piece on *pos* that pass :func:`safe_move`."""
    return {end for end in possible_moves(game, pos) if safe_move(game, pos, end)}


def has_possible_moves(game: Game, color: Color) -> bool:
    """Whether *color* has at least one safe move."""
    for pos, piece in game.board.pieces(color):
        for end in piece.possible_moves(game, pos):
            if safe_move(game, pos, end):
                return True
    return False
