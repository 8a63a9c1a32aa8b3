"""Movement generation: directional stepping and pawn rules.

Every movement rule is a pure function ``(game, position) -> MoveSet``.
Rules never mutate the game they are given; the legality engine relies on
that when it probes copies.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeAlias

from fairychess.core.enums import Color
from fairychess.core.types import D, L, R, U, Displacement, MoveSet, Position

if TYPE_CHECKING:
    from fairychess.core.game import Game
    from fairychess.core.piece import Movement

StopCondition: TypeAlias = Callable[["Game", Position, Color], bool]


# ── Stop conditions ─────────────────────────────────────────────────────────


def own_piece(game: Game, pos: Position, color: Color) -> bool:
    """Square holds a piece of the mover's *color*."""
    piece = game.board.get_piece(pos)
    return piece is not None and piece.color == color


def pos_has_piece(game: Game, pos: Position, color: Color) -> bool:
    """Square holds any piece."""
    return game.board.get_piece(pos) is not None


def pos_is_empty(game: Game, pos: Position, color: Color) -> bool:
    """Square holds no piece."""
    return game.board.get_piece(pos) is None


# ── Stepping ────────────────────────────────────────────────────────────────


def mover_color(game: Game, origin: Position) -> Color:
    """Color of the piece on *origin*, or the side to move if it is empty."""
    piece = game.board.get_piece(origin)
    return piece.color if piece is not None else game.turn


def move_direction(
    game: Game,
    origin: Position,
    directions: Sequence[Displacement],
    max_steps: int = -1,
    should_stop: StopCondition = own_piece,
) -> MoveSet:
    """Squares reachable by repeating each displacement from *origin*.

    A negative *max_steps* walks until the board edge. Each walk ends on
    the first square that is off-board, holds a piece of the mover's
    color, or satisfies *should_stop*; such squares are not reachable.
    An occupied square that passes those checks is reachable (a capture)
    and also ends the walk.
    """
    board = game.board
    color = mover_color(game, origin)
    reachable: MoveSet = set()

    for direction in directions:
        square = origin
        step = 0
        while step != max_steps:
            step += 1
            square = square + direction
            if not board.valid_pos(square):
                break
            piece = board.get_piece(square)
            if (piece is not None and piece.color == color) or should_stop(
                game, square, color
            ):
                break
            if square != origin:
                reachable.add(square)
            if piece is not None:
                break
    return reachable


def directional_movement(
    directions: Sequence[Displacement], max_steps: int = -1
) -> Movement:
    """Build a movement rule that steps along *directions*."""
    directions = tuple(directions)

    def movement(game: Game, pos: Position) -> MoveSet:
        return move_direction(game, pos, directions, max_steps)

    return movement


def pawn_movement(start_row: int, forward: Displacement) -> Movement:
    """Build a pawn rule advancing along *forward* from *start_row*.

    The pawn advances one square, or two from its start row, and is blocked
    by any piece. It reaches a forward diagonal only when an enemy piece
    stands there.
    """
    attacks = (forward + L, forward + R)

    def movement(game: Game, pos: Position) -> MoveSet:
        steps = 2 if pos.row == start_row else 1
        moves = move_direction(game, pos, (forward,), steps, pos_has_piece)
        moves |= move_direction(game, pos, attacks, 1, pos_is_empty)
        return moves

    return movement


white_pawn_movement = pawn_movement(1, D)
black_pawn_movement = pawn_movement(6, U)
