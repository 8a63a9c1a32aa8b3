"""High-level rules: checkmate and draw detection."""

from __future__ import annotations

from fairychess.core.enums import GameStatus
from fairychess.core.game import Game
from fairychess.core.move_generator import has_possible_moves


class Rules:
    """Static rule-checker that operates on a :class:`Game`."""

    # Product policy: a draw is a position where neither side can move
    # safely. No repetition, move-count or material draws.

    @staticmethod
    def in_checkmate(game: Game) -> bool:
        """Side to move is stuck while the opponent still has a safe move."""
        color = game.turn
        return not has_possible_moves(game, color) and has_possible_moves(
            game, color.opposite
        )

    @staticmethod
    def in_draw(game: Game) -> bool:
        color = game.turn
        return not has_possible_moves(game, color) and not has_possible_moves(
            game, color.opposite
        )

    @staticmethod
    def status(game: Game, is_new: bool = False) -> GameStatus:
        """Summarise *game* for display."""
        color = game.turn
        if has_possible_moves(game, color):
            return GameStatus.NEW if is_new else GameStatus.IN_PROGRESS
        if has_possible_moves(game, color.opposite):
            return GameStatus.CHECKMATE
        return GameStatus.DRAW
