"""Session layer — the click-driven state machine over a Game.

Quick start::

    from fairychess.core import Position
    from fairychess.game import Model

    model = Model()
    model.update_game(Position(1, 4))  # select a white pawn
    model.update_game(Position(3, 4))  # push it two squares
"""

from fairychess.game.model import (
    INVALID_SCORE,
    PLAYERS,
    Model,
    ModelEvents,
    Selection,
)

__all__ = [
    "INVALID_SCORE",
    "PLAYERS",
    "Model",
    "ModelEvents",
    "Selection",
]
