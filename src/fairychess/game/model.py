"""Model — the session state machine driven by board clicks.

Owns the live :class:`Game`, the current selection, the undo/redo
history of full game snapshots, per-player scores and the help flag.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from fairychess.core.enums import Color, GameStatus
from fairychess.core.game import Game
from fairychess.core.move_generator import all_moves, possible_moves, safe_move
from fairychess.core.piece import Piece
from fairychess.core.rules import Rules
from fairychess.core.types import MoveSet, Position

_LOGGER = logging.getLogger(__name__)

INVALID_SCORE = -1

# Player index -> color: "Player 1" is Black, "Player 2" is White.
PLAYERS: tuple[Color, Color] = (Color.BLACK, Color.WHITE)

# ── Event definitions ────────────────────────────────────────────────────────

ChangedCallback = Callable[[], None]
ScoreCallback = Callable[[Color, int], None]  # color, new score


@dataclass
class ModelEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_changed: list[ChangedCallback] = field(default_factory=list)
    on_score_changed: list[ScoreCallback] = field(default_factory=list)


@dataclass(frozen=True)
class Selection:
    """A selected square of the side to move and its cached destinations."""

    pos: Position
    moves: frozenset[Position]


# ── Model ────────────────────────────────────────────────────────────────────


class Model:
    """Top-level mutable session state.

    The renderer forwards clicked positions to :meth:`update_game` and the
    toolbar commands to :meth:`undo`, :meth:`redo`, :meth:`reset`,
    :meth:`resign` and :meth:`fairy`, then re-queries the model to redraw.
    Scores survive resets and are never rolled back by undo.
    """

    __slots__ = (
        "_game",
        "_selection",
        "_undo_history",
        "_redo_history",
        "_scores",
        "_help",
        "events",
        "__weakref__",
    )

    def __init__(self, game: Game | None = None) -> None:
        self._game = game if game is not None else Game()
        self._selection: Selection | None = None
        self._undo_history: list[Game] = []
        self._redo_history: list[Game] = []
        self._scores: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 0}
        self._help = False
        self.events = ModelEvents()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def turn(self) -> Color:
        return self._game.turn

    def piece_at(self, pos: Position) -> Piece | None:
        return self._game.board.get_piece(pos)

    @property
    def selected(self) -> bool:
        return self._selection is not None

    @property
    def selected_pos(self) -> Position | None:
        return self._selection.pos if self._selection else None

    @property
    def selected_moves(self) -> frozenset[Position]:
        return self._selection.moves if self._selection else frozenset()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_history)

    def get_score(self, player: int) -> int:
        """Score of player 0 (Black) or 1 (White); ``INVALID_SCORE`` otherwise."""
        if player not in (0, 1):
            return INVALID_SCORE
        return self._scores[PLAYERS[player]]

    def get_help(self) -> bool:
        return self._help

    def is_new_game(self) -> bool:
        """True until the first move of the current game is committed."""
        return not self._undo_history

    @property
    def status(self) -> GameStatus:
        return Rules.status(self._game, self.is_new_game())

    def help_moves(self) -> tuple[MoveSet, MoveSet]:
        """Destinations of the side to move and of its opponent.

        Both sets are empty unless help is on and nothing is selected.
        """
        if not self._help or self._selection is not None:
            return set(), set()
        color = self._game.turn
        return all_moves(self._game, color), all_moves(self._game, color.opposite)

    # ── Click handling ───────────────────────────────────────────────────

    def update_game(self, pos: Position) -> None:
        """Handle a click on *pos*: deselect, commit a move, or select."""
        if self._selection is not None:
            if pos == self._selection.pos:
                self.deselect_piece()
                self._emit_changed()
                return
            if pos in self._selection.moves and safe_move(
                self._game, self._selection.pos, pos
            ):
                self._commit(pos)
                self._emit_changed()
                return

        piece = self._game.board.get_piece(pos)
        if piece is not None and piece.color == self._game.turn:
            self.select_piece(pos)
            self._emit_changed()

    def select_piece(self, pos: Position) -> None:
        self._selection = Selection(pos, frozenset(possible_moves(self._game, pos)))

    def deselect_piece(self) -> None:
        self._selection = None

    def move_selected_piece(self, pos: Position) -> None:
        """Relocate the selected piece to *pos* and pass the turn."""
        if self._selection is None:
            return
        self._game.board.move_piece(self._selection.pos, pos)
        self.deselect_piece()
        self._game.end_turn()

    def _commit(self, pos: Position) -> None:
        assert self._selection is not None
        start = self._selection.pos
        self._undo_history.append(self._game.copy())
        self._redo_history.clear()
        mover = self._game.turn
        self.move_selected_piece(pos)
        _LOGGER.debug("%s moved %s -> %s", mover, tuple(start), tuple(pos))

        if Rules.in_checkmate(self._game):
            _LOGGER.info("Checkmate: %s wins", mover)
            self._award(mover)

    # ── History ──────────────────────────────────────────────────────────

    def undo(self) -> None:
        if self._shift(self._undo_history, self._redo_history):
            _LOGGER.debug("Undo (%d left)", len(self._undo_history))
        self._emit_changed()

    def redo(self) -> None:
        if self._shift(self._redo_history, self._undo_history):
            _LOGGER.debug("Redo (%d left)", len(self._redo_history))
        self._emit_changed()

    def _shift(self, shift_from: list[Game], shift_to: list[Game]) -> bool:
        self.deselect_piece()
        if not shift_from:
            return False
        shift_to.append(self._game)
        self._game = shift_from.pop()
        return True

    # ── Session commands ─────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a fresh standard game. Scores and help flag are kept."""
        self._start(Game())
        _LOGGER.debug("Game reset")
        self._emit_changed()

    def resign(self) -> None:
        """Side to move resigns; the other side scores unless already mated."""
        if not Rules.in_checkmate(self._game):
            winner = self._game.turn.opposite
            _LOGGER.info("%s resigned, %s wins", self._game.turn, winner)
            self._award(winner)
        self.reset()

    def fairy(self) -> None:
        """Switch to the fairy set before any move; toggle help afterwards."""
        if self.is_new_game():
            self._start(Game(fairy=True))
            _LOGGER.debug("Fairy game started")
        else:
            self._help = not self._help
            _LOGGER.debug("Help overlay %s", "on" if self._help else "off")
        self._emit_changed()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _start(self, game: Game) -> None:
        self._game = game
        self._undo_history.clear()
        self._redo_history.clear()
        self.deselect_piece()

    def _award(self, color: Color) -> None:
        self._scores[color] += 1
        for cb in self.events.on_score_changed:
            cb(color, self._scores[color])

    def _emit_changed(self) -> None:
        for cb in self.events.on_changed:
            cb()
