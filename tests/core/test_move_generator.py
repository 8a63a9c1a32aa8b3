"""Tests for aggregate move generation and king safety."""

from collections.abc import Callable

from fairychess.core.enums import Color, PieceKind
from fairychess.core.game import Game
from fairychess.core.move_generator import (
    all_moves,
    has_possible_moves,
    legal_moves,
    safe_move,
)
from fairychess.core.types import Position

W, B = Color.WHITE, Color.BLACK
MakeGame = Callable[..., Game]


def _pinned_bishop_game(make_game: MakeGame) -> Game:
    """Black bishop on (6,4) shields its king on (7,4) from a rook on (0,4)."""
    return make_game(
        {
            (7, 4): (B, PieceKind.KING),
            (6, 4): (B, PieceKind.BISHOP),
            (0, 4): (W, PieceKind.ROOK),
            (0, 0): (W, PieceKind.KING),
        },
        turn=B,
    )


class TestAllMoves:
    def test_opening_destinations(self) -> None:
        game = Game()
        moves = all_moves(game, Color.WHITE)
        assert moves == {Position(r, c) for r in (2, 3) for c in range(8)}

    def test_opening_has_twenty_legal_moves_per_side(self) -> None:
        game = Game()
        for color in Color:
            count = sum(
                len(legal_moves(game, pos)) for pos, _ in game.board.pieces(color)
            )
            assert count == 20

    def test_other_color_does_not_touch_turn(self) -> None:
        game = Game()
        moves = all_moves(game, Color.BLACK)
        assert moves == {Position(r, c) for r in (4, 5) for c in range(8)}
        assert game.turn == Color.WHITE

    def test_no_pieces_no_moves(self, make_game: MakeGame) -> None:
        game = make_game({(0, 0): (W, PieceKind.KING)})
        assert all_moves(game, Color.BLACK) == set()


class TestSafeMove:
    def test_exposing_own_king_is_unsafe(self, make_game: MakeGame) -> None:
        game = _pinned_bishop_game(make_game)
        assert not safe_move(game, Position(6, 4), Position(5, 3))
        assert not safe_move(game, Position(6, 4), Position(5, 5))

    def test_king_step_off_the_file_is_safe(self, make_game: MakeGame) -> None:
        game = _pinned_bishop_game(make_game)
        assert safe_move(game, Position(7, 4), Position(7, 3))

    def test_pawn_staying_on_file_still_blocks(self, make_game: MakeGame) -> None:
        game = make_game(
            {
                (7, 4): (B, PieceKind.KING),
                (6, 4): (B, PieceKind.PAWN),
                (5, 5): (W, PieceKind.BISHOP),
                (0, 4): (W, PieceKind.ROOK),
                (0, 0): (W, PieceKind.KING),
            },
            turn=B,
        )
        assert safe_move(game, Position(6, 4), Position(5, 4))
        assert not safe_move(game, Position(6, 4), Position(5, 5))

    def test_probe_leaves_game_untouched(self, make_game: MakeGame) -> None:
        game = _pinned_bishop_game(make_game)
        snapshot = game.copy()
        safe_move(game, Position(6, 4), Position(5, 3))
        assert game == snapshot

    def test_legal_moves_filters_unsafe(self, make_game: MakeGame) -> None:
        game = _pinned_bishop_game(make_game)
        assert legal_moves(game, Position(6, 4)) == set()
        assert Position(7, 3) in legal_moves(game, Position(7, 4))

    def test_mover_is_piece_owner_not_side_to_move(self, make_game: MakeGame) -> None:
        game = _pinned_bishop_game(make_game)
        game.set_turn(W)
        assert not safe_move(game, Position(6, 4), Position(5, 3))


class TestHasPossibleMoves:
    def test_opening(self) -> None:
        game = Game()
        assert has_possible_moves(game, Color.WHITE)
        assert has_possible_moves(game, Color.BLACK)

    def test_only_pinned_or_blocked_pieces(self, make_game: MakeGame) -> None:
        game = make_game(
            {
                (3, 0): (W, PieceKind.PAWN),
                (4, 0): (B, PieceKind.PAWN),
            }
        )
        assert not has_possible_moves(game, Color.WHITE)
        assert not has_possible_moves(game, Color.BLACK)
