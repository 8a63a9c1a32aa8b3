"""Tests for per-piece movement generation."""

from collections.abc import Callable

from fairychess.core.enums import Color, PieceKind
from fairychess.core.game import Game
from fairychess.core.move_generator import possible_moves
from fairychess.core.movement import move_direction, pos_has_piece
from fairychess.core.types import DOWNWARDS, STRAIGHT, Position

W, B = Color.WHITE, Color.BLACK
MakeGame = Callable[..., Game]


def _moves(make_game: MakeGame, pieces: dict, at: tuple[int, int]) -> set[Position]:
    game = make_game(pieces)
    return possible_moves(game, Position(*at))


class TestSliders:
    def test_rook_alone_in_centre(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(3, 3): (W, PieceKind.ROOK)}, (3, 3))
        assert len(moves) == 14
        assert Position(3, 3) not in moves

    def test_bishop_in_corner(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(0, 0): (W, PieceKind.BISHOP)}, (0, 0))
        assert moves == {Position(i, i) for i in range(1, 8)}

    def test_queen_in_centre(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(3, 3): (W, PieceKind.QUEEN)}, (3, 3))
        assert len(moves) == 27

    def test_king_steps_once(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(4, 4): (B, PieceKind.KING)}, (4, 4))
        assert len(moves) == 8
        assert all(abs(p.row - 4) <= 1 and abs(p.col - 4) <= 1 for p in moves)

    def test_blocked_by_own_piece(self, make_game: MakeGame) -> None:
        pieces = {(3, 3): (W, PieceKind.ROOK), (3, 5): (W, PieceKind.PAWN)}
        moves = _moves(make_game, pieces, (3, 3))
        assert Position(3, 4) in moves
        assert Position(3, 5) not in moves
        assert Position(3, 6) not in moves

    def test_captures_enemy_and_stops(self, make_game: MakeGame) -> None:
        pieces = {(3, 3): (W, PieceKind.ROOK), (3, 5): (B, PieceKind.PAWN)}
        moves = _moves(make_game, pieces, (3, 3))
        assert Position(3, 5) in moves
        assert Position(3, 6) not in moves


class TestJumpers:
    def test_knight_in_corner(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(0, 0): (W, PieceKind.KNIGHT)}, (0, 0))
        assert moves == {Position(1, 2), Position(2, 1)}

    def test_knight_in_centre(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(4, 4): (W, PieceKind.KNIGHT)}, (4, 4))
        assert len(moves) == 8

    def test_knight_jumps_over_pieces(self) -> None:
        game = Game()
        moves = possible_moves(game, Position(0, 1))
        assert moves == {Position(2, 0), Position(2, 2)}

    def test_paladin_repeats_jump(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(0, 0): (W, PieceKind.PALADIN)}, (0, 0))
        assert moves == {Position(1, 2), Position(2, 4), Position(2, 1), Position(4, 2)}

    def test_paladin_in_centre(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(4, 4): (W, PieceKind.PALADIN)}, (4, 4))
        doubles = {Position(6, 0), Position(2, 0), Position(0, 6), Position(0, 2)}
        assert len(moves) == 12
        assert doubles <= moves

    def test_paladin_second_jump_blocked_by_first_landing(
        self, make_game: MakeGame
    ) -> None:
        pieces = {(0, 0): (W, PieceKind.PALADIN), (1, 2): (B, PieceKind.PAWN)}
        moves = _moves(make_game, pieces, (0, 0))
        assert moves == {Position(1, 2), Position(2, 1), Position(4, 2)}


class TestAsymmetricFairyPieces:
    def test_white_samurai_moves_down_the_board(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(4, 4): (W, PieceKind.SAMURAI)}, (4, 4))
        assert len(moves) == 9
        assert all(p.row > 4 for p in moves)

    def test_black_samurai_moves_up_the_board(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(4, 4): (B, PieceKind.SAMURAI)}, (4, 4))
        assert len(moves) == 11
        assert all(p.row < 4 for p in moves)

    def test_white_coward_from_corner(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(0, 0): (W, PieceKind.COWARD)}, (0, 0))
        assert len(moves) == 14

    def test_coward_never_moves_backwards(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(7, 3): (W, PieceKind.COWARD)}, (7, 3))
        assert moves == set()


class TestPawns:
    def test_white_double_step_from_start(self) -> None:
        game = Game()
        assert possible_moves(game, Position(1, 4)) == {Position(2, 4), Position(3, 4)}

    def test_black_double_step_from_start(self) -> None:
        game = Game()
        assert possible_moves(game, Position(6, 2)) == {Position(5, 2), Position(4, 2)}

    def test_single_step_off_start(self, make_game: MakeGame) -> None:
        moves = _moves(make_game, {(3, 4): (W, PieceKind.PAWN)}, (3, 4))
        assert moves == {Position(4, 4)}

    def test_forward_blocked_by_any_piece(self, make_game: MakeGame) -> None:
        pieces = {(1, 4): (W, PieceKind.PAWN), (2, 4): (B, PieceKind.KNIGHT)}
        assert _moves(make_game, pieces, (1, 4)) == set()

    def test_double_step_blocked_on_second_square(self, make_game: MakeGame) -> None:
        pieces = {(1, 0): (W, PieceKind.PAWN), (3, 0): (B, PieceKind.PAWN)}
        assert _moves(make_game, pieces, (1, 0)) == {Position(2, 0)}

    def test_diagonal_requires_enemy(self, make_game: MakeGame) -> None:
        pieces = {
            (3, 3): (W, PieceKind.PAWN),
            (4, 4): (B, PieceKind.ROOK),
            (4, 2): (W, PieceKind.ROOK),
        }
        assert _moves(make_game, pieces, (3, 3)) == {Position(4, 3), Position(4, 4)}

    def test_black_pawn_captures_upwards(self, make_game: MakeGame) -> None:
        pieces = {(4, 4): (B, PieceKind.PAWN), (3, 5): (W, PieceKind.BISHOP)}
        assert _moves(make_game, pieces, (4, 4)) == {Position(3, 4), Position(3, 5)}


class TestMoveDirection:
    def test_max_steps_limits_walk(self, make_game: MakeGame) -> None:
        game = make_game({(0, 0): (W, PieceKind.ROOK)})
        moves = move_direction(game, Position(0, 0), STRAIGHT, 2)
        assert moves == {Position(1, 0), Position(2, 0), Position(0, 1), Position(0, 2)}

    def test_stop_condition_excludes_square(self, make_game: MakeGame) -> None:
        game = make_game({(0, 0): (W, PieceKind.ROOK), (0, 3): (B, PieceKind.ROOK)})
        moves = move_direction(game, Position(0, 0), STRAIGHT, -1, pos_has_piece)
        assert Position(0, 2) in moves
        assert Position(0, 3) not in moves

    def test_generation_does_not_mutate_game(self) -> None:
        game = Game(fairy=True)
        snapshot = game.copy()
        for pos, piece in list(game.board.pieces()):
            piece.possible_moves(game, pos)
        move_direction(game, Position(0, 0), DOWNWARDS)
        assert game == snapshot
