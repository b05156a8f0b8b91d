"""Tests for destination generation: leaps, slides and hops."""

from collections.abc import Callable

from xbetza.core.board import GridBoard
from xbetza.core.enums import SquareState
from xbetza.core.move_generator import MoveGenerator, generate_moves, zigzag_delta
from xbetza.core.notation import compile_notation
from xbetza.core.types import Coord

Moves = Callable[[str, int, int, GridBoard], list[Coord]]

# Single file; origin at (0, 1): empty, origin, enemy, empty, friendly, empty.
LINE = GridBoard.from_rows([".", "F", "E", ".", "F", "."])

# Single file; origin at (0, 1) with one hurdle at (0, 3).
HURDLE_LINE = GridBoard.from_rows([".", "F", ".", "E", ".", "."])


# ── Leap ─────────────────────────────────────────────────────────────────────


class TestLeap:
    def test_knight_from_centre(self, moves: Moves) -> None:
        board = GridBoard.from_rows([".....", ".....", "..F..", ".....", "....."])
        assert len(moves("N", 2, 2, board)) == 8

    def test_knight_from_corner(self, moves: Moves, open_board: GridBoard) -> None:
        assert moves("N", 0, 0, open_board) == [(1, 2), (2, 1)]

    def test_friendly_square_never_eligible(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(4, 5, SquareState.FRIENDLY)
        assert moves("W", 4, 4, board) == [(3, 4), (4, 3), (5, 4)]

    def test_move_only(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(4, 5, SquareState.ENEMY)
        assert moves("mW", 4, 4, board) == [(3, 4), (4, 3), (5, 4)]

    def test_capture_only(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(4, 5, SquareState.ENEMY)
        assert moves("cW", 4, 4, board) == [(4, 5)]

    def test_must_capture_first_without_enemy(self, moves: Moves) -> None:
        assert moves("oN", 2, 2, GridBoard(5, 5)) == []

    def test_must_capture_first_with_enemy(self, moves: Moves) -> None:
        board = GridBoard(5, 5).with_square(3, 4, SquareState.ENEMY)
        assert moves("oN", 2, 2, board) == [(3, 4)]

    def test_must_not_capture_first(self, moves: Moves) -> None:
        board = GridBoard(5, 5).with_square(3, 4, SquareState.ENEMY)
        result = moves("xN", 2, 2, board)
        assert len(result) == 7
        assert (3, 4) not in result

    def test_pawn_like_piece(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(5, 5, SquareState.ENEMY)
        assert moves("fmWfcF", 4, 4, board) == [(4, 5), (5, 5)]


class TestCaptureThenLeap:
    def test_lands_beyond_enemy(self, moves: Moves) -> None:
        board = GridBoard.from_rows(
            [
                "........",
                "........",
                "........",
                "...F....",
                "........",
                "....E...",
                "........",
                "........",
            ]
        )
        assert moves("yN", 3, 3, board) == [(5, 7)]

    def test_second_stage_must_be_empty(self, moves: Moves) -> None:
        board = GridBoard(8, 8).with_square(4, 5, SquareState.ENEMY)
        board = board.with_square(5, 7, SquareState.FRIENDLY)
        assert moves("yN", 3, 3, board) == []

    def test_second_stage_off_board(self, moves: Moves) -> None:
        board = GridBoard(8, 8).with_square(4, 7, SquareState.ENEMY)
        assert moves("yN", 3, 5, board) == []

    def test_first_stage_must_be_enemy(self, moves: Moves, open_board: GridBoard) -> None:
        assert moves("yW", 4, 4, open_board) == []

    def test_wazir(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(4, 5, SquareState.ENEMY)
        assert moves("yW", 4, 4, board) == [(4, 6)]

    def test_gating_letters_ignored(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(4, 5, SquareState.ENEMY)
        assert moves("oxyW", 4, 4, board) == moves("yW", 4, 4, board)


class TestLameLeap:
    def test_blocked_leg(self, moves: Moves) -> None:
        board = GridBoard.from_rows([".....", ".....", "..F..", "..F..", "....."])
        assert len(moves("N", 2, 2, board)) == 8
        result = moves("pN", 2, 2, board)
        assert len(result) == 6
        assert (1, 4) not in result
        assert (3, 4) not in result

    def test_straight_leap_path(self, moves: Moves) -> None:
        board = GridBoard(5, 5).with_square(3, 2, SquareState.ENEMY)
        assert moves("pD", 2, 2, board) == [(0, 2), (2, 0), (2, 4)]

    def test_lame_rider(self, moves: Moves) -> None:
        clear = GridBoard.from_rows(["F", ".", ".", ".", "E", ".", "."])
        assert moves("apfD", 0, 0, clear) == [(0, 2), (0, 4)]
        blocked = GridBoard.from_rows(["F", ".", ".", "E", ".", ".", "."])
        assert moves("apfD", 0, 0, blocked) == [(0, 2)]


# ── Slide ────────────────────────────────────────────────────────────────────


class TestSlide:
    def test_rook_on_small_board(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["...", ".F.", "..."])
        assert len(moves("R", 1, 1, board)) == 4

    def test_rook_on_open_board(self, moves: Moves, open_board: GridBoard) -> None:
        assert len(moves("R", 4, 4, open_board)) == 16

    def test_enemy_stops_walk(self, moves: Moves) -> None:
        assert moves("R", 0, 1, LINE) == [(0, 0), (0, 2)]

    def test_move_only_slide(self, moves: Moves) -> None:
        assert moves("mR", 0, 1, LINE) == [(0, 0)]

    def test_capture_only_slide(self, moves: Moves) -> None:
        assert moves("cR", 0, 1, LINE) == [(0, 2)]

    def test_nightrider(self, moves: Moves, open_board: GridBoard) -> None:
        assert moves("H", 0, 0, open_board) == [
            (1, 2), (2, 1), (2, 4), (3, 6), (4, 2), (4, 8), (6, 3), (8, 4),
        ]

    def test_nightrider_blocked(self, moves: Moves, open_board: GridBoard) -> None:
        board = open_board.with_square(2, 4, SquareState.ENEMY)
        result = moves("H", 0, 0, board)
        assert (2, 4) in result
        assert (3, 6) not in result


class TestUnblockable:
    def test_passes_through_pieces(self, moves: Moves) -> None:
        board = GridBoard.from_rows([".E.", ".F.", ".E."])
        result = moves("uR", 1, 1, board)
        assert (1, 0) in result
        assert (1, 2) in result

    def test_near_and_far_side(self, moves: Moves) -> None:
        assert moves("uR", 0, 1, LINE) == [(0, 0), (0, 2), (0, 3), (0, 5)]

    def test_emission_rules_still_apply(self, moves: Moves) -> None:
        assert moves("ucR", 0, 1, LINE) == [(0, 2)]
        assert moves("muR", 0, 1, LINE) == [(0, 0), (0, 3), (0, 5)]


class TestTakeAndContinue:
    def test_continues_after_capture(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["...", ".F.", ".E.", "..."])
        result = moves("tR", 1, 1, board)
        assert (1, 2) in result
        assert (1, 3) in result

    def test_friendly_stops(self, moves: Moves) -> None:
        assert moves("tR", 0, 1, LINE) == [(0, 0), (0, 2), (0, 3)]

    def test_unblockable_overrides_friendly_stop(self, moves: Moves) -> None:
        assert moves("tuR", 0, 1, LINE) == [(0, 0), (0, 2), (0, 3), (0, 5)]


class TestZigzag:
    def test_active_delta_by_parity(self) -> None:
        pattern = ((1, 0), (0, 1))
        assert [zigzag_delta(pattern, s) for s in (1, 2, 3, 4)] == [
            (1, 0), (0, 1), (1, 0), (0, 1),
        ]

    def test_single_delta_pattern(self) -> None:
        assert zigzag_delta(((0, 1),), 5) == (0, 1)

    def test_alternates_between_first_two_deltas(self, moves: Moves) -> None:
        assert moves("azfF", 3, 0, GridBoard(7, 7)) == [(0, 3), (2, 1), (5, 2)]

    def test_single_delta_falls_back_to_slide(self, moves: Moves) -> None:
        assert moves("azfW", 3, 0, GridBoard(7, 7)) == [(3, y) for y in range(1, 7)]

    def test_blocked_zigzag(self, moves: Moves) -> None:
        board = GridBoard(7, 7).with_square(5, 2, SquareState.FRIENDLY)
        assert moves("azfF", 3, 0, board) == [(2, 1)]

    def test_clear_path_leg_from_square_actually_visited(self, moves: Moves) -> None:
        # Step two goes (2, 1) -> (5, 2); its leg square is (3, 1).
        board = GridBoard(7, 7).with_square(3, 1, SquareState.FRIENDLY)
        assert moves("apzfF", 3, 0, board) == [(2, 1)]
        assert moves("azfF", 3, 0, board) == [(0, 3), (2, 1), (5, 2)]

    def test_clear_path_zigzag_open_board(self, moves: Moves) -> None:
        assert moves("apzfF", 3, 0, GridBoard(7, 7)) == [(0, 3), (2, 1), (5, 2)]


# ── Hop ──────────────────────────────────────────────────────────────────────


class TestHop:
    def test_grasshopper_lands_beyond_first_piece(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["...", ".F.", ".E.", "..."])
        assert moves("gW", 1, 1, board) == [(1, 3)]

    def test_no_square_beyond_edge(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["...", ".F.", ".E."])
        assert moves("gW", 1, 1, board) == []

    def test_grasshopper_rider_lands_immediately(self, moves: Moves) -> None:
        assert moves("gR", 0, 1, HURDLE_LINE) == [(0, 4)]

    def test_cannon_rider_lands_once(self, moves: Moves) -> None:
        assert moves("kR", 0, 1, HURDLE_LINE) == [(0, 4)]

    def test_cannon_leaper_lands_immediately(self, moves: Moves) -> None:
        assert moves("kW", 0, 1, HURDLE_LINE) == [(0, 4)]

    def test_again_rider_hop_lands_once(self, moves: Moves) -> None:
        board = GridBoard.from_rows([".", "F", ".", "E", ".", ".", "."])
        assert moves("fakW", 0, 1, board) == [(0, 4)]
        assert moves("fagW", 0, 1, board) == [(0, 4)]

    def test_cannon_landing_square_only(self, moves: Moves) -> None:
        board = GridBoard.from_rows([".", "F", ".", "E", ".", "E"])
        assert moves("kR", 0, 1, board) == [(0, 4)]
        assert moves("ckR", 0, 1, board) == []
        assert moves("mkR", 0, 1, board) == [(0, 4)]

    def test_cannon_captures_right_after_hurdle(self, moves: Moves) -> None:
        board = GridBoard.from_rows([".", "F", ".", "E", "E", "."])
        assert moves("ckR", 0, 1, board) == [(0, 4)]
        assert moves("mkR", 0, 1, board) == []

    def test_landing_on_friendly(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["F", "E", "F"])
        assert moves("gW", 0, 0, board) == []

    def test_landing_on_enemy_captures(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["F", "E", "E"])
        assert moves("gW", 0, 0, board) == [(0, 2)]

    def test_two_hurdles(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["F", "F", "E", "."])
        assert moves("ggW", 0, 0, board) == [(0, 3)]

    def test_capture_then_leap_after_hop(self, moves: Moves) -> None:
        board = GridBoard.from_rows(["F", "F", "E", "."])
        assert moves("ygW", 0, 0, board) == [(0, 3)]


# ── Composition ──────────────────────────────────────────────────────────────


class TestGenerate:
    def test_union_of_atoms(self, moves: Moves, open_board: GridBoard) -> None:
        assert len(moves("WF", 4, 4, open_board)) == 8

    def test_duplicates_across_atoms_kept(self, open_board: GridBoard) -> None:
        result = generate_moves(compile_notation("WK"), 4, 4, open_board)
        assert len(result) == 12
        assert len(set(result)) == 8

    def test_no_atoms(self, open_board: GridBoard) -> None:
        assert generate_moves([], 4, 4, open_board) == []

    def test_repeated_calls_identical(self) -> None:
        board = GridBoard.from_rows(["..E..", ".....", "E.F.E", ".....", "..E.."])
        atoms = compile_notation("tRgBpN")
        gen = MoveGenerator(board)
        assert gen.generate(atoms, 2, 2) == gen.generate(atoms, 2, 2)

    def test_board_not_mutated(self) -> None:
        board = GridBoard.from_rows(["...", ".F.", ".E.", "..."])
        snapshot = repr(board)
        generate_moves(compile_notation("tuRygQ"), 1, 1, board)
        assert repr(board) == snapshot
