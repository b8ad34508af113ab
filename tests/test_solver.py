from collections import Counter

import pytest

from models import (
    InconsistentPieceCount,
    InvalidBoardSize,
    Piece,
    PieceCollection,
    PieceCountOverLimit,
    UnrecognizedCharacter,
)
from puzzles import PUZZLES
from shapes import FixedPiece, base_piece, footprint
from solver.board import Board
from solver.search import Solver, solve_one

# Small fixtures keep the suite fast; the benchmark covers the rest.
SMALL_PUZZLES = [p for p in PUZZLES if p.row_count * p.column_count <= 24]

_FOOTPRINT_KIND = {footprint(fp): base_piece(fp) for fp in FixedPiece}


def _label_cells(text):
    cells = {}
    for r, line in enumerate(text.splitlines()):
        for c, ch in enumerate(line):
            cells.setdefault(ch, set()).add((r, c))
    return cells


def _normalise(cells):
    min_r = min(r for r, _ in cells)
    min_c = min(c for _, c in cells)
    return frozenset((r - min_r, c - min_c) for r, c in cells)


def assert_valid_tiling(position, rows, cols, piece_string):
    lines = position.rows()
    assert len(lines) == rows
    assert all(len(line) == cols for line in lines)
    cells = _label_cells(str(position))
    assert "." not in cells

    used = Counter()
    labels = position.labels()
    for label, squares in cells.items():
        kind = _FOOTPRINT_KIND.get(_normalise(squares))
        assert kind is not None, f"{label} is not a tetromino"
        assert labels[label] == kind
        used[kind] += 1
    assert used == Counter(Piece[ch.upper()] for ch in piece_string)
    assert sum(len(s) for s in cells.values()) == 4 * len(piece_string)


def test_single_i_piece():
    assert str(solve_one(1, 4, "I")) == "AAAA\n"


def test_known_solution_llzz():
    assert str(solve_one(4, 4, PieceCollection.from_string("LLZZ"))) == "AAAB\nACBB\nCCBD\nCDDD\n"


def test_unsatisfiable_returns_none():
    assert solve_one(1, 4, "T") is None


def test_unsatisfiable_two_s_pieces():
    assert solve_one(2, 4, "SS") is None


def test_invalid_board_size():
    with pytest.raises(InvalidBoardSize):
        solve_one(1, 3, "")


def test_inconsistent_piece_count():
    with pytest.raises(InconsistentPieceCount):
        solve_one(2, 4, "I")


def test_piece_count_over_limit():
    with pytest.raises(PieceCountOverLimit):
        solve_one(4, 13, "I" * 13)


def test_preconditions_are_checked_in_order():
    # 3 squares and a wrong count: the board size is reported first
    with pytest.raises(InvalidBoardSize):
        solve_one(1, 3, "IIIIIIIIIIIIIIII")


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        solve_one(-4, -1, "I")


def test_bad_piece_string():
    with pytest.raises(UnrecognizedCharacter):
        solve_one(1, 4, "X")


def test_empty_board_is_trivially_solved():
    position = solve_one(0, 5, "")
    assert position is not None
    assert str(position) == ""


def test_board_without_columns_is_trivially_solved():
    position = solve_one(4, 0, "")
    assert position is not None
    assert str(position) == "\n\n\n\n"
    assert position.column_count == 0
    assert position.pretty() == ""


def test_caller_collection_is_not_consumed():
    pieces = PieceCollection.from_string("LLZZ")
    solve_one(4, 4, pieces)
    assert pieces == PieceCollection.from_string("LLZZ")


def test_deterministic():
    first = solve_one(5, 4, "JLSZZ")
    second = solve_one(5, 4, "JLSZZ")
    assert first == second
    assert first.squares == second.squares


def test_failed_search_restores_state():
    board = Board(2, 4)
    pieces = PieceCollection.from_string("SS")
    start_bits = board.bits
    solver = Solver(board, pieces)
    assert solver.solve_one() is None
    assert board.bits == start_bits
    assert board.stack == []
    assert pieces == PieceCollection.from_string("SS")
    assert solver.stats["placed"] == solver.stats["backtracks"]


def test_last_stats_recorded():
    solve_one(4, 4, "LLZZ")
    stats = solve_one.last_stats
    assert stats["solved"] is True
    assert stats["placed"] - stats["backtracks"] == 4
    assert stats["attempts"] >= stats["placed"]
    assert stats["elapsed_sec"] >= 0


def test_tall_narrow_board_inside_piece_cap():
    position = solve_one(24, 2, "O" * 12)
    assert position is not None
    assert_valid_tiling(position, 24, 2, "O" * 12)


def test_vertical_i_pieces():
    assert str(solve_one(4, 2, "II")) == "AB\nAB\nAB\nAB\n"


@pytest.mark.parametrize("puzzle", SMALL_PUZZLES, ids=lambda p: p.label)
def test_reference_solutions(puzzle):
    position = solve_one(puzzle.row_count, puzzle.column_count, puzzle.tetrominoes)
    assert position is not None
    assert str(position) == puzzle.solution
    assert_valid_tiling(position, puzzle.row_count, puzzle.column_count, puzzle.tetrominoes)
