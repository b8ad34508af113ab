# solver/search.py — depth-first tiler anchored on the first empty square
from __future__ import annotations

import time
from typing import Dict, Optional, Union

from models import (
    MAX_PIECE_COUNT,
    InconsistentPieceCount,
    InvalidBoardSize,
    PieceCollection,
    PieceCountOverLimit,
    Position,
)
from shapes import FIXED_PIECES, base_piece
from solver.board import Board


class Solver:
    """Backtracking search over one board and one piece collection.

    Both are mutated in place: every push and count decrement made while
    exploring a branch is undone before the next sibling branch is tried.
    """

    def __init__(self, board: Board, pieces: PieceCollection):
        self.board = board
        self.pieces = pieces
        self.stats: Dict[str, int] = {"attempts": 0, "placed": 0, "backtracks": 0}

    def solve_one(self) -> Optional[Position]:
        if self.board.is_complete():
            return self.board.position()

        for fixed_piece in FIXED_PIECES:
            kind = base_piece(fixed_piece)
            if self.pieces.count(kind) == 0:
                continue
            self.stats["attempts"] += 1
            if not self.board.push(fixed_piece):
                continue
            self.stats["placed"] += 1
            self.pieces.remove(kind)
            solution = self.solve_one()
            if solution is not None:
                return solution
            self.board.pop()
            self.pieces.add(kind)
            self.stats["backtracks"] += 1

        return None


def check_preconditions(row_count: int, column_count: int, pieces: PieceCollection) -> None:
    """Raise the ``SolveOneError`` matching the first failed precondition."""
    if row_count < 0 or column_count < 0:
        raise ValueError("row_count and column_count must not be negative")
    square_count = row_count * column_count
    if square_count % 4 != 0:
        raise InvalidBoardSize()
    piece_count = pieces.count_all()
    if 4 * piece_count != square_count:
        raise InconsistentPieceCount()
    if piece_count > MAX_PIECE_COUNT:
        raise PieceCountOverLimit()


def solve_one(
    row_count: int,
    column_count: int,
    pieces: Union[PieceCollection, str],
) -> Optional[Position]:
    """Find one tiling of the board, or return None when there is none.

    ``pieces`` may be a ``PieceCollection`` or a piece string such as
    ``"LLZZ"``; the caller's collection is left unchanged. Raises a
    ``SolveOneError`` subclass for malformed input and
    ``UnrecognizedCharacter`` for a bad piece string.
    """
    if isinstance(pieces, str):
        pieces = PieceCollection.from_string(pieces)
    else:
        pieces = pieces.copy()
    check_preconditions(row_count, column_count, pieces)

    t0 = time.perf_counter()
    solver = Solver(Board(row_count, column_count), pieces)
    solution = solver.solve_one()
    stats = dict(solver.stats)
    stats["elapsed_sec"] = time.perf_counter() - t0
    stats["solved"] = solution is not None
    setattr(solve_one, "last_stats", stats)
    return solution
