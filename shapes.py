# shapes.py — the 19 fixed tetrominoes
from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

from models import Piece


class FixedPiece(IntEnum):
    """Rotation variants of the one-sided tetrominoes.

    ``X1`` is piece X in standard position, ``X2`` is X1 rotated 90° clockwise,
    ``X3`` is 180° and ``X4`` is 270°. The declaration order is the order the
    solver tries placements in.
    """
    I1 = 0
    I2 = 1
    O1 = 2
    T1 = 3
    T2 = 4
    T3 = 5
    T4 = 6
    J1 = 7
    J2 = 8
    J3 = 9
    J4 = 10
    L1 = 11
    L2 = 12
    L3 = 13
    L4 = 14
    S1 = 15
    S2 = 16
    Z1 = 17
    Z2 = 18


PieceShape = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

# (row, column) offsets from the anchor square, which is the top-left square
# of the tetromino. The anchor itself is not listed. Some shapes hang to the
# left of their anchor, e.g. J1 and L4.
#
#        ------------------
#        | 0,0 | 0,1 | 0,2
# -------|----------------
# | 1,-1 | 1,0 | 1,1 | 1,2
# -------|----------------
# | 2,-1 | 2,0 | 2,1 | 2,2
#
PIECE_SHAPES: Dict[FixedPiece, PieceShape] = {
    FixedPiece.I1: ((1, 0), (2, 0), (3, 0)),
    FixedPiece.I2: ((0, 1), (0, 2), (0, 3)),
    FixedPiece.O1: ((0, 1), (1, 1), (1, 0)),
    FixedPiece.T1: ((0, 1), (0, 2), (1, 1)),
    FixedPiece.T2: ((1, 0), (1, -1), (2, 0)),
    FixedPiece.T3: ((1, -1), (1, 0), (1, 1)),
    FixedPiece.T4: ((1, 0), (1, 1), (2, 0)),
    FixedPiece.J1: ((1, 0), (2, -1), (2, 0)),
    FixedPiece.J2: ((1, 0), (1, 1), (1, 2)),
    FixedPiece.J3: ((0, 1), (1, 0), (2, 0)),
    FixedPiece.J4: ((0, 1), (0, 2), (1, 2)),
    FixedPiece.L1: ((1, 0), (2, 0), (2, 1)),
    FixedPiece.L2: ((0, 1), (0, 2), (1, 0)),
    FixedPiece.L3: ((0, 1), (1, 1), (2, 1)),
    FixedPiece.L4: ((1, -2), (1, -1), (1, 0)),
    FixedPiece.S1: ((0, 1), (1, -1), (1, 0)),
    FixedPiece.S2: ((1, 0), (1, 1), (2, 1)),
    FixedPiece.Z1: ((0, 1), (1, 1), (1, 2)),
    FixedPiece.Z2: ((1, -1), (1, 0), (2, -1)),
}

PIECE_MAP: Dict[FixedPiece, Piece] = {
    FixedPiece.I1: Piece.I,
    FixedPiece.I2: Piece.I,
    FixedPiece.O1: Piece.O,
    FixedPiece.T1: Piece.T,
    FixedPiece.T2: Piece.T,
    FixedPiece.T3: Piece.T,
    FixedPiece.T4: Piece.T,
    FixedPiece.J1: Piece.J,
    FixedPiece.J2: Piece.J,
    FixedPiece.J3: Piece.J,
    FixedPiece.J4: Piece.J,
    FixedPiece.L1: Piece.L,
    FixedPiece.L2: Piece.L,
    FixedPiece.L3: Piece.L,
    FixedPiece.L4: Piece.L,
    FixedPiece.S1: Piece.S,
    FixedPiece.S2: Piece.S,
    FixedPiece.Z1: Piece.Z,
    FixedPiece.Z2: Piece.Z,
}

# Every variant must have a shape and a base kind.
if set(PIECE_SHAPES) != set(FixedPiece) or set(PIECE_MAP) != set(FixedPiece):
    raise RuntimeError("fixed piece tables are incomplete")

FIXED_PIECES: Tuple[FixedPiece, ...] = tuple(FixedPiece)


def piece_shape(fixed_piece: FixedPiece) -> PieceShape:
    return PIECE_SHAPES[fixed_piece]


def base_piece(fixed_piece: FixedPiece) -> Piece:
    return PIECE_MAP[fixed_piece]


def footprint(fixed_piece: FixedPiece) -> frozenset:
    """All four squares of the variant, translated so the bounding box starts at (0, 0)."""
    cells = [(0, 0)] + list(PIECE_SHAPES[fixed_piece])
    min_r = min(r for r, _ in cells)
    min_c = min(c for _, c in cells)
    return frozenset((r - min_r, c - min_c) for r, c in cells)
