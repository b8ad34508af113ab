# solver/board.py — bitboard with a sentinel column after every row
from __future__ import annotations

from typing import List, Tuple

from models import MAX_PIECE_COUNT, Piece, Position
from shapes import FIXED_PIECES, FixedPiece, base_piece, piece_shape

# Nominal width of the occupancy word
BOARD_BITS = 64


def _lowest_set_bit(value: int) -> int:
    return (value & -value).bit_length() - 1


class Board:
    """Occupancy of a ``row_count`` × ``column_count`` grid as one integer.

    Bit ``width * row + column`` is square ``(row, column)``. ``width`` is
    ``column_count + 1``: the extra column on the right of each row is always
    occupied, so a shifted piece can never wrap from one row into the next.
    Every bit at or beyond ``width * height`` is occupied as well, which makes
    "off the board", "sentinel" and "overlap" the same test.
    """

    def __init__(self, row_count: int, column_count: int):
        self.width = int(column_count) + 1
        self.height = int(row_count)
        area = self.width * self.height
        # narrow tall boards within the piece cap can need more than 64 bits
        self.capacity = max(BOARD_BITS, area)
        self.full = (1 << self.capacity) - 1

        bits = self.full & ~((1 << area) - 1)
        for b in range(self.width - 1, area, self.width):
            bits |= 1 << b
        self.bits = bits

        # without columns every square is a sentinel and nothing can be placed
        self.bitmaps: Tuple[int, ...] = tuple(
            self._shape_bitmap(fp) for fp in FIXED_PIECES
        ) if column_count > 0 else ()
        self.stack: List[Tuple[int, Piece]] = []

    def _shape_bitmap(self, fixed_piece: FixedPiece) -> int:
        bitmap = 1
        for row, col in piece_shape(fixed_piece):
            bitmap |= 1 << (self.width * row + col)
        return bitmap

    def first_empty_square(self) -> int:
        """Index of the lowest unoccupied bit, or ``capacity`` when the board is full."""
        free = self.full ^ self.bits
        if not free:
            return self.capacity
        return _lowest_set_bit(free)

    def push(self, fixed_piece: FixedPiece) -> bool:
        """Place ``fixed_piece`` anchored on the first empty square.

        Returns False, leaving the board untouched, when the piece does not fit.
        """
        if len(self.stack) >= MAX_PIECE_COUNT:
            raise OverflowError(f"placement stack is limited to {MAX_PIECE_COUNT} pieces")
        if self.is_complete():
            return False
        bitmap = self.bitmaps[fixed_piece] << self.first_empty_square()
        if bitmap & self.bits or bitmap > self.full:
            return False
        self.bits |= bitmap
        self.stack.append((bitmap, base_piece(fixed_piece)))
        return True

    def pop(self) -> Piece:
        if not self.stack:
            raise IndexError("pop from an empty placement stack")
        bitmap, piece = self.stack.pop()
        self.bits &= ~bitmap
        return piece

    def is_complete(self) -> bool:
        return self.bits == self.full

    def position(self) -> Position:
        squares = bytearray(b"." * (self.width * self.height))

        for index, (bitmap, _) in enumerate(self.stack):
            shift = _lowest_set_bit(bitmap)
            # linear scan keeps the lookup order identical to the push order
            fixed_piece = FIXED_PIECES[self.bitmaps.index(bitmap >> shift)]
            marker = ord("A") + index
            squares[shift] = marker
            for row, col in piece_shape(fixed_piece):
                squares[shift + self.width * row + col] = marker

        for i in range(self.width - 1, len(squares), self.width):
            squares[i] = ord("\n")

        return Position(bytes(squares), tuple(piece for _, piece in self.stack))
