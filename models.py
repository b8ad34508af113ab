from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple

# The maximum number of pieces the solver handles
MAX_PIECE_COUNT = 12


class Piece(IntEnum):
    """One-sided tetromino kinds."""
    I = 0  # noqa: E741
    O = 1  # noqa: E741
    T = 2
    J = 3
    L = 4
    S = 5
    Z = 6

    def __str__(self):
        return self.name


# ASCII letters only, in either case
_LETTER_TO_PIECE: Dict[str, Piece] = {
    **{p.name: p for p in Piece},
    **{p.name.lower(): p for p in Piece},
}


# ---------------- errors ----------------

class SolveOneError(ValueError):
    """Raised by ``solve_one`` when the puzzle input is malformed."""


class InvalidBoardSize(SolveOneError):
    def __init__(self):
        super().__init__("The total number of squares on the board is not a multiple of four.")


class InconsistentPieceCount(SolveOneError):
    def __init__(self):
        super().__init__(
            "The total number of squares on the board and the total number of "
            "squares in pieces don't match."
        )


class PieceCountOverLimit(SolveOneError):
    def __init__(self):
        super().__init__(f"This program can handle at most {MAX_PIECE_COUNT} tetrominoes.")


class ParsePieceCollectionError(ValueError):
    """Raised when a piece string cannot be parsed."""


class UnrecognizedCharacter(ParsePieceCollectionError):
    def __init__(self, char: str, index: int):
        self.char = char
        self.index = index
        super().__init__("The value contains unrecognized characters.")


# ---------------- pieces ----------------

class PieceCollection:
    """Multiset of one-sided tetrominoes, one counter per ``Piece``."""

    def __init__(self, counts: Iterable[int] = ()):
        self.counts: List[int] = [0] * len(Piece)
        for idx, n in enumerate(counts):
            self.counts[idx] = int(n)

    @classmethod
    def from_string(cls, s: str) -> "PieceCollection":
        pieces = cls()
        for idx, ch in enumerate(s):
            piece = _LETTER_TO_PIECE.get(ch)
            if piece is None:
                raise UnrecognizedCharacter(ch, idx)
            pieces.add(piece)
        return pieces

    def count(self, piece: Piece) -> int:
        return self.counts[piece]

    def add(self, piece: Piece) -> None:
        self.counts[piece] += 1

    def remove(self, piece: Piece) -> None:
        self.counts[piece] -= 1

    def count_all(self) -> int:
        return sum(self.counts)

    def items(self) -> List[Tuple[Piece, int]]:
        return [(p, self.counts[p]) for p in Piece if self.counts[p] > 0]

    def copy(self) -> "PieceCollection":
        return PieceCollection(self.counts)

    def __eq__(self, other):
        if not isinstance(other, PieceCollection):
            return NotImplemented
        return self.counts == other.counts

    def __str__(self):
        return "".join(p.name * n for p, n in self.items())

    def __repr__(self):
        return f"PieceCollection({str(self)!r})"


# ---------------- solved board ----------------

@dataclass(frozen=True)
class Position:
    """Snapshot of a board.

    ``squares`` holds one byte per cell: ``.`` for an empty square, ``A``,
    ``B``, ... for squares covered by the first, second, ... placed piece,
    and ``\\n`` after every row. ``kinds[i]`` is the tetromino kind of the
    piece labelled ``chr(ord("A") + i)``.
    """
    squares: bytes
    kinds: Tuple[Piece, ...] = field(default=())

    @property
    def column_count(self) -> int:
        idx = self.squares.find(b"\n")
        return idx if idx >= 0 else 0

    @property
    def row_count(self) -> int:
        return self.squares.count(b"\n")

    def rows(self) -> List[str]:
        return self.squares.decode("ascii").splitlines()

    def labels(self) -> Dict[str, Piece]:
        return {chr(ord("A") + i): kind for i, kind in enumerate(self.kinds)}

    def pretty(self) -> str:
        from render import render_pretty
        return render_pretty(self)

    def __str__(self):
        return self.squares.decode("ascii")

    def __format__(self, format_spec):
        if format_spec == "#":
            return self.pretty()
        return format(str(self), format_spec)
