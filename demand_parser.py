# demand_parser.py — puzzle input from a web form or JSON body
import re
from typing import Any, List, Optional, Tuple

from models import Piece, PieceCollection, UnrecognizedCharacter

# Accept keys like count_T, qty_t, T, pieces[T]
_KIND_KEY_RE = re.compile(r"^(?:(?:q|qty|quantity|count|cnt)_)?(?:pieces\[)?(?P<kind>[IOTJLSZ])\]?$", re.IGNORECASE | re.ASCII)

_ROW_KEYS = ("rows", "row_count", "r")
_COL_KEYS = ("columns", "column_count", "cols", "c")
_PIECE_KEYS = ("pieces", "tetrominoes", "tetrominos", "tiles")

Puzzle = Tuple[int, int, PieceCollection]


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _lookup(form_data: Any, keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if key in form_data:
            value = _first(form_data[key])
            if value is not None and str(value).strip() != "":
                return value
    return None


def _to_positive_int(value: Any) -> Optional[int]:
    try:
        n = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return n if n > 0 else None


def parse_demand(form_data: Any) -> Tuple[Optional[Puzzle], List[Tuple[str, int]], Optional[str]]:
    """
    Return (puzzle_or_None, decoded_items, error_message_or_None).
    ``puzzle`` is (row_count, column_count, pieces). Pieces come either from a
    piece string (``pieces=LLZZ``) or from per-kind counts (``count_L=2``);
    both sources add up.
    """
    if not isinstance(form_data, dict) or not form_data:
        return None, [], "nothing parsed from request"

    raw_rows = _lookup(form_data, _ROW_KEYS)
    raw_cols = _lookup(form_data, _COL_KEYS)
    row_count = _to_positive_int(raw_rows)
    if row_count is None:
        return None, [], "value of <rows> must be a positive integer"
    column_count = _to_positive_int(raw_cols)
    if column_count is None:
        return None, [], "value of <columns> must be a positive integer"

    pieces = PieceCollection()
    text = _lookup(form_data, _PIECE_KEYS)
    if text is not None:
        cleaned = re.sub(r"[\s,]+", "", str(text))
        try:
            pieces = PieceCollection.from_string(cleaned)
        except UnrecognizedCharacter:
            return None, [], "value of <tetrominoes> must be consist of letters I, O, T, J, L, S or Z only"

    for raw_k, raw_v in form_data.items():
        m = _KIND_KEY_RE.match(str(raw_k).strip())
        if not m:
            continue
        try:
            count = int(float(str(_first(raw_v)).strip()))
        except (TypeError, ValueError):
            continue
        if count <= 0:
            continue
        kind = Piece[m.group("kind").upper()]
        for _ in range(count):
            pieces.add(kind)

    decoded = fmt_decoded_items(pieces)
    return (row_count, column_count, pieces), decoded, None


def fmt_decoded_items(pieces: PieceCollection) -> List[Tuple[str, int]]:
    return [(p.name, n) for p, n in pieces.items()]
