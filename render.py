import random
from typing import Dict, List, Optional, Tuple

from models import Piece, Position

# Indexed by a 4-bit code: up=1, down=2, left=4, right=8. A set bit means the
# two cells on either side of that edge of the vertex carry different labels.
BOX_CHARS = (
    " ",  # 0000
    "?",  # 0001 up
    "?",  # 0010 down
    "│",  # 0011
    "?",  # 0100 left
    "┘",  # 0101
    "┐",  # 0110
    "┤",  # 0111
    "?",  # 1000 right
    "└",  # 1001
    "┌",  # 1010
    "├",  # 1011
    "─",  # 1100
    "┴",  # 1101
    "┬",  # 1110
    "┼",  # 1111
)
EMPTY_CHAR = "░"


def render_plain(position: Position) -> str:
    return position.squares.decode("ascii")


def render_pretty(position: Position) -> str:
    """Box-drawing rendering: ``rows + 1`` lines of ``2 * columns + 1`` characters.

    Every cell is stretched to two characters wide; each output character sits
    on a vertex of that stretched grid and shows which of its four edges
    separate different pieces. Empty cells that lie on no boundary are shaded.
    """
    squares = position.squares
    column_count = position.column_count
    if column_count == 0:
        return ""
    row_count = len(squares) // (column_count + 1)

    def get(row: int, col: int) -> Optional[int]:
        if row < 0 or row >= row_count or col < 0 or col >= 2 * column_count:
            return None
        return squares[row * (column_count + 1) + col // 2]

    lines: List[str] = []
    for row in range(row_count + 1):
        chars: List[str] = []
        for col in range(2 * column_count + 1):
            top_left = get(row - 1, col - 1)
            top_right = get(row - 1, col)
            bottom_left = get(row, col - 1)
            bottom_right = get(row, col)

            code = (
                (1 if top_left != top_right else 0)
                + (2 if bottom_left != bottom_right else 0)
                + (4 if top_left != bottom_left else 0)
                + (8 if top_right != bottom_right else 0)
            )

            if code > 0:
                chars.append(BOX_CHARS[code])
            elif bottom_right == ord("."):
                chars.append(EMPTY_CHAR)
            else:
                chars.append(" ")
        lines.append("".join(chars) + "\n")
    return "".join(lines)


# ---------------- SVG layout ----------------

_KIND_COLORS: Dict[Piece, str] = {
    Piece.I: "rgb(0,190,220)",
    Piece.O: "rgb(235,200,0)",
    Piece.T: "rgb(160,60,200)",
    Piece.J: "rgb(40,80,220)",
    Piece.L: "rgb(240,140,20)",
    Piece.S: "rgb(60,190,70)",
    Piece.Z: "rgb(220,50,50)",
}


def _color(name: str) -> str:
    rng = random.Random(name)
    r = rng.randint(40, 200)
    g = rng.randint(40, 200)
    b = rng.randint(40, 200)
    return f"rgb({r},{g},{b})"


def render_result(position: Position, scale: int = 48) -> Tuple[str, str]:
    """Return ``(svg, legend_html)`` for a position, one coloured square per cell."""
    labels = position.labels()
    palette: Dict[str, str] = {label: _KIND_COLORS[kind] for label, kind in labels.items()}

    rows = position.rows()
    svg_w = position.column_count * scale + 2
    svg_h = position.row_count * scale + 2

    rects = []
    for y, line in enumerate(rows):
        for x, label in enumerate(line):
            if label == ".":
                fill = "#eee"
                text = ""
            else:
                fill = palette.get(label) or _color(label)
                text = f'<text x="{x * scale + 4}" y="{y * scale + 14}" font-size="12" fill="black">{label}</text>'
            rects.append(
                f'<rect x="{x * scale + 1}" y="{y * scale + 1}" width="{scale}" height="{scale}" '
                f'fill="{fill}" stroke="black" stroke-width="1"/>{text}'
            )
    grid = f'<rect x="1" y="1" width="{svg_w - 2}" height="{svg_h - 2}" fill="none" stroke="black" stroke-width="2"/>'
    svg = (
        f'<svg class="layout-svg" xmlns="http://www.w3.org/2000/svg" '
        f'width="{svg_w}" height="{svg_h}" '
        f'viewBox="0 0 {svg_w} {svg_h}" preserveAspectRatio="xMinYMin meet">'
        f'{"".join(rects)}{grid}</svg>'
    )

    legend = "".join(
        f"<li><span class='swatch' style='background:{palette[label]}'></span>{label} ({kind.name})</li>"
        for label, kind in labels.items()
    )
    return svg, legend
