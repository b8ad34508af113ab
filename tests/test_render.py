import pytest

from models import Position
from render import BOX_CHARS, EMPTY_CHAR, _color, render_plain, render_pretty, render_result
from shapes import FixedPiece
from solver.board import Board
from solver.search import solve_one


def _pretty_after(rows, cols, pieces):
    board = Board(rows, cols)
    for fp in pieces:
        assert board.push(fp)
    return format(board.position(), "#")


def test_empty_board():
    assert _pretty_after(4, 5, []) == (
        "┌─────────┐\n"
        "│░░░░░░░░░│\n"
        "│░░░░░░░░░│\n"
        "│░░░░░░░░░│\n"
        "└─────────┘\n"
    )


def test_vertical_border():
    assert _pretty_after(4, 5, [FixedPiece.I1]) == (
        "┌─┬───────┐\n"
        "│ │░░░░░░░│\n"
        "│ │░░░░░░░│\n"
        "│ │░░░░░░░│\n"
        "└─┴───────┘\n"
    )


def test_horizontal_border():
    assert _pretty_after(5, 4, [FixedPiece.I2]) == (
        "┌───────┐\n"
        "├───────┤\n"
        "│░░░░░░░│\n"
        "│░░░░░░░│\n"
        "│░░░░░░░│\n"
        "└───────┘\n"
    )


def test_corners():
    assert _pretty_after(4, 5, [FixedPiece.Z1]) == (
        "┌───┬─────┐\n"
        "├─┐ └─┐░░░│\n"
        "│░└───┘░░░│\n"
        "│░░░░░░░░░│\n"
        "└─────────┘\n"
    )


def test_pretty_dimensions():
    position = solve_one(4, 4, "LLZZ")
    lines = position.pretty().splitlines()
    assert len(lines) == 5
    assert all(len(line) == 9 for line in lines)
    assert EMPTY_CHAR not in position.pretty()


def test_plain_is_raw_squares():
    position = solve_one(1, 4, "I")
    assert render_plain(position) == "AAAA\n" == str(position)


def test_empty_position_renders_nothing():
    assert render_pretty(Position(b"")) == ""


def _expected_glyph(lines, row, col):
    """Derive a vertex glyph straight from the plain rendering."""
    rows, cols = len(lines), len(lines[0])

    def cell(r, c):
        if 0 <= r < rows and 0 <= c < 2 * cols:
            return lines[r][c // 2]
        return None

    tl, tr = cell(row - 1, col - 1), cell(row - 1, col)
    bl, br = cell(row, col - 1), cell(row, col)
    edges = [(tl != tr, 1), (bl != br, 2), (tl != bl, 4), (tr != br, 8)]
    code = sum(bit for differs, bit in edges if differs)
    if code:
        return BOX_CHARS[code]
    return EMPTY_CHAR if br == "." else " "


@pytest.mark.parametrize(
    "rows, cols, pieces",
    [(4, 4, "LLZZ"), (5, 4, "JLSZZ"), (4, 7, "ITTJJLZ"), (6, 6, "IOOJLSSZZ")],
)
def test_pretty_matches_boundaries_of_plain(rows, cols, pieces):
    position = solve_one(rows, cols, pieces)
    lines = str(position).splitlines()
    pretty = position.pretty().splitlines()
    for r, line in enumerate(pretty):
        for c, glyph in enumerate(line):
            assert glyph == _expected_glyph(lines, r, c), (r, c)


def test_single_edge_codes_never_reached():
    position = solve_one(6, 6, "IOOJLSSZZ")
    assert "?" not in position.pretty()


def test_render_result_svg_and_legend():
    position = solve_one(4, 4, "LLZZ")
    svg, legend = render_result(position)
    assert svg.startswith("<svg")
    assert svg.count("<rect") == 16 + 1
    assert "A (L)" in legend and "B (Z)" in legend and "D (L)" in legend
    assert 'fill="rgb(240,140,20)"' in svg


def test_render_result_without_kinds_uses_label_colors():
    position = Position(b"AB\nAB\nAB\nAB\n")
    svg, legend = render_result(position)
    assert legend == ""
    assert svg == render_result(position)[0]
    assert f'fill="{_color("A")}"' in svg
    assert f'fill="{_color("B")}"' in svg
