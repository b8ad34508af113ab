# cli.py — command line front end
from __future__ import annotations

import argparse
import os
import sys
from typing import List, NoReturn, Optional

from config import CFG
from io_files import write_solution
from models import PieceCollection, SolveOneError, UnrecognizedCharacter
from progress import log_solve_finished, log_solve_started
from solver.search import solve_one

TETROMINOES_HELP = (
    "A string consisting the names of the one-sided tetrominoes to tile. "
    "For example, 'IIOL' means two I tetrominoes, one O and one L tetromino. "
    "See https://en.wikipedia.org/wiki/Tetromino#One-sided_tetrominoes "
    "for images of the one-sided tetrominoes with names."
)


def _positive_int(value: str) -> Optional[int]:
    # plain ASCII digits only: no sign, whitespace or underscores
    if not (value.isascii() and value.isdigit()):
        return None
    n = int(value)
    return n if n > 0 else None


def _exit_with_error(message) -> NoReturn:
    print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigils-solver",
        description="Solves puzzles from the video game 'Sigils of Elohim'",
    )
    parser.add_argument("rows", help="The number of grid rows")
    parser.add_argument("columns", help="The number of grid columns")
    parser.add_argument("tetrominoes", help=TETROMINOES_HELP)
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=CFG.PRETTY,
        help="Print the solution with box drawing characters",
    )
    parser.add_argument("--out", metavar="DIR", help="Also write the solution text file into DIR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    row_count = _positive_int(args.rows)
    if row_count is None:
        _exit_with_error("value of <rows> must be a positive integer")
    column_count = _positive_int(args.columns)
    if column_count is None:
        _exit_with_error("value of <columns> must be a positive integer")

    try:
        pieces = PieceCollection.from_string(args.tetrominoes)
    except UnrecognizedCharacter:
        _exit_with_error(
            "value of <tetrominoes> must be consist of letters I, O, T, J, L, S or Z only"
        )

    log_solve_started(row_count, column_count, pieces)
    try:
        solution = solve_one(row_count, column_count, pieces)
    except SolveOneError as e:
        log_solve_finished("error", message=e)
        _exit_with_error(e)
    log_solve_finished(
        "solved" if solution is not None else "no solution",
        getattr(solve_one, "last_stats", None),
    )

    if solution is None:
        print("No solution")
    elif args.pretty:
        print(solution.pretty())
    else:
        print(solution)

    if args.out:
        write_solution(solution, os.path.abspath(args.out), pretty=args.pretty)
    return 0


if __name__ == "__main__":
    sys.exit(main())
