# benchmark.py — solve every known puzzle and compare with the reference solution
from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional, TextIO

from config import CFG
from models import Position
from progress import log_solve_finished, log_warning, _emit_log
from puzzles import Puzzle, select
from solver.search import solve_one


def print_outcome(out: TextIO, puzzle: Puzzle, solution: Position, pretty: bool) -> None:
    out.write(f"{puzzle.label}\n")
    out.write(f"{solution.pretty() if pretty else solution}\n")


def run(puzzles, *, quiet: bool = False, pretty: bool = False,
        stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Solve ``puzzles`` in order; return 0, or 1 at the first wrong or missing solution."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    t0 = time.perf_counter()
    for puzzle in puzzles:
        solution = solve_one(puzzle.row_count, puzzle.column_count, puzzle.tetrominoes)
        log_solve_finished(
            "solved" if solution is not None else "no solution",
            getattr(solve_one, "last_stats", None),
            message=puzzle.label,
        )
        if solution is None:
            log_warning("Benchmark failed", puzzle=puzzle.label, reason="no solution")
            stderr.write(f"{puzzle.label}\nNo solution found.\n")
            return 1

        if not quiet:
            print_outcome(stdout, puzzle, solution, pretty)

        if str(solution) != puzzle.solution:
            if quiet:
                print_outcome(stderr, puzzle, solution, pretty)
            log_warning("Benchmark failed", puzzle=puzzle.label, reason="mismatch")
            stderr.write(f"{str(solution)!r}\n\n")
            stderr.write("Solution is incorrect.\n")
            stderr.write("Expected solution:\n")
            stderr.write(f"{puzzle.solution}\n")
            return 1

    _emit_log("Benchmark finished", puzzles=len(puzzles), duration=f"{time.perf_counter() - t0:.3f}s")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sigils-benchmark",
        description="Benchmark tool for the Sigils of Elohim Solver utility.",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="No output printed to stdout")
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=CFG.PRETTY,
        help="Print the solution with box drawing characters",
    )
    parser.add_argument("--section", default="", help="Only run puzzles of this section (A, B or C)")
    parser.add_argument("--color", default="", help="Only run puzzles of this color")
    args = parser.parse_args(argv)

    return run(select(args.section, args.color), quiet=args.quiet, pretty=args.pretty)


if __name__ == "__main__":
    sys.exit(main())
