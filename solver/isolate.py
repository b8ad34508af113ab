# solver/isolate.py — time-boxed solve in a child process
import multiprocessing as mp
from typing import Dict, Optional, Tuple
import traceback

from models import PieceCollection, Position
from solver.search import check_preconditions


# Worker must be top-level (picklable on Windows spawn)
def _solve_worker(q, row_count: int, column_count: int, pieces: str):
    try:
        from solver.search import solve_one  # import inside child
        position = solve_one(row_count, column_count, pieces)
        stats = getattr(solve_one, "last_stats", {})
        q.put(("ok", position, dict(stats), None))
    except MemoryError:
        q.put(("err", None, {}, "Child ran out of memory"))
    except Exception as e:
        q.put(("exc", None, {}, f"{e}\n{traceback.format_exc()}"))


def run_solve_isolated(
    row_count: int,
    column_count: int,
    pieces: PieceCollection,
    max_seconds: float,
) -> Tuple[bool, Optional[Position], Dict, Optional[str], Optional[str]]:
    """
    Returns (ok, position, stats, reason, crash_note).
    ok is True when the search ran to the end; position is then None for an
    unsolvable puzzle. crash_note is non-empty only if the child
    crashed/was killed/timed out. Input errors are raised here, before any
    process is started.
    """
    check_preconditions(row_count, column_count, pieces)

    ctx = mp.get_context("spawn")  # safest on Windows
    q = ctx.Queue()
    p = ctx.Process(target=_solve_worker, args=(q, row_count, column_count, str(pieces)))
    p.daemon = True
    p.start()

    # The queue is read before joining so a large result cannot block the child.
    try:
        tag, position, stats, reason = q.get(timeout=float(max_seconds))
    except Exception:
        tag = None

    if tag is None:
        if p.is_alive():
            p.terminate()
            p.join(2.0)
            return False, None, {}, "Stopped before solution (timebox)", "killed: timeout"
        p.join(2.0)
        if p.exitcode not in (0, None):
            return False, None, {}, f"Stopped before solution (child exit {p.exitcode})", "child crashed"
        return False, None, {}, "No result from child process", "no-result"

    p.join(2.0)
    if tag == "ok":
        return True, position, stats, None, None
    return False, None, {}, reason, None
