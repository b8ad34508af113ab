# app.py — web front end for the tetromino tiler
from __future__ import annotations
import os
import time
from typing import Any, Dict, Optional, Tuple

from flask import Flask, request, render_template, send_from_directory, jsonify, url_for

from config import CFG
from demand_parser import parse_demand
from io_files import write_solution, write_layout_view_html
from models import PieceCollection, Position, SolveOneError
from render import render_result
from solver.isolate import run_solve_isolated
from solver.search import solve_one

from progress import (
    reset as progress_reset,
    as_json as progress_json,
    start_timer as progress_start,
    log_solve_started, log_solve_finished, log_warning,
    set_status, set_puzzle, set_done, set_result_url,
)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _resolve_output_paths(configured: str, fallback: str) -> Tuple[str, str, str]:
    name = (configured or "").strip() or fallback
    if os.path.isabs(name):
        full_path = name
    else:
        full_path = os.path.abspath(os.path.join(BASE_DIR, name))
    directory = os.path.dirname(full_path) or BASE_DIR
    filename = os.path.basename(full_path) or fallback
    return full_path, directory, filename


_SOLUTION_FULL_PATH, SOLUTION_DIR, SOLUTION_FILENAME = _resolve_output_paths(
    CFG.SOLUTION_OUT, "solution.txt"
)
_LAYOUT_FULL_PATH, LAYOUT_DIR, LAYOUT_FILENAME = _resolve_output_paths(
    CFG.LAYOUT_HTML, "layout_view.html"
)

LAST_RESULT: Dict[str, Any] = {
    "ok": False,
    "status": "Idle",
    "message": "",
    "rows": 0,
    "columns": 0,
    "pieces": "",
    "demand_items": [],
    "plain": "",
    "pretty": "",
    "svg": "",
    "legend": "",
    "elapsed_str": "0s",
    "solution_filename": SOLUTION_FILENAME,
    "layout_filename": LAYOUT_FILENAME,
}

app = Flask(__name__, template_folder="templates")


@app.after_request
def _no_cache_progress(resp):
    if request.path == "/progress":
        resp.headers["Cache-Control"] = "no-store, max-age=0"
        resp.headers["Pragma"] = "no-cache"
        resp.headers["Expires"] = "0"
    return resp


@app.route("/")
def index():
    return render_template("index.html")


@app.route("/result/latest")
def result_latest():
    return render_template("result.html", **LAST_RESULT)


def _fmt_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds:.2f}s"
    m, s = divmod(int(seconds), 60)
    if m == 0:
        return f"{s}s"
    h, m = divmod(m, 60)
    if h == 0:
        return f"{m}m {s}s"
    return f"{h}h {m}m {s}s"


def _merge_like_mapping() -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        merged.update(payload)

    for k, v in request.form.to_dict(flat=False).items():
        merged.setdefault(k, v)
    for k, v in request.args.to_dict(flat=False).items():
        merged.setdefault(k, v)
    return merged


def _run_solver(
    rows: int, columns: int, pieces: PieceCollection
) -> Tuple[bool, Optional[Position], Dict[str, Any], Optional[str]]:
    """Return (ok, position, stats, reason); input errors propagate as ``SolveOneError``."""
    if CFG.ISOLATE:
        ok, position, stats, reason, crash_note = run_solve_isolated(
            rows, columns, pieces, CFG.SOLVE_SECONDS
        )
        if crash_note:
            log_warning("Isolated solve aborted", note=crash_note, reason=reason)
        return ok, position, stats, reason

    position = solve_one(rows, columns, pieces)
    return True, position, dict(getattr(solve_one, "last_stats", {})), None


def _respond(status_code: int = 200):
    if request.is_json:
        body = {k: LAST_RESULT[k] for k in ("ok", "status", "message", "rows", "columns", "pieces", "plain", "pretty")}
        return jsonify(body), status_code
    return render_template("result.html", **LAST_RESULT), status_code


@app.route("/solve", methods=["POST"])
def solve():
    progress_reset()
    progress_start()
    set_status("Solving")
    t0 = time.time()

    like = _merge_like_mapping()
    puzzle, decoded, err = parse_demand(like)
    LAST_RESULT.update({
        "ok": False, "plain": "", "pretty": "", "svg": "", "legend": "",
        "demand_items": decoded,
        "solution_filename": SOLUTION_FILENAME,
        "layout_filename": LAYOUT_FILENAME,
    })

    if err or puzzle is None:
        reason = f"Bad puzzle: {err or 'nothing parsed from request'}"
        set_done(False, message=reason)
        LAST_RESULT.update({
            "status": "Error", "message": reason,
            "rows": 0, "columns": 0, "pieces": "",
            "elapsed_str": _fmt_elapsed(time.time() - t0),
        })
        set_result_url(url_for("result_latest"))
        return _respond(400)

    rows, columns, pieces = puzzle
    set_puzzle(rows, columns, pieces)
    LAST_RESULT.update({"rows": rows, "columns": columns, "pieces": str(pieces)})
    log_solve_started(rows, columns, pieces)

    try:
        ok, position, stats, reason = _run_solver(rows, columns, pieces)
    except SolveOneError as e:
        log_solve_finished("error", message=e)
        set_done(False, message=str(e))
        LAST_RESULT.update({
            "status": "Error", "message": str(e),
            "elapsed_str": _fmt_elapsed(time.time() - t0),
        })
        set_result_url(url_for("result_latest"))
        return _respond(400)

    if not ok:
        log_solve_finished("error", stats, message=reason)
        set_done(False, message=reason)
        LAST_RESULT.update({
            "status": "Error", "message": reason or "Solver failed",
            "elapsed_str": _fmt_elapsed(time.time() - t0),
        })
        set_result_url(url_for("result_latest"))
        return _respond(500)

    status = "Solved" if position is not None else "No solution"
    log_solve_finished(status.lower(), stats)
    set_done(position is not None, status=status)

    write_solution(position, BASE_DIR)
    grid_label = f"{rows} × {columns}: {pieces}"
    if position is None:
        # the layout file always belongs to the latest run
        write_layout_view_html("<p>No solution</p>", "", BASE_DIR, grid_label=grid_label)
    else:
        svg, legend = render_result(position)
        write_layout_view_html(svg, legend, BASE_DIR, grid_label=grid_label)
        LAST_RESULT.update({
            "plain": str(position), "pretty": position.pretty(),
            "svg": svg, "legend": legend,
        })

    LAST_RESULT.update({
        "ok": position is not None,
        "status": status,
        "message": "",
        "elapsed_str": _fmt_elapsed(time.time() - t0),
    })
    set_result_url(url_for("result_latest"))
    return _respond(200)


@app.route("/download/solution")
def download_solution():
    return send_from_directory(SOLUTION_DIR, SOLUTION_FILENAME, as_attachment=True)


@app.route("/download/html")
def download_html():
    return send_from_directory(LAYOUT_DIR, LAYOUT_FILENAME, as_attachment=True)


@app.route("/progress")
def progress():
    return jsonify(progress_json())


if __name__ == "__main__":
    app.run(debug=False)
