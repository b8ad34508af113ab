from __future__ import annotations

import json
import logging
import os
import time
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from config import CFG

# ------------------------------
# Thread-safe global progress state
# ------------------------------

PROGRESS_LOCK = threading.Lock()


def _log_dir() -> Path:
    configured = Path(CFG.LOG_DIR or "logs")
    if configured.is_absolute():
        return configured
    return Path(__file__).resolve().parent / configured


def _state_file_path() -> Path:
    configured = os.environ.get("PROGRESS_STATE_FILE")
    if configured:
        return Path(configured)
    return _log_dir() / "progress_state.json"


STATE_FILE = _state_file_path()
STATE_FILE_TMP = STATE_FILE.with_name(STATE_FILE.name + ".tmp")
_LAST_STATE_MTIME: float = 0.0


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("solver.runs")
    if logger.handlers:
        return logger

    log_path = _log_dir() / "solver_runs.log"
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, CFG.LOG_LEVEL, logging.INFO))
        logger.propagate = False
    except Exception:
        # Without a log file the solver still runs; events are dropped.
        logger.handlers.clear()
    return logger


RUN_LOGGER = _init_logger()


def _log_enabled() -> bool:
    return bool(RUN_LOGGER.handlers)


def _fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    try:
        return f"{float(seconds):.3f}s"
    except Exception:
        return None


def _emit_log(event: str, level: int = logging.INFO, **fields: Any) -> None:
    if not _log_enabled():
        return
    extras = [
        f"{key}={value}"
        for key, value in fields.items()
        if value is not None and value != ""
    ]
    try:
        if extras:
            RUN_LOGGER.log(level, "%s | %s", event, " ".join(extras))
        else:
            RUN_LOGGER.log(level, "%s", event)
    except Exception:
        # Logging failures must never bubble back to callers.
        pass


def log_solve_started(row_count: int, column_count: int, pieces: Any) -> None:
    _emit_log("Solve started", rows=row_count, columns=column_count, pieces=str(pieces))


def log_solve_finished(status: str, stats: Optional[Dict[str, Any]] = None, *, message: Any = None) -> None:
    stats = stats or {}
    _emit_log(
        "Solve finished",
        status=status,
        duration=_fmt_seconds(stats.get("elapsed_sec")),
        attempts=stats.get("attempts"),
        placed=stats.get("placed"),
        backtracks=stats.get("backtracks"),
        message=message,
    )


def log_warning(event: str, **fields: Any) -> None:
    _emit_log(event, logging.WARNING, **fields)


def _persist_locked() -> None:
    global _LAST_STATE_MTIME
    try:
        STATE_FILE.parent.mkdir(parents=True, exist_ok=True)
        with STATE_FILE_TMP.open("w", encoding="utf-8") as fh:
            json.dump(PROGRESS, fh, ensure_ascii=False, separators=(",", ":"))
        STATE_FILE_TMP.replace(STATE_FILE)
        try:
            _LAST_STATE_MTIME = STATE_FILE.stat().st_mtime
        except OSError:
            _LAST_STATE_MTIME = time.time()
    except Exception:
        # Persistence must never break a solve.
        pass


def _load_persisted_locked(force: bool = False) -> None:
    global _LAST_STATE_MTIME
    try:
        stat = STATE_FILE.stat()
    except OSError:
        return
    if not force and stat.st_mtime <= _LAST_STATE_MTIME:
        return
    try:
        with STATE_FILE.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except Exception:
        return
    if not isinstance(data, dict):
        return
    for key in PROGRESS.keys():
        if key in data:
            PROGRESS[key] = data[key]
    _LAST_STATE_MTIME = stat.st_mtime


# Single source of truth for the result page
PROGRESS: Dict[str, Any] = {
    "status": "Idle",          # Idle | Solving | Solved | No solution | Error
    "grid": "",                # e.g. "4 × 4"
    "pieces": "",              # e.g. "LLZZ"
    "piece_count": 0,
    "elapsed_start": None,     # t0 (float) when solving started
    "elapsed": 0.0,            # seconds snapshot
    "message": "",             # optional note
    "done": False,             # run completed
    "ok": None,                # success flag if known
    "result_url": "",          # optional navigation target
    "run_id": 0,               # monotonically increasing identifier
}

# ------------------------------
# Helpers
# ------------------------------

def _now() -> float:
    return time.time()

def _fmt_elapsed(seconds: float) -> str:
    seconds = max(0.0, float(seconds))
    if seconds < 60:
        return f"{seconds:.1f}s"
    m, s = divmod(int(seconds), 60)
    if m < 60:
        return f"{m}m {s}s"
    h, m = divmod(m, 60)
    return f"{h}h {m}m"

def reset() -> None:
    with PROGRESS_LOCK:
        try:
            current_run_id = int(PROGRESS.get("run_id", 0))
        except Exception:
            current_run_id = 0
        PROGRESS.update({
            "status": "Idle",
            "grid": "",
            "pieces": "",
            "piece_count": 0,
            "elapsed_start": None,
            "elapsed": 0.0,
            "message": "",
            "done": False,
            "ok": None,
            "result_url": "",
            "run_id": current_run_id + 1,
        })
        _emit_log("Progress reset", run_id=current_run_id + 1)
        _persist_locked()

def start_timer() -> None:
    with PROGRESS_LOCK:
        PROGRESS["elapsed_start"] = _now()
        PROGRESS["elapsed"] = 0.0
        _persist_locked()

def _touch_elapsed_locked() -> None:
    t0 = PROGRESS.get("elapsed_start")
    if t0 is not None and not PROGRESS.get("done"):
        PROGRESS["elapsed"] = _now() - float(t0)

# ------------------------------
# Setters
# ------------------------------

def set_status(v: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["status"] = str(v)
        _persist_locked()

def set_puzzle(row_count: int, column_count: int, pieces: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["grid"] = f"{row_count} × {column_count}"
        PROGRESS["pieces"] = str(pieces)
        PROGRESS["piece_count"] = len(str(pieces))
        _persist_locked()

def set_result_url(url: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["result_url"] = "" if url is None else str(url)
        _persist_locked()

def set_done(ok: Any = None, *, status: Optional[str] = None, message: Any = None) -> None:
    """Mark the run complete.

    ``ok`` sets the success flag; ``status`` overrides the final status label,
    which otherwise follows ``ok`` ("Solved" / "Error").
    """

    with PROGRESS_LOCK:
        _touch_elapsed_locked()
        ok_flag = None if ok is None else bool(ok)
        if status is not None:
            PROGRESS["status"] = str(status)
        elif ok_flag is not None:
            PROGRESS["status"] = "Solved" if ok_flag else "Error"
        elif PROGRESS.get("status") in ("", "Idle", None):
            PROGRESS["status"] = "Solved"
            ok_flag = True
        if message is not None:
            PROGRESS["message"] = str(message)
        PROGRESS["done"] = True
        PROGRESS["ok"] = ok_flag
        _emit_log(
            "Run finished",
            run_id=PROGRESS.get("run_id"),
            status=PROGRESS.get("status"),
            ok=ok_flag,
            duration=_fmt_seconds(PROGRESS.get("elapsed")),
            message=PROGRESS.get("message"),
        )
        _persist_locked()

# ------------------------------
# Snapshots for the UI
# ------------------------------

def snapshot() -> Dict[str, Any]:
    with PROGRESS_LOCK:
        _load_persisted_locked()
        _touch_elapsed_locked()
        out = {k: v for k, v in PROGRESS.items() if k != "elapsed_start"}
        out["elapsed_str"] = _fmt_elapsed(PROGRESS["elapsed"])
        return out

def as_json() -> Dict[str, Any]:
    # Alias used by /progress
    return snapshot()


with PROGRESS_LOCK:
    _load_persisted_locked(force=True)
