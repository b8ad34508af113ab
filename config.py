# config.py
import os

# ======= Web solve time box =======
SOLVE_SECONDS = float(os.getenv("SG_SOLVE_SECONDS", "30"))
ISOLATE       = int(os.getenv("SG_ISOLATE", "1")) != 0

# ======= Output =======
PRETTY        = int(os.getenv("SG_PRETTY", "0")) != 0
SOLUTION_OUT  = os.getenv("SG_SOLUTION_OUT", "solution.txt")
LAYOUT_HTML   = os.getenv("SG_LAYOUT_HTML", "layout_view.html")

# ======= Logging =======
LOG_DIR   = os.getenv("SG_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("SG_LOG_LEVEL", "INFO").upper()


class CFG:
    SOLVE_SECONDS = SOLVE_SECONDS
    ISOLATE       = ISOLATE

    PRETTY       = PRETTY
    SOLUTION_OUT = SOLUTION_OUT
    LAYOUT_HTML  = LAYOUT_HTML

    LOG_DIR   = LOG_DIR
    LOG_LEVEL = LOG_LEVEL


__all__ = ["CFG"]
