"""Helpers for writing solver outputs to disk."""

from __future__ import annotations

import os
from typing import Optional

from config import CFG
from models import Position


def _resolve_output_path(base_dir: str, configured_name: str, fallback: str) -> str:
    """Return the absolute path where an output artifact should be written."""

    name = (configured_name or "").strip() or fallback
    if os.path.isabs(name):
        return name
    return os.path.join(base_dir, name)


def write_solution(position: Optional[Position], base_dir: str, *, pretty: bool = False) -> str:
    """Write the solution text (or ``No solution``) to the configured file."""

    path = _resolve_output_path(base_dir, CFG.SOLUTION_OUT, "solution.txt")
    os.makedirs(os.path.dirname(path), exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if position is None:
            f.write("No solution\n")
        elif pretty:
            f.write(position.pretty())
        else:
            f.write(str(position))
    return path


def write_layout_view_html(
    svg: str,
    legend_html: str,
    base_dir: str,
    *,
    grid_label: Optional[str] = None,
) -> str:
    """Write the rendered SVG/legend preview to the configured HTML file."""

    path = _resolve_output_path(base_dir, CFG.LAYOUT_HTML, "layout_view.html")
    os.makedirs(os.path.dirname(path), exist_ok=True)

    heading = f"<p>{grid_label}</p>" if grid_label else ""
    with open(path, "w", encoding="utf-8") as vf:
        vf.write(
            f"""<!doctype html>
<html><head><meta charset='utf-8'><title>Layout View</title></head>
<body class='container'>
<h1>Layout View</h1>{heading}
<section class='card'>{svg}</section>
<section class='card'><h3>Legend</h3><ul>{legend_html}</ul></section>
</body></html>"""
        )
    return path


__all__ = ["write_solution", "write_layout_view_html"]
