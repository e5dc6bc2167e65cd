"""Helpers for writing generated patterns to disk."""

from __future__ import annotations

import os

from config import CFG
from grid import Grid
from models import TILE_KINDS


def _resolve_output_path(base_dir: str, configured_name: str, fallback: str) -> str:
    """Return the absolute path where an output artifact should be written."""

    name = (configured_name or "").strip() or fallback
    if os.path.isabs(name):
        return name
    return os.path.join(base_dir, name)


def write_counts(grid: Grid, base_dir: str) -> str:
    """Write per-kind counts followed by every placement to the configured text file."""

    path = _resolve_output_path(base_dir, CFG.COUNTS_OUT, "counts.txt")
    os.makedirs(os.path.dirname(path), exist_ok=True)

    counts = grid.counts
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"grid {grid.R}×{grid.C}\n")
        for kind in TILE_KINDS:
            f.write(f"{kind.name}: {counts.get(kind, 0)}\n")
        for p in grid.placements:
            f.write(f"{p.kind.name} @ ({p.row},{p.col})\n")
    return path


def write_pattern_view_html(svg: str, legend_html: str, base_dir: str) -> str:
    """Write the rendered SVG/legend preview to the configured HTML file."""

    path = _resolve_output_path(base_dir, CFG.PATTERN_HTML, "pattern_view.html")
    os.makedirs(os.path.dirname(path), exist_ok=True)

    with open(path, "w", encoding="utf-8") as vf:
        vf.write(
            f"""<!doctype html>
<html><head><meta charset='utf-8'><title>Pattern View</title>
<link rel='stylesheet' href='/styles.css'></head>
<body class='container'>
<h1>Pattern View</h1>
<section class='card'>{svg}</section>
<section class='card'><h3>Legend</h3><ul>{legend_html}</ul></section>
</body></html>"""
        )
    return path


__all__ = ["write_counts", "write_pattern_view_html"]
