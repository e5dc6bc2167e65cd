# app.py — browser preview of generated patterns
from __future__ import annotations
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, request, render_template, send_from_directory, jsonify

from config import CFG
from grid import Grid
from io_files import write_counts, write_pattern_view_html
from render import LABELS, render_result
from models import TILE_KINDS
from run_log import snapshot as run_snapshot
from solver.placement import generate

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


_COUNTS_FULL_PATH, COUNTS_DIR, COUNTS_FILENAME = _resolve_output_paths(
    CFG.COUNTS_OUT, "counts.txt"
)
_PATTERN_FULL_PATH, PATTERN_DIR, PATTERN_FILENAME = _resolve_output_paths(
    CFG.PATTERN_HTML, "pattern_view.html"
)

app = Flask(__name__, static_folder=None, template_folder="templates")


class BadPatternRequest(ValueError):
    pass


def _int_arg(name: str, default: Optional[int]) -> Optional[int]:
    raw = request.args.get(name, "")
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        raise BadPatternRequest(f"{name} must be an integer, got {raw!r}") from None


def _requested_grid() -> Tuple[int, int, Optional[int]]:
    rows = _int_arg("rows", CFG.ROWS)
    cols = _int_arg("cols", CFG.COLUMNS)
    seed = _int_arg("seed", CFG.SEED)
    if rows <= 0 or cols <= 0:
        raise BadPatternRequest(f"grid dimensions must be positive, got {rows}×{cols}")
    if rows * cols > CFG.MAX_CELLS:
        raise BadPatternRequest(f"grid of {rows * cols} cells exceeds the {CFG.MAX_CELLS} cell limit")
    return rows, cols, seed


def _pattern_payload(grid: Grid, seed: Optional[int]) -> Dict[str, Any]:
    counts = grid.counts
    return {
        "ok": True,
        "rows": grid.R,
        "cols": grid.C,
        "seed": seed,
        "grid": [[int(k) for k in row] for row in grid.rows()],
        "counts": {k.name: counts.get(k, 0) for k in TILE_KINDS},
        "placements": [
            {"row": p.row, "col": p.col, "kind": p.kind.name} for p in grid.placements
        ],
    }


@app.errorhandler(BadPatternRequest)
def _bad_request(err):
    return jsonify({"ok": False, "error": str(err)}), 400


@app.route("/")
def index():
    rows, cols, seed = _requested_grid()
    grid = generate(rows, cols, seed=seed)
    svg, legend = render_result(grid)

    counts_name = os.path.basename(write_counts(grid, BASE_DIR)) or COUNTS_FILENAME
    pattern_name = os.path.basename(write_pattern_view_html(svg, legend, BASE_DIR)) or PATTERN_FILENAME

    counts = grid.counts
    return render_template(
        "pattern.html",
        rows=grid.R,
        cols=grid.C,
        seed="random" if seed is None else seed,
        svg=svg,
        legend=legend,
        count_items=[(LABELS[k], counts.get(k, 0)) for k in TILE_KINDS],
        placed_count=len(grid.placements),
        counts_filename=counts_name,
        pattern_filename=pattern_name,
    )


@app.route("/pattern.json")
def pattern_json():
    rows, cols, seed = _requested_grid()
    grid = generate(rows, cols, seed=seed)
    return jsonify(_pattern_payload(grid, seed))


@app.route("/status")
def status():
    return jsonify(run_snapshot())


@app.route("/styles.css")
def styles_css():
    return send_from_directory(BASE_DIR, "styles.css")


@app.route("/download/counts")
def download_counts():
    return send_from_directory(COUNTS_DIR, COUNTS_FILENAME, as_attachment=True)


@app.route("/download/html")
def download_html():
    return send_from_directory(PATTERN_DIR, PATTERN_FILENAME, as_attachment=True)


if __name__ == "__main__":
    app.run(debug=False)
