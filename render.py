from typing import Dict, List, Tuple

from grid import Grid
from models import TileKind, TILE_KINDS

# ANSI foreground codes per kind; terminal output is always bold.
ANSI_CODES: Dict[TileKind, int] = {
    TileKind.SIZE_1X1: 31,             # red
    TileKind.SIZE_1X2_HORIZONTAL: 34,  # blue
    TileKind.SIZE_1X2_VERTICAL: 32,    # green
    TileKind.SIZE_2X2: 33,             # yellow
    TileKind.UNLAID: 37,               # white
}
_RESET = "\033[0m"

SVG_COLORS: Dict[TileKind, str] = {
    TileKind.SIZE_1X1: "rgb(200,60,60)",
    TileKind.SIZE_1X2_HORIZONTAL: "rgb(60,90,200)",
    TileKind.SIZE_1X2_VERTICAL: "rgb(60,160,80)",
    TileKind.SIZE_2X2: "rgb(210,180,40)",
}

LABELS: Dict[TileKind, str] = {
    TileKind.SIZE_1X1: "1×1",
    TileKind.SIZE_1X2_HORIZONTAL: "1×2 horizontal",
    TileKind.SIZE_1X2_VERTICAL: "1×2 vertical",
    TileKind.SIZE_2X2: "2×2",
}


def colorize(kind: TileKind, text: str) -> str:
    return f"\033[1;{ANSI_CODES[kind]}m{text}{_RESET}"


def render_terminal(grid: Grid, color: bool = True) -> str:
    lines = []
    for row in grid.rows():
        if color:
            lines.append("".join(colorize(k, str(int(k))) for k in row))
        else:
            lines.append("".join(str(int(k)) for k in row))
    return "\n".join(lines)


def format_counts(counts: Dict[TileKind, int]) -> List[str]:
    return [f"{int(k)}:{counts[k]}" for k in TILE_KINDS if counts.get(k)]


def render_result(grid: Grid, scale: int = 24) -> Tuple[str, str]:
    svg_w = grid.C * scale + 2
    svg_h = grid.R * scale + 2

    rects = []
    for p in grid.placements:
        row, col, h, w = p.to_tuple()
        x = col * scale + 1
        y = row * scale + 1
        rects.append(
            f'<rect x="{x}" y="{y}" width="{w * scale}" height="{h * scale}" '
            f'fill="{SVG_COLORS[p.kind]}" stroke="black" stroke-width="1"/>'
        )
    frame = f'<rect x="1" y="1" width="{svg_w-2}" height="{svg_h-2}" fill="none" stroke="black" stroke-width="2"/>'
    svg = (
        f'<svg class="pattern-svg" xmlns="http://www.w3.org/2000/svg" '
        f'width="{svg_w}" height="{svg_h}" '
        f'viewBox="0 0 {svg_w} {svg_h}" preserveAspectRatio="xMinYMin meet">'
        f'{"".join(rects)}{frame}</svg>'
    )

    counts = grid.counts
    legend = "".join(
        f"<li><span class='swatch' style='background:{SVG_COLORS[k]}'></span>{LABELS[k]}: {counts.get(k, 0)}</li>"
        for k in TILE_KINDS
    )
    return svg, legend
