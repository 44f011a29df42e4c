"""Write a small rectangular grid with rounded corners as an SVG file."""

from __future__ import annotations

import sys
from pathlib import Path

from hexlattice import Grid, Orientation


def polygon(points) -> str:
    return " ".join(f"{x:.2f},{y:.2f}" for x, y in points)


def render(grid: Grid, arc: float = 3.0) -> str:
    parts = []
    for h in grid:
        parts.append(f'<polygon points="{polygon(h.corners())}" fill="#ddd" stroke="none"/>')
        for left, right in h.arc_corners(arc):
            parts.append(
                f'<line x1="{left.x:.2f}" y1="{left.y:.2f}" '
                f'x2="{right.x:.2f}" y2="{right.y:.2f}" stroke="#888"/>'
            )
    width = grid.width + 2 * grid.config.origin.x
    height = grid.height + 2 * grid.config.origin.y
    body = "\n  ".join(parts)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.0f}" height="{height:.0f}">\n'
        f"  {body}\n</svg>\n"
    )


def main(argv: list[str]) -> None:
    orientation = Orientation.from_value(argv[1]) if len(argv) > 1 else Orientation.POINTY
    coords = [{"row": row, "col": col} for row in range(5) for col in range(7)]
    grid = Grid.from_coordinates(
        coords,
        {"orientation": orientation, "size": (20, 20), "origin": (40, 40), "gutter": 3},
    )
    out = Path("grid.svg")
    out.write_text(render(grid), encoding="utf-8")
    print(f"wrote {out} ({len(grid)} hexes)")


if __name__ == "__main__":
    main(sys.argv)
