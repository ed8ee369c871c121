#!/usr/bin/env python3
# Render catalog levels to PNGs using Pillow.
# Optional overlay of the shortest solution path.

import argparse, os
from PIL import Image, ImageDraw

from labsnake.levels import default_catalog, get_level
from labsnake.mapgen.calibrate import solve_path
from labsnake.tiles import WALL

WALL_RGB = (40, 36, 64, 255)
FLOOR_RGB = (14, 14, 22, 255)
ENTRY_RGB = (60, 120, 255, 255)
EXIT_RGB = (255, 200, 40, 255)
PATH_RGB = (40, 200, 90, 255)

def render_level(level, out_png, tile_size=16, margin=0, solution=False):
    w = level.cols * tile_size + 2*margin
    h = level.rows * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)

    def box(r, c, inset=0):
        x0 = margin + c * tile_size + inset
        y0 = margin + r * tile_size + inset
        return (x0, y0, x0 + tile_size - 1 - inset, y0 + tile_size - 1 - inset)

    for r, row in enumerate(level.grid.cells):
        for c, t in enumerate(row):
            draw.rectangle(box(r, c), fill=WALL_RGB if t == WALL else FLOOR_RGB)

    if solution:
        path = solve_path(level.grid, level.entry, level.exit)
        if path is None:
            raise SystemExit(f"level {level.id}: no path from entry to exit")
        half = tile_size // 2
        pts = [(margin + c * tile_size + half, margin + r * tile_size + half) for r, c in path]
        draw.line(pts, fill=PATH_RGB, width=max(2, tile_size // 4))

    inset = max(2, tile_size // 5)
    draw.rectangle(box(*level.entry, inset=inset), fill=ENTRY_RGB)
    draw.rectangle(box(*level.exit, inset=inset), fill=EXIT_RGB)

    os.makedirs(os.path.dirname(out_png) or ".", exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--level", type=int, default=0, help="Level id (default: all)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--solution", action="store_true", help="Draw the shortest path")
    args = ap.parse_args()

    catalog = default_catalog()
    levels = [get_level(catalog, args.level)] if args.level else list(catalog)
    for lvl in levels:
        png = os.path.join(args.outdir, f"{lvl.id:02d}.png")
        render_level(lvl, png, tile_size=args.tile, solution=args.solution)
    print(f"Wrote {len(levels)} PNG(s) to {args.outdir}")

if __name__ == "__main__":
    main()
