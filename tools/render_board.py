#!/usr/bin/env python3
# Render a seeded Lights Out board to a PNG using Pillow.
# Same colours and geometry as the in-game board (see lightsout.render.board_view).

import argparse, os
from PIL import Image, ImageDraw

from lightsout.config import DEFAULTS
from lightsout.engine.state import GameSession
from lightsout.render.board_view import BoardLayout

def render_board(session, out_png, frame=DEFAULTS.frame_dimension):
    layout = BoardLayout(size=session.size, frame_dimension=frame, framebuffer_width=frame)
    side = layout.scale * session.size
    canvas = Image.new("RGB", (side, side), DEFAULTS.background)
    draw = ImageDraw.Draw(canvas)
    for x, y, (left, top, w, h) in layout.cells():
        fill = DEFAULTS.light_on if session.board.get(x, y) else DEFAULTS.light_off
        draw.rectangle((left, top, left + w - 1, top + h - 1), fill=fill, outline=DEFAULTS.cell_outline)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="Board seed (32-bit)")
    ap.add_argument("--size", type=int, default=DEFAULTS.board_size, help="Board side length")
    ap.add_argument("--strength", type=int, default=DEFAULTS.generation_strength, help="Scramble clicks")
    ap.add_argument("--frame", type=int, default=DEFAULTS.frame_dimension, help="Board side in pixels")
    ap.add_argument("--out", type=str, default="out/png/board.png", help="PNG to write")
    args = ap.parse_args()
    if args.size < 1:
        raise SystemExit("--size must be >= 1")

    session = GameSession(args.size, generation_strength=args.strength, seed=args.seed)
    render_board(session, args.out, frame=args.frame)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
