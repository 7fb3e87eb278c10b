# src/tombcrawl/render/snapshot.py
# Write the current frame to a PNG with Pillow (debugging, docs, CI artifacts).

import os
from typing import List

from PIL import Image, ImageDraw, ImageFont

from ..engine.state import GameState
from .frame import BLACK, Cell, build_frame


def frame_image(frame: List[List[Cell]], cell: int = 8) -> Image.Image:
    h = len(frame)
    w = len(frame[0]) if h else 0
    img = Image.new("RGB", (w * cell, h * cell), BLACK)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    for y, row in enumerate(frame):
        for x, c in enumerate(row):
            x0, y0 = x * cell, y * cell
            if c.bg is not None:
                draw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=c.bg)
            if c.glyph.strip():
                draw.text((x0 + 1, y0 - 1), c.glyph, fill=c.fg, font=font)
    return img


def save_png(state: GameState, path: str, cell: int = 8) -> str:
    img = frame_image(build_frame(state), cell=cell)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(path)
    return path
