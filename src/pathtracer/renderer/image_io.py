# renderer/image_io.py
import os
from typing import TextIO
from PIL import Image
from pathtracer.renderer.canvas import Canvas

def write_ppm(canvas: Canvas, stream: TextIO):
    """
    Write the canvas as ASCII PPM (P3): a header, then one "R G B" line per
    pixel from the top row down. Alpha is dropped.
    """
    stream.write(f"P3\n{canvas.width} {canvas.height}\n255\n")
    for row in canvas.rows():
        for r, g, b, _ in row:
            stream.write(f"{r} {g} {b}\n")

def save_ppm(canvas: Canvas, path: str):
    with open(path, "w", encoding="ascii", newline="\n") as f:
        write_ppm(canvas, f)

def save_png(canvas: Canvas, path: str):
    """8-bit RGBA PNG via Pillow."""
    Image.fromarray(canvas.data).save(path, format="PNG")

def save_image(canvas: Canvas, path: str):
    """Pick the encoder from the file extension: .ppm, anything else is PNG."""
    if os.path.splitext(path)[1].lower() == ".ppm":
        save_ppm(canvas, path)
    else:
        save_png(canvas, path)
