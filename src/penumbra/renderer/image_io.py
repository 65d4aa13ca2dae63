# renderer/image_io.py
import os
import numpy as np
from PIL import Image

def to_rgb8(buffer: np.ndarray) -> np.ndarray:
    """
    Converts a float color buffer to 8-bit: floor(clamp(c, 0, 1) * 255).
    """
    return np.floor(np.clip(buffer, 0.0, 1.0) * 255).astype(np.uint8)

def format_ppm(buffer: np.ndarray) -> str:
    """
    Formats a (height, width, 3) buffer as a plain-text P3 image: a
    "P3 <width> <height> 255" header, then one line of R G B triples per row.
    """
    height, width = buffer.shape[:2]
    pixels = to_rgb8(buffer)
    lines = [f"P3 {width} {height} 255"]
    for row in pixels:
        lines.append(" ".join(f"{r} {g} {b}" for r, g, b in row))
    return "\n".join(lines) + "\n"

def write_ppm(buffer: np.ndarray, path: str):
    with open(path, 'w') as f:
        f.write(format_ppm(buffer))

def save_image(buffer: np.ndarray, path: str):
    """Saves the buffer through Pillow; the format follows the file extension."""
    Image.fromarray(to_rgb8(buffer)).save(path)

def write_image(buffer: np.ndarray, path: str):
    """
    Writes `buffer` to `path`, as P3 text for .ppm files and through Pillow
    for any other extension.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if os.path.splitext(path)[1].lower() == '.ppm':
        write_ppm(buffer, path)
    else:
        save_image(buffer, path)
