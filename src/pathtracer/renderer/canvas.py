# renderer/canvas.py
from typing import Iterator, Tuple
import numpy as np

class Canvas:
    """
    RGBA8 pixel grid backed by a (height, width, 4) numpy array.
    Row 0 is the top of the image.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 4), dtype=np.uint8)

    @classmethod
    def from_array(cls, data: np.ndarray) -> "Canvas":
        if data.ndim != 3 or data.shape[2] != 4:
            raise ValueError(f"expected a (height, width, 4) array, got shape {data.shape}")
        canvas = cls(data.shape[1], data.shape[0])
        canvas.data[...] = data
        return canvas

    def set_pixel(self, x: int, y: int, rgba: Tuple[int, int, int, int]):
        self.data[y, x] = rgba

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.data[y, x]
        return int(r), int(g), int(b), int(a)

    def rows(self) -> Iterator[np.ndarray]:
        """Rows from top to bottom."""
        return iter(self.data)

    def rgba_bytes(self) -> bytes:
        return self.data.tobytes()
