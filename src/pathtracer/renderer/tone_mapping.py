# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def gamma_quantize_kernel(linear_image, output_image, scale):
    """
    Average, gamma-2 correct and quantize a summed linear image into RGBA8.
    """
    height = linear_image.shape[0]
    width = linear_image.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = math.sqrt(max(linear_image[y, x, c] * scale, 0.0))
                value = min(value, 1.0)
                output_image[y, x, c] = int(value * 255.0)
            output_image[y, x, 3] = 255

def to_rgba8(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Convert a (height, width, 3) array of per-pixel color sums over `samples`
    samples into an opaque (height, width, 4) uint8 image.
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    if accumulated.ndim != 3 or accumulated.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) array, got shape {accumulated.shape}")
    linear = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.empty((linear.shape[0], linear.shape[1], 4), dtype=np.uint8)
    gamma_quantize_kernel(linear, output, 1.0 / samples)
    return output
