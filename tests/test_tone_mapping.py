"""Tests for averaging, gamma correction and quantization of sample sums."""

import numpy as np
import pytest

from pathtracer.renderer.tone_mapping import to_rgba8


def single_pixel(r, g, b):
    return np.array([[[r, g, b]]], dtype=np.float64)


class TestToRGBA8:
    def test_black_is_opaque(self):
        out = to_rgba8(np.zeros((2, 3, 3)), 1)
        assert out.shape == (2, 3, 4)
        assert out.dtype == np.uint8
        assert (out[:, :, :3] == 0).all()
        assert (out[:, :, 3] == 255).all()

    def test_averages_over_samples(self):
        out = to_rgba8(single_pixel(4.0, 4.0, 4.0), 4)
        assert tuple(out[0, 0]) == (255, 255, 255, 255)

    def test_clamps_per_channel(self):
        # Green averages to 0.75, below the clip: sqrt(0.75) * 255 = 220.8
        out = to_rgba8(single_pixel(9.0, 1.5, 100.0), 2)
        assert tuple(out[0, 0]) == (255, 220, 255, 255)

    def test_gamma_two_and_truncation(self):
        # sqrt(0.25) * 255 = 127.5, truncated
        out = to_rgba8(single_pixel(0.25, 0.0, 1.0), 1)
        assert tuple(out[0, 0]) == (127, 0, 255, 255)

    def test_clamps_overexposed(self):
        out = to_rgba8(single_pixel(9.0, 3.0, 100.0), 2)
        assert tuple(out[0, 0]) == (255, 255, 255, 255)

    def test_negative_is_black(self):
        out = to_rgba8(single_pixel(-1.0, -0.001, 0.0), 1)
        assert tuple(out[0, 0]) == (0, 0, 0, 255)

    def test_does_not_modify_input(self):
        linear = single_pixel(2.0, 2.0, 2.0)
        to_rgba8(linear, 2)
        assert linear[0, 0, 0] == 2.0

    @pytest.mark.parametrize("samples", [0, -3])
    def test_bad_sample_count(self, samples):
        with pytest.raises(ValueError):
            to_rgba8(np.zeros((1, 1, 3)), samples)

    @pytest.mark.parametrize("shape", [(1, 1), (1, 1, 4), (2, 2, 2)])
    def test_bad_shape(self, shape):
        with pytest.raises(ValueError):
            to_rgba8(np.zeros(shape), 1)
