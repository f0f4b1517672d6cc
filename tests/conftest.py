"""Shared fixtures: synthetic captcha backgrounds and their encodings"""
import base64
from io import BytesIO

import numpy as np
import pytest
from PIL import Image as PILImage

BG_WIDTH = 100
BG_HEIGHT = 50
GAP_LEFT = 60
GAP_RIGHT = 80  # exclusive
BRIGHT = 200
DARK = 60


@pytest.fixture
def gap_grid():
    """100x50 grayscale background, uniform 200 with a darker gap over columns 60..79"""
    grid = np.full((BG_HEIGHT, BG_WIDTH), BRIGHT, dtype=np.uint8)
    grid[:, GAP_LEFT:GAP_RIGHT] = DARK
    return grid


@pytest.fixture
def gap_rgb(gap_grid):
    """Same background as gap_grid, as an RGB array"""
    return np.stack([gap_grid] * 3, axis=-1)


@pytest.fixture
def slider_rgb():
    """20x50 slider piece; its pixels never matter, only its size"""
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(BG_HEIGHT, 20, 3), dtype=np.uint8)


@pytest.fixture
def png_base64():
    """Return a helper that encodes a pixel array as base64 PNG"""
    def _encode(pixels: np.ndarray, data_uri: bool = False) -> str:
        buffer = BytesIO()
        PILImage.fromarray(pixels).save(buffer, format="PNG")
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
        return f"data:image/png;base64,{encoded}" if data_uri else encoded
    return _encode
