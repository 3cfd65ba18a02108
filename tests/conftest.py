"""Shared panorama fixtures."""
from __future__ import annotations

import numpy as np
import pytest


def make_coordinate_panorama(width: int = 360, height: int = 180) -> np.ndarray:
    """Panorama whose pixel (r, c) holds (c, r, 0), so every pixel is unique."""
    rows, cols = np.mgrid[0:height, 0:width]
    panorama = np.zeros((height, width, 3), dtype=np.uint16)
    panorama[:, :, 0] = cols
    panorama[:, :, 1] = rows
    return panorama


@pytest.fixture
def coordinate_panorama() -> np.ndarray:
    return make_coordinate_panorama()


@pytest.fixture
def noisy_panorama() -> np.ndarray:
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(180, 360, 3), dtype=np.uint8)
