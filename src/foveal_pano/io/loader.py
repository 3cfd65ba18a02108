"""File loading and saving for panorama frames."""
from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
from loguru import logger


def load_equirectangular_image(path: Path) -> np.ndarray:
    """Load an equirectangular panorama as an RGB uint8 array."""
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None:
        raise FileNotFoundError(f"Unable to read panorama image: {path}")
    image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    logger.debug("Loaded panorama image {} with shape {}", path, image.shape)
    return image


def save_image(path: Path, image: np.ndarray) -> None:
    """Write an RGB (or single channel) array, creating parent folders as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if image.ndim == 3 and image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(str(path), image):
        raise OSError(f"Unable to write image: {path}")
    logger.debug("Saved image {} with shape {}", path, image.shape)
