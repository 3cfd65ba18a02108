"""Reading and writing panorama image files."""

from .loader import load_equirectangular_image, save_image

__all__ = [
    "load_equirectangular_image",
    "save_image",
]
