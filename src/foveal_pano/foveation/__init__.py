"""Foveated encode/decode of equirectangular panoramas."""
from __future__ import annotations

import numpy as np

from ..models.foveation_config import DEFAULT_CONFIG, FoveationConfig
from ..models.optimized_image import OptimizedImage
from .crop import crop_wrapped, uncrop_wrapped
from .decoder import decode
from .encoder import encode


def process(
    image: np.ndarray,
    h_angle: float,
    v_angle: float,
    *,
    config: FoveationConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """Encode then decode ``image``; handy for eyeballing the foveation."""
    return decode(encode(image, h_angle, v_angle, config=config))


def size(opt: OptimizedImage) -> int:
    """Bytes held by the two pixel layers of ``opt``."""
    return opt.size


__all__ = [
    "crop_wrapped",
    "decode",
    "encode",
    "process",
    "size",
    "uncrop_wrapped",
]
