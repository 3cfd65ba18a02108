"""Rebuild a full-sized panorama frame from an :class:`OptimizedImage`."""
from __future__ import annotations

from typing import Optional

import numpy as np
from loguru import logger

from ..errors import ContractViolationError
from ..math.geometry import span_from_origin
from ..models.optimized_image import OptimizedImage
from ..profiling.timer import PhaseTimer
from .crop import uncrop_wrapped


def decode(opt: OptimizedImage, *, timer: Optional[PhaseTimer] = None) -> np.ndarray:
    """Paste the foveal tile onto the surround and embed it in a black frame.

    Columns outside the stored surround are filled with zeros. The returned
    array is newly allocated and shares no memory with ``opt``.

    Raises:
        ContractViolationError: If the metadata in ``opt`` is inconsistent.
    """
    opt.validate()
    width, height = opt.full_width, opt.full_height
    if opt.blurred.shape[0] != height:
        raise ContractViolationError(
            f"Blurred layer has {opt.blurred.shape[0]} rows but the panorama has {height}"
        )
    timer = timer or PhaseTimer(enabled=False)

    timer.start()
    reconstructed = opt.blurred.copy()
    tile_height, tile_width = opt.focused.shape[:2]
    reconstructed[
        opt.focus_row:opt.focus_row + tile_height,
        opt.focus_col:opt.focus_col + tile_width,
    ] = opt.focused
    timer.stop("Reconstructing")

    timer.start()
    span = span_from_origin(opt.left_buffer, reconstructed.shape[1], width)
    full_image = uncrop_wrapped(reconstructed, span)
    timer.stop("Full image")

    logger.debug(
        "Decoded {} surround of {} columns from column {} into {}x{}",
        type(span).__name__,
        span.span_width,
        opt.left_buffer,
        width,
        height,
    )
    return full_image
