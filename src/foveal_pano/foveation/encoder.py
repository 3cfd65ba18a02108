"""Split a panorama into a sharp foveal tile and a blurred surround."""
from __future__ import annotations

import math
from typing import Optional, Tuple

import cv2
import numpy as np
from loguru import logger

from ..errors import ContractViolationError
from ..math.geometry import clamp, column_span, h_angle_to_col, normalize_angle, v_angle_to_row
from ..models.foveation_config import DEFAULT_CONFIG, FoveationConfig
from ..models.optimized_image import OptimizedImage
from ..profiling.timer import PhaseTimer
from .crop import crop_wrapped

# Element types cv2.resize can interpolate bilinearly.
RESIZABLE_DTYPES = frozenset(
    np.dtype(t) for t in (np.uint8, np.uint16, np.int16, np.float32, np.float64)
)


def encode(
    image: np.ndarray,
    h_angle: float,
    v_angle: float,
    *,
    config: FoveationConfig = DEFAULT_CONFIG,
    timer: Optional[PhaseTimer] = None,
) -> OptimizedImage:
    """Encode ``image`` for a viewer looking at ``(h_angle, v_angle)`` degrees.

    The horizontal angle is folded into [0, 360). The vertical angle is not
    normalised; the fovea slides so it always stays inside the image.

    Raises:
        TypeError: If ``image`` is not a numpy array.
        ContractViolationError: If the image or ``config`` cannot produce a
            well-formed :class:`OptimizedImage`.
    """
    _check_image(image)
    config.validate()
    timer = timer or PhaseTimer(enabled=False)

    height, width = image.shape[:2]
    angle_to_width = width / 360.0
    angle_to_height = height / 180.0
    h_angle = normalize_angle(h_angle)

    focus_width = math.floor(config.h_focus_angle * angle_to_width)
    focus_height = math.floor(config.v_focus_angle * angle_to_height)
    if focus_width < 1 or focus_height < 1:
        raise ContractViolationError(
            f"Panorama {width}x{height} is too small for a "
            f"{config.h_focus_angle}x{config.v_focus_angle} degree fovea"
        )

    left_col = h_angle_to_col(h_angle - config.crop_angle / 2, width)
    right_col = h_angle_to_col(h_angle + config.crop_angle / 2, width)

    timer.start()
    cropped = crop_wrapped(image, column_span(left_col, right_col, width))
    timer.stop("Cropping")

    crop_width = cropped.shape[1]
    small_size = (crop_width // config.blur_factor, height // config.blur_factor)
    if min(small_size) < 1:
        raise ContractViolationError(
            f"Blur factor {config.blur_factor} is too large for a {crop_width}x{height} crop"
        )

    timer.start()
    focus_left_col, focus_right_col = _focus_columns(crop_width, focus_width)
    timer.stop("Splitting (H)")

    timer.start()
    focus_top_row, focus_bottom_row = _focus_rows(v_angle, height, focus_height)
    focused = cropped[focus_top_row:focus_bottom_row, focus_left_col:focus_right_col].copy()
    timer.stop("Splitting (V)")

    timer.start()
    blurred = _blur(cropped, small_size)
    timer.stop("Blurring")

    logger.debug(
        "Encoded gaze ({}, {}) on {}x{}: crop columns [{}, {}), fovea {}x{} at row {} col {}",
        h_angle,
        v_angle,
        width,
        height,
        left_col,
        right_col,
        focused.shape[1],
        focused.shape[0],
        focus_top_row,
        focus_left_col,
    )
    return OptimizedImage(
        focused=focused,
        blurred=blurred,
        focus_row=focus_top_row,
        focus_col=focus_left_col,
        full_size=(width, height),
        left_buffer=left_col,
    )


def _check_image(image: np.ndarray) -> None:
    if not isinstance(image, np.ndarray):
        raise TypeError(f"Panorama must be a numpy array, got {type(image).__name__}")
    if image.ndim not in (2, 3):
        raise ContractViolationError(f"Panorama must be 2-D or 3-D, got shape {image.shape}")
    if image.shape[0] <= 0 or image.shape[1] <= 0 or image.size == 0:
        raise ContractViolationError(f"Panorama is empty (shape {image.shape})")
    if image.dtype not in RESIZABLE_DTYPES:
        raise ContractViolationError(f"Unsupported pixel type {image.dtype}")


def _focus_columns(crop_width: int, focus_width: int) -> Tuple[int, int]:
    """Centre the fovea horizontally inside the crop (truncating)."""
    left = crop_width // 2 - focus_width // 2
    right = crop_width // 2 + focus_width // 2
    if not 0 <= left <= right < crop_width:
        raise ContractViolationError(
            f"Fovea of {focus_width} columns does not fit a {crop_width} column crop"
        )
    return left, right


def _focus_rows(v_angle: float, height: int, focus_height: int) -> Tuple[int, int]:
    """Centre the fovea on ``v_angle``, sliding it back inside the image at the poles."""
    half = focus_height // 2
    middle = clamp(v_angle_to_row(v_angle, height), half, height - half)
    return middle - half, middle + half


def _blur(cropped: np.ndarray, small_size: Tuple[int, int]) -> np.ndarray:
    """Downsample then upsample with bilinear interpolation."""
    crop_height, crop_width = cropped.shape[:2]
    small = cv2.resize(cropped, small_size)
    blurred = cv2.resize(small, (crop_width, crop_height))
    # OpenCV drops a trailing single channel axis
    return np.ascontiguousarray(blurred.reshape(cropped.shape))
