"""The two-layer foveated representation of a panorama."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..errors import ContractViolationError


@dataclass(slots=True, frozen=True)
class OptimizedImage:
    """Sharp foveal tile plus blurred surround, with the metadata to undo the crop.

    Attributes
    ----------
    focused:
        Sharp foveal tile, ``fh x fw`` pixels.
    blurred:
        The wide crop at full resolution after a downsample/upsample pass.
    focus_row, focus_col:
        Top-left corner of ``focused`` inside ``blurred``.
    full_size:
        ``(width, height)`` of the source panorama.
    left_buffer:
        Panorama column corresponding to column 0 of ``blurred``.

    Both arrays are owned by the record and are made read-only on construction.
    """

    focused: np.ndarray
    blurred: np.ndarray
    focus_row: int
    focus_col: int
    full_size: Tuple[int, int]
    left_buffer: int

    def __post_init__(self) -> None:
        # read-only views, so the caller's own arrays stay writable
        for name in ("focused", "blurred"):
            view = getattr(self, name).view()
            view.setflags(write=False)
            object.__setattr__(self, name, view)

    @property
    def size(self) -> int:
        """Bytes held by both pixel layers."""
        return int(self.focused.nbytes + self.blurred.nbytes)

    @property
    def full_width(self) -> int:
        return int(self.full_size[0])

    @property
    def full_height(self) -> int:
        return int(self.full_size[1])

    def compression_ratio(self, original: np.ndarray) -> float:
        """Return ``original.nbytes / size``; values above 1 mean savings."""
        return float(original.nbytes) / float(self.size)

    def validate(self) -> None:
        """Check the layout invariants, raising :class:`ContractViolationError`."""
        if self.focused.dtype != self.blurred.dtype or self.focused.shape[2:] != self.blurred.shape[2:]:
            raise ContractViolationError(
                f"Pixel type mismatch: focused {self.focused.dtype}{self.focused.shape[2:]} "
                f"vs blurred {self.blurred.dtype}{self.blurred.shape[2:]}"
            )

        width, height = self.full_width, self.full_height
        if width <= 0 or height <= 0:
            raise ContractViolationError(f"Full size must be positive, got {self.full_size}")

        fh, fw = self.focused.shape[:2]
        ch, cw = self.blurred.shape[:2]
        if cw > width or ch > height:
            raise ContractViolationError(
                f"Blurred layer {cw}x{ch} exceeds full size {width}x{height}"
            )
        if self.focus_row < 0 or self.focus_row + fh > ch or self.focus_col < 0 or self.focus_col + fw > cw:
            raise ContractViolationError(
                f"Foveal tile {fw}x{fh} at (row={self.focus_row}, col={self.focus_col}) "
                f"falls outside the blurred layer {cw}x{ch}"
            )
        if not 0 <= self.left_buffer < width:
            raise ContractViolationError(f"left_buffer {self.left_buffer} must lie in [0, {width})")
