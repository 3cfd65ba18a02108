"""Angular window and blur settings for the foveation encoder."""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral

from ..errors import ContractViolationError

CROP_ANGLE = 180  # degrees, horizontal extent of the blurred surround
H_FOCUS_ANGLE = 30  # degrees, horizontal extent of the sharp fovea
V_FOCUS_ANGLE = 30  # degrees, vertical extent of the sharp fovea
BLUR_FACTOR = 3  # linear downsample ratio used to blur the surround


@dataclass(slots=True, frozen=True)
class FoveationConfig:
    """Window sizes threaded through :func:`foveal_pano.foveation.encode`."""

    crop_angle: float = CROP_ANGLE
    h_focus_angle: float = H_FOCUS_ANGLE
    v_focus_angle: float = V_FOCUS_ANGLE
    blur_factor: int = BLUR_FACTOR

    def validate(self) -> None:
        """Raise :class:`ContractViolationError` if the windows are inconsistent."""
        if not 0 < self.crop_angle < 360:
            raise ContractViolationError(f"crop_angle must lie in (0, 360), got {self.crop_angle}")
        if not 0 < self.h_focus_angle < self.crop_angle:
            raise ContractViolationError(
                f"h_focus_angle ({self.h_focus_angle}) must be positive and smaller "
                f"than crop_angle ({self.crop_angle})"
            )
        if not 0 < self.v_focus_angle <= 180:
            raise ContractViolationError(f"v_focus_angle must lie in (0, 180], got {self.v_focus_angle}")
        if not isinstance(self.blur_factor, Integral) or self.blur_factor < 1:
            raise ContractViolationError(f"blur_factor must be an integer >= 1, got {self.blur_factor!r}")


DEFAULT_CONFIG = FoveationConfig()
