"""Angle and column-range helpers for cylindrical equirectangular panoramas.

The panorama width spans 360 degrees and wraps around; the height spans
180 degrees and does not. Every angle-to-pixel conversion truncates.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple, Union

from ..errors import ContractViolationError

FULL_TURN = 360
HALF_TURN = 180


def normalize_angle(angle: float) -> float:
    """Return ``angle`` folded into [0, 360). Integers stay integers."""
    if isinstance(angle, int):
        return angle % FULL_TURN

    angle = math.fmod(angle, FULL_TURN)
    if angle < 0:
        angle += FULL_TURN
    # -1e-20 + 360 rounds up to exactly 360.0
    if angle >= FULL_TURN:
        angle = 0.0
    return angle


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(x, hi))


def h_angle_to_col(angle: float, width: int) -> int:
    """Map a horizontal angle to a panorama column in ``[0, width)``."""
    col = math.floor(normalize_angle(angle) * width / FULL_TURN)
    return min(col, width - 1)


def v_angle_to_row(angle: float, height: int) -> int:
    """Map a vertical angle to a row. No wrapping; callers clamp."""
    return math.floor(angle * height / HALF_TURN)


@dataclass(slots=True, frozen=True)
class ColumnSegment:
    """Panorama columns ``[start, stop)`` stored from crop column ``offset``."""

    start: int
    stop: int
    offset: int

    @property
    def width(self) -> int:
        return self.stop - self.start


@dataclass(slots=True, frozen=True)
class ContiguousSpan:
    """Column range ``[left, right)`` that does not cross column 0."""

    left: int
    right: int
    width: int

    @property
    def span_width(self) -> int:
        return self.right - self.left

    def segments(self) -> Tuple[ColumnSegment, ...]:
        return (ColumnSegment(self.left, self.right, 0),)


@dataclass(slots=True, frozen=True)
class WrappedSpan:
    """Column range ``[left, width) + [0, right)`` crossing column 0."""

    left: int
    right: int
    width: int

    @property
    def span_width(self) -> int:
        return self.width - self.left + self.right

    def segments(self) -> Tuple[ColumnSegment, ...]:
        head = ColumnSegment(self.left, self.width, 0)
        tail = ColumnSegment(0, self.right, head.width)
        return head, tail


ColumnSpan = Union[ContiguousSpan, WrappedSpan]


def column_span(left: int, right: int, width: int) -> ColumnSpan:
    """Build the span running rightwards from ``left`` to ``right``.

    Raises:
        ContractViolationError: If an endpoint lies outside ``[0, width)`` or
            both endpoints are equal.
    """
    if not (0 <= left < width and 0 <= right < width):
        raise ContractViolationError(
            f"Column endpoints ({left}, {right}) must lie in [0, {width})"
        )
    if left < right:
        return ContiguousSpan(left, right, width)
    if left > right:
        return WrappedSpan(left, right, width)
    raise ContractViolationError(f"Column span endpoints are equal ({left}); span is ambiguous")


def span_from_origin(left: int, span_width: int, width: int) -> ColumnSpan:
    """Return the span of ``span_width`` columns whose first column is ``left``.

    A full-width span wraps back onto ``left`` and leaves no gap.
    """
    if not 0 < span_width <= width:
        raise ContractViolationError(
            f"Span width {span_width} must lie in (0, {width}] to be placed on the panorama"
        )
    if span_width == width:
        if not 0 <= left < width:
            raise ContractViolationError(f"Column {left} must lie in [0, {width})")
        return WrappedSpan(left, left, width)
    return column_span(left, (left + span_width) % width, width)
