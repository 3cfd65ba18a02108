"""Horizontal crop and re-embed on a panorama that wraps at column 0."""
from __future__ import annotations

import numpy as np

from ..errors import ContractViolationError
from ..math.geometry import ColumnSpan


def crop_wrapped(image: np.ndarray, span: ColumnSpan) -> np.ndarray:
    """Cut the columns covered by ``span`` out of ``image`` as a new array.

    A wrapped span is returned as ``[left, width)`` followed by ``[0, right)``.
    """
    if image.shape[1] != span.width:
        raise ContractViolationError(
            f"Span is defined for width {span.width} but image is {image.shape[1]} wide"
        )
    # concatenate always copies, so the crop never aliases ``image``
    return np.concatenate([image[:, seg.start:seg.stop] for seg in span.segments()], axis=1)


def uncrop_wrapped(cropped: np.ndarray, span: ColumnSpan) -> np.ndarray:
    """Place ``cropped`` back at the columns of ``span`` on a black canvas.

    For a wrapped span the result reads ``crop tail | black | crop head``;
    for a contiguous one ``black | crop | black``.
    """
    if cropped.shape[1] != span.span_width:
        raise ContractViolationError(
            f"Crop is {cropped.shape[1]} columns wide but span covers {span.span_width}"
        )
    canvas = np.zeros((cropped.shape[0], span.width) + cropped.shape[2:], dtype=cropped.dtype)
    for seg in span.segments():
        canvas[:, seg.start:seg.stop] = cropped[:, seg.offset:seg.offset + seg.width]
    return canvas
