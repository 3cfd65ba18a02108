"""Logging configuration helpers."""
from __future__ import annotations

from loguru import logger

PACKAGE = "foveal_pano"


def configure_logging(level: str = "INFO") -> None:
    """Configure loguru with a friendly default sink and enable package logs.

    Phase timings are emitted at DEBUG, so pass ``level="DEBUG"`` and hand an
    enabled :class:`~foveal_pano.profiling.PhaseTimer` to encode/decode to see them.
    """
    logger.remove()
    logger.add(
        sink=lambda msg: print(msg, end=""),
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.enable(PACKAGE)
