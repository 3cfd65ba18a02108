"""Lightweight timing helpers for the foveation pipeline."""

from .timer import MAX_SAMPLES, FramerateProfiler, PhaseTimer

__all__ = [
    "MAX_SAMPLES",
    "FramerateProfiler",
    "PhaseTimer",
]
