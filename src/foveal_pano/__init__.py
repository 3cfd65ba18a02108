"""Foveated compression for 360x180 equirectangular panoramas."""

from loguru import logger

from .errors import ContractViolationError
from .foveation import decode, encode, process, size
from .models.foveation_config import DEFAULT_CONFIG, FoveationConfig
from .models.optimized_image import OptimizedImage

# Silent until the host application opts in via configure_logging().
logger.disable(__name__)

__all__ = [
    "ContractViolationError",
    "DEFAULT_CONFIG",
    "FoveationConfig",
    "OptimizedImage",
    "decode",
    "encode",
    "process",
    "size",
]

__version__ = "0.1.0"
