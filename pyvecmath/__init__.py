# Basic package metadata.

import logging

__version__ = "0.1.0"

from .enums import LogLevel
from .settings import Settings, configure_logging
from .types import Vector2, Vector3, Vector4

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector2", "Vector3", "Vector4",
    "Settings", "configure_logging", "LogLevel",
    "__version__",
]
