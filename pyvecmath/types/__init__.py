# Main __init__.py for the types sub-package

from .interfaces import VectorLike
from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4

__all__ = [
    "VectorLike",
    "Vector2", "Vector3", "Vector4",
]
