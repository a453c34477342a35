"""
Shape shared by Vector2, Vector3 and Vector4.
"""
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class VectorLike(Protocol):
    """Anything with float x/y components that iterates over its components."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]: ...

    def __len__(self) -> int: ...

    def to_tuple(self) -> tuple: ...

    def to_bytes(self) -> bytes: ...
