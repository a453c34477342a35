# This file marks pyvecmath.utils as a Python package.

from .helpers import (
    PI,
    DEG_TO_RAD,
    RAD_TO_DEG,
    INFINITY,
    NAN,
    ieee_divide,
    ieee_acos,
    is_scalar,
    pack_doubles,
    unpack_doubles,
    lerp,
    approximately_equal,
)
from .descriptors import classproperty, dualmethod, dualproperty

__all__ = [
    # Constants
    "PI", "DEG_TO_RAD", "RAD_TO_DEG", "INFINITY", "NAN",
    # IEEE-754 arithmetic
    "ieee_divide", "ieee_acos", "is_scalar",
    # Double packing
    "pack_doubles", "unpack_doubles",
    # Other Utilities
    "lerp", "approximately_equal",
    # Descriptors
    "classproperty", "dualmethod", "dualproperty",
]
