import math
import struct

from pyvecmath.settings import Settings

# Constants
PI = math.pi
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
INFINITY = math.inf
NAN = math.nan

# --- IEEE-754 arithmetic ---

def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divides two floats with IEEE-754 semantics instead of raising.
    x / +-0 gives a signed infinity, 0 / 0 and nan / 0 give NaN.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0:
            return NAN
        return math.copysign(INFINITY, numerator) * math.copysign(1.0, denominator)

def ieee_acos(value: float) -> float:
    """Arc cosine that returns NaN outside [-1, 1] rather than raising ValueError."""
    if math.isnan(value) or value < -1.0 or value > 1.0:
        return NAN
    return math.acos(value)

def is_scalar(value) -> bool:
    """True for real numbers accepted as broadcast operands (int, float, bool)."""
    return isinstance(value, (int, float))

# --- Double packing (little endian default) ---

def pack_doubles(values, byte_order: str = '<') -> bytes:
    """Packs a sequence of floats as consecutive doubles."""
    return struct.pack(f'{byte_order}{len(values)}d', *values)

def unpack_doubles(data: bytes, count: int, offset: int = 0, byte_order: str = '<') -> tuple:
    """Unpacks `count` consecutive doubles starting at offset."""
    return struct.unpack_from(f'{byte_order}{count}d', data, offset)

# --- Other Utilities ---

def lerp(start, end, amount):
    """Linear interpolation between start and end by amount (0-1)."""
    return start + (end - start) * amount

def approximately_equal(a: float, b: float, tolerance: float | None = None) -> bool:
    """Checks if two floats are approximately equal within a tolerance (Settings.EQUALITY_TOLERANCE by default)."""
    if tolerance is None:
        tolerance = Settings.EQUALITY_TOLERANCE
    if a == b: # covers matching infinities
        return True
    return abs(a - b) < tolerance
