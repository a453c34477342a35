import dataclasses
import logging
import math

from pyvecmath.settings import Settings
from pyvecmath.utils import helpers
from pyvecmath.utils.descriptors import classproperty, dualmethod, dualproperty

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Vector3:
    """
    A 3D vector with x, y and z components stored as doubles.

    Class-level operations (``Vector3.add(a, b)``) return new vectors and never
    touch their arguments. Instance-level arithmetic (``v.add(rhs)``) mutates
    ``v`` in place and returns None.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classproperty
    def K_EPSILON(cls) -> float:
        return Settings.K_EPSILON

    @classproperty
    def K_EPSILON_NORMAL_SQRT(cls) -> float:
        return Settings.K_EPSILON_NORMAL_SQRT

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __str__(self) -> str:
        return f"<{self.x:.2f}, {self.y:.2f}, {self.z:.2f}>"

    def __repr__(self) -> str:
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def is_close(self, other: "Vector3", tolerance: float | None = None) -> bool:
        """Component-wise comparison within tolerance (Settings.EQUALITY_TOLERANCE by default)."""
        if not isinstance(other, Vector3):
            raise TypeError("Can only compare Vector3 with another Vector3.")
        if tolerance is None:
            tolerance = Settings.EQUALITY_TOLERANCE
        return (helpers.approximately_equal(self.x, other.x, tolerance) and
                helpers.approximately_equal(self.y, other.y, tolerance) and
                helpers.approximately_equal(self.z, other.z, tolerance))

    # --- Named constants (fresh instance on every access) ---

    @classproperty
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classproperty
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    @classproperty
    def right(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classproperty
    def left(cls) -> "Vector3":
        return cls(-1.0, 0.0, 0.0)

    @classproperty
    def up(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classproperty
    def down(cls) -> "Vector3":
        return cls(0.0, -1.0, 0.0)

    @classproperty
    def forward(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classproperty
    def back(cls) -> "Vector3":
        return cls(0.0, 0.0, -1.0)

    @classproperty
    def negative_infinity(cls) -> "Vector3":
        return cls(-math.inf, -math.inf, -math.inf)

    @classproperty
    def positive_infinity(cls) -> "Vector3":
        return cls(math.inf, math.inf, math.inf)

    # --- Derived properties ---

    @dualproperty
    def magnitude(vector: "Vector3") -> float:
        """Euclidean length of the vector."""
        return math.sqrt(vector.x * vector.x + vector.y * vector.y + vector.z * vector.z)

    @property
    def sqr_magnitude(self) -> float:
        """
        Square root of the magnitude (fourth root of the sum of squares).
        Kept for compatibility; the conventional squared length is Vector3.dot(v, v).
        """
        return math.sqrt(self.magnitude)

    @property
    def normalized(self) -> "Vector3":
        """Unit vector in the same direction, or a new zero vector if the magnitude is 0."""
        mag = self.magnitude
        if mag > 0:
            return Vector3(self.x / mag, self.y / mag, self.z / mag)
        return Vector3.zero

    # --- Queries ---

    @staticmethod
    def angle(from_: "Vector3", to: "Vector3") -> float:
        """Angle in degrees between two vectors. NaN if either has zero length."""
        cos_angle = helpers.ieee_divide(Vector3.dot(from_, to), from_.magnitude * to.magnitude)
        return helpers.ieee_acos(cos_angle) * helpers.RAD_TO_DEG

    @staticmethod
    def clamp_magnitude(vector: "Vector3", max_length: float) -> "Vector3":
        """Copy of vector scaled down so its length is at most max_length."""
        mag = vector.magnitude
        multiplier = 1.0
        if mag > max_length:
            multiplier = helpers.ieee_divide(max_length, mag)
        return Vector3(vector.x * multiplier, vector.y * multiplier, vector.z * multiplier)

    @staticmethod
    def cross(lhs: "Vector3", rhs: "Vector3") -> "Vector3":
        """Right-handed cross product."""
        return Vector3(
            lhs.y * rhs.z - lhs.z * rhs.y,
            lhs.z * rhs.x - lhs.x * rhs.z,
            lhs.x * rhs.y - lhs.y * rhs.x,
        )

    @staticmethod
    def distance(a: "Vector3", b: "Vector3") -> float:
        return Vector3.subtract(a, b).magnitude

    @staticmethod
    def dot(lhs: "Vector3", rhs: "Vector3") -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z

    @staticmethod
    def max(lhs: "Vector3", rhs: "Vector3") -> "Vector3":
        """Largest components of both vectors; ties go to lhs."""
        return Vector3(
            lhs.x if lhs.x >= rhs.x else rhs.x,
            lhs.y if lhs.y >= rhs.y else rhs.y,
            lhs.z if lhs.z >= rhs.z else rhs.z,
        )

    @staticmethod
    def min(lhs: "Vector3", rhs: "Vector3") -> "Vector3":
        """Smallest components of both vectors; ties go to lhs."""
        return Vector3(
            lhs.x if lhs.x <= rhs.x else rhs.x,
            lhs.y if lhs.y <= rhs.y else rhs.y,
            lhs.z if lhs.z <= rhs.z else rhs.z,
        )

    # --- Interpolation & motion ---

    @staticmethod
    def lerp(a: "Vector3", b: "Vector3", t: float) -> "Vector3":
        """
        Linear interpolation a + (b - a) * t.
        Returns a itself when t < 0 and b itself when t > 1, not copies.
        """
        if t < 0:
            return a
        if t > 1:
            return b
        return Vector3.lerp_unclamped(a, b, t)

    @staticmethod
    def lerp_unclamped(a: "Vector3", b: "Vector3", t: float) -> "Vector3":
        return Vector3(
            helpers.lerp(a.x, b.x, t),
            helpers.lerp(a.y, b.y, t),
            helpers.lerp(a.z, b.z, t),
        )

    @staticmethod
    def move_towards(current: "Vector3", target: "Vector3", max_distance_delta: float) -> "Vector3":
        """
        Moves current towards target by at most max_distance_delta.
        When current == target the ratio is a signed infinity (or NaN for a zero delta),
        which lerp resolves to target, current, or NaN components.
        """
        distance = Vector3.distance(target, current)
        return Vector3.lerp(current, target, helpers.ieee_divide(max_distance_delta, distance))

    # --- Elementwise arithmetic ---

    @dualmethod
    def add(cls, a: "Vector3", b: "Vector3 | float") -> "Vector3":
        if helpers.is_scalar(b):
            return cls(a.x + b, a.y + b, a.z + b)
        if isinstance(b, Vector3):
            return cls(a.x + b.x, a.y + b.y, a.z + b.z)
        raise TypeError(f"Cannot add {type(b).__name__} to Vector3.")

    @add.instance
    def add(self, rhs: "Vector3 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x += rhs
            self.y += rhs
            self.z += rhs
        elif isinstance(rhs, Vector3):
            self.x += rhs.x
            self.y += rhs.y
            self.z += rhs.z
        else:
            raise TypeError(f"Cannot add {type(rhs).__name__} to Vector3.")

    @dualmethod
    def subtract(cls, a: "Vector3", b: "Vector3 | float") -> "Vector3":
        if helpers.is_scalar(b):
            return cls(a.x - b, a.y - b, a.z - b)
        if isinstance(b, Vector3):
            return cls(a.x - b.x, a.y - b.y, a.z - b.z)
        raise TypeError(f"Cannot subtract {type(b).__name__} from Vector3.")

    @subtract.instance
    def subtract(self, rhs: "Vector3 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x -= rhs
            self.y -= rhs
            self.z -= rhs
        elif isinstance(rhs, Vector3):
            self.x -= rhs.x
            self.y -= rhs.y
            self.z -= rhs.z
        else:
            raise TypeError(f"Cannot subtract {type(rhs).__name__} from Vector3.")

    @dualmethod
    def multiply(cls, a: "Vector3", b: "Vector3 | float") -> "Vector3":
        if helpers.is_scalar(b):
            return cls(a.x * b, a.y * b, a.z * b)
        if isinstance(b, Vector3):
            return cls(a.x * b.x, a.y * b.y, a.z * b.z)
        raise TypeError(f"Cannot multiply Vector3 by {type(b).__name__}.")

    @multiply.instance
    def multiply(self, rhs: "Vector3 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x *= rhs
            self.y *= rhs
            self.z *= rhs
        elif isinstance(rhs, Vector3):
            self.x *= rhs.x
            self.y *= rhs.y
            self.z *= rhs.z
        else:
            raise TypeError(f"Cannot multiply Vector3 by {type(rhs).__name__}.")

    @dualmethod
    def divide(cls, a: "Vector3", b: "Vector3 | float") -> "Vector3":
        div = helpers.ieee_divide
        if helpers.is_scalar(b):
            return cls(div(a.x, b), div(a.y, b), div(a.z, b))
        if isinstance(b, Vector3):
            return cls(div(a.x, b.x), div(a.y, b.y), div(a.z, b.z))
        raise TypeError(f"Cannot divide Vector3 by {type(b).__name__}.")

    @divide.instance
    def divide(self, rhs: "Vector3 | float") -> None:
        div = helpers.ieee_divide
        if helpers.is_scalar(rhs):
            self.x = div(self.x, rhs)
            self.y = div(self.y, rhs)
            self.z = div(self.z, rhs)
        elif isinstance(rhs, Vector3):
            self.x = div(self.x, rhs.x)
            self.y = div(self.y, rhs.y)
            self.z = div(self.z, rhs.z)
        else:
            raise TypeError(f"Cannot divide Vector3 by {type(rhs).__name__}.")

    # --- Operators ---

    def __add__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        return Vector3.add(self, other)

    def __sub__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        return Vector3.subtract(self, other)

    def __mul__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        return Vector3.multiply(self, other)

    def __rmul__(self, scalar):
        if not helpers.is_scalar(scalar):
            return NotImplemented
        return Vector3.multiply(self, scalar)

    def __truediv__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        return Vector3.divide(self, other)

    def __iadd__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        self.subtract(other)
        return self

    def __imul__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        self.multiply(other)
        return self

    def __itruediv__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector3)):
            return NotImplemented
        self.divide(other)
        return self

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    # --- Binary codec ---

    def to_bytes(self) -> bytes:
        """Packs the vector into bytes (24 bytes, 3 doubles)."""
        data = helpers.pack_doubles(self.to_tuple(), Settings.BYTE_ORDER)
        logger.debug(f"Packed {self!r} into {len(data)} bytes")
        return data

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> "Vector3":
        """Unpacks a vector from bytes (24 bytes, 3 doubles)."""
        if len(data) - offset < 24:
            logger.error(f"Cannot unpack Vector3: {len(data) - offset} bytes available at offset {offset}")
            raise ValueError("Not enough bytes to unpack Vector3. Need 24.")
        x, y, z = helpers.unpack_doubles(data, 3, offset, Settings.BYTE_ORDER)
        logger.debug(f"Unpacked Vector3 from offset {offset}")
        return cls(x, y, z)
