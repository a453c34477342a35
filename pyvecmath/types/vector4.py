import dataclasses
import logging
import math

from pyvecmath.settings import Settings
from pyvecmath.utils import helpers
from pyvecmath.utils.descriptors import classproperty, dualmethod, dualproperty

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Vector4:
    """
    A 4D vector with x, y, z and w components stored as doubles.

    w defaults to 1.0 so that Vector4(x, y, z) reads as a point in homogeneous
    coordinates; pass w=0 explicitly for a direction. All arithmetic, including
    scalar broadcasting, applies to w like any other component.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

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
        self.w = float(self.w)

    def __str__(self) -> str:
        return f"<{self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f}>"

    def __repr__(self) -> str:
        return f"Vector4(x={self.x}, y={self.y}, z={self.z}, w={self.w})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z and self.w == other.w

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def is_close(self, other: "Vector4", tolerance: float | None = None) -> bool:
        if not isinstance(other, Vector4):
            raise TypeError("Can only compare Vector4 with another Vector4.")
        if tolerance is None:
            tolerance = Settings.EQUALITY_TOLERANCE
        return all(helpers.approximately_equal(a, b, tolerance) for a, b in zip(self, other))

    @classproperty
    def zero(cls) -> "Vector4":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classproperty
    def one(cls) -> "Vector4":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classproperty
    def negative_infinity(cls) -> "Vector4":
        return cls(-math.inf, -math.inf, -math.inf, -math.inf)

    @classproperty
    def positive_infinity(cls) -> "Vector4":
        return cls(math.inf, math.inf, math.inf, math.inf)

    @dualproperty
    def magnitude(vector: "Vector4") -> float:
        """Euclidean length over all four components."""
        return math.sqrt(
            vector.x * vector.x +
            vector.y * vector.y +
            vector.z * vector.z +
            vector.w * vector.w
        )

    @property
    def sqr_magnitude(self) -> float:
        """Square root of the magnitude. Vector4.dot(v, v) is the squared length."""
        return math.sqrt(self.magnitude)

    @property
    def normalized(self) -> "Vector4":
        """Unit vector in the same direction, or a new zero vector (w = 0) if the magnitude is 0."""
        mag = self.magnitude
        if mag > 0:
            return Vector4(self.x / mag, self.y / mag, self.z / mag, self.w / mag)
        return Vector4.zero

    @staticmethod
    def angle(from_: "Vector4", to: "Vector4") -> float:
        cos_angle = helpers.ieee_divide(Vector4.dot(from_, to), from_.magnitude * to.magnitude)
        return helpers.ieee_acos(cos_angle) * helpers.RAD_TO_DEG

    @staticmethod
    def clamp_magnitude(vector: "Vector4", max_length: float) -> "Vector4":
        mag = vector.magnitude
        multiplier = 1.0
        if mag > max_length:
            multiplier = helpers.ieee_divide(max_length, mag)
        return Vector4(
            vector.x * multiplier,
            vector.y * multiplier,
            vector.z * multiplier,
            vector.w * multiplier,
        )

    @staticmethod
    def distance(a: "Vector4", b: "Vector4") -> float:
        return Vector4.subtract(a, b).magnitude

    @staticmethod
    def dot(lhs: "Vector4", rhs: "Vector4") -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z + lhs.w * rhs.w

    @staticmethod
    def max(lhs: "Vector4", rhs: "Vector4") -> "Vector4":
        return Vector4(
            lhs.x if lhs.x >= rhs.x else rhs.x,
            lhs.y if lhs.y >= rhs.y else rhs.y,
            lhs.z if lhs.z >= rhs.z else rhs.z,
            lhs.w if lhs.w >= rhs.w else rhs.w,
        )

    @staticmethod
    def min(lhs: "Vector4", rhs: "Vector4") -> "Vector4":
        return Vector4(
            lhs.x if lhs.x <= rhs.x else rhs.x,
            lhs.y if lhs.y <= rhs.y else rhs.y,
            lhs.z if lhs.z <= rhs.z else rhs.z,
            lhs.w if lhs.w <= rhs.w else rhs.w,
        )

    @staticmethod
    def lerp(a: "Vector4", b: "Vector4", t: float) -> "Vector4":
        if t < 0:
            return a
        if t > 1:
            return b
        return Vector4.lerp_unclamped(a, b, t)

    @staticmethod
    def lerp_unclamped(a: "Vector4", b: "Vector4", t: float) -> "Vector4":
        return Vector4(
            helpers.lerp(a.x, b.x, t),
            helpers.lerp(a.y, b.y, t),
            helpers.lerp(a.z, b.z, t),
            helpers.lerp(a.w, b.w, t),
        )

    @staticmethod
    def move_towards(current: "Vector4", target: "Vector4", max_distance_delta: float) -> "Vector4":
        distance = Vector4.distance(target, current)
        return Vector4.lerp(current, target, helpers.ieee_divide(max_distance_delta, distance))

    @dualmethod
    def add(cls, a: "Vector4", b: "Vector4 | float") -> "Vector4":
        if helpers.is_scalar(b):
            return cls(a.x + b, a.y + b, a.z + b, a.w + b)
        if isinstance(b, Vector4):
            return cls(a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w)
        raise TypeError(f"Cannot add {type(b).__name__} to Vector4.")

    @add.instance
    def add(self, rhs: "Vector4 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x += rhs
            self.y += rhs
            self.z += rhs
            self.w += rhs
        elif isinstance(rhs, Vector4):
            self.x += rhs.x
            self.y += rhs.y
            self.z += rhs.z
            self.w += rhs.w
        else:
            raise TypeError(f"Cannot add {type(rhs).__name__} to Vector4.")

    @dualmethod
    def subtract(cls, a: "Vector4", b: "Vector4 | float") -> "Vector4":
        if helpers.is_scalar(b):
            return cls(a.x - b, a.y - b, a.z - b, a.w - b)
        if isinstance(b, Vector4):
            return cls(a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w)
        raise TypeError(f"Cannot subtract {type(b).__name__} from Vector4.")

    @subtract.instance
    def subtract(self, rhs: "Vector4 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x -= rhs
            self.y -= rhs
            self.z -= rhs
            self.w -= rhs
        elif isinstance(rhs, Vector4):
            self.x -= rhs.x
            self.y -= rhs.y
            self.z -= rhs.z
            self.w -= rhs.w
        else:
            raise TypeError(f"Cannot subtract {type(rhs).__name__} from Vector4.")

    @dualmethod
    def multiply(cls, a: "Vector4", b: "Vector4 | float") -> "Vector4":
        if helpers.is_scalar(b):
            return cls(a.x * b, a.y * b, a.z * b, a.w * b)
        if isinstance(b, Vector4):
            return cls(a.x * b.x, a.y * b.y, a.z * b.z, a.w * b.w)
        raise TypeError(f"Cannot multiply Vector4 by {type(b).__name__}.")

    @multiply.instance
    def multiply(self, rhs: "Vector4 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x *= rhs
            self.y *= rhs
            self.z *= rhs
            self.w *= rhs
        elif isinstance(rhs, Vector4):
            self.x *= rhs.x
            self.y *= rhs.y
            self.z *= rhs.z
            self.w *= rhs.w
        else:
            raise TypeError(f"Cannot multiply Vector4 by {type(rhs).__name__}.")

    @dualmethod
    def divide(cls, a: "Vector4", b: "Vector4 | float") -> "Vector4":
        div = helpers.ieee_divide
        if helpers.is_scalar(b):
            return cls(div(a.x, b), div(a.y, b), div(a.z, b), div(a.w, b))
        if isinstance(b, Vector4):
            return cls(div(a.x, b.x), div(a.y, b.y), div(a.z, b.z), div(a.w, b.w))
        raise TypeError(f"Cannot divide Vector4 by {type(b).__name__}.")

    @divide.instance
    def divide(self, rhs: "Vector4 | float") -> None:
        div = helpers.ieee_divide
        if helpers.is_scalar(rhs):
            self.x = div(self.x, rhs)
            self.y = div(self.y, rhs)
            self.z = div(self.z, rhs)
            self.w = div(self.w, rhs)
        elif isinstance(rhs, Vector4):
            self.x = div(self.x, rhs.x)
            self.y = div(self.y, rhs.y)
            self.z = div(self.z, rhs.z)
            self.w = div(self.w, rhs.w)
        else:
            raise TypeError(f"Cannot divide Vector4 by {type(rhs).__name__}.")

    def __add__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        return Vector4.add(self, other)

    def __sub__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        return Vector4.subtract(self, other)

    def __mul__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        return Vector4.multiply(self, other)

    def __rmul__(self, scalar):
        if not helpers.is_scalar(scalar):
            return NotImplemented
        return Vector4.multiply(self, scalar)

    def __truediv__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        return Vector4.divide(self, other)

    def __iadd__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        self.subtract(other)
        return self

    def __imul__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        self.multiply(other)
        return self

    def __itruediv__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector4)):
            return NotImplemented
        self.divide(other)
        return self

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def to_bytes(self) -> bytes:
        """Packs the vector into bytes (32 bytes, 4 doubles)."""
        data = helpers.pack_doubles(self.to_tuple(), Settings.BYTE_ORDER)
        logger.debug(f"Packed {self!r} into {len(data)} bytes")
        return data

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> "Vector4":
        """Unpacks a vector from bytes (32 bytes, 4 doubles)."""
        if len(data) - offset < 32:
            logger.error(f"Cannot unpack Vector4: {len(data) - offset} bytes available at offset {offset}")
            raise ValueError("Not enough bytes to unpack Vector4. Need 32.")
        x, y, z, w = helpers.unpack_doubles(data, 4, offset, Settings.BYTE_ORDER)
        logger.debug(f"Unpacked Vector4 from offset {offset}")
        return cls(x, y, z, w)
