import dataclasses
import logging
import math

from pyvecmath.settings import Settings
from pyvecmath.utils import helpers
from pyvecmath.utils.descriptors import classproperty, dualmethod, dualproperty

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Vector2:
    """A 2D vector with x and y components stored as doubles."""
    x: float = 0.0
    y: float = 0.0

    @classproperty
    def K_EPSILON(cls) -> float:
        return Settings.K_EPSILON

    @classproperty
    def K_EPSILON_NORMAL_SQRT(cls) -> float:
        return Settings.K_EPSILON_NORMAL_SQRT

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)

    def __str__(self) -> str:
        return f"<{self.x:.2f}, {self.y:.2f}>"

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def is_close(self, other: "Vector2", tolerance: float | None = None) -> bool:
        if not isinstance(other, Vector2):
            raise TypeError("Can only compare Vector2 with another Vector2.")
        if tolerance is None:
            tolerance = Settings.EQUALITY_TOLERANCE
        return (helpers.approximately_equal(self.x, other.x, tolerance) and
                helpers.approximately_equal(self.y, other.y, tolerance))

    @classproperty
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classproperty
    def one(cls) -> "Vector2":
        return cls(1.0, 1.0)

    @classproperty
    def right(cls) -> "Vector2":
        return cls(1.0, 0.0)

    @classproperty
    def left(cls) -> "Vector2":
        return cls(-1.0, 0.0)

    @classproperty
    def up(cls) -> "Vector2":
        return cls(0.0, 1.0)

    @classproperty
    def down(cls) -> "Vector2":
        return cls(0.0, -1.0)

    @classproperty
    def negative_infinity(cls) -> "Vector2":
        return cls(-math.inf, -math.inf)

    @classproperty
    def positive_infinity(cls) -> "Vector2":
        return cls(math.inf, math.inf)

    @dualproperty
    def magnitude(vector: "Vector2") -> float:
        """Euclidean length of the vector."""
        return math.sqrt(vector.x * vector.x + vector.y * vector.y)

    @property
    def sqr_magnitude(self) -> float:
        # sqrt(magnitude), not x*x + y*y; see Vector2.dot(v, v) for that
        return math.sqrt(self.magnitude)

    @property
    def normalized(self) -> "Vector2":
        mag = self.magnitude
        if mag > 0:
            return Vector2(self.x / mag, self.y / mag)
        return Vector2.zero

    @staticmethod
    def angle(from_: "Vector2", to: "Vector2") -> float:
        """Angle in degrees between two vectors. NaN if either has zero length."""
        cos_angle = helpers.ieee_divide(Vector2.dot(from_, to), from_.magnitude * to.magnitude)
        return helpers.ieee_acos(cos_angle) * helpers.RAD_TO_DEG

    @staticmethod
    def clamp_magnitude(vector: "Vector2", max_length: float) -> "Vector2":
        mag = vector.magnitude
        multiplier = 1.0
        if mag > max_length:
            multiplier = helpers.ieee_divide(max_length, mag)
        return Vector2(vector.x * multiplier, vector.y * multiplier)

    @staticmethod
    def cross(lhs: "Vector2", rhs: "Vector2") -> "Vector2":
        """
        2D cross product. The scalar lhs.x * rhs.y - rhs.x * lhs.y is returned
        in the x component of a Vector2 whose y is 0.
        """
        return Vector2(lhs.x * rhs.y - rhs.x * lhs.y)

    @staticmethod
    def distance(a: "Vector2", b: "Vector2") -> float:
        return Vector2.subtract(a, b).magnitude

    @staticmethod
    def dot(lhs: "Vector2", rhs: "Vector2") -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y

    @staticmethod
    def max(lhs: "Vector2", rhs: "Vector2") -> "Vector2":
        return Vector2(
            lhs.x if lhs.x >= rhs.x else rhs.x,
            lhs.y if lhs.y >= rhs.y else rhs.y,
        )

    @staticmethod
    def min(lhs: "Vector2", rhs: "Vector2") -> "Vector2":
        return Vector2(
            lhs.x if lhs.x <= rhs.x else rhs.x,
            lhs.y if lhs.y <= rhs.y else rhs.y,
        )

    @staticmethod
    def lerp(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        # Out of range t hands back the input object itself
        if t < 0:
            return a
        if t > 1:
            return b
        return Vector2.lerp_unclamped(a, b, t)

    @staticmethod
    def lerp_unclamped(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        return Vector2(helpers.lerp(a.x, b.x, t), helpers.lerp(a.y, b.y, t))

    @staticmethod
    def move_towards(current: "Vector2", target: "Vector2", max_distance_delta: float) -> "Vector2":
        distance = Vector2.distance(target, current)
        return Vector2.lerp(current, target, helpers.ieee_divide(max_distance_delta, distance))

    @dualmethod
    def add(cls, a: "Vector2", b: "Vector2 | float") -> "Vector2":
        if helpers.is_scalar(b):
            return cls(a.x + b, a.y + b)
        if isinstance(b, Vector2):
            return cls(a.x + b.x, a.y + b.y)
        raise TypeError(f"Cannot add {type(b).__name__} to Vector2.")

    @add.instance
    def add(self, rhs: "Vector2 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x += rhs
            self.y += rhs
        elif isinstance(rhs, Vector2):
            self.x += rhs.x
            self.y += rhs.y
        else:
            raise TypeError(f"Cannot add {type(rhs).__name__} to Vector2.")

    @dualmethod
    def subtract(cls, a: "Vector2", b: "Vector2 | float") -> "Vector2":
        if helpers.is_scalar(b):
            return cls(a.x - b, a.y - b)
        if isinstance(b, Vector2):
            return cls(a.x - b.x, a.y - b.y)
        raise TypeError(f"Cannot subtract {type(b).__name__} from Vector2.")

    @subtract.instance
    def subtract(self, rhs: "Vector2 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x -= rhs
            self.y -= rhs
        elif isinstance(rhs, Vector2):
            self.x -= rhs.x
            self.y -= rhs.y
        else:
            raise TypeError(f"Cannot subtract {type(rhs).__name__} from Vector2.")

    @dualmethod
    def multiply(cls, a: "Vector2", b: "Vector2 | float") -> "Vector2":
        if helpers.is_scalar(b):
            return cls(a.x * b, a.y * b)
        if isinstance(b, Vector2):
            return cls(a.x * b.x, a.y * b.y)
        raise TypeError(f"Cannot multiply Vector2 by {type(b).__name__}.")

    @multiply.instance
    def multiply(self, rhs: "Vector2 | float") -> None:
        if helpers.is_scalar(rhs):
            self.x *= rhs
            self.y *= rhs
        elif isinstance(rhs, Vector2):
            self.x *= rhs.x
            self.y *= rhs.y
        else:
            raise TypeError(f"Cannot multiply Vector2 by {type(rhs).__name__}.")

    @dualmethod
    def divide(cls, a: "Vector2", b: "Vector2 | float") -> "Vector2":
        div = helpers.ieee_divide
        if helpers.is_scalar(b):
            return cls(div(a.x, b), div(a.y, b))
        if isinstance(b, Vector2):
            return cls(div(a.x, b.x), div(a.y, b.y))
        raise TypeError(f"Cannot divide Vector2 by {type(b).__name__}.")

    @divide.instance
    def divide(self, rhs: "Vector2 | float") -> None:
        div = helpers.ieee_divide
        if helpers.is_scalar(rhs):
            self.x = div(self.x, rhs)
            self.y = div(self.y, rhs)
        elif isinstance(rhs, Vector2):
            self.x = div(self.x, rhs.x)
            self.y = div(self.y, rhs.y)
        else:
            raise TypeError(f"Cannot divide Vector2 by {type(rhs).__name__}.")

    def __add__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        return Vector2.add(self, other)

    def __sub__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        return Vector2.subtract(self, other)

    def __mul__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        return Vector2.multiply(self, other)

    def __rmul__(self, scalar):
        if not helpers.is_scalar(scalar):
            return NotImplemented
        return Vector2.multiply(self, scalar)

    def __truediv__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        return Vector2.divide(self, other)

    def __iadd__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        self.subtract(other)
        return self

    def __imul__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        self.multiply(other)
        return self

    def __itruediv__(self, other):
        if not (helpers.is_scalar(other) or isinstance(other, Vector2)):
            return NotImplemented
        self.divide(other)
        return self

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def to_bytes(self) -> bytes:
        """Packs the vector into bytes (16 bytes, 2 doubles)."""
        data = helpers.pack_doubles(self.to_tuple(), Settings.BYTE_ORDER)
        logger.debug(f"Packed {self!r} into {len(data)} bytes")
        return data

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> "Vector2":
        """Unpacks a vector from bytes (16 bytes, 2 doubles)."""
        if len(data) - offset < 16:
            logger.error(f"Cannot unpack Vector2: {len(data) - offset} bytes available at offset {offset}")
            raise ValueError("Not enough bytes to unpack Vector2. Need 16.")
        x, y = helpers.unpack_doubles(data, 2, offset, Settings.BYTE_ORDER)
        return cls(x, y)
