from __future__ import annotations

import functools
import math
import typing

from . import numeric
from .numeric import ElementType, INT, FLOAT, FLOAT32

__all__ = [
    "Vector2",
    "Vector2i",
    "Vector2d",
    "Vector2f",
    "vector_type",
]

T = typing.TypeVar("T", int, float)


class Vector2(typing.Generic[T]):
    """A 2D vector whose coordinates are stored as the element type of its class.

    ``Vector2`` itself stores floats. Use the specializations ``Vector2i``, ``Vector2d``, ``Vector2f`` or
    ``vector_type(...)`` to pick an element type. All arithmetic happens in the element type: operands are
    converted to it and results are narrowed back to it.
    """
    __slots__ = ("_x", "_y")

    element_type: typing.ClassVar[ElementType] = FLOAT

    def __init__(self, x: T | Vector2 = 0, y: T | None = None):
        if isinstance(x, Vector2):
            if y is not None:
                raise TypeError(f"{self.__class__.__name__}() takes a vector or two coordinates, not both")

            # conversion from another vector rounds to the nearest representable value
            round_ = self.element_type.round
            self._x = round_(x.x)
            self._y = round_(x.y)
        else:
            convert = self.element_type.convert
            self._x = convert(x)
            self._y = convert(0 if y is None else y)

    @classmethod
    def from_vector(cls, other: Vector2) -> Vector2[T]:
        return cls(other)

    @classmethod
    def from_dir_len(cls, angle: float, length: float = 1) -> Vector2[T]:
        round_ = cls.element_type.round
        return cls(round_(length * math.cos(angle)), round_(length * math.sin(angle)))

    @classmethod
    def unit_x(cls) -> Vector2[T]:
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> Vector2[T]:
        return cls(0, 1)

    @classmethod
    def zero(cls) -> Vector2[T]:
        return cls(0, 0)

    @property
    def x(self) -> T:
        return self._x

    @x.setter
    def x(self, value: T):
        self._x = self.element_type.convert(value)

    @property
    def y(self) -> T:
        return self._y

    @y.setter
    def y(self, value: T):
        self._y = self.element_type.convert(value)

    def set_x(self, x: T) -> Vector2[T]:
        self.x = x
        return self

    def set_y(self, y: T) -> Vector2[T]:
        self.y = y
        return self

    def set(self, x: T, y: T) -> Vector2[T]:
        self.x = x
        self.y = y
        return self

    def _same_kind(self, other) -> bool:
        return isinstance(other, Vector2) and other.element_type is self.element_type

    def __iter__(self):
        return iter((self._x, self._y))

    def __getitem__(self, i: int):
        if i == 0:
            return self._x
        elif i == 1:
            return self._y

        raise IndexError(f"Vector2 index out of range: {i!r}")

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __ne__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self._x != other.x or self._y != other.y

    # mutable, so not hashable
    __hash__ = None

    def __bool__(self):
        return bool(self._x or self._y)

    def __add__(self, other: Vector2[T]):
        if not self._same_kind(other):
            return NotImplemented
        return self.__class__(self._x + other.x, self._y + other.y)

    def __sub__(self, other: Vector2[T]):
        if not self._same_kind(other):
            return NotImplemented
        return self.__class__(self._x - other.x, self._y - other.y)

    def __mul__(self, other: T | Vector2[T]):
        if isinstance(other, Vector2):
            if not self._same_kind(other):
                return NotImplemented
            return self.dot(other)

        factor = self.element_type.convert(other)
        return self.__class__(self._x * factor, self._y * factor)

    def __rmul__(self, factor: T):
        if isinstance(factor, Vector2):
            return NotImplemented
        return self * factor

    def __truediv__(self, divisor: T):
        if isinstance(divisor, Vector2):
            return NotImplemented

        divide = self.element_type.divide
        divisor = self.element_type.convert(divisor)
        return self.__class__(divide(self._x, divisor), divide(self._y, divisor))

    def __iadd__(self, other: Vector2[T]):
        if not self._same_kind(other):
            return NotImplemented
        return self.set(self._x + other.x, self._y + other.y)

    def __isub__(self, other: Vector2[T]):
        if not self._same_kind(other):
            return NotImplemented
        return self.set(self._x - other.x, self._y - other.y)

    def __imul__(self, factor: T):
        if isinstance(factor, Vector2):
            # v *= w would turn v into a scalar
            return NotImplemented
        return self.set(*(self * factor))

    def __itruediv__(self, divisor: T):
        if isinstance(divisor, Vector2):
            return NotImplemented
        return self.set(*(self / divisor))

    def __neg__(self):
        return self.__class__(-self._x, -self._y)

    def __invert__(self):
        """Flip: swap the coordinates."""
        return self.__class__(self._y, self._x)

    def dot(self, other: Vector2[T]) -> T:
        return self.element_type.convert(self._x * other.x + self._y * other.y)

    def squared_length(self) -> T:
        return self.element_type.convert(self._x * self._x + self._y * self._y)

    def length(self) -> T:
        """Euclidean norm, computed in double precision and narrowed to the element type."""
        return self.element_type.convert(math.sqrt(self._x * self._x + self._y * self._y))

    def normalized(self) -> Vector2[T]:
        """Return a new vector of the same direction with unit length.

        The zero vector has no direction: floats give ``nan`` coordinates, integers raise ``ZeroDivisionError``.
        """
        return self / self.length()

    def normalize(self) -> Vector2[T]:
        return self.set(*self.normalized())

    def direction(self) -> float:
        """Angle to the positive x-axis in radians, in (-pi, pi]."""
        # -0.0 would give -pi for vectors on the negative x-axis
        return math.atan2(self._y + 0.0, self._x)

    def rotated(self, angle: float) -> Vector2[T]:
        """Return a new vector rotated counter-clockwise by ``angle`` radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        round_ = self.element_type.round

        return self.__class__(
            round_(cos * self._x - sin * self._y),
            round_(sin * self._x + cos * self._y),
        )

    def rotate(self, angle: float) -> Vector2[T]:
        return self.set(*self.rotated(angle))

    def map(self, func: typing.Callable[[T], T]) -> Vector2[T]:
        return self.__class__(func(self._x), func(self._y))

    def copy(self) -> Vector2[T]:
        return self.__class__(self._x, self._y)

    __copy__ = copy

    def __str__(self):
        return f"({self._x}, {self._y})"

    def __repr__(self):
        return f"{self.__class__.__name__}({self._x}, {self._y})"

    def __format__(self, format_spec):
        return f"({self._x:{format_spec}}, {self._y:{format_spec}})"


@functools.lru_cache(maxsize=None)
def _specialize(element: ElementType, name: str) -> type[Vector2]:
    return type(name, (Vector2,), {"__slots__": (), "element_type": element})


Vector2i = _specialize(INT, "Vector2i")
Vector2d = _specialize(FLOAT, "Vector2d")
Vector2f = _specialize(FLOAT32, "Vector2f")

# the named specializations are what vector_type hands out
_NAMED = {INT: Vector2i, FLOAT: Vector2d, FLOAT32: Vector2f}


def vector_type(element: str | ElementType) -> type[Vector2]:
    """Return the Vector2 class storing coordinates as ``element``."""
    element = numeric.element_type(element)

    try:
        return _NAMED[element]
    except KeyError:
        return _specialize(element, f"Vector2[{element.name}]")
