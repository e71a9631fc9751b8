from __future__ import annotations

import dataclasses
import math
import struct
import typing

__all__ = [
    "ElementType",
    "INT",
    "FLOAT",
    "FLOAT32",
    "ELEMENT_TYPES",
    "element_type",
    "round_half_away",
]

Number = typing.Union[int, float]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halfway cases away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _truncating_div(a: int, b: int) -> int:
    # floor division rounds towards -inf, integer division of T rounds towards zero
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return q


def _ieee_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1, b)

    return a / b


def _to_float32(value: Number) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_int(value: Number) -> int:
    # int() truncates towards zero
    return int(value)


def _round_int(value: Number) -> int:
    if isinstance(value, int):
        return value
    return round_half_away(value)


@dataclasses.dataclass(frozen=True)
class ElementType:
    """The numeric type a vector stores its coordinates as."""
    name: str
    convert: typing.Callable[[Number], Number]
    round: typing.Callable[[Number], Number]
    divide: typing.Callable[[Number, Number], Number]
    is_integral: bool

    @property
    def zero(self) -> Number:
        return self.convert(0)

    def __repr__(self):
        return f"ElementType({self.name!r})"


INT = ElementType("int", convert=_to_int, round=_round_int, divide=_truncating_div, is_integral=True)
FLOAT = ElementType("float", convert=float, round=float, divide=_ieee_div, is_integral=False)
FLOAT32 = ElementType(
    "float32",
    convert=_to_float32,
    round=_to_float32,
    divide=lambda a, b: _to_float32(_ieee_div(a, b)),
    is_integral=False,
)

ELEMENT_TYPES = {t.name: t for t in (INT, FLOAT, FLOAT32)}


def element_type(name: str | ElementType) -> ElementType:
    if isinstance(name, ElementType):
        return name

    try:
        return ELEMENT_TYPES[name]
    except KeyError:
        raise KeyError(f"Unknown element type {name!r}. Choose one of {', '.join(ELEMENT_TYPES)}.") from None
