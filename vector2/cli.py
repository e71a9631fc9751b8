from __future__ import annotations

import argparse
import logging
import math
import os
import sys
import typing

from .config import Config, parse_config_overrides
from .numeric import ELEMENT_TYPES
from .vector import Vector2, vector_type

__all__ = [
    "OPERATIONS",
    "evaluate",
    "main",
]

_logger = logging.getLogger("vector2")


class Operation(typing.NamedTuple):
    args: tuple[str, ...]
    func: typing.Callable
    help: str
    # func receives the vector class and the raw coordinates instead of a vector
    from_coordinates: bool = False


def _other(v: Vector2, x: str, y: str) -> Vector2:
    return v.__class__(float(x), float(y))


OPERATIONS: dict[str, Operation] = {
    "length": Operation((), lambda v: v.length(), "Euclidean length."),
    "normalized": Operation((), lambda v: v.normalized(), "Vector of the same direction with length 1."),
    "direction": Operation((), lambda v: v.direction(), "Angle to the x-axis in radians."),
    "negate": Operation((), lambda v: -v, "Negated vector."),
    "flip": Operation((), lambda v: ~v, "Vector with swapped coordinates."),
    "rotated": Operation(("ANGLE",), lambda v, angle: v.rotated(float(angle)),
                         "Vector rotated counter-clockwise by ANGLE radians."),
    "scale": Operation(("S",), lambda v, s: v * float(s), "Vector multiplied by S."),
    "divide": Operation(("S",), lambda v, s: v / float(s), "Vector divided by S."),
    "add": Operation(("X2", "Y2"), lambda v, x, y: v + _other(v, x, y), "Sum with (X2, Y2)."),
    "subtract": Operation(("X2", "Y2"), lambda v, x, y: v - _other(v, x, y), "Difference to (X2, Y2)."),
    "dot": Operation(("X2", "Y2"), lambda v, x, y: v * _other(v, x, y), "Dot product with (X2, Y2)."),
    "convert": Operation(("TYPE",), lambda v, type_: vector_type(type_)(v),
                         "Vector converted to another element type."),
    "from-dir-len": Operation((), lambda cls, x, y: cls.from_dir_len(x, y), "Vector from direction X and length Y.",
                             from_coordinates=True),
}


def evaluate(operation: str, vector_cls: type[Vector2], x: float, y: float,
             args: list[str] = ()) -> Vector2 | float | int:
    """Apply the named operation to the vector (x, y) with the operation's extra string arguments."""
    try:
        op = OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Unknown operation {operation!r}.") from None

    if len(args) != len(op.args):
        raise ValueError(f"Operation {operation!r} takes {len(op.args)} argument(s) "
                         f"({' '.join(op.args) or 'none'}), got {len(args)}.")

    _logger.debug(f"Evaluating {operation} on ({x}, {y}) as {vector_cls.__name__} with {list(args)!r}.")

    if op.from_coordinates:
        # angle and length are not narrowed to the element type
        return op.func(vector_cls, x, y, *args)

    return op.func(vector_cls(x, y), *args)


def _is_finite(result: Vector2 | float | int) -> bool:
    values = tuple(result) if isinstance(result, Vector2) else (result,)
    # ints are always finite and may be too large for math.isfinite
    return all(isinstance(value, int) or math.isfinite(value) for value in values)


def format_result(result: Vector2 | float | int, config: Config) -> str:
    if isinstance(result, int):
        # integers never get decimals
        return str(result)
    elif isinstance(result, Vector2) and result.element_type.is_integral:
        return str(result)

    return format(result, config.format_spec)


def load_config(filepath: str, overrides: dict[str, str]) -> Config:
    if os.path.exists(filepath):
        properties = Config.from_filepath(filepath).to_properties()
    else:
        _logger.debug(f"Config file {filepath!r} not found, using defaults.")
        properties = Config().to_properties()

    try:
        return Config.from_properties(properties | overrides)
    except KeyError as e:
        raise ValueError(f"Invalid config option {e.args[0]!r}.") from e


def build_parser() -> argparse.ArgumentParser:
    operations_help = ", ".join(
        " ".join((name, *op.args)) for name, op in OPERATIONS.items()
    )

    parser = argparse.ArgumentParser(description="Apply a 2D vector operation to the vector (X, Y).",
                                     epilog=f"Operations: {operations_help}.")
    parser.add_argument("--config", "-c", type=str, default="config.ini",
                        help="Path to the config file. (default: config.ini)")
    parser.add_argument("--config-override", "--override", "-o", action="append",
                        help="Override a config option. Use the form option=value, e.g. format.precision=3.")
    parser.add_argument("--type", "-t", type=str, choices=list(ELEMENT_TYPES),
                        help="Element type of the vector. Overrides vector.element-type.")
    parser.add_argument("--loglevel", "--log", "-l", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("operation", type=str, choices=list(OPERATIONS), help="Operation to apply.")
    parser.add_argument("x", type=float, help="X coordinate.")
    parser.add_argument("y", type=float, help="Y coordinate.")
    parser.add_argument("args", type=str, nargs="*", help="Extra arguments of the operation.")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.loglevel, style="{", format=f"[{{name}}] {{levelname}}: {{message}}",
                        stream=sys.stdout)

    try:
        overrides = parse_config_overrides(args.config_override or [])
        if args.type is not None:
            overrides["vector.element-type"] = args.type

        config = load_config(args.config, overrides)
    except ValueError as e:
        _logger.error(e)
        return 1

    try:
        result = evaluate(args.operation, config.vector_type, args.x, args.y, args.args)
    except (ValueError, KeyError, ArithmeticError) as e:
        _logger.error(f"Could not evaluate {args.operation}: {e}")
        return 1

    if not _is_finite(result):
        _logger.warning(f"Result of {args.operation} is not finite.")

    print(format_result(result, config))
    return 0
