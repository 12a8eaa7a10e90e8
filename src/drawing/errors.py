"""Domain errors raised by the shape generators.

Generators are pure and deterministic, so a failing call fails the same way
on every retry. Errors are raised at generator entry instead of letting
NaN or infinite coordinates leak into a path.
"""

import math
import operator
from typing import Optional


class DrawingError(Exception):
    """Base class for all drawing errors."""


class DivisionByZeroError(DrawingError, ZeroDivisionError):
    """A parameter would be used as a divisor while zero.

    Raised for a spirograph with a zero outer radius (or two zero radii)
    and for a color cycle with no steps.
    """


class DegenerateGeometryError(DrawingError, ValueError):
    """Parameters describe geometry that cannot be drawn.

    Negative sizes, negative grid counts, non-finite values and hue
    positions outside the wrappable range all land here.
    """


def require_finite(name: str, value: float) -> float:
    """Return ``value`` as a float, raising if it is NaN or infinite."""
    try:
        value = float(value)
    except (TypeError, ValueError, OverflowError):
        raise DegenerateGeometryError(f"{name} must be a finite number, got {value!r}") from None
    if not math.isfinite(value):
        raise DegenerateGeometryError(f"{name} must be finite, got {value}")
    return value


def require_integer(name: str, value, minimum: Optional[int] = None) -> int:
    """Return ``value`` as an int, raising unless it is a whole number >= minimum.

    Integral types are taken exactly; only other numbers go through float,
    so large ints are never rounded.
    """
    try:
        number = operator.index(value)
    except TypeError:
        try:
            as_float = float(value)
        except (TypeError, ValueError, OverflowError):
            raise DegenerateGeometryError(f"{name} must be a number, got {value!r}") from None
        if not as_float.is_integer():
            raise DegenerateGeometryError(f"{name} must be a whole number, got {value}")
        number = int(as_float)
    if minimum is not None and number < minimum:
        raise DegenerateGeometryError(f"{name} must be at least {minimum}, got {value}")
    return number
