"""
Literals - Rendering of non-string JSON tokens.

Every scalar the builder accepts goes through render_literal(), which picks
a renderer from a small table keyed by the kind of value. Strings are not
handled here: they are written through the scribe's string-value
primitives so they can be escaped as they stream.
"""

import math
import numbers
from decimal import Decimal
from typing import Any, Callable, List, Tuple

NULL = 'null'
TRUE = 'true'
FALSE = 'false'


def render_bool(value: bool) -> str:
    return TRUE if value else FALSE


# str(int) refuses very long integers (sys.set_int_max_str_digits); Decimal does not.
_PLAIN_INT_LIMIT = 10 ** 4000


def render_integral(value: numbers.Integral) -> str:
    value = int(value)
    if -_PLAIN_INT_LIMIT < value < _PLAIN_INT_LIMIT:
        return str(value)
    return str(Decimal(value))


def render_float(value: numbers.Real) -> str:
    """
    Render a binary float, or null when it is NaN, infinite, or too large
    to be a float.

    repr() gives the shortest string that round-trips, which is always a
    valid JSON number once it is finite.
    """
    try:
        value = float(value)
    except OverflowError:
        return NULL
    if not math.isfinite(value):
        return NULL
    return repr(value)


def render_decimal(value: Decimal) -> str:
    """
    Render a Decimal at its full precision, or null when it is not finite.

    str() only falls back to exponent notation when that is the canonical
    form, and its output is always a valid JSON number.
    """
    if not value.is_finite():
        return NULL
    return str(value)


# Order matters: bool is an Integral, and Decimal is not a numbers.Real.
_RENDERERS: List[Tuple[type, Callable[[Any], str]]] = [
    (bool, render_bool),
    (numbers.Integral, render_integral),
    (Decimal, render_decimal),
    (numbers.Real, render_float),
]


def is_scalar(value: Any) -> bool:
    """Check whether render_literal() can handle value."""
    return value is None or any(isinstance(value, kind) for kind, _ in _RENDERERS)


def render_literal(value: Any) -> str:
    """
    Render None, a bool or a number as a JSON literal token.

    Raises:
        TypeError: If value is not one of the supported kinds.
    """
    if value is None:
        return NULL
    for kind, renderer in _RENDERERS:
        if isinstance(value, kind):
            return renderer(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
