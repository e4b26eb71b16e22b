"""
Formatting helpers shared across the package.

- fmt_fixed(): fixed-point rendering with trailing zeros trimmed, the building
  block of every BigNumber string.
- fmt_type(), fmt_value(): compact type/value tokens for exception messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_fixed(number: int | float, precision: int) -> str:
    """
    Format number in fixed-point notation and trim the fractional tail.

    Trailing zero digits are removed, then a standalone trailing decimal point.
    Strings without a decimal point are returned untouched, so integral digits
    are never trimmed. A negative zero produced by rounding is written as "0".

    Args:
        number: int or float to format.
        precision: Number of fractional digits to render before trimming.

    Returns:
        str: Trimmed fixed-point representation.

    Raises:
        TypeError: If number is not int | float, or precision is not int.
        ValueError: If precision is negative.

    Examples:
        >>> fmt_fixed(1.23456, 2)
        '1.23'
        >>> fmt_fixed(5.0, 3)
        '5'
        >>> fmt_fixed(1200, 2)
        '1200'
        >>> fmt_fixed(-0.001, 2)
        '0'
    """
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise TypeError(f"number must be int | float, but got {fmt_type(number)}")
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be int, but got {fmt_type(precision)}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, but got {fmt_value(precision)}")

    s = f"{number:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def fmt_type(obj: Any) -> str:
    """
    Format type information for exception messages.

    Accepts either a type or an instance; instances are formatted by their type.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(float)
        '<type: float>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    type_name = getattr(target_type, "__name__", str(target_type))
    return f"<type: {type_name}>"


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    A closing ">" inside the repr is escaped so the token stays unambiguous.
    A broken __repr__ never propagates out of an error path; it is replaced
    by a placeholder naming the failure.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("a>b")
        "<str: 'a\\\\>b'>"
    """
    type_name = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as exc:
        base_repr = f"<{type_name} object (repr failed: {type(exc).__name__})>"

    base_repr = base_repr.replace(">", "\\>")
    if max_repr > 0 and len(base_repr) > max_repr:
        base_repr = base_repr[:max_repr] + "..."

    return f"<{type_name}: {base_repr}>"
