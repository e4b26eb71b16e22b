"""
Standardize numeric inputs from Python stdlib and third-party libraries.

BigNumber accepts mantissas and source numbers of many concrete types
(NumPy scalars, Decimal, Fraction, tensor scalars). Everything is reduced
to a stdlib int or float here before normalization.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value


# Constants ------------------------------------------------------------------------------------------------------------

_LOG10_2 = math.log10(2)


# Methods --------------------------------------------------------------------------------------------------------------

def std_numeric(
        value,
        *,
        on_error: Literal["raise", "none"] = "raise",
) -> int | float | None:
    """
    Convert numeric types to standard Python int or float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float, Decimal, Fraction,
        and third-party types via __index__, .item() or __float__.

    on_error : {"raise", "none"}, default "raise"
        How to handle unsupported types (str, list, None, ...):

        - "raise": Raise TypeError
        - "none": Return None

        Numeric edge cases (inf, nan) are always passed through unchanged;
        rejecting them is left to the caller.

    Booleans are rejected like unsupported types; True is not a mantissa.

    Returns
    -------
    int
        For Python int, types implementing __index__ (NumPy integers), and
        integer-valued Decimal/Fraction (exact, arbitrary precision).

    float
        For floats, fractional Decimal/Fraction and other __float__ types.
        May overflow to inf or underflow to 0.0.

    Detection Priority
    ------------------
    1. int/float fast path
    2. __index__() → int
    3. .item() → int or float (array scalars)
    4. Integer-valued Decimal/Fraction → int
    5. __float__() → float

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> std_numeric(Decimal("1e400"))
    1000000000...000
    >>> std_numeric(Fraction(1, 4))
    0.25
    >>> std_numeric("1.5")
    Traceback (most recent call last):
        ...
    TypeError: unsupported numeric type: <type: str>
    """
    if isinstance(value, bool):
        return _on_error(on_error, f"boolean values not supported, got {value}")

    if isinstance(value, (int, float)):
        return value

    # NumPy integers and other exact integer types
    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as exc:
            return _on_error(on_error, f"cannot convert {fmt_type(value)} to int via __index__: {exc}")

    # Array and tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            return _on_error(on_error, f"boolean values not supported (from .item()), got {fmt_value(value)}")
        if isinstance(result, (int, float)):
            return result

    # Keep integer-valued Decimal/Fraction exact
    if isinstance(value, (Decimal, Fraction)):
        if isinstance(value, Decimal) and not value.is_finite():
            return float(value)
        as_int = int(value)
        if value == as_int:
            return as_int

    if hasattr(value, "__float__"):
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            return _on_error(on_error, f"cannot convert {fmt_type(value)} to float: {exc}")

    return _on_error(on_error, f"unsupported numeric type: {fmt_type(value)}")


def decimal_exponent(value: int | float | Decimal | Fraction) -> int:
    """
    Return the base-10 exponent of the leading significant digit.

    Exact for int, Decimal and Fraction of any size, without converting ints
    to str (no 4300-digit limit). Floats are converted to Decimal first,
    which is lossless, so 1000.0 never lands on 2.
    Zero has exponent 0.

    Examples:
        >>> decimal_exponent(12345)
        4
        >>> decimal_exponent(10 ** 400)
        400
        >>> decimal_exponent(Decimal("0.00123"))
        -3
        >>> decimal_exponent(1000.0)
        3
    """
    if isinstance(value, bool):
        raise TypeError(f"value must be int | float | Decimal | Fraction, but got {fmt_type(value)}")

    if isinstance(value, int):
        if not value:
            return 0
        num = abs(value)
        # bit_length bounds log10 to within one digit; settle with one comparison
        exp = int((num.bit_length() - 1) * _LOG10_2)
        if num < 10 ** exp:
            return exp - 1
        if num >= 10 ** (exp + 1):
            return exp + 1
        return exp

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"value must be finite, but got {fmt_value(value)}")
        return value.adjusted() if value else 0

    if isinstance(value, Fraction):
        if not value:
            return 0
        num, den = abs(value.numerator), value.denominator
        exp = decimal_exponent(num) - decimal_exponent(den)
        # num/den in [10^exp / 10, 10^exp * 10); settle which side of 10^exp it lies on
        if exp >= 0:
            below = num < den * 10 ** exp
        else:
            below = num * 10 ** -exp < den
        return exp - 1 if below else exp

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"value must be finite, but got {fmt_value(value)}")
        if value == 0:
            return 0
        return decimal_exponent(Decimal(value))

    raise TypeError(f"value must be int | float | Decimal | Fraction, but got {fmt_type(value)}")


# Private Methods ------------------------------------------------------------------------------------------------------

def _on_error(on_error: str, message: str) -> None:
    if on_error == "raise":
        raise TypeError(message)
    return None
