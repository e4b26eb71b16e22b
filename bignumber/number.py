"""
BigNumber: magnitudes beyond float range for incremental/idle-game progressions.

A value is stored as mantissa×10^exponent in normalized scientific form,
with 1 <= |mantissa| < 10 or mantissa == 0. Arithmetic aligns exponents
and renormalizes; rendering picks plain, K/M/B-suffixed or scientific form.

Precision is bounded by the float mantissa (~15-17 significant digits).
This is not an arbitrary-precision decimal type.
"""

# ## Exponent saturation
#
# The exponent is a signed 32-bit integer. When normalization would push it
# past either bound, adjustment stops and the out-of-range mantissa is kept.
# Arithmetic exponents beyond the bounds are clamped and the excess is folded
# into the mantissa, which overflows or underflows accordingly. Saturated
# values render in scientific notation and report is_normalized == False.
# Saturation is never raised to the caller; it is logged at DEBUG level only.

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
import re
import sys
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Literal, Mapping, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .display import display_number
from .formatters import fmt_type, fmt_value
from .numeric import decimal_exponent, std_numeric
from .sentinels import UNSET, UnsetType, ifnotunset

logger = logging.getLogger(__name__)


# @formatter:off

class NumberConf:
    """
    Default configuration constants for BigNumber.

    Attributes:
        EXPONENT_MIN: Smallest representable exponent (signed 32-bit).
        EXPONENT_MAX: Largest representable exponent (signed 32-bit).

        DECIMALS_MIN: Smallest display precision.
        DECIMALS_MAX: Largest display precision (unsigned 8-bit).
        DECIMALS_DEFAULT: Display precision of ZERO, ONE and new instances.

        ALIGN_CUTOFF: Largest exponent gap at which add/sub still scale the
            smaller operand. Beyond it the smaller operand is below double
            resolution and the larger operand is returned as is.
    """

    EXPONENT_MIN = -2 ** 31
    EXPONENT_MAX = 2 ** 31 - 1

    DECIMALS_MIN = 0
    DECIMALS_MAX = 255
    DECIMALS_DEFAULT = 2

    ALIGN_CUTOFF = 17

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class BigNumberZeroDivisionError(ZeroDivisionError):
    """Raised when dividing by a BigNumber whose mantissa is exactly zero."""


@dataclass(frozen=True)
class BigNumber:
    """
    Immutable number stored as mantissa×10^exponent.

    The constructor normalizes its input, so BigNumber(300, 3) and
    BigNumber(3, 5) are the same value. Every operation returns a new
    instance; nothing is mutated after construction.

    Attributes:
        mantissa: Significant digits, 1 <= |mantissa| < 10 or exactly 0
                  (except under exponent saturation).
        exponent: Signed 32-bit power of ten applied to mantissa.
        decimals: Default fractional digits for to_string() and str().
                  Presentation only; never changes the numeric value.

    Arithmetic:
        - add(), sub(), mul(), div() take BigNumber operands.
        - Operators + - * / also accept plain numbers on either side,
          converted with from_number().
        - Results inherit decimals from the left operand.

    Equality & Ordering:
        - == compares fields (mantissa, exponent, decimals), as derived by dataclass.
        - < <= > >= and compare() compare numeric values only.

    Examples:
        >>> a = BigNumber(1, 10)
        >>> b = BigNumber(2, 10)
        >>> str(a + b)
        '30B'
        >>> str(BigNumber(6, 10) / BigNumber(2, 5))
        '300K'
        >>> BigNumber(1.23456).to_string(1)
        '1.2'
        >>> BigNumber(300, 3)
        BigNumber(mantissa=3.0, exponent=5, decimals=2)

    Raises:
        TypeError: Invalid field types (e.g. str mantissa, float exponent, bool anywhere).
        ValueError: Non-finite mantissa, exponent or decimals out of range.
    """
    mantissa: float
    exponent: int = 0
    decimals: int = NumberConf.DECIMALS_DEFAULT

    def __post_init__(self):
        """
        Validate fields and normalize mantissa and exponent.
        """
        exponent = _validate_exponent(self.exponent)
        decimals = _validate_decimals(self.decimals)
        mantissa, exponent = _std_mantissa(self.mantissa, exponent)
        mantissa, exponent = _normalize(mantissa, exponent)

        object.__setattr__(self, 'mantissa', mantissa)
        object.__setattr__(self, 'exponent', exponent)
        object.__setattr__(self, 'decimals', decimals)

    # ----- Factories -----

    @classmethod
    def zero(cls) -> Self:
        """Zero with default display precision."""
        return ZERO

    @classmethod
    def one(cls) -> Self:
        """One with default display precision."""
        return ONE

    @classmethod
    def from_number(cls, value: Any, decimals: int = NumberConf.DECIMALS_DEFAULT) -> Self:
        """
        Create a BigNumber from a plain number.

        Ints, Decimals and Fractions are converted without passing through
        float, so values far beyond float range keep their exponent exactly.

        Args:
            value: int, float, Decimal, Fraction, BigNumber, or a third-party
                   scalar accepted by std_numeric() (NumPy scalars, .item() types).
            decimals: Display precision of the result.

        Raises:
            TypeError: If value is not numeric, or is a bool.
            ValueError: If value is NaN or infinite.

        Examples:
            >>> BigNumber.from_number(1500)
            BigNumber(mantissa=1.5, exponent=3, decimals=2)
            >>> BigNumber.from_number(10 ** 400).exponent
            400
            >>> BigNumber.from_number(Decimal("-2.5e-1000")).exponent
            -1000
        """
        if isinstance(value, BigNumber):
            return value.merge(decimals=decimals)

        if isinstance(value, Decimal):
            if not value.is_finite():
                raise ValueError(f"value must be finite, but got {fmt_value(value)}")
            if not value:
                return cls(0.0, 0, decimals)
            exp = decimal_exponent(value)
            return cls(float(value.scaleb(-exp)), exp, decimals)

        if isinstance(value, Fraction):
            if not value:
                return cls(0.0, 0, decimals)
            exp = decimal_exponent(value)
            return cls(float(value / Fraction(10) ** exp), exp, decimals)

        number = std_numeric(value)
        if isinstance(number, float) and not math.isfinite(number):
            raise ValueError(f"value must be finite, but got {fmt_value(value)}")
        return cls(number, 0, decimals)

    def merge(self,
              mantissa: float | UnsetType = UNSET,
              exponent: int | UnsetType = UNSET,
              decimals: int | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new BigNumber with selected fields overridden.

        Fields not provided (UNSET) are inherited from the current instance.
        The result is normalized like any constructed value.

        Example:
            >>> BigNumber(1.5, 3).merge(decimals=4)
            BigNumber(mantissa=1.5, exponent=3, decimals=4)
        """
        return BigNumber(
            ifnotunset(mantissa, default=self.mantissa),
            ifnotunset(exponent, default=self.exponent),
            ifnotunset(decimals, default=self.decimals),
        )

    # ----- Arithmetic -----

    def add(self, other: "BigNumber") -> "BigNumber":
        """
        Sum of self and other.

        A zero operand short-circuits to the other operand unchanged. When the
        exponent gap exceeds NumberConf.ALIGN_CUTOFF, the larger operand is
        returned unchanged.
        """
        _validate_operand(other, "add")
        if other.mantissa == 0:
            return self
        if self.mantissa == 0:
            return other
        return self._combine(other, sign=1)

    def sub(self, other: "BigNumber") -> "BigNumber":
        """
        Difference of self and other.

        A zero subtrahend returns self unchanged; a zero minuend returns the
        negated subtrahend. Beyond NumberConf.ALIGN_CUTOFF the result is the
        minuend, or the negated subtrahend when it is the larger one.
        """
        _validate_operand(other, "sub")
        if other.mantissa == 0:
            return self
        if self.mantissa == 0:
            return -other
        return self._combine(other, sign=-1)

    def mul(self, other: "BigNumber") -> "BigNumber":
        """Product of self and other."""
        _validate_operand(other, "mul")
        return _make(self.mantissa * other.mantissa, self.exponent + other.exponent, self.decimals)

    def div(self,
            other: "BigNumber",
            *,
            on_error: Literal["raise", "none"] = "raise",
            ) -> "BigNumber | None":
        """
        Quotient of self and other.

        Dividing by a zero mantissa never yields zero or infinity. It raises
        BigNumberZeroDivisionError, or returns None when on_error="none", so
        callers choose between an exception and an explicit missing result.

        Args:
            other: Divisor.
            on_error: "raise" (default) or "none".

        Raises:
            BigNumberZeroDivisionError: If other is zero and on_error="raise".
            ValueError: If on_error is not "raise" or "none".

        Examples:
            >>> BigNumber(6, 10).div(BigNumber(2, 5))
            BigNumber(mantissa=3.0, exponent=5, decimals=2)
            >>> BigNumber(6, 10).div(ZERO, on_error="none") is None
            True
        """
        _validate_operand(other, "div")
        if on_error not in ("raise", "none"):
            raise ValueError(f"on_error must be 'raise' or 'none', but got {fmt_value(on_error)}")

        if other.mantissa == 0:
            if on_error == "raise":
                raise BigNumberZeroDivisionError(f"BigNumber division by zero: {self!r} / {other!r}")
            return None

        return _make(self.mantissa / other.mantissa, self.exponent - other.exponent, self.decimals)

    def compare(self, other: "BigNumber") -> int:
        """
        Compare numeric values, ignoring decimals.

        Returns:
            -1 if self < other, 0 if equal, +1 if self > other.
        """
        _validate_operand(other, "compare")
        diff = self.sub(other).mantissa
        return (diff > 0) - (diff < 0)

    def _combine(self, other: "BigNumber", sign: int) -> "BigNumber":
        """Align exponents and add sign*other to self; both mantissas are non-zero."""
        other_mantissa = sign * other.mantissa

        if self.exponent == other.exponent:
            return _make(self.mantissa + other_mantissa, self.exponent, self.decimals)

        if self.exponent > other.exponent:
            diff = self.exponent - other.exponent
            if diff > NumberConf.ALIGN_CUTOFF:
                return self
            return _make(self.mantissa + other_mantissa / 10.0 ** diff, self.exponent, self.decimals)

        diff = other.exponent - self.exponent
        if diff > NumberConf.ALIGN_CUTOFF:
            return other if sign > 0 else -other
        return _make(self.mantissa / 10.0 ** diff + other_mantissa, other.exponent, self.decimals)

    # ----- Properties -----

    @property
    def is_normalized(self) -> bool:
        """False only when exponent saturation left the mantissa out of [1, 10)."""
        return self.mantissa == 0 or 1 <= abs(self.mantissa) < 10

    @property
    def is_zero(self) -> bool:
        return self.mantissa == 0

    @property
    def sign(self) -> int:
        """-1, 0 or +1."""
        return (self.mantissa > 0) - (self.mantissa < 0)

    # ----- Conversion & Formatting -----

    def to_float(self) -> float:
        """
        Nearest float value.

        Overflows to +/-inf beyond float range and underflows to 0.0.
        """
        try:
            return self.mantissa * 10.0 ** self.exponent
        except OverflowError:
            if self.mantissa == 0:
                return 0.0
            return math.copysign(math.inf, self.mantissa)

    def to_string(self, precision: int | None = None, *, suffixes: Mapping[int, str] | None = None) -> str:
        """
        Render as a plain, suffixed or scientific string.

        Args:
            precision: Fractional digits before trailing zeros are trimmed;
                       the stored decimals if None. Never changes the tier.
            suffixes: Suffix tiers, DisplayConf.SUFFIXES if None.

        Examples:
            >>> BigNumber(1, 9).to_string()
            '1B'
            >>> BigNumber(1.234, 3).to_string(1)
            '1.2K'
            >>> BigNumber(4.5678, 20).to_string()
            '4.57e20'
            >>> ZERO.to_string(5)
            '0'
        """
        precision = self.decimals if precision is None else precision
        return display_number(self.mantissa, self.exponent, precision, suffixes=suffixes)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        """
        Format with an optional precision spec: "", ".3" or ".3f".

        Example:
            >>> f"{BigNumber(1.23456, 3):.1}"
            '1.2K'
        """
        if not format_spec:
            return self.to_string()
        match = re.fullmatch(r"\.(\d+)f?", format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {format_spec!r} for BigNumber")
        return self.to_string(int(match.group(1)))

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero

    # ----- Operators -----

    def __neg__(self) -> "BigNumber":
        mantissa = -self.mantissa if self.mantissa else self.mantissa
        return BigNumber(mantissa, self.exponent, self.decimals)

    def __pos__(self) -> "BigNumber":
        return self

    def __abs__(self) -> "BigNumber":
        return BigNumber(abs(self.mantissa), self.exponent, self.decimals)

    def __add__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.mul(self)

    def __truediv__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "BigNumber":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def _coerce(self, other: Any) -> "BigNumber | None":
        """Operand as BigNumber with self.decimals for plain numbers, None if not numeric."""
        if isinstance(other, BigNumber):
            return other
        try:
            return BigNumber.from_number(other, self.decimals)
        except TypeError:
            return None


# Methods --------------------------------------------------------------------------------------------------------------

def _make(mantissa: float, exponent: int, decimals: int) -> BigNumber:
    """
    Build an arithmetic result, clamping what leaves the representable range.

    An exponent past its bounds is clamped and the excess powers of ten are
    folded into the mantissa, which then overflows towards float max or
    underflows towards zero. A non-finite mantissa is clamped to float max.
    """
    if exponent > NumberConf.EXPONENT_MAX:
        logger.debug(f"BigNumber exponent {exponent} clamped to {NumberConf.EXPONENT_MAX}")
        mantissa = _scale(mantissa, exponent - NumberConf.EXPONENT_MAX)
        exponent = NumberConf.EXPONENT_MAX
    elif exponent < NumberConf.EXPONENT_MIN:
        logger.debug(f"BigNumber exponent {exponent} clamped to {NumberConf.EXPONENT_MIN}")
        mantissa = _scale(mantissa, exponent - NumberConf.EXPONENT_MIN)
        exponent = NumberConf.EXPONENT_MIN

    if not math.isfinite(mantissa):
        logger.debug(f"BigNumber mantissa overflow clamped to float max: {mantissa}")
        mantissa = math.copysign(sys.float_info.max, mantissa)

    return BigNumber(mantissa, exponent, decimals)


def _scale(mantissa: float, shift: int) -> float:
    """mantissa * 10**shift in float arithmetic; overflow gives a signed inf."""
    try:
        return mantissa * 10.0 ** shift
    except OverflowError:
        if mantissa == 0:
            return mantissa
        return math.copysign(math.inf, mantissa)


def _normalize(mantissa: float, exponent: int) -> tuple[float, int]:
    """
    Scale mantissa into [1, 10) by powers of ten, adjusting exponent.

    Works on the magnitude and reapplies the sign afterwards, so negative
    mantissas normalize exactly like positive ones. Zero passes through
    unchanged. Stops at the exponent bounds (saturation).
    """
    if mantissa == 0:
        return mantissa, exponent

    magnitude = abs(mantissa)

    while magnitude >= 10 and exponent < NumberConf.EXPONENT_MAX:
        magnitude /= 10
        exponent += 1

    while magnitude < 1 and exponent > NumberConf.EXPONENT_MIN:
        magnitude *= 10
        exponent -= 1

    if not 1 <= magnitude < 10:
        logger.debug(f"BigNumber normalization saturated at exponent {exponent}, mantissa {magnitude!r} retained")

    return math.copysign(magnitude, mantissa), exponent


def _std_mantissa(mantissa: Any, exponent: int) -> tuple[float, int]:
    """
    Convert mantissa to a finite float.

    Integer mantissas are folded into the exponent before float conversion,
    so ints beyond float range are accepted exactly. Folding stops at
    EXPONENT_MAX; a remainder beyond float range is clamped to float max.
    """
    value = std_numeric(mantissa, on_error="none")
    if value is None:
        raise TypeError(f"mantissa must be int | float, but got {fmt_type(mantissa)}")

    if isinstance(value, int):
        if value == 0:
            return 0.0, exponent
        shift = min(decimal_exponent(value), NumberConf.EXPONENT_MAX - exponent)
        try:
            return value / 10 ** shift, exponent + shift
        except OverflowError:
            logger.debug(f"BigNumber int mantissa clamped to float max at exponent {exponent + shift}")
            return (sys.float_info.max if value > 0 else -sys.float_info.max), exponent + shift

    if not math.isfinite(value):
        raise ValueError(f"mantissa must be finite, but got {fmt_value(mantissa)}")
    return value, exponent


def _validate_decimals(decimals: Any) -> int:
    value = std_numeric(decimals, on_error="none")
    if not isinstance(value, int):
        raise TypeError(f"decimals must be int, but got {fmt_type(decimals)}")
    if not NumberConf.DECIMALS_MIN <= value <= NumberConf.DECIMALS_MAX:
        raise ValueError(f"decimals must be in [{NumberConf.DECIMALS_MIN}, {NumberConf.DECIMALS_MAX}], "
                         f"but got {fmt_value(decimals)}")
    return value


def _validate_exponent(exponent: Any) -> int:
    value = std_numeric(exponent, on_error="none")
    if not isinstance(value, int):
        raise TypeError(f"exponent must be int, but got {fmt_type(exponent)}")
    if not NumberConf.EXPONENT_MIN <= value <= NumberConf.EXPONENT_MAX:
        raise ValueError(f"exponent must be in [{NumberConf.EXPONENT_MIN}, {NumberConf.EXPONENT_MAX}], "
                         f"but got {fmt_value(exponent)}")
    return value


def _validate_operand(other: Any, operation: str) -> None:
    if not isinstance(other, BigNumber):
        raise TypeError(f"BigNumber.{operation}() operand must be BigNumber, but got {fmt_type(other)}")


# Constants ------------------------------------------------------------------------------------------------------------

ZERO = BigNumber(0.0, 0, NumberConf.DECIMALS_DEFAULT)
ONE = BigNumber(1.0, 0, NumberConf.DECIMALS_DEFAULT)
