"""
Tiered display formatting for BigNumber values.

A value mantissa×10^exponent is rendered as:
    - plain number below the first suffix tier, e.g. "999", "1.23"
    - scaled number with a suffix inside the tiers, e.g. "1.5K", "30B"
    - scientific notation from the stored mantissa above the last tier, e.g. "1.23e15"
"""

# ## Scope
#
# Formatting is one-way (value → human-readable string). Suffixed strings are
# not meant to be parsed back; keep the BigNumber itself when the value matters.

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_fixed, fmt_type, fmt_value


# @formatter:off

class DisplayConf:
    """
    Default configuration constants for BigNumber string rendering.

    Attributes:
        SUFFIXES: Default suffix tiers, maps tier exponent to suffix.
            Values with exponent in [3, 6) render with "K", [6, 9) with "M",
            [9, 12) with "B". Exponents >= 12 render in scientific notation.

        SUFFIXES_EXTENDED: Short-scale suffixes common in idle games,
            extending the default tiers up to decillion (10^33).

        EXPONENT_SEPARATOR: Separator between mantissa and exponent in
            scientific notation.

        MAX_TIER_EXPONENT: Largest accepted suffix tier exponent. Keeps the
            scaled tier value within double range.

    Examples:
        >>> BigNumber(1.5, 12).to_string(suffixes=DisplayConf.SUFFIXES_EXTENDED)
        '1.5T'
    """

    SUFFIXES = {
        0: "",
        3: "K",    # thousand
        6: "M",    # million
        9: "B",    # billion
    }

    SUFFIXES_EXTENDED = {
        0: "",
        3: "K",    # thousand
        6: "M",    # million
        9: "B",    # billion
        12: "T",   # trillion
        15: "Qa",  # quadrillion
        18: "Qi",  # quintillion
        21: "Sx",  # sextillion
        24: "Sp",  # septillion
        27: "Oc",  # octillion
        30: "No",  # nonillion
        33: "Dc",  # decillion
    }

    EXPONENT_SEPARATOR = "e"

    MAX_TIER_EXPONENT = 300

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def display_number(
        mantissa: float,
        exponent: int,
        precision: int,
        *,
        suffixes: Mapping[int, str] | None = None,
) -> str:
    """
    Render mantissa×10^exponent as a suffixed or scientific string.

    Tier selection depends only on the exponent (and on whether the mantissa is
    normalized), never on precision. Within the chosen tier the number is
    rendered by fmt_fixed() at the given precision.

    Args:
        mantissa: Stored mantissa, normally 1 <= |mantissa| < 10 or exactly 0.
        exponent: Power of ten applied to mantissa.
        precision: Fractional digits before trimming trailing zeros.
        suffixes: Tier exponent to suffix mapping; DisplayConf.SUFFIXES if None.

    Returns:
        str: "0" for zero mantissa, a plain or suffixed number inside the tiers,
             "<mantissa>e<exponent>" otherwise.

    Raises:
        TypeError: On invalid suffixes or precision types.
        ValueError: On negative precision or out-of-range tier exponents.

    Examples:
        >>> display_number(3.0, 10, 2)
        '30B'
        >>> display_number(1.23456, 0, 1)
        '1.2'
        >>> display_number(-4.5, 15, 2)
        '-4.5e15'
        >>> display_number(0.0, 99, 2)
        '0'
    """
    suffixes = DisplayConf.SUFFIXES if suffixes is None else suffixes
    _validate_suffixes(suffixes)

    if mantissa == 0:
        # fmt_fixed validates precision and renders "0" for every valid one
        return fmt_fixed(0, precision)

    if exponent >= scientific_ceiling(suffixes) or not (1 <= abs(mantissa) < 10):
        return f"{fmt_fixed(mantissa, precision)}{DisplayConf.EXPONENT_SEPARATOR}{exponent}"

    tier = max((exp for exp in suffixes if exp <= exponent), default=0)
    scaled = mantissa * 10.0 ** (exponent - tier)
    return f"{fmt_fixed(scaled, precision)}{suffixes.get(tier, '')}"


def scientific_ceiling(suffixes: Mapping[int, str] | None = None) -> int:
    """
    Smallest exponent rendered in scientific notation for the given tiers.

    It is the largest tier exponent plus 3, so the last tier covers three
    orders of magnitude like every other tier.

    Examples:
        >>> scientific_ceiling()
        12
        >>> scientific_ceiling(DisplayConf.SUFFIXES_EXTENDED)
        36
    """
    suffixes = DisplayConf.SUFFIXES if suffixes is None else suffixes
    if not suffixes:
        return 3
    return max(suffixes) + 3


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_suffixes(suffixes: Mapping[int, str]) -> None:
    if not isinstance(suffixes, Mapping):
        raise TypeError(f"suffixes must be a Mapping[int, str], but got {fmt_type(suffixes)}")
    for exp, suffix in suffixes.items():
        if isinstance(exp, bool) or not isinstance(exp, int):
            raise TypeError(f"suffix tier exponent must be int, but got {fmt_type(exp)}")
        if not isinstance(suffix, str):
            raise TypeError(f"suffix must be str, but got {fmt_type(suffix)}")
        if not 0 <= exp <= DisplayConf.MAX_TIER_EXPONENT:
            raise ValueError(f"suffix tier exponent must be in [0, {DisplayConf.MAX_TIER_EXPONENT}], "
                             f"but got {fmt_value(exp)}")
