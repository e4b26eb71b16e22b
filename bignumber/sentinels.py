"""
Sentinel for distinguishing an omitted argument from an explicit value.

BigNumber overrides (see BigNumber.merge) accept any field value, so omission
is signalled with UNSET rather than None. Use identity checks: `if x is UNSET:`.

Example:
    >>> n = BigNumber(1.5, 3)
    >>> n.merge(decimals=ifnotunset(decimals, default=n.decimals))
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Singleton type of the UNSET sentinel.

    Falsy, identity-compared, and pickled back to the same instance.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""Sentinel representing an unprovided optional argument."""


# Methods --------------------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check. If not UNSET, this value is returned.
        default: The fallback value when value is UNSET.

    Example:
        >>> ifnotunset(UNSET, default=2)
        2
        >>> ifnotunset(0, default=2)
        0
    """
    return default if value is UNSET else value
