#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import sys

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bignumber.number import BigNumber, NumberConf


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def saturated_max() -> BigNumber:
    """Largest float mantissa stuck at the maximum exponent."""
    return BigNumber(sys.float_info.max, NumberConf.EXPONENT_MAX)


@pytest.fixture
def saturated_min() -> BigNumber:
    """Sub-unit mantissa stuck at the minimum exponent."""
    return BigNumber(0.1, NumberConf.EXPONENT_MIN)


@pytest.fixture
def number_log(caplog):
    """Capture DEBUG records of the bignumber.number logger."""
    caplog.set_level(logging.DEBUG, logger="bignumber.number")
    return caplog
