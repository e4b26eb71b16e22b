#
# BigNumber - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bignumber.sentinels import UNSET, UnsetType, ifnotunset


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class TestUnset:
    def test_singleton_identity(self):
        """Ensure the sentinel is a singleton object."""
        assert UNSET is UnsetType()

    def test_repr_clean(self):
        assert repr(UNSET) == "<UNSET>"

    def test_falsy(self):
        assert bool(UNSET) is False

    def test_hash_is_identity_based(self):
        """Confirm hash is consistent with identity."""
        assert hash(UNSET) == id(UNSET)

    def test_pickle_roundtrip(self):
        """Ensure pickling preserves singleton identity."""
        data = pickle.dumps(UNSET, protocol=pickle.HIGHEST_PROTOCOL)
        assert pickle.loads(data) is UNSET

    def test_equality_with_non_sentinel(self):
        assert (UNSET == object()) is False  # type: ignore[comparison-overlap]
        assert (UNSET == None) is False  # noqa: E711  # type: ignore[comparison-overlap]


class TestIfNotUnset:

    @pytest.mark.parametrize(
        "value, default, expected",
        [
            pytest.param("x", "d", "x", id="not_sentinel"),
            pytest.param(0, 2, 0, id="falsy_value_kept"),
            pytest.param(None, "d", None, id="none_value_kept"),
            pytest.param(UNSET, "d", "d", id="default"),
        ],
    )
    def test_core_behavior(self, value, default, expected):
        """Return value unless it is UNSET, then the default."""
        assert ifnotunset(value, default=default) == expected

    def test_no_default(self):
        assert ifnotunset(UNSET) is None
