"""NA sentinel and the Lookup maybe-result"""
import copy
import pickle

import pytest
from py_subset import NA, NAType, Lookup, is_na
from py_subset import SubsetKeyError, SubsetTypeError


class TestNA:

    def test_singleton(self):
        assert NAType() is NA

    def test_never_equal(self):
        assert not (NA == NA)
        assert NA != NA
        assert not (NA == 1)
        assert not (NA == None)  # noqa: E711

    def test_truth_value_is_undefined(self):
        with pytest.raises(SubsetTypeError):
            bool(NA)

    def test_hashable(self):
        assert NA in {NA}

    def test_survives_copy_and_pickle(self):
        assert copy.copy(NA) is NA
        assert copy.deepcopy(NA) is NA
        assert pickle.loads(pickle.dumps(NA)) is NA

    def test_repr(self):
        assert repr(NA) == "NA"

    @pytest.mark.parametrize("value,expected", [
        (NA, True),
        (None, True),
        (float('nan'), True),
        (0, False),
        ('', False),
        (False, False),
    ])
    def test_is_na(self, value, expected):
        assert is_na(value) is expected


class TestLookup:

    def test_found(self):
        found = Lookup(3)
        assert found.found
        assert found.unwrap() == 3
        assert found.get(0) == 3

    def test_missing(self):
        miss = Lookup.missing()
        assert not miss.found
        assert miss.value is NA
        assert miss.get(0) == 0

    def test_unwrap_missing_raises(self):
        with pytest.raises(SubsetKeyError):
            Lookup.missing().unwrap('key')

    def test_found_na_is_distinct_from_missing(self):
        assert Lookup(NA).found
        assert Lookup(NA) != Lookup.missing()
