"""Keyed-list subsetting: [[ (extract_one), $ (literal names), [ (extract)"""
import pytest
from py_subset import PyList, PyVector, PyArray, NA, Lookup
from py_subset import SubsetIndexError, SubsetKeyError, SubsetTypeError, SubsetValueError


@pytest.fixture
def x():
    return PyList({'foo': [1, 2, 3, 4], 'bar': 0.6, 'baz': 'hello'})


@pytest.fixture
def nested():
    return PyList({'a': PyList([10, 12, 14]), 'b': [3.14, 2.81]})


class TestConstruction:

    def test_from_dict(self, x):
        assert len(x) == 3
        assert x.names == ('foo', 'bar', 'baz')

    def test_values_are_normalized(self, x):
        assert isinstance(x.extract_one(1), PyVector)
        assert isinstance(PyList({'d': {'e': 1}}).extract_one('d'), PyList)

    def test_from_values_and_names(self):
        y = PyList([1, 'a'], names=['n', None])
        assert y.names == ('n', None)

    def test_from_keywords(self):
        y = PyList(alpha=1, beta=2)
        assert y.names == ('alpha', 'beta')

    def test_names_length_checked(self):
        with pytest.raises(SubsetValueError):
            PyList([1, 2], names=['a'])


class TestExtractOne:
    """[[ unwraps"""

    def test_position(self, x):
        assert x.extract_one(1).to_list() == [1, 2, 3, 4]

    def test_name(self, x):
        assert x.extract_one('bar') == 0.6

    def test_out_of_range_is_na(self, x):
        assert x.extract_one(10) is NA

    def test_never_returns_list_wrapper(self, x):
        assert not isinstance(x.extract_one(2), PyList)

    def test_partial_match_is_default(self, x):
        assert x.extract_one('fo').to_list() == [1, 2, 3, 4]

    def test_ambiguous_partial_match_is_na(self, x):
        # 'ba' prefixes both 'bar' and 'baz'
        assert x.extract_one('ba') is NA

    def test_exact_disables_partial_match(self, x):
        assert x.extract_one('fo', exact=True) is NA

    def test_exact_match_beats_prefix(self):
        y = PyList({'ab': 1, 'abc': 2})
        assert y.extract_one('ab') == 1

    def test_duplicate_names_first_wins(self):
        y = PyList([1, 2], names=['k', 'k'])
        assert y.extract_one('k') == 1

    @pytest.mark.parametrize("key", [1.5, True, None, {'a': 1}])
    def test_invalid_key_type(self, x, key):
        with pytest.raises(SubsetTypeError):
            x.extract_one(key)


class TestPath:
    """Nested descent through a name-path"""

    def test_path(self, nested):
        assert nested.extract_one(['a', 3]) == 14

    def test_path_equals_chained_extraction(self, nested):
        chained = nested.extract_one('a').extract_one(3)
        assert nested.extract_one(['a', 3]) == chained

    def test_path_into_vector(self, nested):
        assert nested.extract_one(['b', 1]) == 3.14

    def test_path_into_array(self):
        y = PyList({'m': PyArray(range(1, 7), dim=(2, 3))})
        assert y.extract_one(['m', (2, 3)]) == 6

    def test_path_through_scalar_is_na(self, x):
        assert x.extract_one(['bar', 1]) is NA

    def test_path_through_missing_is_na(self, nested):
        assert nested.extract_one(['zzz', 1]) is NA

    def test_empty_path_raises(self, nested):
        with pytest.raises(SubsetIndexError):
            nested.extract_one([])

    def test_lookup_reports_found(self, nested):
        assert nested.lookup(['a', 2]) == Lookup(12)
        assert not nested.lookup(['a', 9]).found

    def test_stored_na_in_vector_is_found(self):
        y = PyList({'v': [1, NA]})
        found = y.lookup(['v', 2])
        assert found.found
        assert found.value is NA
        assert not y.lookup(['v', 3]).found

    def test_stored_na_in_array_is_found(self):
        y = PyList({'m': PyArray([1, NA, 3, 4], dim=(2, 2))})
        assert y.lookup(['m', (2, 1)]).found
        assert y.lookup(['m', (2, 1)]).value is NA
        assert not y.lookup(['m', (3, 1)]).found

    def test_vector_lookup_by_name(self):
        v = PyVector([1, NA], names=['a', 'b'])
        assert v.lookup('b').found
        assert not v.lookup('c').found


class TestLiteral:
    """$-style literal-name extraction"""

    def test_attribute_access(self, x):
        assert x.bar == 0.6

    def test_absent_literal_is_na(self):
        y = PyList({'aardvark': list(range(1, 6))})
        assert y.extract_by_literal('zzz') is NA
        assert y.zzz is NA

    def test_partial_literal(self):
        y = PyList({'aardvark': list(range(1, 6))})
        assert y.aard.to_list() == [1, 2, 3, 4, 5]

    def test_strict_mode_raises(self):
        y = PyList({'aardvark': 1})
        with pytest.raises(SubsetKeyError):
            y.extract_by_literal('zzz', strict=True)

    def test_literal_must_be_str(self, x):
        with pytest.raises(SubsetTypeError):
            x.extract_by_literal(1)

    def test_private_attributes_are_not_elements(self, x):
        with pytest.raises(AttributeError):
            _ = x._secret

    def test_same_as_name_key(self, x):
        assert x.extract_by_literal('baz') == x.extract_one('baz')


class TestExtract:
    """[ keeps the list"""

    def test_positions(self, x):
        sub = x[[1, 3]]
        assert isinstance(sub, PyList)
        assert sub.names == ('foo', 'baz')
        assert sub.extract_one('foo').to_list() == [1, 2, 3, 4]
        assert sub.extract_one('baz') == 'hello'

    def test_single_position_is_still_a_list(self, x):
        sub = x[1]
        assert isinstance(sub, PyList)
        assert len(sub) == 1

    def test_order_follows_index(self, x):
        assert x[['baz', 'foo']].names == ('baz', 'foo')

    def test_names_are_exact(self, x):
        sub = x['fo']
        assert sub.names == (None,)
        assert sub.extract_one(1) is NA

    def test_mask(self, x):
        assert x[[True, False, True]].names == ('foo', 'baz')

    def test_path_is_not_nested_descent(self, nested):
        # [1, 2] picks top-level elements 1 and 2, not element 2 of element 1
        sub = nested.extract_many([1, 2])
        assert isinstance(sub, PyList)
        assert sub.names == ('a', 'b')
        assert nested.extract_one([1, 2]) == 12

    def test_idempotent(self, x):
        first = x.extract_many([3, 1])
        second = x.extract_many([3, 1])
        assert first.names == second.names
        assert first.extract_one(1) == second.extract_one(1)
        assert x.names == ('foo', 'bar', 'baz')
