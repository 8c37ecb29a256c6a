import pytest
from py_subset import PyVector
from py_subset import PyList
from py_subset import PyTable
from py_subset.errors import SubsetError, SubsetKeyError, SubsetValueError, SubsetTypeError, SubsetIndexError


def test_errors_share_a_base():
    for err in (SubsetKeyError, SubsetValueError, SubsetTypeError, SubsetIndexError):
        assert issubclass(err, SubsetError)


def test_errors_are_builtin_compatible():
    assert issubclass(SubsetKeyError, KeyError)
    assert issubclass(SubsetValueError, ValueError)
    assert issubclass(SubsetTypeError, TypeError)
    assert issubclass(SubsetIndexError, IndexError)


def test_missing_name_does_not_raise():
    x = PyList({'a': 1})
    assert x.extract_by_literal('missing') is not None


def test_strict_literal_raises_keyerror():
    x = PyList({'a': 1})
    with pytest.raises(KeyError):
        x.extract_by_literal('missing', strict=True)


def test_mask_shape_mismatch_raises_valueerror():
    with pytest.raises(ValueError):
        PyVector([1, 2, 3])[[True, False, True, False]]


def test_invalid_key_raises_typeerror():
    with pytest.raises(TypeError):
        PyList({'a': 1}).extract_one(2.0)


def test_table_mismatched_lengths_raises_valueerror():
    with pytest.raises(SubsetValueError):
        PyTable({'id': [1, 2], 'date': ['a']})


def test_mixed_sign_subscripts_raise_indexerror():
    with pytest.raises(IndexError):
        PyVector([1, 2, 3])[[1, -2]]


def test_unwrap_of_missing_lookup_raises_keyerror():
    with pytest.raises(SubsetKeyError):
        PyList({'a': 1}).lookup('zzz').unwrap('zzz')
