"""repr output of every container"""
from py_subset import PyVector, PyArray, PyList, PyTable, NA


def test_vector_repr():
    assert repr(PyVector([1, 2, 3])) == "[1] 1 2 3"


def test_vector_repr_values():
    assert repr(PyVector([True, NA])) == "[1] TRUE   NA"
    assert repr(PyVector(['a', 'b'])) == '[1] "a" "b"'


def test_vector_repr_wraps():
    text = repr(PyVector(list(range(1, 41))))
    lines = text.splitlines()
    assert len(lines) > 1
    assert lines[0].startswith(" [1]")
    assert all(len(line) <= 80 for line in lines)


def test_named_vector_repr():
    assert repr(PyVector([1, 2], names=['a', 'b'])) == "a b\n1 2"


def test_empty_vector_repr():
    assert repr(PyVector([], dtype=int)) == "integer(0)"


def test_matrix_repr():
    A = PyArray(range(1, 7), dim=(2, 3))
    assert repr(A).splitlines() == [
        "     [,1] [,2] [,3]",
        "[1,]    1    3    5",
        "[2,]    2    4    6",
    ]


def test_three_dimensional_repr():
    text = repr(PyArray(range(1, 9), dim=(2, 2, 2)))
    assert ", , 1" in text
    assert ", , 2" in text


def test_list_repr():
    x = PyList({'foo': [1, 2], 'bar': 0.6})
    assert repr(x) == "$foo\n[1] 1 2\n\n$bar\n[1] 0.6\n"


def test_nested_list_repr():
    x = PyList({'a': {'b': 1}})
    assert repr(x).startswith("$a$b\n")


def test_unnamed_list_repr():
    assert repr(PyList([1])).startswith("[[1]]\n")


def test_empty_list_repr():
    assert repr(PyList()) == "list()"


def test_table_repr():
    t = PyTable({'a': [1, 2], 'b': ['x', NA]})
    lines = repr(t).splitlines()
    assert lines[0] == "  a b "
    assert lines[1] == "1 1 x "
    assert lines[2] == "2 2 NA"
    assert lines[-1] == "# 2×2 table <integer, character>"


def test_long_table_is_truncated():
    t = PyTable({'a': list(range(100))})
    assert "..." in repr(t)
