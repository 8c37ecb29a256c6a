"""
Index-expression resolution shared by every container.

An index expression is turned into a list of 0-based positions; a None
position marks a slot that resolves to nothing (out of range, unmatched
name, NA subscript) and reads back as NA.

User-facing positions are 1-based.
"""

from __future__ import annotations
from .errors import SubsetIndexError
from .errors import SubsetTypeError
from .errors import SubsetValueError
from .errors import _warn
from .missing import NA
from .naming import _match_name


def recycle_mask(mask, length: int) -> list[int | None]:
	"""
	Positions selected by a logical mask, recycling the mask to `length`.

	Raises
	------
	SubsetValueError
		If the mask is longer than the target (ShapeMismatch)

	Examples
	--------
	>>> recycle_mask([True, False], 4)
	[0, 2]
	>>> recycle_mask([True, NA, False], 3)
	[0, None]
	"""
	m = len(mask)
	if m == 0:
		return []
	if m > length and m != 1:
		raise SubsetValueError(
			f"Logical mask of length {m} does not fit a target of length {length}"
		)
	if length % m:
		_warn(
			f"Logical mask of length {m} is recycled over length {length}, "
			"which is not a multiple of it",
		)

	out = []
	for i in range(length):
		flag = mask[i % m]
		if flag is NA or flag is None:
			out.append(None)
		elif flag:
			out.append(i)
	return out


def _integer_positions(values, length: int) -> list[int | None]:
	"""Positive subscripts select (past-the-end -> None), zeros are dropped, negatives exclude."""
	nonzero = [v for v in values if v is NA or v != 0]
	negatives = [v for v in nonzero if v is not NA and v < 0]

	if negatives:
		if len(negatives) != len(nonzero):
			raise SubsetIndexError("Cannot mix positive, negative or missing subscripts")
		excluded = {-v - 1 for v in negatives}
		return [i for i in range(length) if i not in excluded]

	return [None if v is NA or v > length else v - 1 for v in nonzero]


def _name_positions(values, names) -> list[int | None]:
	"""Exact name matching; unmatched names resolve to None."""
	return [None if v is NA else _match_name(names, v, exact=True) for v in values]


def _index_values(key) -> tuple:
	"""Materialize a multi-valued index expression."""
	from .vector import PyVector

	if isinstance(key, PyVector):
		return tuple(key)
	if isinstance(key, (list, tuple, range)):
		return tuple(NA if v is None else v for v in key)
	raise SubsetTypeError(
		f"Invalid index type {type(key).__name__}: expected int, str, bool, "
		"a sequence of those, or ':'"
	)


def _classify(values) -> type | None:
	"""Common element kind of an index sequence (bool, int or str); None if all-NA or empty."""
	kinds = set()
	for v in values:
		if v is NA:
			continue
		if isinstance(v, bool):
			kinds.add(bool)
		elif isinstance(v, int):
			kinds.add(int)
		elif isinstance(v, str):
			kinds.add(str)
		else:
			raise SubsetTypeError(f"Invalid subscript {v!r} of type {type(v).__name__}")
	if len(kinds) > 1:
		raise SubsetTypeError(
			"Index sequences must be all integers, all booleans or all names, not "
			+ ", ".join(sorted(k.__name__ for k in kinds))
		)
	return kinds.pop() if kinds else None


def resolve_positions(key, length: int, names=None) -> list[int | None]:
	"""
	Resolve an index expression against a container of `length` elements.

	Parameters
	----------
	key : int, str, bool, NA, slice(None), list/tuple/range, PyVector
		The index expression
	length : int
		Target length
	names : sequence of str or None, optional
		Element names for name-based selection

	Returns
	-------
	list of int or None
		0-based positions in selection order

	Examples
	--------
	>>> resolve_positions(2, 3)
	[1]
	>>> resolve_positions([3, 1, 1, 9], 3)
	[2, 0, 0, None]
	>>> resolve_positions(-2, 3)
	[0, 2]
	"""
	if isinstance(key, slice):
		if key == slice(None):
			return list(range(length))
		raise SubsetTypeError("Only the full slice ':' is supported; use an integer set instead")

	if key is NA:
		return recycle_mask([NA], length)
	# bool BEFORE int (bool is subclass of int)
	if isinstance(key, bool):
		return recycle_mask([key], length)
	if isinstance(key, int):
		return _integer_positions([key], length)
	if isinstance(key, str):
		return _name_positions([key], names)

	values = _index_values(key)
	kind = _classify(values)

	if kind is bool or (kind is None and values):
		return recycle_mask(values, length)
	if kind is int:
		return _integer_positions(values, length)
	if kind is str:
		return _name_positions(values, names)
	return []
