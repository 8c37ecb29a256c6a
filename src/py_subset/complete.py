"""
Missing-value filtering across containers.

complete_mask() marks the rows where no container holds a missing value;
filter_by_mask() applies such a mask to a container, keeping its kind.
"""

from .array import PyArray
from .errors import SubsetTypeError
from .errors import SubsetValueError
from .keyedlist import PyList
from .missing import is_na
from .table import PyTable
from .vector import PyVector


def _columns_of(container):
	"""The equal-length columns a container contributes to a row-wise check."""
	if isinstance(container, PyTable):
		return [col.to_list() for col in container.columns()]
	if isinstance(container, PyVector):
		return [container.to_list()]
	if isinstance(container, PyArray):
		if container.ndim == 1:
			return [container.to_list()]
		if container.ndim == 2:
			return [list(col) for col in zip(*container.rows())]
		raise SubsetTypeError(f"complete_mask needs 1-d or 2-d arrays, got shape {container.dim}")
	if isinstance(container, (list, tuple)):
		return [list(container)]
	raise SubsetTypeError(f"complete_mask does not accept {type(container).__name__}")


def complete_mask(*containers):
	"""
	Boolean vector, True at row i iff no container is missing at row i.

	Examples
	--------
	>>> complete_mask([1, 2, NA, 4, NA, 5]).to_list()
	[True, True, False, True, False, True]
	"""
	if not containers:
		raise SubsetValueError("complete_mask needs at least one container")

	columns = [col for c in containers for col in _columns_of(c)]
	lengths = {len(col) for col in columns}
	if len(lengths) > 1:
		raise SubsetValueError(
			f"complete_mask needs equal-length containers, got lengths {sorted(lengths)}"
		)

	nrow = lengths.pop() if lengths else 0
	return PyVector(
		[not any(is_na(col[i]) for col in columns) for i in range(nrow)],
		dtype = bool,
	)


def filter_by_mask(container, mask):
	"""
	Apply a logical mask, returning the same kind of container.

	Tables and 2-d arrays are filtered by row and keep every column.
	"""
	if isinstance(container, PyTable):
		return container.filter(mask)
	if isinstance(container, PyArray) and container.ndim == 2:
		return container.extract(mask, None, drop=False)
	if isinstance(container, PyArray):
		return container.extract(mask, drop=False)
	if isinstance(container, (PyVector, PyList)):
		return container.extract(mask)
	if isinstance(container, (list, tuple)):
		return PyVector(container).extract(mask)
	raise SubsetTypeError(f"filter_by_mask does not accept {type(container).__name__}")


def na_omit(container):
	"""Drop every row (or element) holding a missing value."""
	return filter_by_mask(container, complete_mask(container))
