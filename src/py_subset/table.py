from .errors import SubsetIndexError
from .errors import SubsetTypeError
from .errors import SubsetValueError
from .indexing import resolve_positions
from .keyedlist import PyList
from .missing import NA
from .naming import _unique_column_names
from .vector import PyVector


def _take(col, positions):
	"""Rows of one column at pre-resolved positions (None -> NA)."""
	data = col._underlying
	kind = col._dtype.kind if col._dtype is not None else None
	return PyVector([NA if p is None else data[p] for p in positions],
		dtype = kind,
		name = col._name)


class PyTable(PyList):
	""" Named columns of the same length; a keyed list of vectors """

	def __init__(self, initial=(), names=None, **kwargs):
		"""
		Build a table from {name: values} or from named PyVectors.

		Examples
		--------
		>>> t = PyTable({'a': [1, NA, 3], 'b': ['x', 'y', NA]})
		>>> t.nrow, t.ncol
		(3, 2)
		"""
		if not isinstance(initial, (dict, PyList)) and names is None:
			# Columns given as vectors carry their own labels
			initial = list(initial)
			names = [c.name if isinstance(c, PyVector) else None for c in initial]

		super().__init__(initial, names=names, **kwargs)

		for value in self._values:
			if not isinstance(value, PyVector):
				raise SubsetTypeError(
					f"Table columns must be vectors, not {type(value).__name__}"
				)

		lengths = {len(col) for col in self._values}
		if len(lengths) > 1:
			raise SubsetValueError(
				f"All table columns must have the same length, got {sorted(lengths)}"
			)

		labels = _unique_column_names(self._names)
		self._names = tuple(labels)
		self._values = tuple(col.rename(label) for col, label in zip(self._values, labels))

	@property
	def nrow(self):
		return len(self._values[0]) if self._values else 0

	@property
	def ncol(self):
		return len(self._values)

	def columns(self):
		return list(self._values)

	#-----------------------------------------------------
	# Subsetting
	#-----------------------------------------------------

	def __getitem__(self, key):
		if isinstance(key, tuple) and len(key) == 2:
			return self.extract(*key)
		return self.extract(key)

	def extract(self, *key, drop=True):
		"""
		t.extract(cols)              -> PyTable of the selected columns
		t.extract(rows, cols)        -> rows x columns; None means all
		With drop=True a single selected column collapses to its PyVector.
		"""
		if len(key) == 1:
			return self._select_columns(key[0])
		if len(key) != 2:
			raise SubsetIndexError("Tables take a column index or a (rows, columns) pair")

		rows, cols = key
		table = self if cols is None else self._select_columns(cols)
		if rows is not None:
			positions = resolve_positions(rows, self.nrow)
			table = PyTable([_take(col, positions) for col in table._values])

		if drop and table.ncol == 1:
			return table._values[0]
		return table

	def _select_columns(self, key):
		selected = PyList.extract(self, key)
		if any(value is NA for value in selected._values):
			raise SubsetIndexError(f"Undefined columns selected: {key!r}")
		return PyTable(list(selected._values), names=list(selected._names))

	#-----------------------------------------------------
	# Missing values
	#-----------------------------------------------------

	def complete_cases(self):
		"""Boolean vector: True for rows without any missing value."""
		from .complete import complete_mask
		return complete_mask(self)

	def filter(self, mask):
		"""Rows where `mask` is True, every column kept in order."""
		return self.extract(mask, None, drop=False)

	def dropna(self):
		return self.filter(self.complete_cases())
