from .base import Container
from .errors import SubsetIndexError
from .errors import SubsetTypeError
from .errors import SubsetValueError
from .indexing import resolve_positions
from .missing import NA
from .missing import Lookup
from .missing import is_na
from .naming import _match_name
from .typing import DataType
from .typing import coerce_scalar
from .typing import infer_dtype


class PyVector(Container):
	""" Ordered homogeneous vector with 1-based subsetting """
	_dtype = None
	_underlying = None
	_name = None
	_names = None

	def __init__(self, initial=(), dtype=None, name=None, names=None):
		"""
		Build a vector, coercing every element to one common kind.

		Parameters
		----------
		initial : iterable of scalars
			None and NA are both stored as NA
		dtype : type or DataType, optional
			Target kind; inferred from the values when omitted
		name : str, optional
			Label of the whole vector (used as a table column name)
		names : sequence of str, optional
			Per-element names
		"""
		if isinstance(initial, PyVector):
			if name is None:
				name = initial._name
			if names is None:
				names = initial._names
			initial = initial._underlying

		# Materialize once: generators are consumed by inference
		values = tuple(initial)

		if dtype is not None and not isinstance(dtype, DataType):
			dtype = DataType(dtype)
		if dtype is None:
			dtype = infer_dtype(values)

		if dtype is not None:
			values = tuple(coerce_scalar(v, dtype) for v in values)
			dtype = dtype.with_nullable(any(v is NA for v in values))

		self._underlying = values
		self._dtype = dtype
		self._name = name
		self._names = self._check_names(names, len(values))

	@staticmethod
	def _check_names(names, length):
		if names is None:
			return None
		names = tuple(None if n is None or n is NA else str(n) for n in names)
		if len(names) != length:
			raise SubsetValueError(
				f"names has length {len(names)}, vector has length {length}"
			)
		return names

	def schema(self):
		"""Get the DataType schema of this vector."""
		return self._dtype

	@property
	def name(self):
		return self._name

	@property
	def names(self):
		return self._names

	def rename(self, new_name):
		"""Return a copy labelled `new_name`"""
		return self.copy(name=new_name)

	def with_names(self, names):
		"""Return a copy carrying per-element `names`"""
		return self.copy(names=names)

	def copy(self, new_values=None, name=..., names=...):
		# Sentinel (...) distinguishes "not passed" (preserve) from None (clear)
		use_name = self._name if name is ... else name
		use_names = self._names if names is ... else names
		kind = self._dtype.kind if self._dtype is not None else None
		return PyVector(self._underlying if new_values is None else new_values,
			dtype = kind,
			name = use_name,
			names = use_names)

	def to_list(self):
		return list(self._underlying)

	def __iter__(self):
		""" iterate over the underlying tuple """
		return iter(self._underlying)

	def __len__(self):
		""" length of the underlying tuple """
		return len(self._underlying)

	#-----------------------------------------------------
	# Subsetting
	#-----------------------------------------------------

	def extract(self, key):
		""" Select elements; always returns a PyVector. Behavior varies by key type:
			# int i > 0: element i (past the end -> NA)
			# int i < 0: everything except element -i
			# integer set: elements in the given order, duplicates allowed
			# bool / boolean sequence: logical mask, recycled to the vector length
			# str / string sequence: elements by exact name
			# ':' : the whole vector
		"""
		positions = resolve_positions(key, len(self), self._names)
		underlying = self._underlying
		values = [NA if p is None else underlying[p] for p in positions]

		names = None
		if self._names is not None:
			names = [None if p is None else self._names[p] for p in positions]

		kind = self._dtype.kind if self._dtype is not None else None
		return PyVector(values, dtype=kind, name=self._name, names=names)

	def lookup(self, key, exact=True):
		"""
		Resolve a single element as a Lookup.

		`key` is a 1-based position, an element name, or a length-1 path.
		A stored NA is found; an out-of-range position or unmatched name is not.
		"""
		if isinstance(key, (list, tuple, PyVector)):
			path = tuple(key)
			if len(path) != 1:
				raise SubsetIndexError(
					f"extract_one on a vector takes exactly one subscript, got {len(path)}"
				)
			key = path[0]

		if isinstance(key, bool) or not isinstance(key, (int, str)):
			raise SubsetTypeError(
				f"Vector element keys must be int or str, not {type(key).__name__}"
			)

		if isinstance(key, str):
			idx = _match_name(self._names, key, exact=exact)
			if idx is None:
				return Lookup.missing()
			return Lookup(self._underlying[idx])

		if 1 <= key <= len(self):
			return Lookup(self._underlying[key - 1])
		return Lookup.missing()

	def extract_one(self, key, exact=True):
		"""Single element, unwrapped; out-of-range positions and unmatched names give NA."""
		return self.lookup(key, exact=exact).value

	#-----------------------------------------------------
	# Missing values
	#-----------------------------------------------------

	def isna(self):
		"""
		Return boolean mask of missing values.

		Examples
		--------
		>>> PyVector([1, NA, 3]).isna().to_list()
		[False, True, False]
		"""
		return PyVector(tuple(is_na(x) for x in self._underlying),
			dtype = bool,
			names = self._names)

	def dropna(self):
		"""
		Remove missing values from the vector.

		Examples
		--------
		>>> PyVector([1, None, 3, None, 5]).dropna().to_list()
		[1, 3, 5]
		"""
		return self.extract([not is_na(x) for x in self._underlying])
