from itertools import product
from math import prod

from .base import Container
from .errors import SubsetIndexError
from .errors import SubsetTypeError
from .errors import SubsetValueError
from .indexing import resolve_positions
from .missing import NA
from .missing import Lookup
from .missing import is_na
from .typing import DataType
from .typing import coerce_scalar
from .typing import infer_dtype
from .vector import PyVector


class PyArray(Container):
	""" Fixed-shape dense array, stored column-major, indexed by (row, column, ...) """
	_dtype = None
	_underlying = None
	_dim = None

	def __init__(self, data=(), dim=None, byrow=False, dtype=None):
		"""
		Parameters
		----------
		data : iterable of scalars
			Elements in column-major order (row-major if byrow=True)
		dim : tuple of int, optional
			Extent of each axis; defaults to a 1-d array of len(data)
		byrow : bool
			Fill a 2-d array row by row

		Examples
		--------
		>>> A = PyArray(range(1, 7), dim=(2, 3))
		>>> A[1, 2]
		3
		"""
		values = tuple(data)
		dim = (len(values),) if dim is None else tuple(dim)

		if any((not isinstance(d, int)) or isinstance(d, bool) or d < 0 for d in dim):
			raise SubsetValueError(f"Array extents must be non-negative integers: {dim}")
		if prod(dim) != len(values):
			raise SubsetValueError(
				f"{len(values)} elements cannot fill an array of shape {dim}"
			)

		if byrow:
			if len(dim) != 2:
				raise SubsetValueError("byrow=True is only meaningful for 2-d arrays")
			nrow, ncol = dim
			values = tuple(values[r * ncol + c] for c in range(ncol) for r in range(nrow))

		if dtype is not None and not isinstance(dtype, DataType):
			dtype = DataType(dtype)
		if dtype is None:
			dtype = infer_dtype(values)
		if dtype is not None:
			values = tuple(coerce_scalar(v, dtype) for v in values)
			dtype = dtype.with_nullable(any(v is NA for v in values))

		self._underlying = values
		self._dtype = dtype
		self._dim = dim

	@classmethod
	def from_rows(cls, rows):
		"""Build a 2-d array from a list of equal-length rows."""
		rows = [tuple(r) for r in rows]
		ncol = len(rows[0]) if rows else 0
		if any(len(r) != ncol for r in rows):
			raise SubsetValueError("All rows must have the same length")
		flat = [x for r in rows for x in r]
		return cls(flat, dim=(len(rows), ncol), byrow=True)

	def schema(self):
		return self._dtype

	@property
	def dim(self):
		return self._dim

	@property
	def ndim(self):
		return len(self._dim)

	def __len__(self):
		return len(self._underlying)

	def __iter__(self):
		""" column-major element order """
		return iter(self._underlying)

	def to_list(self):
		return list(self._underlying)

	def rows(self):
		"""Nested row lists of a 2-d array."""
		if self.ndim != 2:
			raise SubsetIndexError(f"rows() needs a 2-d array, this one has shape {self._dim}")
		nrow, ncol = self._dim
		data = self._underlying
		return [[data[c * nrow + r] for c in range(ncol)] for r in range(nrow)]

	def _offset(self, coords):
		""" column-major offset of 0-based coordinates """
		offset = 0
		stride = 1
		for c, extent in zip(coords, self._dim):
			offset += c * stride
			stride *= extent
		return offset

	def _axis_positions(self, key, extent):
		if key is None:
			return list(range(extent))
		return resolve_positions(key, extent)

	#-----------------------------------------------------
	# Subsetting
	#-----------------------------------------------------

	def __getitem__(self, key):
		if isinstance(key, tuple):
			return self.extract(*key)
		return self.extract(key)

	def extract(self, *axes, drop=True):
		"""
		Select a sub-array.

		One index per axis (int, integer set, mask, negative exclusion,
		or None / ':' for the whole axis). A single index on an array of
		rank > 1 is linear column-major indexing and returns a PyVector;
		on a 1-d array it is the axis index and follows `drop`.

		drop=True removes every axis of extent 1: a fully fixed index gives
		a scalar, a single free axis gives a PyVector. drop=False keeps the
		full rank.
		"""
		if len(axes) == 1 and self.ndim != 1:
			return self._extract_linear(axes[0])
		if len(axes) != self.ndim:
			raise SubsetIndexError(
				f"Array indexing must provide an index in each dimension: {self._dim}"
			)

		positions = [self._axis_positions(k, n) for k, n in zip(axes, self._dim)]
		shape = tuple(len(p) for p in positions)

		data = self._underlying
		values = []
		# product() varies its last argument fastest; reverse so axis 0 is fastest
		for coords in product(*reversed(positions)):
			coords = coords[::-1]
			if any(c is None for c in coords):
				values.append(NA)
			else:
				values.append(data[self._offset(coords)])

		kind = self._dtype.kind if self._dtype is not None else None
		if not drop:
			return PyArray(values, dim=shape, dtype=kind)

		kept = tuple(n for n in shape if n != 1)
		if not kept:
			return values[0]
		if len(kept) == 1:
			return PyVector(values, dtype=kind)
		return PyArray(values, dim=kept, dtype=kind)

	def _extract_linear(self, key):
		positions = resolve_positions(key, len(self))
		data = self._underlying
		kind = self._dtype.kind if self._dtype is not None else None
		return PyVector([NA if p is None else data[p] for p in positions], dtype=kind)

	def lookup(self, key, exact=True):
		"""
		Resolve one element as a Lookup: `key` is a 1-based linear position
		or a tuple with one 1-based coordinate per axis.
		"""
		coords = key if isinstance(key, tuple) else None
		keys = coords if coords is not None else (key,)
		for k in keys:
			if isinstance(k, bool) or not isinstance(k, int):
				raise SubsetTypeError(
					f"Array element keys must be integers, not {type(k).__name__}"
				)

		if coords is None:
			if 1 <= key <= len(self):
				return Lookup(self._underlying[key - 1])
			return Lookup.missing()

		if len(coords) != self.ndim:
			raise SubsetIndexError(
				f"Array indexing must provide an index in each dimension: {self._dim}"
			)
		if any(not 1 <= c <= n for c, n in zip(coords, self._dim)):
			return Lookup.missing()
		return Lookup(self._underlying[self._offset([c - 1 for c in coords])])

	def extract_one(self, key, exact=True):
		"""One element, unwrapped; out of range gives NA."""
		return self.lookup(key, exact=exact).value

	def extract_many(self, keys):
		return self._extract_linear(keys)

	def isna(self):
		return PyArray([is_na(x) for x in self._underlying], dim=self._dim, dtype=bool)
