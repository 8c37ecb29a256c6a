from .base import Container
from .errors import SubsetIndexError
from .errors import SubsetKeyError
from .errors import SubsetTypeError
from .errors import SubsetValueError
from .indexing import resolve_positions
from .missing import NA
from .missing import Lookup
from .naming import _match_name
from .vector import PyVector


def _is_scalar(x):
	return not isinstance(x, (Container, list, tuple, dict, set))


def _wrap_value(value):
	"""Normalize a raw Python value into a list element."""
	if value is None:
		return NA
	if isinstance(value, Container):
		return value
	if isinstance(value, dict):
		return PyList(value)
	if isinstance(value, (list, tuple)):
		if all(_is_scalar(x) for x in value):
			return PyVector(value)
		return PyList(value)
	return value


class PyList(Container):
	""" Ordered, heterogeneous list of optionally-named values """
	_values = None
	_names = None

	def __init__(self, initial=(), names=None, **kwargs):
		"""
		Build a keyed list from a dict, an iterable of values (with
		optional `names`), and/or keyword arguments.

		Examples
		--------
		>>> x = PyList({'foo': [1, 2, 3, 4], 'bar': 0.6, 'baz': 'hello'})
		>>> x.extract_one('bar')
		0.6
		"""
		if isinstance(initial, PyList):
			if names is None:
				names = initial._names
			initial = initial._values

		if isinstance(initial, dict):
			if names is not None:
				raise SubsetValueError("names cannot be combined with dict initialization")
			names = list(initial.keys())
			initial = list(initial.values())

		values = list(initial)
		if names is None:
			names = [None] * len(values)
		names = [None if n is None or n is NA else str(n) for n in names]

		if len(names) != len(values):
			raise SubsetValueError(
				f"names has length {len(names)}, list has length {len(values)}"
			)

		for key, value in kwargs.items():
			names.append(key)
			values.append(value)

		self._values = tuple(_wrap_value(v) for v in values)
		self._names = tuple(names)

	@classmethod
	def _from_pairs(cls, names, values):
		# Values are already normalized; skip _wrap_value
		out = object.__new__(cls)
		out._values = tuple(values)
		out._names = tuple(names)
		return out

	@property
	def names(self):
		return self._names

	def values(self):
		return list(self._values)

	def items(self):
		return list(zip(self._names, self._values))

	def __len__(self):
		return len(self._values)

	def __iter__(self):
		return iter(self._values)

	def __dir__(self):
		base_attrs = object.__dir__(self)
		return sorted(set(base_attrs) | {n for n in self._names if n and n.isidentifier()})

	#-----------------------------------------------------
	# [ : multi extraction, keeps the container
	#-----------------------------------------------------

	def extract(self, key):
		"""
		Select elements by position, name or mask; always returns a PyList.

		A sequence of positions is top-level selection, never a nested path:
		x.extract([1, 3]) picks elements 1 and 3.
		"""
		positions = resolve_positions(key, len(self), self._names)
		names = [None if p is None else self._names[p] for p in positions]
		values = [NA if p is None else self._values[p] for p in positions]
		return self._from_pairs(names, values)

	#-----------------------------------------------------
	# [[ : strict single extraction, unwraps
	#-----------------------------------------------------

	def _lookup_key(self, key, exact):
		if isinstance(key, bool):
			raise SubsetTypeError("List element keys must be int, str or a path, not bool")
		if isinstance(key, int):
			if 1 <= key <= len(self):
				return Lookup(self._values[key - 1])
			return Lookup.missing()
		if isinstance(key, str):
			idx = _match_name(self._names, key, exact=exact)
			if idx is None:
				return Lookup.missing()
			return Lookup(self._values[idx])
		raise SubsetTypeError(
			f"List element keys must be int, str or a path, not {type(key).__name__}"
		)

	def lookup(self, key, exact=False):
		"""
		Resolve `key` to a single element as a Lookup.

		`key` is a 1-based position, a name (unique-prefix fallback unless
		exact=True) or a path of those for nested descent.
		"""
		if not isinstance(key, (list, tuple, PyVector)):
			return self._lookup_key(key, exact)

		path = tuple(key)
		if not path:
			raise SubsetIndexError("Cannot extract with an empty path")

		found = self._lookup_key(path[0], exact)
		for k in path[1:]:
			current = found.value
			if not found.found or not isinstance(current, Container):
				return Lookup.missing()
			found = current.lookup(k, exact=exact)
		return found

	def extract_one(self, key, exact=False):
		return self.lookup(key, exact=exact).value

	#-----------------------------------------------------
	# $ : literal-name extraction
	#-----------------------------------------------------

	def extract_by_literal(self, name, exact=False, strict=False):
		"""
		Element whose name is the literal `name`; NA when absent.

		strict=True raises SubsetKeyError on a miss instead.
		"""
		if not isinstance(name, str):
			raise SubsetTypeError(
				f"Literal element names must be str, not {type(name).__name__}"
			)
		found = self._lookup_key(name, exact)
		if strict and not found.found:
			raise SubsetKeyError(f"No element named {name!r}")
		return found.value

	def __getattr__(self, attr):
		"""Access elements by literal name: x.foo is x.extract_by_literal('foo')."""
		if attr.startswith("_"):
			raise AttributeError(f"{self.__class__.__name__!s} object has no attribute '{attr}'")
		return self.extract_by_literal(attr)
