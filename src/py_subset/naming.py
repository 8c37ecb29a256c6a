"""Element name resolution: exact lookup with optional unique-prefix fallback."""

from __future__ import annotations

from .errors import _warn


def _exact_position(names, key: str) -> int | None:
	"""Position of the first element named exactly `key`."""
	for idx, name in enumerate(names):
		if name == key:
			return idx
	return None


def _partial_positions(names, key: str) -> list[int]:
	"""All positions whose name starts with `key`."""
	return [idx for idx, name in enumerate(names)
		if name is not None and name.startswith(key)]


def _match_name(names, key: str, exact: bool = True) -> int | None:
	"""Resolve `key` against `names`.

	Rules:
	- The first exact match wins (names need not be unique)
	- With exact=False, fall back to the unique name having `key` as a prefix
	- No match, or an ambiguous prefix, returns None
	"""
	if not names:
		return None

	idx = _exact_position(names, key)
	if idx is not None or exact:
		return idx

	# Empty key would prefix-match everything
	if key == "":
		return None

	candidates = _partial_positions(names, key)
	if len(candidates) == 1:
		return candidates[0]
	return None


def _uniquify(base: str, seen: set[str]) -> str:
	"""Make a unique name by adding __2, __3, etc if needed."""
	if base not in seen:
		return base

	i = 2
	while f"{base}__{i}" in seen:
		i += 1

	return f"{base}__{i}"


def _unique_column_names(names) -> list[str]:
	"""Column labels for a table: missing names become V1, V2, ...; duplicates are uniquified."""
	seen = set()
	out = []
	renamed = []
	for idx, name in enumerate(names):
		base = name if name else f"V{idx + 1}"
		label = _uniquify(base, seen)
		if label != base:
			renamed.append((base, label))
		seen.add(label)
		out.append(label)

	if renamed:
		pairs = ", ".join(f"{a!r} -> {b!r}" for a, b in renamed)
		_warn(f"Duplicate column names were renamed: {pairs}")
	return out
