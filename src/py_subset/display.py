"""Display and repr logic for PyVector, PyArray, PyList and PyTable."""

from __future__ import annotations
from datetime import date
from itertools import product
from typing import List

from .missing import NA


# Line width used when wrapping vectors
MAX_WIDTH = 80
# How many rows to show at each end of a long table before inserting "..."
MAX_HEAD_ROWS = 5

_KIND_NAMES = {
	bool: "logical",
	int: "integer",
	float: "numeric",
	complex: "complex",
	str: "character",
	date: "Date",
}


def _kind_name(dtype) -> str:
	if dtype is None:
		return "logical"
	return _KIND_NAMES.get(dtype.kind, dtype.kind.__name__)


def _format_scalar(v, quote: bool = True) -> str:
	if v is NA:
		return "NA"
	if isinstance(v, bool):
		return "TRUE" if v else "FALSE"
	if isinstance(v, float):
		return f"{v:.7g}"
	if isinstance(v, str):
		if not quote:
			return v
		escaped = v.replace("\\", "\\\\").replace('"', '\\"')
		return f'"{escaped}"'
	if isinstance(v, date):
		return v.isoformat()
	return str(v)


def _is_numeric(dtype) -> bool:
	return dtype is not None and dtype.is_numeric


def _pad(cells: List[str], width: int, right: bool) -> List[str]:
	if right:
		return [s.rjust(width) for s in cells]
	return [s.ljust(width) for s in cells]


def _repr_vector(v) -> str:
	"""[1] 1 2 3 style, wrapped at MAX_WIDTH; named vectors print names above values."""
	values = v.to_list()
	if not values:
		return f"{_kind_name(v.schema())}(0)"

	right = _is_numeric(v.schema())
	cells = [_format_scalar(x) for x in values]

	if v.names is not None:
		labels = ["<NA>" if n is None else n for n in v.names]
		width = max(max(len(s) for s in cells), max(len(s) for s in labels))
		per_line = max(1, (MAX_WIDTH + 1) // (width + 1))
		lines = []
		for start in range(0, len(cells), per_line):
			stop = start + per_line
			lines.append(" ".join(s.rjust(width) for s in labels[start:stop]))
			lines.append(" ".join(s.rjust(width) for s in cells[start:stop]))
		return "\n".join(lines)

	width = max(len(s) for s in cells)
	cells = _pad(cells, width, right)
	prefix_width = len(f"[{len(cells)}]")
	per_line = max(1, (MAX_WIDTH - prefix_width) // (width + 1))

	lines = []
	for start in range(0, len(cells), per_line):
		prefix = f"[{start + 1}]".rjust(prefix_width)
		lines.append(prefix + " " + " ".join(cells[start:start + per_line]))
	return "\n".join(lines)


def _repr_matrix(rows, right: bool) -> List[str]:
	"""Lines of one 2-d slice: [,j] column headers, [i,] row labels."""
	nrow = len(rows)
	ncol = len(rows[0]) if rows else 0

	row_labels = [f"[{i + 1},]" for i in range(nrow)]
	label_width = max((len(s) for s in row_labels), default=0)

	columns = []
	for j in range(ncol):
		header = f"[,{j + 1}]"
		cells = [_format_scalar(rows[i][j]) for i in range(nrow)]
		width = max([len(header)] + [len(s) for s in cells])
		columns.append([header.rjust(width)] + _pad(cells, width, right))

	lines = [" " * label_width + " " + " ".join(col[0] for col in columns)]
	for i in range(nrow):
		lines.append(row_labels[i].ljust(label_width) + " " + " ".join(col[i + 1] for col in columns))
	return lines


def _repr_array(arr) -> str:
	dim = arr.dim
	right = _is_numeric(arr.schema())

	if len(dim) == 1:
		from .vector import PyVector
		return _repr_vector(PyVector(arr.to_list()))
	if 0 in dim:
		return f"<{' x '.join(str(d) for d in dim)} array of {_kind_name(arr.schema())}>"
	if len(dim) == 2:
		return "\n".join(_repr_matrix(arr.rows(), right))

	# Higher rank: print each 2-d slice, leading axes fastest
	nrow, ncol = dim[0], dim[1]
	data = arr.to_list()
	slice_size = nrow * ncol
	blocks = []
	outer = [range(n) for n in dim[2:]]
	for s, coords in enumerate(product(*reversed(outer))):
		coords = coords[::-1]
		chunk = data[s * slice_size:(s + 1) * slice_size]
		rows = [[chunk[c * nrow + r] for c in range(ncol)] for r in range(nrow)]
		header = ", , " + ", ".join(str(c + 1) for c in coords)
		blocks.append(header + "\n\n" + "\n".join(_repr_matrix(rows, right)) + "\n")
	return "\n".join(blocks)


def _repr_element(value) -> str:
	from .base import Container
	if isinstance(value, Container):
		return repr(value)
	return "[1] " + _format_scalar(value)


def _repr_list(lst, prefix: str = "") -> str:
	"""$name / [[i]] blocks, nested lists extend the tag."""
	from .table import PyTable
	from .keyedlist import PyList

	if not len(lst):
		return "list()"

	blocks = []
	for i, (name, value) in enumerate(lst.items()):
		if name is None:
			tag = f"{prefix}[[{i + 1}]]"
		elif name.isidentifier():
			tag = f"{prefix}${name}"
		else:
			tag = f"{prefix}$`{name}`"

		if isinstance(value, PyList) and not isinstance(value, PyTable):
			blocks.append(_repr_list(value, tag))
		else:
			blocks.append(tag + "\n" + _repr_element(value) + "\n")
	return "\n".join(blocks)


def _footer(tbl) -> str:
	"""Generate footer line based on shape and dtypes."""
	kinds = ", ".join(_kind_name(col.schema()) for col in tbl.columns())
	return f"# {tbl.nrow}×{tbl.ncol} table <{kinds}>"


def _repr_table(tbl) -> str:
	"""Row-numbered columns, truncated to head and tail for long tables."""
	cols = tbl.columns()
	if not cols:
		return "# 0×0 table"

	nrow = tbl.nrow
	truncated = nrow > MAX_HEAD_ROWS * 2
	if truncated:
		row_indices = list(range(MAX_HEAD_ROWS)) + list(range(nrow - MAX_HEAD_ROWS, nrow))
	else:
		row_indices = list(range(nrow))

	row_labels = [str(i + 1) for i in row_indices]
	if truncated:
		row_labels.insert(MAX_HEAD_ROWS, "...")
	label_width = max((len(s) for s in row_labels), default=0)

	formatted = []
	for name, col in zip(tbl.names, cols):
		values = col.to_list()
		cells = [_format_scalar(values[i], quote=False) for i in row_indices]
		if truncated:
			cells.insert(MAX_HEAD_ROWS, "...")
		width = max([len(name)] + [len(s) for s in cells])
		right = _is_numeric(col.schema())
		formatted.append([name.rjust(width) if right else name.ljust(width)] + _pad(cells, width, right))

	lines = [" " * label_width + " " + " ".join(col[0] for col in formatted)]
	for r, label in enumerate(row_labels):
		lines.append(label.ljust(label_width) + " " + " ".join(col[r + 1] for col in formatted))

	lines.append("")
	lines.append(_footer(tbl))
	return "\n".join(lines)


def _printr(obj) -> str:
	"""Entry point used by every container's __repr__."""
	from .array import PyArray
	from .keyedlist import PyList
	from .table import PyTable
	from .vector import PyVector

	if isinstance(obj, PyTable):
		return _repr_table(obj)
	if isinstance(obj, PyList):
		return _repr_list(obj)
	if isinstance(obj, PyArray):
		return _repr_array(obj)
	if isinstance(obj, PyVector):
		return _repr_vector(obj)
	return repr(obj)
