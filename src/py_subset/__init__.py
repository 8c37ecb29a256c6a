"""
py-subset: R-style subsetting for Python vectors, arrays, lists and tables

Indices are 1-based. Three access forms are offered on every container:
    - extract(key)      [   : selection, keeps the container kind
    - extract_one(key)  [[  : one element, unwrapped
    - x.name            $   : literal-name extraction on lists

Main classes:
    - PyVector: homogeneous vector with optional element names
    - PyArray: column-major n-d array with dimension dropping
    - PyList: ordered heterogeneous keyed list
    - PyTable: named equal-length columns

Lookups that find nothing return NA instead of raising.

Zero external dependencies - pure Python stdlib only.
"""

from .missing import NA, NAType, Lookup, is_na
from .vector import PyVector
from .array import PyArray
from .keyedlist import PyList
from .table import PyTable
from .complete import complete_mask, filter_by_mask, na_omit
from .typing import DataType
from .errors import SubsetError, SubsetKeyError, SubsetValueError, SubsetTypeError, SubsetIndexError

__version__ = "0.1.0"
__all__ = [
	"NA",
	"NAType",
	"Lookup",
	"is_na",
	"PyVector",
	"PyArray",
	"PyList",
	"PyTable",
	"DataType",
	"complete_mask",
	"filter_by_mask",
	"na_omit",
	"SubsetError",
	"SubsetKeyError",
	"SubsetValueError",
	"SubsetTypeError",
	"SubsetIndexError"
]
