"""
DataType system for PyVector / PyArray.

Pure metadata design:
  - DataType describes element semantics (kind + nullable flag)
  - Vectors are homogeneous: mixed input is coerced up a single ladder
  - Promotion is functional (immutable DataType instances)
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Type

from .errors import SubsetTypeError
from .missing import NA, is_na


# Coercion ladder: logical < integer < double < complex < character
_LADDER = (bool, int, float, complex, str)
_TEMPORAL = (date, datetime)


@dataclass(frozen=True)
class DataType:
    """
    Describes the semantic type of a PyVector.

    Attributes
    ----------
    kind : Type
        Python type (bool, int, float, complex, str, date, datetime)
    nullable : bool
        Whether the vector holds at least one NA

    Examples
    --------
    >>> DataType(int)
    <int>
    >>> DataType(float).promote_with(NA)
    <float nullable>
    >>> DataType(int).promote_with("a")
    <str>
    """

    kind: Type[Any]
    nullable: bool = False

    def __repr__(self):
        if self.nullable:
            return f"<{self.kind.__name__} nullable>"
        return f"<{self.kind.__name__}>"

    @property
    def is_numeric(self) -> bool:
        return self.kind in (bool, int, float, complex)

    def with_nullable(self, nullable: bool = True) -> "DataType":
        if nullable == self.nullable:
            return self
        return DataType(self.kind, nullable)

    def promote_with(self, value: Any) -> "DataType":
        """
        Promote this DataType to accommodate a new Python value.

        Never mutates; always returns new DataType.

        Raises
        ------
        SubsetTypeError
            If the value cannot share a vector with this kind
        """
        if is_na(value) and not isinstance(value, float):
            return self.with_nullable(True)

        vkind = infer_kind(value)
        if vkind is self.kind:
            return self
        return DataType(_common_kind(self.kind, vkind), self.nullable)


def _common_kind(a: Type, b: Type) -> Type:
    if a in _LADDER and b in _LADDER:
        return max(a, b, key=_LADDER.index)
    if a in _TEMPORAL and b in _TEMPORAL:
        return datetime
    if str in (a, b) and (a in _TEMPORAL or b in _TEMPORAL):
        return str
    raise SubsetTypeError(
        f"Cannot combine {a.__name__} and {b.__name__} in one vector"
    )


def infer_kind(value: Any) -> Optional[Type]:
    """
    Infer the element kind of a single scalar.

    Returns None for NA / None.

    Raises
    ------
    SubsetTypeError
        For values that are not scalars (containers belong in a PyList)
    """
    if value is NA or value is None:
        return None

    # Check bool BEFORE int (bool is subclass of int)
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, complex):
        return complex
    if isinstance(value, str):
        return str

    # Check datetime BEFORE date (datetime is subclass of date)
    if isinstance(value, datetime):
        return datetime
    if isinstance(value, date):
        return date

    raise SubsetTypeError(
        f"Vectors hold scalars only, not {type(value).__name__}; use a PyList"
    )


def infer_dtype(values: Iterable[Any]) -> Optional[DataType]:
    """
    Infer a DataType from an iterable of Python scalars.

    Returns None for an empty iterable. All-missing input is logical,
    the type of a bare NA.

    Examples
    --------
    >>> infer_dtype([1, 2, 3])
    <int>
    >>> infer_dtype([1, 2.5, NA])
    <float nullable>
    >>> infer_dtype([NA])
    <bool nullable>
    """
    dtype = None
    leading_na = False
    seen = False

    for v in values:
        seen = True
        if dtype is not None:
            dtype = dtype.promote_with(v)
            continue
        k = infer_kind(v)
        if k is None:
            leading_na = True
        else:
            dtype = DataType(k, leading_na)

    if not seen:
        return None
    if dtype is None:
        return DataType(bool, nullable=True)
    return dtype


def coerce_scalar(value: Any, dtype: DataType) -> Any:
    """
    Convert a scalar to the dtype's kind. None becomes NA.

    Examples
    --------
    >>> coerce_scalar(True, DataType(int))
    1
    >>> coerce_scalar(None, DataType(int, nullable=True))
    NA
    """
    if value is None or value is NA:
        return NA

    kind = dtype.kind
    if type(value) is kind:
        return value

    if kind is str:
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return str(value)
    if kind is datetime and isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if kind in (int, float, complex) and isinstance(value, (bool, int, float)):
        return kind(value)

    raise SubsetTypeError(
        f"Incompatible value {value!r} for vector<{kind.__name__}>"
    )
