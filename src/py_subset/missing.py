"""
Missing-value marker and the maybe-result used by keyed lookups.

Design:
  - NA is a singleton, distinct from every valid value (None included)
  - NA never compares equal to anything, itself included
  - Lookup makes "not found" a checked outcome instead of a bare sentinel
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import math

from .errors import SubsetKeyError
from .errors import SubsetTypeError


class NAType:
    """
    Type of the NA singleton.

    Examples
    --------
    >>> NA == NA
    False
    >>> NA is NA
    True
    >>> is_na(NA)
    True
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NA"

    def __eq__(self, other):
        return False

    def __ne__(self, other):
        return True

    # Identity hash so NA can still live in sets/dict keys
    __hash__ = object.__hash__

    def __bool__(self):
        raise SubsetTypeError("The truth value of NA is undefined; test with is_na()")

    def __reduce__(self):
        return (NAType, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


NA = NAType()


def is_na(value: Any) -> bool:
    """True for NA, None and float NaN."""
    if value is NA or value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    return False


@dataclass(frozen=True)
class Lookup:
    """
    Result of a keyed lookup.

    Attributes
    ----------
    value : Any
        The element found, or NA
    found : bool
        Whether the key resolved to an element

    Examples
    --------
    >>> Lookup.missing()
    Lookup(value=NA, found=False)
    >>> Lookup(3).unwrap()
    3
    """

    value: Any = NA
    found: bool = True

    @classmethod
    def missing(cls) -> "Lookup":
        return cls(NA, found=False)

    def get(self, default: Any = NA) -> Any:
        return self.value if self.found else default

    def unwrap(self, key: Any = None) -> Any:
        if not self.found:
            raise SubsetKeyError(f"No element matches {key!r}")
        return self.value
