"""Shared extraction interface implemented by every container kind."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any


class Container(ABC):
    """
    Base of PyVector, PyArray and PyList.

    Every container answers the same questions:
      - extract(key)        -> same container kind (R's `[`)
      - lookup(key)         -> a Lookup for one element, found or not
      - extract_one(key)    -> an unwrapped element (R's `[[`)
      - extract_many(keys)  -> same container kind, multi-index form of `[`
    """

    @abstractmethod
    def extract(self, key) -> "Container":
        ...

    @abstractmethod
    def lookup(self, key, exact: bool = True) -> Any:
        ...

    def extract_one(self, key, exact: bool = True) -> Any:
        return self.lookup(key, exact=exact).value

    def extract_many(self, keys) -> "Container":
        return self.extract(keys)

    def __getitem__(self, key):
        return self.extract(key)

    def __repr__(self):
        from .display import _printr
        return _printr(self)
