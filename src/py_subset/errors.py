import os
import sys
import warnings

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class SubsetError(Exception):
    """Base exception for py-subset indexing."""
    pass


class SubsetKeyError(SubsetError, KeyError):
    """Raised when a strict literal-name lookup or Lookup.unwrap() finds nothing."""
    pass


class SubsetTypeError(SubsetError, TypeError):
    """Raised for keys of an unsupported type, bool(NA), or non-scalar vector elements."""
    pass


class SubsetValueError(SubsetError, ValueError):
    """Raised when a mask is longer than its target, or names, columns or extents disagree in length."""
    pass


class SubsetIndexError(SubsetError, IndexError):
    """Raised for mixed-sign subscripts, a wrong number of axes, empty paths and undefined table columns."""
    pass


def _warn(message, category=UserWarning):
    """Emit a warning attributed to the first frame outside this package."""
    frame = sys._getframe(1)
    level = 2
    while frame is not None and os.path.dirname(os.path.abspath(frame.f_code.co_filename)) == _PACKAGE_DIR:
        frame = frame.f_back
        level += 1
    warnings.warn(message, category, stacklevel=level)
