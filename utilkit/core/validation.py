import math
from enum import Enum
from typing import Any, Optional

import numpy as np

from .errors import IntegerOverflowError, UnsupportedTypeError


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class NumericKind(Enum):
    """Runtime numeric kinds accepted by :func:`to_int`.

    ``INT`` is a Python ``int`` (the platform signed integer), ``FLOAT64``
    also covers Python ``float``. The fixed-width kinds are numpy scalars;
    ``np.uint`` is ``np.uint64`` on 64-bit platforms.
    """

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


# numpy scalars are keyed by (dtype.kind, dtype.itemsize) so that aliases
# such as np.longlong and np.int64 land on the same kind.
_KIND_BY_DTYPE = {
    ("i", 1): NumericKind.INT8,
    ("i", 2): NumericKind.INT16,
    ("i", 4): NumericKind.INT32,
    ("i", 8): NumericKind.INT64,
    ("u", 1): NumericKind.UINT8,
    ("u", 2): NumericKind.UINT16,
    ("u", 4): NumericKind.UINT32,
    ("u", 8): NumericKind.UINT64,
    ("f", 4): NumericKind.FLOAT32,
    ("f", 8): NumericKind.FLOAT64,
}

_FLOAT_KINDS = {NumericKind.FLOAT32, NumericKind.FLOAT64}


def is_non_empty_string(value: Any) -> bool:
    """True if ``value`` is a ``str`` with at least one character.

    Whitespace counts: ``"   "`` is non-empty.
    """
    return isinstance(value, str) and len(value) > 0


def numeric_kind(value: Any) -> Optional[NumericKind]:
    """Classify ``value`` by its exact runtime type, ``None`` if unsupported."""
    value_type = type(value)
    if value_type is int:
        return NumericKind.INT
    if value_type is float:
        return NumericKind.FLOAT64
    if isinstance(value, np.generic):
        return _KIND_BY_DTYPE.get((value.dtype.kind, value.dtype.itemsize))
    return None


def _float_to_int(value: Any) -> int:
    if math.isnan(value) or math.isinf(value):
        raise IntegerOverflowError(f"cannot convert {value} to int", value)
    result = int(value)
    if not INT64_MIN <= result <= INT64_MAX:
        raise IntegerOverflowError(f"{value} overflows int64", value)
    return result


def to_int(value: Any) -> int:
    """Convert a numeric value to a platform (signed 64-bit) integer.

    Floats are truncated toward zero. Unsigned 64-bit values at or above
    ``INT64_MAX`` raise :class:`IntegerOverflowError`; anything that is not
    a supported numeric kind raises :class:`UnsupportedTypeError`.
    """
    kind = numeric_kind(value)
    if kind is None:
        raise UnsupportedTypeError(f"unsupported type: {type(value).__name__}", value)

    if kind in _FLOAT_KINDS:
        return _float_to_int(value)

    result = int(value)
    if kind is NumericKind.UINT64:
        if result >= INT64_MAX:
            raise IntegerOverflowError(f"uint64 value {result} overflows int", value)
    elif kind is NumericKind.INT:
        if not INT64_MIN <= result <= INT64_MAX:
            raise IntegerOverflowError(f"int value {result} overflows int64", value)
    return result
