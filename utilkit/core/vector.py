from typing import Sequence, Union

import numpy as np

from .errors import LengthMismatchError, UnsupportedTypeError


SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

Vector = Union[Sequence[float], np.ndarray]


def _as_vector(values: Vector) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1:
        raise UnsupportedTypeError(f"expected a 1-D vector, got {array.ndim} dimensions", values)
    return array


def dot_product(a: Vector, b: Vector) -> Union[np.float32, np.float64]:
    """Inner product of two equal-length float32 or float64 vectors.

    The sum is accumulated index by index in the element dtype, so float32
    inputs round like float32 at every step. Both vectors must share the
    same dtype; mismatched lengths raise :class:`LengthMismatchError`.
    """
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))

    left = _as_vector(a)
    right = _as_vector(b)
    if left.dtype not in SUPPORTED_DTYPES:
        raise UnsupportedTypeError(f"unsupported element type: {left.dtype}", a)
    if left.dtype != right.dtype:
        raise UnsupportedTypeError(f"element types differ: {left.dtype} and {right.dtype}", b)

    total = left.dtype.type(0)
    for x, y in zip(left, right):
        total = total + x * y
    return total
