"""utilkit: small helpers for FastAPI services.

Environment lookup with fallback, value checks and integer coercion,
JSON response envelopes and a vector dot product.
"""

from .core.config import Config, configure_logging, getenv
from .core.errors import (
    CoercionError,
    IntegerOverflowError,
    LengthMismatchError,
    Outcome,
    UnsupportedTypeError,
    UtilkitError,
    recover,
)
from .core.http import build_envelope, respond_bad_request, respond_custom, respond_ok
from .core.middleware import install
from .core.validation import NumericKind, is_non_empty_string, numeric_kind, to_int
from .core.vector import dot_product

__version__ = "1.0.0"

__all__ = [
    "CoercionError",
    "Config",
    "IntegerOverflowError",
    "LengthMismatchError",
    "NumericKind",
    "Outcome",
    "UnsupportedTypeError",
    "UtilkitError",
    "build_envelope",
    "configure_logging",
    "dot_product",
    "getenv",
    "install",
    "is_non_empty_string",
    "numeric_kind",
    "recover",
    "respond_bad_request",
    "respond_custom",
    "respond_ok",
    "to_int",
]
