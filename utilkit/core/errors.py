from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Type


class UtilkitError(Exception):
    """Base exception for every failure raised by utilkit."""


class CoercionError(UtilkitError, ValueError):
    """Raised when ``to_int`` cannot turn a value into a platform integer."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class IntegerOverflowError(CoercionError, OverflowError):
    """The value does not fit in a signed 64-bit integer."""


class UnsupportedTypeError(CoercionError, TypeError):
    """The runtime type of the value is not one of the supported kinds."""


class LengthMismatchError(UtilkitError, ValueError):
    """Raised when two vectors of different lengths are combined."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"vectors must be the same length, got {left} and {right}")
        self.left = left
        self.right = right


@dataclass
class Outcome:
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@contextmanager
def recover(*types: Type[BaseException]) -> Iterator[Outcome]:
    """Catch the given exception types inside the block.

    The caught exception is stored on the yielded ``Outcome`` instead of
    propagating; anything else propagates as usual. Without arguments
    only ``UtilkitError`` is caught.

        with recover() as outcome:
            value = to_int(raw)
        if not outcome.ok:
            ...
    """
    catch: Tuple[Type[BaseException], ...] = types or (UtilkitError,)
    outcome = Outcome()
    try:
        yield outcome
    except catch as e:
        outcome.error = e
