"""Tagged result type for operations that can fail with a domain error.

Resolution steps return ``Ok(value)`` or ``Err(error)`` so the failure path
is a value the caller must look at. ``unwrap()`` turns an ``Err`` back into
the raised exception for call sites that just want to propagate it.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Literal, TypeVar, Union

from .errors import OperationalDayError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the domain error."""

    error: OperationalDayError

    @property
    def is_ok(self) -> Literal[False]:
        return False

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]


def capture(fn: Callable[..., T], *args, **kwargs) -> "Result[T]":
    """Run ``fn`` and wrap its outcome.

    Only OperationalDayError is captured; anything else is a bug and
    propagates.

    Example:
        >>> capture(operational_date, instant, "Not/AZone").is_ok
        False
    """
    try:
        return Ok(fn(*args, **kwargs))
    except OperationalDayError as e:
        return Err(e)
