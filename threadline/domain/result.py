"""Discriminated command results.

Store commands never raise for expected-input conditions. They return
either Ok(value) or Err(error), and callers branch on the type.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from threadline.domain.error import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful command result."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Rejected command result carrying a typed domain error."""

    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]
