from __future__ import annotations

from typing import Any, Generic, TypeVar, Union
from dataclasses import dataclass


T = TypeVar('T')


class ParseError(Exception):
    reason: str
    expected: str
    actual: str

    def __init__(self, reason: str, expected: str, actual: str) -> None:
        self.reason = reason
        self.expected = expected
        self.actual = actual

        super().__init__(f'{reason}: expected {expected}, got {actual}')


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_successful(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """A failed parse.

    `reason`, `expected` and `actual` are symbolic names (see `gherkin_lite.constants`),
    there is no line or column information.
    """

    reason: str
    expected: str
    actual: str

    def is_successful(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ParseError(self.reason, self.expected, self.actual)

    def __str__(self) -> str:
        return f'{self.reason}: expected {self.expected}, got {self.actual}'


ParseResult = Union[Ok[T], Err]
