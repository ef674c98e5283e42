"""Tagged result of a parse attempt.

Parsing never raises for malformed input. Each parse function returns a
ParseOutcome that is either a success carrying the parsed value or a
failure carrying a diagnostic message, never both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from horologe.errors import ParseError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Result of parsing a string.

    Build instances with success() or failure() rather than the
    constructor.

    Attributes:
        value: The parsed value, or None on failure.
        error: The diagnostic message, or None on success.

    Examples:
        >>> ok = ParseOutcome.success(42)
        >>> ok.is_success, ok.value
        (True, 42)

        >>> bad = ParseOutcome.failure("month out of range")
        >>> bad.is_success, bad.error
        (False, 'month out of range')
    """

    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> ParseOutcome[T]:
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, message: str) -> ParseOutcome[T]:
        return cls(value=None, error=message)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the parsed value.

        Raises:
            ParseError: If this outcome is a failure.
        """
        if self.error is not None:
            raise ParseError(self.error)
        return self.value  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> ParseOutcome[U]:
        """Transform a successful value; failures pass through unchanged."""
        if self.error is not None:
            return ParseOutcome.failure(self.error)
        return ParseOutcome.success(func(self.value))  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self.is_success


__all__ = ["ParseOutcome"]
