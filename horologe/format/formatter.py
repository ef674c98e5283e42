"""Configurable DateTime formatter.

The fixed formatters in horologe.format.iso8601 cover the common layouts.
Formatter runs the same pipeline with separators and optional parts taken
from a FormatterConfig.

Examples:
    >>> from horologe import DateTime
    >>> compact = Formatter(FormatterConfig(date_separator="/", date_time_separator=" "))
    >>> compact.format(DateTime(2025, 12, 28, 14, 30, 45, 120000))
    '2025/12/28 14:30:45.120000Z'

    >>> compact.format(DateTime(2025, 12, 28, 14, 30, 45))
    '2025/12/28 14:30:45Z'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from horologe._internal.fields import pad_micros
from horologe.errors import ValidationError
from horologe.format.iso8601 import date_part, time_part

if TYPE_CHECKING:
    from horologe.core.datetime import DateTime


@dataclass(frozen=True)
class FormatterConfig:
    """Settings for Formatter.

    Attributes:
        include_microseconds: Emit a six-digit fraction. The fraction is
            still omitted when the microsecond field is zero.
        include_timezone_suffix: Append 'Z'.
        date_separator: Character between year, month and day.
        time_separator: Character between hour, minute and second.
        date_time_separator: Character between the date and the time.
    """

    include_microseconds: bool = True
    include_timezone_suffix: bool = True
    date_separator: str = "-"
    time_separator: str = ":"
    date_time_separator: str = "T"

    def __post_init__(self) -> None:
        for name in ("date_separator", "time_separator", "date_time_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValidationError(
                    f"{name} must be a single character, got {value!r}"
                )


class Formatter:
    """Formats DateTime values according to a FormatterConfig.

    The fractional part is written only when include_microseconds is set
    AND the value's microsecond field is nonzero. A whole-second value
    therefore never gets a ".000000" tail, unlike format_rfc3339().
    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self._config = config if config is not None else FormatterConfig()

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def format(self, value: DateTime) -> str:
        """Format one DateTime."""
        config = self._config
        parts = [
            date_part(value, config.date_separator),
            config.date_time_separator,
            time_part(value, config.time_separator),
        ]
        if config.include_microseconds and value.microsecond != 0:
            parts.append(f".{pad_micros(value.microsecond)}")
        if config.include_timezone_suffix:
            parts.append("Z")
        return "".join(parts)

    def __call__(self, value: DateTime) -> str:
        return self.format(value)

    def __repr__(self) -> str:
        return f"Formatter({self._config!r})"


__all__ = ["FormatterConfig", "Formatter"]
