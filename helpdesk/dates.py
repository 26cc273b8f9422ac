"""Calendar dates as used in personnel records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _next_field(lines: Iterator[str]) -> str:
    """Return the next non-blank line from ``lines``.

    Leading whitespace and the line terminator are dropped.
    """
    for line in lines:
        text = line.lstrip().rstrip("\r\n")
        if text:
            return text
    raise EOFError("unexpected end of input")


@dataclass(frozen=True)
class Date:
    """A day/month/year date."""

    day: int = 0
    month: int = 0
    year: int = 0

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a date written as ``day/month/year``."""
        parts = text.strip().split("/")
        if len(parts) != 3:
            raise ValueError(f"invalid date: {text!r}")
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"invalid date: {text!r}") from exc
        return cls(day, month, year)

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def compare(self, other: Date) -> int:
        """Return 1 if this date is older, -1 if ``other`` is older, 0 if equal."""
        if self._key() < other._key():
            return 1
        if self._key() > other._key():
            return -1
        return 0

    def years_until(self, current: Date) -> int:
        """Whole years elapsed from this date up to ``current``."""
        years = current.year - self.year
        if (current.month, current.day) < (self.month, self.day):
            years -= 1
        return years

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"