from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payment_queries.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import datetime

_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """Calendar month identifier (year + month, no day).

    Ordering is chronological: (year, month) compared field by field.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"Month must be in 1..12, got {self.month}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> YearMonth:
        """Month of ``dt`` as seen on its own wall clock.

        No zone conversion happens: a payment stamped 2024-01-31T23:30-05:00
        belongs to January even though it is February in UTC.
        """
        return cls(year=dt.year, month=dt.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse a ``YYYY-MM`` string.

        Raises:
            InvalidYearMonthError: If the text is not in ``YYYY-MM`` form
                or the month is out of range.
        """
        match = _YEAR_MONTH_PATTERN.match(text.strip())
        if match is None:
            raise InvalidYearMonthError(f"Invalid year-month: {text!r}; expected YYYY-MM")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, dt: datetime) -> bool:
        return YearMonth.from_datetime(dt) == self

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
