from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from payment_queries.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for the current time.

    Contract:
    - now() MUST return a timezone-aware datetime in the provider's zone
    - now() MUST NOT return naive datetimes under any circumstance
    - current_year_month() is the month of now() on the provider's wall clock

    Both accessors are read-only; their values are the authoritative "now".
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...

    def current_year_month(self) -> YearMonth:
        return YearMonth.from_datetime(self.now())
