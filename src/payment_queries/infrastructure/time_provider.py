from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from payment_queries.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production time provider using the system clock in a fixed zone."""

    def __init__(self, zone: tzinfo = UTC) -> None:
        self._zone = zone

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def now(self) -> datetime:
        return datetime.now(self._zone)


class FixedTimeProvider(TimeProvider):
    """Test time provider with controllable fixed timestamp.

    Note: This implementation is NOT thread-safe. It is intended for
    single-threaded unit tests only.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_aware(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time for testing scenarios."""
        self._validate_aware(new_time)
        self._fixed_time = new_time

    def _validate_aware(self, dt: datetime) -> None:
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"datetime must be timezone-aware, got naive {dt.isoformat()}")
