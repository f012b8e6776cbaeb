from __future__ import annotations

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from payment_queries.application.ports import PaymentRepository, TimeProvider
    from payment_queries.domain.entities import Payment, PaymentItem
    from payment_queries.domain.value_objects import YearMonth

logger = structlog.get_logger(__name__)

# Lower bound used when "now - days" falls before the earliest representable date
_EARLIEST_INSTANT = datetime.min.replace(tzinfo=UTC)


def _instant(dt: datetime) -> datetime:
    # Same-tzinfo datetimes compare by wall clock; UTC keeps DST folds ordered
    return dt.astimezone(UTC)


def _by_payment_date(payment: Payment) -> datetime:
    return _instant(payment.payment_date)


def _by_item_count(payment: Payment) -> int:
    return payment.item_count


def _items_of(payments: Iterable[Payment]) -> Iterable[PaymentItem]:
    for payment in payments:
        yield from payment.payment_items


def _email_domain(email: str) -> str:
    _, at, domain = email.rpartition("@")
    return domain.lower() if at else ""


class PaymentQueryService:
    """Read-only queries and aggregations over all stored payments.

    Responsibilities:
    - Fetch the full collection from the repository on every call
    - Filter, sort and aggregate in memory without mutating entities
    - Read "now" and the current month from the injected time provider

    Sorts are stable; descending results are the exact reverse of the
    ascending ones, so ties come out in reverse repository order.

    Money sums use Decimal and start from Decimal(0), so a month without
    payments sums to zero.

    Inputs are not validated. A missing collaborator fails at first use and
    faults raised while reading data propagate to the caller.

    Every public operation emits exactly one debug event.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        time_provider: TimeProvider,
    ) -> None:
        self._payment_repo = payment_repository
        self._time_provider = time_provider

    # =========================================================================
    # Sorting
    # =========================================================================

    def sort_by_date_ascending(self) -> list[Payment]:
        return self._sorted(_by_payment_date, key_name="payment_date", descending=False)

    def sort_by_date_descending(self) -> list[Payment]:
        return self._sorted(_by_payment_date, key_name="payment_date", descending=True)

    def sort_by_item_count_ascending(self) -> list[Payment]:
        return self._sorted(_by_item_count, key_name="item_count", descending=False)

    def sort_by_item_count_descending(self) -> list[Payment]:
        return self._sorted(_by_item_count, key_name="item_count", descending=True)

    def _sorted(
        self,
        key: Callable[[Payment], object],
        *,
        key_name: str,
        descending: bool,
    ) -> list[Payment]:
        payments = sorted(self._payment_repo.find_all(), key=key)
        if descending:
            # Exact reverse of the stable ascending order, not a stable descending sort
            payments.reverse()
        logger.debug(
            "payments_sorted",
            key=key_name,
            order="desc" if descending else "asc",
            count=len(payments),
        )
        return payments

    # =========================================================================
    # Filtering
    # =========================================================================

    def find_for_month(self, year_month: YearMonth) -> list[Payment]:
        """Payments whose date falls in ``year_month`` on their own wall clock.

        Repository order is preserved.
        """
        payments = self._in_month(year_month)
        logger.debug("payments_found_for_month", year_month=str(year_month), count=len(payments))
        return payments

    def find_for_current_month(self) -> list[Payment]:
        year_month = self._time_provider.current_year_month()
        payments = self._in_month(year_month)
        logger.debug(
            "payments_found_for_current_month", year_month=str(year_month), count=len(payments)
        )
        return payments

    def _in_month(self, year_month: YearMonth) -> list[Payment]:
        return [
            payment
            for payment in self._payment_repo.find_all()
            if year_month.contains(payment.payment_date)
        ]

    def find_for_last_days(self, days: int) -> list[Payment]:
        """Payments made in the last ``days`` days up to now.

        Window is (now - days, now]: a payment stamped exactly at the lower
        bound is excluded, one stamped exactly now is included and
        future-dated payments are excluded.

        Subtraction is wall-clock arithmetic in the provider's zone, so a
        day across a DST change is still one calendar day. A window reaching
        past the earliest representable date keeps everything up to now.
        """
        now = self._time_provider.now()
        try:
            since = _instant(now - timedelta(days=days))
        except OverflowError:
            since = _EARLIEST_INSTANT
        now = _instant(now)
        payments = [
            payment
            for payment in self._payment_repo.find_all()
            if since < _instant(payment.payment_date) <= now
        ]
        logger.debug("payments_found_for_last_days", days=days, count=len(payments))
        return payments

    def find_with_exactly_one_item(self) -> set[Payment]:
        payments = {
            payment for payment in self._payment_repo.find_all() if payment.item_count == 1
        }
        logger.debug("payments_found_with_one_item", count=len(payments))
        return payments

    def find_payments_with_value_over(self, value: int | Decimal) -> set[Payment]:
        """Payments whose total final price is strictly greater than ``value``."""
        threshold = value if isinstance(value, Decimal) else Decimal(str(value))
        payments = {
            payment for payment in self._payment_repo.find_all() if payment.total > threshold
        }
        logger.debug("payments_found_with_value_over", threshold=str(threshold), count=len(payments))
        return payments

    # =========================================================================
    # Items and products
    # =========================================================================

    def find_product_names_sold_in_current_month(self) -> set[str]:
        year_month = self._time_provider.current_year_month()
        names = {item.name for item in _items_of(self._in_month(year_month))}
        logger.debug("product_names_found", year_month=str(year_month), count=len(names))
        return names

    def find_items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Items of every payment made by the user with ``email``.

        Matching is case-insensitive. Items keep repository and line order.
        Only the domain part of the email is logged.
        """
        items = list(
            _items_of(
                payment
                for payment in self._payment_repo.find_all()
                if payment.user.has_email(email)
            )
        )
        logger.debug("items_found_for_user", email_domain=_email_domain(email), count=len(items))
        return items

    # =========================================================================
    # Aggregation
    # =========================================================================

    def sum_total_for_month(self, year_month: YearMonth) -> Decimal:
        """Sum of final prices of all items paid in ``year_month``."""
        total = sum(
            (item.final_price for item in _items_of(self._in_month(year_month))),
            Decimal(0),
        )
        logger.debug("month_total_summed", year_month=str(year_month), total=str(total))
        return total

    def sum_discount_for_month(self, year_month: YearMonth) -> Decimal:
        """Sum of (regular - final) price of all items paid in ``year_month``."""
        discount = sum(
            (item.discount for item in _items_of(self._in_month(year_month))),
            Decimal(0),
        )
        logger.debug("month_discount_summed", year_month=str(year_month), discount=str(discount))
        return discount
