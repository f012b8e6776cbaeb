"""Domain entities - Objects with identity."""

from payment_queries.domain.entities.payment import Payment, PaymentItem
from payment_queries.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
