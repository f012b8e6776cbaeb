"""Domain exceptions for payment-queries.

Exception hierarchy:
    DomainException (base)
    └── Validation Errors
        ├── InvalidPaymentIdError
        └── InvalidYearMonthError

Query operations define no exceptions of their own. Faults raised by
collaborators or by arithmetic on malformed data propagate unchanged.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentIdError(DomainException, ValueError):
    """Raised when a payment ID fails validation.

    PaymentId must be a valid UUID.
    """


class InvalidYearMonthError(DomainException, ValueError):
    """Raised when a year-month cannot be built or parsed.

    Month must be in 1..12 and text input must look like ``YYYY-MM``.
    """
