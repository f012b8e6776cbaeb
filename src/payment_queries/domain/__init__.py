"""Domain layer - Entities, value objects and rules.

This layer contains:
- Entities: Payment, PaymentItem and the User who paid
- Value Objects: Immutable objects defined by their attributes (PaymentId, YearMonth)
- Domain Exceptions: Validation failures of value objects

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
