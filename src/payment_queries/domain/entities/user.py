from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Buyer attached to a payment."""

    email: str
    first_name: str = ""
    last_name: str = ""

    def has_email(self, email: str) -> bool:
        """Case-insensitive email comparison."""
        return self.email.casefold() == email.casefold()
