"""
Donations component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Charity, Donation


class DonationStorePort(Protocol):
    """Store interface for donations and the charities they credit."""

    def get_charity(self, charity_id: int) -> Charity | None:
        """Get charity by ID."""
        ...

    def save_charity(self, charity: Charity) -> Charity:
        """Replace a charity (aggregate update)."""
        ...

    def get_donation(self, donation_id: int) -> Donation | None:
        """Get donation by ID."""
        ...

    def save_donation(self, donation: Donation) -> Donation:
        """Append a donation record."""
        ...

    def allocate_donation_id(self) -> int:
        """Consume and return the next donation ID."""
        ...

    def list_donations_by_charity(self, charity_id: int) -> list[Donation]:
        """Donations crediting one charity, ordered by ID."""
        ...
