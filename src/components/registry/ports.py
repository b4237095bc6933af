"""
Registry component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Charity


class CharityStorePort(Protocol):
    """Store interface for charity records."""

    def get_charity(self, charity_id: int) -> Charity | None:
        """Get charity by ID."""
        ...

    def save_charity(self, charity: Charity) -> Charity:
        """Insert or replace a charity."""
        ...

    def allocate_charity_id(self) -> int:
        """Consume and return the next charity ID."""
        ...

    def list_charities(self) -> list[Charity]:
        """All charities ordered by ID."""
        ...
