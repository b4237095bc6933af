"""
Milestones component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Charity, Milestone


class MilestoneStorePort(Protocol):
    """Store interface for milestones and their owning charities."""

    def get_charity(self, charity_id: int) -> Charity | None:
        """Get charity by ID."""
        ...

    def get_milestone(self, milestone_id: int) -> Milestone | None:
        """Get milestone by ID."""
        ...

    def save_milestone(self, milestone: Milestone) -> Milestone:
        """Insert or replace a milestone."""
        ...

    def allocate_milestone_id(self) -> int:
        """Consume and return the next milestone ID."""
        ...

    def list_milestones_by_charity(self, charity_id: int) -> list[Milestone]:
        """Milestones of one charity, ordered by ID."""
        ...
