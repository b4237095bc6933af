"""
Contract component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Address, Charity, Donation, Milestone


class ContractStatePort(Protocol):
    """Lifecycle and read access to the whole contract state."""

    def initialize(self, owner: Address) -> None:
        """Clear all stores and record the owner."""
        ...

    def is_initialized(self) -> bool:
        """Whether an owner has been recorded."""
        ...

    def get_owner(self) -> Address | None:
        """Current owner, if any."""
        ...

    def list_charities(self) -> list[Charity]:
        ...

    def list_donations(self) -> list[Donation]:
        ...

    def list_milestones(self) -> list[Milestone]:
        ...
