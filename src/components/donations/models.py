"""
Donations component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Address, Charity, Donation
from src.domain.errors import LedgerError

# --- Input Models ---


@dataclass(frozen=True)
class DonateInput:
    """Input for a donation. Any identified caller may donate."""

    caller: Address | None
    charity_id: int
    amount: int


@dataclass(frozen=True)
class GetDonationInput:
    donation_id: int


@dataclass(frozen=True)
class ListCharityDonationsInput:
    charity_id: int


# --- Output Models ---


@dataclass(frozen=True)
class DonationOutput:
    """Output for donate and donation lookups.

    On a successful donate, `charity` carries the updated aggregate.
    """

    donation: Donation | None = None
    charity: Charity | None = None
    error: LedgerError | None = None
    success: bool = True


@dataclass(frozen=True)
class DonationListOutput:
    donations: tuple[Donation, ...] = ()
    error: LedgerError | None = None
    success: bool = True
