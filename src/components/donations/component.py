"""
Donations component - append-only donation ledger.

Records donations against registered charities and keeps each charity's
running total in step with its donations.

Invariants:
- Donation IDs are assigned sequentially from 1, independent of charity IDs
- A donation never references a missing or inactive charity
- A charity's total_received equals the sum of its donation amounts
- Donation records are immutable once written
"""

from __future__ import annotations

from src.domain.entities import Donation, DonationStatus
from src.domain.errors import forbidden, invalid_amount, invalid_input, not_found

from .models import (
    DonateInput,
    DonationListOutput,
    DonationOutput,
    GetDonationInput,
    ListCharityDonationsInput,
)
from .ports import DonationStorePort


def run_donate(inp: DonateInput, *, store: DonationStorePort) -> DonationOutput:
    """
    Record a donation and credit the charity.

    Checks run in a fixed order: charity exists, charity is active, amount
    is positive. Nothing is written unless all of them pass. The caller is
    expected to run this inside a state transaction so the two writes land
    together.

    Args:
        inp: Charity, amount and donor.
        store: Donation store port.

    Returns:
        DonationOutput with the new donation and updated charity, or the failure.
    """
    if not inp.caller:
        return DonationOutput(
            error=invalid_input("caller", "Caller identity is required"),
            success=False,
        )

    charity = store.get_charity(inp.charity_id)
    if charity is None:
        return DonationOutput(error=not_found("Charity", inp.charity_id), success=False)

    if not charity.active:
        return DonationOutput(
            error=forbidden(f"Charity {charity.id} is not accepting donations"),
            success=False,
        )

    if inp.amount <= 0:
        return DonationOutput(error=invalid_amount("amount"), success=False)

    donation = Donation(
        id=store.allocate_donation_id(),
        charity_id=charity.id,
        donor=inp.caller,
        amount=inp.amount,
        status=DonationStatus.COMPLETED,
    )
    credited = charity.model_copy(
        update={"total_received": charity.total_received + inp.amount}
    )

    store.save_donation(donation)
    store.save_charity(credited)
    return DonationOutput(donation=donation, charity=credited, success=True)


def run_get(inp: GetDonationInput, *, store: DonationStorePort) -> DonationOutput:
    donation = store.get_donation(inp.donation_id)
    if donation is None:
        return DonationOutput(error=not_found("Donation", inp.donation_id), success=False)
    return DonationOutput(donation=donation, success=True)


def run_list_for_charity(
    inp: ListCharityDonationsInput, *, store: DonationStorePort
) -> DonationListOutput:
    if store.get_charity(inp.charity_id) is None:
        return DonationListOutput(error=not_found("Charity", inp.charity_id), success=False)
    return DonationListOutput(
        donations=tuple(store.list_donations_by_charity(inp.charity_id))
    )


def run(
    inp: DonateInput | GetDonationInput | ListCharityDonationsInput,
    *,
    store: DonationStorePort,
) -> DonationOutput | DonationListOutput:
    if isinstance(inp, DonateInput):
        return run_donate(inp, store=store)
    elif isinstance(inp, GetDonationInput):
        return run_get(inp, store=store)
    elif isinstance(inp, ListCharityDonationsInput):
        return run_list_for_charity(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
