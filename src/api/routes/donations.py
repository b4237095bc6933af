"""
Donation API Routes.

Any identified caller may donate to an active charity.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.api.deps import get_ledger, raise_ledger_error, require_caller
from src.api.schemas import DonateRequest
from src.domain.entities import Donation
from src.services.ledger import LedgerService

router = APIRouter()


@router.post("", response_model=Donation, status_code=status.HTTP_201_CREATED)
def donate(
    request: DonateRequest,
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> Donation:
    out = ledger.donate(caller, request.charity_id, request.amount)
    if not out.success or out.donation is None:
        raise_ledger_error(out.error)
    return out.donation


@router.get("/{donation_id}", response_model=Donation)
def get_donation_details(
    donation_id: int,
    ledger: LedgerService = Depends(get_ledger),
) -> Donation:
    out = ledger.get_donation_details(donation_id)
    if not out.success or out.donation is None:
        raise_ledger_error(out.error)
    return out.donation
