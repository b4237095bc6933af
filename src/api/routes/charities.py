"""
Charity API Routes.

Registration and activation are owner-only; reads are public.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.api.deps import get_ledger, raise_ledger_error, require_caller
from src.api.schemas import (
    CharityListResponse,
    DonationListResponse,
    MilestoneListResponse,
    RegisterCharityRequest,
)
from src.domain.entities import Charity
from src.services.ledger import LedgerService

router = APIRouter()


@router.post("", response_model=Charity, status_code=status.HTTP_201_CREATED)
def register_charity(
    request: RegisterCharityRequest,
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> Charity:
    out = ledger.register_charity(caller, request.name, request.wallet)
    if not out.success or out.charity is None:
        raise_ledger_error(out.error)
    return out.charity


@router.get("", response_model=CharityListResponse)
def list_charities(ledger: LedgerService = Depends(get_ledger)) -> CharityListResponse:
    out = ledger.list_charities()
    return CharityListResponse(charities=list(out.charities), count=len(out.charities))


@router.get("/{charity_id}", response_model=Charity)
def get_charity_details(
    charity_id: int,
    ledger: LedgerService = Depends(get_ledger),
) -> Charity:
    out = ledger.get_charity_details(charity_id)
    if not out.success or out.charity is None:
        raise_ledger_error(out.error)
    return out.charity


@router.post("/{charity_id}/deactivate", response_model=Charity)
def deactivate_charity(
    charity_id: int,
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> Charity:
    out = ledger.deactivate_charity(caller, charity_id)
    if not out.success or out.charity is None:
        raise_ledger_error(out.error)
    return out.charity


@router.post("/{charity_id}/reactivate", response_model=Charity)
def reactivate_charity(
    charity_id: int,
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> Charity:
    out = ledger.reactivate_charity(caller, charity_id)
    if not out.success or out.charity is None:
        raise_ledger_error(out.error)
    return out.charity


@router.get("/{charity_id}/donations", response_model=DonationListResponse)
def list_charity_donations(
    charity_id: int,
    ledger: LedgerService = Depends(get_ledger),
) -> DonationListResponse:
    out = ledger.list_charity_donations(charity_id)
    if not out.success:
        raise_ledger_error(out.error)
    return DonationListResponse(donations=list(out.donations), count=len(out.donations))


@router.get("/{charity_id}/milestones", response_model=MilestoneListResponse)
def list_charity_milestones(
    charity_id: int,
    ledger: LedgerService = Depends(get_ledger),
) -> MilestoneListResponse:
    out = ledger.list_charity_milestones(charity_id)
    if not out.success:
        raise_ledger_error(out.error)
    return MilestoneListResponse(
        milestones=list(out.milestones), count=len(out.milestones)
    )
