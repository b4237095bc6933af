"""
Milestone API Routes.

The owner adds milestones; the owning charity's wallet reports progress.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.api.deps import get_ledger, raise_ledger_error, require_caller
from src.api.schemas import AddMilestoneRequest, UpdateProgressRequest
from src.domain.entities import Milestone
from src.services.ledger import LedgerService

router = APIRouter()


@router.post("", response_model=Milestone, status_code=status.HTTP_201_CREATED)
def add_milestone(
    request: AddMilestoneRequest,
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> Milestone:
    out = ledger.add_milestone(
        caller, request.charity_id, request.description, request.target_amount
    )
    if not out.success or out.milestone is None:
        raise_ledger_error(out.error)
    return out.milestone


@router.get("/{milestone_id}", response_model=Milestone)
def get_milestone_details(
    milestone_id: int,
    ledger: LedgerService = Depends(get_ledger),
) -> Milestone:
    out = ledger.get_milestone_details(milestone_id)
    if not out.success or out.milestone is None:
        raise_ledger_error(out.error)
    return out.milestone


@router.put("/{milestone_id}/progress", response_model=Milestone)
def update_milestone_progress(
    milestone_id: int,
    request: UpdateProgressRequest,
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> Milestone:
    out = ledger.update_milestone_progress(
        caller, milestone_id, request.new_current_amount
    )
    if not out.success or out.milestone is None:
        raise_ledger_error(out.error)
    return out.milestone
