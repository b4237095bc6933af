"""
Contract API Routes.

Lifecycle, owner lookup, ledger statistics and the event journal.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.deps import get_ledger, raise_ledger_error, require_caller
from src.api.schemas import AuditEntryResponse, AuditListResponse, OwnerResponse
from src.core.services.audit import AuditAction, AuditEntry, EntityType
from src.domain.entities import LedgerStats
from src.services.ledger import LedgerService

router = APIRouter()


# --- Helper Functions ---


def entry_to_response(entry: AuditEntry) -> AuditEntryResponse:
    return AuditEntryResponse(
        id=str(entry.id),
        sequence=entry.sequence,
        timestamp=entry.timestamp,
        action=entry.action.value,
        entity_type=entry.entity_type.value,
        entity_id=entry.entity_id,
        actor=entry.actor,
        description=entry.description,
        metadata=entry.metadata,
    )


def parse_action(action_str: str) -> AuditAction:
    """Parse action string to enum."""
    try:
        return AuditAction(action_str.lower())
    except ValueError:
        valid_actions = [a.value for a in AuditAction]
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid action: {action_str}. Must be one of: {', '.join(valid_actions)}",
        ) from None


def parse_entity_type(entity_type_str: str) -> EntityType:
    """Parse entity type string to enum."""
    try:
        return EntityType(entity_type_str.lower())
    except ValueError:
        valid_str = ", ".join(e.value for e in EntityType)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid entity type: {entity_type_str}. Must be one of: {valid_str}",
        ) from None


# --- Routes ---


@router.post("/initialize", response_model=OwnerResponse)
def initialize_contract(
    caller: str = Depends(require_caller),
    ledger: LedgerService = Depends(get_ledger),
) -> OwnerResponse:
    """Initialize the contract; the caller becomes the owner."""
    out = ledger.initialize_contract(caller)
    if not out.success:
        raise_ledger_error(out.error)
    return OwnerResponse(owner=out.owner)


@router.get("/owner", response_model=OwnerResponse)
def get_contract_owner(ledger: LedgerService = Depends(get_ledger)) -> OwnerResponse:
    return OwnerResponse(owner=ledger.get_contract_owner())


@router.get("/stats", response_model=LedgerStats)
def get_ledger_stats(ledger: LedgerService = Depends(get_ledger)) -> LedgerStats:
    return ledger.get_stats().stats


@router.get("/events", response_model=AuditListResponse)
def query_events(
    entity_type: str | None = Query(None, description="Filter by entity type"),
    entity_id: str | None = Query(None, description="Filter by entity ID"),
    actor: str | None = Query(None, description="Filter by caller address"),
    action: str | None = Query(None, description="Filter by action"),
    limit: int = Query(50, ge=1, le=500, description="Number of results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    ledger: LedgerService = Depends(get_ledger),
) -> AuditListResponse:
    """Query the journal of successful ledger mutations, oldest first."""
    entity_type_enum = parse_entity_type(entity_type) if entity_type else None
    action_enum = parse_action(action) if action else None

    results = ledger.audit.query(
        entity_type=entity_type_enum,
        entity_id=entity_id,
        actor=actor,
        action=action_enum,
        limit=limit,
        offset=offset,
    )
    total = ledger.audit.count(
        entity_type=entity_type_enum,
        entity_id=entity_id,
        actor=actor,
        action=action_enum,
    )

    return AuditListResponse(
        items=[entry_to_response(e) for e in results],
        total=total,
        limit=limit,
        offset=offset,
    )
