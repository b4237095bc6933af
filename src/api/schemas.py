from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, StrictInt

from src.domain.entities import Charity, Donation, Milestone


# --- Contract ---
class OwnerResponse(BaseModel):
    owner: str | None


# --- Charities ---
class RegisterCharityRequest(BaseModel):
    name: str = Field(..., description="Display name of the charity")
    wallet: str = Field(..., description="Address that reports milestone progress")


class CharityListResponse(BaseModel):
    charities: list[Charity]
    count: int


# --- Donations ---
class DonateRequest(BaseModel):
    charity_id: StrictInt
    amount: StrictInt = Field(..., description="Amount in atomic currency units")


class DonationListResponse(BaseModel):
    donations: list[Donation]
    count: int


# --- Milestones ---
class AddMilestoneRequest(BaseModel):
    charity_id: StrictInt
    description: str
    target_amount: StrictInt


class UpdateProgressRequest(BaseModel):
    new_current_amount: StrictInt = Field(..., description="New cumulative figure, not a delta")


class MilestoneListResponse(BaseModel):
    milestones: list[Milestone]
    count: int


# --- Events ---
class AuditEntryResponse(BaseModel):
    id: str
    sequence: int
    timestamp: datetime
    action: str
    entity_type: str
    entity_id: str | None
    actor: str | None
    description: str
    metadata: dict[str, Any]


class AuditListResponse(BaseModel):
    items: list[AuditEntryResponse]
    total: int
    limit: int
    offset: int
