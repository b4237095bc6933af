from enum import Enum

from pydantic import BaseModel, Field, computed_field

from src.domain.state import milestone_state

# --- Identity ---

# Opaque, comparable address supplied by the hosting environment.
Address = str


# --- Enums / Literals ---

class DonationStatus(str, Enum):
    """Lifecycle states of a donation record."""

    COMPLETED = "completed"
    REFUNDED = "refunded"  # reserved, never produced by donate


# --- Charity ---

class Charity(BaseModel):
    id: int = Field(ge=1)
    name: str
    wallet: Address
    active: bool = True
    total_received: int = Field(default=0, ge=0)
    reputation_score: int = 100


# --- Donation ---

class Donation(BaseModel):
    id: int = Field(ge=1)
    charity_id: int
    donor: Address
    amount: int = Field(gt=0)
    status: DonationStatus = DonationStatus.COMPLETED


# --- Milestone ---

class Milestone(BaseModel):
    id: int = Field(ge=1)
    charity_id: int
    description: str
    target_amount: int = Field(gt=0)
    current_amount: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def completed(self) -> bool:
        """Derived from progress; there is no way to set it directly."""
        return milestone_state(self.current_amount, self.target_amount) == "completed"


# --- Aggregates ---

class LedgerStats(BaseModel):
    charity_count: int = 0
    active_charity_count: int = 0
    donation_count: int = 0
    milestone_count: int = 0
    completed_milestone_count: int = 0
    total_donated: int = 0
