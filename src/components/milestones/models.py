"""
Milestones component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Address, Milestone
from src.domain.errors import LedgerError


@dataclass(frozen=True)
class MilestoneConfig:
    """Milestone limits from rules."""

    description_max_length: int = 500


# --- Input Models ---


@dataclass(frozen=True)
class AddMilestoneInput:
    caller: Address | None
    charity_id: int
    description: str
    target_amount: int


@dataclass(frozen=True)
class GetMilestoneInput:
    milestone_id: int


@dataclass(frozen=True)
class UpdateProgressInput:
    """Absolute progress report: new_current_amount replaces the old figure."""

    caller: Address | None
    milestone_id: int
    new_current_amount: int


@dataclass(frozen=True)
class ListCharityMilestonesInput:
    charity_id: int


# --- Output Models ---


@dataclass(frozen=True)
class MilestoneOutput:
    milestone: Milestone | None = None
    error: LedgerError | None = None
    success: bool = True


@dataclass(frozen=True)
class MilestoneListOutput:
    milestones: tuple[Milestone, ...] = ()
    error: LedgerError | None = None
    success: bool = True
