from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from src.domain.entities import Milestone

MilestoneState = Literal["open", "completed"]


def milestone_state(current_amount: int, target_amount: int) -> MilestoneState:
    """
    Derive a milestone's state from its figures.

    Re-evaluated on every progress update, so a downward revision below the
    target moves a completed milestone back to open.
    """
    if current_amount >= target_amount:
        return "completed"
    return "open"


def apply_progress(milestone: Milestone, new_current_amount: int) -> Milestone:
    """
    Return a NEW Milestone with current_amount replaced (absolute set, not increment).
    Raises ValueError on a negative figure.
    """
    if new_current_amount < 0:
        raise ValueError(f"Progress cannot be negative: {new_current_amount}")
    return milestone.model_copy(update={"current_amount": new_current_amount})
