"""
Milestones component - funding targets tracked per charity.

The contract owner sets milestones; the charity's own wallet reports
progress against them.

Invariants:
- Milestone IDs are assigned sequentially from 1, independent of other IDs
- completed is always current_amount >= target_amount, recomputed on read
- Progress updates are absolute and re-evaluated every time, so a downward
  revision can reopen a completed milestone
- Only the wallet of the owning charity may report progress
"""

from __future__ import annotations

from src.domain.entities import Milestone
from src.domain.errors import invalid_amount, invalid_input, not_found
from src.domain.policy import PolicyEngine
from src.domain.state import apply_progress

from .models import (
    AddMilestoneInput,
    GetMilestoneInput,
    ListCharityMilestonesInput,
    MilestoneConfig,
    MilestoneListOutput,
    MilestoneOutput,
    UpdateProgressInput,
)
from .ports import MilestoneStorePort


def run_add(
    inp: AddMilestoneInput,
    *,
    store: MilestoneStorePort,
    policy: PolicyEngine,
    config: MilestoneConfig | None = None,
) -> MilestoneOutput:
    """
    Add a milestone to a charity (admin only).

    Args:
        inp: Charity, description and target amount, plus the caller.
        store: Milestone store port.
        policy: Authorization guard.
        config: Milestone limits.

    Returns:
        MilestoneOutput with the new open milestone, or the failure.
    """
    config = config or MilestoneConfig()

    denied = policy.require_admin(inp.caller)
    if denied:
        return MilestoneOutput(error=denied, success=False)

    if store.get_charity(inp.charity_id) is None:
        return MilestoneOutput(error=not_found("Charity", inp.charity_id), success=False)

    if inp.target_amount <= 0:
        return MilestoneOutput(error=invalid_amount("target_amount"), success=False)

    if not inp.description.strip():
        return MilestoneOutput(
            error=invalid_input("description", "Description is required"),
            success=False,
        )
    if len(inp.description) > config.description_max_length:
        return MilestoneOutput(
            error=invalid_input(
                "description",
                f"Description exceeds {config.description_max_length} characters",
            ),
            success=False,
        )

    milestone = Milestone(
        id=store.allocate_milestone_id(),
        charity_id=inp.charity_id,
        description=inp.description,
        target_amount=inp.target_amount,
        current_amount=0,
    )
    store.save_milestone(milestone)
    return MilestoneOutput(milestone=milestone, success=True)


def run_get(inp: GetMilestoneInput, *, store: MilestoneStorePort) -> MilestoneOutput:
    milestone = store.get_milestone(inp.milestone_id)
    if milestone is None:
        return MilestoneOutput(
            error=not_found("Milestone", inp.milestone_id), success=False
        )
    return MilestoneOutput(milestone=milestone, success=True)


def run_update_progress(
    inp: UpdateProgressInput,
    *,
    store: MilestoneStorePort,
    policy: PolicyEngine,
) -> MilestoneOutput:
    """
    Replace a milestone's current amount (charity wallet only).

    Order of checks: milestone exists, caller is the owning charity's
    wallet, figure is non-negative.
    """
    milestone = store.get_milestone(inp.milestone_id)
    if milestone is None:
        return MilestoneOutput(
            error=not_found("Milestone", inp.milestone_id), success=False
        )

    charity = store.get_charity(milestone.charity_id)
    if charity is None:
        # Milestones are only created against existing charities, which are never deleted
        return MilestoneOutput(
            error=not_found("Charity", milestone.charity_id), success=False
        )

    denied = policy.require_charity_wallet(inp.caller, charity)
    if denied:
        return MilestoneOutput(error=denied, success=False)

    if inp.new_current_amount < 0:
        return MilestoneOutput(
            error=invalid_amount("new_current_amount", "Progress cannot be negative"),
            success=False,
        )

    updated = apply_progress(milestone, inp.new_current_amount)
    store.save_milestone(updated)
    return MilestoneOutput(milestone=updated, success=True)


def run_list_for_charity(
    inp: ListCharityMilestonesInput, *, store: MilestoneStorePort
) -> MilestoneListOutput:
    if store.get_charity(inp.charity_id) is None:
        return MilestoneListOutput(
            error=not_found("Charity", inp.charity_id), success=False
        )
    return MilestoneListOutput(
        milestones=tuple(store.list_milestones_by_charity(inp.charity_id))
    )


def run(
    inp: (
        AddMilestoneInput
        | GetMilestoneInput
        | UpdateProgressInput
        | ListCharityMilestonesInput
    ),
    *,
    store: MilestoneStorePort,
    policy: PolicyEngine,
    config: MilestoneConfig | None = None,
) -> MilestoneOutput | MilestoneListOutput:
    if isinstance(inp, AddMilestoneInput):
        return run_add(inp, store=store, policy=policy, config=config)
    elif isinstance(inp, GetMilestoneInput):
        return run_get(inp, store=store)
    elif isinstance(inp, UpdateProgressInput):
        return run_update_progress(inp, store=store, policy=policy)
    elif isinstance(inp, ListCharityMilestonesInput):
        return run_list_for_charity(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
