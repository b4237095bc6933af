"""
Contract component - ledger lifecycle and process-wide state.

Owns the owner identity and the initialize lifecycle, and reports
aggregate statistics across the three record stores.

Invariants:
- First initialization records the caller as owner
- Re-initialization only by the owner, and only when allowed by config
- Initialization wipes every store and restarts every id counter at 1
"""

from __future__ import annotations

from src.domain.entities import LedgerStats
from src.domain.errors import forbidden, invalid_input

from .models import (
    ContractConfig,
    ContractOutput,
    GetOwnerInput,
    GetStatsInput,
    InitializeContractInput,
    StatsOutput,
)
from .ports import ContractStatePort


def run_initialize(
    inp: InitializeContractInput,
    *,
    state: ContractStatePort,
    config: ContractConfig | None = None,
) -> ContractOutput:
    """
    Initialize the contract with the caller as owner.

    Args:
        inp: Input carrying the caller identity.
        state: Contract state port.
        config: Lifecycle configuration.

    Returns:
        ContractOutput with the new owner or a Forbidden error.
    """
    config = config or ContractConfig()

    if not inp.caller:
        return ContractOutput(
            error=invalid_input("caller", "Caller identity is required"),
            success=False,
        )

    if state.is_initialized():
        if not config.allow_reinitialize:
            return ContractOutput(
                error=forbidden("Contract is already initialized"),
                success=False,
            )
        if inp.caller != state.get_owner():
            return ContractOutput(
                error=forbidden("Only the owner may re-initialize the contract"),
                success=False,
            )

    state.initialize(inp.caller)
    return ContractOutput(owner=inp.caller, success=True)


def run_get_owner(inp: GetOwnerInput, *, state: ContractStatePort) -> ContractOutput:
    return ContractOutput(owner=state.get_owner(), success=True)


def run_get_stats(inp: GetStatsInput, *, state: ContractStatePort) -> StatsOutput:
    charities = state.list_charities()
    donations = state.list_donations()
    milestones = state.list_milestones()

    stats = LedgerStats(
        charity_count=len(charities),
        active_charity_count=sum(1 for c in charities if c.active),
        donation_count=len(donations),
        milestone_count=len(milestones),
        completed_milestone_count=sum(1 for m in milestones if m.completed),
        total_donated=sum(d.amount for d in donations),
    )
    return StatsOutput(stats=stats)


def run(
    inp: InitializeContractInput | GetOwnerInput | GetStatsInput,
    *,
    state: ContractStatePort,
    config: ContractConfig | None = None,
) -> ContractOutput | StatsOutput:
    if isinstance(inp, InitializeContractInput):
        return run_initialize(inp, state=state, config=config)
    elif isinstance(inp, GetOwnerInput):
        return run_get_owner(inp, state=state)
    elif isinstance(inp, GetStatsInput):
        return run_get_stats(inp, state=state)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
