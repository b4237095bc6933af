"""
Registry component - charity registration and activation.

Invariants:
- Charity IDs are assigned sequentially from 1 and never reused
- New charities are active, with nothing received and the configured
  reputation score
- Only the contract owner registers, deactivates or reactivates charities
- Charities are never deleted
"""

from __future__ import annotations

from src.domain.entities import Charity
from src.domain.errors import invalid_input, not_found
from src.domain.policy import PolicyEngine

from .models import (
    CharityListOutput,
    CharityOutput,
    DeactivateCharityInput,
    GetCharityInput,
    ListCharitiesInput,
    ReactivateCharityInput,
    RegisterCharityInput,
    RegistryConfig,
)
from .ports import CharityStorePort


def run_register(
    inp: RegisterCharityInput,
    *,
    store: CharityStorePort,
    policy: PolicyEngine,
    config: RegistryConfig | None = None,
) -> CharityOutput:
    """
    Register a new charity (admin only).

    Args:
        inp: Name and wallet of the charity, plus the caller.
        store: Charity store port.
        policy: Authorization guard.
        config: Registration limits.

    Returns:
        CharityOutput with the stored charity or the failure.
    """
    config = config or RegistryConfig()

    denied = policy.require_admin(inp.caller)
    if denied:
        return CharityOutput(error=denied, success=False)

    name = inp.name
    if not name.strip():
        return CharityOutput(error=invalid_input("name", "Name is required"), success=False)
    if len(name) > config.name_max_length:
        return CharityOutput(
            error=invalid_input(
                "name", f"Name exceeds {config.name_max_length} characters"
            ),
            success=False,
        )
    if not inp.wallet:
        return CharityOutput(
            error=invalid_input("wallet", "Wallet is required"), success=False
        )

    charity = Charity(
        id=store.allocate_charity_id(),
        name=name,
        wallet=inp.wallet,
        active=True,
        total_received=0,
        reputation_score=config.initial_reputation_score,
    )
    store.save_charity(charity)
    return CharityOutput(charity=charity, success=True)


def run_get(inp: GetCharityInput, *, store: CharityStorePort) -> CharityOutput:
    charity = store.get_charity(inp.charity_id)
    if charity is None:
        return CharityOutput(error=not_found("Charity", inp.charity_id), success=False)
    return CharityOutput(charity=charity, success=True)


def _set_active(
    caller: str | None,
    charity_id: int,
    active: bool,
    store: CharityStorePort,
    policy: PolicyEngine,
) -> CharityOutput:
    denied = policy.require_admin(caller)
    if denied:
        return CharityOutput(error=denied, success=False)

    charity = store.get_charity(charity_id)
    if charity is None:
        return CharityOutput(error=not_found("Charity", charity_id), success=False)

    updated = charity.model_copy(update={"active": active})
    store.save_charity(updated)
    return CharityOutput(charity=updated, success=True)


def run_deactivate(
    inp: DeactivateCharityInput,
    *,
    store: CharityStorePort,
    policy: PolicyEngine,
) -> CharityOutput:
    """Mark a charity inactive so it stops accepting donations."""
    return _set_active(inp.caller, inp.charity_id, False, store, policy)


def run_reactivate(
    inp: ReactivateCharityInput,
    *,
    store: CharityStorePort,
    policy: PolicyEngine,
) -> CharityOutput:
    """Mark a previously deactivated charity active again."""
    return _set_active(inp.caller, inp.charity_id, True, store, policy)


def run_list(inp: ListCharitiesInput, *, store: CharityStorePort) -> CharityListOutput:
    return CharityListOutput(charities=tuple(store.list_charities()))


def run(
    inp: (
        RegisterCharityInput
        | GetCharityInput
        | DeactivateCharityInput
        | ReactivateCharityInput
        | ListCharitiesInput
    ),
    *,
    store: CharityStorePort,
    policy: PolicyEngine,
    config: RegistryConfig | None = None,
) -> CharityOutput | CharityListOutput:
    """
    Main entry point for the registry component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, RegisterCharityInput):
        return run_register(inp, store=store, policy=policy, config=config)
    elif isinstance(inp, GetCharityInput):
        return run_get(inp, store=store)
    elif isinstance(inp, DeactivateCharityInput):
        return run_deactivate(inp, store=store, policy=policy)
    elif isinstance(inp, ReactivateCharityInput):
        return run_reactivate(inp, store=store, policy=policy)
    elif isinstance(inp, ListCharitiesInput):
        return run_list(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
