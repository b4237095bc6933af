"""
Registry component unit tests.

Tests for charity registration, lookup, deactivation and reactivation.
"""

from __future__ import annotations

import pytest

from src.adapters.memory_state import ContractState
from src.components.registry import (
    DeactivateCharityInput,
    GetCharityInput,
    ListCharitiesInput,
    ReactivateCharityInput,
    RegisterCharityInput,
    RegistryConfig,
    run,
    run_deactivate,
    run_get,
    run_list,
    run_reactivate,
    run_register,
)
from src.domain.errors import ErrorCode
from src.domain.policy import PolicyEngine

ADMIN = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
CHARITY_WALLET = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
DONOR = "ST2NEB84ASENDXKYGJPQW86YXQCEFEX2ZQPG87ND"


# --- Fixtures ---


@pytest.fixture
def state() -> ContractState:
    state = ContractState()
    state.initialize(ADMIN)
    return state


@pytest.fixture
def policy(state: ContractState) -> PolicyEngine:
    return PolicyEngine(state)


def _register(state: ContractState, policy: PolicyEngine, name: str = "Test Charity"):
    return run_register(
        RegisterCharityInput(caller=ADMIN, name=name, wallet=CHARITY_WALLET),
        store=state,
        policy=policy,
    )


# --- Registration ---


class TestRegister:
    def test_register_defaults(self, state: ContractState, policy: PolicyEngine) -> None:
        out = _register(state, policy)

        assert out.success is True
        assert out.charity is not None
        assert out.charity.id == 1
        assert out.charity.name == "Test Charity"
        assert out.charity.wallet == CHARITY_WALLET
        assert out.charity.active is True
        assert out.charity.total_received == 0
        assert out.charity.reputation_score == 100

    def test_ids_are_sequential(self, state: ContractState, policy: PolicyEngine) -> None:
        ids = [_register(state, policy, f"Charity {i}").charity.id for i in range(3)]
        assert ids == [1, 2, 3]

    def test_non_admin_forbidden(self, state: ContractState, policy: PolicyEngine) -> None:
        out = run_register(
            RegisterCharityInput(caller=DONOR, name="Test Charity", wallet=CHARITY_WALLET),
            store=state,
            policy=policy,
        )

        assert out.success is False
        assert out.error is not None
        assert out.error.code == ErrorCode.FORBIDDEN
        assert out.error.status == 403
        assert state.list_charities() == []
        # Counter untouched
        assert state.peek_charity_id() == 1

    def test_uninitialized_contract_forbidden(self) -> None:
        state = ContractState()
        out = run_register(
            RegisterCharityInput(caller=ADMIN, name="X", wallet=CHARITY_WALLET),
            store=state,
            policy=PolicyEngine(state),
        )
        assert out.error is not None
        assert out.error.code == ErrorCode.FORBIDDEN

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(
        self, state: ContractState, policy: PolicyEngine, name: str
    ) -> None:
        out = _register(state, policy, name)

        assert out.success is False
        assert out.error is not None
        assert out.error.code == ErrorCode.INVALID_INPUT
        assert out.error.field == "name"
        assert state.peek_charity_id() == 1

    def test_empty_wallet_rejected(self, state: ContractState, policy: PolicyEngine) -> None:
        out = run_register(
            RegisterCharityInput(caller=ADMIN, name="Test Charity", wallet=""),
            store=state,
            policy=policy,
        )
        assert out.error is not None
        assert out.error.code == ErrorCode.INVALID_INPUT
        assert out.error.field == "wallet"

    def test_name_too_long(self, state: ContractState, policy: PolicyEngine) -> None:
        out = run_register(
            RegisterCharityInput(caller=ADMIN, name="x" * 11, wallet=CHARITY_WALLET),
            store=state,
            policy=policy,
            config=RegistryConfig(name_max_length=10),
        )
        assert out.error is not None
        assert out.error.code == ErrorCode.INVALID_INPUT

    def test_configured_reputation(self, state: ContractState, policy: PolicyEngine) -> None:
        out = run_register(
            RegisterCharityInput(caller=ADMIN, name="Test Charity", wallet=CHARITY_WALLET),
            store=state,
            policy=policy,
            config=RegistryConfig(initial_reputation_score=50),
        )
        assert out.charity is not None
        assert out.charity.reputation_score == 50


# --- Lookup ---


class TestGet:
    def test_get_existing(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy)
        out = run_get(GetCharityInput(charity_id=1), store=state)

        assert out.success is True
        assert out.charity is not None
        assert out.charity.name == "Test Charity"

    def test_get_missing(self, state: ContractState) -> None:
        out = run_get(GetCharityInput(charity_id=999), store=state)

        assert out.success is False
        assert out.error is not None
        assert out.error.code == ErrorCode.NOT_FOUND

    def test_returned_record_is_a_copy(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy)
        charity = run_get(GetCharityInput(charity_id=1), store=state).charity
        assert charity is not None
        charity.total_received = 10_000

        again = run_get(GetCharityInput(charity_id=1), store=state).charity
        assert again is not None
        assert again.total_received == 0

    def test_list(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy, "A")
        _register(state, policy, "B")
        out = run_list(ListCharitiesInput(), store=state)

        assert [c.name for c in out.charities] == ["A", "B"]


# --- Activation ---


class TestActivation:
    def test_deactivate(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy)
        out = run_deactivate(
            DeactivateCharityInput(caller=ADMIN, charity_id=1), store=state, policy=policy
        )

        assert out.success is True
        stored = state.get_charity(1)
        assert stored is not None
        assert stored.active is False

    def test_deactivate_missing(self, state: ContractState, policy: PolicyEngine) -> None:
        out = run_deactivate(
            DeactivateCharityInput(caller=ADMIN, charity_id=42), store=state, policy=policy
        )
        assert out.error is not None
        assert out.error.code == ErrorCode.NOT_FOUND

    def test_deactivate_non_admin(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy)
        out = run_deactivate(
            DeactivateCharityInput(caller=CHARITY_WALLET, charity_id=1),
            store=state,
            policy=policy,
        )

        assert out.error is not None
        assert out.error.code == ErrorCode.FORBIDDEN
        stored = state.get_charity(1)
        assert stored is not None
        assert stored.active is True

    def test_reactivate(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy)
        run_deactivate(
            DeactivateCharityInput(caller=ADMIN, charity_id=1), store=state, policy=policy
        )
        out = run_reactivate(
            ReactivateCharityInput(caller=ADMIN, charity_id=1), store=state, policy=policy
        )

        assert out.success is True
        assert out.charity is not None
        assert out.charity.active is True

    def test_reactivate_non_admin(self, state: ContractState, policy: PolicyEngine) -> None:
        _register(state, policy)
        out = run_reactivate(
            ReactivateCharityInput(caller=DONOR, charity_id=1), store=state, policy=policy
        )
        assert out.error is not None
        assert out.error.code == ErrorCode.FORBIDDEN


class TestDispatch:
    def test_run_dispatches_each_input(
        self, state: ContractState, policy: PolicyEngine
    ) -> None:
        assert run(
            RegisterCharityInput(caller=ADMIN, name="A", wallet=CHARITY_WALLET),
            store=state,
            policy=policy,
        ).success
        assert run(GetCharityInput(charity_id=1), store=state, policy=policy).success
        assert run(
            DeactivateCharityInput(caller=ADMIN, charity_id=1), store=state, policy=policy
        ).success
        assert run(
            ReactivateCharityInput(caller=ADMIN, charity_id=1), store=state, policy=policy
        ).success
        assert run(ListCharitiesInput(), store=state, policy=policy).success

    def test_run_unknown_input(self, state: ContractState, policy: PolicyEngine) -> None:
        with pytest.raises(ValueError):
            run(object(), store=state, policy=policy)  # type: ignore[arg-type]
