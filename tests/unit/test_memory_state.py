import pytest

from src.adapters.memory_state import ContractState
from src.domain.entities import Charity, Donation

ADMIN = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def state():
    state = ContractState()
    state.initialize(ADMIN)
    return state


def test_uninitialized():
    state = ContractState()
    assert state.is_initialized() is False
    assert state.get_owner() is None


def test_counters_are_independent(state):
    assert state.allocate_charity_id() == 1
    assert state.allocate_charity_id() == 2
    assert state.allocate_donation_id() == 1
    assert state.allocate_milestone_id() == 1


def test_records_are_copied_on_save(state):
    charity = Charity(id=state.allocate_charity_id(), name="A", wallet="W")
    state.save_charity(charity)
    charity.total_received = 999

    stored = state.get_charity(1)
    assert stored.total_received == 0


def test_transaction_rolls_back_on_failure_mark(state):
    with state.transaction() as tx:
        state.save_charity(Charity(id=state.allocate_charity_id(), name="A", wallet="W"))
        tx.mark_failed()

    assert state.list_charities() == []
    assert state.peek_charity_id() == 1


def test_transaction_rolls_back_on_exception(state):
    state.save_charity(Charity(id=state.allocate_charity_id(), name="A", wallet="W"))

    with pytest.raises(RuntimeError):
        with state.transaction():
            state.save_donation(
                Donation(id=state.allocate_donation_id(), charity_id=1, donor="D", amount=5)
            )
            raise RuntimeError("boom")

    assert state.list_donations() == []
    assert state.allocate_donation_id() == 1
    assert len(state.list_charities()) == 1


def test_transaction_commits(state):
    with state.transaction():
        state.save_charity(Charity(id=state.allocate_charity_id(), name="A", wallet="W"))

    assert [c.name for c in state.list_charities()] == ["A"]


def test_transactions_nest(state):
    with state.transaction():
        with state.transaction() as inner:
            state.save_charity(Charity(id=state.allocate_charity_id(), name="A", wallet="W"))
            inner.mark_failed()
        state.save_charity(Charity(id=state.allocate_charity_id(), name="B", wallet="W"))

    # Inner rollback returned the counter, so B reuses id 1
    assert [c.name for c in state.list_charities()] == ["B"]
    assert state.get_charity(1).name == "B"
    assert state.peek_charity_id() == 2


def test_initialize_clears(state):
    state.save_charity(Charity(id=state.allocate_charity_id(), name="A", wallet="W"))
    state.initialize("NEW-OWNER")

    assert state.get_owner() == "NEW-OWNER"
    assert state.list_charities() == []
    assert state.allocate_charity_id() == 1


def test_reset_clears_owner(state):
    state.reset()
    assert state.is_initialized() is False
