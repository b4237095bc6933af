import pytest

from src.adapters.memory_state import ContractState
from src.domain.entities import Charity
from src.domain.errors import ErrorCode
from src.domain.policy import AuthContext, PolicyEngine, Role, authorize

ADMIN = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
WALLET = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
DONOR = "ST2NEB84ASENDXKYGJPQW86YXQCEFEX2ZQPG87ND"


@pytest.fixture
def charity() -> Charity:
    return Charity(id=1, name="Test Charity", wallet=WALLET)


def test_admin_role_matches_owner():
    assert authorize(ADMIN, Role.ADMIN, AuthContext(owner=ADMIN)) is True


def test_admin_role_denies_others():
    assert authorize(DONOR, Role.ADMIN, AuthContext(owner=ADMIN)) is False


def test_admin_role_denies_without_owner():
    assert authorize(ADMIN, Role.ADMIN, AuthContext(owner=None)) is False


def test_wallet_role_matches_charity_wallet(charity):
    assert authorize(WALLET, Role.CHARITY_WALLET, AuthContext(charity=charity)) is True


def test_wallet_role_denies_admin(charity):
    # Owner has no implicit wallet rights
    ctx = AuthContext(owner=ADMIN, charity=charity)
    assert authorize(ADMIN, Role.CHARITY_WALLET, ctx) is False


def test_wallet_role_denies_without_charity():
    assert authorize(WALLET, Role.CHARITY_WALLET, AuthContext()) is False


@pytest.mark.parametrize("caller", [None, ""])
def test_anonymous_caller_denied(caller, charity):
    ctx = AuthContext(owner=ADMIN, charity=charity)
    assert authorize(caller, Role.ADMIN, ctx) is False
    assert authorize(caller, Role.CHARITY_WALLET, ctx) is False


def test_unknown_role_denied():
    assert authorize(ADMIN, "superuser", AuthContext(owner=ADMIN)) is False  # type: ignore[arg-type]


def test_engine_reads_current_owner():
    state = ContractState()
    engine = PolicyEngine(state)

    assert engine.is_admin(ADMIN) is False
    state.initialize(ADMIN)
    assert engine.is_admin(ADMIN) is True
    assert engine.require_admin(ADMIN) is None


def test_engine_require_admin_returns_forbidden():
    state = ContractState()
    state.initialize(ADMIN)
    error = PolicyEngine(state).require_admin(DONOR)

    assert error is not None
    assert error.code == ErrorCode.FORBIDDEN
    assert error.status == 403


def test_engine_require_charity_wallet(charity):
    engine = PolicyEngine(ContractState())

    assert engine.require_charity_wallet(WALLET, charity) is None
    error = engine.require_charity_wallet(DONOR, charity)
    assert error is not None
    assert error.code == ErrorCode.FORBIDDEN


@pytest.mark.parametrize("caller", [ADMIN, DONOR, WALLET, None, ""])
def test_require_admin_agrees_with_is_admin(caller):
    state = ContractState()
    state.initialize(ADMIN)
    engine = PolicyEngine(state)

    assert (engine.require_admin(caller) is None) is engine.is_admin(caller)
