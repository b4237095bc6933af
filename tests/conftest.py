from pathlib import Path

import pytest

from src.rules.models import ContractRules, ProjectRules, Rules
from src.services.ledger import LedgerService

ADMIN_ADDRESS = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
CHARITY_ADDRESS = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
DONOR_ADDRESS = "ST2NEB84ASENDXKYGJPQW86YXQCEFEX2ZQPG87ND"

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    return Rules(
        project=ProjectRules(slug="charity-ledger-test", rules_version="test"),
        contract=ContractRules(allow_reinitialize=True),
    )


@pytest.fixture
def ledger(rules: Rules) -> LedgerService:
    """
    A fresh ledger initialized by the admin address.
    """
    service = LedgerService(rules=rules)
    out = service.initialize_contract(ADMIN_ADDRESS)
    assert out.success
    return service


@pytest.fixture
def charity_id(ledger: LedgerService) -> int:
    """Register "Test Charity" and return its ID."""
    out = ledger.register_charity(ADMIN_ADDRESS, "Test Charity", CHARITY_ADDRESS)
    assert out.charity is not None
    return out.charity.id
