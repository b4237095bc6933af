from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from src.domain.entities import Address, Charity
from src.domain.errors import LedgerError, forbidden

logger = logging.getLogger(__name__)


class Role(str, Enum):
    ADMIN = "admin"
    CHARITY_WALLET = "charity_wallet"


@dataclass(frozen=True)
class AuthContext:
    """What the guard may look at when deciding."""

    owner: Address | None = None
    charity: Charity | None = None


def authorize(caller: Address | None, required_role: Role, context: AuthContext) -> bool:
    """
    Decide whether the caller holds the required role.

    - ADMIN: caller is the owner recorded at initialization.
    - CHARITY_WALLET: caller is the wallet of the charity in context.

    An anonymous caller, a missing owner, or a missing charity always denies.
    """
    if not caller:
        return False

    if required_role == Role.ADMIN:
        return context.owner is not None and caller == context.owner

    if required_role == Role.CHARITY_WALLET:
        return context.charity is not None and caller == context.charity.wallet

    return False


class OwnerSource(Protocol):
    def get_owner(self) -> Address | None: ...


class PolicyEngine:
    def __init__(self, owners: OwnerSource):
        self.owners = owners

    def require_admin(self, caller: Address | None) -> LedgerError | None:
        if self.is_admin(caller):
            return None
        logger.info("Denied admin action for caller=%s", caller)
        return forbidden("Caller is not the contract owner")

    def require_charity_wallet(
        self, caller: Address | None, charity: Charity
    ) -> LedgerError | None:
        if authorize(caller, Role.CHARITY_WALLET, AuthContext(charity=charity)):
            return None
        logger.info("Denied wallet action on charity %s for caller=%s", charity.id, caller)
        return forbidden("Caller is not the charity wallet")

    def is_admin(self, caller: Address | None) -> bool:
        return authorize(caller, Role.ADMIN, AuthContext(owner=self.owners.get_owner()))
