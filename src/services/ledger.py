"""
LedgerService - the single entry point for every ledger call.

Each call runs inside one state transaction: the state lock serializes it
against every other call, and any failure restores the stores exactly as
they were. Successful mutations are journaled and logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from src.adapters.memory_state import ContractState
from src.components import contract, donations, milestones, registry
from src.core.services.audit import (
    AuditAction,
    AuditService,
    EntityType,
    create_audit_service,
)
from src.domain.entities import Address
from src.domain.errors import LedgerError
from src.domain.policy import PolicyEngine
from src.rules.models import Rules, default_rules

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")


class LedgerService:
    def __init__(
        self,
        state: ContractState | None = None,
        rules: Rules | None = None,
        audit: AuditService | None = None,
    ):
        self.state = state or ContractState()
        self.rules = rules or default_rules()
        self.audit = audit or create_audit_service()
        self.policy = PolicyEngine(self.state)

        self._contract_config = contract.ContractConfig(
            allow_reinitialize=self.rules.contract.allow_reinitialize,
        )
        self._registry_config = registry.RegistryConfig(
            name_max_length=self.rules.charity.name_max_length,
            initial_reputation_score=self.rules.charity.initial_reputation_score,
        )
        self._milestone_config = milestones.MilestoneConfig(
            description_max_length=self.rules.milestone.description_max_length,
        )

    def _execute(self, op: str, fn: Callable[[], OutputT]) -> OutputT:
        """Run one call under the state transaction, rolling back on failure."""
        with self.state.transaction() as tx:
            out = fn()
            error: LedgerError | None = getattr(out, "error", None)
            if not getattr(out, "success", True):
                tx.mark_failed()
                logger.info(
                    "%s rejected: %s (%s)",
                    op,
                    error.code.value if error else "unknown",
                    error.message if error else "",
                )
            return out

    # --- Contract ---

    def initialize_contract(self, caller: Address | None) -> contract.ContractOutput:
        def _run() -> contract.ContractOutput:
            out = contract.run_initialize(
                contract.InitializeContractInput(caller=caller),
                state=self.state,
                config=self._contract_config,
            )
            if out.success:
                # The journal restarts with the new contract
                self.audit.restart(
                    AuditAction.INITIALIZE, EntityType.CONTRACT, actor=caller
                )
                logger.info("Contract initialized, owner=%s", caller)
            return out

        return self._execute("initialize-contract", _run)

    def reset(self) -> None:
        """Wipe the contract and the journal. Not exposed over the API."""
        with self.state.transaction():
            self.state.reset()
            self.audit.clear()
        logger.warning("Contract state reset")

    def get_contract_owner(self) -> Address | None:
        out = contract.run_get_owner(contract.GetOwnerInput(), state=self.state)
        return out.owner

    def get_stats(self) -> contract.StatsOutput:
        return self._execute(
            "get-ledger-stats",
            lambda: contract.run_get_stats(contract.GetStatsInput(), state=self.state),
        )

    # --- Charities ---

    def register_charity(
        self, caller: Address | None, name: str, wallet: Address
    ) -> registry.CharityOutput:
        def _run() -> registry.CharityOutput:
            out = registry.run_register(
                registry.RegisterCharityInput(caller=caller, name=name, wallet=wallet),
                store=self.state,
                policy=self.policy,
                config=self._registry_config,
            )
            if out.success and out.charity:
                self.audit.log(
                    AuditAction.REGISTER,
                    EntityType.CHARITY,
                    entity_id=str(out.charity.id),
                    actor=caller,
                    metadata={"name": out.charity.name, "wallet": out.charity.wallet},
                )
                logger.info("Registered charity %s (%s)", out.charity.id, out.charity.name)
            return out

        return self._execute("register-charity", _run)

    def get_charity_details(self, charity_id: int) -> registry.CharityOutput:
        return self._execute(
            "get-charity-details",
            lambda: registry.run_get(
                registry.GetCharityInput(charity_id=charity_id), store=self.state
            ),
        )

    def list_charities(self) -> registry.CharityListOutput:
        return self._execute(
            "list-charities",
            lambda: registry.run_list(registry.ListCharitiesInput(), store=self.state),
        )

    def deactivate_charity(
        self, caller: Address | None, charity_id: int
    ) -> registry.CharityOutput:
        def _run() -> registry.CharityOutput:
            out = registry.run_deactivate(
                registry.DeactivateCharityInput(caller=caller, charity_id=charity_id),
                store=self.state,
                policy=self.policy,
            )
            if out.success:
                self.audit.log(
                    AuditAction.DEACTIVATE,
                    EntityType.CHARITY,
                    entity_id=str(charity_id),
                    actor=caller,
                )
                logger.info("Deactivated charity %s", charity_id)
            return out

        return self._execute("deactivate-charity", _run)

    def reactivate_charity(
        self, caller: Address | None, charity_id: int
    ) -> registry.CharityOutput:
        def _run() -> registry.CharityOutput:
            out = registry.run_reactivate(
                registry.ReactivateCharityInput(caller=caller, charity_id=charity_id),
                store=self.state,
                policy=self.policy,
            )
            if out.success:
                self.audit.log(
                    AuditAction.REACTIVATE,
                    EntityType.CHARITY,
                    entity_id=str(charity_id),
                    actor=caller,
                )
                logger.info("Reactivated charity %s", charity_id)
            return out

        return self._execute("reactivate-charity", _run)

    # --- Donations ---

    def donate(
        self, caller: Address | None, charity_id: int, amount: int
    ) -> donations.DonationOutput:
        def _run() -> donations.DonationOutput:
            out = donations.run_donate(
                donations.DonateInput(caller=caller, charity_id=charity_id, amount=amount),
                store=self.state,
            )
            if out.success and out.donation:
                self.audit.log(
                    AuditAction.DONATE,
                    EntityType.DONATION,
                    entity_id=str(out.donation.id),
                    actor=caller,
                    metadata={"charity_id": charity_id, "amount": amount},
                )
                logger.info(
                    "Donation %s: %s to charity %s",
                    out.donation.id,
                    amount,
                    charity_id,
                )
            return out

        return self._execute("donate", _run)

    def get_donation_details(self, donation_id: int) -> donations.DonationOutput:
        return self._execute(
            "get-donation-details",
            lambda: donations.run_get(
                donations.GetDonationInput(donation_id=donation_id), store=self.state
            ),
        )

    def list_charity_donations(self, charity_id: int) -> donations.DonationListOutput:
        return self._execute(
            "list-charity-donations",
            lambda: donations.run_list_for_charity(
                donations.ListCharityDonationsInput(charity_id=charity_id),
                store=self.state,
            ),
        )

    # --- Milestones ---

    def add_milestone(
        self,
        caller: Address | None,
        charity_id: int,
        description: str,
        target_amount: int,
    ) -> milestones.MilestoneOutput:
        def _run() -> milestones.MilestoneOutput:
            out = milestones.run_add(
                milestones.AddMilestoneInput(
                    caller=caller,
                    charity_id=charity_id,
                    description=description,
                    target_amount=target_amount,
                ),
                store=self.state,
                policy=self.policy,
                config=self._milestone_config,
            )
            if out.success and out.milestone:
                self.audit.log(
                    AuditAction.ADD_MILESTONE,
                    EntityType.MILESTONE,
                    entity_id=str(out.milestone.id),
                    actor=caller,
                    metadata={"charity_id": charity_id, "target_amount": target_amount},
                )
                logger.info(
                    "Milestone %s added to charity %s", out.milestone.id, charity_id
                )
            return out

        return self._execute("add-milestone", _run)

    def get_milestone_details(self, milestone_id: int) -> milestones.MilestoneOutput:
        return self._execute(
            "get-milestone-details",
            lambda: milestones.run_get(
                milestones.GetMilestoneInput(milestone_id=milestone_id), store=self.state
            ),
        )

    def list_charity_milestones(self, charity_id: int) -> milestones.MilestoneListOutput:
        return self._execute(
            "list-charity-milestones",
            lambda: milestones.run_list_for_charity(
                milestones.ListCharityMilestonesInput(charity_id=charity_id),
                store=self.state,
            ),
        )

    def update_milestone_progress(
        self, caller: Address | None, milestone_id: int, new_current_amount: int
    ) -> milestones.MilestoneOutput:
        def _run() -> milestones.MilestoneOutput:
            out = milestones.run_update_progress(
                milestones.UpdateProgressInput(
                    caller=caller,
                    milestone_id=milestone_id,
                    new_current_amount=new_current_amount,
                ),
                store=self.state,
                policy=self.policy,
            )
            if out.success and out.milestone:
                self.audit.log(
                    AuditAction.UPDATE_PROGRESS,
                    EntityType.MILESTONE,
                    entity_id=str(milestone_id),
                    actor=caller,
                    metadata={
                        "current_amount": out.milestone.current_amount,
                        "completed": out.milestone.completed,
                    },
                )
                logger.info(
                    "Milestone %s progress %s/%s",
                    milestone_id,
                    out.milestone.current_amount,
                    out.milestone.target_amount,
                )
            return out

        return self._execute("update-milestone-progress", _run)


def create_ledger_service(rules: Rules | None = None) -> LedgerService:
    """
    Build a LedgerService, initializing the contract when the rules name a
    bootstrap owner.
    """
    service = LedgerService(rules=rules)
    owner = service.rules.contract.bootstrap_owner
    if owner:
        out = service.initialize_contract(owner)
        if not out.success:
            raise RuntimeError(f"Bootstrap initialization failed: {out.error}")
    return service
