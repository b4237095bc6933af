"""
In-memory contract state.

Holds the owner identity, the three id counters, and the charity, donation
and milestone stores for one ledger instance.

Invariants:
- Ids are handed out densely from 1 and never reused until reset.
- Records are copied on the way in and on the way out, so callers can never
  mutate a stored record in place.
- All access happens under one re-entrant lock; transaction() restores the
  pre-call snapshot when the call fails.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock

from src.domain.entities import Address, Charity, Donation, Milestone

logger = logging.getLogger(__name__)


@dataclass
class _Snapshot:
    owner: Address | None
    charities: dict[int, Charity]
    donations: dict[int, Donation]
    milestones: dict[int, Milestone]
    next_charity_id: int
    next_donation_id: int
    next_milestone_id: int


class Transaction:
    """Handle given to the body of ContractState.transaction()."""

    def __init__(self) -> None:
        self.failed = False

    def mark_failed(self) -> None:
        self.failed = True


class ContractState:
    def __init__(self) -> None:
        self._lock = RLock()
        self._clear()

    def _clear(self) -> None:
        self._owner: Address | None = None
        self._charities: dict[int, Charity] = {}
        self._donations: dict[int, Donation] = {}
        self._milestones: dict[int, Milestone] = {}
        self._next_charity_id = 1
        self._next_donation_id = 1
        self._next_milestone_id = 1

    # --- Lifecycle ---

    def initialize(self, owner: Address) -> None:
        """Clear every store and counter and record a new owner."""
        with self._lock:
            self._clear()
            self._owner = owner

    def reset(self) -> None:
        """Wipe all state including the owner. Test and dev use only."""
        with self._lock:
            self._clear()

    def is_initialized(self) -> bool:
        return self._owner is not None

    def get_owner(self) -> Address | None:
        return self._owner

    # --- Transactions ---

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(
            owner=self._owner,
            charities=dict(self._charities),
            donations=dict(self._donations),
            milestones=dict(self._milestones),
            next_charity_id=self._next_charity_id,
            next_donation_id=self._next_donation_id,
            next_milestone_id=self._next_milestone_id,
        )

    def _restore(self, snap: _Snapshot) -> None:
        self._owner = snap.owner
        self._charities = snap.charities
        self._donations = snap.donations
        self._milestones = snap.milestones
        self._next_charity_id = snap.next_charity_id
        self._next_donation_id = snap.next_donation_id
        self._next_milestone_id = snap.next_milestone_id

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """
        Serialize one ledger call and make it all-or-nothing.

        The snapshot is restored if the body raises or marks the
        transaction failed.
        """
        with self._lock:
            snap = self._snapshot()
            tx = Transaction()
            try:
                yield tx
            except Exception:
                logger.warning("Rolling back ledger state after exception")
                self._restore(snap)
                raise
            if tx.failed:
                self._restore(snap)

    # --- Charities ---

    def get_charity(self, charity_id: int) -> Charity | None:
        charity = self._charities.get(charity_id)
        return charity.model_copy() if charity else None

    def save_charity(self, charity: Charity) -> Charity:
        self._charities[charity.id] = charity.model_copy()
        return charity

    def allocate_charity_id(self) -> int:
        charity_id = self._next_charity_id
        self._next_charity_id += 1
        return charity_id

    def peek_charity_id(self) -> int:
        return self._next_charity_id

    def list_charities(self) -> list[Charity]:
        return [self._charities[k].model_copy() for k in sorted(self._charities)]

    # --- Donations ---

    def get_donation(self, donation_id: int) -> Donation | None:
        donation = self._donations.get(donation_id)
        return donation.model_copy() if donation else None

    def save_donation(self, donation: Donation) -> Donation:
        self._donations[donation.id] = donation.model_copy()
        return donation

    def allocate_donation_id(self) -> int:
        donation_id = self._next_donation_id
        self._next_donation_id += 1
        return donation_id

    def list_donations(self) -> list[Donation]:
        return [self._donations[k].model_copy() for k in sorted(self._donations)]

    def list_donations_by_charity(self, charity_id: int) -> list[Donation]:
        return [d for d in self.list_donations() if d.charity_id == charity_id]

    # --- Milestones ---

    def get_milestone(self, milestone_id: int) -> Milestone | None:
        milestone = self._milestones.get(milestone_id)
        return milestone.model_copy() if milestone else None

    def save_milestone(self, milestone: Milestone) -> Milestone:
        self._milestones[milestone.id] = milestone.model_copy()
        return milestone

    def allocate_milestone_id(self) -> int:
        milestone_id = self._next_milestone_id
        self._next_milestone_id += 1
        return milestone_id

    def list_milestones(self) -> list[Milestone]:
        return [self._milestones[k].model_copy() for k in sorted(self._milestones)]

    def list_milestones_by_charity(self, charity_id: int) -> list[Milestone]:
        return [m for m in self.list_milestones() if m.charity_id == charity_id]
