"""
Contract component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Address, LedgerStats
from src.domain.errors import LedgerError


@dataclass(frozen=True)
class ContractConfig:
    """Contract lifecycle configuration from rules."""

    allow_reinitialize: bool = False


# --- Input Models ---


@dataclass(frozen=True)
class InitializeContractInput:
    """Input for initializing (or re-initializing) the contract."""

    caller: Address | None


@dataclass(frozen=True)
class GetOwnerInput:
    """Input for reading the contract owner."""

    pass


@dataclass(frozen=True)
class GetStatsInput:
    """Input for reading ledger statistics."""

    pass


# --- Output Models ---


@dataclass(frozen=True)
class ContractOutput:
    """Output for lifecycle operations."""

    owner: Address | None = None
    error: LedgerError | None = None
    success: bool = True


@dataclass(frozen=True)
class StatsOutput:
    """Output containing ledger statistics."""

    stats: LedgerStats
    success: bool = True
