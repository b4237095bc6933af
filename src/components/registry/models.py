"""
Registry component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Address, Charity
from src.domain.errors import LedgerError


@dataclass(frozen=True)
class RegistryConfig:
    """Charity registration limits from rules."""

    name_max_length: int = 100
    initial_reputation_score: int = 100


# --- Input Models ---


@dataclass(frozen=True)
class RegisterCharityInput:
    caller: Address | None
    name: str
    wallet: Address


@dataclass(frozen=True)
class GetCharityInput:
    charity_id: int


@dataclass(frozen=True)
class DeactivateCharityInput:
    caller: Address | None
    charity_id: int


@dataclass(frozen=True)
class ReactivateCharityInput:
    caller: Address | None
    charity_id: int


@dataclass(frozen=True)
class ListCharitiesInput:
    pass


# --- Output Models ---


@dataclass(frozen=True)
class CharityOutput:
    """Output for single-charity operations."""

    charity: Charity | None = None
    error: LedgerError | None = None
    success: bool = True


@dataclass(frozen=True)
class CharityListOutput:
    charities: tuple[Charity, ...] = ()
    success: bool = True
