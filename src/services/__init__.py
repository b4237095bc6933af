"""
Application services.

Orchestrate the atomic components in src/components/ with shared state,
the authorization guard and the event journal.
"""

from .ledger import LedgerService, create_ledger_service

__all__ = ["LedgerService", "create_ledger_service"]
