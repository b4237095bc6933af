"""
AuditService - Ledger event journal.

Records one immutable entry for every ledger mutation that succeeded.

Key behaviors:
- Capture actor, target entity, action and metadata
- Entries carry a sequence number; the journal reads in write order
- Query by entity, actor and action, with pagination
- No update or delete of individual entries; clear() wipes the journal
  when the contract is re-initialized
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Protocol
from uuid import UUID, uuid4

# --- Enums ---


class AuditAction(str, Enum):
    """Ledger mutation types."""

    INITIALIZE = "initialize"
    REGISTER = "register"
    DEACTIVATE = "deactivate"
    REACTIVATE = "reactivate"
    DONATE = "donate"
    ADD_MILESTONE = "add_milestone"
    UPDATE_PROGRESS = "update_progress"


class EntityType(str, Enum):
    """Entity types that can be audited."""

    CONTRACT = "contract"
    CHARITY = "charity"
    DONATION = "donation"
    MILESTONE = "milestone"


# --- Configuration ---


@dataclass(frozen=True)
class AuditConfig:
    """Audit journal configuration."""

    enabled: bool = True
    max_query_limit: int = 500


DEFAULT_CONFIG = AuditConfig()


# --- Audit Entry Model ---


@dataclass(frozen=True)
class AuditEntry:
    """Immutable journal entry."""

    id: UUID
    sequence: int
    timestamp: datetime
    action: AuditAction
    entity_type: EntityType
    entity_id: str | None
    actor: str | None
    description: str
    metadata: dict[str, Any] = field(default_factory=dict)


# --- Query Parameters ---


@dataclass
class AuditQuery:
    """Query parameters for the journal."""

    entity_type: EntityType | None = None
    entity_id: str | None = None
    actor: str | None = None
    action: AuditAction | None = None
    limit: int = 100
    offset: int = 0


# --- Repository Protocol ---


class AuditRepoPort(Protocol):
    """Repository interface for journal entries."""

    def save(self, entry: AuditEntry) -> AuditEntry:
        """Append an entry."""
        ...

    def next_sequence(self) -> int:
        """Sequence number for the next entry."""
        ...

    def query(self, query: AuditQuery) -> list[AuditEntry]:
        """Query entries with filters."""
        ...

    def count(self, query: AuditQuery) -> int:
        """Count entries matching query."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...


# --- In-Memory Repository ---


class InMemoryAuditRepo:
    """In-memory journal repository."""

    def __init__(self) -> None:
        self._entries: list[AuditEntry] = []

    def save(self, entry: AuditEntry) -> AuditEntry:
        self._entries.append(entry)
        return entry

    def next_sequence(self) -> int:
        return len(self._entries) + 1

    def _filter(self, query: AuditQuery) -> list[AuditEntry]:
        results = list(self._entries)

        if query.entity_type:
            results = [e for e in results if e.entity_type == query.entity_type]
        if query.entity_id:
            results = [e for e in results if e.entity_id == query.entity_id]
        if query.actor:
            results = [e for e in results if e.actor == query.actor]
        if query.action:
            results = [e for e in results if e.action == query.action]

        return results

    def query(self, query: AuditQuery) -> list[AuditEntry]:
        results = self._filter(query)
        return results[query.offset : query.offset + query.limit]

    def count(self, query: AuditQuery) -> int:
        return len(self._filter(query))

    def clear(self) -> None:
        self._entries.clear()


# --- Time Port Protocol ---


class TimePort(Protocol):
    """Time provider interface."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class DefaultTimePort:
    """Default time provider."""

    def now_utc(self) -> datetime:
        return datetime.now(UTC)


# --- Audit Service ---


class AuditService:
    """
    Ledger event journal.

    Records and queries journal entries.
    """

    def __init__(
        self,
        repo: AuditRepoPort,
        time_port: TimePort | None = None,
        config: AuditConfig | None = None,
    ) -> None:
        self._repo = repo
        self._time = time_port or DefaultTimePort()
        self._config = config or DEFAULT_CONFIG

    def log(
        self,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: str | None = None,
        actor: str | None = None,
        description: str = "",
        metadata: dict[str, Any] | None = None,
    ) -> AuditEntry | None:
        """
        Append a journal entry.

        Returns None if the journal is disabled.
        """
        if not self._config.enabled:
            return None

        entry = self._build_entry(
            self._repo.next_sequence(),
            action,
            entity_type,
            entity_id,
            actor,
            description,
            metadata,
        )
        return self._repo.save(entry)

    def restart(
        self,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: str | None = None,
        actor: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> AuditEntry | None:
        """
        Replace the whole journal with a single opening entry.

        The entry is built before anything is dropped; if building it
        raises, the existing journal is left untouched.
        """
        if not self._config.enabled:
            self._repo.clear()
            return None

        entry = self._build_entry(1, action, entity_type, entity_id, actor, "", metadata)
        self._repo.clear()
        return self._repo.save(entry)

    def _build_entry(
        self,
        sequence: int,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: str | None,
        actor: str | None,
        description: str,
        metadata: dict[str, Any] | None,
    ) -> AuditEntry:
        return AuditEntry(
            id=uuid4(),
            sequence=sequence,
            timestamp=self._time.now_utc(),
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            actor=actor,
            description=description
            or self._generate_description(action, entity_type, entity_id),
            metadata=metadata or {},
        )

    def _generate_description(
        self,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: str | None,
    ) -> str:
        entity_ref = f"{entity_type.value}"
        if entity_id:
            entity_ref += f" {entity_id}"
        return f"{action.value.replace('_', ' ').title()} {entity_ref}"

    def query(
        self,
        entity_type: EntityType | None = None,
        entity_id: str | None = None,
        actor: str | None = None,
        action: AuditAction | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditEntry]:
        """Entries matching the filters, in write order."""
        query = AuditQuery(
            entity_type=entity_type,
            entity_id=entity_id,
            actor=actor,
            action=action,
            limit=min(limit, self._config.max_query_limit),
            offset=offset,
        )
        return self._repo.query(query)

    def count(
        self,
        entity_type: EntityType | None = None,
        entity_id: str | None = None,
        actor: str | None = None,
        action: AuditAction | None = None,
    ) -> int:
        query = AuditQuery(
            entity_type=entity_type,
            entity_id=entity_id,
            actor=actor,
            action=action,
        )
        return self._repo.count(query)

    def get_for_entity(
        self,
        entity_type: EntityType,
        entity_id: str,
        limit: int = 50,
    ) -> list[AuditEntry]:
        """Journal trail for a specific entity."""
        return self.query(entity_type=entity_type, entity_id=entity_id, limit=limit)

    def clear(self) -> None:
        self._repo.clear()


# --- Factory ---


def create_audit_service(
    repo: AuditRepoPort | None = None,
    time_port: TimePort | None = None,
    config: AuditConfig | None = None,
) -> AuditService:
    """Create an AuditService."""
    return AuditService(
        repo=repo or InMemoryAuditRepo(),
        time_port=time_port,
        config=config,
    )
