"""
Ledger error taxonomy.

Every failed ledger call reports exactly one LedgerError as part of its
result. Errors are values, not exceptions: handlers return them and the
transport decides how to surface them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Fixed set of ledger failure kinds."""

    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_INPUT = "invalid_input"

    @property
    def status(self) -> int:
        return _STATUS[self]

    @property
    def default_message(self) -> str:
        return _MESSAGES[self]


_STATUS: dict[ErrorCode, int] = {
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INVALID_AMOUNT: 400,
    ErrorCode.INVALID_INPUT: 422,
}

_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FORBIDDEN: "Forbidden",
    ErrorCode.NOT_FOUND: "Not found",
    ErrorCode.INVALID_AMOUNT: "Invalid amount",
    ErrorCode.INVALID_INPUT: "Invalid input",
}


@dataclass(frozen=True)
class LedgerError:
    """Structured ledger failure."""

    code: ErrorCode
    message: str
    field: str | None = None

    @property
    def status(self) -> int:
        return self.code.status

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code.value,
            "status": self.status,
            "message": self.message,
            "field": self.field,
        }


def forbidden(message: str | None = None) -> LedgerError:
    return LedgerError(ErrorCode.FORBIDDEN, message or ErrorCode.FORBIDDEN.default_message)


def not_found(what: str, ident: object) -> LedgerError:
    return LedgerError(ErrorCode.NOT_FOUND, f"{what} {ident} not found")


def invalid_amount(field: str, message: str | None = None) -> LedgerError:
    return LedgerError(
        ErrorCode.INVALID_AMOUNT,
        message or ErrorCode.INVALID_AMOUNT.default_message,
        field=field,
    )


def invalid_input(field: str, message: str) -> LedgerError:
    return LedgerError(ErrorCode.INVALID_INPUT, message, field=field)
