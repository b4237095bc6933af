import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, NoReturn

from fastapi import Depends, Header, HTTPException, status

from src.domain.entities import Address
from src.domain.errors import LedgerError
from src.rules.loader import load_rules
from src.rules.models import Rules
from src.services.ledger import LedgerService, create_ledger_service


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("LEDGER_RULES_PATH", str(self.base_dir / "ledger_rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Ledger ---
# One ledger instance per process; its state lock serializes all calls.
@lru_cache
def get_ledger() -> LedgerService:
    return create_ledger_service(get_rules())


# --- Caller identity ---
def get_caller(
    x_caller: Annotated[str | None, Header()] = None,
) -> Address | None:
    """Caller identity supplied by the hosting environment, if any."""
    return x_caller or None


def require_caller(
    caller: Address | None = Depends(get_caller),
) -> Address:
    if not caller:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing caller identity",
        )
    return caller


# --- Errors ---
def raise_ledger_error(error: LedgerError | None) -> NoReturn:
    """Surface a ledger failure unchanged as an HTTP error."""
    if error is None:
        raise HTTPException(status_code=500, detail="Ledger call failed without error")
    raise HTTPException(status_code=error.status, detail=error.to_dict())
