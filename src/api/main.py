import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_ledger, get_rules, get_settings
from src.app_shell.config import validate_ops_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
        validate_ops_rules(rules)
        ledger = get_ledger()
        logger.info(
            "Rules loaded from %s; contract owner=%s",
            settings.rules_path,
            ledger.get_contract_owner(),
        )
    except Exception:
        logger.exception("Startup failed")
        sys.exit(1)

    yield


app = FastAPI(
    title="Charity Ledger API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import charities, contract, donations, milestones  # noqa: E402

app.include_router(contract.router, prefix="/api/contract", tags=["Contract"])
app.include_router(charities.router, prefix="/api/charities", tags=["Charities"])
app.include_router(donations.router, prefix="/api/donations", tags=["Donations"])
app.include_router(milestones.router, prefix="/api/milestones", tags=["Milestones"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "charity-ledger"}
