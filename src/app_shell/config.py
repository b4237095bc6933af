import logging
import os

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: Rules, environ: dict[str, str] | None = None) -> None:
    """
    Validate operational requirements before startup.
    Raises RuntimeError listing any missing required environment variables.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in rules.ops.required_env if name not in env]
    if missing:
        raise RuntimeError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    if rules.contract.allow_reinitialize:
        logger.warning(
            "contract.allow_reinitialize is enabled; the owner can wipe the ledger"
        )

    logger.info("Configuration validated (rules %s)", rules.project.rules_version)
