"""
Contract component - ledger lifecycle, owner identity and statistics.
"""

from .component import (
    run,
    run_get_owner,
    run_get_stats,
    run_initialize,
)
from .models import (
    ContractConfig,
    ContractOutput,
    GetOwnerInput,
    GetStatsInput,
    InitializeContractInput,
    StatsOutput,
)
from .ports import ContractStatePort

__all__ = [
    # Entry points
    "run",
    "run_get_owner",
    "run_get_stats",
    "run_initialize",
    # Input models
    "GetOwnerInput",
    "GetStatsInput",
    "InitializeContractInput",
    # Output models
    "ContractOutput",
    "StatsOutput",
    # Config
    "ContractConfig",
    # Ports
    "ContractStatePort",
]
