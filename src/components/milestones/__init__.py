"""
Milestones component - Funding milestones and progress reporting.
"""

from .component import (
    run,
    run_add,
    run_get,
    run_list_for_charity,
    run_update_progress,
)
from .models import (
    AddMilestoneInput,
    GetMilestoneInput,
    ListCharityMilestonesInput,
    MilestoneConfig,
    MilestoneListOutput,
    MilestoneOutput,
    UpdateProgressInput,
)
from .ports import MilestoneStorePort

__all__ = [
    # Entry points
    "run",
    "run_add",
    "run_get",
    "run_list_for_charity",
    "run_update_progress",
    # Input models
    "AddMilestoneInput",
    "GetMilestoneInput",
    "ListCharityMilestonesInput",
    "UpdateProgressInput",
    # Output models
    "MilestoneListOutput",
    "MilestoneOutput",
    # Config
    "MilestoneConfig",
    # Ports
    "MilestoneStorePort",
]
