"""
Registry component - Charity registration and activation.

Registers charities under the contract owner's authority and toggles
whether they accept donations.
"""

from .component import (
    run,
    run_deactivate,
    run_get,
    run_list,
    run_reactivate,
    run_register,
)
from .models import (
    CharityListOutput,
    CharityOutput,
    DeactivateCharityInput,
    GetCharityInput,
    ListCharitiesInput,
    ReactivateCharityInput,
    RegisterCharityInput,
    RegistryConfig,
)
from .ports import CharityStorePort

__all__ = [
    # Entry points
    "run",
    "run_deactivate",
    "run_get",
    "run_list",
    "run_reactivate",
    "run_register",
    # Input models
    "DeactivateCharityInput",
    "GetCharityInput",
    "ListCharitiesInput",
    "ReactivateCharityInput",
    "RegisterCharityInput",
    # Output models
    "CharityListOutput",
    "CharityOutput",
    # Config
    "RegistryConfig",
    # Ports
    "CharityStorePort",
]
