"""
Donations component - Donation recording and charity totals.
"""

from .component import (
    run,
    run_donate,
    run_get,
    run_list_for_charity,
)
from .models import (
    DonateInput,
    DonationListOutput,
    DonationOutput,
    GetDonationInput,
    ListCharityDonationsInput,
)
from .ports import DonationStorePort

__all__ = [
    # Entry points
    "run",
    "run_donate",
    "run_get",
    "run_list_for_charity",
    # Input models
    "DonateInput",
    "GetDonationInput",
    "ListCharityDonationsInput",
    # Output models
    "DonationListOutput",
    "DonationOutput",
    # Ports
    "DonationStorePort",
]
