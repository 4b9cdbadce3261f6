"""Business constants for the decision engine - read-only, shared by every request"""

from types import MappingProxyType
from typing import Mapping

MINIMUM_LOAN_AMOUNT = 2000
MAXIMUM_LOAN_AMOUNT = 10000
MINIMUM_LOAN_PERIOD = 12  # months
MAXIMUM_LOAN_PERIOD = 60  # months

SEGMENT_1_CREDIT_MODIFIER = 100
SEGMENT_2_CREDIT_MODIFIER = 300
SEGMENT_3_CREDIT_MODIFIER = 1000

ADULT_AGE_MONTHS = 18 * 12

# Expected lifetime per country of issuance, truncated to whole months
EXPECTED_LIFETIME_MONTHS: Mapping[str, int] = MappingProxyType(
    {
        "EE": int(76.74 * 12),
        "LV": int(73.28 * 12),
        "LT": int(74.34 * 12),
    }
)
