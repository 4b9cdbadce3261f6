"""Estonian personal codes and a fake identity validator shared by the tests"""

from datetime import date

# Ages of the codes below are measured against this date
REFERENCE_DATE = date(2023, 6, 1)

DEBTOR_PERSONAL_CODE = "37605030299"  # segment 0299
SEGMENT_1_PERSONAL_CODE = "50307172740"  # segment 2740, born 2003-07-17
SEGMENT_2_PERSONAL_CODE = "38411266610"  # segment 6610
SEGMENT_3_PERSONAL_CODE = "35006069515"  # segment 9515
UNDERAGE_PERSONAL_CODE = "50612017067"  # born 2006-12-01
TOO_OLD_PERSONAL_CODE = "35006069515"  # born 1950-06-06
INVALID_PERSONAL_CODE = "12345678901"


class StubIdentityValidator:
    """Identity validator with a fixed age and country for every code"""

    def __init__(self, age_months: int = 30 * 12, country: str = "EE", valid: bool = True):
        self.age_months = age_months
        self.country = country
        self.valid = valid

    def is_valid_personal_code(self, personal_code: str) -> bool:
        return self.valid

    def age_in_months(self, personal_code: str) -> int:
        return self.age_months

    def country_of(self, personal_code: str) -> str:
        return self.country
