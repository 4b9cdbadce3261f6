"""Personal ID code validation and parsing backed by python-stdnum"""

from datetime import date
from typing import Callable

from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from loan_decision.config import settings
from loan_decision.domain.exceptions import InvalidPersonalCodeError
from loan_decision.utils.date_utils import months_between


class EstonianPersonalCodeValidator:
    """
    Validator for Estonian personal ID codes (isikukood).

    The code carries no country marker, so every code is reported as issued in
    the configured default country.
    """

    def __init__(self, clock: Callable[[], date] = date.today, country: str | None = None):
        self.clock = clock
        self.country = country or settings.default_country

    def is_valid_personal_code(self, personal_code: str) -> bool:
        return ik.is_valid(personal_code)

    def birth_date(self, personal_code: str) -> date:
        """
        Extract the holder's birth date.

        Raises:
            InvalidPersonalCodeError: If the code is malformed
        """
        try:
            ik.validate(personal_code)
            return ik.get_birth_date(personal_code)
        except ValidationError as e:
            raise InvalidPersonalCodeError("Invalid personal ID code!") from e

    def age_in_months(self, personal_code: str) -> int:
        return months_between(self.birth_date(personal_code), self.clock())

    def country_of(self, personal_code: str) -> str:
        return self.country
