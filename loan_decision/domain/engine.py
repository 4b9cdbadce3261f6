"""Decision engine - core business logic for loan decisions"""

from typing import Protocol

from loan_decision.domain import constants
from loan_decision.domain.exceptions import (
    InvalidCustomerAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    LoanRequestError,
    NoValidLoanError,
)
from loan_decision.domain.models import Decision

NO_VALID_LOAN_MESSAGE = "No valid loan found!"


class IdentityValidator(Protocol):
    """Capabilities the engine needs from a personal code source"""

    def is_valid_personal_code(self, personal_code: str) -> bool: ...

    def age_in_months(self, personal_code: str) -> int: ...

    def country_of(self, personal_code: str) -> str: ...


def credit_modifier_for(personal_code: str) -> int:
    """
    Map the last four digits of a personal code to a credit modifier.

    Segments:
    - 0000 - 2499: Debt, no loan (0)
    - 2500 - 4999: Segment 1 (100)
    - 5000 - 7499: Segment 2 (300)
    - 7500 - 9999: Segment 3 (1000)
    """
    tail = personal_code[-4:]
    if len(tail) != 4 or not tail.isdigit():
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    segment = int(tail, 10)

    if segment < 2500:
        return 0
    elif segment < 5000:
        return constants.SEGMENT_1_CREDIT_MODIFIER
    elif segment < 7500:
        return constants.SEGMENT_2_CREDIT_MODIFIER
    else:
        return constants.SEGMENT_3_CREDIT_MODIFIER


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest affordable loan for a credit modifier over a period"""
    return credit_modifier * loan_period


def shortest_affordable_period(credit_modifier: int, loan_period: int) -> int:
    """
    Smallest period >= loan_period whose affordable amount reaches the minimum loan.

    Computed directly (ceiling division) rather than by stepping one month at a time.
    """
    required_period = -(-constants.MINIMUM_LOAN_AMOUNT // credit_modifier)
    return max(loan_period, required_period)


class DecisionEngine:
    """
    Calculates the maximum approvable loan amount and period for a customer.

    The engine keeps no per-request state, so one instance can serve any number
    of concurrent callers.
    """

    def __init__(self, identity_validator: IdentityValidator):
        self.identity_validator = identity_validator

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Main entry point: validate the request and calculate the approved loan.

        Rejected inputs and ineligible ages come back as a Decision carrying
        only an error message. Once the request is accepted, the calculation
        result is returned unchanged.

        Raises:
            NoValidLoanError: No amount/period combination can be offered
        """
        try:
            self.verify_inputs(personal_code, loan_amount, loan_period)
            self.verify_customer_age(personal_code)
        except LoanRequestError as e:
            return Decision(error_message=e.message)

        return self.compute_loan_amount(personal_code, loan_period)

    def evaluate(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Same pipeline as calculate_approved_loan, but raising on every failure.

        Raises:
            InvalidPersonalCodeError: Personal code fails validation
            InvalidLoanAmountError: Amount outside [2000, 10000]
            InvalidLoanPeriodError: Period outside [12, 60]
            InvalidCustomerAgeError: Customer too young or too old
            NoValidLoanError: No amount/period combination can be offered
        """
        self.verify_inputs(personal_code, loan_amount, loan_period)
        self.verify_customer_age(personal_code)
        return self.compute_loan_amount(personal_code, loan_period)

    def compute_loan_amount(self, personal_code: str, loan_period: int) -> Decision:
        """
        Calculate the approved loan for a personal code and requested period.

        The period is extended when the requested one cannot reach the minimum
        loan amount. The amount is capped at the maximum loan amount.

        Raises:
            NoValidLoanError: Ineligible segment, or no period within limits works
        """
        credit_modifier = credit_modifier_for(personal_code)
        if credit_modifier == 0:
            raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)

        loan_period = shortest_affordable_period(credit_modifier, loan_period)

        if not constants.MINIMUM_LOAN_PERIOD <= loan_period <= constants.MAXIMUM_LOAN_PERIOD:
            raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)

        loan_amount = min(
            constants.MAXIMUM_LOAN_AMOUNT,
            highest_valid_loan_amount(credit_modifier, loan_period),
        )
        return Decision(loan_amount=loan_amount, loan_period=loan_period)

    def verify_inputs(self, personal_code: str, loan_amount: int, loan_period: int) -> None:
        """Check request inputs against business rules, raising on the first violation"""
        if not self.identity_validator.is_valid_personal_code(personal_code):
            raise InvalidPersonalCodeError("Invalid personal ID code!")
        if not constants.MINIMUM_LOAN_AMOUNT <= loan_amount <= constants.MAXIMUM_LOAN_AMOUNT:
            raise InvalidLoanAmountError("Invalid loan amount!")
        if not constants.MINIMUM_LOAN_PERIOD <= loan_period <= constants.MAXIMUM_LOAN_PERIOD:
            raise InvalidLoanPeriodError("Invalid loan period!")

    def verify_customer_age(self, personal_code: str) -> None:
        """
        Check the customer is an adult who will outlive the longest loan term.

        Raises:
            InvalidCustomerAgeError: Under 18, or within MAXIMUM_LOAN_PERIOD
                months of the expected lifetime in their country
        """
        age_months = self.identity_validator.age_in_months(personal_code)
        if age_months < constants.ADULT_AGE_MONTHS:
            raise InvalidCustomerAgeError("Person must be over 18 years of age!")

        country = self.identity_validator.country_of(personal_code)
        expected_lifetime = constants.EXPECTED_LIFETIME_MONTHS.get(country, 0)
        if age_months >= expected_lifetime - constants.MAXIMUM_LOAN_PERIOD:
            raise InvalidCustomerAgeError("Person is too old to qualify for a loan!")
