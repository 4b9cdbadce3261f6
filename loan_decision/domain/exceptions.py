"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LoanRequestError(DomainException):
    """Loan request rejected before any loan amount was calculated"""

    pass


class InvalidPersonalCodeError(LoanRequestError):
    """Personal ID code failed structural or checksum validation"""

    pass


class InvalidLoanAmountError(LoanRequestError):
    """Requested loan amount is outside the allowed range"""

    pass


class InvalidLoanPeriodError(LoanRequestError):
    """Requested loan period is outside the allowed range"""

    pass


class InvalidCustomerAgeError(LoanRequestError):
    """Customer is too young or too old to qualify for a loan"""

    pass


class NoValidLoanError(DomainException):
    """No loan amount and period combination satisfies the business rules"""

    pass
