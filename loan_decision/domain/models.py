"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Decision:
    """Output of a loan decision: approved amount and period, or an error message"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None  # months
    error_message: Optional[str] = None

    @property
    def approved(self) -> bool:
        return self.error_message is None and self.loan_amount is not None
