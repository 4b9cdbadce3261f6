"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_decision.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_decision.api.dependencies import get_decision_engine, get_request_id
from loan_decision.domain.engine import DecisionEngine
from loan_decision.domain.exceptions import LoanRequestError, NoValidLoanError
from loan_decision.infrastructure.observability.metrics import record_decision
from loan_decision.infrastructure.observability.logging import log_decision

router = APIRouter()

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=DecisionResponse(error_message=message).model_dump(),
    )


@router.post(
    "/loan/decision",
    response_model=DecisionResponse,
    responses={400: {"model": DecisionResponse}, 404: {"model": DecisionResponse}, 500: {"model": DecisionResponse}},
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Calculate the maximum approvable loan for a customer.

    Status codes:
    - 200: Loan approved (period may be longer than requested)
    - 400: Invalid personal code, amount, period or customer age
    - 404: No valid loan for this customer
    - 500: Unexpected failure
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)
    personal_code = request_body.personal_code

    try:
        decision = engine.evaluate(personal_code, request_body.loan_amount, request_body.loan_period)

    except LoanRequestError as e:
        logging.warning(f"Loan request rejected: {e}", extra={"request_id": request_id})
        _record("rejected", personal_code, request_id, None, None, start_time)
        return _error_response(400, e.message)

    except NoValidLoanError as e:
        _record("declined", personal_code, request_id, None, None, start_time)
        return _error_response(404, e.message)

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return _error_response(500, UNEXPECTED_ERROR_MESSAGE)

    _record("approved", personal_code, request_id, decision.loan_amount, decision.loan_period, start_time)

    return DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
    )


def _record(outcome, personal_code, request_id, loan_amount, loan_period, start_time):
    duration_ms = (time.perf_counter() - start_time) * 1000
    record_decision(outcome, loan_amount)
    log_decision(request_id, personal_code, outcome, loan_amount, loan_period, duration_ms)
