"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache
from fastapi import Request
from loan_decision.domain.engine import DecisionEngine
from loan_decision.infrastructure.identity.personal_code import EstonianPersonalCodeValidator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Provide the shared, stateless decision engine"""
    return DecisionEngine(EstonianPersonalCodeValidator())
