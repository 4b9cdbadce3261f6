"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_decision.api.main import create_app
from loan_decision.api.dependencies import get_decision_engine
from loan_decision.domain.engine import DecisionEngine
from loan_decision.infrastructure.identity.personal_code import EstonianPersonalCodeValidator

from tests.identity_fakes import REFERENCE_DATE


@pytest.fixture
def identity_validator() -> EstonianPersonalCodeValidator:
    """Estonian validator pinned to the reference date"""
    return EstonianPersonalCodeValidator(clock=lambda: REFERENCE_DATE)


@pytest.fixture
def engine(identity_validator: EstonianPersonalCodeValidator) -> DecisionEngine:
    """Decision engine backed by the pinned Estonian validator"""
    return DecisionEngine(identity_validator)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the pinned decision engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
