"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from altscore_gateway.api.main import create_app
from altscore_gateway.config import settings
from altscore_gateway.domain.models import ApplicantProfile


@pytest.fixture(autouse=True)
def no_cosmetic_delays(monkeypatch):
    """Skip the 'calculating' and 'typing' pauses in tests"""
    monkeypatch.setattr(settings, "score_delay_seconds", 0.0)
    monkeypatch.setattr(settings, "chat_reply_delay_min", 0.0)
    monkeypatch.setattr(settings, "chat_reply_delay_max", 0.0)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a fresh chat session store"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def strong_profile() -> ApplicantProfile:
    """Salaried renter with a clean record"""
    return ApplicantProfile(
        name="Jane Doe",
        age=30,
        education_qualification="graduate",
        monthly_income=5000,
        monthly_expenditure=3000,
        employment_status="full-time",
        employment_duration="2+",
        rent_payment_history="excellent",
        utility_payment_history="good",
        savings_amount=10000,
        debt_to_income=30,
    )


@pytest.fixture
def thin_profile() -> ApplicantProfile:
    """Young part-timer with a short, patchy history"""
    return ApplicantProfile(
        name="Sam Roe",
        age=19,
        education_qualification="high-school",
        monthly_income=1200,
        monthly_expenditure=1000,
        employment_status="part-time",
        employment_duration="<6",
        rent_payment_history="poor",
        utility_payment_history="fair",
        savings_amount=200,
        debt_to_income=55,
    )
