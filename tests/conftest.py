"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from customer_rewards.api.main import create_app
from customer_rewards.infrastructure.database.models import Base
from customer_rewards.infrastructure.database.session import get_db
from customer_rewards.domain.models import Customer, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_customer() -> Customer:
    """Customer "Sam" with a single $120 purchase in April 2024"""
    return Customer(
        customer_name="Sam",
        transactions=[Transaction(amount=Decimal("120.00"), date=date(2024, 4, 15))],
    )


@pytest.fixture
def quarter_payload() -> dict:
    """Create-customer request body with purchases spread over Q1 2024"""
    return {
        "customer_name": "Alice",
        "transactions": [
            {"amount": 120.0, "date": "2024-01-05"},   # 90 points
            {"amount": 75.5, "date": "2024-01-20"},    # 25 points
            {"amount": 200.0, "date": "2024-02-11"},   # 250 points
            {"amount": 40.0, "date": "2024-02-28"},    # 0 points
            {"amount": 100.0, "date": "2024-03-31"},   # 50 points
        ],
    }
