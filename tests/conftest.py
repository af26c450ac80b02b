"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from exitum_gateway.api.main import create_app
from exitum_gateway.api.dependencies import get_generation_client
from exitum_gateway.infrastructure.clients.generation import GenerationClient
from exitum_gateway.infrastructure.database.models import Base
from exitum_gateway.infrastructure.database.session import get_db
from exitum_gateway.domain.models import BondSchedule


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
    """Create FastAPI test client with test database and an offline generation client"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_generation_client] = lambda: GenerationClient(api_key="test-key", backoff_base=0)
    return TestClient(app)


@pytest.fixture
def original_schedule() -> BondSchedule:
    """Quarterly 15% three-year bond (calculator defaults on the site)"""
    return BondSchedule(face_value=1000, annual_coupon_rate_percent=15, payments_per_year=4, term_years=3)


@pytest.fixture
def restructured_schedule() -> BondSchedule:
    """Proposed terms: coupon cut to 10%, term extended to five years"""
    return BondSchedule(face_value=1000, annual_coupon_rate_percent=10, payments_per_year=4, term_years=5)
