"""
Pytest configuration and fixtures for the dividend calculator tests.

This module provides:
- In-memory SQLite database fixtures
- A fixed exchange-rate table and rate service
- Service and repository fixtures
- Factory helpers for dividend and share entries
"""

import json
import os
import tempfile
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from divcalc.main import app
from divcalc.api.deps import get_rate_service, reset_rate_service
from divcalc.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from divcalc.repositories.sqlalchemy import orm_models  # noqa: F401
from divcalc.repositories.sqlalchemy import SqlAlchemyStateRepository
from divcalc.services import (
    DividendService,
    ExchangeRateService,
    ShareService,
    UiStateService,
)
from divcalc.csv import CsvExporter
from divcalc.domain.models import ShareEntry
from divcalc.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# EXCHANGE RATE FIXTURES
# =============================================================================

# USD per 1 EUR, ECB reference rates (trading days only)
SAMPLE_RATES = {
    "2023-03-15": 1.0549,
    "2023-11-20": 1.0944,
    "2024-01-02": 1.10,
    "2024-01-03": 1.0919,
    "2024-06-14": 1.0697,
}


@pytest.fixture
def rate_table() -> dict[str, float]:
    """Fixed date -> rate table."""
    return dict(SAMPLE_RATES)


@pytest.fixture
def rate_service(rate_table) -> ExchangeRateService:
    """Provide an ExchangeRateService preloaded with the sample table."""
    return ExchangeRateService(table=rate_table)


@pytest.fixture
def empty_rate_service() -> ExchangeRateService:
    """Rate service as it behaves after a failed load."""
    return ExchangeRateService(table={})


@pytest.fixture
def rates_file(rate_table):
    """Write the sample table to a temporary JSON file."""
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".json",
        delete=False,
        encoding="utf-8",
    ) as f:
        json.dump(rate_table, f)
        tmp_path = f.name

    yield tmp_path

    if os.path.exists(tmp_path):
        os.unlink(tmp_path)


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point settings at a temporary data directory for every test."""
    reset_settings()
    reset_rate_service()
    set_settings(Settings(data_dir=tmp_path, database_url="sqlite:///:memory:"))
    yield
    reset_rate_service()
    reset_database()
    reset_settings()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def state_repo(test_session) -> SqlAlchemyStateRepository:
    """Provide test StateRepository."""
    return SqlAlchemyStateRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def dividend_service(state_repo, rate_service) -> DividendService:
    """Provide test DividendService."""
    return DividendService(state_repo=state_repo, rate_service=rate_service)


@pytest.fixture
def share_service(state_repo, rate_service) -> ShareService:
    """Provide test ShareService."""
    return ShareService(state_repo=state_repo, rate_service=rate_service)


@pytest.fixture
def ui_state_service(state_repo) -> UiStateService:
    """Provide test UiStateService."""
    return UiStateService(state_repo=state_repo)


@pytest.fixture
def csv_exporter(dividend_service, share_service, rate_service, tmp_path) -> CsvExporter:
    """Provide test CsvExporter writing under a temporary export directory."""
    return CsvExporter(
        dividend_service=dividend_service,
        share_service=share_service,
        rate_service=rate_service,
        export_dir=tmp_path / "exports",
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def share_factory() -> Callable[..., ShareEntry]:
    """Factory for building share lots without going through a service."""
    counter = {"n": 0}

    def _create_share(
        ticker: str = "AAPL",
        shares_held: float = 10,
        purchase_price: float = 150,
        purchase_date: str = "2024-01-02",
        entry_id: Optional[str] = None,
    ) -> ShareEntry:
        counter["n"] += 1
        return ShareEntry(
            id=entry_id or f"share-{counter['n']}",
            ticker=ticker,
            shares_held=shares_held,
            purchase_price=purchase_price,
            purchase_date=purchase_date,
        )

    return _create_share


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, rate_service) -> TestClient:
    """Provide FastAPI test client with test database and sample rates."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rate_service] = lambda: rate_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 1e-9) -> None:
    """Assert two floats are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
