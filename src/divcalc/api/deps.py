"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from divcalc.config.settings import get_settings
from divcalc.csv import CsvExporter
from divcalc.repositories.sqlalchemy import SqlAlchemyStateRepository, get_db
from divcalc.services import (
    DividendService,
    ExchangeRateService,
    ShareService,
    UiStateService,
)

# Process-wide rate table, loaded once at startup
_rate_service: Optional[ExchangeRateService] = None


def get_rate_service() -> ExchangeRateService:
    """Provide the shared ExchangeRateService instance."""
    global _rate_service
    if _rate_service is None:
        settings = get_settings()
        _rate_service = ExchangeRateService(rates_path=settings.get_exchange_rates_path())
    return _rate_service


def init_rate_service() -> ExchangeRateService:
    """Load the exchange-rate table (startup step; failures leave it empty)."""
    service = get_rate_service()
    service.load()
    return service


def reset_rate_service() -> None:
    """Drop the shared rate service so the next request reloads it."""
    global _rate_service
    _rate_service = None


def get_state_repo(db: Session = Depends(get_db)) -> SqlAlchemyStateRepository:
    """Provide StateRepository instance."""
    return SqlAlchemyStateRepository(db)


def get_dividend_service(
    state_repo: SqlAlchemyStateRepository = Depends(get_state_repo),
    rate_service: ExchangeRateService = Depends(get_rate_service),
) -> DividendService:
    """Provide DividendService instance."""
    return DividendService(state_repo=state_repo, rate_service=rate_service)


def get_share_service(
    state_repo: SqlAlchemyStateRepository = Depends(get_state_repo),
    rate_service: ExchangeRateService = Depends(get_rate_service),
) -> ShareService:
    """Provide ShareService instance."""
    return ShareService(state_repo=state_repo, rate_service=rate_service)


def get_ui_state_service(
    state_repo: SqlAlchemyStateRepository = Depends(get_state_repo),
) -> UiStateService:
    """Provide UiStateService instance."""
    return UiStateService(state_repo=state_repo)


def get_csv_exporter(
    dividend_service: DividendService = Depends(get_dividend_service),
    share_service: ShareService = Depends(get_share_service),
    rate_service: ExchangeRateService = Depends(get_rate_service),
) -> CsvExporter:
    """Provide CsvExporter instance."""
    return CsvExporter(
        dividend_service=dividend_service,
        share_service=share_service,
        rate_service=rate_service,
    )
