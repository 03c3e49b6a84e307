"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from divcalc import __version__
from divcalc.api.deps import get_rate_service, init_rate_service
from divcalc.api.routers import (
    dividends_router,
    exchange_rates_router,
    shares_router,
    ui_state_router,
)
from divcalc.config.logging_config import setup_logging
from divcalc.config.settings import get_settings
from divcalc.core.exceptions import AppError, NotFoundError
from divcalc.repositories.sqlalchemy.database import init_db
from divcalc.services import ExchangeRateService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: the rate table is loaded exactly once
    setup_logging()
    init_db()
    init_rate_service()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="USD dividends and share holdings valued in EUR at ECB reference rates",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(dividends_router)
app.include_router(shares_router)
app.include_router(exchange_rates_router)
app.include_router(ui_state_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check(
    rates: ExchangeRateService = Depends(get_rate_service),
) -> dict:
    """Health check; an empty rate table means every entry will be rejected."""
    return {"status": "healthy", "exchange_rates": len(rates.table)}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
