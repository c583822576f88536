"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledgerpay.api.routes import admin, health, payroll
from ledgerpay.core.config import AppSettings
from ledgerpay.core.exceptions import (
    EmployeeNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerPayError,
    TransferFailedError,
    UnauthorizedError,
)
from ledgerpay.core.logging_config import configure_logging
from ledgerpay.engine.payroll import PayrollEngine
from ledgerpay.persistence import create_host

_STATUS_BY_ERROR: dict[type[LedgerPayError], int] = {
    UnauthorizedError: 403,
    EmployeeNotFoundError: 404,
    InsufficientFundsError: 409,
    InvalidAmountError: 422,
    TransferFailedError: 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    configure_logging(level=settings.log_level)
    height_source, funds = create_host(settings)
    app.state.height_source = height_source
    app.state.funds = funds
    app.state.engine = PayrollEngine.from_settings(
        settings, height_source=height_source, funds=funds
    )
    yield


async def ledger_error_handler(request: Request, exc: LedgerPayError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_ERROR.get(type(exc), 400),
        content={"code": exc.code, "error": type(exc).__name__, "detail": str(exc)},
    )


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="LedgerPay Payroll Ledger",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings()
    app.add_exception_handler(LedgerPayError, ledger_error_handler)  # type: ignore[arg-type]
    app.include_router(health.router)
    app.include_router(payroll.router, prefix="/payroll")
    app.include_router(admin.router, prefix="/admin")
    return app
