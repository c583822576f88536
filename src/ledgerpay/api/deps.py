"""Request dependencies: engine lookup and caller identity."""

from __future__ import annotations

from fastapi import Request

from ledgerpay.core.exceptions import UnauthorizedError
from ledgerpay.engine.payroll import PayrollEngine


def get_engine(request: Request) -> PayrollEngine:
    return request.app.state.engine


def get_caller(request: Request) -> str:
    """Principal supplied by the host in the configured header."""
    header = request.app.state.settings.api.principal_header
    caller = request.headers.get(header)
    if not caller:
        raise UnauthorizedError("", "call mutating operations", f"missing {header} header")
    return caller
