"""Shared fixtures: a fresh engine on in-memory host collaborators."""

from __future__ import annotations

import pytest

from ledgerpay.core.logging_config import reset_logging
from ledgerpay.engine.payroll import PayrollEngine
from tests.fakes import (
    EMPLOYEE_WALLET,
    OWNER,
    MemoryFundsTransfer,
    MemoryHeightSource,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    reset_logging()


@pytest.fixture
def heights():
    return MemoryHeightSource(height=1)


@pytest.fixture
def funds():
    return MemoryFundsTransfer()


@pytest.fixture
def engine(heights, funds):
    return PayrollEngine(owner=OWNER, height_source=heights, funds=funds)


@pytest.fixture
def add_employee(engine):
    """Factory adding an employee as the owner; returns its id."""

    def _add(salary: int = 104000, frequency: str = "biweekly", department: str = "Engineering") -> int:
        return engine.add_employee(
            EMPLOYEE_WALLET, salary, "Software Engineer", department, frequency, caller=OWNER
        )

    return _add
