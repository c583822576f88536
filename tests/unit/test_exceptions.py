"""Error codes are part of the public contract."""

from __future__ import annotations

import pytest

from ledgerpay.core.exceptions import (
    AlreadyPaidError,
    EmployeeNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidFrequencyError,
    LedgerPayError,
    TransferFailedError,
    UnauthorizedError,
)


@pytest.mark.parametrize(
    "exc_type, code",
    [
        (UnauthorizedError, 100),
        (EmployeeNotFoundError, 101),
        (InsufficientFundsError, 102),
        (InvalidAmountError, 103),
        (AlreadyPaidError, 104),
        (InvalidFrequencyError, 105),
        (TransferFailedError, 106),
    ],
)
def test_stable_codes(exc_type, code):
    assert exc_type.code == code
    assert issubclass(exc_type, LedgerPayError)


def test_structured_fields():
    exc = InsufficientFundsError(required=4500, available=100)
    assert (exc.required, exc.available) == (4500, 100)
    assert "4500" in str(exc)


def test_unauthorized_reason_in_message():
    exc = UnauthorizedError("ST1", "execute schedules", "schedule 1 inactive")
    assert exc.reason == "schedule 1 inactive"
    assert str(exc).endswith("schedule 1 inactive")
