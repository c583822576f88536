"""LedgerPay exception hierarchy.

Every error carries a stable numeric ``code`` so host adapters can report it
without parsing messages. Codes 100-105 keep their historical values.

Collapsed semantics, kept for compatibility:

- ``EmployeeNotFoundError`` is raised for inactive employees by
  ``process_payment`` and for missing schedules by ``execute_schedule``.
- ``UnauthorizedError`` is raised for inactive or not-yet-due schedules by
  ``execute_schedule``.
"""

from __future__ import annotations


class LedgerPayError(Exception):
    """Base exception for all LedgerPay errors."""

    code: int = 0


class UnauthorizedError(LedgerPayError):
    """Caller is not the configured owner (or schedule not executable)."""

    code = 100

    def __init__(self, caller: str, operation: str, reason: str = "") -> None:
        self.caller = caller
        self.operation = operation
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"{caller!r} is not authorized to {operation}{detail}")


class EmployeeNotFoundError(LedgerPayError):
    """Employee (or schedule) absent, or employee inactive for payment."""

    code = 101

    def __init__(self, employee_id: int, message: str | None = None) -> None:
        self.employee_id = employee_id
        super().__init__(message or f"Employee {employee_id} not found")


class InsufficientFundsError(LedgerPayError):
    """Treasury balance does not cover the requested debit."""

    code = 102

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Treasury holds {available}, payment requires {required}")


class InvalidAmountError(LedgerPayError):
    """Amount outside its allowed range."""

    code = 103

    def __init__(self, field: str, amount: int) -> None:
        self.field = field
        self.amount = amount
        super().__init__(f"Invalid {field}: {amount}")


class AlreadyPaidError(LedgerPayError):
    """Reserved. No transition raises it."""

    code = 104


class InvalidFrequencyError(LedgerPayError):
    """Reserved. Unknown frequencies resolve to zero-value projections instead."""

    code = 105


class TransferFailedError(LedgerPayError):
    """Host funds-transfer primitive rejected the movement."""

    code = 106

    def __init__(self, direction: str, amount: int, message: str) -> None:
        self.direction = direction
        self.amount = amount
        super().__init__(f"Transfer ({direction}) of {amount} failed: {message}")
