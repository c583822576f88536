"""Unit tests for the registries, treasury and payment ledger."""

from __future__ import annotations

import pytest

from ledgerpay.core.exceptions import InsufficientFundsError
from ledgerpay.ledger.employees import EmployeeRegistry
from ledgerpay.ledger.payments import PaymentLedger
from ledgerpay.ledger.schedules import ScheduleRegistry
from ledgerpay.ledger.treasury import Treasury
from ledgerpay.models.employee import Employee
from ledgerpay.models.payment import PaymentRecord
from ledgerpay.models.schedule import PayrollSchedule


def _employee() -> Employee:
    return Employee(
        wallet_address="ST2CY5", annual_salary=52000, role="Analyst",
        department="Finance", start_date=1, pay_frequency="weekly",
    )


def _record(employee_id: int, payment_id: int) -> PaymentRecord:
    return PaymentRecord(
        employee_id=employee_id, payment_id=payment_id, amount=1000,
        payment_date=5, period_start=0, period_end=5,
    )


class TestEmployeeRegistry:
    def test_allocates_sequential_ids(self):
        registry = EmployeeRegistry()
        assert registry.add(_employee()) == 1
        assert registry.add(_employee()) == 2
        assert registry.count() == 2

    def test_replace_unknown_id_raises(self):
        with pytest.raises(KeyError):
            EmployeeRegistry().replace(1, _employee())


class TestTreasury:
    def test_credit_and_debit(self):
        treasury = Treasury()
        assert treasury.credit(100) == 100
        assert treasury.debit(40) == 60

    def test_debit_never_goes_negative(self):
        treasury = Treasury(balance=10)
        with pytest.raises(InsufficientFundsError):
            treasury.debit(11)
        assert treasury.balance == 10

    def test_covers_exact_balance(self):
        assert Treasury(balance=10).covers(10) is True


class TestPaymentLedger:
    def test_append_advances_counter(self):
        ledger = PaymentLedger()
        assert ledger.append(_record(1, 1)) == 1
        assert ledger.append(_record(2, 2)) == 2
        assert ledger.next_id == 3
        assert len(ledger) == 2

    def test_out_of_sequence_rejected(self):
        ledger = PaymentLedger()
        with pytest.raises(ValueError):
            ledger.append(_record(1, 5))
        assert len(ledger) == 0

    def test_history_filtered_and_ordered(self):
        ledger = PaymentLedger()
        for employee_id, payment_id in [(1, 1), (2, 2), (1, 3)]:
            ledger.append(_record(employee_id, payment_id))
        assert [r.payment_id for r in ledger.for_employee(1)] == [1, 3]
        assert ledger.get(2, 2).employee_id == 2
        assert ledger.get(1, 2) is None


def test_schedule_registry_ids():
    registry = ScheduleRegistry()
    schedule = PayrollSchedule(name="Monthly", frequency="monthly", next_execution=10)
    assert registry.add(schedule) == 1
    assert registry.get(1) == schedule
    assert registry.get(2) is None
