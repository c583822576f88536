"""Tests for Employee, PaymentRecord and PayrollSchedule models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledgerpay.models.employee import Employee, PayFrequency
from ledgerpay.models.payment import PaymentRecord
from ledgerpay.models.schedule import PayrollSchedule


def _employee(**overrides) -> Employee:
    fields = dict(
        wallet_address="ST2CY5", annual_salary=100000, role="Engineer",
        department="Engineering", start_date=1, pay_frequency="biweekly",
    )
    fields.update(overrides)
    return Employee(**fields)


def test_hourly_rate_is_floored_from_annual_salary():
    assert _employee(annual_salary=100000).hourly_rate == 48  # 100000 // 2080


def test_hourly_rate_follows_salary_updates():
    updated = _employee().model_copy(update={"annual_salary": 120000})
    assert updated.hourly_rate == 57


def test_hourly_rate_in_dump():
    assert _employee().model_dump()["hourly_rate"] == 48


def test_new_employee_defaults():
    employee = _employee()
    assert employee.is_active is True
    assert employee.last_payment == 0


def test_employee_is_frozen():
    with pytest.raises(ValidationError):
        _employee().annual_salary = 1  # type: ignore[misc]


def test_unknown_frequency_kept_verbatim():
    assert _employee(pay_frequency="daily").pay_frequency == "daily"


def test_pay_frequency_values():
    assert [f.value for f in PayFrequency] == ["weekly", "biweekly", "monthly"]


def test_payment_record_is_immutable():
    record = PaymentRecord(
        employee_id=1, payment_id=1, amount=4500, payment_date=10,
        period_start=0, period_end=10, bonus=1000, deductions=500,
    )
    with pytest.raises(ValidationError):
        record.amount = 0  # type: ignore[misc]


def test_schedule_defaults():
    schedule = PayrollSchedule(name="Monthly", frequency="monthly", next_execution=100)
    assert schedule.is_active is True
    assert schedule.department_filter is None
