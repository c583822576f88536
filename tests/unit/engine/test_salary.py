"""Tests for per-period salary and due-date calculations."""

from __future__ import annotations

import pytest

from ledgerpay.core.config import CadenceConfig
from ledgerpay.engine.salary import calculate_salary, is_due
from ledgerpay.models.employee import PayFrequency


@pytest.mark.parametrize(
    "frequency, expected",
    [("weekly", 2000), ("biweekly", 4000), ("monthly", 8666)],
)
def test_salary_per_period(frequency, expected):
    assert calculate_salary(104000, frequency) == expected


def test_unknown_frequency_pays_zero():
    # InvalidFrequencyError is reserved; unknown values silently yield 0.
    assert calculate_salary(104000, "daily") == 0


def test_salary_is_floored():
    assert calculate_salary(100, "weekly") == 1


@pytest.mark.parametrize("frequency, threshold", [("weekly", 1008), ("biweekly", 2016), ("monthly", 4320)])
def test_due_at_threshold(frequency, threshold):
    cadence = CadenceConfig()
    assert is_due(threshold - 1, frequency, cadence) is False
    assert is_due(threshold, frequency, cadence) is True


def test_unknown_frequency_never_due():
    assert is_due(10**9, "daily", CadenceConfig()) is False


def test_custom_cadence():
    assert is_due(7, "weekly", CadenceConfig(weekly=7)) is True


def test_enum_members_and_plain_strings_agree():
    assert calculate_salary(104000, PayFrequency.MONTHLY) == calculate_salary(104000, "monthly")
    assert CadenceConfig().threshold(PayFrequency.WEEKLY) == 1008
