"""Request bodies for the payroll routes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class AddEmployeeRequest(BaseModel):
    wallet: str
    annual_salary: int
    role: str
    department: str
    pay_frequency: str


class PaymentRequest(BaseModel):
    bonus: int = 0
    deductions: int = 0


class AmountRequest(BaseModel):
    amount: int


class SalaryRequest(BaseModel):
    new_salary: int


class ScheduleRequest(BaseModel):
    name: str
    frequency: str
    next_execution: int
    department_filter: Optional[str] = None
