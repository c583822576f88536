"""Recurring payroll schedule definitions."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class PayrollSchedule(BaseModel):
    name: str
    frequency: str
    next_execution: int
    department_filter: Optional[str] = None
    is_active: bool = True

    model_config = {"frozen": True}
