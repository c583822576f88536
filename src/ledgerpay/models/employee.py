"""Employee record and pay frequency."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, computed_field

HOURS_PER_YEAR = 2080


class PayFrequency(StrEnum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class Employee(BaseModel):
    """Single employee as held by the registry.

    Records are frozen; transitions replace them with ``model_copy``.
    ``pay_frequency`` is a plain string so that values outside
    ``PayFrequency`` are kept rather than rejected.
    """

    wallet_address: str
    annual_salary: int
    role: str
    department: str
    start_date: int
    pay_frequency: str
    is_active: bool = True
    last_payment: int = 0

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hourly_rate(self) -> int:
        """Annual salary spread over a 2080-hour working year (floored)."""
        return self.annual_salary // HOURS_PER_YEAR
