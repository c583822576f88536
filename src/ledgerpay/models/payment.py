"""Payment ledger entry."""

from __future__ import annotations

from pydantic import BaseModel


class PaymentRecord(BaseModel):
    """One settled payment. Written once, never updated."""

    employee_id: int
    payment_id: int
    amount: int
    payment_date: int
    period_start: int  # Employee's last_payment before this payment
    period_end: int
    bonus: int = 0
    deductions: int = 0

    model_config = {"frozen": True}
