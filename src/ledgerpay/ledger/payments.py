"""Append-only payment history keyed by (employee-id, payment-id).

Payment ids come from one global counter shared by all employees, so the
payment id alone is already unique; the composite key is kept for
compatibility with existing consumers of the history.
"""

from __future__ import annotations

from ledgerpay.core.types import EmployeeId, PaymentId, PaymentKey
from ledgerpay.models.payment import PaymentRecord


class PaymentLedger:
    def __init__(self) -> None:
        self._records: dict[PaymentKey, PaymentRecord] = {}
        self._next_id: PaymentId = 1

    @property
    def next_id(self) -> PaymentId:
        return self._next_id

    def append(self, record: PaymentRecord) -> PaymentId:
        """Write ``record`` under the current counter value and advance it."""
        if record.payment_id != self._next_id:
            raise ValueError(
                f"Payment id {record.payment_id} out of sequence, expected {self._next_id}"
            )
        self._records[(record.employee_id, record.payment_id)] = record
        self._next_id += 1
        return record.payment_id

    def get(self, employee_id: EmployeeId, payment_id: PaymentId) -> PaymentRecord | None:
        return self._records.get((employee_id, payment_id))

    def for_employee(self, employee_id: EmployeeId) -> list[PaymentRecord]:
        return sorted(
            (r for (eid, _), r in self._records.items() if eid == employee_id),
            key=lambda r: r.payment_id,
        )

    def __len__(self) -> int:
        return len(self._records)
