"""Type aliases used across LedgerPay."""

from __future__ import annotations

EmployeeId = int
PaymentId = int
ScheduleId = int
Height = int
Principal = str
Amount = int
PaymentKey = tuple[EmployeeId, PaymentId]
