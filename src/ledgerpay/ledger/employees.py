"""Employee registry: id allocation and record storage."""

from __future__ import annotations

from ledgerpay.core.types import EmployeeId
from ledgerpay.models.employee import Employee


class EmployeeRegistry:
    """Dict-backed employee store with a never-reused id counter.

    Performs no authorization or validation; the engine checks every
    precondition before calling a mutator here.
    """

    def __init__(self) -> None:
        self._employees: dict[EmployeeId, Employee] = {}
        self._next_id: EmployeeId = 1

    def add(self, employee: Employee) -> EmployeeId:
        employee_id = self._next_id
        self._employees[employee_id] = employee
        self._next_id += 1
        return employee_id

    def replace(self, employee_id: EmployeeId, employee: Employee) -> None:
        if employee_id not in self._employees:
            raise KeyError(employee_id)
        self._employees[employee_id] = employee

    def get(self, employee_id: EmployeeId) -> Employee | None:
        return self._employees.get(employee_id)

    def count(self) -> int:
        """Number of ids ever allocated, active or not."""
        return self._next_id - 1
