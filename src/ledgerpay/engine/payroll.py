"""PayrollEngine: the single entry point for every ledger operation.

Mutating operations follow the same shape: authorize, validate, move funds
through the host (where applicable), then commit. Nothing is written until
every check has passed, so a raised ``LedgerPayError`` always leaves the
ledger exactly as it was.
"""

from __future__ import annotations

from typing import Optional

from ledgerpay.core.config import AppSettings, CadenceConfig
from ledgerpay.core.exceptions import (
    EmployeeNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerPayError,
    TransferFailedError,
    UnauthorizedError,
)
from ledgerpay.core.logging_config import LogContext, get_logger
from ledgerpay.core.protocols import IFundsTransfer, IHeightSource
from ledgerpay.core.types import Amount, EmployeeId, PaymentId, Principal, ScheduleId
from ledgerpay.engine.salary import calculate_salary, is_due
from ledgerpay.ledger.employees import EmployeeRegistry
from ledgerpay.ledger.payments import PaymentLedger
from ledgerpay.ledger.schedules import ScheduleRegistry
from ledgerpay.ledger.treasury import Treasury
from ledgerpay.models.employee import Employee
from ledgerpay.models.payment import PaymentRecord
from ledgerpay.models.schedule import PayrollSchedule

logger = get_logger("engine.payroll")


class PayrollEngine:
    """Owns the employee registry, treasury, payment ledger and schedules.

    Host collaborators (height source, funds transfer) are injected at
    construction time. The engine assumes one transition at a time and does
    no locking of its own.
    """

    def __init__(
        self,
        *,
        owner: Principal,
        height_source: IHeightSource,
        funds: IFundsTransfer,
        cadence: CadenceConfig | None = None,
    ) -> None:
        self._owner = owner
        self._heights = height_source
        self._funds = funds
        self._cadence = cadence or CadenceConfig()
        self._employees = EmployeeRegistry()
        self._treasury = Treasury()
        self._payments = PaymentLedger()
        self._schedules = ScheduleRegistry()

    @classmethod
    def from_settings(
        cls, settings: AppSettings, *, height_source: IHeightSource, funds: IFundsTransfer
    ) -> PayrollEngine:
        return cls(
            owner=settings.owner,
            height_source=height_source,
            funds=funds,
            cadence=settings.cadence,
        )

    @property
    def owner(self) -> Principal:
        return self._owner

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _now(self) -> int:
        return self._heights.current_height()

    def _authorize(self, caller: Principal, operation: str) -> None:
        if caller != self._owner:
            raise UnauthorizedError(caller, operation)

    def _require_employee(self, employee_id: EmployeeId) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def _rejected(self, operation: str, exc: LedgerPayError) -> None:
        logger.warning(
            "%s rejected: %s", operation, exc, extra={"error_code": exc.code}
        )

    # ------------------------------------------------------------------
    # Employee registry
    # ------------------------------------------------------------------

    def add_employee(
        self,
        wallet: Principal,
        annual_salary: Amount,
        role: str,
        department: str,
        frequency: str,
        *,
        caller: Principal,
    ) -> EmployeeId:
        now = self._now()
        with LogContext.bind(caller=caller, operation="add_employee", height=now):
            try:
                self._authorize(caller, "add employees")
                if annual_salary <= 0:
                    raise InvalidAmountError("annual_salary", annual_salary)
            except LedgerPayError as exc:
                self._rejected("add_employee", exc)
                raise

            employee_id = self._employees.add(
                Employee(
                    wallet_address=wallet,
                    annual_salary=annual_salary,
                    role=role,
                    department=department,
                    start_date=now,
                    pay_frequency=str(frequency),
                )
            )
            logger.info(
                "Employee %d added", employee_id,
                extra={"employee_id": employee_id, "department": department},
            )
            return employee_id

    def update_salary(
        self, employee_id: EmployeeId, new_salary: Amount, *, caller: Principal
    ) -> Amount:
        with LogContext.bind(caller=caller, operation="update_salary", height=self._now()):
            try:
                self._authorize(caller, "update salaries")
                if new_salary <= 0:
                    raise InvalidAmountError("new_salary", new_salary)
                employee = self._require_employee(employee_id)
            except LedgerPayError as exc:
                self._rejected("update_salary", exc)
                raise

            self._employees.replace(
                employee_id, employee.model_copy(update={"annual_salary": new_salary})
            )
            logger.info(
                "Salary updated for employee %d", employee_id,
                extra={"employee_id": employee_id, "annual_salary": new_salary},
            )
            return new_salary

    def deactivate_employee(self, employee_id: EmployeeId, *, caller: Principal) -> bool:
        """Clear the active flag. Repeat calls succeed; there is no reactivation."""
        with LogContext.bind(caller=caller, operation="deactivate_employee", height=self._now()):
            try:
                self._authorize(caller, "deactivate employees")
                employee = self._require_employee(employee_id)
            except LedgerPayError as exc:
                self._rejected("deactivate_employee", exc)
                raise

            self._employees.replace(employee_id, employee.model_copy(update={"is_active": False}))
            logger.info("Employee %d deactivated", employee_id, extra={"employee_id": employee_id})
            return True

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def process_payment(
        self,
        employee_id: EmployeeId,
        bonus: Amount = 0,
        deductions: Amount = 0,
        *,
        caller: Principal,
    ) -> Amount:
        """Pay one period's salary plus ``bonus`` minus ``deductions``.

        Inactive employees are reported as ``EmployeeNotFoundError``, the same
        as absent ones.
        """
        now = self._now()
        with LogContext.bind(caller=caller, operation="process_payment", height=now):
            try:
                self._authorize(caller, "process payments")
                employee = self._employees.get(employee_id)
                if employee is None or not employee.is_active:
                    raise EmployeeNotFoundError(employee_id)
                if bonus < 0:
                    raise InvalidAmountError("bonus", bonus)
                if deductions < 0:
                    raise InvalidAmountError("deductions", deductions)

                base = calculate_salary(employee.annual_salary, employee.pay_frequency)
                total = base - deductions + bonus
                if total < 0:
                    raise InvalidAmountError("total", total)
                if not self._treasury.covers(total):
                    raise InsufficientFundsError(required=total, available=self._treasury.balance)

                try:
                    self._funds.pay_out(employee.wallet_address, total)
                except Exception as err:
                    raise TransferFailedError("pay_out", total, str(err)) from err
            except LedgerPayError as exc:
                self._rejected("process_payment", exc)
                raise

            self._treasury.debit(total)
            payment_id = self._payments.append(
                PaymentRecord(
                    employee_id=employee_id,
                    payment_id=self._payments.next_id,
                    amount=total,
                    payment_date=now,
                    period_start=employee.last_payment,
                    period_end=now,
                    bonus=bonus,
                    deductions=deductions,
                )
            )
            self._employees.replace(employee_id, employee.model_copy(update={"last_payment": now}))
            logger.info(
                "Paid %d to employee %d", total, employee_id,
                extra={"employee_id": employee_id, "payment_id": payment_id, "amount": total},
            )
            return total

    def set_bonus(self, employee_id: EmployeeId, amount: Amount, *, caller: Principal) -> bool:
        """Validate a bonus for ``employee_id``.

        The bonus is not stored; pass it to ``process_payment`` instead.
        """
        with LogContext.bind(caller=caller, operation="set_bonus", height=self._now()):
            try:
                self._authorize(caller, "set bonuses")
                self._require_employee(employee_id)
                if amount < 0:
                    raise InvalidAmountError("bonus", amount)
            except LedgerPayError as exc:
                self._rejected("set_bonus", exc)
                raise
            return True

    def process_department_payroll(self, department: str, *, caller: Principal) -> bool:
        """Validate a department-wide payroll run. Employees are not iterated."""
        with LogContext.bind(caller=caller, operation="process_department_payroll", height=self._now()):
            try:
                self._authorize(caller, "process department payroll")
            except LedgerPayError as exc:
                self._rejected("process_department_payroll", exc)
                raise
            logger.info("Department payroll accepted for %s", department, extra={"department": department})
            return True

    # ------------------------------------------------------------------
    # Treasury
    # ------------------------------------------------------------------

    def fund_treasury(self, amount: Amount, *, caller: Principal) -> Amount:
        with LogContext.bind(caller=caller, operation="fund_treasury", height=self._now()):
            try:
                self._authorize(caller, "fund the treasury")
                if amount < 0:
                    raise InvalidAmountError("amount", amount)
                try:
                    self._funds.deposit(caller, amount)
                except Exception as err:
                    raise TransferFailedError("deposit", amount, str(err)) from err
            except LedgerPayError as exc:
                self._rejected("fund_treasury", exc)
                raise

            balance = self._treasury.credit(amount)
            logger.info("Treasury funded with %d", amount, extra={"amount": amount, "balance": balance})
            return balance

    # ------------------------------------------------------------------
    # Schedules
    # ------------------------------------------------------------------

    def create_schedule(
        self,
        name: str,
        frequency: str,
        next_execution: int,
        department_filter: Optional[str] = None,
        *,
        caller: Principal,
    ) -> ScheduleId:
        with LogContext.bind(caller=caller, operation="create_schedule", height=self._now()):
            try:
                self._authorize(caller, "create schedules")
            except LedgerPayError as exc:
                self._rejected("create_schedule", exc)
                raise

            schedule_id = self._schedules.add(
                PayrollSchedule(
                    name=name,
                    frequency=str(frequency),
                    next_execution=next_execution,
                    department_filter=department_filter,
                )
            )
            logger.info("Schedule %d created", schedule_id, extra={"schedule_id": schedule_id})
            return schedule_id

    def execute_schedule(self, schedule_id: ScheduleId, *, caller: Principal) -> bool:
        """Check that a schedule may run now.

        A missing schedule raises ``EmployeeNotFoundError``; an inactive or
        not-yet-due one raises ``UnauthorizedError``. No payments are made.
        """
        now = self._now()
        with LogContext.bind(caller=caller, operation="execute_schedule", height=now):
            try:
                self._authorize(caller, "execute schedules")
                schedule = self._schedules.get(schedule_id)
                if schedule is None:
                    raise EmployeeNotFoundError(schedule_id, f"Schedule {schedule_id} not found")
                if not schedule.is_active:
                    raise UnauthorizedError(caller, "execute schedules", f"schedule {schedule_id} inactive")
                if now < schedule.next_execution:
                    raise UnauthorizedError(
                        caller, "execute schedules",
                        f"schedule {schedule_id} not due until {schedule.next_execution}",
                    )
            except LedgerPayError as exc:
                self._rejected("execute_schedule", exc)
                raise
            logger.info("Schedule %d executed", schedule_id, extra={"schedule_id": schedule_id})
            return True

    # ------------------------------------------------------------------
    # Read-only projections
    # ------------------------------------------------------------------

    def get_employee(self, employee_id: EmployeeId) -> Employee | None:
        return self._employees.get(employee_id)

    def get_treasury_balance(self) -> Amount:
        return self._treasury.balance

    def get_next_payment(self, employee_id: EmployeeId) -> Amount:
        employee = self._employees.get(employee_id)
        if employee is None:
            return 0
        return calculate_salary(employee.annual_salary, employee.pay_frequency)

    def is_payment_due(self, employee_id: EmployeeId) -> bool:
        employee = self._employees.get(employee_id)
        if employee is None:
            return False
        return is_due(self._now() - employee.last_payment, employee.pay_frequency, self._cadence)

    def get_employee_count(self) -> int:
        return self._employees.count()

    def get_payment(self, employee_id: EmployeeId, payment_id: PaymentId) -> PaymentRecord | None:
        return self._payments.get(employee_id, payment_id)

    def get_payment_history(self, employee_id: EmployeeId) -> list[PaymentRecord]:
        return self._payments.for_employee(employee_id)

    def get_schedule(self, schedule_id: ScheduleId) -> PayrollSchedule | None:
        return self._schedules.get(schedule_id)
