"""Payroll operations exposed over HTTP.

Mutating operations are POST routes that require the caller header; reads
are GET routes without authorization. Handlers are coroutines so every
engine call runs on the event loop, one at a time. Ledger errors are rendered
by the application-level handler.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ledgerpay.api.deps import get_caller, get_engine
from ledgerpay.api.schemas import (
    AddEmployeeRequest,
    AmountRequest,
    PaymentRequest,
    SalaryRequest,
    ScheduleRequest,
)
from ledgerpay.engine.payroll import PayrollEngine

router = APIRouter(tags=["payroll"])


# ---------- mutating ----------

@router.post("/employees")
async def add_employee(
    body: AddEmployeeRequest,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, int]:
    employee_id = engine.add_employee(
        body.wallet, body.annual_salary, body.role, body.department, body.pay_frequency,
        caller=caller,
    )
    return {"employee_id": employee_id}


@router.post("/employees/{employee_id}/payments")
async def process_payment(
    employee_id: int,
    body: PaymentRequest,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, int]:
    amount = engine.process_payment(employee_id, body.bonus, body.deductions, caller=caller)
    return {"amount": amount}


@router.post("/employees/{employee_id}/salary")
async def update_salary(
    employee_id: int,
    body: SalaryRequest,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, int]:
    return {"annual_salary": engine.update_salary(employee_id, body.new_salary, caller=caller)}


@router.post("/employees/{employee_id}/deactivate")
async def deactivate_employee(
    employee_id: int,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, bool]:
    return {"ok": engine.deactivate_employee(employee_id, caller=caller)}


@router.post("/employees/{employee_id}/bonus")
async def set_bonus(
    employee_id: int,
    body: AmountRequest,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, bool]:
    return {"ok": engine.set_bonus(employee_id, body.amount, caller=caller)}


@router.post("/treasury/fund")
async def fund_treasury(
    body: AmountRequest,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, int]:
    return {"balance": engine.fund_treasury(body.amount, caller=caller)}


@router.post("/departments/{department}/run")
async def process_department_payroll(
    department: str,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, bool]:
    return {"ok": engine.process_department_payroll(department, caller=caller)}


@router.post("/schedules")
async def create_schedule(
    body: ScheduleRequest,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, int]:
    schedule_id = engine.create_schedule(
        body.name, body.frequency, body.next_execution, body.department_filter,
        caller=caller,
    )
    return {"schedule_id": schedule_id}


@router.post("/schedules/{schedule_id}/execute")
async def execute_schedule(
    schedule_id: int,
    engine: PayrollEngine = Depends(get_engine),
    caller: str = Depends(get_caller),
) -> dict[str, bool]:
    return {"ok": engine.execute_schedule(schedule_id, caller=caller)}


# ---------- read-only ----------

@router.get("/employees/count")
async def get_employee_count(engine: PayrollEngine = Depends(get_engine)) -> dict[str, int]:
    return {"count": engine.get_employee_count()}


@router.get("/employees/{employee_id}")
async def get_employee(employee_id: int, engine: PayrollEngine = Depends(get_engine)) -> dict[str, Any]:
    employee = engine.get_employee(employee_id)
    return {"employee": employee.model_dump() if employee else None}


@router.get("/employees/{employee_id}/next-payment")
async def get_next_payment(employee_id: int, engine: PayrollEngine = Depends(get_engine)) -> dict[str, int]:
    return {"amount": engine.get_next_payment(employee_id)}


@router.get("/employees/{employee_id}/due")
async def is_payment_due(employee_id: int, engine: PayrollEngine = Depends(get_engine)) -> dict[str, bool]:
    return {"due": engine.is_payment_due(employee_id)}


@router.get("/employees/{employee_id}/payments")
async def get_payment_history(employee_id: int, engine: PayrollEngine = Depends(get_engine)) -> dict[str, Any]:
    return {"payments": [p.model_dump() for p in engine.get_payment_history(employee_id)]}


@router.get("/employees/{employee_id}/payments/{payment_id}")
async def get_payment(
    employee_id: int, payment_id: int, engine: PayrollEngine = Depends(get_engine)
) -> dict[str, Any]:
    payment = engine.get_payment(employee_id, payment_id)
    return {"payment": payment.model_dump() if payment else None}


@router.get("/treasury")
async def get_treasury_balance(engine: PayrollEngine = Depends(get_engine)) -> dict[str, int]:
    return {"balance": engine.get_treasury_balance()}


@router.get("/schedules/{schedule_id}")
async def get_schedule(schedule_id: int, engine: PayrollEngine = Depends(get_engine)) -> dict[str, Any]:
    schedule = engine.get_schedule(schedule_id)
    return {"schedule": schedule.model_dump() if schedule else None}
