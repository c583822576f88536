"""Schedule registry for recurring payroll runs."""

from __future__ import annotations

from ledgerpay.core.types import ScheduleId
from ledgerpay.models.schedule import PayrollSchedule


class ScheduleRegistry:
    def __init__(self) -> None:
        self._schedules: dict[ScheduleId, PayrollSchedule] = {}
        self._next_id: ScheduleId = 1

    def add(self, schedule: PayrollSchedule) -> ScheduleId:
        schedule_id = self._next_id
        self._schedules[schedule_id] = schedule
        self._next_id += 1
        return schedule_id

    def get(self, schedule_id: ScheduleId) -> PayrollSchedule | None:
        return self._schedules.get(schedule_id)
