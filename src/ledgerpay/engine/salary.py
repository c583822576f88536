"""Pure salary and due-date calculations."""

from __future__ import annotations

from ledgerpay.core.config import CadenceConfig
from ledgerpay.models.employee import PayFrequency

PERIODS_PER_YEAR: dict[PayFrequency, int] = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BIWEEKLY: 26,
    PayFrequency.MONTHLY: 12,
}


def calculate_salary(annual_salary: int, frequency: str) -> int:
    """Gross pay for one period at ``frequency``.

    Unknown frequencies yield 0 rather than an error. ``InvalidFrequencyError``
    exists for this case but is not raised, to keep existing callers working.
    """
    periods = PERIODS_PER_YEAR.get(frequency)
    if periods is None:
        return 0
    return annual_salary // periods


def is_due(elapsed: int, frequency: str, cadence: CadenceConfig) -> bool:
    """True once ``elapsed`` height units reach the threshold for ``frequency``."""
    threshold = cadence.threshold(frequency)
    if threshold is None:
        return False
    return elapsed >= threshold
