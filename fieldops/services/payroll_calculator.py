"""
Payroll calculator - hours, distance and pay for one employee over one period

Works on already-filtered attendance and daily-distance rows and returns a
PayrollResult; persisting it is the caller's job (see payroll_service).
"""
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from fieldops.core.errors import InvalidConfiguration, InvalidInput
from fieldops.models.payroll import PayrollStatus
from fieldops.utils.datetime_utils import ensure_utc
from fieldops.utils.rounding import round_half_up

SECONDS_PER_HOUR = 3600


class PayRates(Protocol):
    id: int
    base_pay_rate: Optional[float]
    distance_pay_rate: Optional[float]


class WorkedShift(Protocol):
    check_in_time: datetime
    check_out_time: Optional[datetime]


class DistanceTotal(Protocol):
    distance_km: float


@dataclass(frozen=True)
class PayrollResult:
    employee_id: int
    period_start: date
    period_end: date
    hours_worked: float
    distance_traveled: float
    base_pay: float
    distance_pay: float
    total_pay: float
    status: PayrollStatus = PayrollStatus.CALCULATED


def _usable_rate(employee: PayRates, label: str, rate) -> float:
    """Rates must be finite and non-negative."""
    try:
        rate = float(rate)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"Employee {employee.id} has a non-numeric {label}")
    if not math.isfinite(rate) or rate < 0:
        raise InvalidConfiguration(f"Employee {employee.id} has an invalid {label}: {rate}")
    return rate


def _require_base_rate(employee: PayRates) -> float:
    if employee.base_pay_rate is None:
        raise InvalidConfiguration(f"Employee {employee.id} has no base pay rate configured")
    return _usable_rate(employee, "base pay rate", employee.base_pay_rate)


def _distance_rate(employee: PayRates) -> Optional[float]:
    """None when the employee is not eligible for distance pay."""
    if employee.distance_pay_rate is None:
        return None
    return _usable_rate(employee, "distance pay rate", employee.distance_pay_rate)


def hours_worked(records: Sequence[WorkedShift]) -> float:
    """Unrounded hours over records with both check-in and check-out; open records count 0."""
    total = 0.0
    for record in records:
        if record.check_in_time is None or record.check_out_time is None:
            continue
        worked = ensure_utc(record.check_out_time) - ensure_utc(record.check_in_time)
        total += worked.total_seconds() / SECONDS_PER_HOUR
    return total


def calculate_payroll(
    employee: PayRates,
    attendance_records: Sequence[WorkedShift],
    distance_records: Sequence[DistanceTotal],
    period_start: date,
    period_end: date,
) -> PayrollResult:
    """
    Calculate one payroll result

    Base pay is hours worked times base_pay_rate (a per-hour rate). Distance
    pay is only earned when distance_pay_rate is set. Base and distance pay
    come from the full-precision hour and distance sums and are rounded on
    their own; total pay is the sum of those two stored figures.

    Raises:
        InvalidConfiguration: If the employee has no usable base pay rate, or
            a distance pay rate that is set but not finite and non-negative
        InvalidInput: If period_start is after period_end
    """
    if period_start > period_end:
        raise InvalidInput("period_start must be on or before period_end")

    base_rate = _require_base_rate(employee)
    distance_rate = _distance_rate(employee)

    hours = hours_worked(attendance_records)
    distance = sum(float(record.distance_km) for record in distance_records)

    base_pay = hours * base_rate
    if distance_rate is not None:
        distance_pay = distance * distance_rate
    else:
        distance_pay = 0.0
    if not (math.isfinite(base_pay) and math.isfinite(distance_pay)):
        raise InvalidConfiguration(f"Employee {employee.id} pay rates overflow for this period")
    rounded_base_pay = round_half_up(base_pay)
    rounded_distance_pay = round_half_up(distance_pay)

    return PayrollResult(
        employee_id=employee.id,
        period_start=period_start,
        period_end=period_end,
        hours_worked=round_half_up(hours),
        distance_traveled=round_half_up(distance),
        base_pay=rounded_base_pay,
        distance_pay=rounded_distance_pay,
        # Equals base_pay + distance_pay as stored
        total_pay=round_half_up(rounded_base_pay + rounded_distance_pay),
    )
