"""Compliance validators for AZG working-time rules."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional, Sequence

from utils.time import clock_minutes, parse_clock, parse_day

from .rules import AZG_RULES
from .types import (
    ComplianceViolation,
    RuleSet,
    Shift,
    ViolationDetails,
    ViolationSeverity,
    ViolationType,
)

MINUTES_PER_DAY = 24 * 60


def calculate_shift_hours(shift: Shift) -> float:
    """Worked hours of a shift, net of its break.

    An end time before the start time is read as ending on the next day.
    The result is not clamped, so a break longer than the shift gives a
    negative value.
    """
    start_minutes = clock_minutes(shift.start_time)
    end_minutes = clock_minutes(shift.end_time)

    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY

    return (end_minutes - start_minutes - shift.break_minutes) / 60


def is_night_work(shift: Shift, rules: RuleSet = AZG_RULES) -> bool:
    """Check whether a shift touches the night window, at hour granularity."""
    start_hour = parse_clock(shift.start_time).hour
    end_hour = parse_clock(shift.end_time).hour

    return (
        start_hour >= rules.night_work_start_hour
        or end_hour <= rules.night_work_end_hour
        or end_hour < start_hour  # Overnight shift
    )


def calculate_rest_hours(earlier: Shift, later: Shift) -> float:
    """Hours between the end of ``earlier`` and the start of ``later``.

    The end instant is ``earlier.date`` at ``earlier.end_time`` as written,
    even when ``earlier`` itself crosses midnight.
    """
    return (later.start_datetime - earlier.end_datetime).total_seconds() / 3600


class BaseValidator(ABC):
    """Base class for compliance validators."""

    def __init__(self, rules: RuleSet = AZG_RULES):
        self.rules = rules

    @abstractmethod
    def validate(self, shifts: Sequence[Shift]) -> list[ComplianceViolation]:
        """Validate one employee's shifts and return the findings."""
        pass


class ShiftValidator(BaseValidator):
    """Per-shift checks: daily maximum, night shift cap and mandatory break."""

    def validate(self, shifts: Sequence[Shift]) -> list[ComplianceViolation]:
        violations = []
        for shift in shifts:
            violations.extend(self.check(shift))
        return violations

    def check(self, shift: Shift) -> list[ComplianceViolation]:
        """Check a single shift."""
        rules = self.rules
        violations = []
        hours = calculate_shift_hours(shift)

        if hours > rules.max_daily_hours:
            violations.append(ComplianceViolation(
                type=ViolationType.MAX_DAILY_HOURS,
                severity=ViolationSeverity.VIOLATION,
                message=f"Daily working time of {hours:.1f}h exceeds maximum of {rules.max_daily_hours:g}h",
                details=ViolationDetails(
                    actual=hours,
                    limit=rules.max_daily_hours,
                    date=shift.date,
                    employee_id=shift.employee_id,
                ),
            ))

        if is_night_work(shift, rules) and hours > rules.max_night_shift_hours:
            violations.append(ComplianceViolation(
                type=ViolationType.NIGHT_WORK_LIMIT,
                severity=ViolationSeverity.VIOLATION,
                message=f"Night shift of {hours:.1f}h exceeds maximum of {rules.max_night_shift_hours:g}h",
                details=ViolationDetails(
                    actual=hours,
                    limit=rules.max_night_shift_hours,
                    date=shift.date,
                    employee_id=shift.employee_id,
                ),
            ))

        if hours > rules.break_threshold_hours and shift.break_minutes < rules.min_break_minutes:
            violations.append(ComplianceViolation(
                type=ViolationType.MISSING_BREAK,
                severity=ViolationSeverity.WARNING,
                message=f"{hours:.1f}h of work require a break of at least {rules.min_break_minutes} min",
                details=ViolationDetails(
                    actual=shift.break_minutes,
                    limit=rules.min_break_minutes,
                    date=shift.date,
                    employee_id=shift.employee_id,
                ),
            ))

        return violations


class RestTimeValidator(BaseValidator):
    """Validates minimum rest between adjacent shifts."""

    def validate(self, shifts: Sequence[Shift]) -> list[ComplianceViolation]:
        """Sort by (date, start_time) and check each adjacent pair."""
        rules = self.rules
        violations = []

        # Stable sort, ties keep input order
        sorted_shifts = sorted(shifts, key=lambda s: (s.date, s.start_time))

        for prev_shift, curr_shift in zip(sorted_shifts, sorted_shifts[1:]):
            rest_hours = calculate_rest_hours(prev_shift, curr_shift)

            if rest_hours < rules.min_daily_rest_hours:
                violations.append(ComplianceViolation(
                    type=ViolationType.MIN_REST_TIME,
                    severity=ViolationSeverity.VIOLATION,
                    message=f"Rest time of {rest_hours:.1f}h is below minimum of {rules.min_daily_rest_hours:g}h",
                    details=ViolationDetails(
                        actual=rest_hours,
                        limit=rules.min_daily_rest_hours,
                        date=curr_shift.date,
                        employee_id=prev_shift.employee_id,
                    ),
                ))

        return violations


class WeeklyHoursValidator(BaseValidator):
    """Validates the worked hours of the 7-day week starting at ``week_start``."""

    def __init__(self, week_start: str, rules: RuleSet = AZG_RULES):
        super().__init__(rules)
        self.week_start = week_start

    def validate(self, shifts: Sequence[Shift]) -> list[ComplianceViolation]:
        rules = self.rules
        first_day = parse_day(self.week_start)
        last_day = first_day + timedelta(days=6)

        week_shifts = [s for s in shifts if first_day <= parse_day(s.date) <= last_day]
        total_hours = sum(calculate_shift_hours(s) for s in week_shifts)
        employee_id: Optional[str] = week_shifts[0].employee_id if week_shifts else None

        if total_hours > rules.max_weekly_hours:
            return [ComplianceViolation(
                type=ViolationType.MAX_WEEKLY_HOURS,
                severity=ViolationSeverity.VIOLATION,
                message=f"Weekly working time of {total_hours:.1f}h exceeds maximum of {rules.max_weekly_hours:g}h",
                details=ViolationDetails(
                    actual=total_hours,
                    limit=rules.max_weekly_hours,
                    date=self.week_start,
                    employee_id=employee_id,
                ),
            )]

        if total_hours > rules.normal_weekly_hours:
            return [ComplianceViolation(
                type=ViolationType.MAX_WEEKLY_HOURS,
                severity=ViolationSeverity.WARNING,
                message=f"Weekly working time of {total_hours:.1f}h exceeds normal working time of {rules.normal_weekly_hours:g}h",
                details=ViolationDetails(
                    actual=total_hours,
                    limit=rules.normal_weekly_hours,
                    date=self.week_start,
                    employee_id=employee_id,
                ),
            )]

        return []


class ConsecutiveDaysValidator(BaseValidator):
    """Validates runs of consecutive calendar work days."""

    def validate(self, shifts: Sequence[Shift]) -> list[ComplianceViolation]:
        """Emit one finding per day beyond the allowed run length."""
        rules = self.rules
        violations = []

        work_dates = sorted({s.date for s in shifts})
        # Attributed to the first input shift, not the owner of the triggering date
        employee_id = shifts[0].employee_id if shifts else None

        consecutive = 1
        for prev_date, curr_date in zip(work_dates, work_dates[1:]):
            if (parse_day(curr_date) - parse_day(prev_date)).days != 1:
                consecutive = 1
                continue

            consecutive += 1
            if consecutive > rules.max_consecutive_work_days:
                violations.append(ComplianceViolation(
                    type=ViolationType.CONSECUTIVE_DAYS,
                    severity=ViolationSeverity.VIOLATION,
                    message=f"{consecutive} consecutive work days exceed maximum of {rules.max_consecutive_work_days}",
                    details=ViolationDetails(
                        actual=consecutive,
                        limit=rules.max_consecutive_work_days,
                        date=curr_date,
                        employee_id=employee_id,
                    ),
                ))

        return violations
