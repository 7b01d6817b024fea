"""Compliance validation engine that orchestrates all validators."""

import logging
from collections import defaultdict
from datetime import timedelta
from typing import Sequence

from utils.time import parse_day

from .rules import AZG_RULES
from .types import (
    ComplianceReport,
    ComplianceViolation,
    RuleSet,
    Shift,
    ViolationSeverity,
)
from .validators import (
    BaseValidator,
    ConsecutiveDaysValidator,
    RestTimeValidator,
    ShiftValidator,
    WeeklyHoursValidator,
    calculate_shift_hours,
    is_night_work,
)

VIOLATION_PENALTY = 20
WARNING_PENALTY = 5


def calculate_score(violations: Sequence[ComplianceViolation]) -> int:
    """Score from 100 down, 20 per violation and 5 per warning, floored at 0."""
    critical = sum(1 for v in violations if v.severity == ViolationSeverity.VIOLATION)
    warnings = sum(1 for v in violations if v.severity == ViolationSeverity.WARNING)

    score = 100 - critical * VIOLATION_PENALTY - warnings * WARNING_PENALTY
    return max(0, score)


def week_starts_for(shifts: Sequence[Shift]) -> list[str]:
    """Sorted Mondays of every ISO week touched by the shifts."""
    mondays = set()
    for shift in shifts:
        day = parse_day(shift.date)
        mondays.add(day - timedelta(days=day.weekday()))
    return [d.isoformat() for d in sorted(mondays)]


class ComplianceEngine:
    """
    Main engine for running compliance validation.

    Runs the per-shift checks, then rest time and consecutive days over the
    whole set. Weekly hours are only part of the report when
    ``include_weekly_hours`` is set; otherwise callers run them per week.
    """

    def __init__(self, rules: RuleSet = AZG_RULES, include_weekly_hours: bool = False):
        self.rules = rules
        self.include_weekly_hours = include_weekly_hours
        self.validators: list[BaseValidator] = [
            ShiftValidator(rules),
            RestTimeValidator(rules),
            ConsecutiveDaysValidator(rules),
        ]

    def validate(self, shifts: Sequence[Shift]) -> ComplianceReport:
        """
        Run all compliance validations for one employee.

        Args:
            shifts: The employee's shifts for the period

        Returns:
            ComplianceReport with all findings and the score
        """
        violations: list[ComplianceViolation] = []

        for validator in self.validators:
            violations.extend(validator.validate(shifts))

        if self.include_weekly_hours:
            for week_start in week_starts_for(shifts):
                violations.extend(WeeklyHoursValidator(week_start, self.rules).validate(shifts))

        report = ComplianceReport(
            violations=violations,
            is_compliant=not any(v.severity == ViolationSeverity.VIOLATION for v in violations),
            score=calculate_score(violations),
        )
        logging.debug(
            f"Checked {len(shifts)} shifts: {report.violation_count} violations, "
            f"{report.warning_count} warnings, score {report.score}"
        )
        return report

    def validate_roster(self, shifts: Sequence[Shift]) -> dict[str, ComplianceReport]:
        """Validate a mixed list of shifts, one report per employee."""
        employee_shifts: dict[str, list[Shift]] = defaultdict(list)
        for shift in shifts:
            employee_shifts[shift.employee_id].append(shift)

        return {
            employee_id: self.validate(emp_shifts)
            for employee_id, emp_shifts in employee_shifts.items()
        }


def validate_shift(shift: Shift, rules: RuleSet = AZG_RULES) -> list[ComplianceViolation]:
    """Per-shift checks in order: daily maximum, night shift cap, break."""
    return ShiftValidator(rules).check(shift)


def validate_rest_time(shifts: Sequence[Shift], rules: RuleSet = AZG_RULES) -> list[ComplianceViolation]:
    """Minimum rest between adjacent shifts, sorted by (date, start_time)."""
    return RestTimeValidator(rules).validate(shifts)


def validate_weekly_hours(
    shifts: Sequence[Shift],
    week_start: str,
    rules: RuleSet = AZG_RULES,
) -> list[ComplianceViolation]:
    """At most one weekly-hours finding for the week starting at ``week_start``."""
    return WeeklyHoursValidator(week_start, rules).validate(shifts)


def validate_consecutive_days(shifts: Sequence[Shift], rules: RuleSet = AZG_RULES) -> list[ComplianceViolation]:
    return ConsecutiveDaysValidator(rules).validate(shifts)


def check_full_compliance(shifts: Sequence[Shift], rules: RuleSet = AZG_RULES) -> ComplianceReport:
    """
    Full compliance check for one employee's shifts.

    This is a convenience function for use in the API layer.
    """
    return ComplianceEngine(rules).validate(shifts)


def check_roster_compliance(shifts: Sequence[Shift], rules: RuleSet = AZG_RULES) -> dict[str, ComplianceReport]:
    return ComplianceEngine(rules).validate_roster(shifts)

