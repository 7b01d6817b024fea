"""AZG labor law compliance module for shift scheduling."""

from .types import (
    ComplianceReport,
    ComplianceViolation,
    RuleSet,
    Shift,
    ViolationDetails,
    ViolationType,
    ViolationSeverity,
)
from .rules import AZG_RULES, format_rules_for_prompt, rules_reference
from .engine import (
    ComplianceEngine,
    calculate_score,
    check_full_compliance,
    check_roster_compliance,
    validate_consecutive_days,
    validate_rest_time,
    validate_shift,
    validate_weekly_hours,
    week_starts_for,
)
from .validators import (
    BaseValidator,
    ShiftValidator,
    RestTimeValidator,
    WeeklyHoursValidator,
    ConsecutiveDaysValidator,
    calculate_rest_hours,
    calculate_shift_hours,
    is_night_work,
)

__all__ = [
    "ComplianceReport",
    "ComplianceViolation",
    "RuleSet",
    "Shift",
    "ViolationDetails",
    "ViolationType",
    "ViolationSeverity",
    "AZG_RULES",
    "format_rules_for_prompt",
    "rules_reference",
    "ComplianceEngine",
    "calculate_score",
    "check_full_compliance",
    "check_roster_compliance",
    "validate_consecutive_days",
    "validate_rest_time",
    "validate_shift",
    "validate_weekly_hours",
    "week_starts_for",
    "BaseValidator",
    "ShiftValidator",
    "RestTimeValidator",
    "WeeklyHoursValidator",
    "ConsecutiveDaysValidator",
    "calculate_rest_hours",
    "calculate_shift_hours",
    "is_night_work",
]
