"""Type definitions for the compliance module."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from utils.time import combine


class ViolationType(str, Enum):
    """Types of compliance violations."""
    MAX_DAILY_HOURS = "MAX_DAILY_HOURS"
    MIN_REST_TIME = "MIN_REST_TIME"
    MAX_WEEKLY_HOURS = "MAX_WEEKLY_HOURS"
    AVG_WEEKLY_HOURS = "AVG_WEEKLY_HOURS"  # Reserved, no validator emits it yet
    CONSECUTIVE_DAYS = "CONSECUTIVE_DAYS"
    NIGHT_WORK_LIMIT = "NIGHT_WORK_LIMIT"
    MISSING_BREAK = "MISSING_BREAK"


class ViolationSeverity(str, Enum):
    """Severity levels for violations."""
    WARNING = "warning"  # Reported, does not affect is_compliant
    VIOLATION = "violation"  # Breaks compliance


@dataclass(frozen=True)
class RuleSet:
    """Working-time thresholds of the Austrian Arbeitszeitgesetz (AZG)."""

    # Daily rest (§ 12 AZG)
    min_daily_rest_hours: float = 11

    # Daily maximum incl. overtime (§ 9 AZG)
    max_daily_hours: float = 12

    # Normal working time (§ 3 AZG)
    normal_daily_hours: float = 8
    normal_weekly_hours: float = 40

    # Average over the averaging period (§ 9 AZG)
    avg_weekly_max_hours: float = 48
    averaging_period_weeks: int = 17

    # Weekly maximum incl. overtime (§ 9 AZG)
    max_weekly_hours: float = 60

    # Night window 22:00 - 05:00 (§ 12a AZG)
    night_work_start_hour: int = 22
    night_work_end_hour: int = 5
    max_night_shift_hours: float = 10

    # Break after 6h of work (§ 11 AZG)
    break_threshold_hours: float = 6
    min_break_minutes: int = 30

    max_consecutive_work_days: int = 6

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Shift:
    """A single shift of one employee.

    ``end_time`` earlier than ``start_time`` means the shift ends on the
    following calendar day.
    """
    id: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM, 24h
    end_time: str  # HH:MM, 24h
    break_minutes: int
    employee_id: str

    @property
    def start_datetime(self) -> datetime:
        """Get start as datetime."""
        return combine(self.date, self.start_time)

    @property
    def end_datetime(self) -> datetime:
        """Get end as datetime on the shift's own date (no overnight shift applied)."""
        return combine(self.date, self.end_time)


@dataclass(frozen=True)
class ViolationDetails:
    actual: float
    limit: float
    date: Optional[str] = None
    employee_id: Optional[str] = None


@dataclass(frozen=True)
class ComplianceViolation:
    """A single compliance finding."""
    type: ViolationType
    severity: ViolationSeverity
    message: str
    details: ViolationDetails

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
            "details": asdict(self.details),
        }


@dataclass
class ComplianceReport:
    """Result of a full compliance check for one employee."""
    violations: list[ComplianceViolation] = field(default_factory=list)
    is_compliant: bool = True
    score: int = 100

    @property
    def violation_count(self) -> int:
        """Count of violation-level findings."""
        return sum(1 for v in self.violations if v.severity == ViolationSeverity.VIOLATION)

    @property
    def warning_count(self) -> int:
        """Count of warning-level findings."""
        return sum(1 for v in self.violations if v.severity == ViolationSeverity.WARNING)

    def grouped_by_type(self) -> dict[ViolationType, list[ComplianceViolation]]:
        """Group findings by type, types in order of first appearance."""
        groups: dict[ViolationType, list[ComplianceViolation]] = {}
        for violation in self.violations:
            groups.setdefault(violation.type, []).append(violation)
        return groups

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "is_compliant": self.is_compliant,
            "score": self.score,
            "violations": [v.to_dict() for v in self.violations],
            "violation_count": self.violation_count,
            "warning_count": self.warning_count,
        }
