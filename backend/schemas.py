from pydantic import BaseModel, Field

from compliance.types import ComplianceReport, ComplianceViolation, Shift

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"


class ShiftSchema(BaseModel):
    """A normalized shift as supplied by the scheduling-system adapter."""
    id: str
    date: str = Field(pattern=DATE_PATTERN)  # ISO date string: "2025-01-20"
    start_time: str = Field(pattern=TIME_PATTERN)  # "HH:MM", 24h
    end_time: str = Field(pattern=TIME_PATTERN)
    break_minutes: int = Field(default=0, ge=0)
    employee_id: str

    def to_shift(self) -> Shift:
        return Shift(
            id=self.id,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            break_minutes=self.break_minutes,
            employee_id=self.employee_id,
        )


class ViolationDetailsSchema(BaseModel):
    actual: float
    limit: float
    date: str | None = None
    employee_id: str | None = None


class ComplianceViolationSchema(BaseModel):
    """Compliance violation detected in a shift set."""
    type: str  # "MAX_DAILY_HOURS", "MIN_REST_TIME", etc.
    severity: str  # "violation", "warning"
    message: str
    details: ViolationDetailsSchema

    @classmethod
    def from_violation(cls, violation: ComplianceViolation) -> "ComplianceViolationSchema":
        return cls.model_validate(violation.to_dict())


class ComplianceReportSchema(BaseModel):
    is_compliant: bool
    score: int
    violations: list[ComplianceViolationSchema]
    violation_count: int
    warning_count: int

    @classmethod
    def from_report(cls, report: ComplianceReport) -> "ComplianceReportSchema":
        return cls.model_validate(report.to_dict())


class ComplianceCheckRequest(BaseModel):
    shifts: list[ShiftSchema]


class WeeklyCheckRequest(BaseModel):
    shifts: list[ShiftSchema]
    week_start: str = Field(pattern=DATE_PATTERN)


class RuleReferenceRow(BaseModel):
    label: str
    value: float
    unit: str


class RulesResponse(BaseModel):
    rules: dict[str, float]
    reference: list[RuleReferenceRow]


class RulesPromptResponse(BaseModel):
    text: str
