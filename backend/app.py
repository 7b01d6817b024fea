import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from compliance import (
    AZG_RULES,
    ComplianceEngine,
    format_rules_for_prompt,
    rules_reference,
    validate_weekly_hours,
)
from config import CORS_ORIGINS, COMPLIANCE_INCLUDE_WEEKLY_HOURS, setup_logging
from schemas import (
    ComplianceCheckRequest,
    ComplianceReportSchema,
    ComplianceViolationSchema,
    RuleReferenceRow,
    RulesPromptResponse,
    RulesResponse,
    WeeklyCheckRequest,
)

setup_logging()

app = FastAPI(title="azg-compliance")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_engine() -> ComplianceEngine:
    return ComplianceEngine(AZG_RULES, include_weekly_hours=COMPLIANCE_INCLUDE_WEEKLY_HOURS)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/compliance/rules", response_model=RulesResponse)
async def get_compliance_rules():
    """Get the AZG thresholds and the reference rows for display."""
    return RulesResponse(
        rules=AZG_RULES.to_dict(),
        reference=[
            RuleReferenceRow(label=label, value=value, unit=unit)
            for label, value, unit in rules_reference(AZG_RULES)
        ],
    )


@app.get("/compliance/rules/prompt", response_model=RulesPromptResponse)
async def get_compliance_rules_prompt():
    """Get the AZG thresholds as a plain-text block for prompt assembly."""
    return RulesPromptResponse(text=format_rules_for_prompt(AZG_RULES))


@app.post("/compliance/check", response_model=ComplianceReportSchema)
async def check_compliance(request: ComplianceCheckRequest):
    """Full compliance check for one employee's shifts."""
    shifts = [s.to_shift() for s in request.shifts]
    try:
        report = get_engine().validate(shifts)
    except ValueError as e:
        logging.warning(f"Rejected shifts for compliance check: {e}")
        raise HTTPException(status_code=422, detail=f"Invalid shift data: {e}")

    return ComplianceReportSchema.from_report(report)


@app.post("/compliance/check/week", response_model=list[ComplianceViolationSchema])
async def check_weekly_hours(request: WeeklyCheckRequest):
    """Weekly hours check for the week starting at week_start."""
    shifts = [s.to_shift() for s in request.shifts]
    try:
        violations = validate_weekly_hours(shifts, request.week_start, AZG_RULES)
    except ValueError as e:
        logging.warning(f"Rejected shifts for weekly check: {e}")
        raise HTTPException(status_code=422, detail=f"Invalid shift data: {e}")

    return [ComplianceViolationSchema.from_violation(v) for v in violations]


@app.post("/compliance/check/roster", response_model=dict[str, ComplianceReportSchema])
async def check_roster(request: ComplianceCheckRequest):
    """Compliance reports for shifts of several employees, keyed by employee id."""
    shifts = [s.to_shift() for s in request.shifts]
    try:
        reports = get_engine().validate_roster(shifts)
    except ValueError as e:
        logging.warning(f"Rejected shifts for roster check: {e}")
        raise HTTPException(status_code=422, detail=f"Invalid shift data: {e}")

    return {
        employee_id: ComplianceReportSchema.from_report(report)
        for employee_id, report in reports.items()
    }
