"""AZG rule constants and their textual renderings.

Reference: https://www.ris.bka.gv.at/GeltendeFassung.wxe?Abfrage=Bundesnormen&Gesetzesnummer=10008238
"""

from .types import RuleSet

AZG_RULES = RuleSet()


def rules_reference(rules: RuleSet = AZG_RULES) -> list[tuple[str, float, str]]:
    """Rows of (label, value, unit) shown next to a compliance report."""
    return [
        ("Max. daily working time", rules.max_daily_hours, "h"),
        ("Min. rest between shifts", rules.min_daily_rest_hours, "h"),
        ("Max. weekly working time", rules.max_weekly_hours, "h"),
        ("Normal weekly working time", rules.normal_weekly_hours, "h"),
        ("Max. consecutive work days", rules.max_consecutive_work_days, "days"),
        ("Max. night shift", rules.max_night_shift_hours, "h"),
        ("Mandatory break after", rules.break_threshold_hours, "h"),
        ("Min. break", rules.min_break_minutes, "min"),
    ]


def format_rules_for_prompt(rules: RuleSet = AZG_RULES) -> str:
    """Plain-text rule block for embedding into text-generation prompts."""
    return "\n".join([
        "AZG RULES:",
        f"- Max. daily working time: {rules.max_daily_hours:g}h",
        f"- Min. rest: {rules.min_daily_rest_hours:g}h between shifts",
        f"- Max. weekly working time: {rules.max_weekly_hours:g}h "
        f"(normal {rules.normal_weekly_hours:g}h, average max {rules.avg_weekly_max_hours:g}h "
        f"over {rules.averaging_period_weeks} weeks)",
        f"- Max. consecutive work days: {rules.max_consecutive_work_days}",
        f"- Night work ({rules.night_work_start_hour:02d}:00-{rules.night_work_end_hour:02d}:00): "
        f"max {rules.max_night_shift_hours:g}h",
        f"- Mandatory break from {rules.break_threshold_hours:g}h: "
        f"at least {rules.min_break_minutes} minutes",
    ])
