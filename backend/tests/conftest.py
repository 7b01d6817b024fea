import pytest

from compliance.types import Shift


@pytest.fixture
def make_shift():
    """Factory to create Shift objects."""
    counter = {"n": 0}

    def _make_shift(
        date_str: str,
        start_time: str,
        end_time: str,
        break_minutes: int = 0,
        employee: str = "emp-1",
        shift_id: str = None,
    ) -> Shift:
        counter["n"] += 1
        return Shift(
            id=shift_id or f"shift-{counter['n']}",
            date=date_str,
            start_time=start_time,
            end_time=end_time,
            break_minutes=break_minutes,
            employee_id=employee,
        )
    return _make_shift


@pytest.fixture
def consecutive_shifts(make_shift):
    """Factory for one 7.5h day shift on each of ``days`` consecutive dates in March 2024."""
    def _consecutive(days: int, first_day: int = 1, employee: str = "emp-1") -> list[Shift]:
        return [
            make_shift(f"2024-03-{day:02d}", "08:00", "16:00", break_minutes=30, employee=employee)
            for day in range(first_day, first_day + days)
        ]
    return _consecutive
