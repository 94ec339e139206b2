from datetime import date, timedelta
from decimal import Decimal

import pytest

from factory_payroll.core.enums import WageType
from factory_payroll.core.exceptions import NotFoundError
from factory_payroll.payroll.sheet import SalarySheetService

MONTH = "2025-06"


@pytest.fixture
def sheets(uow_factory, policy):
    return SalarySheetService(uow_factory, policy)


def test_monthly_sheet_rows(store, payroll, sheets):
    store.add_employee(1)
    store.fill_month(1, MONTH)
    store.punch(1, date(2025, 6, 12), "09:00", "15:00")
    store.advances_given[1] = Decimal("800")
    record = payroll.calculate_salary_for_month(1, MONTH)

    sheet = sheets.build(1, MONTH)
    rows = {r.work_date: r for r in sheet.rows}

    assert len(sheet.rows) == 30
    assert rows["2025-06-12"].hours == "05:30"
    assert rows["2025-06-12"].lunch_deduction == 30
    assert rows["2025-06-12"].undertime == "03:30"
    assert rows["2025-06-12"].status == "Half Day"
    assert rows["2025-06-02"].punch_in == "09:00"
    assert rows["2025-06-02"].overtime == "00:00"
    assert rows["2025-06-08"].status == "Leave credited"
    assert sheet.undertime_total == "03:30"
    assert sheet.daily_rate == Decimal(1000)
    assert sheet.salary == record
    assert sheet.outstanding_advance == Decimal("800")


def test_dihadi_sheet_for_first_half(store, sheets):
    store.add_employee(5, wage_type=WageType.DIHADI, base_salary=Decimal("9000"), allotted_hours=Decimal("300"))
    for i in range(20):
        store.punch(5, date(2025, 6, 2) + timedelta(days=i), "09:00", "20:00")
    store.punch(5, date(2025, 6, 3), "09:30", "20:00")

    sheet = sheets.build(5, MONTH, half=1)
    rows = {r.work_date: r for r in sheet.rows}

    assert len(sheet.rows) == 15
    assert rows["2025-06-01"].status == "Absent"
    assert rows["2025-06-01"].hours == "00:00"
    assert rows["2025-06-03"].note == "Late arrival after 09:15"
    assert rows["2025-06-03"].overtime is None
    assert sheet.total_hours == "138:30"
    assert sheet.hourly_rate == Decimal(30)
    assert sheet.partial_amount == Decimal("4155.00")
    assert sheet.salary is None


def test_unknown_employee(sheets):
    with pytest.raises(NotFoundError):
        sheets.build(9, MONTH)


def test_dihadi_sheet_starts_at_joining_date(store, sheets):
    store.add_employee(
        5,
        wage_type=WageType.DIHADI,
        base_salary=Decimal("9000"),
        allotted_hours=Decimal("300"),
        date_of_joining=date(2025, 6, 10),
    )
    for i in range(20):
        store.punch(5, date(2025, 6, 2) + timedelta(days=i), "09:00", "20:00")

    sheet = sheets.build(5, MONTH, half=1)

    assert [r.work_date for r in sheet.rows][0] == "2025-06-10"
    assert len(sheet.rows) == 6
    assert sheet.total_hours == "60:00"
    assert sheet.partial_amount == Decimal("1800.00")
