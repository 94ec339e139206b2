from decimal import Decimal

import pytest

from factory_payroll.core.exceptions import NotFoundError, ValidationError
from factory_payroll.payroll.model import SalaryRecord

MONTH = "2025-06"


@pytest.fixture
def june_salary(store):
    store.add_employee(1)
    store.advances_given[1] = Decimal("5000")
    record = SalaryRecord.build(employee_id=1, month=MONTH, gross=30000, deduction=2500)
    store.salaries[(1, MONTH)] = record
    return record


def test_deduction_reduces_latest_net(store, advances, june_salary):
    record = advances.deduct_advance(1, MONTH, "1500")

    assert record.deduction == Decimal("4000.00")
    assert record.net == Decimal("26000.00")
    assert store.salaries[(1, MONTH)] == record
    assert store.advance_deductions == [(1, MONTH, Decimal("1500.00"))]


def test_only_one_deduction_per_month(store, advances, june_salary):
    advances.deduct_advance(1, MONTH, 1000)

    with pytest.raises(ValidationError):
        advances.deduct_advance(1, MONTH, 1000)
    assert len(store.advance_deductions) == 1


def test_cannot_exceed_outstanding(store, advances, june_salary):
    with pytest.raises(ValidationError):
        advances.deduct_advance(1, MONTH, "5000.01")
    assert store.salaries[(1, MONTH)] == june_salary


@pytest.mark.parametrize("amount", ["0", "-10", "abc", "0.001", "0.004"])
def test_amount_must_be_positive(store, advances, june_salary, amount):
    with pytest.raises(ValidationError):
        advances.deduct_advance(1, MONTH, amount)
    assert store.advance_deductions == []


def test_only_latest_salary_can_be_touched(store, advances, june_salary):
    store.salaries[(1, "2025-07")] = SalaryRecord.build(employee_id=1, month="2025-07", gross=30000, deduction=0)

    with pytest.raises(ValidationError):
        advances.deduct_advance(1, MONTH, 100)


def test_unknown_employee(advances):
    with pytest.raises(NotFoundError):
        advances.deduct_advance(42, MONTH, 100)


def test_recalculation_keeps_the_deduction(store, payroll, advances):
    store.add_employee(1)
    store.fill_month(1, MONTH)
    store.advances_given[1] = Decimal("2000")
    payroll.calculate_salary_for_month(1, MONTH)

    deducted = advances.deduct_advance(1, MONTH, 1500)
    recalculated = payroll.calculate_salary_for_month(1, MONTH)

    assert deducted.net == Decimal("28500.00")
    assert recalculated == deducted
