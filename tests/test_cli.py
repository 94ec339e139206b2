from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from factory_payroll.leaves.service import LeaveService
from factory_payroll.main import _COMMANDS, build_parser
from factory_payroll.payroll.sheet import SalarySheetService


@pytest.fixture
def container(uow_factory, policy, payroll, advances):
    return SimpleNamespace(
        payroll_service=payroll,
        leave_service=LeaveService(uow_factory, payroll),
        advance_service=advances,
        sheet_service=SalarySheetService(uow_factory, policy),
    )


def _run(container, *argv):
    args = build_parser().parse_args(argv)
    return _COMMANDS[args.command](container, args)


def test_recalc_accepts_repeated_months():
    args = build_parser().parse_args(["recalc", "--employee", "1", "--month", "2025-05", "--month", "2025-06"])

    assert args.employee == [1]
    assert args.month == ["2025-05", "2025-06"]


def test_recalc_prints_each_record(store, container, capsys):
    store.add_employee(1)
    store.fill_month(1, "2025-06")

    assert _run(container, "recalc", "--employee", "1", "--month", "2025-06") == 0
    assert "net=30000.00" in capsys.readouterr().out


def test_status_lists_labels(store, container, capsys):
    store.add_employee(1)
    store.fill_month(1, "2025-06")

    assert _run(container, "status", "--employee", "1", "--month", "2025-06") == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 30
    assert out[0] == "2025-06-01\tLeave credited"


def test_status_for_unknown_employee_fails(container, capsys):
    assert _run(container, "status", "--employee", "4", "--month", "2025-06") == 1


def test_leave_then_balance(store, container, capsys):
    store.add_employee(1, date_of_joining=date(2025, 1, 10))

    _run(container, "leave", "--employee", "1", "--date", "2025-06-04", "--days", "0.5")
    _run(container, "balance", "--employee", "1", "--on", "2025-06-15")

    assert capsys.readouterr().out.splitlines()[-1] == "Leave balance 4.0"
    assert store.salaries[(1, "2025-06")].employee_id == 1


def test_sheet_and_advance(store, container, capsys):
    store.add_employee(1)
    store.fill_month(1, "2025-06")
    store.advances_given[1] = Decimal("100")

    _run(container, "recalc", "--employee", "1", "--month", "2025-06")
    _run(container, "advance", "--employee", "1", "--month", "2025-06", "--amount", "100")
    _run(container, "sheet", "--employee", "1", "--month", "2025-06")

    out = capsys.readouterr().out
    assert "Deducted 100: deduction=100.00 net=29900.00" in out
    assert "Outstanding advance 0.00" in out
