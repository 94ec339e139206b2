from __future__ import annotations

import argparse
import importlib
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from dotenv import load_dotenv

from .common.datetime_utils import parse_iso_date
from .config import get_settings_module
from .container import build_container
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, list_tables
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="factory_payroll", description="Monthly and dihadi salary runs.")
    sub = parser.add_subparsers(dest="command", required=True)

    recalc = sub.add_parser("recalc", help="Recompute and store salary for employee-months")
    recalc.add_argument("--employee", type=int, action="append", required=True)
    recalc.add_argument("--month", action="append", required=True)

    status = sub.add_parser("status", help="Print the day-by-day attendance labels")
    status.add_argument("--employee", type=int, required=True)
    status.add_argument("--month", required=True)

    sheet = sub.add_parser("sheet", help="Print the salary sheet")
    sheet.add_argument("--employee", type=int, required=True)
    sheet.add_argument("--month", required=True)
    sheet.add_argument("--half", type=int, choices=(1, 2), default=None)

    leave = sub.add_parser("leave", help="Record leave taken and recompute that month")
    leave.add_argument("--employee", type=int, required=True)
    leave.add_argument("--date", required=True, help="YYYY-MM-DD")
    leave.add_argument("--days", default="1")
    leave.add_argument("--remark", default="")

    balance = sub.add_parser("balance", help="Print the leave balance")
    balance.add_argument("--employee", type=int, required=True)
    balance.add_argument("--on", default=None, help="YYYY-MM-DD, defaults to today")

    advance = sub.add_parser("advance", help="Deduct part of an outstanding advance from the latest salary")
    advance.add_argument("--employee", type=int, required=True)
    advance.add_argument("--month", required=True)
    advance.add_argument("--amount", required=True)

    sub.add_parser("init-db", help="Create the database and missing tables")
    return parser


def _recalc(container, args) -> int:
    pairs = [(e, m) for e in args.employee for m in args.month]
    for record in container.payroll_service.recalculate_many(pairs):
        print(f"{record.employee_id}\t{record.month}\tgross={record.gross}\tdeduction={record.deduction}\tnet={record.net}")
    return 0


def _status(container, args) -> int:
    outcomes = container.payroll_service.classify_month(args.employee, args.month)
    if outcomes is None:
        print("No monthly employee with that id", file=sys.stderr)
        return 1
    for outcome in outcomes:
        print(f"{outcome.work_date.isoformat()}\t{outcome.label}")
    return 0


def _sheet(container, args) -> int:
    sheet = container.sheet_service.build(args.employee, args.month, half=args.half)
    print(f"{sheet.employee.name} ({sheet.employee.wage_type.value}) {sheet.month}")
    for row in sheet.rows:
        extra = f"\tOT {row.overtime}\tUT {row.undertime}" if row.overtime is not None else ""
        note = f"\t{row.note}" if row.note else ""
        print(f"{row.work_date}\t{row.punch_in}\t{row.punch_out}\t{row.hours}\t{row.status}{extra}{note}")

    if sheet.total_hours is not None:
        print(f"Total hours {sheet.total_hours} x {sheet.hourly_rate:.2f} = {sheet.partial_amount}")
    else:
        print(f"Overtime {sheet.overtime_total}  Undertime {sheet.undertime_total}")
    if sheet.salary:
        print(f"Gross {sheet.salary.gross}  Deduction {sheet.salary.deduction}  Net {sheet.salary.net}")
    print(f"Outstanding advance {sheet.outstanding_advance}")
    return 0



def _leave(container, args) -> int:
    container.leave_service.record_leave(args.employee, parse_iso_date(args.date), args.days, args.remark)
    print(f"Leave recorded for {args.employee} on {args.date}")
    return 0


def _balance(container, args) -> int:
    today = parse_iso_date(args.on) if args.on else date.today()
    balance = container.leave_service.leave_balance(args.employee, today)
    if balance is None:
        print("Dihadi employees have no leave balance")
    else:
        print(f"Leave balance {balance}")
    return 0


def _advance(container, args) -> int:
    record = container.advance_service.deduct_advance(args.employee, args.month, args.amount)
    print(f"Deducted {args.amount}: deduction={record.deduction} net={record.net}")
    return 0


_COMMANDS = {
    "recalc": _recalc,
    "status": _status,
    "sheet": _sheet,
    "leave": _leave,
    "balance": _balance,
    "advance": _advance,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    if args.command == "init-db" or getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if args.command == "init-db":
            return 0

    container = build_container(settings)
    try:
        return _COMMANDS[args.command](container, args)
    except DomainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
