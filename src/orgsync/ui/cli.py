# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from orgsync.app import (
    run_report,
    seed_database,
    update_department,
    update_employee,
    update_project,
)
from orgsync.config import configure_logging
from orgsync.domain.entity_updates import (
    Amount,
    DepartmentUpdate,
    EmployeeUpdate,
    ProjectUpdate,
    ReconciliationError,
    UtcDatetime,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from orgsync.adapters.sqlalchemy.queries import SqlAlchemyOrganizationQueries


log = logging.getLogger(__name__)

# snapshots, entities and report values are dataclasses, Decimals and datetimes
_RESULT: TypeAdapter[Any] = TypeAdapter(Any)


_UPDATERS: dict[str, Callable[[dict[str, object]], object]] = {
    "employee": lambda payload: update_employee(EmployeeUpdate.from_mapping(payload)),
    "project": lambda payload: update_project(ProjectUpdate.from_mapping(payload)),
    "department": lambda payload: update_department(DepartmentUpdate.from_mapping(payload)),
}


def _parse_with[T](adapter: TypeAdapter[T]) -> Callable[[str], T]:
    def parse(value: str) -> T:
        try:
            return adapter.validate_python(value)
        except ValidationError as exc:
            message = exc.errors()[0]["msg"]
            raise argparse.ArgumentTypeError(f"invalid value {value!r}: {message}") from exc

    return parse


_parse_timestamp = _parse_with(TypeAdapter(UtcDatetime))
_parse_amount = _parse_with(TypeAdapter(Amount))


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile organization data")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed", help="Load the sample organization")

    update = subparsers.add_parser("update", help="Apply a desired-state JSON document")
    update.add_argument("kind", choices=sorted(_UPDATERS), help="Entity kind to update")
    update.add_argument(
        "path",
        type=str,
        help="Path to a JSON file with the complete desired state ('-' reads stdin)",
    )

    report = subparsers.add_parser("report", help="Read-only reports")
    report_sub = report.add_subparsers(dest="report", required=True)
    by_department = report_sub.add_parser("employees-by-department")
    by_department.add_argument("department")
    total_salary = report_sub.add_parser("total-salary")
    total_salary.add_argument("department")
    salary_above = report_sub.add_parser("salary-above")
    salary_above.add_argument("amount", type=_parse_amount)
    hired_in = report_sub.add_parser("hired-in")
    hired_in.add_argument("year", type=int)
    report_sub.add_parser("highest-budget")
    hired_between = report_sub.add_parser("hired-between")
    hired_between.add_argument("start", type=_parse_timestamp)
    hired_between.add_argument("end", type=_parse_timestamp)
    top_paid = report_sub.add_parser("top-paid")
    top_paid.add_argument("count", type=int)
    average_above = report_sub.add_parser("average-salary-above")
    average_above.add_argument("amount", type=_parse_amount)

    return parser.parse_args(list(argv))


def _load_payload(path: str) -> dict[str, object]:
    try:
        raw = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
        payload = json.loads(raw)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read desired state from {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Desired state must be a JSON object")
    return payload


def _report_query(args: argparse.Namespace) -> Callable[[SqlAlchemyOrganizationQueries], object]:
    match args.report:
        case "employees-by-department":
            return lambda q: q.employees_by_department(args.department)
        case "total-salary":
            return lambda q: q.total_salary_by_department(args.department)
        case "salary-above":
            return lambda q: q.employees_with_salary_above(args.amount)
        case "hired-in":
            return lambda q: q.employees_hired_in_year(args.year)
        case "highest-budget":
            return lambda q: q.department_with_highest_budget()
        case "hired-between":
            return lambda q: q.employees_hired_between(args.start, args.end)
        case "top-paid":
            return lambda q: q.top_paid_employees(args.count)
        case "average-salary-above":
            return lambda q: q.departments_with_average_salary_above(args.amount)
        case _:
            raise ValueError(f"Unsupported report: {args.report}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        if parsed_args.command == "seed":
            seed_database()
            return
        if parsed_args.command == "update":
            payload = _load_payload(parsed_args.path)
            result = _UPDATERS[parsed_args.kind](payload)
        else:
            result = run_report(_report_query(parsed_args))
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except ReconciliationError as exc:
        log.error("Update rejected: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    print(_RESULT.dump_json(result, indent=2).decode())


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
