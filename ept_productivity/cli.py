from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ept_productivity import __version__
from ept_productivity.config import Settings
from ept_productivity.engine.errors import InvalidInput
from ept_productivity.engine.reference import EPT_CHOICES, EXPERTISE_MULTIPLIERS, ROLE_DEFAULTS
from ept_productivity.export.csv_export import export_csv, write_csv
from ept_productivity.export.report import render_report
from ept_productivity.models.enums import ExperienceLevel
from ept_productivity.models.form import CalculationForm
from ept_productivity.workspace import CalculationWorkspace

logger = logging.getLogger(__name__)

# argparse dest -> CalculationForm field
_FORM_ARGS = {
    "cost": "cost_per_employee",
    "employees": "employee_count",
    "tasks": "expected_tasks_per_day",
    "clicks": "clicks_per_task",
    "experience": "experience_level",
    "ept": "ept",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ept-productivity",
        description="Estimate how page latency (EPT) affects role productivity and labor value.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="cmd", required=True)

    calc = sub.add_parser("calculate", help="Compute productivity for one or more role cohorts.")
    calc.add_argument("--role", help="Role label; known roles fill in default tasks and clicks")
    calc.add_argument("--cost", help="Average wage per employee per year ($)")
    calc.add_argument("--employees", help="Number of employees at this expertise level")
    calc.add_argument("--tasks", help="Expected tasks per day (quota)")
    calc.add_argument("--clicks", help="Average clicks per task")
    calc.add_argument(
        "--experience",
        choices=[level.value for level in ExperienceLevel],
        help="Cohort expertise",
    )
    calc.add_argument("--ept", help="Experienced page time in seconds (0.3-4.0)")
    calc.add_argument(
        "--forms",
        type=Path,
        help="JSON file with a list of form objects, one calculation each",
    )
    calc.add_argument(
        "--format",
        dest="output_format",
        choices=["report", "csv"],
        default="report",
        help="Output format",
    )
    calc.add_argument(
        "--output",
        nargs="?",
        const="",
        help="Write CSV to a file (implies --format csv); "
        "without a path the configured file name is used",
    )

    sub.add_parser("choices", help="List roles, expertise levels and EPT values.")

    return parser


def load_form_file(path: Path) -> list[dict[str, Any]]:
    """Read a JSON list of form objects keyed by CalculationForm field names."""
    with open(path, "r") as f:
        raw = json.load(f)

    if not isinstance(raw, list) or not raw:
        raise ValueError(f"{path} must contain a non-empty JSON list of forms")
    for i, entry in enumerate(raw, start=1):
        if not isinstance(entry, dict):
            raise ValueError(f"Form {i} in {path} must be a JSON object")
    return raw


def _form_values_from_args(args: argparse.Namespace) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if args.role:
        values["role"] = args.role
    for dest, field_name in _FORM_ARGS.items():
        raw = getattr(args, dest)
        if raw is not None:
            values[field_name] = raw
    return values


def build_form(values: dict[str, Any], settings: Settings) -> CalculationForm:
    """Start from the default form, apply role defaults, then explicit values."""
    form = CalculationForm.default()
    if values.get("role"):
        form = form.with_role_defaults(values["role"])

    merged: dict[str, Any] = form.model_dump()
    merged.update(values)
    return CalculationForm.model_validate(merged, context={"strict_ept": settings.strict_ept})


def cmd_calculate(args: argparse.Namespace, settings: Settings) -> int:
    field_values = _form_values_from_args(args)
    if args.forms is not None:
        if field_values:
            print("--forms cannot be combined with per-field options", file=sys.stderr)
            return 2
        try:
            entries = load_form_file(args.forms)
        except (OSError, ValueError) as e:
            print(f"Cannot read forms: {e}", file=sys.stderr)
            return 2
    else:
        entries = [field_values]

    try:
        forms = [build_form(entry, settings) for entry in entries]
    except ValidationError as e:
        print(f"Invalid form values:\n{e}", file=sys.stderr)
        return 2

    workspace = CalculationWorkspace()
    workspace.update_form(workspace.primary_id, forms[0])
    for form in forms[1:]:
        workspace.add_slot(form)

    for i, slot in enumerate(workspace.slots, start=1):
        try:
            workspace.calculate(slot.slot_id)
        except InvalidInput as e:
            print(f"Cannot calculate form {i}: {e}", file=sys.stderr)
            return 2

    results = workspace.results()
    if args.output is not None:
        write_csv(results, Path(args.output or settings.csv_filename))
    elif args.output_format == "csv":
        print(export_csv(results))
    else:
        print(render_report(results, title=settings.report_title), end="")
    return 0


def cmd_choices(args: argparse.Namespace, settings: Settings) -> int:
    print("Roles (default tasks/day, clicks/task):")
    for role, defaults in ROLE_DEFAULTS.items():
        print(f"  {role.value}: {defaults['tasks']}, {defaults['clicks']}")
    print("Expertise levels (multiplier):")
    for level, multiplier in EXPERTISE_MULTIPLIERS.items():
        print(f"  {level.value}: {multiplier:.2f}")
    print("EPT (seconds): " + ", ".join(f"{ept:.1f}" for ept in EPT_CHOICES))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("Running command %s", args.cmd)

    if args.cmd == "calculate":
        return cmd_calculate(args, settings)
    if args.cmd == "choices":
        return cmd_choices(args, settings)

    parser.error(f"Unknown command: {args.cmd}")
    return 2
