"""CLI for the training dashboard metrics engine.

Developer CLI to run a dashboard metrics pass offline from a JSON export of
the data layer, and to check session rows against the data-entry rules.
"""

import json
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dashboard.activities.validation import validate_rating, validate_session
from dashboard.core.logger import setup_logger
from dashboard.metrics.acwr import format_chronic_load, format_ratio
from dashboard.metrics.errors import MetricsInputError
from dashboard.metrics.plan_realization import format_percent, plan_status
from dashboard.metrics.recommendations import format_category, format_priority
from dashboard.metrics.srpe import normalize_activity
from models.dashboard_inputs import DashboardInputs
from models.workload_state import WorkloadState
from state.workload_state_builder import build_workload_state

console = Console()

app = typer.Typer(
    name="dashboard-cli",
    help="Training dashboard CLI - workload metrics and session checks",
    add_completion=False,
)

PRIORITY_STYLES = {"danger": "bold red", "warning": "yellow", "success": "green"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    setup_logger(verbose=verbose)


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(Panel(Text(f"Cannot read {path}", style="bold red"), subtitle=str(e), border_style="red"))
        raise typer.Exit(1) from e


def _render_state(state: WorkloadState) -> None:
    readiness = state.readiness
    readiness_text = f"{readiness.value:.1f} ({readiness.label})" if readiness.value is not None else "n/a"
    _, _, plan_label = plan_status(state.plan.percent)

    summary = Text()
    summary.append(f"Week {state.week_start.isoformat()} - {state.week_end.isoformat()}\n", style="bold")
    summary.append(f"Acute (7d):     {state.acute_load_7d:.0f} AU\n")
    summary.append(f"Chronic (28d):  {format_chronic_load(state.chronic_load_28d)} [{state.chronic_method}]\n")
    summary.append(f"ACWR:           {format_ratio(state.acwr.ratio)} ")
    summary.append(state.acwr.label, style=state.acwr.color)
    summary.append(
        f"\nPlan:           {format_percent(state.plan.percent)} "
        f"({state.plan.done_count}/{state.plan.planned_count}, {plan_label})\n"
    )
    summary.append(f"Readiness:      {readiness_text}")
    console.print(Panel(summary, title=f"Workload as of {state.today.isoformat()}", border_style="cyan"))

    table = Table(title="Recommendations")
    table.add_column("Priority")
    table.add_column("Category")
    table.add_column("Recommendation")
    for recommendation in state.recommendations:
        label, color = format_priority(recommendation.priority)
        table.add_row(
            Text(label, style=PRIORITY_STYLES[color]),
            format_category(recommendation.category),
            recommendation.text,
        )
    console.print(table)


@app.command()
def metrics(
    input_path: Path = typer.Argument(..., help="Dashboard inputs JSON file"),
    method: str | None = typer.Option(None, "--method", "-m", help="Chronic method: trailing_avg or ewma"),
    today: str | None = typer.Option(None, "--today", help="Override today (YYYY-MM-DD)"),
    as_json: bool = typer.Option(False, "--json", help="Print the workload state as JSON"),
) -> None:
    """Compute dashboard workload metrics from a JSON export.

    The file holds activities, history, readiness and today (plus optional
    week_start / week_end / chronic_method).
    """
    raw = _load_json(input_path)
    if today is not None and isinstance(raw, dict):
        raw["today"] = today

    try:
        inputs = DashboardInputs.model_validate(raw)
        state = build_workload_state(
            activities=[normalize_activity(row) for row in inputs.activities],
            history=inputs.history,
            readiness=inputs.readiness,
            today=inputs.today,
            week_start=inputs.week_start,
            week_end=inputs.week_end,
            method=method or inputs.chronic_method,
        )
    except (ValidationError, MetricsInputError) as e:
        logger.error(f"Metrics pass failed for {input_path}: {e}")
        console.print(Panel(Text("Invalid dashboard inputs", style="bold red"), subtitle=str(e), border_style="red"))
        raise typer.Exit(1) from e

    if as_json:
        console.print(JSON(state.model_dump_json()))
        return
    _render_state(state)


@app.command()
def validate(
    input_path: Path = typer.Argument(..., help="JSON file with a list of session rows"),
) -> None:
    """Check session rows against the data-entry rules.

    Ratings (intensity, difficulty, satisfaction) are checked when all three
    are present. Exits with code 1 when any row is invalid.
    """
    rows = _load_json(input_path)
    if not isinstance(rows, list):
        console.print("[red]Expected a JSON list of session rows[/red]")
        raise typer.Exit(1)

    invalid = 0
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            invalid += 1
            console.print(f"[red]✗[/red] #{index}: not a session object")
            continue
        errors = validate_session(row)
        if all(row.get(key) is not None for key in ("intensity", "difficulty", "satisfaction")):
            errors.extend(validate_rating(row["intensity"], row["difficulty"], row["satisfaction"]))

        label = row.get("id", f"#{index}")
        if errors:
            invalid += 1
            console.print(f"[red]✗[/red] {label}: {', '.join(errors)}")
        else:
            console.print(f"[green]✓[/green] {label}")

    logger.info(f"Validated {len(rows)} sessions, {invalid} invalid")
    if invalid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
