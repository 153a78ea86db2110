"""CLI for the triathlon pacer.

Calculates swim/bike/run splits from whatever two of distance, time and
pace/speed are known per discipline, and manages saved pace sets.
"""

import sys
from dataclasses import dataclass
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# Handle direct execution (python cli/cli.py) as well as module execution
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pacer.config.settings import settings
from pacer.core.logger import setup_logger
from pacer.pace_sets.alerts import Alert, calculation_errors
from pacer.pace_sets.repository import PaceSetRepository
from pacer.pace_sets.service import PaceSetService
from pacer.pace_sets.store import SqlKeyValueStore
from pacer.pace_sets.types import PaceSet
from pacer.pacing.solver import solve_form
from pacer.pacing.types import DisciplineFields, FormSolution, RaceForm, TransitionFields

console = Console()

app = typer.Typer(
    name="pacer",
    help="Triathlon pacer - swim, bike and run splits and saved pace sets",
    add_completion=False,
)

RATE_LABELS = {
    "swim": "/100m",
    "bike": "km/h",
    "run": "/km",
}


@dataclass
class CliState:
    """Options shared by every command."""

    database_url: str


_state = CliState(database_url=settings.database_url)


def _service() -> PaceSetService:
    store = SqlKeyValueStore(_state.database_url)
    return PaceSetService(PaceSetRepository(store, key=settings.storage_key))


def _print_alert(alert: Alert, style: str = "red") -> None:
    console.print(Panel(escape(alert.message), title=escape(alert.title), border_style=style))


def _confirm(alert: Alert, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    primary = next((choice.label for choice in alert.choices if choice.style != "cancel"), "OK")
    return typer.confirm(f"{alert.message} [{primary}]", default=False)


def _discipline_row(label: str, fields: DisciplineFields, rate_unit: str, computed: str | None) -> list[str]:
    cells = {
        "distance": escape(fields.distance),
        "time": escape(fields.time),
        "pace_or_speed": escape(f"{fields.pace_or_speed} {rate_unit}") if fields.pace_or_speed else "",
    }
    if computed:
        cells[computed] = f"[bold green]{cells[computed]}[/bold green]"
    return [label, cells["distance"], cells["time"], cells["pace_or_speed"]]


def _print_solution(solution: FormSolution) -> None:
    table = Table(title="Race plan")
    table.add_column("Segment", style="cyan")
    table.add_column("Distance (m)", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Pace / Speed", justify="right")

    snapshot = solution.snapshot()
    table.add_row(*_discipline_row("Swim", snapshot.swim, RATE_LABELS["swim"], solution.swim.computed))
    table.add_row("T1", "", escape(snapshot.t1.time), "")
    table.add_row(*_discipline_row("Bike", snapshot.bike, RATE_LABELS["bike"], solution.bike.computed))
    table.add_row("T2", "", escape(snapshot.t2.time), "")
    table.add_row(*_discipline_row("Run", snapshot.run, RATE_LABELS["run"], solution.run.computed))
    console.print(table)

    if solution.start_time:
        console.print(f"Start: {escape(solution.start_time)}")
    if solution.total:
        console.print(f"[bold]Total time: {solution.total.display}[/bold]")
    else:
        console.print("[dim]No total time computed.[/dim]")


def _print_pace_set(pace_set: PaceSet) -> None:
    table = Table(title=escape(pace_set.name))
    table.add_column("Segment", style="cyan")
    table.add_column("Distance (m)", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Pace / Speed", justify="right")
    table.add_row(*_discipline_row("Swim", pace_set.swim, RATE_LABELS["swim"], None))
    table.add_row("T1", "", escape(pace_set.t1.time), "")
    table.add_row(*_discipline_row("Bike", pace_set.bike, RATE_LABELS["bike"], None))
    table.add_row("T2", "", escape(pace_set.t2.time), "")
    table.add_row(*_discipline_row("Run", pace_set.run, RATE_LABELS["run"], None))
    console.print(table)
    if pace_set.start_time:
        console.print(f"Start: {escape(pace_set.start_time)}")
    console.print(f"[bold]Total time: {escape(pace_set.total_time)}[/bold]")
    console.print(f"[dim]Saved {pace_set.created_at:%Y-%m-%d %H:%M} (id {escape(pace_set.id)})[/dim]")


@app.callback()
def main(
    db: str = typer.Option(None, "--db", help="Database URL (default: PACER_DATABASE_URL or ./pacer.db)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Triathlon pacer."""
    setup_logger(debug=debug)
    _state.database_url = db or settings.database_url


@app.command()
def calc(
    swim_distance: str = typer.Option("", "--swim-distance", help="Swim distance in meters"),
    swim_time: str = typer.Option("", "--swim-time", help="Swim time (HH:MM:SS, MM:SS or SS)"),
    swim_pace: str = typer.Option("", "--swim-pace", help="Swim pace per 100 m (MM:SS)"),
    t1: str = typer.Option("", "--t1", help="Transition 1 time"),
    bike_distance: str = typer.Option("", "--bike-distance", help="Bike distance in meters"),
    bike_time: str = typer.Option("", "--bike-time", help="Bike time (HH:MM:SS, MM:SS or SS)"),
    bike_speed: str = typer.Option("", "--bike-speed", help="Bike speed in km/h"),
    t2: str = typer.Option("", "--t2", help="Transition 2 time"),
    run_distance: str = typer.Option("", "--run-distance", help="Run distance in meters"),
    run_time: str = typer.Option("", "--run-time", help="Run time (HH:MM:SS, MM:SS or SS)"),
    run_pace: str = typer.Option("", "--run-pace", help="Run pace per km (MM:SS)"),
    start: str = typer.Option("", "--start", help="Start time of day (HH:MM)"),
    save: str = typer.Option(None, "--save", help="Save the result under this name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Replace a pace set with the same name without asking"),
) -> None:
    """Calculate the missing value per discipline and the total race time.

    Examples:
        # Olympic distance with paces and bike speed
        pacer calc --swim-distance 1500 --swim-pace 1:40 --t1 2:00 \\
            --bike-distance 40000 --bike-speed 36 --t2 1:30 \\
            --run-distance 10000 --run-pace 5:00

        # Save the plan
        pacer calc --run-distance 10000 --run-time 50:00 --save "Club 10k"
    """
    form = RaceForm(
        swim=DisciplineFields(distance=swim_distance, time=swim_time, pace_or_speed=swim_pace),
        t1=TransitionFields(time=t1),
        bike=DisciplineFields(distance=bike_distance, time=bike_time, pace_or_speed=bike_speed),
        t2=TransitionFields(time=t2),
        run=DisciplineFields(distance=run_distance, time=run_time, pace_or_speed=run_pace),
        start_time=start,
    )
    solution = solve_form(form, speed_ceiling=settings.max_speed_kmh)
    _print_solution(solution)

    if solution.errors:
        _print_alert(calculation_errors(solution.errors), style="yellow")

    if save is not None:
        _save_solution(save, solution, yes)

    if solution.errors:
        raise typer.Exit(1)


def _save_solution(name: str, solution: FormSolution, assume_yes: bool) -> None:
    service = _service()
    outcome = service.save(name, solution)

    if outcome.status == "conflict":
        if not _confirm(outcome.alert, assume_yes):
            console.print("[yellow]Not saved.[/yellow]")
            return
        outcome = service.save(name, solution, confirm_overwrite=True)

    if outcome.saved:
        _print_alert(outcome.alert, style="green")
        return

    _print_alert(outcome.alert)
    raise typer.Exit(1)


@app.command("list")
def list_pace_sets() -> None:
    """List saved pace sets, newest first."""
    service = _service()
    alert = service.refresh()
    if alert:
        _print_alert(alert)
        raise typer.Exit(1)

    if not service.pace_sets:
        console.print("No pace sets saved yet.")
        return

    table = Table(title="Saved pace sets")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Total time", justify="right")
    table.add_column("Start")
    table.add_column("Saved")
    for pace_set in service.pace_sets:
        table.add_row(
            escape(pace_set.id),
            escape(pace_set.name),
            escape(pace_set.total_time or "N/A"),
            escape(pace_set.start_time or ""),
            f"{pace_set.created_at:%Y-%m-%d %H:%M}",
        )
    console.print(table)


def _lookup(service: PaceSetService, name_or_id: str) -> PaceSet:
    alert = service.refresh()
    if alert:
        _print_alert(alert)
        raise typer.Exit(1)
    pace_set = service.get(name_or_id)
    if pace_set is None:
        pace_set = next((candidate for candidate in service.pace_sets if candidate.matches_name(name_or_id)), None)
    if pace_set is None:
        console.print(f"[red]Error:[/red] No pace set matching {escape(repr(name_or_id))}")
        raise typer.Exit(1)
    return pace_set


@app.command()
def show(name_or_id: str = typer.Argument(..., help="Pace set id or name")) -> None:
    """Show a saved pace set."""
    _print_pace_set(_lookup(_service(), name_or_id))


@app.command()
def delete(
    name_or_id: str = typer.Argument(..., help="Pace set id or name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Delete without asking"),
) -> None:
    """Delete a saved pace set."""
    service = _service()
    pace_set = _lookup(service, name_or_id)

    if not _confirm(service.request_delete(pace_set.id), yes):
        console.print("[yellow]Cancelled.[/yellow]")
        return

    outcome = service.delete(pace_set.id)
    if not outcome.deleted:
        _print_alert(outcome.alert)
        logger.warning(f"Delete of {pace_set.id} did not complete")
        raise typer.Exit(1)
    _print_alert(outcome.alert, style="green")


if __name__ == "__main__":
    app()
