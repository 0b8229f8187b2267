"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.document_loader import GigDocumentLoader
from ..config import AppConfig, load_config
from ..domain.consolidator import ScheduleConsolidator
from ..domain.day_assignment import assign_missing_days
from ..domain.exceptions import GigScheduleError
from ..domain.models import ScheduleSlot
from ..services.availability_normalizer import AvailabilityNormalizer

app = typer.Typer(
    name="gigschedule",
    help="Consolidate and normalize gig availability schedules",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./gigschedule.yaml")]
RepairOption = Annotated[Optional[bool], typer.Option("--repair-days/--no-repair-days", help="Assign weekdays to rows without a day. Defaults to the config setting.")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Gig availability schedule tools.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _render_slots(slots: List[ScheduleSlot], title: str) -> None:
    """Print slots as a table of working hours and working days."""
    if not slots:
        console.print("[yellow]No schedule specified[/yellow]")
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Working Hours", style="bold yellow")
    table.add_column("Working Days")

    for slot in slots:
        table.add_row(escape(str(slot.hours)), escape(", ".join(slot.days)))

    console.print()
    console.print(table)
    console.print()


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(1)


def _load(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)


@app.command()
def consolidate(
    path: Annotated[Path, typer.Argument(help="Gig document or schedule list (.json, .yaml)")],
    config_file: ConfigOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the slots as JSON.")] = False,
    repair_days: RepairOption = None,
):
    """
    Group the days of a schedule that share the same working hours.

    Examples:

        gigschedule consolidate gig.json
        gigschedule consolidate schedule.yaml --json
        gigschedule consolidate legacy_gig.json --repair-days
    """
    config = _load(config_file)
    repair = config.repair_missing_days if repair_days is None else repair_days

    try:
        document = GigDocumentLoader().load(path)
    except GigScheduleError as e:
        _fail(e)

    consolidator = ScheduleConsolidator()
    rows = consolidator.expand(AvailabilityNormalizer.extract_schedule(document))
    if repair:
        rows = assign_missing_days(rows, config.working_days)

    slots = consolidator.consolidate(rows)

    if as_json:
        typer.echo(json.dumps([slot.to_dict() for slot in slots], indent=2))
    else:
        _render_slots(slots, title=f"Schedule - {path.name}")


@app.command()
def normalize(
    path: Annotated[Path, typer.Argument(help="Gig document (.json, .yaml)")],
    config_file: ConfigOption = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the normalized gig to this file instead of printing it.")] = None,
    repair_days: RepairOption = None,
):
    """
    Normalize a gig's availability the way it is stored.
    """
    config = _load(config_file)
    repair = config.repair_missing_days if repair_days is None else repair_days

    loader = GigDocumentLoader()
    normalizer = AvailabilityNormalizer(
        ScheduleConsolidator(),
        repair_missing_days=repair,
        working_days=config.working_days,
        fallback=config.fallback_availability(),
    )

    try:
        document = loader.load(path)
        result = normalizer.normalize(document)
        normalized = result.apply_to(document)

        if output:
            loader.dump(normalized, output)
        else:
            typer.echo(loader.dumps(normalized))
    except GigScheduleError as e:
        _fail(e)

    summary = (
        f"{len(result.slots)} slot(s), {result.dropped_rows} dropped, "
        f"{result.duplicate_rows} duplicate(s), {result.repaired_rows} repaired"
    )
    if result.used_fallback:
        summary += ", default schedule used"

    if output:
        console.print(f"[green]✓ Normalized availability written to {output}[/green]")
        console.print(f"  {summary}")
    else:
        # keep stdout parseable when printing the document
        Console(stderr=True).print(summary)


@app.command()
def defaults(
    config_file: ConfigOption = None,
):
    """
    Show the default availability used for new gigs.
    """
    config = _load(config_file)
    availability = config.default_availability

    slots = ScheduleConsolidator().consolidate(
        [day.model_dump() for day in availability.schedule]
    )
    _render_slots(slots, title="Default Availability")

    if availability.time_zone:
        console.print(f"[bold]Time zone:[/bold] {escape(availability.time_zone)}")
    if availability.flexibility:
        console.print(f"[bold]Flexibility:[/bold] {escape(', '.join(availability.flexibility))}")
    if availability.minimum_hours:
        minimum = availability.minimum_hours
        parts = [
            f"{value} {period}"
            for period, value in (
                ("daily", minimum.daily),
                ("weekly", minimum.weekly),
                ("monthly", minimum.monthly),
            )
            if value is not None
        ]
        if parts:
            console.print(f"[bold]Minimum hours:[/bold] {', '.join(parts)}")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]gigschedule[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
