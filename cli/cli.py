"""CLI for the Hypertrophy Hub plan engine.

Developer CLI to browse catalogs, generate plans and progress them to the
next level locally. Plans are read and written as JSON files, the same
shape callers persist in a user's profile.
"""

from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.table import Table

from hypertrophy_hub.catalog.equipment import get_all_available_equipment, get_equipment_display_name
from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.loader import get_exercise_catalog, get_template_catalog
from hypertrophy_hub.catalog.validator import validate_catalogs
from hypertrophy_hub.config.settings import settings
from hypertrophy_hub.core.logger import setup_logger
from hypertrophy_hub.planning.assembler import generate_plan
from hypertrophy_hub.planning.errors import ConfigurationError
from hypertrophy_hub.planning.models import GeneratedPlan, TrainingLevel
from hypertrophy_hub.planning.progression import append_level, collect_level_exercise_ids, generate_next_level
from hypertrophy_hub.planning.randomness import make_rng
from hypertrophy_hub.planning.volume import get_volume_display_info

console = Console()

app = typer.Typer(
    name="hypertrophy-hub",
    help="Hypertrophy Hub CLI - generate and progress workout plans",
    add_completion=False,
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for engine output"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write engine logs to this file"),
) -> None:
    setup_logger(
        level=log_level.upper(),
        log_file=log_file or settings.log_file,
        json_file=settings.log_json,
    )


def _print_level(level: TrainingLevel, catalog: ExerciseCatalog) -> None:
    console.print(f"\n[bold cyan]{level.name}[/bold cyan] - {level.description}")
    for day, workout in level.workouts.items():
        table = Table(title=f"{day}: {workout.name}", show_lines=False)
        table.add_column("Exercise")
        table.add_column("Sets", justify="right")
        table.add_column("Reps")
        table.add_column("Log")
        for exercise in workout.exercises:
            definition = catalog.lookup(exercise.id)
            table.add_row(
                definition.name if definition else exercise.id,
                str(exercise.sets),
                exercise.reps,
                exercise.logging_type.value,
            )
        if not workout.exercises:
            table.add_row("[dim]No exercises match your equipment[/dim]", "", "", "")
        console.print(table)


def _write_plan(plan: GeneratedPlan, output: Path | None) -> None:
    if output is None:
        console.print(JSON(plan.model_dump_json()))
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(plan.model_dump_json(indent=2), encoding="utf-8")
    console.print(f"[green]Plan written to {output}[/green]")


def _read_plan(path: Path) -> GeneratedPlan:
    try:
        return GeneratedPlan.model_validate_json(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] plan file not found: {path}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {path} is not a valid generated plan")
        console.print(str(e))
        raise typer.Exit(1) from e


@app.command()
def templates() -> None:
    """List available workout templates."""
    table = Table(title="Workout Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Days/week", justify="right")
    table.add_column("Workouts")
    for template in get_template_catalog().all():
        table.add_row(
            template.id,
            template.name,
            str(template.days_per_week),
            ", ".join(skeleton.day for skeleton in template.workouts),
        )
    console.print(table)


@app.command()
def equipment() -> None:
    """List equipment tags used by the exercise catalog."""
    table = Table(title="Equipment")
    table.add_column("Tag", style="cyan")
    table.add_column("Name")
    for tag in get_all_available_equipment(get_exercise_catalog()):
        table.add_row(tag, get_equipment_display_name(tag))
    console.print(table)


@app.command()
def generate(
    template_id: str = typer.Option(..., "--template", "-t", help="Template id"),
    equipment_tags: list[str] = typer.Option(["bodyweight"], "--equipment", "-e", help="Available equipment tag (repeatable)"),
    volume: str = typer.Option("standard", "--volume", "-v", help="Session volume: short, standard or long"),
    exclude: list[str] = typer.Option([], "--exclude", "-x", help="Exercise id to avoid (repeatable)"),
    name: str | None = typer.Option(None, "--name", "-n", help="Plan name"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for reproducible plans"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write plan JSON to this file"),
) -> None:
    """Generate a level-1 plan from a template."""
    catalog = get_exercise_catalog()
    plan = generate_plan(
        template_id,
        equipment_tags,
        volume,
        exclude,
        name,
        catalog=catalog,
        templates=get_template_catalog(),
        rng=make_rng(seed),
    )
    if plan is None:
        console.print(f"[red]Error:[/red] template not found: {template_id}")
        raise typer.Exit(1)

    info = get_volume_display_info(plan.volume)
    console.print(f"[bold green]{plan.name}[/bold green] ({info.name}, {info.duration})")
    _print_level(plan.latest_level, catalog)
    _write_plan(plan, output)


@app.command("next-level")
def next_level(
    plan_path: Path = typer.Option(..., "--plan", "-p", help="Generated plan JSON file"),
    equipment_tags: list[str] = typer.Option([], "--equipment", "-e", help="Available equipment (defaults to the plan's)"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for reproducible levels"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write updated plan JSON to this file"),
) -> None:
    """Generate the next level of a plan, avoiding the latest level's exercises."""
    plan = _read_plan(plan_path)
    catalog = get_exercise_catalog()
    available = equipment_tags or plan.selected_equipment

    level = generate_next_level(
        plan,
        available,
        collect_level_exercise_ids(plan.latest_level),
        catalog=catalog,
        templates=get_template_catalog(),
        rng=make_rng(seed),
    )
    if level is None:
        console.print(f"[red]Error:[/red] template not found: {plan.template_id}")
        raise typer.Exit(1)

    updated = append_level(plan, level)
    _print_level(level, catalog)
    _write_plan(updated, output)


@app.command("validate-catalog")
def validate_catalog() -> None:
    """Check that every template slot can be filled and every exercise is reachable."""
    try:
        exercise_catalog = get_exercise_catalog()
        template_catalog = get_template_catalog()
        validate_catalogs(exercise_catalog, template_catalog)
    except ConfigurationError as e:
        logger.error("Catalog check failed", code=e.code)
        console.print(f"[red]{e.code}[/red]")
        for detail in e.details:
            console.print(f"  - {detail}")
        raise typer.Exit(1) from e

    console.print(
        f"[green]Catalog OK:[/green] {len(exercise_catalog)} exercises, {len(template_catalog)} templates"
    )


if __name__ == "__main__":
    app()
