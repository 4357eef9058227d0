"""CLI commands for the registrar database.

Maintenance commands only:
- init: create tables, indexes and views (optionally seed sample data)
- drop: remove all views and tables
- reset: drop and recreate
- seed: insert the sample data set
"""

from pathlib import Path

import typer
from rich.console import Console

from registrar.config.app_config import ConfigError, load_app_config
from registrar.core.seed import seed_sample_data
from registrar.db.database import drop_db, init_db, reset_db
from registrar.db.errors import RegistrarError

app = typer.Typer(
    name="registrar",
    help="Student, course, enrollment and attendance database.",
    no_args_is_help=True,
)

console = Console()


def _resolve_db_path(db: str | None) -> Path:
    """Resolve the database path from the option or the config."""
    if db:
        return Path(db).expanduser()
    try:
        return load_app_config().database.path
    except ConfigError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)


def _seed_or_exit() -> None:
    try:
        inserted = seed_sample_data()
    except RegistrarError as e:
        console.print(f"[red]✗ Seeding failed: {e}[/red]")
        raise typer.Exit(code=1)

    if inserted:
        console.print("[green]✓ Sample data inserted[/green]")
    else:
        console.print("[yellow]⚠ Students already present, sample data skipped[/yellow]")


@app.command()
def init(
    db: str | None = typer.Option(None, "--db", help="Path to the SQLite database"),
    seed: bool = typer.Option(False, "--seed", help="Insert sample data afterwards"),
) -> None:
    """Create the schema if it doesn't exist."""
    db_path = _resolve_db_path(db)
    init_db(db_path)
    console.print(f"[green]✓ Database initialized[/green] [dim]{db_path}[/dim]")

    if seed or (db is None and load_app_config().database.seed_on_init):
        _seed_or_exit()


@app.command()
def drop(
    db: str | None = typer.Option(None, "--db", help="Path to the SQLite database"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Drop all views and tables (DESTRUCTIVE)."""
    db_path = _resolve_db_path(db)

    if not db_path.exists():
        console.print(f"[yellow]Nothing to drop, {db_path} doesn't exist[/yellow]")
        return

    if not yes:
        confirm = typer.confirm(f"\nDrop every table in {db_path}?")
        if not confirm:
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(code=0)

    drop_db(db_path)
    console.print(f"[green]✓ Database dropped[/green] [dim]{db_path}[/dim]")


@app.command()
def reset(
    db: str | None = typer.Option(None, "--db", help="Path to the SQLite database"),
    seed: bool = typer.Option(False, "--seed", help="Insert sample data afterwards"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Drop and recreate the schema (DESTRUCTIVE)."""
    db_path = _resolve_db_path(db)

    if not yes:
        confirm = typer.confirm(f"\nDelete all rows in {db_path} and recreate the schema?")
        if not confirm:
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(code=0)

    reset_db(db_path)
    console.print(f"[green]✓ Database reset[/green] [dim]{db_path}[/dim]")

    if seed:
        _seed_or_exit()


@app.command()
def seed(
    db: str | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """Insert the sample students, courses, enrollments, attendance and users."""
    db_path = _resolve_db_path(db)
    init_db(db_path)
    _seed_or_exit()


if __name__ == "__main__":
    app()
