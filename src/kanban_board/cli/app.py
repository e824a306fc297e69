"""CLI application using Typer."""

import json
import sys
from contextlib import contextmanager
from dataclasses import replace
from typing import Generator, List, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from kanban_board.config import Settings
from kanban_board.database.orm_manager import ORMManager
from kanban_board.services import ServiceFactory

console = Console()
app = typer.Typer(
    name="kanban-board",
    help="Kanban Board - projects and staged tasks over HTTP",
    no_args_is_help=True,
)


@app.callback()
def main_options(
    ctx: typer.Context,
    db_url: Optional[str] = typer.Option(
        None, "--db-url", help="SQLAlchemy database URL (overrides KANBAN_DATABASE_URL)"
    ),
) -> None:
    """Kanban Board command line."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail(str(e))
    if db_url:
        settings = replace(settings, database_url=db_url)
    ctx.obj = settings


@contextmanager
def _open_factory(ctx: typer.Context) -> Generator[ServiceFactory, None, None]:
    """Open the database for one command and close it afterwards."""
    orm_manager = ORMManager(ctx.obj.database_url)
    try:
        yield ServiceFactory(orm_manager)
    finally:
        orm_manager.close()


def _fail(message: Optional[str], suggestions: Optional[List[str]] = None) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    for suggestion in suggestions or []:
        console.print(f"  [dim]- {suggestion}[/dim]")
    raise typer.Exit(1)


@app.command()
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the HTTP API server."""
    import uvicorn

    from kanban_board.server import configure_logging, create_app

    settings: Settings = ctx.obj
    configure_logging(settings.debug)

    orm_manager = ORMManager(settings.database_url)
    try:
        uvicorn.run(
            create_app(orm_manager, settings),
            host=host or settings.host,
            port=port or settings.port,
        )
    finally:
        orm_manager.close()


@app.command()
def health(ctx: typer.Context) -> None:
    """Check that the database is reachable."""
    with _open_factory(ctx) as factory:
        report = factory.orm_manager.perform_health_check()

    if report.get("healthy"):
        console.print(f"[green]Healthy[/green] ({report['table_count']} tables)")
        console.print(f"Database: {report['database']}")
    else:
        _fail(report.get("error"))


# Project commands
project_app = typer.Typer(help="Project management commands")
app.add_typer(project_app, name="projects")


@project_app.command("list")
def project_list(ctx: typer.Context) -> None:
    """List all projects."""
    with _open_factory(ctx) as factory:
        result = factory.get_project_service().list_projects()

    if result.is_failure:
        _fail(result.error_message, result.suggestions)

    projects = result.data or []
    if not projects:
        console.print("No projects found.")
        return

    table = Table(title="Projects")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Description")

    for p in projects:
        table.add_row(p["id"], p["title"], p["description"])

    console.print(table)


@project_app.command("show")
def project_show(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project ID"),
    format: str = typer.Option("text", "--format", "-f", help="Output format (text/json)"),
) -> None:
    """Show a project and its board."""
    with _open_factory(ctx) as factory:
        result = factory.get_project_service().get_project(project_id)

    if result.is_failure:
        _fail(result.error_message, result.suggestions)

    data = result.data
    if format == "json":
        json.dump(data, sys.stdout, default=str)
        sys.stdout.write("\n")
        return

    console.print(f"\n[bold]{data['title']}[/bold]")
    console.print(f"ID: {data['id']}")
    console.print(f"Description: {data['description']}")

    stages: dict = {}
    for task in data["tasks"]:
        stages.setdefault(task["stage"], []).append(task)

    for stage, tasks in stages.items():
        console.print(f"\n[bold]{stage} ({len(tasks)}):[/bold]")
        for t in sorted(tasks, key=lambda t: t["order"]):
            console.print(f"  {t['order']}. {t['title']} [dim]{t['id']}[/dim]")


@project_app.command("create")
def project_create(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Project title (3-30 characters)"),
    description: str = typer.Option(..., "--description", "-d", help="Description"),
) -> None:
    """Create a new project."""
    with _open_factory(ctx) as factory:
        result = factory.get_project_service().create_project(title, description)

    if result.is_failure:
        _fail(result.error_message, result.suggestions)

    console.print(f"[green]Project created:[/green] {result.data['id']}")
    console.print(f"Title: {result.data['title']}")


@project_app.command("delete")
def project_delete(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project ID"),
) -> None:
    """Delete a project and all its tasks."""
    with _open_factory(ctx) as factory:
        result = factory.get_project_service().delete_project(project_id)

    if result.is_failure:
        _fail(result.error_message, result.suggestions)

    console.print(
        f"[green]Deleted[/green] {result.data['title']} "
        f"with {len(result.data['tasks'])} task(s)"
    )


def create_app() -> typer.Typer:
    """Create and return the Typer app."""
    return app
