"""Main entry point for the todoist-bridge CLI."""

import asyncio
import json
from typing import Optional

import typer
from rich.console import Console

from todoist_bridge import __version__
from todoist_bridge.api import TodoistAPI, TodoistError
from todoist_bridge.config import get_config_manager
from todoist_bridge.utils.exit_codes import exit_code_for, get_exit_code_name
from todoist_bridge.utils.logger import get_log_file, get_logger

app = typer.Typer(
    name="todoist-bridge",
    help="Rate-limited Todoist API client for AI assistant tool hosts",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration management", no_args_is_help=True)
app.add_typer(config_app, name="config")

console = Console()

_SAMPLE_SIZE = 3


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todoist-bridge[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def check(
    profile: str = typer.Option("default", "--profile", "-p", help="Config profile"),
) -> None:
    """Verify the API token by listing projects and tasks."""
    logger = get_logger()
    manager = get_config_manager(profile)

    async def run_check() -> None:
        token = manager.get_api_token()
        async with TodoistAPI.from_config(token, manager.config) as api:
            projects = await api.projects.list_projects()
            console.print("[green]✓ API connection successful[/green]")
            console.print(f"Found {len(projects)} project(s)")
            for project in projects[:_SAMPLE_SIZE]:
                console.print(f"  - {project.name} [dim](ID: {project.id})[/dim]")

            tasks = await api.tasks.list_tasks()
            console.print(f"Found {len(tasks)} task(s)")
            for task in tasks[:_SAMPLE_SIZE]:
                console.print(
                    f"  - {task.content} [dim](Priority: {task.priority})[/dim]"
                )

    logger.info("command started: check")
    try:
        asyncio.run(run_check())
    except TodoistError as e:
        code = exit_code_for(e)
        logger.error("command failed: check - %s", e.message)
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        console.print(f"[dim]{get_exit_code_name(code)}; log: {get_log_file()}[/dim]")
        raise typer.Exit(code)
    logger.info("command completed: check")


@config_app.command("get")
def config_get(
    key: Optional[str] = typer.Argument(None, help="Dot-separated key, e.g. api.timeout"),
    profile: str = typer.Option("default", "--profile", "-p", help="Config profile"),
) -> None:
    """Show the configuration, or a single value."""
    manager = get_config_manager(profile)
    if key is None:
        console.print_json(manager.config.model_dump_json())
        return
    value = manager.get(key)
    console.print(json.dumps(value.model_dump() if hasattr(value, "model_dump") else value))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Dot-separated key, e.g. rate_limit.capacity"),
    value: str = typer.Argument(..., help="New value (parsed as JSON when possible)"),
    profile: str = typer.Option("default", "--profile", "-p", help="Config profile"),
) -> None:
    """Set a configuration value."""
    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = value
    manager = get_config_manager(profile)
    try:
        manager.set(key, parsed)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] invalid value for {key}: {e}")
        raise typer.Exit(2)
    console.print(f"[green]✓[/green] {key} = {parsed!r}")


@config_app.command("reset")
def config_reset(
    key: Optional[str] = typer.Argument(None, help="Key to reset; all when omitted"),
    profile: str = typer.Option("default", "--profile", "-p", help="Config profile"),
) -> None:
    """Reset configuration to defaults."""
    manager = get_config_manager(profile)
    try:
        manager.reset(key)
    except KeyError:
        console.print(f"[bold red]Error:[/bold red] unknown key: {key}")
        raise typer.Exit(2)
    console.print(f"[green]✓[/green] reset {key or 'all settings'}")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
