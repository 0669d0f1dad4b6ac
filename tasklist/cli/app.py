"""
Typer Application Entry Points

CLI application entry points using Typer for command-line interface.
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console

from tasklist import __version__
from tasklist.app_config import AppConfig, load_app_config
from .provider import TaskListCLIProvider
from .theme import LIGHT_THEME

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Initialize Typer with Rich
app = typer.Typer(
    help="tasklist - a single-screen task list",
    rich_markup_mode="rich"
)
console = Console(theme=LIGHT_THEME)


def _provider(ctx: typer.Context) -> TaskListCLIProvider:
    config: AppConfig = ctx.obj or AppConfig()
    return TaskListCLIProvider(config=config, console=console)


def _load_or_exit(cli: TaskListCLIProvider) -> None:
    # Never write over a task file we could not read
    if not cli.load_tasks():
        raise typer.Exit(code=1)


@app.command()
def run(ctx: typer.Context):
    """
    Start an interactive task list session.

    Examples:
        tasklist run
        tasklist --data-dir ~/notes run
    """
    _provider(ctx).run_interactive()


@app.command("list")
def list_tasks(ctx: typer.Context):
    """Show the stored tasks"""
    cli = _provider(ctx)
    _load_or_exit(cli)
    if not len(cli.store):
        console.print("[notice]No tasks yet[/notice]")
        return
    console.print(cli.task_table())


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Task name"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
    due: Optional[str] = typer.Option(None, "--due", help="Due date (YYYY-MM-DD, today, +N)"),
):
    """
    Add a task without entering interactive mode.

    Example:
        tasklist add "Buy milk" -d "2%" --due tomorrow
    """
    cli = _provider(ctx)
    _load_or_exit(cli)

    if due is not None and not cli.set_due_date(due):
        raise typer.Exit(code=1)
    cli.state.name = name
    cli.state.description = description

    task = cli.add_task()
    if cli.storage.last_error:
        raise typer.Exit(code=1)
    console.print(f"[notice]Added task {len(cli.store)}:[/notice] {task.id}")


@app.command()
def delete(
    ctx: typer.Context,
    positions: List[int] = typer.Argument(..., help="Task numbers as shown by 'list'"),
):
    """Delete tasks by their number in 'list'"""
    cli = _provider(ctx)
    _load_or_exit(cli)

    removed = cli.delete_tasks([p - 1 for p in positions])
    if not removed:
        console.print("[warning]No task at that position[/warning]")
        raise typer.Exit(code=1)
    if cli.storage.last_error:
        raise typer.Exit(code=1)
    console.print(f"[notice]Deleted {len(removed)} task(s)[/notice]")


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version"),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to config.yaml"),
    data_dir: Optional[str] = typer.Option(
        None, "--data-dir", help="Directory holding tasks.json"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"),
):
    """tasklist - a single-screen task list"""
    if version:
        console.print(f"tasklist v{__version__}")
        raise typer.Exit()

    config = load_app_config(config_path)
    if data_dir:
        config.data_dir = data_dir

    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.debug(f"Using data dir {config.data_dir}")

    ctx.obj = config
    if ctx.invoked_subcommand is None:
        TaskListCLIProvider(config=config, console=console).run_interactive()


if __name__ == "__main__":
    app()
