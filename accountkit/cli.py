"""
Accountkit CLI - preview the resources derived from account declarations.
"""

import json
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.panel import Panel

from .core import AccountkitCore
from .errors import AccountkitError
from .formatters import PlanFormatter
from .settings import get_settings

# Setup
app = typer.Typer(
    name="accountkit",
    help="Declarative account provisioning primitives",
    add_completion=False,
)
console = Console()


def configure_logging():
    """Configure logging based on settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Configure logging on module import
configure_logging()


def _get_main_file(path: Path | None) -> Path:
    """Return the declarations file, defaulting to main.py in the current directory.

    Raises:
        SystemExit: If the file is not found
    """
    main_file = path or Path.cwd() / "main.py"
    if not main_file.exists():
        console.print(
            f"[bold red]✗ Error:[/bold red] No {main_file.name} found in {main_file.parent}"
        )
        console.print(
            "[dim]Hint: cd into the directory that contains your account declarations[/dim]"
        )
        raise typer.Exit(code=1)
    return main_file


def _handle_command_error(e: Exception, command_type: str) -> NoReturn:
    """Print a command error and exit.

    Raises:
        SystemExit: Always exits with code 1
    """
    console.print(f"\n[bold red]✗ {command_type.capitalize()} failed:[/bold red] {e}")
    raise typer.Exit(code=1)


@app.command()
def plan(
    file: Path = typer.Argument(
        None, help="Python file declaring the accounts (default: ./main.py)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print the handoff as JSON instead of a table"
    ),
):
    """Derive and show the resources for every declared account."""
    main_file = _get_main_file(file)

    try:
        result = AccountkitCore().plan_file(main_file)
    except AccountkitError as e:
        _handle_command_error(e, "plan")

    if json_output:
        typer.echo(json.dumps(result.to_handoff(), indent=2))
        return

    console.print(
        Panel.fit(
            f"[bold cyan]Accountkit Plan[/bold cyan]\nFile: {main_file.name}",
            border_style="cyan",
        )
    )
    PlanFormatter(console).print_plan(result)


@app.command()
def version():
    """Show Accountkit version."""
    from . import __version__

    console.print(f"Accountkit version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
