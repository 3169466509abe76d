"""Configuration commands for the claude-bridge CLI."""

import os

import typer
from rich.console import Console
from rich.table import Table

from claude_bridge.core.config import validate_all
from claude_bridge.core.config.schema import ConfigSchema

app = typer.Typer(help="Configuration management")


@app.command()
def show() -> None:
    """Show every configuration variable with its current value."""
    console = Console()

    table = Table(title="Claude Bridge Configuration")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Default", style="yellow")
    table.add_column("Description")

    for _name, spec in sorted(ConfigSchema.all_specs().items()):
        current = os.environ.get(spec.name)
        table.add_row(
            spec.name,
            current if current is not None else "<default>",
            str(spec.default),
            spec.description,
        )

    console.print(table)


@app.command()
def validate() -> None:
    """Validate configuration from the environment."""
    console = Console()

    errors = validate_all()
    if errors:
        for error in errors:
            console.print(f"[red]❌ {error}[/red]")
        raise typer.Exit(code=1)

    console.print("[green]✅ Configuration is valid[/green]")
