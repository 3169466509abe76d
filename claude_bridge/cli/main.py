"""Main CLI entry point for claude-bridge."""

import typer
from rich.console import Console

from claude_bridge.cli.commands import config, convert
from claude_bridge.core.logging import configure_root_logging

app = typer.Typer(
    name="claude-bridge",
    help="Claude Bridge CLI - Convert Claude Messages requests to OpenAI Chat Completions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(config.app, name="config", help="Configuration management")
app.command(name="convert")(convert.convert)


@app.command()
def version() -> None:
    """Show version information."""
    from claude_bridge import __version__

    console = Console()
    console.print(f"[bold cyan]claude-bridge[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Claude Bridge CLI."""
    configure_root_logging("DEBUG" if verbose else None)


if __name__ == "__main__":
    app()
