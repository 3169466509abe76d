"""Convert command for the claude-bridge CLI."""

import json
import sys
import uuid
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.json import JSON

from claude_bridge.conversion import convert_claude_to_openai
from claude_bridge.core.exceptions import ConversionError
from claude_bridge.core.logging import ConversationLogger


def _read_request(source: str) -> Any:
    if source == "-":
        return json.loads(sys.stdin.read())
    return json.loads(Path(source).read_text(encoding="utf-8"))


def convert(
    source: str = typer.Argument(..., help="Claude Messages request JSON file, or '-' for stdin"),
    model: str = typer.Option(
        None, "--model", "-m", help="Target OpenAI model (defaults to the request's model)"
    ),
    stream: bool = typer.Option(False, "--stream", help="Request a streaming response"),
    count_tokens: bool = typer.Option(
        False, "--count-tokens", help="Treat the request as a count_tokens probe"
    ),
    compact: bool = typer.Option(False, "--compact", help="Print single-line JSON"),
) -> None:
    """Convert a Claude Messages request into an OpenAI Chat Completions request."""
    console = Console()
    err_console = Console(stderr=True)

    try:
        request = _read_request(source)
    except (OSError, json.JSONDecodeError) as e:
        err_console.print(f"[red]❌ Cannot read request: {e}[/red]")
        raise typer.Exit(code=2) from e

    target_model = model
    if target_model is None and isinstance(request, dict):
        target_model = request.get("model")

    try:
        with ConversationLogger.correlation_context(uuid.uuid4().hex):
            result = convert_claude_to_openai(
                target_model, request, stream, count_tokens=count_tokens
            )
    except ConversionError as e:
        err_console.print(f"[red]❌ Conversion failed: {e.message}[/red]")
        typer.echo(json.dumps(e.to_error_response(), ensure_ascii=False), err=True)
        raise typer.Exit(code=1) from e

    if compact:
        typer.echo(json.dumps(result, ensure_ascii=False))
    else:
        console.print(JSON.from_data(result), soft_wrap=True)
