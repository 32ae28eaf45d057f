"""Command-line interface for dataextractor."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

app = typer.Typer(
    name="dataextractor",
    help="Load and inspect interpolation lookup tables.",
    no_args_is_help=True,
)

console = Console()


@app.command()
def inspect(
    path: Annotated[
        Path,
        typer.Argument(
            help="Table file to load.",
            exists=True,
            dir_okay=False,
        ),
    ],
    group: Annotated[
        str | None,
        typer.Option(
            "--group",
            "-g",
            help="Payload group. Defaults to 'default_payload_group' from the config.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    json_logs: Annotated[
        bool,
        typer.Option(
            "--json-logs",
            help="Emit log records as JSON.",
        ),
    ] = False,
) -> None:
    """Load a table and print a summary of its columns and payload."""
    from dataextractor.backends import load_table
    from dataextractor.config import ExtractorConfig, load_config
    from dataextractor.errors import (
        DataExtractorError,
        EmptyResultError,
        MalformedInputError,
        PayloadSelectionError,
    )
    from dataextractor.reporter import TableReporter
    from dataextractor.utils.logging import configure_logging

    extractor_config = load_config(config) if config is not None else ExtractorConfig()
    configure_logging(
        level=extractor_config.logging.level,
        json_output=json_logs or extractor_config.logging.json_output,
    )

    payload_group = group or extractor_config.default_payload_group
    if payload_group is None:
        console.print("[red]Error: no payload group given (use --group or a config file).[/red]")
        raise typer.Exit(code=1)

    try:
        table = load_table(path, payload_group, config=extractor_config)
    except MalformedInputError as e:
        console.print(f"[red]Malformed input: {e}[/red]")
        raise typer.Exit(code=1) from e
    except PayloadSelectionError as e:
        console.print(f"[red]Payload selection failed: {e}[/red]")
        raise typer.Exit(code=1) from e
    except EmptyResultError as e:
        console.print(f"[yellow]Empty table: {e}[/yellow]")
        raise typer.Exit(code=1) from e
    except DataExtractorError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    TableReporter(console).print_table(table, title=f"{path.name} ({payload_group})")


@app.command()
def version() -> None:
    """Show version information."""
    from dataextractor import __version__

    console.print(f"dataextractor version {__version__}")


if __name__ == "__main__":
    app()
