"""Command-line interface for mimeforge.

Provides a thin wrapper around the mimeforge API for command-line usage.
"""

from __future__ import annotations

import json
import logging
import mimetypes
from pathlib import Path
from typing import Any

import numpy as np
import typer
import yaml
from rich.console import Console
from rich.table import Table

from mimeforge.config.models import STRATEGIES, ExpansionConfig
from mimeforge.converters.types import CSV, JSON, NUMPY, PLAIN, YAML
from mimeforge.core.cached import CachedData
from mimeforge.core.exceptions import (
    ConversionError,
    MimeForgeError,
    MimeTypeDetectionError,
)
from mimeforge.core.models import Dataset, DatasetEntry, dataset_from_entries

app = typer.Typer(
    name="mimeforge",
    help="mimeforge - discover every format a file can be converted to",
    add_completion=False,
)
console = Console()

_SUFFIX_MIME_TYPES = {
    ".csv": CSV,
    ".json": JSON,
    ".yaml": YAML,
    ".yml": YAML,
    ".npy": NUMPY,
    ".txt": PLAIN,
}


def detect_mime_type(path: Path, overrides: dict[str, str] | None = None) -> str:
    """Detect the mimetype of a file from its suffix.

    Config overrides are checked first, then the built-in table, then the
    ``mimetypes`` module.

    Raises:
        MimeTypeDetectionError: If no mimetype is known for the suffix.
    """
    suffix = path.suffix.lower()
    if overrides and suffix in overrides:
        return overrides[suffix]
    if suffix in _SUFFIX_MIME_TYPES:
        return _SUFFIX_MIME_TYPES[suffix]

    guessed, _ = mimetypes.guess_type(path.name)
    if guessed is None:
        raise MimeTypeDetectionError(path)
    return guessed


def _load_config(config_file: Path | None, strategy: str | None) -> ExpansionConfig:
    """Load config from YAML if provided; CLI options override it."""
    if config_file:
        if not config_file.exists():
            console.print(f"[red]Error:[/red] Config file not found: {config_file}")
            raise typer.Exit(1)
        try:
            config = ExpansionConfig.from_yaml(config_file)
        except (MimeForgeError, yaml.YAMLError) as e:
            console.print(f"[red]Error loading config:[/red] {e}")
            raise typer.Exit(1)
    else:
        config = ExpansionConfig()

    if strategy:
        config.strategy = strategy
        try:
            config.validate()
        except MimeForgeError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

    return config


def _expand_file(
    path: Path,
    mime_type: str | None,
    config: ExpansionConfig,
) -> tuple[str, Dataset]:
    """Seed a dataset from ``path`` and expand it with the registered converters."""
    from mimeforge.converters import ConverterRegistry
    from mimeforge.expand import ExpansionEngine

    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)

    try:
        source_type = mime_type or detect_mime_type(path, config.mime_types)
        step = ConverterRegistry.combined(config.converters)
    except MimeForgeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if source_type == NUMPY:
        loader: Any = lambda: np.load(path)  # noqa: E731
    else:
        loader = path.read_text

    seed = dataset_from_entries([DatasetEntry(source_type, config.seed_cost, CachedData(loader))])
    return source_type, ExpansionEngine(config).expand(str(path), seed, step)


@app.command("expand")
def expand_cmd(
    path: Path = typer.Argument(..., help="Path to the input file"),
    mime_type: str | None = typer.Option(
        None, "--mime-type", "-m", help="Mimetype of the input (detected from suffix if not provided)"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="YAML config file for expansion settings"
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s", help=f"Worklist strategy: {', '.join(STRATEGIES)}"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print mimetype costs as JSON"),
) -> None:
    """List every mimetype the input can be converted to.

    Example:
        mimeforge expand ./data.csv
        mimeforge expand ./data.txt --mime-type text/csv --strategy priority
    """
    from mimeforge.core.models import summarize

    config = _load_config(config_file, strategy)
    source_type, dataset = _expand_file(path, mime_type, config)
    costs = summarize(dataset)

    if as_json:
        typer.echo(json.dumps(costs, indent=2))
        return

    table = Table(title=f"Reachable formats for {path.name}")
    table.add_column("Mimetype", style="cyan")
    table.add_column("Cost", justify="right")
    table.add_column("Seed", justify="center")

    for name, cost in costs.items():
        seed = "[green]✓[/green]" if name == source_type else "[dim]-[/dim]"
        table.add_row(name, str(cost), seed)

    console.print()
    console.print(table)


@app.command("convert")
def convert_cmd(
    path: Path = typer.Argument(..., help="Path to the input file"),
    target: str = typer.Option(..., "--to", "-t", help="Mimetype to produce"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the result here instead of stdout"
    ),
    mime_type: str | None = typer.Option(
        None, "--mime-type", "-m", help="Mimetype of the input (detected from suffix if not provided)"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="YAML config file for expansion settings"
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s", help=f"Worklist strategy: {', '.join(STRATEGIES)}"
    ),
) -> None:
    """Convert the input to one reachable mimetype.

    Example:
        mimeforge convert ./data.csv --to application/x-yaml
        mimeforge convert ./data.csv --to application/x-numpy -o data.npy
    """
    from mimeforge.core.models import get_data

    config = _load_config(config_file, strategy)
    source_type, dataset = _expand_file(path, mime_type, config)

    try:
        handle = get_data(dataset, target)
    except MimeForgeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        data = handle.load()
    except Exception as e:
        error = ConversionError(source_type, target, str(e))
        console.print(f"[red]Error:[/red] {error}")
        raise typer.Exit(1)

    if isinstance(data, str) and output is None:
        typer.echo(data, nl=not data.endswith("\n"))
        return

    if not isinstance(data, (str, np.ndarray)):
        console.print(f"[red]Error:[/red] Cannot write {type(data).__name__} data for {target}")
        raise typer.Exit(1)

    if output is None:
        console.print(f"[red]Error:[/red] Use --output to save {target} data")
        raise typer.Exit(1)

    try:
        if isinstance(data, np.ndarray):
            np.save(output, data)
        else:
            output.write_text(data)
    except OSError as e:
        console.print(f"[red]Error writing output:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Wrote {target}[/green] (cost {dataset[target][0]}) to {output}")


@app.command("converters")
def converters_cmd() -> None:
    """List registered converters."""
    from mimeforge.converters import ConverterRegistry

    table = Table(title="Registered Converters")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Source")
    table.add_column("Targets")
    table.add_column("Description", style="dim")

    for name, info in ConverterRegistry.list_converters().items():
        table.add_row(
            name,
            info["source"] or "[dim]any[/dim]",
            ", ".join(info["targets"]) or "[dim]-[/dim]",
            info["description"],
        )

    console.print()
    console.print(table)


@app.command("version")
def version_cmd() -> None:
    """Show mimeforge version."""
    from mimeforge import __version__

    console.print(f"mimeforge v{__version__}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log expansion steps"),
) -> None:
    """mimeforge - discover every format a file can be converted to.

    Chains the registered converters and keeps the cheapest path to each format.
    """
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


if __name__ == "__main__":
    app()
