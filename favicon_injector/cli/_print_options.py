"""Verbose echo of the effective favicon options."""

from pathlib import Path

import typer

from favicon_injector.api.inject.FaviconOptions import FaviconOptions


def _print_options(target_dir: Path, options: FaviconOptions) -> None:
    typer.echo(f"Scanning directory: {target_dir}")
    typer.echo("Using favicon options:")
    typer.echo(f" - Path: {options.path}")
    typer.echo(f" - Rel: {options.rel}")
    if options.type:
        typer.echo(f" - Type: {options.type}")
    if options.sizes:
        typer.echo(f" - Sizes: {options.sizes}")
