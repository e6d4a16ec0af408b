"""Create the main Typer CLI app."""

import json
from pathlib import Path

import typer

from favicon_injector.api.inject._constants import DEFAULT_FAVICON_PATH, DEFAULT_REL
from favicon_injector.api.inject.cmd_inject import cmd_inject
from favicon_injector.api.inject.FaviconOptions import FaviconOptions
from favicon_injector.utils.configure_logging import configure_logging
from favicon_injector.utils.get_package_version import get_package_version

from ._print_options import _print_options
from ._print_summary import _print_summary
from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"inject-favicon {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the inject-favicon Typer app."""
    app = typer.Typer(
        name="inject-favicon",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Automatically inject favicon links into HTML files",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(name="inject")
    def inject_cmd(
        directory: str = typer.Argument(..., metavar="DIR", help="Directory to scan for HTML files"),
        favicon: str = typer.Option(DEFAULT_FAVICON_PATH, "--favicon", "-f", help="Path to the favicon file"),
        rel: str = typer.Option(
            DEFAULT_REL, "--rel", "-r", help="Relationship attribute (icon, shortcut icon, apple-touch-icon)"
        ),
        mime_type: str | None = typer.Option(
            None, "--type", "-t", help="MIME type of the favicon (auto-detected if not provided)"
        ),
        sizes: str | None = typer.Option(
            None, "--sizes", "-s", help='Size attribute for the favicon (e.g., "16x16", "32x32 48x48")'
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Print detailed information"),
        as_json: bool = typer.Option(False, "--json", help="Print the result as JSON instead of a summary"),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
        ),
    ) -> None:
        """Inject a favicon link into every HTML file under DIR."""
        configure_logging(verbose)
        display = CLIDisplay()

        try:
            target_dir = Path(directory).resolve()
            if not target_dir.exists():
                typer.echo(f"Error: Directory '{target_dir}' does not exist", err=True)
                raise typer.Exit(1)

            options = FaviconOptions(path=favicon, rel=rel, type=mime_type, sizes=sizes)
            if verbose:
                _print_options(target_dir, options)

            result = _run_single_execution(cmd_inject, (target_dir, options), {}, display, verbose=verbose)
        except typer.Exit:
            raise
        except Exception as e:
            typer.echo(f"\nError: {e}", err=True)
            raise typer.Exit(1) from e

        if not result.success:
            for error in result.output.get("errors", []):
                typer.echo(f"Error: {error}", err=True)
            raise typer.Exit(1)

        if as_json:
            typer.echo(json.dumps(result.output, indent=2))
        else:
            _print_summary(result.output)

    return app
