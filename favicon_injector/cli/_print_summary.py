"""Human-readable summary of an inject run."""

import typer


def _print_summary(output: dict) -> None:
    typer.echo("\nOperation completed successfully!")
    typer.echo(f"Total HTML files found: {output['total']}")
    typer.echo(f"Files injected with favicon: {output['injected']}")
    typer.echo(f"Files skipped (already have favicon): {output['skipped']}")
    if output["failed"] > 0:
        typer.echo(f"Files failed to inject: {output['failed']}")
