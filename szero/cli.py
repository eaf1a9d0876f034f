"""CLI entry point: szero.

Usage:
    szero                       # scan the current directory
    szero path/to/project --dev # also check devDependencies
    szero . --ci --ignore lodash
"""

from __future__ import annotations

import asyncio
import sys

import click

from szero.colors import DEFAULT_THEME, PLAIN, Theme, apply_color
from szero.config import ScanSettings
from szero.core.logging import setup_logging
from szero.exceptions import ManifestParseError, SourceReadError
from szero.models import Report
from szero.reporter import NONE_SENTINEL, console_report, file_report, unused
from szero.scanner import has_problems, scan

EXIT_PROBLEMS = 1
EXIT_ERROR = 2


@click.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False))
@click.option("--dev", is_flag=True, help="Also extract devDependencies")
@click.option("--ignore", "ignore", multiple=True, help="Dependency name to leave out (repeatable)")
@click.option("--file/--no-file", "write_file", default=False, help="Write the report to szero.txt")
@click.option("--summary", is_flag=True, help="Only print unused and missing counts")
@click.option("--ci", is_flag=True, help="Exit 1 when unused or missing dependencies are found")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    directory: str,
    dev: bool,
    ignore: tuple[str, ...],
    write_file: bool,
    summary: bool,
    ci: bool,
    no_color: bool,
    verbose: bool,
) -> None:
    """Report unused and missing dependencies of a Node.js project."""
    setup_logging("DEBUG" if verbose else None)
    settings = ScanSettings.from_env().with_overrides(ignore)
    theme = PLAIN if no_color else DEFAULT_THEME

    try:
        report = scan(
            directory,
            production_only=not dev,
            exclude_dirs=settings.exclude_dirs,
            ignore=settings.ignore,
        )
    except (SourceReadError, ManifestParseError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if summary:
        _print_summary(report, theme)
    else:
        console_report(report, theme)

    if write_file:
        try:
            path = asyncio.run(file_report(report, filename=settings.report_file))
        except OSError as e:
            click.echo(f"Error: could not write report: {e}", err=True)
            sys.exit(EXIT_ERROR)
        click.echo(f"Report written to {path}")

    if ci and has_problems(report):
        sys.exit(EXIT_PROBLEMS)


def _print_summary(report: Report, theme: Theme) -> None:
    not_bound = unused(report.usage, report.production)
    unused_count = 0 if not_bound == NONE_SENTINEL else len(not_bound)
    click.echo(f"Unused dependencies  {apply_color(unused_count, theme)}")
    click.echo(f"Missing dependencies {apply_color(len(report.missing), theme)}")


if __name__ == "__main__":
    main()
