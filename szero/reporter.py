"""Report builder — aggregate finder results and render them."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Iterable, Protocol, Sequence, Union

import click
import structlog

from szero.colors import DEFAULT_THEME, PLAIN, Theme, apply_color, colorize, green, red
from szero.exceptions import ReportError
from szero.models import (
    DeclaredDependencies,
    Dependency,
    DependencyGroups,
    DependencySet,
    MissingRecord,
    Reference,
    Report,
    UsageRecord,
)

log = structlog.get_logger("szero.reporter")

REPORT_FILENAME = "szero.txt"

# Returned by unused() instead of an empty list; callers compare against it.
NONE_SENTINEL = "None."


class _Named(Protocol):
    name: str


def unused(
    declarations: Iterable[_Named],
    dependencies: Iterable[Dependency],
) -> Union[list[Dependency], str]:
    """Return dependencies that no declaration binds, in declaration order.

    Returns :data:`NONE_SENTINEL` when every dependency is bound.
    """
    bound = {d.name for d in declarations}
    result = [dep for dep in dependencies if dep.name not in bound]
    return result if result else NONE_SENTINEL


def json_report(
    usage: Sequence[UsageRecord],
    dependencies: DeclaredDependencies,
    requires: Sequence[Reference],
    missing: Sequence[MissingRecord] = (),
) -> Report:
    """Aggregate finder output into a :class:`Report`."""
    if not isinstance(dependencies, (DependencySet, DependencyGroups)):
        raise ReportError(
            f"dependencies must be a DependencySet or DependencyGroups, "
            f"got {type(dependencies).__name__}"
        )
    _check_items("usage", usage, UsageRecord)
    _check_items("requires", requires, Reference)
    _check_items("missing", missing, MissingRecord)
    return Report(
        usage=tuple(usage),
        dependencies=dependencies,
        requires=tuple(requires),
        missing=tuple(missing),
    )


def _check_items(label: str, items: object, expected: type) -> None:
    if isinstance(items, (str, bytes)) or not isinstance(items, (list, tuple)):
        raise ReportError(f"{label} must be a sequence, got {type(items).__name__}")
    for item in items:
        if not isinstance(item, expected):
            raise ReportError(
                f"{label} entries must be {expected.__name__}, got {type(item).__name__}"
            )


# ── rendering ─────────────────────────────────────────────────────────────


def render_report(report: Report, theme: Theme = DEFAULT_THEME) -> list[str]:
    """Render *report* as display lines; the report itself is not modified."""
    lines: list[str] = []

    if isinstance(report.dependencies, DependencyGroups):
        dep_sets = [report.dependencies.production, report.dependencies.dev]
    else:
        dep_sets = [report.dependencies]
    for dep_set in dep_sets:
        lines.append(_header(f"Declared {dep_set.category}", len(dep_set), theme))
        for dep in dep_set:
            lines.append(f"  {dep.name} {dep.version}".rstrip())
        lines.append("")

    lines.append(_header("Requires", len(report.requires), theme))
    for ref in report.requires:
        lines.append(f"  {ref.statement}  {_location(ref.file, ref.line)}")
    lines.append("")

    lines.append(_header("Usage", len(report.usage), theme))
    for rec in report.usage:
        lines.append(
            f"  {rec.declaration}  {_location(rec.file, rec.line)}  "
            f"{apply_color(rec.occurrences, theme)}"
        )
    lines.append("")

    not_bound = unused(report.usage, report.production)
    lines.append(colorize("Unused dependencies", theme.highlight, theme))
    if not_bound == NONE_SENTINEL:
        lines.append(f"  {green(NONE_SENTINEL, theme)}")
    else:
        for dep in not_bound:
            lines.append(f"  {red(dep.name, theme)} {dep.version}".rstrip())
    lines.append("")

    lines.append(colorize("Missing dependencies", theme.highlight, theme))
    if not report.missing:
        lines.append(f"  {green(NONE_SENTINEL, theme)}")
    for rec in report.missing:
        lines.append(f"  {red(rec.name, theme)}  {_location(rec.file, rec.line)}")

    return lines


def _header(title: str, count: int, theme: Theme) -> str:
    return f"{colorize(title, theme.highlight, theme)} {apply_color(count, theme)}"


def _location(file: str, line: int) -> str:
    return f"{file}:{line}" if file else f"line {line}"


def console_report(report: Report, theme: Theme = DEFAULT_THEME) -> None:
    """Write the colorized report to standard output."""
    for line in render_report(report, theme):
        click.echo(line)


async def file_report(
    report: Report,
    directory: str | os.PathLike[str] | None = None,
    filename: str = REPORT_FILENAME,
) -> Path:
    """Write the plain-text report to *filename* in *directory* (default: cwd).

    The write runs in a worker thread; I/O errors propagate to the awaiter.
    """
    target = Path(directory if directory is not None else os.getcwd()) / filename
    content = "\n".join(render_report(report, PLAIN)) + "\n"
    await asyncio.to_thread(target.write_text, content, encoding="utf-8")
    log.info("reporter.file_written", path=str(target), bytes=len(content))
    return target
