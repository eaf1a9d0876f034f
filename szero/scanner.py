"""Project scanner — run every finder over a project tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

import structlog

from szero.manifest import read_manifest
from szero.models import DeclaredDependencies, DependencyGroups, Report
from szero.reader import DEFAULT_EXCLUDE_DIRS, find, read
from szero.reporter import NONE_SENTINEL, json_report, unused
from szero.searcher import (
    search_declarations,
    search_missing_dependencies,
    search_requires,
    search_usage,
)

log = structlog.get_logger("szero.scanner")

MANIFEST_NAME = "package.json"


def scan(
    root: str | os.PathLike[str],
    production_only: bool = False,
    exclude_dirs: Iterable[str] | None = None,
    ignore: Iterable[str] = (),
) -> Report:
    """Scan a project directory and return its :class:`Report`.

    Declarations and requires are matched against production dependencies;
    missing references are always checked against production and dev
    dependencies, so *production_only* narrows what is reported, not what
    counts as declared.  Names in *ignore* are dropped from the declared sets
    before matching.

    Raises ``SourceReadError`` or ``ManifestParseError`` from the reader and
    manifest extractor.
    """
    root_path = Path(root)
    groups: DependencyGroups = read_manifest(root_path / MANIFEST_NAME, production_only=False)
    ignored = frozenset(ignore)
    if ignored:
        groups = groups.without(ignored)
    production = groups.production
    dependencies: DeclaredDependencies = production if production_only else groups

    files = find(root_path, DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)
    log.info("scanner.start", root=str(root_path), files=len(files), dependencies=len(production))

    usage = []
    requires = []
    missing = []
    for file_path in files:
        label = file_path.relative_to(root_path).as_posix()
        lines = read(file_path)
        declarations = search_declarations(lines, production, label)
        usage.extend(search_usage(lines, label, declarations))
        requires.extend(search_requires(lines, production, label))
        file_missing = [
            rec for rec in search_missing_dependencies(lines, groups, label)
            if rec.name not in ignored
        ]
        missing.extend(file_missing)
        log.debug(
            "scanner.file_scanned",
            file=label,
            declarations=len(declarations),
            missing=len(file_missing),
        )

    report = json_report(usage, dependencies, requires, missing)
    log.info(
        "scanner.complete",
        usage=len(report.usage),
        requires=len(report.requires),
        missing=len(report.missing),
    )
    return report


def has_problems(report: Report) -> bool:
    """True when the report lists unused or missing dependencies."""
    return unused(report.usage, report.production) != NONE_SENTINEL or bool(report.missing)
