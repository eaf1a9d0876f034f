"""szero — reconcile package.json dependencies against their use in source."""

from szero.exceptions import ManifestParseError, ReportError, SourceReadError, SzeroError
from szero.manifest import read_manifest, search_dependencies
from szero.models import (
    Declaration,
    Dependency,
    DependencyGroups,
    DependencySet,
    MissingRecord,
    Reference,
    Report,
    SourceLine,
    UsageRecord,
)
from szero.reader import find, read
from szero.reporter import (
    NONE_SENTINEL,
    console_report,
    file_report,
    json_report,
    render_report,
    unused,
)
from szero.scanner import has_problems, scan
from szero.searcher import (
    search_declarations,
    search_missing_dependencies,
    search_requires,
    search_usage,
)

__all__ = [
    "NONE_SENTINEL",
    "Declaration",
    "Dependency",
    "DependencyGroups",
    "DependencySet",
    "ManifestParseError",
    "MissingRecord",
    "Reference",
    "Report",
    "ReportError",
    "SourceLine",
    "SourceReadError",
    "SzeroError",
    "UsageRecord",
    "console_report",
    "file_report",
    "find",
    "has_problems",
    "json_report",
    "read",
    "read_manifest",
    "render_report",
    "scan",
    "search_declarations",
    "search_dependencies",
    "search_missing_dependencies",
    "search_requires",
    "search_usage",
    "unused",
]
