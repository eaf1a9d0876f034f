"""Dependency extractor for package.json manifests."""

from __future__ import annotations

import json
import os
from typing import Any, Iterable, Union

import structlog

from szero.exceptions import ManifestParseError
from szero.models import (
    DeclaredDependencies,
    Dependency,
    DependencyGroups,
    DependencySet,
    SourceLine,
)
from szero.reader import read

log = structlog.get_logger("szero.manifest")

PRODUCTION_FIELD = "dependencies"
DEV_FIELD = "devDependencies"

ManifestInput = Union[str, Iterable[Union[SourceLine, str]]]


def search_dependencies(manifest_lines: ManifestInput, production_only: bool) -> DeclaredDependencies:
    """Extract declared dependencies from manifest content.

    Returns a :class:`DependencySet` for ``dependencies`` when
    *production_only* is true, otherwise :class:`DependencyGroups` holding
    both ``dependencies`` and ``devDependencies``.

    Raises ``ManifestParseError`` when the manifest is not a JSON object or
    a dependency field is not an object.
    """
    data = _load(manifest_lines)
    production = _extract(data, PRODUCTION_FIELD)
    if production_only:
        return production
    return DependencyGroups(production=production, dev=_extract(data, DEV_FIELD))


def read_manifest(path: str | os.PathLike[str], production_only: bool) -> DeclaredDependencies:
    """Read and parse the manifest at *path*."""
    return search_dependencies(read(path), production_only)


def _load(manifest_lines: ManifestInput) -> dict[str, Any]:
    if isinstance(manifest_lines, str):
        content = manifest_lines
    else:
        content = "\n".join(
            line.text if isinstance(line, SourceLine) else line for line in manifest_lines
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"Manifest is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"Manifest must be a JSON object, got {type(data).__name__}"
        )
    return data


def _extract(data: dict[str, Any], field_name: str) -> DependencySet:
    section = data.get(field_name)
    if section is None:
        return DependencySet(category=field_name)
    if not isinstance(section, dict):
        raise ManifestParseError(
            f"Manifest field '{field_name}' must be an object, got {type(section).__name__}"
        )

    deps: list[Dependency] = []
    for name, version in section.items():
        if not name:
            log.warning("manifest.empty_name_skipped", field=field_name)
            continue
        deps.append(Dependency(name=name, version=version if isinstance(version, str) else ""))
    return DependencySet(category=field_name, dependencies=tuple(deps))
