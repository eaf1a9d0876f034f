"""Data models for the dependency reconciler."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, Union


@dataclass(frozen=True)
class Dependency:
    """A name/version pair declared in the manifest."""

    name: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "version": self.version}


@dataclass(frozen=True)
class DependencySet:
    """Dependencies of one manifest category, in manifest field order."""

    category: str
    dependencies: tuple[Dependency, ...] = ()

    def __iter__(self) -> Iterator[Dependency]:
        return iter(self.dependencies)

    def __len__(self) -> int:
        return len(self.dependencies)

    def __getitem__(self, index: int) -> Dependency:
        return self.dependencies[index]

    def names(self) -> list[str]:
        return [d.name for d in self.dependencies]

    def without(self, names: set[str] | frozenset[str]) -> DependencySet:
        """Return a copy with the given dependency names removed."""
        return DependencySet(
            category=self.category,
            dependencies=tuple(d for d in self.dependencies if d.name not in names),
        )

    def to_list(self) -> list[dict[str, str]]:
        return [d.to_dict() for d in self.dependencies]


@dataclass(frozen=True)
class DependencyGroups:
    """Production and dev dependency sets, extracted together."""

    production: DependencySet
    dev: DependencySet

    def all_names(self) -> set[str]:
        return set(self.production.names()) | set(self.dev.names())

    def without(self, names: set[str] | frozenset[str]) -> DependencyGroups:
        return DependencyGroups(
            production=self.production.without(names),
            dev=self.dev.without(names),
        )

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            self.production.category: self.production.to_list(),
            self.dev.category: self.dev.to_list(),
        }


DeclaredDependencies = Union[DependencySet, DependencyGroups]


@dataclass(frozen=True)
class SourceLine:
    text: str
    line_number: int


@dataclass(frozen=True)
class Declaration:
    """An import-style statement binding a declared dependency.

    ``reference`` is the literal module-reference part of ``statement``,
    e.g. ``require('roi')`` or ``from 'roi'``.
    """

    name: str
    statement: str
    line: int
    identifiers: tuple[str, ...]
    reference: str
    file: str = ""

    @property
    def canonical(self) -> str:
        """Literal form used in usage records, e.g. ``roi-require('roi')``."""
        return f"{', '.join(self.identifiers)}-{self.reference}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "statement": self.statement,
            "file": self.file,
            "line": self.line,
        }


@dataclass(frozen=True)
class Reference:
    """A direct ``require('<module>')`` call referencing a declared dependency."""

    name: str
    statement: str
    line: int
    file: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "statement": self.statement,
            "file": self.file,
            "line": self.line,
        }


@dataclass(frozen=True)
class UsageRecord:
    name: str
    declaration: str
    file: str
    line: int
    occurrences: int = 1

    @property
    def referenced(self) -> bool:
        """True when a bound name appears beyond its declaring line."""
        return self.occurrences > 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "declaration": self.declaration,
            "file": self.file,
            "line": self.line,
            "occurrences": self.occurrences,
        }


@dataclass(frozen=True)
class MissingRecord:
    name: str
    file: str
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "file": self.file, "line": self.line}


@dataclass(frozen=True)
class Report:
    """Aggregated result of a scan; consumed once by a renderer."""

    usage: tuple[UsageRecord, ...]
    dependencies: DeclaredDependencies
    requires: tuple[Reference, ...]
    missing: tuple[MissingRecord, ...] = field(default=())

    @property
    def production(self) -> DependencySet:
        if isinstance(self.dependencies, DependencyGroups):
            return self.dependencies.production
        return self.dependencies

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.dependencies, DependencyGroups):
            dependencies: Any = self.dependencies.to_dict()
        else:
            dependencies = self.dependencies.to_list()
        return {
            "usage": [u.to_dict() for u in self.usage],
            "dependencies": dependencies,
            "requires": [r.to_dict() for r in self.requires],
            "missing": [m.to_dict() for m in self.missing],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2) + "\n"
