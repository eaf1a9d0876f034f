"""Declaration, require, usage and missing-dependency finders.

Every finder works on the lines of a single file and never fails on
well-formed input; the worst case is an empty list.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence, Union

from szero.builtins import is_builtin
from szero.models import (
    Declaration,
    Dependency,
    DependencyGroups,
    DependencySet,
    MissingRecord,
    Reference,
    SourceLine,
    UsageRecord,
)
from szero.patterns import (
    BINDING_PATTERNS,
    MODULE_PATTERNS,
    REQUIRE_CALL_RE,
    bound_names,
    code_text,
    is_local,
    module_root,
)

DependencySource = Union[DependencySet, DependencyGroups, Iterable[DependencySet]]


def search_declarations(
    lines: Sequence[SourceLine],
    dependencies: Iterable[Dependency],
    file: str = "",
) -> list[Declaration]:
    """Find import-style statements that bind one of *dependencies*.

    A statement matches when the leading segment of its module path equals a
    dependency name exactly (``lodash/fp`` matches ``lodash``, ``lodash-x``
    does not).  Every match is emitted, in line order and left to right.
    """
    names = {d.name for d in dependencies}
    declarations: list[Declaration] = []
    if not names:
        return declarations

    for line in lines:
        text = code_text(line.text)
        if not text:
            continue
        matches = [m for pattern in BINDING_PATTERNS for m in pattern.finditer(text)]
        for m in sorted(matches, key=lambda m: m.start()):
            name = module_root(m.group("module"))
            if name not in names:
                continue
            declarations.append(
                Declaration(
                    name=name,
                    statement=m.group(0).lstrip(",").lstrip(),
                    line=line.line_number,
                    identifiers=bound_names(m.group("binding")),
                    reference=m.group("ref"),
                    file=file,
                )
            )
    return declarations


def search_requires(
    lines: Sequence[SourceLine],
    dependencies: Iterable[Dependency],
    file: str = "",
) -> list[Reference]:
    """Find direct ``require('<module>')`` calls referencing *dependencies*."""
    names = {d.name for d in dependencies}
    requires: list[Reference] = []
    if not names:
        return requires

    for line in lines:
        text = code_text(line.text)
        if not text:
            continue
        for m in REQUIRE_CALL_RE.finditer(text):
            name = module_root(m.group("module"))
            if name in names:
                requires.append(
                    Reference(name=name, statement=m.group(0), line=line.line_number, file=file)
                )
    return requires


def search_usage(
    lines: Sequence[SourceLine],
    file_label: str,
    declarations: Iterable[Declaration],
) -> list[UsageRecord]:
    """Build one usage record per declaration.

    ``occurrences`` counts the lines where any bound identifier appears as a
    whole word, the declaring line included.  Nothing is filtered here.
    """
    usage: list[UsageRecord] = []
    for decl in declarations:
        occurrences = _count_occurrences(lines, decl.identifiers)
        usage.append(
            UsageRecord(
                name=decl.name,
                declaration=decl.canonical,
                file=file_label,
                line=decl.line,
                occurrences=max(occurrences, 1),
            )
        )
    return usage


def search_missing_dependencies(
    lines: Sequence[SourceLine],
    dependency_sets: DependencySource,
    file: str = "",
) -> list[MissingRecord]:
    """Find module references absent from every declared dependency set.

    Relative paths and Node.js built-in modules are never reported.
    """
    declared = _declared_names(dependency_sets)
    missing: list[MissingRecord] = []

    for line in lines:
        text = code_text(line.text)
        if not text:
            continue
        matches = [m for pattern in MODULE_PATTERNS for m in pattern.finditer(text)]
        for m in sorted(matches, key=lambda m: m.start()):
            module = m.group("module")
            if is_local(module) or is_builtin(module):
                continue
            name = module_root(module)
            if name not in declared:
                missing.append(MissingRecord(name=name, file=file, line=line.line_number))
    return missing


def _declared_names(dependency_sets: DependencySource) -> set[str]:
    if isinstance(dependency_sets, DependencyGroups):
        return dependency_sets.all_names()
    if isinstance(dependency_sets, DependencySet):
        return set(dependency_sets.names())
    names: set[str] = set()
    for dep_set in dependency_sets:
        names.update(dep_set.names())
    return names


def _count_occurrences(lines: Sequence[SourceLine], identifiers: Sequence[str]) -> int:
    if not identifiers:
        return 0
    alternatives = "|".join(re.escape(i) for i in identifiers)
    # a spread prefix (...name) counts, other property access (.name) does not
    pattern = re.compile(rf"""(?:(?<=\.\.\.)|(?<![\w$.'"`/@-]))(?:{alternatives})(?![\w$'"`/])""")
    return sum(1 for line in lines if pattern.search(code_text(line.text)))
