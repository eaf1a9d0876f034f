"""Statement patterns for import/require detection in JS/TS source lines.

Matching is line-based and heuristic: statements split across lines,
computed module paths and bundler aliases are not recognised.
"""

from __future__ import annotations

import re

_IDENT = r"[A-Za-z_$][\w$]*"

# 'module' | "module" | `module` (no interpolation)
_MODULE = r"""(?P<q>['"`])(?P<module>[^'"`\s]+)(?P=q)"""

# const x = require('module') / const { a, b: c } = require('module')
# var a=require('a'),b=require('b') binds each name after the comma too
REQUIRE_BINDING_RE = re.compile(
    rf"""(?:\b(?:const|let|var)\s+|,\s*)(?P<binding>{_IDENT}|\{{[^}}]*\}})\s*=\s*"""
    rf"""(?P<ref>require\s*\(\s*{_MODULE}\s*\))"""
)

# import x from 'module' / import * as x from 'module' / import { a } from 'module'
# import x, { a } from 'module' / import x, * as y from 'module'
# import type { A } from 'module' (TypeScript)
IMPORT_BINDING_RE = re.compile(
    rf"""\bimport\s+(?:type\s+)?(?P<binding>"""
    rf"""{_IDENT}(?:\s*,\s*(?:\{{[^}}]*\}}|\*\s*as\s+{_IDENT}))?"""
    rf"""|\*\s*as\s+{_IDENT}"""
    rf"""|\{{[^}}]*\}})"""
    rf"""\s*(?P<ref>from\s*{_MODULE})"""
)

BINDING_PATTERNS = (REQUIRE_BINDING_RE, IMPORT_BINDING_RE)

# require('module')
REQUIRE_CALL_RE = re.compile(rf"""\brequire\s*\(\s*{_MODULE}\s*\)""")

# import ... from 'module' / export ... from 'module'
IMPORT_FROM_RE = re.compile(rf"""\b(?:import|export)\s+[^'"`;]*?\bfrom\s*{_MODULE}""")

# import 'module' (side effect) / import('module') (dynamic, literal only)
IMPORT_BARE_RE = re.compile(rf"""\bimport\s*\(?\s*{_MODULE}""")

MODULE_PATTERNS = (REQUIRE_CALL_RE, IMPORT_FROM_RE, IMPORT_BARE_RE)

_IDENT_RE = re.compile(rf"^{_IDENT}$")
_AS_RE = re.compile(r"\s+as\s+")
# inline TypeScript modifier: import { type A, B } from 'm'
_TYPE_PREFIX_RE = re.compile(r"^type\s+(?!as\s)")

_COMMENT_PREFIXES = ("//", "/*", "*")

# one or more closed /* ... */ blocks at the start of a line
_LEADING_BLOCK_RE = re.compile(r"^\s*(?:/\*.*?\*/\s*)+")


def code_text(text: str) -> str:
    """Return *text* without leading closed block comments.

    Returns ``""`` when nothing but a comment is left, so
    ``/* eslint-disable */ const x = require('x')`` keeps its code while
    ``// require('x')`` and JSDoc continuation lines are dropped.
    """
    code = _LEADING_BLOCK_RE.sub("", text, count=1)
    if code.lstrip().startswith(_COMMENT_PREFIXES):
        return ""
    return code


def is_local(module: str) -> bool:
    """Return True for relative, absolute or URL module paths."""
    return module.startswith((".", "/")) or "://" in module


def module_root(module: str) -> str:
    """Return the package name a module path resolves to.

    ``lodash/fp`` -> ``lodash``; ``@scope/pkg/sub`` -> ``@scope/pkg``.
    """
    parts = module.split("/")
    if module.startswith("@") and len(parts) > 1:
        return "/".join(parts[:2])
    return parts[0]


def bound_names(binding: str) -> tuple[str, ...]:
    """Return the local identifiers introduced by a binding clause.

    Handles ``x``, ``* as x``, ``{ a, b as c }``, ``{ a, b: c, d = 1, ...rest }``
    and default-plus-named combinations.
    """
    names: list[str] = []
    flat = binding.replace("{", ",").replace("}", ",")
    for piece in flat.split(","):
        piece = piece.strip()
        if not piece:
            continue
        piece = _TYPE_PREFIX_RE.sub("", piece)
        if _AS_RE.search(piece):
            piece = _AS_RE.split(piece)[-1]
        elif ":" in piece:
            piece = piece.split(":", 1)[1]
        if "=" in piece:
            piece = piece.split("=", 1)[0]
        piece = piece.strip().lstrip(".").strip()
        if _IDENT_RE.match(piece) and piece not in names:
            names.append(piece)
    return tuple(names)
