"""File reader — load source files as lines and discover candidate sources."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

import structlog

from szero.exceptions import SourceReadError
from szero.models import SourceLine

log = structlog.get_logger("szero.reader")

SOURCE_EXTENSIONS = frozenset({".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"})

# Dependency caches and version-control directories are never descended into
DEFAULT_EXCLUDE_DIRS = frozenset(
    {
        "node_modules",
        "bower_components",
        "jspm_packages",
        ".git",
        ".svn",
        ".hg",
        ".cache",
        "coverage",
    }
)


def read(path: str | os.PathLike[str]) -> list[SourceLine]:
    """Read *path* and return its lines with 1-based line numbers.

    Content is split on ``"\\n"`` with no newline translation, so joining the
    texts with ``"\\n"`` reproduces the file exactly.  An empty file yields
    an empty list.

    Raises ``SourceReadError`` if the path is missing or unreadable.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        log.debug("reader.read_failed", path=str(path), error=str(exc))
        raise SourceReadError(f"Cannot read '{path}': {exc.strerror or exc}") from exc

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError:
        content = raw.decode("latin-1")

    if not content:
        return []
    return [SourceLine(text=text, line_number=i) for i, text in enumerate(content.split("\n"), 1)]


def find(
    root: str | os.PathLike[str],
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    extensions: Iterable[str] = SOURCE_EXTENSIONS,
) -> list[Path]:
    """Collect source files under *root*, pruning excluded directories.

    Returns a sorted list; every call walks the tree afresh.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise SourceReadError(f"Cannot read '{root}': not a directory")

    excluded = frozenset(exclude_dirs)
    suffixes = frozenset(ext.lower() for ext in extensions)

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = [d for d in dirnames if d not in excluded]
        for f in filenames:
            if Path(f).suffix.lower() in suffixes:
                files.append(Path(dirpath) / f)

    log.debug("reader.find_complete", root=str(root_path), files=len(files))
    return sorted(files)
