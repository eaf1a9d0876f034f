"""Scan settings, read from environment variables.

Environment variables:
    SZERO_EXCLUDE_DIRS  — extra directory names to skip (comma-separated)
    SZERO_IGNORE        — dependency names to leave out of the scan (comma-separated)
    SZERO_REPORT_FILE   — report filename (default: szero.txt)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from szero.reader import DEFAULT_EXCLUDE_DIRS
from szero.reporter import REPORT_FILENAME


def _split_env(key: str) -> frozenset[str]:
    raw = os.environ.get(key, "")
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class ScanSettings:
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDE_DIRS
    ignore: frozenset[str] = field(default_factory=frozenset)
    report_file: str = REPORT_FILENAME

    @classmethod
    def from_env(cls) -> ScanSettings:
        return cls(
            exclude_dirs=DEFAULT_EXCLUDE_DIRS | _split_env("SZERO_EXCLUDE_DIRS"),
            ignore=_split_env("SZERO_IGNORE"),
            report_file=os.environ.get("SZERO_REPORT_FILE", REPORT_FILENAME) or REPORT_FILENAME,
        )

    def with_overrides(self, ignore: tuple[str, ...] = ()) -> ScanSettings:
        """Return settings with CLI-supplied ignore names added."""
        return ScanSettings(
            exclude_dirs=self.exclude_dirs,
            ignore=self.ignore | frozenset(ignore),
            report_file=self.report_file,
        )
