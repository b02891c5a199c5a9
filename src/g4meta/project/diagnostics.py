"""
Diagnostics collected while reading a descriptor.

Per-reference problems (a missing grammar file, an unreadable header) do not
abort a parse; they are returned to the caller alongside the partial result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single message about one descriptor reference."""
    message: str
    path: Path | None = None
    severity: Severity = Severity.WARNING

    def __str__(self):
        return self.message
