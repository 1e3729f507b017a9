"""Aggregate counters for a scan run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contract.models import CallRecord


@dataclass(frozen=True)
class ScanSummary:
    """Per-file or per-run accumulator; combine with :meth:`merge`."""

    files: int = 0
    lines: int = 0
    calls: int = 0
    unreadable_files: tuple[str, ...] = field(default_factory=tuple)
    findings: tuple[CallRecord, ...] = field(default_factory=tuple)

    @property
    def clean(self) -> bool:
        return not self.findings and not self.unreadable_files

    @property
    def flagged(self) -> int:
        return sum(1 for record in self.findings if record.classification == "flagged")

    @property
    def unparseable(self) -> int:
        return sum(
            1 for record in self.findings if record.classification == "unparseable"
        )

    def merge(self, other: ScanSummary) -> ScanSummary:
        return ScanSummary(
            files=self.files + other.files,
            lines=self.lines + other.lines,
            calls=self.calls + other.calls,
            unreadable_files=self.unreadable_files + other.unreadable_files,
            findings=self.findings + other.findings,
        )


__all__ = ["ScanSummary"]
