"""Scan loop: files to call sites to records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from contract.constants import ARITY
from lexer.analyze import analyze_site
from report.summary import ScanSummary
from rules.config import LenCheckConfig
from scan.call_sites import iter_call_sites
from scan.files import find_source_files

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from contract.models import CallRecord

logger = logging.getLogger(__name__)


def scan_lines(
    display_path: str,
    lines: Iterable[str],
    *,
    arity: int = ARITY,
    max_window: int,
) -> ScanSummary:
    """Analyze every call site in ``lines``.

    The rest of a line is skipped after its first unparseable call.
    """
    line_count = 0

    def counted() -> Iterator[str]:
        nonlocal line_count
        for line in lines:
            line_count += 1
            yield line

    calls = 0
    findings: list[CallRecord] = []
    abandoned_line = 0
    for site in iter_call_sites(display_path, counted()):
        if site.line_number == abandoned_line:
            continue
        calls += 1
        record = analyze_site(site, arity=arity, max_window=max_window)
        if record.is_finding:
            findings.append(record)
        if record.classification == "unparseable":
            abandoned_line = site.line_number
    return ScanSummary(files=1, lines=line_count, calls=calls, findings=tuple(findings))


def scan_file(
    path: Path,
    config: LenCheckConfig,
    *,
    display_path: str | None = None,
) -> ScanSummary:
    """Scan one file. Raises OSError when the file cannot be read."""
    shown = display_path if display_path is not None else str(path)
    logger.debug("scanning %s", shown)
    with path.open(encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return scan_lines(shown, handle, max_window=config.max_window)


def _iter_targets(target: Path, config: LenCheckConfig) -> Iterable[Path]:
    if target.is_file():
        return [target]
    return find_source_files(
        target,
        extensions=config.extensions,
        include_patterns=config.include,
        exclude_patterns=config.exclude,
        nested_gitignore=config.nested_gitignore,
        respect_gitignore=config.respect_gitignore,
    )


def scan_path(target: Path, config: LenCheckConfig | None = None) -> ScanSummary:
    """Scan a file or directory tree and return the merged summary.

    Unreadable files are logged, recorded in ``unreadable_files`` and
    skipped; they never abort the run.
    """
    if config is None:
        config = LenCheckConfig()

    total = ScanSummary()
    for path in _iter_targets(target, config):
        try:
            file_summary = scan_file(path, config)
        except OSError as exc:
            logger.warning("cannot read file %s: %s", path, exc)
            file_summary = ScanSummary(unreadable_files=(str(path),))
        total = total.merge(file_summary)
    return total


__all__ = ["scan_file", "scan_lines", "scan_path"]
