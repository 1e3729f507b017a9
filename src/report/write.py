"""Console and JSONL output for scan results."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import orjson

from contract.constants import FUNCTION
from lexer.window import display_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from contract.models import CallRecord
    from report.summary import ScanSummary


def summary_line(summary: ScanSummary, function: str = FUNCTION) -> str:
    return (
        f"scanned {summary.files} files, {summary.lines} lines, "
        f"{summary.calls} {function} calls"
    )


def write_report(summary: ScanSummary, stream: TextIO) -> None:
    """Write one diagnostic line per finding followed by the summary line."""
    for record in summary.findings:
        line = record.diagnostic()
        if line is not None:
            stream.write(f"{line}\n")
    stream.write(f"{summary_line(summary)}\n")


def _finding_payload(record: CallRecord) -> dict[str, object]:
    payload = record.model_dump(mode="json", exclude={"spans", "path", "call_text"})
    payload["path"] = display_text(record.path)
    payload["call_text"] = display_text(record.call_text)
    return payload


def write_findings_jsonl(path: Path, records: Sequence[CallRecord]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        for rec in records:
            f.write(orjson.dumps(_finding_payload(rec), option=orjson.OPT_SORT_KEYS))
            f.write(b"\n")


__all__ = ["summary_line", "write_findings_jsonl", "write_report"]
