"""Scan orchestration and result reporting."""

from report.summary import ScanSummary
from report.write import summary_line, write_findings_jsonl, write_report

__all__ = ["ScanSummary", "summary_line", "write_findings_jsonl", "write_report"]
