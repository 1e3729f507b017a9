"""Locate candidate call sites of the target function in source lines."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from contract.constants import FUNCTION
from contract.models import CallSite

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

LINE_COMMENT = "//"


def _name_pattern(function: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![A-Za-z0-9_]){re.escape(function)}(?![A-Za-z0-9_])")


def strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def find_call_sites(
    path: str,
    line_number: int,
    line: str,
    *,
    function: str = FUNCTION,
) -> Iterator[CallSite]:
    """Yield call sites on one line, stopping at the first ``//`` comment.

    Only ``//`` comments are recognized; ``/* */`` blocks and ``//`` inside
    string literals are not.

    A name that is not followed by ``(`` (after optional spaces or tabs) is
    yielded once with ``has_argument_list=False`` and ends the line.
    """
    text = strip_newline(line)
    pattern = _name_pattern(function)
    comment_at = text.find(LINE_COMMENT)

    for match in pattern.finditer(text):
        if comment_at != -1 and comment_at < match.start():
            return
        offset = match.end()
        while offset < len(text) and text[offset] in " \t":
            offset += 1
        if offset >= len(text) or text[offset] != "(":
            yield CallSite(
                path=path,
                line_number=line_number,
                call_text=text[offset:],
                has_argument_list=False,
            )
            return
        yield CallSite(path=path, line_number=line_number, call_text=text[offset:])


def iter_call_sites(
    path: str,
    lines: Iterable[str],
    *,
    function: str = FUNCTION,
) -> Iterator[CallSite]:
    """Lazily yield every candidate call site in ``lines`` (1-based numbering)."""
    for line_number, line in enumerate(lines, start=1):
        yield from find_call_sites(path, line_number, line, function=function)


__all__ = ["find_call_sites", "iter_call_sites", "strip_newline"]
