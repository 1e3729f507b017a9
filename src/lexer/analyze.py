"""Single-call analysis entry point."""

from __future__ import annotations

import logging

from contract.constants import ARITY, MAX_WINDOW
from contract.models import CallRecord, CallSite
from lexer.arguments import split_arguments
from lexer.errors import ParseFailure, StructuralParseError
from lexer.validator import validate_call
from lexer.window import SourceWindow

logger = logging.getLogger(__name__)


def analyze(
    call_text: str,
    *,
    path: str = "<input>",
    line_number: int = 0,
    arity: int = ARITY,
    max_window: int = MAX_WINDOW,
) -> CallRecord:
    """Analyze call-site text beginning at its opening parenthesis.

    Structural errors never escape: they become an ``unparseable`` record
    with no spans. The function keeps no state between calls.
    """
    try:
        window = SourceWindow.from_text(call_text, max_window)
        spans = split_arguments(window, arity=arity)
        verdict = validate_call(spans)
    except StructuralParseError as exc:
        logger.debug("%s:%d: cannot parse (%s)", path, line_number, exc)
        return CallRecord(
            path=path,
            line_number=line_number,
            call_text=call_text,
            classification="unparseable",
            failure=exc.reason,
        )

    logger.debug("%s:%d: %s", path, line_number, verdict.classification)
    return CallRecord(
        path=path,
        line_number=line_number,
        call_text=call_text,
        spans=spans,
        classification=verdict.classification,
        length=verdict.length,
        literal_lengths=verdict.literal_lengths,
    )


def analyze_site(
    site: CallSite,
    *,
    arity: int = ARITY,
    max_window: int = MAX_WINDOW,
) -> CallRecord:
    """Analyze a located call site, including ones with no argument list."""
    if not site.has_argument_list:
        return CallRecord(
            path=site.path,
            line_number=site.line_number,
            call_text=site.call_text,
            classification="unparseable",
            failure=ParseFailure.NO_ARGUMENT_LIST,
        )
    return analyze(
        site.call_text,
        path=site.path,
        line_number=site.line_number,
        arity=arity,
        max_window=max_window,
    )


__all__ = ["analyze", "analyze_site"]
