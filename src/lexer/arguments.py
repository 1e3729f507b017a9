"""Top-level argument splitting for a parenthesized call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.constants import ARITY
from contract.models import ArgumentSpan
from lexer.errors import ParseFailure, StructuralParseError
from lexer.literal import QUOTE, scan_literal

if TYPE_CHECKING:
    from lexer.window import SourceWindow

OPEN_PAREN = ord("(")
CLOSE_PAREN = ord(")")
COMMA = ord(",")
WHITESPACE = b" \t\r\n\v\f"


def _literal_group_length(
    window: SourceWindow,
    start: int,
    end: int,
    groups: list[tuple[int, int, int]],
) -> int | None:
    """Decoded length of an argument that starts with a literal group.

    A leading literal must run to the end of the argument; a literal that
    only appears later in an expression gives no length.
    """
    if not groups:
        return None
    group_start, group_end, length = groups[0]
    raw = window.data[start:end]
    leading = len(raw) - len(raw.lstrip(WHITESPACE))
    trailing = len(raw.rstrip(WHITESPACE))
    if group_start != start + leading:
        return None
    if group_end != start + trailing:
        raise StructuralParseError(ParseFailure.LITERAL_EXPRESSION, group_end)
    return length


def _make_span(
    window: SourceWindow,
    start: int,
    end: int,
    groups: list[tuple[int, int, int]],
) -> ArgumentSpan:
    if not window.data[start:end].strip(WHITESPACE):
        raise StructuralParseError(ParseFailure.EMPTY_ARGUMENT, start)
    return ArgumentSpan(
        start=start,
        end=end,
        text=window.slice(start, end),
        decoded_length=_literal_group_length(window, start, end, groups),
    )


def split_arguments(
    window: SourceWindow, *, arity: int = ARITY
) -> tuple[ArgumentSpan, ...]:
    """Split the call at the start of ``window`` into exactly ``arity`` arguments.

    Only commas at nesting depth 1 separate arguments. String literals are
    skipped whole at any depth so quoted commas and parentheses never count;
    a literal group at depth 1 that starts an argument gives that span its
    decoded length and must also end it.

    Raises:
        StructuralParseError: On unbalanced parentheses, the wrong number of
            arguments, an empty argument, a malformed literal, or a leading
            literal that continues into an expression.
    """
    if arity < 2:
        msg = f"arity must be >= 2, got {arity}"
        raise ValueError(msg)
    if window.byte_at(0) != OPEN_PAREN:
        raise StructuralParseError(ParseFailure.NO_ARGUMENT_LIST, 0)

    spans: list[ArgumentSpan] = []
    groups: list[tuple[int, int, int]] = []
    depth = 0
    arg_start = 1
    offset = 0
    size = len(window)
    while offset < size:
        byte = window.data[offset]
        if byte == QUOTE and depth >= 1:
            length, end_offset = scan_literal(window, offset)
            if depth == 1:
                groups.append((offset, end_offset, length))
            offset = end_offset
            continue
        if byte == OPEN_PAREN:
            depth += 1
        elif byte == CLOSE_PAREN:
            depth -= 1
            if depth == 0:
                if len(spans) != arity - 1:
                    raise StructuralParseError(ParseFailure.ARITY_MISMATCH, offset)
                spans.append(_make_span(window, arg_start, offset, groups))
                return tuple(spans)
        elif byte == COMMA and depth == 1:
            if len(spans) >= arity - 1:
                raise StructuralParseError(ParseFailure.ARITY_MISMATCH, offset)
            spans.append(_make_span(window, arg_start, offset, groups))
            groups = []
            arg_start = offset + 1
        offset += 1

    raise StructuralParseError(ParseFailure.UNBALANCED, size)


__all__ = ["split_arguments"]
