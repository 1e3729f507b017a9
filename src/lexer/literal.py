"""String-literal scanning for call-site text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lexer.errors import ParseFailure, StructuralParseError

if TYPE_CHECKING:
    from lexer.window import SourceWindow

QUOTE = ord('"')
BACKSLASH = ord("\\")
HORIZONTAL_WHITESPACE = frozenset(b" \t")


def skip_horizontal_whitespace(window: SourceWindow, offset: int) -> int:
    """Return the first offset at or after ``offset`` that is not a space or tab."""
    while window.byte_at(offset) in HORIZONTAL_WHITESPACE:
        offset += 1
    return offset


def _scan_segment(window: SourceWindow, offset: int) -> tuple[int, int, int]:
    """Scan one quoted body starting just past its opening quote.

    Returns (raw byte count, escape count, offset of the closing quote).
    """
    raw = 0
    escapes = 0
    size = len(window)
    while offset < size:
        byte = window.data[offset]
        if byte == QUOTE:
            return raw, escapes, offset
        if byte == BACKSLASH:
            if offset + 1 >= size:
                raise StructuralParseError(ParseFailure.DANGLING_ESCAPE, offset)
            escapes += 1
            raw += 2
            offset += 2
            continue
        raw += 1
        offset += 1
    raise StructuralParseError(ParseFailure.UNTERMINATED_LITERAL, offset)


def scan_literal(window: SourceWindow, start: int) -> tuple[int, int]:
    """Decode the string literal (and any adjacent literals) at ``start``.

    Escape sequences are not interpreted: a backslash and the byte after it
    count as one decoded character. Literals separated only by spaces or
    tabs are concatenated into a single running length.

    Args:
        window: Call-site text.
        start: Offset of the opening double quote.

    Returns:
        (decoded_length, end_offset) where end_offset is just past the last
        closing quote.

    Raises:
        StructuralParseError: If ``start`` is not a quote, the literal is
            never closed, or the window ends on a backslash.
    """
    if window.byte_at(start) != QUOTE:
        raise StructuralParseError(ParseFailure.NOT_A_LITERAL, start)

    decoded_length = 0
    offset = start
    while True:
        raw, escapes, closing = _scan_segment(window, offset + 1)
        decoded_length += raw - escapes
        end_offset = closing + 1
        following = skip_horizontal_whitespace(window, end_offset)
        if window.byte_at(following) != QUOTE:
            return decoded_length, end_offset
        offset = following


__all__ = ["scan_literal", "skip_horizontal_whitespace"]
