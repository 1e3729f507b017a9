"""Length-argument checks over split call arguments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lexer.errors import ParseFailure, StructuralParseError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from contract.models import ArgumentSpan, Classification

# Same forms strtoul() accepts with base 0.
_INTEGER_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*")


@dataclass(frozen=True)
class Verdict:
    classification: Classification
    length: int | None = None
    literal_lengths: tuple[int, ...] = field(default_factory=tuple)


def parse_length_literal(text: str) -> int:
    """Parse an unsigned C integer literal that must fill the whole token.

    Raises:
        StructuralParseError: If anything other than whitespace follows the
            number.
    """
    token = text.strip()
    match = _INTEGER_RE.match(token)
    if match is None or token[match.end() :].strip():
        raise StructuralParseError(ParseFailure.MALFORMED_LENGTH)
    number = match.group(0)
    if number[:2] in {"0x", "0X"}:
        return int(number, 16)
    if number.startswith("0"):
        return int(number, 8)
    return int(number, 10)


def validate_call(spans: Sequence[ArgumentSpan]) -> Verdict:
    """Classify a split call by its trailing length argument.

    Calls without any string-literal argument are ok. Otherwise the last
    argument must be an identifier/expression (ok, unknowable) or a plain
    integer literal, which must equal the decoded length of at least one of
    the preceding literal arguments.
    """
    if not any(span.is_literal for span in spans):
        return Verdict("ok")

    literal_lengths = tuple(
        span.decoded_length for span in spans[:-1] if span.decoded_length is not None
    )
    last = spans[-1].text.strip()
    head = last[:1]

    if head == "(":
        raise StructuralParseError(ParseFailure.MALFORMED_LENGTH, spans[-1].start)
    if head == "_" or (head.isascii() and head.isalpha()):
        return Verdict("ok", literal_lengths=literal_lengths)
    if not (head.isascii() and head.isdigit()):
        raise StructuralParseError(ParseFailure.MALFORMED_LENGTH, spans[-1].start)

    length = parse_length_literal(last)
    if length in literal_lengths:
        return Verdict("ok", length=length, literal_lengths=literal_lengths)
    return Verdict("flagged", length=length, literal_lengths=literal_lengths)


__all__ = ["Verdict", "parse_length_literal", "validate_call"]
