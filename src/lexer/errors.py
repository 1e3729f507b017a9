"""Failure tags raised by the call-site lexer."""

from __future__ import annotations

from enum import Enum


class ParseFailure(str, Enum):
    """Why a call site could not be parsed."""

    WINDOW_OVERFLOW = "window_overflow"
    NO_ARGUMENT_LIST = "no_argument_list"
    NOT_A_LITERAL = "not_a_literal"
    UNTERMINATED_LITERAL = "unterminated_literal"
    LITERAL_EXPRESSION = "literal_expression"
    DANGLING_ESCAPE = "dangling_escape"
    UNBALANCED = "unbalanced"
    ARITY_MISMATCH = "arity_mismatch"
    EMPTY_ARGUMENT = "empty_argument"
    MALFORMED_LENGTH = "malformed_length"


class StructuralParseError(Exception):
    """Raised when call-site text violates the expected call structure."""

    def __init__(self, reason: ParseFailure, offset: int | None = None) -> None:
        self.reason = reason
        self.offset = offset
        if offset is None:
            super().__init__(reason.value)
        else:
            super().__init__(f"{reason.value} at offset {offset}")


__all__ = ["ParseFailure", "StructuralParseError"]
