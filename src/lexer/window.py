"""Bounded byte view over call-site text."""

from __future__ import annotations

from dataclasses import dataclass, field

from contract.constants import MAX_WINDOW
from lexer.errors import ParseFailure, StructuralParseError

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def encode_text(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


def decode_bytes(data: bytes) -> str:
    return data.decode(_ENCODING, _ERRORS)


def display_text(text: str) -> str:
    """Printable form of decoded source text; undecodable bytes become ``\\xNN``."""
    return encode_text(text).decode(_ENCODING, "backslashreplace")


@dataclass(frozen=True)
class SourceWindow:
    """Immutable view of the call text starting at the opening parenthesis.

    Offsets and lengths are measured in UTF-8 bytes so decoded literal
    lengths match what a C compiler stores. Text longer than ``max_length``
    is rejected at construction time rather than truncated.
    """

    data: bytes
    max_length: int = MAX_WINDOW
    text: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.data) > self.max_length:
            raise StructuralParseError(ParseFailure.WINDOW_OVERFLOW, self.max_length)
        object.__setattr__(self, "text", decode_bytes(self.data))

    @classmethod
    def from_text(cls, text: str, max_length: int = MAX_WINDOW) -> SourceWindow:
        return cls(encode_text(text), max_length)

    def __len__(self) -> int:
        return len(self.data)

    def byte_at(self, offset: int) -> int | None:
        """Return the byte at ``offset`` or None past the end of the window."""
        if 0 <= offset < len(self.data):
            return self.data[offset]
        return None

    def slice(self, start: int, end: int) -> str:
        return decode_bytes(self.data[start:end])


__all__ = ["SourceWindow", "decode_bytes", "display_text", "encode_text"]
