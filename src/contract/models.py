"""Records exchanged between the lexer, the scanner and the reporter."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from contract.constants import FINDINGS_SCHEMA_VERSION, FUNCTION
from lexer.errors import ParseFailure
from lexer.window import display_text

Classification = Literal["ok", "flagged", "unparseable"]


class ArgumentSpan(BaseModel):
    """One top-level argument of a call, as byte offsets into its window."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    text: str
    decoded_length: int | None = None

    @property
    def is_literal(self) -> bool:
        return self.decoded_length is not None


class CallSite(BaseModel):
    """A candidate call produced by the call-site locator."""

    model_config = ConfigDict(frozen=True)

    path: str
    line_number: int
    call_text: str
    has_argument_list: bool = True


class CallRecord(BaseModel):
    """Outcome of analyzing one call site."""

    schema_version: int = Field(default=FINDINGS_SCHEMA_VERSION)
    function: str = Field(default=FUNCTION)
    path: str
    line_number: int
    call_text: str
    spans: tuple[ArgumentSpan, ...] = ()
    classification: Classification
    failure: ParseFailure | None = None
    length: int | None = None
    literal_lengths: tuple[int, ...] = ()

    @property
    def is_finding(self) -> bool:
        return self.classification != "ok"

    def diagnostic(self) -> str | None:
        """Console line for findings; None for ok calls."""
        path = display_text(self.path)
        call_text = display_text(self.call_text)
        if self.classification == "flagged":
            return f"Bad {self.function}? {path}: line {self.line_number}: {call_text}"
        if self.classification == "unparseable":
            return f"{path}: line {self.line_number}: cannot parse: {call_text}"
        return None


__all__ = ["ArgumentSpan", "CallRecord", "CallSite", "Classification"]
