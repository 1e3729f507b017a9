"""Shared constants and records for lencheck.

Models are loaded lazily so ``lexer`` and ``contract`` can import each
other's leaf modules without a cycle.
"""

from contract.constants import (
    ARITY,
    CONFIG_FILENAME,
    DEFAULT_EXTENSIONS,
    FINDINGS_SCHEMA_VERSION,
    FUNCTION,
    MAX_WINDOW,
)


def __getattr__(name: str) -> object:
    if name in {"ArgumentSpan", "CallRecord", "CallSite", "Classification"}:
        from contract.models import (
            ArgumentSpan,
            CallRecord,
            CallSite,
            Classification,
        )

        return {
            "ArgumentSpan": ArgumentSpan,
            "CallRecord": CallRecord,
            "CallSite": CallSite,
            "Classification": Classification,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ARITY",
    "CONFIG_FILENAME",
    "DEFAULT_EXTENSIONS",
    "FINDINGS_SCHEMA_VERSION",
    "FUNCTION",
    "MAX_WINDOW",
    "ArgumentSpan",
    "CallRecord",
    "CallSite",
    "Classification",
]
