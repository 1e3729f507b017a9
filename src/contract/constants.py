"""Fixed scanner parameters shared across packages."""

from __future__ import annotations

FUNCTION = "strncmp"
ARITY = 3

DEFAULT_EXTENSIONS: tuple[str, ...] = (".c", ".cc")

MAX_WINDOW = 8192

CONFIG_FILENAME = "lencheck.toml"

FINDINGS_SCHEMA_VERSION = 1

__all__ = [
    "ARITY",
    "CONFIG_FILENAME",
    "DEFAULT_EXTENSIONS",
    "FINDINGS_SCHEMA_VERSION",
    "FUNCTION",
    "MAX_WINDOW",
]
