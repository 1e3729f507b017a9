from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract.constants import CONFIG_FILENAME, DEFAULT_EXTENSIONS, MAX_WINDOW


class LenCheckConfig(BaseModel):
    """Configuration for a lencheck scan."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File suffixes to scan when walking a directory",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all source files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )
    respect_gitignore: bool = Field(
        default=True,
        description="Skip files matched by .gitignore",
    )
    max_window: int = Field(
        default=MAX_WINDOW,
        gt=0,
        description="Maximum call-site text length in bytes",
    )

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Require non-empty suffixes that start with a dot."""
        if not v:
            msg = "extensions must list at least one suffix"
            raise ValueError(msg)
        for suffix in v:
            if len(suffix) < 2 or not suffix.startswith("."):
                msg = f"Invalid extension '{suffix}': expected a suffix like '.c'"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path, config_path: Path | None = None) -> LenCheckConfig:
    """Load configuration from an explicit file or ``lencheck.toml`` under root.

    A missing default file yields the defaults; a missing explicit file is an
    error.
    """
    if config_path is None:
        base = root if root.is_dir() else root.parent
        config_path = base / CONFIG_FILENAME
        if not config_path.is_file():
            return LenCheckConfig()
    elif not config_path.is_file():
        msg = f"Config file does not exist: {config_path}"
        raise ConfigError(msg)

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return LenCheckConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
