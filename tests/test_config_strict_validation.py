from __future__ import annotations

from pathlib import Path

import pytest

from rules.config import ConfigError, load_config


def _write_config(repo_root: Path, toml_content: str) -> None:
    (repo_root / "lencheck.toml").write_text(toml_content, encoding="utf-8")


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_function_and_arity_are_not_configurable(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
function = "memcmp"
arity = 2
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "extensions = [")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize("extensions", ["[]", '["c"]', '["."]'])
def test_invalid_extensions_rejected(tmp_path: Path, extensions: str) -> None:
    _write_config(tmp_path, f"extensions = {extensions}")

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_non_positive_window_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "max_window = 0")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
extensions = [".c", ".h"]
exclude = ["vendor/**"]
max_window = 4096
nested_gitignore = true
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.extensions == [".c", ".h"]
    assert config.exclude == ["vendor/**"]
    assert config.max_window == 4096
    assert config.nested_gitignore is True
    assert config.respect_gitignore is True


def test_empty_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    config = load_config(tmp_path)

    assert config.extensions == [".c", ".cc"]
    assert config.include == []
    assert config.exclude == []
    assert config.max_window == 8192


def test_missing_default_config_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path).extensions == [".c", ".cc"]


def test_config_next_to_single_file_target(tmp_path: Path) -> None:
    _write_config(tmp_path, 'extensions = [".h"]')
    target = tmp_path / "a.c"
    target.write_text("", encoding="utf-8")

    assert load_config(target).extensions == [".h"]


def test_missing_explicit_config_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, tmp_path / "nope.toml")
