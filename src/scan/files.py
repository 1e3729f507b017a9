"""Source file discovery for lencheck."""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatch
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

from contract.constants import DEFAULT_EXTENSIONS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from pathlib import Path


def _collect_gitignores(root: Path, *, nested: bool) -> list[Path]:
    """Regular (non-symlinked) .gitignore files that apply under root."""
    candidates = root.rglob(".gitignore") if nested else [root / ".gitignore"]
    found = {path for path in candidates if path.is_file() and not path.is_symlink()}
    return sorted(found, key=lambda p: p.relative_to(root).as_posix())


def _gitignore_matcher(
    root: Path, *, nested: bool
) -> Callable[[str], bool] | None:
    matchers = [
        cast("Callable[[str], bool]", parse_gitignore(path))
        for path in _collect_gitignores(root, nested=nested)
    ]
    if not matchers:
        return None

    def ignored(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                # Raised for paths outside the matcher's base directory.
                continue
        return False

    return ignored


@dataclass(frozen=True)
class _SourceFilter:
    root: Path
    suffixes: frozenset[str]
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    ignored: Callable[[str], bool] | None = field(default=None, compare=False)

    def relative(self, path: Path) -> str | None:
        """Relative POSIX path, or None when the resolved path leaves root."""
        try:
            resolved = path.resolve()
            return resolved.relative_to(self.root.resolve()).as_posix()
        except (OSError, ValueError):
            return None

    def accepts(self, path: Path) -> bool:
        if path.suffix not in self.suffixes:
            return False
        if path.is_symlink() or not path.is_file():
            return False
        rel = self.relative(path)
        if rel is None:
            return False
        if self.ignored is not None and self.ignored(str(path)):
            return False
        if self.include and not any(fnmatch(rel, pat) for pat in self.include):
            return False
        return not any(fnmatch(rel, pat) for pat in self.exclude)


def find_source_files(
    directory: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
    respect_gitignore: bool = True,
) -> Iterator[Path]:
    """Find C/C++ source files under a directory.

    Args:
        directory: Directory to search
        extensions: File suffixes to scan, including the leading dot
        include_patterns: Optional fnmatch patterns on the relative path; if
            given, a file must match one of them
        exclude_patterns: Optional fnmatch patterns; matching files are skipped
        nested_gitignore: Compose every .gitignore under the directory
            instead of only the root one
        respect_gitignore: Set to False to ignore .gitignore files entirely

    Yields:
        Regular files whose resolved path stays inside ``directory``
        (symlinks are skipped), sorted by relative path.
    """
    source_filter = _SourceFilter(
        root=directory,
        suffixes=frozenset(extensions),
        include=tuple(include_patterns or ()),
        exclude=tuple(exclude_patterns or ()),
        ignored=(
            _gitignore_matcher(directory, nested=nested_gitignore)
            if respect_gitignore
            else None
        ),
    )

    matched = [path for path in directory.rglob("*") if source_filter.accepts(path)]
    matched.sort(key=lambda p: p.relative_to(directory).as_posix())
    yield from matched


__all__ = ["find_source_files"]
