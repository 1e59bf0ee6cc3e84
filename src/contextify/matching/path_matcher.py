from __future__ import annotations
"""Directory-exclusion and extension-inclusion predicates.

Semantics:
    * A directory is excluded when ANY segment of its root-relative path
      equals an entry of the exclusion set, or when the whole relative path
      equals an entry verbatim. There is no glob or prefix matching.
    * A file is included when the inclusion set is empty, or when its
      extension (last dot-delimited suffix of the basename, dot included)
      is a member of the inclusion set.

Both checks are exact and case-sensitive. Paths are split on the native
separator only.

Examples:
    should_exclude_directory("src/node_modules/pkg", {"node_modules"})  -> True
    should_exclude_directory("docs/build", {"docs/build"})              -> True
    should_exclude_directory("docs/builder", {"build"})                 -> False
    should_include_file("pkg/main.go", {".go"})                         -> True
    should_include_file("Makefile", {".go"})                            -> False
"""

import os
from pathlib import Path
from typing import AbstractSet, Iterable, Optional


def file_extension(name: str) -> str:
    """Return the suffix starting at the last dot of *name*'s basename, or ''."""
    base = os.path.basename(name)
    idx = base.rfind(".")
    return base[idx:] if idx >= 0 else ""


def should_exclude_directory(relpath: str, exclusion_set: AbstractSet[str]) -> bool:
    if not exclusion_set:
        return False
    if any(part in exclusion_set for part in relpath.split(os.sep)):
        return True
    return relpath in exclusion_set


def should_include_file(path: str | Path, inclusion_set: AbstractSet[str]) -> bool:
    if not inclusion_set:
        return True
    ext = file_extension(str(path))
    return bool(ext) and ext in inclusion_set


class PathMatcher:
    """Binds the two predicates to a fixed pair of lookup sets."""

    def __init__(self, *, exclude: Optional[Iterable[str]] = None, include: Optional[Iterable[str]] = None) -> None:
        self._exclude = frozenset(exclude or ())
        self._include = frozenset(include or ())

    @classmethod
    def from_config(cls, config) -> 'PathMatcher':
        return cls(exclude=config.exclude_set, include=config.include_set)

    def should_exclude_directory(self, relpath: str) -> bool:
        return should_exclude_directory(relpath, self._exclude)

    def should_include_file(self, path: str | Path) -> bool:
        return should_include_file(path, self._include)
