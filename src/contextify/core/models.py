from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple

from contextify.constants import DEFAULT_MAX_LINE_BYTES, VCS_DIR
from contextify.parsing.list_ops import dedupe, ensure_present


@dataclass(frozen=True)
class RunConfig:
    """Resolved, read-only configuration of a single run.

    The ordered tuples are kept for the run header; the frozensets are the
    lookup structures used while walking. Construction always makes the
    source absolute, drops repeated items and appends '.git' when missing.
    """
    source: Path
    output: Path
    exclude: Tuple[str, ...] = (VCS_DIR,)
    extensions: Tuple[str, ...] = ()
    max_line_bytes: int = DEFAULT_MAX_LINE_BYTES
    exclude_set: FrozenSet[str] = field(init=False, repr=False, compare=False)
    include_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'source', Path(os.path.abspath(self.source)))
        object.__setattr__(self, 'output', Path(self.output))
        object.__setattr__(self, 'exclude', tuple(ensure_present(dedupe(self.exclude), VCS_DIR)))
        object.__setattr__(self, 'extensions', tuple(dedupe(self.extensions)))
        object.__setattr__(self, 'exclude_set', frozenset(self.exclude))
        object.__setattr__(self, 'include_set', frozenset(self.extensions))

    @classmethod
    def from_lists(
        cls,
        *,
        source: str | Path,
        output: str | Path,
        exclude: Optional[Iterable[str]] = None,
        extensions: Optional[Iterable[str]] = None,
        max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
    ) -> 'RunConfig':
        """Build a config from already-split lists, applying the defaults."""
        return cls(
            source=Path(source),
            output=Path(output),
            exclude=tuple(exclude or ()),
            extensions=tuple(extensions or ()),
            max_line_bytes=max_line_bytes,
        )


@dataclass(frozen=True)
class Node:
    """A single entry produced by the depth-first traversal."""
    path: Path
    relpath: str
    is_dir: bool
