from __future__ import annotations
import enum
from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from contextify.core.models import Node


class WalkAction(enum.Enum):
    """Control signal returned by a traversal visitor."""
    CONTINUE = 'continue'
    SKIP_SUBTREE = 'skip_subtree'


Visitor = Callable[[Node], WalkAction]


@runtime_checkable
class TraversalProtocol(Protocol):
    """Depth-first, pre-order traversal driven by a visitor."""

    def walk(self, visitor: Visitor) -> None:
        """Visit every reachable node unless the visitor prunes it."""
        ...


@runtime_checkable
class MatcherProtocol(Protocol):
    """Directory exclusion and file inclusion predicates."""

    def should_exclude_directory(self, relpath: str) -> bool:
        ...

    def should_include_file(self, path: str | Path) -> bool:
        ...


@runtime_checkable
class TranscriberProtocol(Protocol):
    """Copies a single file into the shared output stream."""

    def transcribe(self, path: Path, relpath: str) -> int:
        """Write the framed file content and return the number of lines."""
        ...
