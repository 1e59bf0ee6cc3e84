from __future__ import annotations

"""
traversal – Depth-first, pre-order directory traversal with subtree pruning.

The visitor sees the root first (relative path ``.``), then every entry of
each directory in byte-wise name order, each directory before its
descendants. Returning ``WalkAction.SKIP_SUBTREE`` for a directory prevents
any listing of it. Symbolic links are reported as non-directory nodes and
never descended. Listing failures abort the walk with TraversalError.
"""

import os
import stat
from pathlib import Path
from typing import List, Optional

from contextify.core.errors import TraversalError
from contextify.core.interfaces.walker import Visitor, WalkAction
from contextify.core.models import Node
from contextify.core.interfaces.logging import LoggerLikeProtocol
from contextify.logging.helpers import get_logger, log_context


def _child_relpath(parent: str, name: str) -> str:
    return name if parent == '.' else os.path.join(parent, name)


class DepthFirstTraversal:
    def __init__(self, root: str | Path, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._root = Path(root)
        self._log = logger or get_logger('io.traversal')

    def _fail(self, path: Path, exc: OSError) -> TraversalError:
        self._log.warning('Error accessing path', extra=log_context(path=str(path), error=str(exc)))
        return TraversalError(f'failed to access {path}', path=path)

    def _root_node(self) -> Node:
        try:
            st = os.stat(self._root)
        except OSError as exc:
            raise self._fail(self._root, exc) from exc
        return Node(path=self._root, relpath='.', is_dir=stat.S_ISDIR(st.st_mode))

    def _children(self, node: Node) -> List[Node]:
        try:
            with os.scandir(node.path) as it:
                entries = sorted(it, key=lambda e: os.fsencode(e.name))
            return [
                Node(
                    path=node.path / e.name,
                    relpath=_child_relpath(node.relpath, e.name),
                    is_dir=e.is_dir(follow_symlinks=False),
                )
                for e in entries
            ]
        except OSError as exc:
            raise self._fail(node.path, exc) from exc

    def walk(self, visitor: Visitor) -> None:
        # Explicit stack keeps deep trees clear of the recursion limit.
        stack: List[Node] = [self._root_node()]
        while stack:
            node = stack.pop()
            action = visitor(node)
            if not node.is_dir or action is WalkAction.SKIP_SUBTREE:
                continue
            stack.extend(reversed(self._children(node)))
