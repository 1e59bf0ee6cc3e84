from __future__ import annotations
import os
from pathlib import Path
from typing import Optional, Tuple

from contextify.core.interfaces.walker import (
    MatcherProtocol,
    TranscriberProtocol,
    WalkAction,
)
from contextify.core.models import Node
from contextify.core.report import RunReport
from contextify.io.traversal import DepthFirstTraversal
from contextify.core.interfaces.logging import LoggerLikeProtocol
from contextify.logging.helpers import get_logger, log_context


class TreeWalker:
    """Walk a source tree, prune excluded directories and transcribe matching files.

    The first TraversalError or TranscriptionError ends the walk and
    propagates; nothing after the failing node is visited. When *output*
    lies inside the source tree it is never transcribed into itself.
    """

    def __init__(
        self,
        *,
        matcher: MatcherProtocol,
        transcriber: TranscriberProtocol,
        report: Optional[RunReport] = None,
        output: Optional[str | Path] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._matcher = matcher
        self._transcriber = transcriber
        self._report = report if report is not None else RunReport()
        self._log = logger or get_logger('io.walker')
        self._output = output
        self._output_id: Optional[Tuple[int, int]] = None
        self._count = 0

    @property
    def report(self) -> RunReport:
        return self._report

    def walk(self, source: str | Path) -> int:
        """Traverse *source* and return the number of files transcribed."""
        self._count = 0
        self._output_id = _file_identity(self._output) if self._output is not None else None
        DepthFirstTraversal(source, logger=self._log).walk(self._visit)
        return self._count

    def _visit(self, node: Node) -> WalkAction:
        if node.is_dir:
            if self._matcher.should_exclude_directory(node.relpath):
                self._log.debug('Excluding directory', extra=log_context(path=node.relpath))
                self._report.add_excluded_dir(node.relpath)
                return WalkAction.SKIP_SUBTREE
            return WalkAction.CONTINUE

        if not self._matcher.should_include_file(node.path):
            self._log.debug('Skipping file (extension not included)', extra=log_context(path=node.relpath))
            self._report.add_skipped()
            return WalkAction.CONTINUE

        if self._is_output(node):
            self._log.debug('Skipping output file', extra=log_context(path=node.relpath))
            return WalkAction.CONTINUE

        self._log.debug('Processing file', extra=log_context(path=node.relpath))
        lines = self._transcriber.transcribe(node.path, node.relpath)
        self._count += 1
        self._report.add_file(lines)
        return WalkAction.CONTINUE

    def _is_output(self, node: Node) -> bool:
        if self._output_id is None:
            return False
        return _file_identity(node.path) == self._output_id


def _file_identity(path: str | Path) -> Optional[Tuple[int, int]]:
    """Return ``(st_dev, st_ino)`` for *path*, or None when it cannot be stat'ed."""
    try:
        st = os.stat(path)
    except OSError:
        return None
    return (st.st_dev, st.st_ino)
