from __future__ import annotations

"""
output – Ownership of the single output destination of a run.

OutputAssembler moves through ``UNOPENED -> OPEN -> CLOSED``. Every write
requires the OPEN state; ``close`` is safe to call more than once and is
what the context-manager exit calls on every path.

Everything is written as bytes so file content is copied verbatim; text
produced by contextify itself (headers, paths) is UTF-8 encoded with
``surrogateescape`` so undecodable file names survive unchanged.
"""

import enum
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence

from contextify.constants import (
    BANNER,
    EXCLUDED_DIRS,
    GENERATED_FROM,
    INCLUDED_EXTS,
    LIST_JOIN,
)
from contextify.core.errors import (
    CloseError,
    ConfigurationError,
    FlushError,
    OutputCloseError,
    OutputStateError,
)
from contextify.core.interfaces.logging import LoggerLikeProtocol
from contextify.logging.helpers import get_logger, log_context


class OutputState(enum.Enum):
    UNOPENED = 'unopened'
    OPEN = 'open'
    CLOSED = 'closed'


def encode_text(text: str) -> bytes:
    return text.encode('utf-8', errors='surrogateescape')


class OutputAssembler:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('io.output')
        self._state = OutputState.UNOPENED
        self._stream: Optional[BinaryIO] = None
        self._path: Optional[Path] = None
        self._files = 0

    @property
    def state(self) -> OutputState:
        return self._state

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def files_processed(self) -> int:
        return self._files

    @property
    def stream(self) -> BinaryIO:
        self._require_open('stream')
        assert self._stream is not None
        return self._stream

    def _require_open(self, op: str) -> None:
        if self._state is not OutputState.OPEN:
            raise OutputStateError(f'cannot {op}: output is {self._state.value}', path=self._path)

    def open(self, destination: str | Path) -> BinaryIO:
        """Create or truncate *destination* and return the buffered stream."""
        if self._state is not OutputState.UNOPENED:
            raise OutputStateError(f'cannot open: output is {self._state.value}', path=destination)
        path = Path(destination)
        try:
            self._stream = open(path, 'wb')
        except OSError as exc:
            raise ConfigurationError('failed to create output file', path=path) from exc
        self._path = path
        self._state = OutputState.OPEN
        self._log.debug('Output opened', extra=log_context(output=str(path)))
        return self._stream

    def write(self, data: bytes) -> None:
        self._require_open('write')
        assert self._stream is not None
        self._stream.write(data)

    def write_text(self, text: str) -> None:
        self.write(encode_text(text))

    def write_run_header(self, source: str | Path, exclude: Sequence[str], include: Sequence[str]) -> None:
        """Write the comment banner that precedes all file sections."""
        lines = [
            BANNER,
            f'{GENERATED_FROM}{source}',
            f'{EXCLUDED_DIRS}{LIST_JOIN.join(exclude)}',
        ]
        if include:
            lines.append(f'{INCLUDED_EXTS}{LIST_JOIN.join(include)}')
        try:
            self.write_text('\n'.join(lines) + '\n\n')
        except OSError as exc:
            raise ConfigurationError('failed to write header', path=self._path) from exc

    def record_file(self) -> None:
        self._require_open('record a file')
        self._files += 1

    def close(self, *, failed: bool = False) -> None:
        """Flush and release the destination.

        Failures are logged, never raised: as warnings when the run body
        succeeded, as errors when *failed* says another error is already
        propagating.
        """
        if self._state is not OutputState.OPEN:
            self._state = OutputState.CLOSED
            return
        stream, self._stream = self._stream, None
        self._state = OutputState.CLOSED
        assert stream is not None

        problems: list[OutputCloseError] = []
        try:
            stream.flush()
        except OSError as exc:
            err = FlushError('failed to flush output', path=self._path)
            err.__cause__ = exc
            problems.append(err)
        try:
            stream.close()
        except OSError as exc:
            err = CloseError('failed to close output file', path=self._path)
            err.__cause__ = exc
            problems.append(err)

        level = logging.ERROR if failed else logging.WARNING
        for err in problems:
            self._log.log(level, '%s', err, extra=log_context(output=str(self._path)))

    def __enter__(self) -> 'OutputAssembler':
        self._require_open('enter')
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close(failed=exc_type is not None)
