from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from contextify.constants import DEFAULT_MAX_LINE_BYTES, FENCE, FILE_HEADER
from contextify.core.errors import TranscriptionError
from contextify.io.output import OutputAssembler, encode_text
from contextify.core.interfaces.logging import LoggerLikeProtocol
from contextify.logging.helpers import get_logger, log_context

_FENCE_OPEN = encode_text(f'{FENCE}\n')
_FENCE_CLOSE = encode_text(f'{FENCE}\n\n')


def strip_terminator(raw: bytes) -> bytes:
    """Drop a trailing ``\\n`` and then a trailing ``\\r`` from *raw*."""
    if raw.endswith(b'\n'):
        raw = raw[:-1]
    if raw.endswith(b'\r'):
        raw = raw[:-1]
    return raw


class FileTranscriber:
    """Copy one file into the shared output, framed by a path header and fences.

    Content is copied byte for byte with every line terminator rewritten to
    ``\\n``; a last line without terminator still gets one. A logical line
    longer than ``max_line_bytes`` aborts the transcription.
    """

    def __init__(
        self,
        sink: OutputAssembler,
        *,
        max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        if max_line_bytes <= 0:
            raise ValueError('max_line_bytes must be positive')
        self._sink = sink
        self._max = max_line_bytes
        self._log = logger or get_logger('io.transcriber')

    def transcribe(self, path: Path, relpath: str) -> int:
        try:
            fh = open(path, 'rb')
        except OSError as exc:
            raise TranscriptionError(f'failed to open file {path}', path=path) from exc

        with fh:
            try:
                size = os.fstat(fh.fileno()).st_size
            except OSError as exc:
                self._log.warning('Could not get file stats', extra=log_context(path=relpath, error=str(exc)))
            else:
                self._log.debug('File info', extra=log_context(path=relpath, size=size))

            self._emit(encode_text(f'{FILE_HEADER}{relpath}\n'), relpath)
            self._emit(_FENCE_OPEN, relpath)
            lines = self._copy_lines(fh, path, relpath)
            self._emit(_FENCE_CLOSE, relpath)

        self._sink.record_file()
        self._log.debug('File processed', extra=log_context(path=relpath, lines=lines))
        return lines

    def _copy_lines(self, fh, path: Path, relpath: str) -> int:
        count = 0
        while True:
            try:
                raw = fh.readline(self._max + 2)
            except OSError as exc:
                raise TranscriptionError(f'error reading file {path}', path=path) from exc
            if not raw:
                return count
            line = strip_terminator(raw)
            if len(line) > self._max:
                raise TranscriptionError(
                    f'error reading file {path}: line {count + 1} exceeds {self._max} bytes',
                    path=path,
                )
            self._emit(line + b'\n', relpath)
            count += 1

    def _emit(self, data: bytes, relpath: str) -> None:
        try:
            self._sink.write(data)
        except OSError as exc:
            raise TranscriptionError(f'failed to write content of {relpath}', path=relpath) from exc
