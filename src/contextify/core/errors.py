"""
errors – Exception hierarchy for contextify.

Every fatal condition of a run is a ContextifyError subclass so the CLI
can log it once and map it to exit code 1.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ContextifyError(Exception):
    """Base class for all contextify failures."""

    def __init__(self, message: str, *, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None

    def __str__(self) -> str:
        msg = super().__str__()
        cause = self.__cause__
        if cause is not None:
            return f'{msg}: {cause}'
        return msg


class ConfigurationError(ContextifyError):
    """Invalid inputs or an output destination that cannot be created."""


class TraversalError(ContextifyError):
    """A directory or file could not be listed or accessed during the walk."""


class TranscriptionError(ContextifyError):
    """A matched file could not be opened, read or copied to the output."""


class OutputStateError(ContextifyError):
    """An OutputAssembler operation was called in the wrong state."""


class OutputCloseError(ContextifyError):
    """Releasing the output destination failed."""


class FlushError(OutputCloseError):
    """Buffered output could not be flushed."""


class CloseError(OutputCloseError):
    """The output file handle could not be closed."""
