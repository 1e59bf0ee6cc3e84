from __future__ import annotations
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Diagnostic sink injected into every contextify component.

    Structured fields travel as ``extra={'context': {...}}`` (see
    ``contextify.logging.helpers.log_context``); file content never does.
    A plain ``logging.Logger`` satisfies this protocol.
    """

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Builds the diagnostic sink for a run from CLI-level settings."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the sink registered under `name` (e.g. 'contextify')."""
        ...
