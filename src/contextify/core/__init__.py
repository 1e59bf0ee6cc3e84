from __future__ import annotations

"""Public surface for contextify.core.

This module exposes the data model, the error hierarchy and the protocol
types so downstream consumers have a stable import location:

    from contextify.core import RunConfig, TraversalError, WalkAction
"""

from contextify.core.errors import (
    CloseError,
    ConfigurationError,
    ContextifyError,
    FlushError,
    OutputCloseError,
    OutputStateError,
    TranscriptionError,
    TraversalError,
)
from contextify.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    MatcherProtocol,
    TranscriberProtocol,
    TraversalProtocol,
    WalkAction,
)
from contextify.core.models import Node, RunConfig
from contextify.core.report import RunReport

__all__ = [
    # Models
    "Node",
    "RunConfig",
    "RunReport",
    # Errors
    "ContextifyError",
    "ConfigurationError",
    "TraversalError",
    "TranscriptionError",
    "OutputStateError",
    "OutputCloseError",
    "FlushError",
    "CloseError",
    # Protocols
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "MatcherProtocol",
    "TranscriberProtocol",
    "TraversalProtocol",
    "WalkAction",
]
