from __future__ import annotations

from contextify.cli import Contextify, main
from contextify.constants import BANNER, FENCE, FILE_HEADER, VCS_DIR
from contextify.core import (
    ConfigurationError,
    ContextifyError,
    RunConfig,
    RunReport,
    TranscriptionError,
    TraversalError,
)
from contextify.io.output import OutputAssembler
from contextify.io.transcriber import FileTranscriber
from contextify.io.traversal import DepthFirstTraversal
from contextify.io.walker import TreeWalker
from contextify.matching.path_matcher import PathMatcher
from contextify.runtime.runner import run

__version__ = '1.0.0'

__all__ = [
    'Contextify',
    'main',
    'run',
    'BANNER',
    'FENCE',
    'FILE_HEADER',
    'VCS_DIR',
    'RunConfig',
    'RunReport',
    'ContextifyError',
    'ConfigurationError',
    'TraversalError',
    'TranscriptionError',
    'PathMatcher',
    'DepthFirstTraversal',
    'TreeWalker',
    'FileTranscriber',
    'OutputAssembler',
]
