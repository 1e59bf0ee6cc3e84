from __future__ import annotations

"""
config – Resolve CLI flags and CONTEXTIFY_* environment variables into a RunConfig.

Resolution order for each value: explicit flag, environment variable,
built-in default. An explicitly empty flag (``--exclude ""``) counts as
given and is not replaced by the environment.
"""

import argparse
import os
from typing import Mapping, Optional

from contextify.constants import DEFAULT_INPUT, DEFAULT_MAX_LINE_BYTES, DEFAULT_OUTPUT
from contextify.core.errors import ConfigurationError
from contextify.core.models import RunConfig
from contextify.parsing.list_ops import split_list

ENV_INPUT = 'CONTEXTIFY_INPUT'
ENV_OUTPUT = 'CONTEXTIFY_OUTPUT'
ENV_EXCLUDE = 'CONTEXTIFY_EXCLUDE'
ENV_EXTENSIONS = 'CONTEXTIFY_EXTENSIONS'
ENV_JSON_LOGS = 'CONTEXTIFY_JSON_LOGS'


def _pick(flag: Optional[str], env: Mapping[str, str], key: str, default: str) -> str:
    if flag is not None:
        return flag
    return env.get(key, default)


def json_logs_enabled(ns: argparse.Namespace, env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return bool(getattr(ns, 'json_logs', False)) or env.get(ENV_JSON_LOGS) == '1'


def resolve_config(ns: argparse.Namespace, env: Optional[Mapping[str, str]] = None) -> RunConfig:
    """Build the RunConfig for *ns*, using *env* (``os.environ``) as fallback."""
    env = os.environ if env is None else env
    max_line = getattr(ns, 'max_line_bytes', None)
    return RunConfig.from_lists(
        source=_pick(ns.input, env, ENV_INPUT, DEFAULT_INPUT),
        output=_pick(ns.output, env, ENV_OUTPUT, DEFAULT_OUTPUT),
        exclude=split_list(_pick(ns.exclude, env, ENV_EXCLUDE, '')),
        extensions=split_list(_pick(ns.extensions, env, ENV_EXTENSIONS, '')),
        max_line_bytes=DEFAULT_MAX_LINE_BYTES if max_line is None else max_line,
    )


def validate_config(config: RunConfig) -> None:
    """Reject configurations that cannot produce a run, before any output exists."""
    if config.max_line_bytes <= 0:
        raise ConfigurationError(f'max line size must be positive, got {config.max_line_bytes}')
    if not config.source.is_dir():
        raise ConfigurationError('input is not a directory', path=config.source)
