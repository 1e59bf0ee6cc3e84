from __future__ import annotations

import argparse
import os
import sys
from typing import NoReturn, Optional, Sequence

from contextify.core.errors import ContextifyError
from contextify.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from contextify.core.report import RunReport
from contextify.logging.factory import DefaultLoggerFactory
from contextify.logging.helpers import get_logger, log_context
from contextify.parsing.parser import _build_parser
from contextify.runtime.config import json_logs_enabled, resolve_config
from contextify.runtime.runner import run

logger = get_logger('contextify')


def _configure_logging(ns: argparse.Namespace) -> LoggerLikeProtocol:
    """Configure the diagnostic sink from --verbose / --json-logs."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory.for_cli(verbose=ns.verbose, json_logs=json_logs_enabled(ns))
    return factory.get_logger('contextify')


class Contextify:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, logger: Optional[LoggerLikeProtocol] = None) -> RunReport:
        """Parse *argv*, run the flattening and return the report.

        Raises ContextifyError subclasses on failure; argparse errors raise
        SystemExit(2) as usual.
        """
        ns = _build_parser().parse_args(list(argv))
        lg = logger or _configure_logging(ns)
        config = resolve_config(ns)
        lg.info(
            'Starting contextify',
            extra=log_context(
                input=str(config.source),
                output=str(config.output),
                excludeDirs=list(config.exclude),
                includeExts=list(config.extensions),
            ),
        )
        report = run(config, logger=lg)
        lg.info('Successfully created context file', extra=log_context(output=str(config.output)))
        return report


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `contextify` console script."""
    try:
        Contextify.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except ContextifyError as exc:
        logger.error('Failed to process directory: %s', exc, extra=log_context(path=exc.path))
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
