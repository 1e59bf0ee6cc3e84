from __future__ import annotations
from typing import Optional

from contextify.core.models import RunConfig
from contextify.core.report import RunReport
from contextify.io.output import OutputAssembler
from contextify.io.transcriber import FileTranscriber
from contextify.io.walker import TreeWalker
from contextify.core.interfaces.logging import LoggerLikeProtocol
from contextify.logging.helpers import get_logger, log_context
from contextify.matching.path_matcher import PathMatcher
from contextify.runtime.config import validate_config


def run(config: RunConfig, *, logger: Optional[LoggerLikeProtocol] = None) -> RunReport:
    """Flatten ``config.source`` into ``config.output`` and return the report.

    When *logger* is given every component logs through it; otherwise each
    one uses its own ``contextify.*`` logger.
    """
    log = logger or get_logger('runtime.runner')
    validate_config(config)

    report = RunReport(source=str(config.source), output=str(config.output))
    log.debug('Processing directory', extra=log_context(absolutePath=str(config.source)))

    assembler = OutputAssembler(logger=logger)
    assembler.open(config.output)
    with assembler:
        assembler.write_run_header(config.source, config.exclude, config.extensions)
        walker = TreeWalker(
            matcher=PathMatcher.from_config(config),
            transcriber=FileTranscriber(assembler, max_line_bytes=config.max_line_bytes, logger=logger),
            report=report,
            output=config.output,
            logger=logger,
        )
        count = walker.walk(config.source)

    report.finish()
    log.info('Processing completed', extra=log_context(filesProcessed=count))
    return report
