"""Structured logging for dir2prompt.

Logs are diagnostics only and never go to standard output, which carries the rendered
prompt. By default only warnings are emitted; the CLI raises the level with -v.
"""

import logging
import sys
from typing import List, Optional

import structlog

from dir2prompt.types import PathType

LOGGER_NAME = "dir2prompt"

_LOGGING_CONFIGURED = False


def _level_for(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, filename: Optional[PathType] = None) -> structlog.stdlib.BoundLogger:
    """Set up structured logging for the dir2prompt package.

    structlog is configured once per process; later calls only replace the handler and
    the level of the ``dir2prompt`` stdlib logger, so loggers obtained earlier follow
    the new settings.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug messages.
        filename: Optional path to a log file. If None, logs are written to stderr.

    Returns:
        A structlog logger bound to the dir2prompt logger.
    """
    global _LOGGING_CONFIGURED
    if not _LOGGING_CONFIGURED:
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _LOGGING_CONFIGURED = True

    std_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(std_logger.handlers):
        std_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = []
    if filename:
        handlers.append(logging.FileHandler(str(filename), encoding="utf-8"))
    else:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        std_logger.addHandler(handler)

    std_logger.setLevel(_level_for(verbosity))

    return structlog.get_logger(LOGGER_NAME)


logger = setup_logging()
