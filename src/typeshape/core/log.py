"""
Structured logging for typeshape.

Loggers render events as JSON lines and hand them to the standard library
logger of the same name. Library code only creates loggers; handlers and
levels are left to the application, which for the command-line driver is
`configure_logging`.
"""
import logging
import sys

import structlog

_HANDLER_NAME = "typeshape_cli_handler"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]

# Silent unless the application installs a handler.
logging.getLogger("typeshape").addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    """Sends log events to stderr, one JSON object per line."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.set_name(_HANDLER_NAME)

    root_logger = logging.getLogger()
    # Avoid adding duplicate handlers
    if _HANDLER_NAME not in [h.get_name() for h in root_logger.handlers]:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class StructlogLogger:
    """A thin wrapper around a structlog logger bound to a module name."""

    def __init__(self, name: str):
        self._logger = structlog.wrap_logger(
            logging.getLogger(name),
            processors=_PROCESSORS,
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
        )

    def warning(self, event: str, **data):
        self._logger.warning(event, **data)

    def error(self, event: str, **data):
        self._logger.error(event, **data)

    def debug(self, event: str, **data):
        self._logger.debug(event, **data)


def get_logger(name: str) -> StructlogLogger:
    """Returns a structlog logger writing through the stdlib logger `name`."""
    return StructlogLogger(name)
