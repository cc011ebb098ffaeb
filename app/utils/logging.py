"""Route uvicorn's stdlib logging into a single loguru sink."""

import inspect
import logging
import sys

from loguru import logger

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru, keeping the original call site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip this frame and every frame inside the logging module
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Make loguru the only log sink for the service and for uvicorn.

    Safe to call more than once: the previous sink is replaced.

    Args:
        log_level: Minimum level written to stderr.
        json_output: Emit one serialized JSON object per record instead of
            the coloured text format.
    """
    logger.remove()

    sink_options = {"level": log_level.upper()}
    if json_output:
        sink_options["serialize"] = True
    else:
        sink_options.update(format=TEXT_FORMAT, colorize=True)
    logger.add(sys.stderr, **sink_options)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in UVICORN_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
