"""Logger configuration for the higherorder package.

The default level comes from :class:`higherorder.config.Settings`, so
``HIGHERORDER_LOG_LEVEL=DEBUG`` turns on the debug lines emitted by the
functional primitives (for instance every step of ``total_with_steps``).
"""

import logging
import sys

from higherorder.config import Settings

__all__ = ["logger", "setup_logger", "package_handler", "HANDLER_NAME"]

HANDLER_NAME = "higherorder.stdout"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def package_handler(logger: logging.Logger) -> logging.Handler | None:
    """Return the stdout handler installed by :func:`setup_logger`, if any."""
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logger(
    name: str = "higherorder",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Only the first call for a given name installs the handler and level;
    later calls return the logger untouched. Handlers added by other code
    (test harnesses, applications) do not count.

    Args:
        name: Logger name (typically the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            ``Settings.load().LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if package_handler(logger) is not None:
        return logger

    level = level or Settings.load().LOG_LEVEL
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


logger = setup_logger()
