"""
Library-wide settings and logging configuration.
"""
import logging

from pyvecmath.enums import LogLevel

_LOGGING_LEVELS = {
    LogLevel.NONE: logging.CRITICAL + 1,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

_handler: logging.Handler | None = None


class Settings:
    """
    Constants read by the vector types at call time. Assign to a class
    attribute to change it for the whole process.
    """

    K_EPSILON: float = 1e-5
    """Tolerance used when comparing vector components."""

    K_EPSILON_NORMAL_SQRT: float = 1e-15
    """Smallest squared magnitude treated as a usable direction."""

    EQUALITY_TOLERANCE: float = 1e-6
    """Default tolerance for is_close() and approximately_equal()."""

    BYTE_ORDER: str = "<"
    """struct byte order prefix used by to_bytes()/from_bytes()."""

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Default logging level for the library."""

    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    """Format used by the handler installed by configure_logging()."""


def configure_logging(level: LogLevel | None = None, stream=None) -> logging.Logger:
    """
    Attaches a stream handler to the ``pyvecmath`` logger and sets its level.

    Calling it again replaces the previous handler instead of adding another.

    Args:
        level: Library log level. Defaults to Settings.LOG_LEVEL.
        stream: Stream for the handler. Defaults to sys.stderr.
    """
    global _handler
    if level is None:
        level = Settings.LOG_LEVEL
    logger = logging.getLogger("pyvecmath")
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(Settings.LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(_LOGGING_LEVELS[LogLevel(level)])
    return logger
