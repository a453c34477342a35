from enum import IntEnum


class LogLevel(IntEnum):
    """Library log levels, mapped onto the logging module by configure_logging()."""
    NONE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
