import logging

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

class NoExceptionFormatter(logging.Formatter):
    def format(self, record):
        exc_info = record.exc_info
        exc_text = record.exc_text
        record.exc_info = None
        record.exc_text = None

        formatted = super().format(record)

        record.exc_info = exc_info
        record.exc_text = exc_text

        return formatted

def formatter_factory(log_level: str, fmt: str) -> logging.Formatter:
    # tracebacks are only shown when debugging
    if LEVELS.get(log_level) == logging.DEBUG:
        return logging.Formatter(fmt)

    return NoExceptionFormatter(fmt)
