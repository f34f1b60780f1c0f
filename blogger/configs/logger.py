"""File logging helper shared by every module logger."""

from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from blogger.configs.settings import settings

_FILE_HANDLER_NAME = "blogger-file"


def file_logger(logger: Logger) -> Logger:
    """
    Attach the rotating JSON file handler to ``logger``.

    The handler is only added when ``LOG_TO_FILE`` is enabled and is never
    attached twice to the same logger.

    Args:
        logger: Logger to decorate.

    Returns:
        Logger: The same logger instance.
    """
    if not settings.LOG_TO_FILE:
        return logger

    if any(handler.get_name() == _FILE_HANDLER_NAME for handler in logger.handlers):
        return logger

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.set_name(_FILE_HANDLER_NAME)
    handler.setLevel(INFO)
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"),
    )
    logger.addHandler(handler)
    return logger
