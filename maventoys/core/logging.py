import logging

from maventoys.core.config import settings

_configured = False


def setup_logging(level=None):
    """Configure the root logger with a console handler.

    Safe to call more than once; only the first call installs the handler.
    """
    global _configured
    root_logger = logging.getLogger()

    level_name = (level or settings.LOG_LEVEL).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    if _configured:
        return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    root_logger.addHandler(console_handler)
    _configured = True
