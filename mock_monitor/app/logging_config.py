import logging
import sys

from .config import settings

LOG_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s %(message)s"


def configure_logging(level: str | None = None, logger_levels: dict[str, str] | None = None) -> None:
    """Install the stdout handler and apply per-logger level overrides.

    Safe to call again: the handler is only added to a bare root logger, but
    levels are re-applied every time.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ"))
        root.addHandler(handler)
    root.setLevel(level or settings.log_level)
    overrides = settings.logger_levels if logger_levels is None else logger_levels
    for name, name_level in overrides.items():
        logging.getLogger(name).setLevel(name_level)


_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        configure_logging()
        _configured = True
    return logging.getLogger(name)
