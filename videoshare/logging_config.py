"""Process-wide logging setup."""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _resolve_log_level(raw_level: str) -> int:
    resolved = getattr(logging, (raw_level or "").strip().upper(), None)
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Send ``videoshare`` loggers to stdout at ``level``."""
    logger = logging.getLogger("videoshare")
    logger.setLevel(_resolve_log_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Logging configured at %s", logging.getLevelName(logger.level))
