"""Logging configuration helpers."""

import logging

# httpx logs every request at INFO; one dashboard view issues four of them.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the ``horizon_admin`` logger tree."""
    logger = logging.getLogger("horizon_admin")
    logger.setLevel(level.upper())
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s]: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
