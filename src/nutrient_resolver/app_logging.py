"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "nutrient_resolver"

# HTTP clients used by the OpenAI and Supabase SDKs log every request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "openai", "hpack")


def configure_logging(debug: bool = False) -> None:
    """Configure package logging and quiet third-party request logs.

    Debug mode lowers the package to DEBUG (strategy choices in extraction,
    cache hits) and lets SDK request logs through.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
