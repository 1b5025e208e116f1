import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the ``railbook`` logger tree"""
    logger = logging.getLogger("railbook")
    logger.setLevel(level.upper())

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger
