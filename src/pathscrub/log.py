"""Console logging setup for the pathscrub command line."""

import logging


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure console logging for the pathscrub command line."""
    logger = logging.getLogger("pathscrub")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console)

    return logger
