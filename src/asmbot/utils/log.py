import logging
import os

from .config import ConfigManager

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(config: ConfigManager) -> logging.Logger:
    """
    Sends everything under the `asmbot` logger to the configured log file.
    The console stays clean for replies.
    """
    logger = logging.getLogger("asmbot")
    logger.setLevel(config.get("log_level", "INFO"))

    log_file = config.get("log_file")
    if log_file and not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file) for h in logger.handlers
    ):
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
