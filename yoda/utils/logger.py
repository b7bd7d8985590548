# yoda/utils/logger.py
import logging
from yoda.config import settings

def setup_logger(level: str = None):
    """Configure the shared application logger."""

    level_name = (level or settings.log_level).upper()

    logger = logging.getLogger("your_yoda")
    logger.setLevel(getattr(logging, level_name))

    # avoid duplicate handlers on re-import; just apply the new level
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(getattr(logging, level_name))
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level_name))

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger

# shared logger instance
logger = setup_logger()
