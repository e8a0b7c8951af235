import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logger(level: str = "INFO", log_file: Optional[str] = None, max_bytes: int = 10_000_000, backup_count: int = 5):
    logger = logging.getLogger("moodlog")
    logger.setLevel(level.upper())
    formatter = logging.Formatter(LOG_FORMAT)

    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

        if log_file:
            Path(log_file).parent.mkdir(exist_ok=True, parents=True)
            handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger
