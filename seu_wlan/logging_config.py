import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "seu_wlan"

LEVEL_TAGS = {
    logging.DEBUG: "[Debug]   ",
    logging.INFO: "[Info]    ",
    logging.WARNING: "[Warning] ",
    logging.ERROR: "[Error]   ",
    logging.CRITICAL: "[Error]   ",
}


class TaggedFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(fmt="%(tag)s%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.tag = LEVEL_TAGS.get(record.levelno, f"[{record.levelname}] ")
        return super().format(record)


def setup_logging(log_dir: Optional[Path] = None, log_level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{datetime.now():%Y-%m-%d}.log"
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = TaggedFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def mask_value(value: str, keep: int = 2) -> str:
    if not value:
        return ""
    if len(value) <= keep * 2:
        return "*" * len(value)
    return f"{value[:keep]}***{value[-keep:]}"
