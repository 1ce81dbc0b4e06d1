# whirligig/logs.py
import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(logs_dir: Path = None, level: int = logging.INFO, filename: str = "whirligig.log") -> logging.Logger:
    """
    Attach a file handler to the package logger. Library modules only call
    logging.getLogger(__name__); nothing is configured until this runs.
    """
    logger = logging.getLogger("whirligig")
    logger.setLevel(level)

    if logs_dir:
        logs_dir = Path(logs_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_path = (logs_dir / filename).resolve()
        already = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
            for h in logger.handlers
        )
        if not already:
            file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

    logger.info("Logger initialised (level=%s).", logging.getLevelName(level))
    return logger
