import logging
import os
from pathlib import Path

LOGGER_NAME = "fast_rules"

# Records from the engine propagate to the host application's handlers
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None) -> logging.Logger:
    """
    Send the rule engine's own log records to a dedicated file.

    Only the `fast_rules` logger is touched; root handlers and `sys.excepthook`
    belong to the host application. The log directory defaults to `./log` and can
    be moved with `LOG_DIR`. Level is read from `RULES_LOG_LEVEL` (default DEBUG).
    A console handler is added when `ENV=debug`.
    """
    global _log_file_path

    log_dir = Path(os.getenv('LOG_DIR', Path.cwd() / "log"))
    file_name = log_file_name if log_file_name else os.getenv('RULES_LOG_FILE_NAME', 'rules.log')
    log_file = log_dir / file_name

    if _log_file_path == log_file and any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.setLevel(os.getenv('RULES_LOG_LEVEL', 'DEBUG').upper())

    # Drop handlers from a previous call, keep the NullHandler
    for handler in [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]:
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(str(log_file), mode='a')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(file_handler)

    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        logger.addHandler(console_handler)

    _log_file_path = log_file
    logger.info(f"[RULES] Logging to {log_file}")
    return logger


def get_log_file_path() -> Path | None:
    return _log_file_path
