import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.config_loader import ConfigLoader, PROJECT_ROOT

PACKAGE_LOGGER = "browser_facade"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Libraries that talk to the browser and log every HTTP round-trip at DEBUG/INFO
DRIVER_LOGGERS = ("selenium", "urllib3", "WDM")


def _level(name: Any, fallback: int) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else fallback


def _console_handler(config: Dict[str, Any], level: int, fmt: str) -> Optional[logging.Handler]:
    if not config.get('enabled', True):
        return None
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_level(config.get('level', level), level))
    handler.setFormatter(logging.Formatter(config.get('format', fmt)))
    return handler


def _file_handler(config: Dict[str, Any], level: int, fmt: str) -> Optional[logging.Handler]:
    if not config.get('enabled', False):
        return None

    path = Path(config.get('path', 'logs/browser_facade.log'))
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Logging is not usable yet, so report on stderr
        print(f"Error: could not create log directory {path.parent}; file logging disabled: {e}", file=sys.stderr)
        return None

    rotation = config.get('rotation_type')
    if rotation == 'size':
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=int(config.get('max_bytes', 5 * 1024 * 1024)),
            backupCount=int(config.get('backup_count', 5)), encoding='utf-8')
    elif rotation == 'time':
        handler = logging.handlers.TimedRotatingFileHandler(
            path, when=config.get('when', 'midnight'), interval=int(config.get('interval', 1)),
            backupCount=int(config.get('backup_count', 5)), encoding='utf-8')
    else:
        handler = logging.FileHandler(path, encoding='utf-8')

    handler.setLevel(_level(config.get('level', level), level))
    handler.setFormatter(logging.Formatter(config.get('format', fmt)))
    return handler


def setup_logger(config_loader: Optional[ConfigLoader] = None,
                 logger_name: Optional[str] = PACKAGE_LOGGER) -> logging.Logger:
    """
    Configures the package logger from the `logging` settings block.

    `logging.level` goes through the override cascade, so
    BROWSER_FACADE_LOGGING_LEVEL=DEBUG turns on debug output for one run.
    `logging.driver_level` (default WARNING) applies to the selenium, urllib3
    and webdriver_manager loggers. Calling it again replaces the handlers
    instead of adding more. Pass `logger_name=None` to configure the root logger.
    """
    if config_loader is None:
        config_loader = ConfigLoader()

    level = _level(config_loader.get_cascading_setting('logging.level', 'INFO'), logging.INFO)
    fmt = config_loader.get_logging_setting('format', DEFAULT_LOG_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    if logger_name is not None:
        logger.propagate = bool(config_loader.get_logging_setting('propagate', False))

    for handler in (
        _console_handler(config_loader.get_logging_setting('console_handler', {}), level, fmt),
        _file_handler(config_loader.get_logging_setting('file_handler', {}), level, fmt),
    ):
        if handler is not None:
            logger.addHandler(handler)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    driver_level = _level(config_loader.get_logging_setting('driver_level', 'WARNING'), logging.WARNING)
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)

    return logger
