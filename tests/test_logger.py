import logging
import logging.handlers

import pytest

from browser_facade.core.config_loader import ConfigLoader
from browser_facade.utils.logger import DRIVER_LOGGERS, PACKAGE_LOGGER, setup_logger

LOGGER_NAME = "browser_facade.tests.logger"


@pytest.fixture
def cleanup_logger():
    driver_levels = {name: logging.getLogger(name).level for name in DRIVER_LOGGERS}
    yield
    for name in (LOGGER_NAME, PACKAGE_LOGGER):
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
    for name, level in driver_levels.items():
        logging.getLogger(name).setLevel(level)


def test_console_handler_by_default(cleanup_logger):
    logger = setup_logger(ConfigLoader(settings={"logging": {"level": "warning"}}), LOGGER_NAME)

    assert logger.level == logging.WARNING
    assert logger.propagate is False
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_size_rotating_file_handler(tmp_path, cleanup_logger):
    log_file = tmp_path / "logs" / "run.log"
    loader = ConfigLoader(settings={"logging": {
        "level": "DEBUG",
        "console_handler": {"enabled": False},
        "file_handler": {"enabled": True, "path": str(log_file), "rotation_type": "size", "max_bytes": 1024},
    }})

    logger = setup_logger(loader, LOGGER_NAME)
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.handlers.RotatingFileHandler)
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_time_rotating_file_handler(tmp_path, cleanup_logger):
    loader = ConfigLoader(settings={"logging": {
        "console_handler": {"enabled": False},
        "file_handler": {"enabled": True, "path": str(tmp_path / "t.log"), "rotation_type": "time"},
    }})
    logger = setup_logger(loader, LOGGER_NAME)
    assert isinstance(logger.handlers[0], logging.handlers.TimedRotatingFileHandler)


def test_all_handlers_disabled_installs_null_handler(cleanup_logger):
    loader = ConfigLoader(settings={"logging": {"console_handler": {"enabled": False}}})
    logger = setup_logger(loader, LOGGER_NAME)
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]


def test_repeated_setup_does_not_duplicate_handlers(cleanup_logger):
    loader = ConfigLoader(settings={})
    setup_logger(loader, LOGGER_NAME)
    logger = setup_logger(loader, LOGGER_NAME)
    assert len(logger.handlers) == 1


def test_configures_package_logger_by_default(cleanup_logger):
    root_handlers = list(logging.getLogger().handlers)

    logger = setup_logger(ConfigLoader(settings={}))

    assert logger.name == PACKAGE_LOGGER
    assert logging.getLogger().handlers == root_handlers


def test_level_follows_environment_override(monkeypatch, cleanup_logger):
    monkeypatch.setenv("BROWSER_FACADE_LOGGING_LEVEL", "debug")
    logger = setup_logger(ConfigLoader(settings={"logging": {"level": "ERROR"}}), LOGGER_NAME)
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(cleanup_logger):
    logger = setup_logger(ConfigLoader(settings={"logging": {"level": "chatty"}}), LOGGER_NAME)
    assert logger.level == logging.INFO


def test_driver_loggers_default_to_warning(cleanup_logger):
    setup_logger(ConfigLoader(settings={}), LOGGER_NAME)
    for name in DRIVER_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_driver_level_setting(cleanup_logger):
    setup_logger(ConfigLoader(settings={"logging": {"driver_level": "DEBUG"}}), LOGGER_NAME)
    assert logging.getLogger("selenium").level == logging.DEBUG
    assert logging.getLogger("WDM").level == logging.DEBUG
