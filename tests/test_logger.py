import logging
from higherorder.logger.logger import HANDLER_NAME, logger, package_handler, setup_logger


def test_default_logger():
    assert logger.name == "higherorder"
    assert logger.propagate is False

    handler = package_handler(logger)
    assert isinstance(handler, logging.StreamHandler)
    assert [h.get_name() for h in logger.handlers].count(HANDLER_NAME) == 1


def test_setup_logger_configures_once():
    first = setup_logger(name="higherorder.test_once", level="DEBUG")
    second = setup_logger(name="higherorder.test_once", level="ERROR")
    assert first is second
    assert [h.get_name() for h in second.handlers].count(HANDLER_NAME) == 1
    assert second.level == logging.DEBUG


def test_setup_logger_ignores_foreign_handlers():
    named = logging.getLogger("higherorder.test_foreign")
    named.addHandler(logging.NullHandler())
    configured = setup_logger(name="higherorder.test_foreign", level="INFO")
    assert package_handler(configured) is not None
    assert configured.level == logging.INFO


def test_setup_logger_reads_settings_level(monkeypatch):
    monkeypatch.setenv("HIGHERORDER_LOG_LEVEL", "warning")
    configured = setup_logger(name="higherorder.test_env")
    assert configured.level == logging.WARNING


def test_setup_logger_ignores_bare_log_level(monkeypatch):
    monkeypatch.delenv("HIGHERORDER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    configured = setup_logger(name="higherorder.test_bare_env")
    assert configured.level == logging.INFO
