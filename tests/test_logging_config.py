import logging

import pytest

from zora_premint.logging_config import LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


def test_setup_logging_installs_single_handler():
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT
    assert root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("PREMINT_LOG_LEVEL", "error")
    setup_logging()
    assert logging.getLogger().level == logging.ERROR


def test_setup_logging_keeps_transports_when_asked():
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    setup_logging("debug", quiet_transports=False)
    assert logging.getLogger("httpx").level == logging.NOTSET


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("chatty")
