# tests/api/test_configure_logging.py
import logging

import pytest

from readme_api.core.utils.configure_logging import LogWithTqdm, configure_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_single_tqdm_handler_installed():
    configure_logger("WARNING")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], LogWithTqdm)


def test_noisy_loggers_silenced_unless_debug():
    configure_logger("INFO")
    assert logging.getLogger("werkzeug").level == logging.WARNING

    configure_logger("DEBUG", silenced_loggers={"werkzeug": "NOTSET"})
    assert logging.getLogger("werkzeug").level == logging.NOTSET


def test_module_specific_levels():
    configure_logger("INFO", module_specific_levels={"flattener.dom.builder": "DEBUG"})
    assert logging.getLogger("flattener.dom.builder").level == logging.DEBUG


def test_handler_writes_to_stderr(capsys):
    configure_logger("INFO")
    logging.getLogger("readme_api.test").info("hello from test")
    assert "hello from test" in capsys.readouterr().err
