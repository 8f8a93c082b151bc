import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from chronogrid.logging_setup import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_installs_console_and_file_handlers(restore_root_logger, tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "log")
    setup_logging(console_level=logging.DEBUG, log_dir=tmp_path / "log")

    handlers = restore_root_logger.handlers
    assert len(handlers) == 2
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.DEBUG

    logging.getLogger("chronogrid.test").info("hello from the test")
    handlers[1].flush()

    log_text = (tmp_path / "log" / "chronogrid.log").read_text()
    assert "INFO chronogrid.test: hello from the test" in log_text
