import io
import logging

import pytest

from ytrss.logger import ROOT_LOGGER_NAME, LineFormatter, setup_logger


@pytest.fixture
def fresh_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    saved_propagate = logger.propagate
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


def _line_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if isinstance(handler.formatter, LineFormatter)]


def test_setup_logger_formats_module_records(fresh_logger) -> None:
    stream = io.StringIO()
    setup_logger("INFO", stream=stream)

    logging.getLogger("ytrss.batch").info("resolved %d feed(s)", 3)
    logging.getLogger("ytrss.batch").debug("hidden")

    line = stream.getvalue().strip()
    assert line.startswith("[ ")
    assert ": INFO : ytrss.batch : resolved 3 feed(s)" in line
    assert "hidden" not in stream.getvalue()


def test_setup_logger_is_idempotent(fresh_logger) -> None:
    setup_logger("WARNING", stream=io.StringIO())
    setup_logger("DEBUG", stream=io.StringIO())

    assert len(_line_handlers(fresh_logger)) == 1
    assert fresh_logger.level == logging.DEBUG


def test_setup_logger_installs_handler_beside_foreign_ones(fresh_logger) -> None:
    fresh_logger.addHandler(logging.NullHandler())
    stream = io.StringIO()

    setup_logger("INFO", stream=stream)
    logging.getLogger("ytrss.pipeline").warning("slow channel")

    assert len(_line_handlers(fresh_logger)) == 1
    assert ": WARNING : ytrss.pipeline : slow channel" in stream.getvalue()
