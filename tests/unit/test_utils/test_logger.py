#!/usr/bin/env python3
import io
import logging

import pytest

from hostlist_expr.utils.logger import Colors, HostlistConsoleFormatter, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("hostlist_expr")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_console_output_without_color():
    stream = io.StringIO()
    logger = setup_logging("info", stream=stream, use_color=False)

    logger.info("expanded 3 hosts")

    assert "[INFO] expanded 3 hosts" in stream.getvalue()
    assert Colors.RESET not in stream.getvalue()


def test_console_output_with_color():
    stream = io.StringIO()
    logger = setup_logging("info", stream=stream, use_color=True)

    logger.warning("careful")

    assert f"{Colors.YELLOW}[WARNING]{Colors.RESET} careful" in stream.getvalue()


def test_level_filters_debug():
    stream = io.StringIO()
    logger = setup_logging("info", stream=stream, use_color=False)

    logger.debug("hidden")

    assert stream.getvalue() == ""


def test_debug_level():
    logger = setup_logging("debug", stream=io.StringIO())
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    logger = setup_logging("loud", stream=io.StringIO())
    assert logger.level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(stream=io.StringIO())
    logger = setup_logging(stream=io.StringIO())
    assert len(logger.handlers) == 1


def test_no_console():
    logger = setup_logging(log_to_console=False)
    assert logger.handlers == []


def test_formatter_without_tty_defaults_to_plain(monkeypatch):
    monkeypatch.setattr("sys.stdout", io.StringIO())
    record = logging.LogRecord("hostlist_expr", logging.ERROR, __file__, 1, "boom", None, None)

    line = HostlistConsoleFormatter().format(record)

    assert line.endswith("[ERROR] boom")
    assert Colors.RED not in line
