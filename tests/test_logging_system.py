import sys
import os
import importlib
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from symbolic_expression import LogLevel, ParseError, configure_logging, get_logger, set_log_level, parse, simplify
from symbolic_expression.logging_system import log_info


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "expressions.log"
    configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(path))
    yield path
    configure_logging(LogLevel.MINIMAL)


def test_parse_traces_at_verbose_level(log_file):
    parse("x + 1")
    with pytest.raises(ParseError):
        parse("x +")
    content = log_file.read_text()
    assert "Parsed 'x + 1'" in content
    assert "Rejected expression 'x +'" in content


def test_overflow_warning(log_file):
    simplify(parse("x * 10"), {"x": 1e308})
    assert "overflowed" in log_file.read_text()


def test_level_filtering(log_file):
    set_log_level(LogLevel.MINIMAL)
    parse("y")
    log_info("hidden message")
    get_logger().warning("visible warning")
    content = log_file.read_text()
    assert "Parsed 'y'" not in content
    assert "hidden message" not in content
    assert "visible warning" in content


def test_silent_level_has_no_console_handler():
    logger = configure_logging(LogLevel.SILENT)
    try:
        assert logger.logger.handlers == []
    finally:
        configure_logging(LogLevel.MINIMAL)


def test_is_enabled_for_tracks_level():
    logger = configure_logging(LogLevel.MINIMAL)
    assert logger.is_enabled_for(LogLevel.MINIMAL)
    assert not logger.is_enabled_for(LogLevel.VERBOSE)
    set_log_level(LogLevel.VERBOSE)
    assert logger.is_enabled_for(LogLevel.VERBOSE)
    set_log_level(LogLevel.MINIMAL)


def test_parse_skips_trace_messages_below_verbose(monkeypatch):
    parser_module = importlib.import_module("symbolic_expression.expression_tree.parser.parser")
    messages = []
    monkeypatch.setattr(parser_module, "log_debug", messages.append)
    configure_logging(LogLevel.MINIMAL)
    parse("x + 1")
    with pytest.raises(ParseError):
        parse("x +")
    assert messages == []

    set_log_level(LogLevel.VERBOSE)
    try:
        parse("x + 1")
    finally:
        set_log_level(LogLevel.MINIMAL)
    assert messages == ["Parsed 'x + 1' into 3 tokens"]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
