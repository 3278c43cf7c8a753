"""Tests for level-based handler routing"""

import pytest
from unittest.mock import Mock

from glog_module import HandlerWriteError, LoggerConfig, LogLevel
from glog_module.routing import select_handlers, write_to_handlers
from glog_module.writers import BufferWriter


class FailingWriter:
    """Writer whose every write fails."""

    def write(self, line: str) -> None:
        raise OSError("disk full")


@pytest.fixture
def general():
    return BufferWriter()


@pytest.fixture
def warnings():
    return BufferWriter()


@pytest.fixture
def errors():
    return BufferWriter()


class TestSelectHandlers:
    """Test handler selection per level."""

    def test_general_only(self, general):
        config = LoggerConfig(handlers=[general])
        for level in LogLevel:
            assert select_handlers(config, level) == [general]

    def test_warning_handlers(self, general, warnings):
        config = LoggerConfig(handlers=[general], warning_handlers=[warnings])
        assert select_handlers(config, LogLevel.WARNING) == [warnings]
        assert select_handlers(config, LogLevel.INFO) == [general]
        # Errors fall back to general handlers, not warning handlers
        assert select_handlers(config, LogLevel.ERROR) == [general]

    def test_error_handlers(self, general, errors):
        config = LoggerConfig(handlers=[general], error_handlers=[errors])
        assert select_handlers(config, LogLevel.ERROR) == [errors]
        assert select_handlers(config, LogLevel.CRITICAL) == [errors]
        assert select_handlers(config, LogLevel.WARNING) == [general]
        assert select_handlers(config, LogLevel.DEBUG) == [general]

    def test_all_lists(self, general, warnings, errors):
        config = LoggerConfig(
            handlers=[general],
            warning_handlers=[warnings],
            error_handlers=[errors],
        )
        assert select_handlers(config, LogLevel.NOTSET) == [general]
        assert select_handlers(config, LogLevel.WARNING) == [warnings]
        assert select_handlers(config, LogLevel.CRITICAL) == [errors]

    def test_levels_between_steps(self, general, warnings, errors):
        config = LoggerConfig(
            handlers=[general],
            warning_handlers=[warnings],
            error_handlers=[errors],
        )
        assert select_handlers(config, 35) == [errors]
        assert select_handlers(config, 25) == [general]


class TestWriteToHandlers:
    """Test writing to a handler list."""

    def test_writes_in_order(self):
        calls = []
        first = Mock()
        first.write.side_effect = lambda line: calls.append(("first", line))
        second = Mock()
        second.write.side_effect = lambda line: calls.append(("second", line))

        count = write_to_handlers("line\n", [first, second])

        assert count == 2
        assert calls == [("first", "line\n"), ("second", "line\n")]

    def test_empty_list(self):
        assert write_to_handlers("line\n", []) == 0

    def test_first_failure_stops(self, general):
        failing = FailingWriter()
        after = BufferWriter()

        with pytest.raises(HandlerWriteError) as exc_info:
            write_to_handlers("line\n", [general, failing, after])

        assert general.lines == ["line\n"]
        assert len(after) == 0
        assert exc_info.value.handler is failing
        assert exc_info.value.line == "line\n"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_dispatcher_never_closes_or_flushes(self):
        handler = Mock()
        write_to_handlers("line\n", [handler])
        handler.write.assert_called_once_with("line\n")
        handler.flush.assert_not_called()
        handler.close.assert_not_called()
