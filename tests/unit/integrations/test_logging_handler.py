"""Unit tests for the standard library logging bridge."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from mp_fieldlog import JSONFormatter, Level, Logger
from mp_fieldlog.integrations import FieldlogHandler
from mp_fieldlog.integrations.logging_handler import level_for_record
from mp_fieldlog.testing import new_local


@pytest.fixture
def out() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def logger(out: io.BytesIO) -> Logger:
    return Logger(out=out, formatter=JSONFormatter(), level=Level.TRACE, exit_func=lambda c: None)


@pytest.fixture
def std(logger: Logger) -> Iterator[logging.Logger]:
    std_logger = logging.getLogger("tests.bridge")
    std_logger.setLevel(logging.DEBUG)
    std_logger.propagate = False
    handler = FieldlogHandler(logger)
    std_logger.addHandler(handler)
    yield std_logger
    std_logger.removeHandler(handler)


class TestLevelMapping:
    @pytest.mark.parametrize(
        ("levelno", "level"),
        [
            (logging.CRITICAL, Level.ERROR),
            (logging.ERROR, Level.ERROR),
            (logging.WARNING, Level.WARN),
            (logging.INFO, Level.INFO),
            (logging.DEBUG, Level.DEBUG),
            (5, Level.TRACE),
        ],
    )
    def test_level_for_record(self, levelno: int, level: Level) -> None:
        assert level_for_record(levelno) == level


class TestFieldlogHandler:
    def test_message_and_extra(self, std: logging.Logger, out: io.BytesIO) -> None:
        std.info("user %s logged in", "ann", extra={"ip": "10.0.0.1"})
        record = json.loads(out.getvalue())
        assert record["msg"] == "user ann logged in"
        assert record["level"] == "info"
        assert record["ip"] == "10.0.0.1"
        assert record["logger_name"] == "tests.bridge"

    def test_exception_becomes_error_field(self, std: logging.Logger, out: io.BytesIO) -> None:
        try:
            raise RuntimeError("kaput")
        except RuntimeError:
            std.exception("failed")
        record = json.loads(out.getvalue())
        assert record["error"] == "kaput"
        assert record["level"] == "error"

    def test_critical_does_not_exit(self, std: logging.Logger, logger: Logger) -> None:
        codes: list[int] = []
        logger.exit_func = codes.append
        std.critical("meltdown")
        assert codes == []

    def test_respects_logger_threshold(
        self, std: logging.Logger, logger: Logger, out: io.BytesIO
    ) -> None:
        logger.set_level(Level.WARN)
        std.info("quiet")
        assert out.getvalue() == b""

    def test_without_logger_name(self, logger: Logger) -> None:
        hook = new_local(logger)
        handler = FieldlogHandler(logger, include_logger_name=False)
        handler.handle(logging.LogRecord("x", logging.INFO, __file__, 1, "m", (), None))
        assert hook.last_entry().data == {}  # type: ignore[union-attr]

    def test_own_diagnostics_ignored(self, logger: Logger) -> None:
        hook = new_local(logger)
        handler = FieldlogHandler(logger)
        handler.handle(
            logging.LogRecord("mp_fieldlog.entry", logging.ERROR, __file__, 1, "loop", (), None)
        )
        assert len(hook) == 0
