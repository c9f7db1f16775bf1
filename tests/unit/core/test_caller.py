"""Unit tests for caller reporting."""

from __future__ import annotations

import io
import json
import logging

from mp_fieldlog import CallerFrame, JSONFormatter, Logger, TextFormatter
from mp_fieldlog.caller import get_caller, package_name
from mp_fieldlog.integrations import FieldlogHandler
from mp_fieldlog.testing import new_local


def _log_from_helper(logger: Logger) -> None:
    logger.info("from helper")


class TestCallerFrame:
    def test_properties(self) -> None:
        frame = CallerFrame(function="Service.run", file="/app/service.py", line=12, module="app")
        assert frame.qualified_function == "app.Service.run"
        assert frame.location == "/app/service.py:12"
        assert frame.short_file == "service.py"

    def test_without_module(self) -> None:
        assert CallerFrame("main", "main.py", 1).qualified_function == "main"

    def test_package_name(self) -> None:
        assert package_name("mp_fieldlog.hooks.writer") == "mp_fieldlog"
        assert package_name("app") == "app"


class TestGetCaller:
    def test_direct_call_reports_this_frame(self) -> None:
        frame = get_caller()
        assert frame is not None
        assert frame.function == "TestGetCaller.test_direct_call_reports_this_frame"
        assert frame.file == __file__


class TestReportCaller:
    def test_caller_captured_when_enabled(self) -> None:
        logger = Logger(out=io.BytesIO(), report_caller=True)
        hook = new_local(logger)
        _log_from_helper(logger)
        caller = hook.last_entry().caller  # type: ignore[union-attr]
        assert caller is not None
        assert caller.function == "_log_from_helper"
        assert caller.module == __name__
        assert caller.file == __file__

    def test_caller_absent_when_disabled(self) -> None:
        logger = Logger(out=io.BytesIO())
        hook = new_local(logger)
        logger.info("x")
        assert hook.last_entry().caller is None  # type: ignore[union-attr]

    def test_json_output_has_func_and_file(self) -> None:
        out = io.BytesIO()
        logger = Logger(out=out, formatter=JSONFormatter(), report_caller=True)
        logger.with_field("a", 1).info("x")
        record = json.loads(out.getvalue())
        assert record["func"] == f"{__name__}.TestReportCaller.test_json_output_has_func_and_file"
        assert record["file"].startswith(f"{__file__}:")

    def test_user_func_field_prefixed_only_with_caller(self) -> None:
        out = io.BytesIO()
        logger = Logger(out=out, formatter=TextFormatter(disable_timestamp=True))
        logger.with_field("func", "mine").info("x")
        assert out.getvalue() == b"level=info msg=x func=mine\n"

        out = io.BytesIO()
        logger = Logger(
            out=out,
            formatter=TextFormatter(
                disable_timestamp=True,
                caller_prettyfier=lambda frame: (frame.function, ""),
            ),
            report_caller=True,
        )
        logger.with_field("func", "mine").info("x")
        text = out.getvalue().decode()
        assert "fields.func=mine" in text
        assert "func=TestReportCaller.test_user_func_field_prefixed_only_with_caller" in text

    def test_bridged_record_reports_application_frame(self) -> None:
        logger = Logger(out=io.BytesIO(), report_caller=True)
        hook = new_local(logger)
        std = logging.getLogger("tests.caller.bridge")
        std.propagate = False
        handler = FieldlogHandler(logger)
        std.addHandler(handler)
        try:
            std.warning("bridged")
        finally:
            std.removeHandler(handler)
        caller = hook.last_entry().caller  # type: ignore[union-attr]
        assert caller is not None
        assert caller.function == (
            "TestReportCaller.test_bridged_record_reports_application_frame"
        )
