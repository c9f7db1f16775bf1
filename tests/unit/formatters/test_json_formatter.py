"""Unit tests for JSONFormatter."""

from __future__ import annotations

import dataclasses
import io
import json
import logging
from datetime import UTC, date, datetime
from typing import Any

import pytest

from mp_fieldlog import Entry, FieldlogError, FieldMap, JSONFormatter, Level, Logger
from mp_fieldlog.caller import CallerFrame

NOON = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _entry(data: dict[str, Any] | None = None, message: str = "hello", **logger_kwargs: Any) -> Entry:
    logger = Logger(out=io.BytesIO(), **logger_kwargs)
    entry = Entry(logger, dict(data or {}))
    entry.time = NOON
    entry.level = Level.INFO
    entry.message = message
    return entry


def _decode(formatter: JSONFormatter, entry: Entry) -> dict[str, Any]:
    raw = formatter.format(entry)
    assert raw.endswith(b"\n")
    return json.loads(raw)


class TestLayout:
    def test_default_keys(self) -> None:
        assert _decode(JSONFormatter(), _entry({"a": 1})) == {
            "a": 1,
            "level": "info",
            "msg": "hello",
            "time": "2026-01-01T12:00:00Z",
        }

    def test_keys_sorted_single_line(self) -> None:
        raw = JSONFormatter().format(_entry({"b": 1, "a": 2}))
        assert raw.count(b"\n") == 1
        assert raw.index(b'"a"') < raw.index(b'"b"') < raw.index(b'"level"')

    def test_reserved_key_collision(self) -> None:
        record = _decode(JSONFormatter(), _entry({"msg": "user", "level": 5, "time": "t"}))
        assert record["msg"] == "hello"
        assert record["fields.msg"] == "user"
        assert record["fields.level"] == 5
        assert record["fields.time"] == "t"

    def test_disable_timestamp(self) -> None:
        assert "time" not in _decode(JSONFormatter(disable_timestamp=True), _entry())

    def test_timestamp_format(self) -> None:
        record = _decode(JSONFormatter(timestamp_format="%H:%M"), _entry())
        assert record["time"] == "12:00"

    def test_field_map(self) -> None:
        fmt = JSONFormatter(field_map=FieldMap({"msg": "message", "time": "@timestamp"}))
        record = _decode(fmt, _entry())
        assert record["message"] == "hello"
        assert record["@timestamp"] == "2026-01-01T12:00:00Z"
        assert "msg" not in record

    def test_data_key_nests_fields(self) -> None:
        record = _decode(JSONFormatter(data_key="fields"), _entry({"a": 1, "msg": "x"}))
        assert record["fields"] == {"a": 1, "msg": "x"}
        assert record["msg"] == "hello"

    def test_pretty_print(self) -> None:
        raw = JSONFormatter(pretty_print=True).format(_entry({"a": 1}))
        assert b'\n  "a": 1' in raw


class TestValues:
    def test_exception_rendered_as_message(self) -> None:
        record = _decode(JSONFormatter(), _entry({"error": KeyError("missing")}))
        assert record["error"] == "'missing'"

    def test_rich_values(self) -> None:
        @dataclasses.dataclass
        class Point:
            x: int
            y: int

        class Model:
            def to_dict(self) -> dict[str, Any]:
                return {"id": 3}

        record = _decode(
            JSONFormatter(),
            _entry({
                "when": date(2026, 3, 1),
                "tags": {"b", "a"},
                "point": Point(1, 2),
                "model": Model(),
            }),
        )
        assert record["when"] == "2026-03-01"
        assert record["tags"] == ["a", "b"]
        assert record["point"] == {"x": 1, "y": 2}
        assert record["model"] == {"id": 3}

    def test_function_value_reported(self) -> None:
        record = _decode(JSONFormatter(), _entry({"cb": lambda: None, "a": 1}))
        assert "cb" not in record
        assert record["fieldlog_error"] == 'can not add field "cb"'
        assert record["a"] == 1

    def test_html_escaped_by_default(self) -> None:
        raw = JSONFormatter().format(_entry({"html": "<b>&</b>"}))
        assert b"\\u003cb\\u003e\\u0026\\u003c/b\\u003e" in raw
        assert json.loads(raw)["html"] == "<b>&</b>"

    def test_disable_html_escape(self) -> None:
        raw = JSONFormatter(disable_html_escape=True).format(_entry({"html": "<b>"}))
        assert b'"<b>"' in raw

    def test_non_ascii_kept(self) -> None:
        raw = JSONFormatter().format(_entry({"city": "Zürich"}))
        assert "Zürich".encode() in raw

    def test_unserializable_raises(self) -> None:
        with pytest.raises(FieldlogError, match="failed to marshal fields to JSON"):
            JSONFormatter().format(_entry({"obj": object()}))

    def test_unserializable_entry_dropped_by_logger(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        out = io.BytesIO()
        logger = Logger(out=out, formatter=JSONFormatter())
        with caplog.at_level(logging.ERROR, logger="mp_fieldlog"):
            logger.with_field("obj", object()).info("x")
        assert out.getvalue() == b""
        assert "formatter.failed" in caplog.text


class TestCaller:
    def test_func_and_file(self) -> None:
        entry = _entry(report_caller=True)
        entry.caller = CallerFrame("handler", "/srv/app.py", 7, "app")
        record = _decode(JSONFormatter(), entry)
        assert record["func"] == "app.handler"
        assert record["file"] == "/srv/app.py:7"

    def test_user_file_field_prefixed_with_caller(self) -> None:
        entry = _entry({"file": "report.csv"}, report_caller=True)
        entry.caller = CallerFrame("handler", "/srv/app.py", 7, "app")
        record = _decode(JSONFormatter(), entry)
        assert record["fields.file"] == "report.csv"
        assert record["file"] == "/srv/app.py:7"

    def test_user_file_field_kept_without_caller(self) -> None:
        record = _decode(JSONFormatter(), _entry({"file": "report.csv"}))
        assert record["file"] == "report.csv"
