"""Tests for the logging helpers."""

import io
import json
import logging

from sanic_render.logging import JSONFormatter, LoggerConfig, getLogger


class TestGetLogger:
    def test_module_names_are_kept(self):
        assert getLogger("sanic_render.view.partials").name == "sanic_render.view.partials"

    def test_sanic_loggers_are_kept(self):
        assert getLogger("sanic.root").name == "sanic.root"

    def test_other_names_use_package_logger(self):
        assert getLogger("anything").name == "sanic_render"
        assert getLogger().name == "sanic_render"


class TestJSONFormatter:
    def test_formats_record_with_extra_fields(self):
        record = logging.LogRecord(
            "sanic_render.view", logging.WARNING, __file__, 10, "Cannot load %s", ("a.html",), None
        )
        record.view = "a.html"

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["message"] == "Cannot load a.html"
        assert data["view"] == "a.html"


class TestLoggerConfig:
    def test_setup_json_logger(self):
        stream = io.StringIO()
        logger = LoggerConfig.setup_logger("sanic_render.test_json", format_type="json", stream=stream)

        logger.info("ready", extra={"root": "/views"})

        data = json.loads(stream.getvalue())
        assert data["message"] == "ready"
        assert data["root"] == "/views"

    def test_setup_text_logger(self):
        stream = io.StringIO()
        logger = LoggerConfig.setup_logger("sanic_render.test_text", stream=stream)

        logger.warning("missing partial")

        assert "WARNING: missing partial" in stream.getvalue()
