"""Tests for formkit.config and formkit.logging."""
import json
import logging

import structlog

from formkit.config import Settings
from formkit.logging import (
    LoggerRegistry,
    _censor_sensitive_keys,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("FORMKIT_LOG_LEVEL", "FORMKIT_LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False

    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("FORMKIT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FORMKIT_LOG_JSON", "true")
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON is True


class TestLogging:
    def teardown_method(self) -> None:
        clear_context()
        structlog.reset_defaults()
        LoggerRegistry._loggers.clear()
        lib_logger = logging.getLogger("formkit")
        lib_logger.handlers = [logging.NullHandler()]
        lib_logger.propagate = True
        lib_logger.setLevel(logging.NOTSET)

    def test_censor_sensitive_keys(self) -> None:
        event = _censor_sensitive_keys(None, "info", {"event": "x", "password": "hunter2",
            "payload": {"token": "abc", "name": "ok"}})
        assert event["password"] == "[REDACTED]"
        assert event["payload"] == {"token": "[REDACTED]", "name": "ok"}

    def test_json_output(self, capsys) -> None:
        configure_logging(level="INFO", json_logs=True)
        bind_context(request_id="r-1")
        get_logger("formkit.test").info("form_validation_failed", form="signup", secret="s3")
        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "form_validation_failed"
        assert record["form"] == "signup"
        assert record["request_id"] == "r-1"
        assert record["secret"] == "[REDACTED]"
        assert record["library"] == "formkit"

    def test_registry_caches(self) -> None:
        assert LoggerRegistry.get("validation") is LoggerRegistry.get("validation")

    def test_unbind_context(self, capsys) -> None:
        configure_logging(level="INFO", json_logs=True)
        bind_context(request_id="r-2", tenant="t")
        unbind_context("tenant")
        get_logger("formkit.test").info("form_batch_failed")
        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["request_id"] == "r-2"
        assert "tenant" not in record

    def test_unconfigured_library_is_quiet(self, capsys, caplog, user_form) -> None:
        from formkit.validation import parse_batch, parse_form

        caplog.set_level(logging.INFO, logger="formkit")
        parse_form(user_form, {})
        parse_batch(user_form, [{}])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
        events = [record.msg["event"] for record in caplog.records if record.name == "formkit.boundary"]
        assert "form_validation_failed" in events
        assert "form_batch_failed" in events
