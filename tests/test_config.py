from __future__ import annotations

import logging

from sizetac import config
from sizetac.logging_setup import TRACE_ID_VAR, _TraceIdFilter, default_log_path


def test_parse_bool_variants() -> None:
    assert config._parse_bool(" Yes ") is True
    assert config._parse_bool("off") is False
    assert config._parse_bool("maybe") is None
    assert config._parse_bool(None) is None


def test_host_override_ignores_blank(monkeypatch) -> None:
    monkeypatch.setenv("SIZETAC_HOST", "   ")
    assert config.host_override() is None
    monkeypatch.setenv("SIZETAC_HOST", "http://localhost:8080")
    assert config.host_override() == "http://localhost:8080"


def test_invalid_timeout_means_no_timeout(monkeypatch) -> None:
    monkeypatch.setenv("SIZETAC_TIMEOUT_SECONDS", "soon")
    assert config.request_timeout() is None
    monkeypatch.setenv("SIZETAC_TIMEOUT_SECONDS", "0")
    assert config.request_timeout() is None


def test_sequencing_on_unless_disabled(monkeypatch) -> None:
    monkeypatch.delenv("SIZETAC_SEQUENCE_RESPONSES", raising=False)
    assert config.sequence_responses() is True
    monkeypatch.setenv("SIZETAC_SEQUENCE_RESPONSES", "0")
    assert config.sequence_responses() is False
    monkeypatch.setenv("SIZETAC_SEQUENCE_RESPONSES", "garbage")
    assert config.sequence_responses() is True


def test_log_path_from_env(monkeypatch, tmp_path) -> None:
    target = str(tmp_path / "custom.log")
    monkeypatch.setenv("SIZETAC_LOG_PATH", target)
    assert default_log_path() == target


def test_trace_filter_stamps_records() -> None:
    record = logging.LogRecord("sizetac", logging.INFO, __file__, 1, "msg", None, None)
    token = TRACE_ID_VAR.set("abc123")
    try:
        assert _TraceIdFilter().filter(record) is True
    finally:
        TRACE_ID_VAR.reset(token)
    assert record.trace_id == "abc123"
