"""Tests for utility helpers."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from manifestcheck.exceptions import ConfigError
from manifestcheck.net import http_session
from manifestcheck.utils import JsonFormatter, get_logger, load_file, validate_config


def test_load_file_reads_utf8(tmp_path):
    f = tmp_path / "a.yaml"
    f.write_text("name: café\n", encoding="utf-8")
    assert load_file(str(f)) == "name: café\n"


def test_validate_config_reports_path():
    schema = {"type": "object", "properties": {"n": {"type": "integer"}}}
    validate_config({"n": 1}, schema)
    with pytest.raises(ConfigError) as exc_info:
        validate_config({"n": "x"}, schema)
    assert "['n']" in str(exc_info.value)


def test_json_formatter_payload():
    record = logging.LogRecord("manifestcheck.test", logging.WARNING, __file__, 1, "skipped %s", ("a.yaml",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "manifestcheck.test"
    assert payload["msg"] == "skipped a.yaml"
    assert payload["ts"].endswith("Z")


def test_get_logger_names():
    assert get_logger("manifestcheck.x").name == "manifestcheck.x"


def test_http_session_single_attempt():
    session = http_session()
    adapter = session.get_adapter("https://raw.githubusercontent.com/")
    assert adapter.max_retries.total == 0
    assert session.get_adapter("http://example.com/").max_retries.total == 0
    assert session.headers["User-Agent"].startswith("manifestcheck/")
