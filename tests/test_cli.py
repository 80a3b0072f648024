"""Tests for the command-line surface."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from manifestcheck import cli
from manifestcheck.config.constants import EXIT_OK, EXIT_SETUP_FAILURE, EXIT_USAGE


def test_missing_argument_prints_usage(capsys, monkeypatch):
    monkeypatch.setattr(cli, "run", lambda *a, **k: (_ for _ in ()).throw(AssertionError("must not run")))
    assert cli.main([]) == EXIT_USAGE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage:" in captured.err
    assert "file_or_directory_path" in captured.err


def test_path_forwarded_to_run(monkeypatch):
    calls = []

    def fake_run(path, settings):
        calls.append((path, settings))
        return EXIT_OK

    monkeypatch.delenv("MANIFESTCHECK_CONFIG", raising=False)
    monkeypatch.setenv("MANIFESTCHECK_EXTENSION", "yml")
    monkeypatch.setattr(cli, "run", fake_run)
    assert cli.main(["manifests/"]) == EXIT_OK
    assert calls[0][0] == "manifests/"
    assert calls[0][1].document_extension == ".yml"


def test_bad_configuration_is_setup_failure(monkeypatch, tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("bogus: 1\n", encoding="utf-8")
    monkeypatch.setenv("MANIFESTCHECK_CONFIG", str(cfg))
    monkeypatch.setattr(cli, "run", lambda *a, **k: EXIT_OK)
    assert cli.main(["x.yaml"]) == EXIT_SETUP_FAILURE


def test_end_to_end_with_cached_schema(monkeypatch, tmp_path, capsys):
    cache = tmp_path / "cache.json"
    cache.write_text('{"required":["apiVersion","kind","spec"]}', encoding="utf-8")
    manifest = tmp_path / "svc.yaml"
    manifest.write_text("apiVersion: v1\nkind: Service\n", encoding="utf-8")
    monkeypatch.delenv("MANIFESTCHECK_CONFIG", raising=False)
    monkeypatch.setenv("MANIFESTCHECK_CACHE_FILE", str(cache))
    monkeypatch.setenv("MANIFESTCHECK_SCHEMA_URL", "http://127.0.0.1:9/unreachable.json")

    assert cli.main([str(manifest)]) == EXIT_OK
    assert "    - Missing required field: spec" in capsys.readouterr().out


def test_non_utf8_configuration_is_setup_failure(monkeypatch, tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_bytes(b"max_depth: 5\n\xff\xfe\n")
    monkeypatch.setenv("MANIFESTCHECK_CONFIG", str(cfg))
    monkeypatch.setattr(cli, "run", lambda *a, **k: EXIT_OK)
    assert cli.main(["x.yaml"]) == EXIT_SETUP_FAILURE
