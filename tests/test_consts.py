"""Tests for configuration lookup."""

from fileparser import consts


def test_env_override(monkeypatch):
    monkeypatch.setenv("FILEPARSER_ENCODING", "latin-1")
    assert consts._get("parsing", "encoding", "utf-8", "FILEPARSER_ENCODING") == "latin-1"


def test_env_override_coerces_type(monkeypatch):
    monkeypatch.setenv("FILEPARSER_TEST_FLAG", "TRUE")
    monkeypatch.setenv("FILEPARSER_TEST_COUNT", "7")
    assert consts._get("missing", "flag", False, "FILEPARSER_TEST_FLAG") is True
    assert consts._get("missing", "count", 1, "FILEPARSER_TEST_COUNT") == 7


def test_default_when_unset(monkeypatch):
    monkeypatch.delenv("FILEPARSER_TEST_MISSING", raising=False)
    assert consts._get("missing", "key", "fallback", "FILEPARSER_TEST_MISSING") == "fallback"


def test_builtin_extensions_present():
    assert consts.EXTENSION_MAP[".sql"] == "sql"
    assert consts.EXTENSION_MAP[".conf"] == "config"
    assert consts.BATCH_SEPARATOR == "\n"
