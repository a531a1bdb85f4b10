"""Unit tests for the file type registry and parse_file()."""

import pytest

from fileparser import FileType, FileTypeRegistry, get_registry, parse_file
from fileparser.factory import get_file_type


@pytest.fixture
def registry():
    return FileTypeRegistry({".sql": "sql", ".conf": "config", ".ini": "configuration"})


@pytest.mark.parametrize(
    "path, expected",
    [
        ("deploy.sql", FileType.SQL_SCRIPT),
        ("scripts/DEPLOY.SQL", FileType.SQL_SCRIPT),
        (".sql", FileType.SQL_SCRIPT),
        ("sql", None),
        ("app.conf", FileType.CONFIGURATION),
        ("settings.ini", FileType.CONFIGURATION),
        (".hidden.ini", FileType.CONFIGURATION),
        ("README", None),
        ("notes.txt", None),
    ],
)
def test_get_file_type(registry, path, expected):
    assert registry.get_file_type(path) is expected


def test_register_extension(registry):
    registry.register("TSQL", FileType.SQL_SCRIPT)
    assert registry.is_supported("proc.tsql")
    assert ".tsql" in registry.get_supported_extensions()


def test_unknown_type_name_in_mapping():
    with pytest.raises(ValueError):
        FileTypeRegistry({".yml": "yaml"})


def test_global_registry_defaults():
    assert get_registry() is get_registry()
    assert get_file_type("deploy.sql") is FileType.SQL_SCRIPT
    assert get_file_type("service.cfg") is FileType.CONFIGURATION


def test_parse_file_detects_sql(tmp_path):
    path = tmp_path / "deploy.sql"
    path.write_text("-- header\nCREATE TABLE t (id INT);\nGO\nSELECT * FROM t;\n", encoding="utf-8")

    assert parse_file(str(path)) == ["CREATE TABLE t (id INT);", "SELECT * FROM t;"]


def test_parse_file_detects_config(tmp_path):
    path = tmp_path / "app.conf"
    path.write_text("# settings\nhost=localhost\n\nport=8080\n", encoding="utf-8")

    assert parse_file(str(path)) == ["host=localhost", "port=8080"]


def test_parse_file_explicit_type(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text("a=1\nb=2\n", encoding="utf-8")

    assert parse_file(str(path), file_type=FileType.CONFIGURATION) == ["a=1", "b=2"]


def test_parse_file_unsupported_extension(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text("a=1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="not supported"):
        parse_file(str(path))


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(str(tmp_path / "missing.sql"))


def test_parse_file_encoding(tmp_path):
    path = tmp_path / "names.conf"
    path.write_bytes("name=Zoë\n".encode("latin-1"))

    with pytest.raises(UnicodeDecodeError):
        parse_file(str(path), encoding="utf-8")
    assert parse_file(str(path), encoding="latin-1") == ["name=Zoë"]


def test_parse_file_with_byte_order_mark(tmp_path):
    path = tmp_path / "deploy.sql"
    path.write_bytes("-- header\nSELECT 1\nGO\nSELECT 2\n".encode("utf-8-sig"))

    assert parse_file(str(path)) == ["SELECT 1", "SELECT 2"]
    assert parse_file(str(path), encoding="utf-8") == ["SELECT 1", "SELECT 2"]
