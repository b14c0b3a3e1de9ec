"""Tests for RealSettingsFileStore."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from gitshim.core.errors import SettingsParseError
from gitshim.gateway.settings_file.real import RealSettingsFileStore


def test_read_missing_file_returns_empty_document(tmp_path: Path) -> None:
    store = RealSettingsFileStore()

    assert store.read(tmp_path / "settings.json") == {}


def test_read_blank_file_returns_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("  \n", encoding="utf-8")

    assert RealSettingsFileStore().read(path) == {}


def test_read_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(SettingsParseError) as exc_info:
        RealSettingsFileStore().read(path)

    assert exc_info.value.path == path
    assert str(path) in str(exc_info.value)


def test_read_non_object_raises(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(SettingsParseError, match="expected a JSON object"):
        RealSettingsFileStore().read(path)


def test_write_creates_parent_directory(tmp_path: Path) -> None:
    path = tmp_path / "Fork" / "settings.json"

    RealSettingsFileStore().write(path, {"GitInstanceType": 2})

    assert json.loads(path.read_text(encoding="utf-8")) == {"GitInstanceType": 2}


def test_write_is_pretty_printed_and_leaves_no_temp_files(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{}", encoding="utf-8")

    RealSettingsFileStore().write(path, {"a": 1, "b": "x"})

    assert path.read_text(encoding="utf-8") == '{\n  "a": 1,\n  "b": "x"\n}'
    assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]


def test_failed_replace_keeps_original_and_cleans_up(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"keep": true}', encoding="utf-8")

    with patch.object(Path, "replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError, match="disk full"):
            RealSettingsFileStore().write(path, {"keep": False})

    assert path.read_text(encoding="utf-8") == '{"keep": true}'
    assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]


def test_read_invalid_utf8_raises(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_bytes(b'{"Theme": "\xff\xfe"}')

    with pytest.raises(SettingsParseError, match="not valid UTF-8") as exc_info:
        RealSettingsFileStore().read(path)

    assert exc_info.value.path == path
