# RSM Config Tests
# Tests for settings resolution and document loading/saving

import os
from pathlib import Path

import pytest
import yaml

from rsm.config import (
    DEFAULT_DATA_DIR,
    RsmSettings,
    get_config_path,
    get_data_dir,
    load_document,
    load_settings,
    read_config,
    save_document,
)
from rsm.errors import ConfigNotFoundError, ConfigParseError, ConfigReadError, ConfigWriteError


class TestRsmSettings:
    """Tests for RsmSettings schema."""

    def test_defaults(self):
        settings = RsmSettings()
        assert settings.data_dir == Path("/usr/share/rime-data")
        assert settings.config_path == Path("/usr/share/rime-data/default.yaml")

    def test_expands_home(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path):
        monkeypatch.setenv("HOME", str(temp_dir))
        settings = RsmSettings(config_path="~/default.yaml", data_dir="~/rime")
        assert settings.config_path == temp_dir / "default.yaml"
        assert settings.data_dir == temp_dir / "rime"

    def test_for_data_dir(self, temp_dir: Path):
        settings = RsmSettings.for_data_dir(temp_dir)
        assert settings.data_dir == temp_dir
        assert settings.config_path == temp_dir / "default.yaml"


class TestLoadSettings:
    """Tests for environment overrides."""

    def test_no_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("RSM_CONFIG", raising=False)
        monkeypatch.delenv("RSM_DATA_DIR", raising=False)
        settings = load_settings()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.config_path == DEFAULT_DATA_DIR / "default.yaml"

    def test_data_dir_moves_config(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path):
        monkeypatch.delenv("RSM_CONFIG", raising=False)
        monkeypatch.setenv("RSM_DATA_DIR", str(temp_dir))
        assert get_data_dir() == temp_dir
        assert get_config_path() == temp_dir / "default.yaml"

    def test_config_override(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path):
        monkeypatch.setenv("RSM_DATA_DIR", str(temp_dir))
        monkeypatch.setenv("RSM_CONFIG", str(temp_dir / "custom.yaml"))
        settings = load_settings()
        assert settings.config_path == temp_dir / "custom.yaml"
        assert settings.data_dir == temp_dir

    def test_symlink_not_resolved(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path):
        target = temp_dir / "real.yaml"
        target.write_text("schema_list: []\n", encoding="utf-8")
        link = temp_dir / "default.yaml"
        link.symlink_to(target)
        monkeypatch.setenv("RSM_CONFIG", str(link))
        assert get_config_path() == link

    def test_home_expanded(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path):
        monkeypatch.setenv("HOME", str(temp_dir))
        monkeypatch.setenv("RSM_CONFIG", "~/.config/rime/default.yaml")
        assert get_config_path() == temp_dir / ".config" / "rime" / "default.yaml"


class TestReadConfig:
    """Tests for read_config."""

    def test_returns_source_and_document(self, temp_dir: Path):
        path = temp_dir / "default.yaml"
        path.write_text("# header\nschema_list:\n  - schema: pinyin\n", encoding="utf-8")
        source, document = read_config(path)
        assert source == "# header\nschema_list:\n  - schema: pinyin\n"
        assert document == {"schema_list": [{"schema": "pinyin"}]}

    def test_keeps_crlf(self, temp_dir: Path):
        path = temp_dir / "default.yaml"
        path.write_bytes(b"menu:\r\n  page_size: 5\r\n")
        source, _document = read_config(path)
        assert source == "menu:\r\n  page_size: 5\r\n"

    def test_yes_is_a_string(self, temp_dir: Path):
        path = temp_dir / "default.yaml"
        path.write_text("switcher:\n  abbreviate_options: yes\n", encoding="utf-8")
        _source, document = read_config(path)
        assert document["switcher"]["abbreviate_options"] == "yes"


class TestLoadDocument:
    """Tests for load_document."""

    def test_load(self, config_file: Path, sample_document: dict):
        assert load_document(config_file) == sample_document

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(ConfigNotFoundError, match="not found"):
            load_document(temp_dir / "missing.yaml")

    def test_missing_file_is_read_error(self, temp_dir: Path):
        with pytest.raises(ConfigReadError):
            load_document(temp_dir / "missing.yaml")

    def test_directory_is_read_error(self, temp_dir: Path):
        with pytest.raises(ConfigReadError):
            load_document(temp_dir)

    def test_invalid_yaml(self, temp_dir: Path):
        path = temp_dir / "broken.yaml"
        path.write_text("schema_list: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigParseError, match="Invalid YAML"):
            load_document(path)

    def test_root_not_mapping(self, temp_dir: Path):
        path = temp_dir / "list.yaml"
        path.write_text("- schema: pinyin\n", encoding="utf-8")
        with pytest.raises(ConfigParseError, match="not a mapping"):
            load_document(path)

    def test_empty_file(self, temp_dir: Path):
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_document(path) == {}


class TestSaveDocument:
    """Tests for save_document."""

    def test_roundtrip_keeps_key_order(self, config_file: Path, sample_document: dict):
        document = load_document(config_file)
        save_document(document, config_file)

        reloaded = load_document(config_file)
        assert reloaded == sample_document
        assert list(reloaded) == list(sample_document)

    def test_unicode_written_verbatim(self, config_file: Path):
        save_document(load_document(config_file), config_file)
        assert "〔方案選單〕" in config_file.read_text(encoding="utf-8")

    def test_no_lock_or_temp_files_left(self, config_file: Path):
        before = sorted(p.name for p in config_file.parent.iterdir())
        save_document(load_document(config_file), config_file)
        after = sorted(p.name for p in config_file.parent.iterdir())
        assert before == after
        assert not any(name.endswith(".lock") for name in after)

    def test_keeps_permissions(self, config_file: Path):
        os.chmod(config_file, 0o644)
        save_document(load_document(config_file), config_file)
        assert config_file.stat().st_mode & 0o777 == 0o644

    def test_unserializable_document(self, temp_dir: Path):
        path = temp_dir / "default.yaml"
        with pytest.raises(ConfigWriteError):
            save_document({"schema_list": [object()]}, path)
        assert not path.exists()

    def test_writes_yaml(self, temp_dir: Path):
        path = temp_dir / "default.yaml"
        save_document({"schema_list": [{"schema": "pinyin"}]}, path)
        with open(path, encoding="utf-8") as f:
            assert yaml.safe_load(f) == {"schema_list": [{"schema": "pinyin"}]}

    def test_with_source_rewrites_only_schema_list(self, temp_dir: Path):
        path = temp_dir / "default.yaml"
        path.write_text(
            "# Rime\nmenu: { page_size: 5 }\nschema_list:\n  - schema: pinyin\nflag: yes\n",
            encoding="utf-8",
        )
        source, document = read_config(path)
        document["schema_list"].append({"schema": "wubi"})
        save_document(document, path, source=source)

        assert path.read_text(encoding="utf-8") == (
            "# Rime\nmenu: { page_size: 5 }\nschema_list:\n  - schema: pinyin\n  - schema: wubi\nflag: yes\n"
        )
