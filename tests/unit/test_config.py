"""Unit tests for SttSampleConfig."""

import os
from pathlib import Path

import pytest
import yaml

from sttsample.config import CONFIG_FILENAME, SttSampleConfig, find_config_file


def write_config(directory, data) -> Path:
    path = Path(directory) / CONFIG_FILENAME
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.mark.unit
class TestSttSampleConfig:
    """Test cases for the YAML configuration loader."""

    def test_load_and_resolve_relative_paths(self, temp_data_dir):
        path = write_config(temp_data_dir, {
            "google_cloud": {"credentials_path": "creds/service.json", "model": "latest_long"},
            "logging": {"file_path": "logs/app.log"},
        })

        config = SttSampleConfig(str(path))

        assert config.get("google_cloud.credentials_path") == str(Path(temp_data_dir) / "creds/service.json")
        assert config.get("logging.file_path") == str(Path(temp_data_dir) / "logs/app.log")
        assert config.get("google_cloud.model") == "latest_long"

    def test_defaults_are_merged(self, temp_data_dir):
        path = write_config(temp_data_dir, {"app": {"default_language": "korean"}})

        config = SttSampleConfig(str(path))

        assert config.get("app.default_language") == "korean"
        assert config.get("google_cloud.use_enhanced_model") is True
        assert config.get("recognizer.max_workers") == 2

    def test_get_missing_key_returns_default(self, temp_data_dir):
        config = SttSampleConfig(str(write_config(temp_data_dir, {"app": {}})))

        assert config.get("does.not.exist", "fallback") == "fallback"
        assert config.get("google_cloud.timeout_seconds", 30.0) == 30.0

    def test_set_creates_nested_keys(self, temp_data_dir):
        config = SttSampleConfig(str(write_config(temp_data_dir, {"app": {}})))

        config.set("new.nested.key", 5)
        config.set("app.default_language", "korean")

        assert config.get("new.nested.key") == 5
        assert config.get("app.default_language") == "korean"

    def test_missing_explicit_file_raises(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            SttSampleConfig(os.path.join(temp_data_dir, "nope.yaml"))

    def test_empty_file_raises(self, temp_data_dir):
        path = Path(temp_data_dir) / CONFIG_FILENAME
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError, match="empty"):
            SttSampleConfig(str(path))

    def test_invalid_yaml_raises(self, temp_data_dir):
        path = Path(temp_data_dir) / CONFIG_FILENAME
        path.write_text("app: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            SttSampleConfig(str(path))

    def test_search_parent_directories(self, temp_data_dir, monkeypatch):
        path = write_config(temp_data_dir, {"app": {"default_language": "korean"}})
        nested = Path(temp_data_dir) / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert find_config_file().resolve() == path.resolve()
        assert SttSampleConfig().get("app.default_language") == "korean"

    def test_credentials_path_required(self, temp_data_dir):
        config = SttSampleConfig(str(write_config(temp_data_dir, {"app": {}})))

        with pytest.raises(ValueError, match="credentials path not configured"):
            config.get_google_credentials_path()

        config.set("google_cloud.credentials_path", os.path.join(temp_data_dir, "missing.json"))
        with pytest.raises(FileNotFoundError):
            config.get_google_credentials_path()

        creds = Path(temp_data_dir) / "creds.json"
        creds.write_text("{}")
        config.set("google_cloud.credentials_path", str(creds))
        assert config.get_google_credentials_path() == str(creds.absolute())
