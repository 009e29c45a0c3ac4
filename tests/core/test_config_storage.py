"""
Unit tests for JSON configuration storage.
"""

import json

import pytest

from pyqradar.core.config import LoggingConfig, PyQRadarConfig, QRadarConfig
from pyqradar.core.config_storage import load_config_from_file, save_config_to_file
from pyqradar.core.errors import ConfigError


class TestConfigStorage:
    """Test loading and saving the config file."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "pyqradar.json"
        config = PyQRadarConfig(
            qradar=QRadarConfig(base_url="https://qradar.local", token="abc", version="14.0", verify_ssl=False),
            logging=LoggingConfig(log_dir="/var/log/pyqradar", log_level="DEBUG"),
        )

        save_config_to_file(config, str(path))
        loaded = load_config_from_file(str(path))

        assert loaded == config
        assert json.loads(path.read_text())["qradar"]["token"] == "abc"

    def test_save_without_connection(self, tmp_path):
        path = tmp_path / "pyqradar.json"

        save_config_to_file(PyQRadarConfig(), str(path))

        data = json.loads(path.read_text())
        assert "qradar" not in data
        assert data["logging"] == {"log_dir": "logs", "log_level": "INFO"}

    def test_missing_file_falls_back_to_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PYQRADAR_BASE_URL", "https://env.qradar.local")
        monkeypatch.setenv("PYQRADAR_TOKEN", "env-token")

        config = load_config_from_file(str(tmp_path / "absent.json"))

        assert config.qradar.base_url == "https://env.qradar.local"
        assert config.qradar.token == "env-token"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "pyqradar.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError):
            load_config_from_file(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "pyqradar.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError):
            load_config_from_file(str(path))

    def test_incomplete_connection(self, tmp_path):
        path = tmp_path / "pyqradar.json"
        path.write_text(json.dumps({"qradar": {"base_url": "https://qradar.local"}}))

        with pytest.raises(ConfigError):
            load_config_from_file(str(path))

    def test_invalid_timeout(self, tmp_path):
        path = tmp_path / "pyqradar.json"
        path.write_text(
            json.dumps({"qradar": {"base_url": "https://qradar.local", "token": "abc", "timeout_seconds": "30"}})
        )

        with pytest.raises(ConfigError):
            load_config_from_file(str(path))

    def test_defaults_applied(self, tmp_path):
        path = tmp_path / "pyqradar.json"
        path.write_text(json.dumps({"qradar": {"base_url": "https://qradar.local", "token": "abc"}}))

        config = load_config_from_file(str(path))

        assert config.qradar.version == "12.0"
        assert config.qradar.timeout_seconds == 30
        assert config.logging.log_level == "INFO"
