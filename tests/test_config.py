"""Tests for configuration module"""
import os
from pathlib import Path
from unittest.mock import patch
import pytest
from pydantic import ValidationError

from config import Config


class TestConfig:
    """Test configuration validation and parsing"""

    def test_default_config(self):
        """Test default configuration values"""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.path_variable == "PATH"
        assert config.convert_executable == "convert"
        assert config.identify_executable == "identify"
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.environment == "production"
        assert config.report_extensions == [("zlib", None), ("sqlite3", None)]

    def test_environment_override(self):
        """Test configuration override from environment variables"""
        env_vars = {
            "FEATURE_PROBE_PATH_VARIABLE": "IMAGE_PATH",
            "FEATURE_PROBE_CONVERT_EXECUTABLE": "magick",
            "FEATURE_PROBE_LOG_LEVEL": "debug",
            "FEATURE_PROBE_ENVIRONMENT": "Development",
        }

        with patch.dict(os.environ, env_vars):
            config = Config()

            assert config.path_variable == "IMAGE_PATH"
            assert config.convert_executable == "magick"
            assert config.log_level == "DEBUG"
            assert config.environment == "development"

    def test_validation_log_level(self):
        """Test unknown log levels are rejected"""
        with patch.dict(os.environ, {"FEATURE_PROBE_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValidationError):
                Config()

    def test_validation_blank_path_variable(self):
        """Test the search list variable name must not be blank"""
        with patch.dict(os.environ, {"FEATURE_PROBE_PATH_VARIABLE": "  "}):
            with pytest.raises(ValidationError):
                Config()

    def test_report_extensions_parsing(self):
        """Test extension list parsing with optional version floors"""
        with patch.dict(os.environ, {"FEATURE_PROBE_REPORT_EXTENSIONS_STR": "zlib, pdo_mysql>=1.0.2 ,,gd>="}):
            config = Config()

            assert config.report_extensions == [
                ("zlib", None),
                ("pdo_mysql", "1.0.2"),
                ("gd", None),
            ]

    def test_log_file_without_side_effects(self, tmp_path):
        """Test loading configuration does not create the log directory"""
        log_file = tmp_path / "subdir" / "probe.log"

        with patch.dict(os.environ, {"FEATURE_PROBE_LOG_FILE": str(log_file)}):
            config = Config()

            assert config.log_file == Path(log_file)
            assert not log_file.parent.exists()
