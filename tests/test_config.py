"""Tests for environment configuration."""

from unittest.mock import patch

from sitepitch.config import Config
from sitepitch.constants import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_REPORT_FILE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)


class TestConfig:
    """Test cases for Config."""

    def test_defaults(self):
        """Test defaults with an empty environment."""
        with patch.dict("os.environ", {}, clear=True):
            config = Config.from_env()

        assert config.target_url is None
        assert config.output_file == DEFAULT_REPORT_FILE
        assert config.locale == DEFAULT_LOCALE
        assert config.timeout == DEFAULT_REQUEST_TIMEOUT_SECONDS
        assert config.max_redirects == DEFAULT_MAX_REDIRECTS
        assert config.include_navigation is True
        assert config.log_level == "INFO"

    def test_values_from_environment(self):
        """Test reading every setting from the environment."""
        env = {
            "TARGET_URL": "https://acme.no",
            "REPORT_FILE": "acme.txt",
            "REPORT_LOCALE": "en",
            "USER_AGENT": "PitchBot/2.0",
            "TIMEOUT": "10",
            "MAX_REDIRECTS": "3",
            "INCLUDE_NAVIGATION": "false",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict("os.environ", env, clear=True):
            config = Config.from_env()

        assert config.target_url == "https://acme.no"
        assert config.output_file == "acme.txt"
        assert config.locale == "en"
        assert config.user_agent == "PitchBot/2.0"
        assert config.timeout == 10
        assert config.max_redirects == 3
        assert config.include_navigation is False
        assert config.log_level == "DEBUG"

    def test_invalid_values_fall_back_to_defaults(self):
        """Test that unparsable values keep the defaults."""
        env = {"TIMEOUT": "soon", "MAX_REDIRECTS": "", "INCLUDE_NAVIGATION": "maybe"}
        with patch.dict("os.environ", env, clear=True):
            config = Config.from_env()

        assert config.timeout == DEFAULT_REQUEST_TIMEOUT_SECONDS
        assert config.max_redirects == DEFAULT_MAX_REDIRECTS
        assert config.include_navigation is True

    def test_empty_target_url_is_missing(self):
        """Test that an empty TARGET_URL counts as unset."""
        with patch.dict("os.environ", {"TARGET_URL": ""}, clear=True):
            assert Config.from_env().target_url is None
