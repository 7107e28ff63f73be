"""
Tests for LoggingConfig, LogLevel and LogFormat.
"""

import pytest

from api_manager.core.logging.config import LogFormat, LoggingConfig, LogLevel


class TestEnums:
    def test_log_level_is_string(self):
        """LogLevel inherits from str."""
        assert isinstance(LogLevel.INFO, str)
        assert LogLevel.CRITICAL.value == "CRITICAL"

    def test_log_format_values(self):
        assert {f.value for f in LogFormat} == {"json", "text"}


class TestLoggingConfig:
    def test_default_config(self):
        """Default config logs INFO text lines to the console only."""
        config = LoggingConfig()

        assert config.level is LogLevel.INFO
        assert config.format is LogFormat.TEXT
        assert config.console is True
        assert config.file_path is None
        assert dict(config.static_fields) == {}

    def test_strings_coerced_case_insensitively(self):
        config = LoggingConfig(level="debug", format="JSON")

        assert config.level is LogLevel.DEBUG
        assert config.format is LogFormat.JSON

    @pytest.mark.parametrize("kwargs", [{"level": "verbose"}, {"format": "colored"}])
    def test_unknown_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            LoggingConfig(**kwargs)

    def test_requires_an_output(self):
        with pytest.raises(ValueError, match="console output or a file_path"):
            LoggingConfig(console=False)

    def test_file_only(self, tmp_path):
        config = LoggingConfig(console=False, file_path=str(tmp_path / "api.log"))
        assert config.file_path.endswith("api.log")

    def test_static_fields_read_only(self):
        source = {"service": "mobile-backend"}
        config = LoggingConfig(static_fields=source)
        source["service"] = "changed"

        assert config.static_fields["service"] == "mobile-backend"
        with pytest.raises(TypeError):
            config.static_fields["env"] = "prod"

    def test_frozen(self):
        config = LoggingConfig()
        with pytest.raises(AttributeError):
            config.level = LogLevel.ERROR
