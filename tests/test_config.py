"""Tests for parsedtext.config."""

from parsedtext.config import Config, load_config
from parsedtext.core.constants import OffsetMode, StyleDefaults


class TestConfig:
    def test_defaults(self) -> None:
        config = load_config()
        assert config.offset_mode == OffsetMode.RELATIVE
        assert config.highlight_style == StyleDefaults.HIGHLIGHT
        assert config.log_level == "WARNING"

    def test_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PARSEDTEXT_OFFSET_MODE", "absolute")
        monkeypatch.setenv("PARSEDTEXT_HIGHLIGHT_STYLE", "reverse")
        config = load_config()
        assert config.offset_mode == OffsetMode.ABSOLUTE
        assert config.highlight_style == "reverse"

    def test_env_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("PARSEDTEXT_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert load_config().log_level == "DEBUG"

    def test_field_names(self) -> None:
        config = Config(offset_mode="absolute", log_level="INFO")
        assert config.offset_mode == OffsetMode.ABSOLUTE
        assert config.log_level == "INFO"
