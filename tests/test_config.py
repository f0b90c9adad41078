"""Tests for settings loading."""

import logging

from running_total.config import load_settings, settings_from_dict
from running_total.models import DEFAULT_SETTINGS, LineKind, Settings


class TestLoadSettings:
    """Test load_settings."""

    def test_no_path_gives_defaults(self):
        assert load_settings(None) is DEFAULT_SETTINGS

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO):
            settings = load_settings(str(tmp_path / "missing.yaml"))
        assert settings == DEFAULT_SETTINGS
        assert "not found" in caplog.text
        assert not (tmp_path / "missing.yaml").exists()

    def test_valid_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "prompt: '$ '\n"
            "separator_glyph: '='\n"
            "theme:\n"
            "  total: bold_green\n"
            "  error: bold_red\n",
            encoding="utf-8",
        )
        settings = load_settings(str(path))

        assert settings.prompt == "$ "
        assert settings.separator_glyph == "="
        assert settings.separator_length == 28
        assert settings.theme.style_for(LineKind.TOTAL) == "bold_green"
        assert settings.theme.style_for(LineKind.ERROR) == "bold_red"

    def test_empty_file(self, tmp_path, caplog):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_settings(str(path)) == DEFAULT_SETTINGS
        assert "empty or malformed" in caplog.text

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("prompt: [unclosed\n", encoding="utf-8")
        assert load_settings(str(path)) == DEFAULT_SETTINGS

    def test_unknown_key_falls_back(self, tmp_path, caplog):
        """Test the currency cannot be configured."""
        path = tmp_path / "settings.yaml"
        path.write_text("currency: EUR\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_settings(str(path)) == DEFAULT_SETTINGS
        assert "Invalid settings" in caplog.text


    def test_unknown_style_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.yaml"
        path.write_text("theme:\n  total: not_a_style\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_settings(str(path)) == DEFAULT_SETTINGS
        assert "Unknown style name" in caplog.text


class TestSettingsFromDict:
    """Test settings_from_dict."""

    def test_rejects_bad_values(self):
        assert settings_from_dict({"separator_length": -1}) == DEFAULT_SETTINGS
        assert settings_from_dict({"separator_glyph": ""}) == DEFAULT_SETTINGS

    def test_partial_theme(self):
        settings = settings_from_dict({"theme": {"entry": "cyan"}})
        assert settings == Settings(theme={"entry": "cyan"})
        assert settings.theme.total == "bold"

    def test_compound_styles_are_accepted(self):
        settings = settings_from_dict({"theme": {"total": "bold_underline_bright_blue_on_red", "error": "italic"}})
        assert settings.theme.total == "bold_underline_bright_blue_on_red"
        assert settings.theme.error == "italic"
