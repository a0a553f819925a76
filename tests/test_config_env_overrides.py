"""Tests for FOOTMARK_* environment variable overrides."""

from __future__ import annotations


class TestTryParseEnvValue:
    """_try_parse_env_value types raw environment strings."""

    def test_json_list_parsed(self):
        from footmark.config import _try_parse_env_value

        assert _try_parse_env_value('["*.md", "*.txt"]') == ["*.md", "*.txt"]

    def test_json_object_parsed(self):
        from footmark.config import _try_parse_env_value

        assert _try_parse_env_value('{"key": "value"}') == {"key": "value"}

    def test_booleans_any_case(self):
        from footmark.config import _try_parse_env_value

        assert _try_parse_env_value("true") is True
        assert _try_parse_env_value("TRUE") is True
        assert _try_parse_env_value("False") is False

    def test_plain_string_passthrough(self):
        from footmark.config import _try_parse_env_value

        assert _try_parse_env_value("<C-n>") == "<C-n>"

    def test_malformed_json_returns_string(self):
        from footmark.config import _try_parse_env_value

        assert _try_parse_env_value("[not valid json") == "[not valid json"


class TestApplyEnvOverrides:
    """_apply_env_overrides maps variables onto config keys."""

    def test_top_level_key(self, monkeypatch):
        from footmark.config import _apply_env_overrides

        monkeypatch.setenv("FOOTMARK_ORGANIZE_ON_SAVE", "true")

        result = _apply_env_overrides({"organize_on_save": False, "keys": {}})

        assert result["organize_on_save"] is True

    def test_section_key(self, monkeypatch):
        from footmark.config import _apply_env_overrides

        monkeypatch.setenv("FOOTMARK_KEYS_NEW_FOOTNOTE", "<C-n>")

        result = _apply_env_overrides({"keys": {"new_footnote": "<C-f>"}})

        assert result["keys"]["new_footnote"] == "<C-n>"

    def test_list_value(self, monkeypatch):
        from footmark.config import _apply_env_overrides

        monkeypatch.setenv("FOOTMARK_PATTERNS", '["*.txt"]')

        result = _apply_env_overrides({"patterns": ["*.md"]})

        assert result["patterns"] == ["*.txt"]

    def test_load_config_applies_env(self, tmp_path, monkeypatch):
        from footmark.config import load_config

        config_file = tmp_path / ".footmark.toml"
        config_file.write_text("organize_on_new = false\n")
        monkeypatch.setenv("FOOTMARK_ORGANIZE_ON_NEW", "true")

        assert load_config(config_file)["organize_on_new"] is True
