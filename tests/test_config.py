"""Tests for configuration loading."""

from __future__ import annotations

import json

import pytest

from builder_gen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()

        assert config.indent == "    "
        assert config.conflict_policy == "replace"
        assert config.type_rendering == "verbatim"
        assert config.final_advisory is True

    def test_tab_indent(self):
        assert GeneratorConfig(use_tabs=True).indent == "\t"


class TestConfigManager:
    def test_overrides(self):
        config = load_config(custom_config={"indent_size": 2, "conflict_policy": "keep"})

        assert config.indent == "  "
        assert config.conflict_policy == "keep"

    def test_unknown_keys_go_to_custom(self):
        config = load_config(custom_config={"author": "team"})
        assert config.custom == {"author": "team"}

    def test_file_then_overrides(self, tmp_path):
        path = tmp_path / "builder.json"
        path.write_text(json.dumps({"indent_size": 8, "use_tabs": True}), encoding="utf-8")

        config = load_config(custom_config={"indent_size": 3}, config_file=path)

        assert config.indent_size == 3
        assert config.use_tabs is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_not_json_extension(self, tmp_path):
        path = tmp_path / "builder.yaml"
        path.write_text("indent_size: 2", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "builder.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "builder.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"conflict_policy": "merge"}, "conflict_policy"),
            ({"type_rendering": "fancy"}, "type_rendering"),
            ({"indent_size": -1}, "indent_size"),
            ({"line_ending": "\r"}, "line_ending"),
        ],
    )
    def test_invalid_values(self, overrides, message):
        with pytest.raises(ConfigError, match=message):
            load_config(custom_config=overrides)

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        config = manager.get_config({"indent_size": 2, "author": "team"})
        path = tmp_path / "saved.json"

        manager.save_config(config, path)
        reloaded = manager.get_config(config_file=path)

        assert reloaded.indent_size == 2
        assert reloaded.custom == {"author": "team"}
