"""Tests for layered option loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from treehash.config_manager import ConfigManager
from treehash.engine.errors import ConfigError, TreeHashError
from treehash.engine.options import HashOptions


class TestHashOptions:

    def test_defaults(self):
        opts = HashOptions()
        assert opts.follow_symlinks is False
        assert opts.include_hidden is False
        assert opts.ignore_invalid_types is False
        assert opts.set_root is True


class TestConfigManager:

    def test_defaults_without_sources(self):
        assert ConfigManager(environ={}).load_options() == HashOptions()

    def test_config_file(self, tmp_path: Path):
        cfg = tmp_path / "treehash.json"
        cfg.write_text(json.dumps({"follow_symlinks": True, "unknown_key": 1}))
        opts = ConfigManager(environ={}).load_options(cfg)
        assert opts.follow_symlinks is True
        assert opts.set_root is True

    def test_malformed_config_file_raises(self, tmp_path: Path):
        cfg = tmp_path / "broken.json"
        cfg.write_text("{not json")
        with pytest.raises(ConfigError, match="broken.json"):
            ConfigManager(environ={}).load_options(cfg)

    def test_missing_config_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager(environ={}).load_options(tmp_path / "typo.json")
        assert isinstance(exc_info.value, TreeHashError)

    def test_non_object_config_raises(self, tmp_path: Path):
        cfg = tmp_path / "list.json"
        cfg.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="not a JSON object"):
            ConfigManager(environ={}).load_options(cfg)

    def test_env_overrides_file(self, tmp_path: Path):
        cfg = tmp_path / "treehash.json"
        cfg.write_text(json.dumps({"include_hidden": True, "set_root": False}))
        env = {"TREEHASH_INCLUDE_HIDDEN": "false", "TREEHASH_IGNORE_INVALID_TYPES": "1"}
        opts = ConfigManager(environ=env).load_options(cfg)
        assert opts.include_hidden is False
        assert opts.ignore_invalid_types is True
        assert opts.set_root is False

    def test_overrides_win_and_none_is_skipped(self):
        env = {"TREEHASH_FOLLOW_SYMLINKS": "true", "TREEHASH_SET_ROOT": "false"}
        opts = ConfigManager(environ=env).load_options(
            overrides={"follow_symlinks": False, "set_root": None}
        )
        assert opts.follow_symlinks is False
        assert opts.set_root is False

    def test_invalid_env_value(self):
        with pytest.raises(ConfigError):
            ConfigManager(environ={"TREEHASH_SET_ROOT": "maybe"}).load_options()

    def test_log_level(self):
        assert ConfigManager(environ={}).log_level() == "WARNING"
        assert ConfigManager(environ={"TREEHASH_LOG_LEVEL": "debug"}).log_level() == "DEBUG"

    def test_describe_lists_env_vars(self):
        lines = ConfigManager(environ={}).describe()
        assert len(lines) == 4
        assert lines[0].startswith("TREEHASH_FOLLOW_SYMLINKS")

    def test_invalid_config_file_value(self, tmp_path: Path):
        cfg = tmp_path / "treehash.json"
        cfg.write_text(json.dumps({"follow_symlinks": "sometimes"}))
        with pytest.raises(ConfigError, match="Invalid option value"):
            ConfigManager(environ={}).load_options(cfg)
