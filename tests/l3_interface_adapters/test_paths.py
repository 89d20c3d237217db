"""Tests for shared path constants."""

from __future__ import annotations

from pathlib import Path

from chatroom.l3_interface_adapters.gateways.paths import CONFIG_DIR, DEFAULT_CONFIG_PATHS


class TestPaths:
    def test_config_dir_is_path(self):
        assert isinstance(CONFIG_DIR, Path)

    def test_config_dir_name(self):
        assert CONFIG_DIR.name == 'chatroom'

    def test_default_config_paths_are_under_config_dir(self):
        assert [p.name for p in DEFAULT_CONFIG_PATHS] == ['config.yaml', 'config.yml']
        for p in DEFAULT_CONFIG_PATHS:
            assert p.parent == CONFIG_DIR
