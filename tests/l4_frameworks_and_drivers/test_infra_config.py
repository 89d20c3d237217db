"""Tests for built-in config defaults."""

import pytest
from pydantic import ValidationError

from chatroom.l4_frameworks_and_drivers.infra_config import APP_CONFIG_DEFAULTS, build_app_config, deep_merge


class TestBuildAppConfig:
    def test_defaults(self):
        cfg = build_app_config({})
        assert cfg.chat.default_sender == 'Anonymous'
        assert cfg.display.join_format == '{sender} joined!'
        assert cfg.display.leave_format == '{sender} left!'

    def test_partial_override(self):
        cfg = build_app_config({'chat': {'default_sender': 'alice'}})
        assert cfg.chat.default_sender == 'alice'
        assert cfg.display.anonymous_name == 'Anonymous'

    def test_defaults_not_mutated(self):
        build_app_config({'chat': {'default_sender': 'alice'}})
        assert APP_CONFIG_DEFAULTS['chat']['default_sender'] == 'Anonymous'

    def test_bad_template_override_raises(self):
        with pytest.raises(ValidationError):
            build_app_config({'display': {'chat_format': '{sender} in {room}'}})


class TestDeepMerge:
    def test_nested_merge(self):
        base = {'a': {'x': 1, 'y': 2}, 'b': 1}
        deep_merge(base, {'a': {'y': 3}})
        assert base == {'a': {'x': 1, 'y': 3}, 'b': 1}

    def test_non_dict_replaces(self):
        base = {'a': {'x': 1}}
        deep_merge(base, {'a': 'flat'})
        assert base == {'a': 'flat'}
