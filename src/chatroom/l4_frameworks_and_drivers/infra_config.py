"""Built-in configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from chatroom.l1_entities.config import AppConfig

APP_CONFIG_DEFAULTS: dict = {
    'chat': {
        'default_sender': 'Anonymous',
    },
    'display': {
        'chat_format': '{sender}: {content}',
        'join_format': '{sender} joined!',
        'leave_format': '{sender} left!',
        'untyped_format': '{sender}: {content}',
        'anonymous_name': 'Anonymous',
    },
}


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
