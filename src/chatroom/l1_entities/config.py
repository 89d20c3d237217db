"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

import re
from string import Formatter

from pydantic import BaseModel, field_validator

TEMPLATE_FIELDS = frozenset({'sender', 'content'})


class ChatConfig(BaseModel):
    default_sender: str


class DisplayConfig(BaseModel):
    chat_format: str
    join_format: str
    leave_format: str
    untyped_format: str
    anonymous_name: str

    @field_validator('chat_format', 'join_format', 'leave_format', 'untyped_format')
    @classmethod
    def check_placeholders(cls, value: str) -> str:
        """Only {sender} and {content} may appear; stray braces are rejected by the parser."""
        for _, field_name, format_spec, _ in Formatter().parse(value):
            if field_name is None:
                continue
            root = re.split(r'[.\[]', field_name, maxsplit=1)[0]
            if root not in TEMPLATE_FIELDS:
                raise ValueError(f'unknown placeholder {{{field_name}}}; use {{sender}} or {{content}}')
            if format_spec and '{' in format_spec:
                raise ValueError(f'nested placeholder in {{{field_name}:{format_spec}}}')
        return value


class AppConfig(BaseModel):
    chat: ChatConfig
    display: DisplayConfig
