"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from chatroom.l1_entities.config import AppConfig
from chatroom.l2_use_cases.compose_message_use_case import ComposeMessageUseCase
from chatroom.l2_use_cases.render_message_use_case import RenderMessageUseCase
from chatroom.l3_interface_adapters.gateways.json_message_codec import JsonMessageCodec
from chatroom.l4_frameworks_and_drivers.infra_config import build_app_config


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def codec() -> JsonMessageCodec:
    return JsonMessageCodec()


@pytest.fixture
def composer() -> ComposeMessageUseCase:
    return ComposeMessageUseCase(default_sender='guest')


@pytest.fixture
def renderer(default_config: AppConfig) -> RenderMessageUseCase:
    return RenderMessageUseCase(default_config.display)


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
chat:
  default_sender: "alice"
display:
  chat_format: "<{sender}> {content}"
  join_format: "* {sender} has joined"
  leave_format: "* {sender} has left"
  untyped_format: "? {sender} {content}"
  anonymous_name: "someone"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def transcript_jsonl(tmp_path: Path) -> Path:
    content = (
        '{"sender": "alice", "content": null, "type": "JOIN"}\n'
        '{"sender": "alice", "content": "hi all", "type": "CHAT"}\n'
        '\n'
        '{"sender": "bob", "type": "CHAT", "content": "hey"}\n'
        '{"sender": "alice", "content": null, "type": "LEAVE"}\n'
    )
    p = tmp_path / 'room.jsonl'
    p.write_text(content, encoding='utf-8')
    return p
