"""Use case: render a message as a single human-readable line."""

from __future__ import annotations

from chatroom.l1_entities.chat_message import ChatMessage, MessageType
from chatroom.l1_entities.config import DisplayConfig


class RenderMessageUseCase:
    """Formats messages with the per-type templates from DisplayConfig."""

    def __init__(self, display: DisplayConfig) -> None:
        self._display = display

    def execute(self, message: ChatMessage) -> str:
        template = self._template_for(message.type)
        return template.format(
            sender=message.sender or self._display.anonymous_name,
            content=message.content or '',
        )

    def _template_for(self, message_type: MessageType | None) -> str:
        if message_type is MessageType.JOIN:
            return self._display.join_format
        if message_type is MessageType.LEAVE:
            return self._display.leave_format
        if message_type is MessageType.CHAT:
            return self._display.chat_format
        return self._display.untyped_format
