"""Use case: build chat, join, and leave messages for a sender."""

from __future__ import annotations

from chatroom.l1_entities.chat_message import ChatMessage, MessageType


class ComposeMessageUseCase:
    """Builds ChatMessage records, falling back to a default sender."""

    def __init__(self, default_sender: str) -> None:
        self._default_sender = default_sender

    def execute(
        self,
        message_type: MessageType,
        sender: str | None = None,
        content: str | None = None,
    ) -> ChatMessage:
        """Build a message of *message_type*. Only ``None`` sender falls back to the default."""
        message = ChatMessage()
        message.type = message_type
        message.sender = self._default_sender if sender is None else sender
        if content is not None:
            message.content = content
        return message

    def chat(self, content: str, sender: str | None = None) -> ChatMessage:
        return self.execute(MessageType.CHAT, sender=sender, content=content)

    def join(self, sender: str | None = None) -> ChatMessage:
        return self.execute(MessageType.JOIN, sender=sender)

    def leave(self, sender: str | None = None) -> ChatMessage:
        return self.execute(MessageType.LEAVE, sender=sender)
