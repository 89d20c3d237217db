"""Port: message codec for the textual interchange format."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from chatroom.l1_entities.chat_message import ChatMessage


class MessageCodec(Protocol):
    """Abstract encoder/decoder between ChatMessage and text."""

    def encode(self, message: ChatMessage) -> str:
        """Serialize a message to a single line of text."""
        ...

    def decode(self, text: str) -> ChatMessage:
        """Parse one serialized message. Raises MessageDecodeError on bad input."""
        ...

    def decode_lines(self, lines: Iterable[str]) -> Iterator[tuple[int, ChatMessage]]:
        """Yield (line_number, message) for each non-blank line."""
        ...
