"""Chat message entity: sender, content, and a closed type label."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class MessageType(enum.Enum):
    """Message category. Values are the literal interchange tokens."""

    CHAT = 'CHAT'
    JOIN = 'JOIN'
    LEAVE = 'LEAVE'


class ChatMessage(BaseModel):
    """A single chat event.

    Every field is independently optional and freely reassignable. There are
    no cross-field rules: a JOIN may carry content, a CHAT may have no sender.
    Assignment to ``type`` is validated, so only MessageType members (or their
    tokens, which are coerced) can be stored.
    """

    model_config = ConfigDict(validate_assignment=True)

    sender: str | None = None
    content: str | None = None
    type: MessageType | None = None
