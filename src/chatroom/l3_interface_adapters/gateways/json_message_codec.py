"""Gateway: JSON message codec — implements MessageCodec port.

Wire shape is a flat object with ``sender``, ``content`` and ``type`` keys.
``type`` travels as its literal token (``"CHAT"``, ``"JOIN"``, ``"LEAVE"``).
Absent fields are written as ``null``; on input, missing keys and ``null``
both decode as absent, and unrecognized keys are ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator

from chatroom.l1_entities.chat_message import ChatMessage, MessageType
from chatroom.l1_entities.errors import MessageDecodeError, UnknownMessageTypeError

log = logging.getLogger('chatroom.codec')

_TEXT_FIELDS = ('sender', 'content')


class JsonMessageCodec:
    """Encodes ChatMessage to single-line JSON and back."""

    def encode(self, message: ChatMessage) -> str:
        payload = {
            'sender': message.sender,
            'content': message.content,
            'type': message.type.value if message.type is not None else None,
        }
        return json.dumps(payload, ensure_ascii=False)

    def decode(self, text: str) -> ChatMessage:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            log.debug('Rejected non-JSON payload: %r', text)
            raise MessageDecodeError(f'Invalid JSON: {e.msg}') from e
        except (ValueError, RecursionError) as e:
            # oversized integer literals, nesting deeper than the recursion limit
            log.debug('Rejected unparseable payload: %s', e)
            raise MessageDecodeError(f'Invalid JSON: {e}') from e
        if not isinstance(payload, dict):
            raise MessageDecodeError(f'Expected a JSON object, got {type(payload).__name__}')

        message = ChatMessage()
        for field in _TEXT_FIELDS:
            value = payload.get(field)
            if value is None:
                continue
            if not isinstance(value, str):
                raise MessageDecodeError(f"Field '{field}' must be a string, got {type(value).__name__}")
            setattr(message, field, value)
        token = payload.get('type')
        if token is not None:
            message.type = _parse_type(token)
        return message

    def decode_lines(self, lines: Iterable[str]) -> Iterator[tuple[int, ChatMessage]]:
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                yield lineno, self.decode(line)
            except MessageDecodeError as e:
                log.debug('Line %d: %s', lineno, e)
                raise MessageDecodeError(f'Line {lineno}: {e}') from e


def _parse_type(token: object) -> MessageType:
    if not isinstance(token, str):
        raise UnknownMessageTypeError(token)
    try:
        return MessageType(token)
    except ValueError as e:
        raise UnknownMessageTypeError(token) from e
