"""Domain error types."""


class MessageDecodeError(ValueError):
    """Raised when serialized input cannot be turned into a ChatMessage."""


class UnknownMessageTypeError(MessageDecodeError):
    """Raised when a type token is not CHAT, JOIN or LEAVE."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f'Unknown message type: {token!r}')


class ConfigFileError(ValueError):
    """Raised when a config file is not valid YAML or not a mapping."""
