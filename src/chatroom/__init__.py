"""chatroom -- chat message records, JSON codec, and a small CLI."""

__version__ = '0.1.0'
