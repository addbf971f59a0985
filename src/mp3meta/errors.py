"""Exceptions raised by mp3meta."""


class MP3MetaError(Exception):
    """Base error for all mp3meta operations."""


class ParseError(MP3MetaError):
    """Raised when the ID3 tag of a stream cannot be read."""


class NumericFieldError(ParseError, ValueError):
    """Raised when a disc or track number is not numeric.

    A malformed number aborts the whole parse, not just the one field.
    """

    def __init__(self, field: str, raw: str):
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid {field} value: {raw!r}")


class SaveError(MP3MetaError):
    """Raised when a tag cannot be written.

    The destination may already hold partially written data.
    """


class ConfigError(MP3MetaError, ValueError):
    """Raised for invalid configuration values."""
