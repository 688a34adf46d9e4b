"""Exceptions raised around the tokenizer."""


class WinArgsException(Exception):
    """Base exception for winargs errors."""

    pass


class DecodeFailed(WinArgsException):
    """Raised when a raw command line cannot be decoded to text."""

    pass


class UnsupportedPlatform(WinArgsException):
    """Raised when the OS command line is requested off Windows."""

    pass
