"""Split command lines the way the Windows C runtime does."""

__version__ = "0.1.0"

from .command import Command
from .exceptions import DecodeFailed, UnsupportedPlatform, WinArgsException
from .tokenizer import iter_args, parse, parse_args, parse_cmd, split_program_name

__all__ = [
    "Command",
    "DecodeFailed",
    "UnsupportedPlatform",
    "WinArgsException",
    "iter_args",
    "parse",
    "parse_args",
    "parse_cmd",
    "split_program_name",
]
