"""A parsed command line that keeps its program name."""

from dataclasses import dataclass, field
from typing import Iterator

from . import tokenizer


@dataclass
class Command:
    """Program name plus the arguments that follow it."""

    exe: str
    args: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, command_line: str, doubled_quotes: bool = False) -> "Command":
        """
        Parse a complete command line, beginning with the program name.

        The empty command line yields an empty program name and no arguments.
        """
        exe, i = tokenizer.split_program_name(command_line)
        if i >= len(command_line):
            return cls(exe, [])
        args = list(tokenizer.iter_args(command_line[i:], False, doubled_quotes))
        return cls(exe, args)

    def argv(self) -> list[str]:
        """Return the program name followed by the arguments."""
        return [self.exe] + self.args

    def __len__(self) -> int:
        return len(self.args) + 1

    def __iter__(self) -> Iterator[str]:
        yield self.exe
        yield from self.args
