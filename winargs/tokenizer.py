"""Windows-style command line tokenizer (CommandLineToArgvW rules)."""

from typing import Iterator

BACKSLASH = "\\"
QUOTE = '"'
WHITESPACE = (" ", "\t")


def _ends_program_name(c: str) -> bool:
    # The whole ASCII control plane counts as whitespace here.
    return c <= " "


def split_program_name(command_line: str) -> tuple[str, int]:
    """
    Split the leading program name off a full command line.

    Rules:
    - A name starting with a double quote runs to the next double quote,
      no escaping is recognized; anything up to the following whitespace
      is also part of the name
    - Otherwise the name runs to the first whitespace
    - Leading whitespace yields an empty name
    - Any character up to U+0020 counts as whitespace, and the one that
      ends the name is consumed with it

    Args:
        command_line: The full command line

    Returns:
        The program name and the index where argument scanning resumes
    """
    line_len = len(command_line)
    i = 0

    if line_len and command_line[0] == QUOTE:
        end = command_line.find(QUOTE, 1)
        if end == -1:
            return command_line[1:], line_len
        name = command_line[1:end]
        i = end + 1
        start = i
        while i < line_len and not _ends_program_name(command_line[i]):
            i += 1
        return name + command_line[start:i], min(i + 1, line_len)

    while i < line_len and not _ends_program_name(command_line[i]):
        i += 1
    # The terminating character is consumed with the name
    return command_line[:i], min(i + 1, line_len)


def _scan(command_line: str, i: int, doubled_quotes: bool) -> Iterator[str]:
    line_len = len(command_line)

    while i < line_len:
        # Skip whitespace between arguments
        while i < line_len and command_line[i] in WHITESPACE:
            i += 1

        if i >= line_len:
            break

        token_chars = []
        in_quotes = False
        # Set right after a quote that closed a quoted region
        just_closed = False

        while i < line_len:
            c = command_line[i]

            if c == BACKSLASH:
                start = i
                while i < line_len and command_line[i] == BACKSLASH:
                    i += 1
                count = i - start
                just_closed = False

                if i < line_len and command_line[i] == QUOTE:
                    token_chars.append(BACKSLASH * (count // 2))
                    i += 1
                    if count % 2:
                        token_chars.append(QUOTE)
                    else:
                        just_closed = in_quotes
                        in_quotes = not in_quotes
                else:
                    token_chars.append(BACKSLASH * count)
                continue

            if c == QUOTE:
                if doubled_quotes and just_closed:
                    token_chars.append(QUOTE)
                    just_closed = False
                else:
                    just_closed = in_quotes
                    in_quotes = not in_quotes
            elif c in WHITESPACE and not in_quotes:
                break
            else:
                token_chars.append(c)
                just_closed = False
            i += 1

        yield "".join(token_chars)


def iter_args(
    command_line: str, skip_first: bool = False, doubled_quotes: bool = False
) -> Iterator[str]:
    """
    Lazily split a command line into arguments.

    Rules:
    - Spaces and tabs outside quotes separate arguments
    - Double quotes group text and are removed from the argument
    - 2n backslashes followed by a quote become n backslashes and the
      quote toggles quoting; 2n+1 backslashes followed by a quote become
      n backslashes and a literal quote
    - Backslashes not followed by a quote are literal
    - An unterminated quote runs to the end of the input

    When doubled_quotes is set, a quote directly following the quote that
    closed a quoted region is literal, as in CommandLineToArgvW.

    Args:
        command_line: The line to split
        skip_first: Drop the leading program name first
        doubled_quotes: Treat a quote right after a closing quote as literal

    Returns:
        A single-pass iterator over the arguments
    """
    if not command_line:
        yield ""
        return

    i = 0
    if skip_first:
        _, i = split_program_name(command_line)

    yield from _scan(command_line, i, doubled_quotes)


def parse(
    command_line: str, skip_first: bool, doubled_quotes: bool = False
) -> list[str]:
    """Split a command line into a list of arguments."""
    return list(iter_args(command_line, skip_first, doubled_quotes))


def parse_cmd(command_line: str) -> list[str]:
    """Split a full command line, dropping the program name."""
    return parse(command_line, skip_first=True)


def parse_args(command_line: str) -> list[str]:
    """Split a string holding only arguments."""
    return parse(command_line, skip_first=False)
