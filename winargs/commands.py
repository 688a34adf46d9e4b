"""Command-line interface handler for winargs."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table

from . import __version__
from . import encoding
from . import system
from . import tokenizer
from .command import Command
from .exceptions import DecodeFailed, UnsupportedPlatform

console = Console(stderr=True)
out = Console()

FORMATS = ("lines", "json", "table")


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: winargs [-h | --help] <command> [<args>]

Commands:
  args                     Split a string of arguments (no program name)
      -f, --file FILE      Read the string from FILE ('-' for stdin)
      -e, --encoding STR   Encoding of FILE (default utf-8)
      --doubled-quotes     Treat a quote right after a closing quote as literal
      --format FMT         Output format: lines, json or table (default lines)
      <string>             The string to split

  cmd                      Split a full command line, dropping the program name
      -f, --file FILE      Read the command line from FILE ('-' for stdin)
      -e, --encoding STR   Encoding of FILE (default utf-8)
      --doubled-quotes     Treat a quote right after a closing quote as literal
      --format FMT         Output format: lines, json or table (default lines)
      --keep-program       Also print the program name
      <string>             The command line to split

  self                     Split the command line of this process (Windows only)
      --format FMT         Output format: lines, json or table (default lines)

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def read_input(args: argparse.Namespace) -> Optional[str]:
    """Get the string to split from the positional argument or a file."""
    if args.string is not None:
        return args.string

    if not args.file:
        return None

    if args.file == "-":
        raw = sys.stdin.buffer.read()
    else:
        with open(args.file, "rb") as f:
            raw = f.read()

    text = encoding.decode_command_line(raw, args.encoding)

    # Drop the newline that ends a line of input
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]
    return text


def render(tokens: list[str], fmt: str) -> None:
    """Print tokens in the requested format."""
    if fmt == "json":
        print(json.dumps(tokens, ensure_ascii=False))
    elif fmt == "table":
        table = Table(title="Arguments")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Token", style="green")
        table.add_column("Length", justify="right")
        for i, token in enumerate(tokens):
            table.add_row(str(i), repr(token), str(len(token)))
        out.print(table)
    else:
        for token in tokens:
            print(repr(token))


def load_or_exit(args: argparse.Namespace) -> str:
    """Read the input, exiting with an error if it is missing or undecodable."""
    try:
        text = read_input(args)
    except DecodeFailed as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]✗ Failed to read {args.file}: {e}[/red]")
        sys.exit(1)

    if text is None:
        print("Please specify a string or an input file\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    return text


def cmd_args(args: argparse.Namespace) -> None:
    """Execute the args command."""
    text = load_or_exit(args)
    tokens = tokenizer.parse(text, skip_first=False, doubled_quotes=args.doubled_quotes)
    render(tokens, args.format)


def cmd_cmd(args: argparse.Namespace) -> None:
    """Execute the cmd command."""
    text = load_or_exit(args)

    if args.keep_program:
        tokens = Command.parse(text, doubled_quotes=args.doubled_quotes).argv()
    else:
        tokens = tokenizer.parse(
            text, skip_first=True, doubled_quotes=args.doubled_quotes
        )
    render(tokens, args.format)


def cmd_self(args: argparse.Namespace) -> None:
    """Execute the self command."""
    try:
        tokens = system.get_args()
    except UnsupportedPlatform as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    render(tokens, args.format)


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by the args and cmd commands."""
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for this command"
    )
    parser.add_argument("-f", "--file", type=str, help="Read input from file")
    parser.add_argument(
        "-e", "--encoding", type=str, default="utf-8", help="Encoding of the file"
    )
    parser.add_argument(
        "--doubled-quotes",
        action="store_true",
        dest="doubled_quotes",
        help="Treat a quote right after a closing quote as literal",
    )
    parser.add_argument(
        "--format", choices=FORMATS, default="lines", help="Output format"
    )
    parser.add_argument("string", nargs="?", help="The string to split")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="winargs",
        description="Windows command line splitter",
        add_help=False,
    )

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Args command
    args_parser = subparsers.add_parser("args", add_help=False)
    add_input_arguments(args_parser)

    # Cmd command
    cmd_parser = subparsers.add_parser("cmd", add_help=False)
    add_input_arguments(cmd_parser)
    cmd_parser.add_argument(
        "--keep-program",
        action="store_true",
        dest="keep_program",
        help="Also print the program name",
    )

    # Self command
    self_parser = subparsers.add_parser("self", add_help=False)
    self_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for self"
    )
    self_parser.add_argument(
        "--format", choices=FORMATS, default="lines", help="Output format"
    )

    # Help and version commands
    subparsers.add_parser("help", add_help=False)
    subparsers.add_parser("version", add_help=False)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print_usage()
        return

    args = build_parser().parse_args(argv)

    # Handle global and command-specific help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Execute commands
    if args.command == "args":
        cmd_args(args)
    elif args.command == "cmd":
        cmd_cmd(args)
    elif args.command == "self":
        cmd_self(args)
    else:
        print_usage()
