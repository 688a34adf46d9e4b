#!/usr/bin/env python3
"""Main entry point for the winargs command line splitter."""

import sys
from typing import Optional

from winargs.commands import main


def run(argv: Optional[list[str]] = None) -> None:
    """Run the CLI, mapping interrupts and errors to exit codes."""
    try:
        main(argv)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
