"""Access to the command line of the running process."""

import sys

from .encoding import decode_wide
from .exceptions import UnsupportedPlatform
from .tokenizer import parse_cmd

IS_WINDOWS = sys.platform.startswith("win")


def read_wide(address: int) -> list[int]:
    """Read NUL-terminated UTF-16 code units starting at address."""
    import ctypes

    units = []
    if not address:
        return units

    buf = ctypes.cast(address, ctypes.POINTER(ctypes.c_uint16))
    i = 0
    while buf[i] != 0:
        units.append(buf[i])
        i += 1
    return units


def get_command_line() -> str:
    """
    Return the raw command line of this process via GetCommandLineW.

    The code units are decoded strictly, so an unpaired surrogate raises
    DecodeFailed instead of being replaced.
    """
    if not IS_WINDOWS:
        raise UnsupportedPlatform(
            f"The raw command line is only available on Windows, not {sys.platform}"
        )

    import ctypes

    kernel32 = ctypes.windll.kernel32
    kernel32.GetCommandLineW.argtypes = []
    kernel32.GetCommandLineW.restype = ctypes.c_void_p
    return decode_wide(read_wide(kernel32.GetCommandLineW()))


def get_args() -> list[str]:
    """Return the arguments of this process, without the program name."""
    return parse_cmd(get_command_line())
