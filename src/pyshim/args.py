"""Locate the source-file argument in a Python interpreter argv.

The scan follows CPython's own command-line grammar closely enough to tell
interpreter options (and their values) apart from the script path.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

# Short options that consume a value, either attached (-Wignore) or as the
# next argument (-W ignore).
OPTIONS_WITH_VALUE = frozenset("WX")

# Short options that end option processing: the rest of argv belongs to the
# command or module, so there is no source file.
OPTIONS_WITHOUT_SOURCE = frozenset("cm")

LONG_OPTIONS_WITH_VALUE = frozenset({"--check-hash-based-pycs"})

STDIN_ARG = "-"
END_OF_OPTIONS = "--"


def find_source_arg(args: Sequence[str]) -> Optional[str]:
    """Return the argument naming the Python source file, if any.

    Args:
        args: Arguments as they would be passed to the interpreter
            (without the interpreter itself).

    Returns:
        The source-file argument, or None when the interpreter runs a
        module (-m), a command string (-c), reads stdin (-) or has no
        script argument at all.
    """
    index = 0
    count = len(args)
    while index < count:
        arg = args[index]

        if arg == END_OF_OPTIONS:
            index += 1
            break

        # Anything shorter than two characters or not starting with '-' is
        # the script; "-" itself falls through to the stdin check below.
        if len(arg) < 2 or not arg.startswith("-"):
            break

        if arg.startswith("--"):
            name = arg.split("=", 1)[0]
            if name in LONG_OPTIONS_WITH_VALUE and "=" not in arg:
                index += 2
            else:
                index += 1
            continue

        # Bundled short options: -OO, -bbu, -Wignore, -Bc "print(1)".
        # Flags other than -W/-X/-c/-m take no value.
        consumed_next = False
        for position, char in enumerate(arg[1:], start=1):
            if char in OPTIONS_WITHOUT_SOURCE:
                return None
            if char in OPTIONS_WITH_VALUE:
                consumed_next = position == len(arg) - 1
                break
        index += 2 if consumed_next else 1
    else:
        return None

    if index >= count:
        return None

    source = args[index]
    if source == STDIN_ARG:
        return None
    return source


__all__ = ["find_source_arg"]
