"""Print the default locations used by the credential helper."""

from __future__ import annotations

import os
import sys
from typing import Callable, Iterator, Sequence

from .user_resource import credential_data_directory, credential_data_path

_HELP = (
    "cred_default [OPTION]\n"
    "-d, --data-path       prints credential helper data path.\n"
    "-r, --res-dir         prints credential helper resource directory.\n"
    "-n, --no-newline      does not append new line at end of output.\n"
    "-h, --help            prints this message.\n"
)
_LONG = {"data-path": "d", "res-dir": "r", "no-newline": "n", "help": "h"}
_SHORT = "hdrn"


def _warn(arg: str) -> None:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "cred_default"
    sys.stderr.write(f"{prog}: unrecognized option '{arg}'\n")


def _option_letters(args: Sequence[str]) -> Iterator[str]:
    for arg in args:
        if arg == "--":
            return
        if arg.startswith("--"):
            name, sep, _ = arg[2:].partition("=")
            if name in _LONG:
                matches = [_LONG[name]]
            else:
                matches = [letter for long, letter in _LONG.items() if long.startswith(name)]
            if len(matches) != 1 or sep:
                _warn(arg)
                continue
            yield matches[0]
        elif len(arg) > 1 and arg.startswith("-"):
            for letter in arg[1:]:
                if letter in _SHORT:
                    yield letter
                else:
                    _warn(f"-{letter}")


def _print_help(append_nl: bool) -> int:
    sys.stdout.write(_HELP + "\n")
    return 0


def _print_location(locate: Callable[[], str], append_nl: bool) -> int:
    try:
        location = locate()
    except LookupError:
        return 0
    sys.stdout.write(location + "\n")
    if append_nl:
        sys.stdout.write("\n\n")
    return 0


def _print_data_path(append_nl: bool) -> int:
    return _print_location(credential_data_path, append_nl)


def _print_resource_dir(append_nl: bool) -> int:
    return _print_location(credential_data_directory, append_nl)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; prints help unless ``-d`` or ``-r`` is given."""
    args = list(sys.argv[1:] if argv is None else argv)
    action: Callable[[bool], int] = _print_help
    append_nl = True
    for letter in _option_letters(args):
        if letter == "d":
            action = _print_data_path
        elif letter == "r":
            action = _print_resource_dir
        elif letter == "n":
            append_nl = False
    return action(append_nl)


if __name__ == "__main__":
    sys.exit(main())