"""
DrmSmith CLI dispatcher.

- `drmsmith convert ...` converts a directory tree of drum maps.
- `drmsmith inspect ...` summarizes a single drum map.
- Without a subcommand argv goes to convert unchanged, so
  `drmsmith <input_dir> [grouping]` keeps working.
"""

import sys
from typing import Sequence

from .convert import main as convert_main
from .inspect import main as inspect_main

COMMANDS = {
    "convert": convert_main,
    "inspect": inspect_main,
}


def main(argv: Sequence[str] | None = None) -> int:
    argv_list = list(sys.argv[1:] if argv is None else argv)

    # Only the first token can name a subcommand; a directory literally named
    # "inspect" is converted with `drmsmith convert inspect`.
    if argv_list and argv_list[0] in COMMANDS:
        return COMMANDS[argv_list[0]](argv_list[1:])

    return convert_main(argv_list)


if __name__ == "__main__":
    sys.exit(main())
