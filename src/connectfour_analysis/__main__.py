from __future__ import annotations

import sys

from .cli.analyze_history import main as profile_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Optional "profile" subcommand; flags alone also run it
    if argv and argv[0].lower() == "profile":
        argv = argv[1:]

    return profile_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
