"""Repository-level entrypoint for the argflags inspector.

``python main.py --json -- --count=5 --laugh`` behaves like the installed
``argflags-inspect`` script.
"""

from __future__ import annotations

import sys
from typing import Sequence

from argflags.cli.simple import main as inspect_main


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    return inspect_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
