"""Reading a text file and echoing it to standard output."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

DEFAULT_FILENAME = "../data/ej1.html"


def read_text_file(filename: str) -> str:
    """Return the whole content of a text file, line endings untouched."""
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    filename = args[0] if args else DEFAULT_FILENAME
    try:
        content = read_text_file(filename)
    except OSError:
        print(f"Error al leer {filename}")
    else:
        print(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())