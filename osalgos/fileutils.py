"""Line-oriented file copy and substring search."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

_TEXT = {"encoding": "utf-8", "errors": "surrogateescape", "newline": "\n"}


def copy_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> int:
    """Copy a file line by line, ending every line with a newline; returns the line count."""
    count = 0
    with open(source, **_TEXT) as src, open(destination, "w", **_TEXT) as dst:
        for line in src:
            dst.write(line if line.endswith("\n") else line + "\n")
            count += 1
    return count


def grep(pattern: str, path: str | os.PathLike[str]) -> list[tuple[int, str]]:
    """Return (1-based line number, line) for every line containing ``pattern``."""
    with open(path, **_TEXT) as handle:
        lines = [line.removesuffix("\n") for line in handle]
    return [(number, line) for number, line in enumerate(lines, 1) if pattern in line]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``copy`` or ``grep`` command."""
    parser = argparse.ArgumentParser(description="File utilities")
    commands = parser.add_subparsers(dest="command", required=True)
    copy_cmd = commands.add_parser("copy", help="copy a file")
    copy_cmd.add_argument("source")
    copy_cmd.add_argument("destination")
    grep_cmd = commands.add_parser("grep", help="print lines containing a string")
    grep_cmd.add_argument("pattern")
    grep_cmd.add_argument("file")
    args = parser.parse_args(argv)

    if args.command == "copy":
        try:
            copy_file(args.source, args.destination)
        except OSError:
            print("Error opening files. Please check file paths.", file=sys.stderr)
            return 1
        print(
            f"File copied from '{args.source}' to '{args.destination}' successfully!"
        )
        return 0

    try:
        matches = grep(args.pattern, args.file)
    except OSError:
        print(f"Error opening file: {args.file}", file=sys.stderr)
        return 1
    for number, line in matches:
        print(f"{number}: {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())