"""Two-way message exchange between a parent and a child process over pipes."""

from __future__ import annotations

import argparse
import multiprocessing
import sys
from multiprocessing.connection import Connection
from typing import Sequence

DEFAULT_MESSAGE = "Hello from parent!\n"
DEFAULT_REPLY = "Hi Parent, I got your message!\n"
_TIMEOUT = 30.0


def _child(inbox: Connection, outbox: Connection, reply: str) -> None:
    received = inbox.recv()
    outbox.send((received, reply))
    inbox.close()
    outbox.close()


def exchange_messages(
    message: str = DEFAULT_MESSAGE, reply: str = DEFAULT_REPLY
) -> tuple[str, str]:
    """Send ``message`` to a child process, which answers with ``reply``.

    Returns what the child received and what the parent received.
    """
    to_child_read, to_child_write = multiprocessing.Pipe(duplex=False)
    from_child_read, from_child_write = multiprocessing.Pipe(duplex=False)
    child = multiprocessing.Process(
        target=_child, args=(to_child_read, from_child_write, reply)
    )
    child.start()
    to_child_read.close()
    from_child_write.close()
    try:
        to_child_write.send(message)
        if not from_child_read.poll(_TIMEOUT):
            raise TimeoutError("child process did not reply")
        child_received, parent_received = from_child_read.recv()
    finally:
        to_child_write.close()
        from_child_read.close()
        child.join(_TIMEOUT)
        if child.is_alive():
            child.terminate()
            child.join()
    if child.exitcode != 0:
        raise RuntimeError(f"child process exited with code {child.exitcode}")
    return child_received, parent_received


def main(argv: Sequence[str] | None = None) -> int:
    """Exchange one message each way and print what both sides received."""
    parser = argparse.ArgumentParser(description="Parent/child pipe exchange")
    parser.add_argument("--message", default=DEFAULT_MESSAGE)
    parser.add_argument("--reply", default=DEFAULT_REPLY)
    args = parser.parse_args(argv)
    try:
        child_received, parent_received = exchange_messages(args.message, args.reply)
    except (OSError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Child received: {child_received}", end="")
    print(f"Parent received: {parent_received}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())