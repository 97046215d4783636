"""Disk scheduling algorithms returning the total head movement (seek time)."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

EXAMPLE_REQUESTS = (176, 79, 34, 60, 92, 11, 41, 114)
DEFAULT_START = 50
DEFAULT_DISK_SIZE = 200


def _travel(path: Iterable[int], start: int) -> int:
    total = 0
    head = start
    for track in path:
        total += abs(track - head)
        head = track
    return total


def _check_tracks(requests: Sequence[int], start: int, disk_size: int) -> None:
    if disk_size <= 0:
        raise ValueError("disk size must be positive")
    for track in (*requests, start):
        if not 0 <= track < disk_size:
            raise ValueError(f"track {track} is outside the disk (0..{disk_size - 1})")


def fifo(requests: Iterable[int], start: int) -> int:
    """Service requests in the order given."""
    return _travel(requests, start)


def sstf(requests: Iterable[int], start: int) -> int:
    """Always service the pending request closest to the head; ties go to the earlier one."""
    pending = list(requests)
    head = start
    total = 0
    while pending:
        nearest = min(range(len(pending)), key=lambda i: abs(pending[i] - head))
        track = pending.pop(nearest)
        total += abs(track - head)
        head = track
    return total


def scan(requests: Iterable[int], start: int, disk_size: int = DEFAULT_DISK_SIZE) -> int:
    """Move toward higher tracks, servicing requests at or above the start.

    The head does not reverse, so requests below the start are not serviced.
    """
    tracks = list(requests)
    _check_tracks(tracks, start, disk_size)
    return _travel(sorted(t for t in tracks if t >= start), start)


def cscan(
    requests: Iterable[int], start: int, disk_size: int = DEFAULT_DISK_SIZE
) -> int:
    """Sweep up to the last track, jump to track 0, then sweep up again.

    The return jump to track 0 is not counted as movement.
    """
    tracks = sorted(requests)
    _check_tracks(tracks, start, disk_size)
    upper = [t for t in tracks if t >= start]
    lower = [t for t in tracks if t < start]
    total = _travel(upper, start)
    head = upper[-1] if upper else start
    total += abs(disk_size - 1 - head)
    total += _travel(lower, 0)
    return total


def _report(name: str, requests: Sequence[int], total: int) -> str:
    listing = "".join(f"{track} " for track in requests)
    return f"\n{name} Disk Scheduling\nDisk Requests: {listing}\nTotal Seek Time: {total}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the seek times of FIFO, SSTF, SCAN and C-SCAN for a request queue."""
    parser = argparse.ArgumentParser(description="Disk scheduling simulator")
    parser.add_argument("requests", nargs="*", type=int)
    parser.add_argument("-s", "--start", type=int, default=DEFAULT_START)
    parser.add_argument("-d", "--disk-size", type=int, default=DEFAULT_DISK_SIZE)
    args = parser.parse_args(argv)
    requests = args.requests or list(EXAMPLE_REQUESTS)

    try:
        reports = [
            ("FIFO", fifo(requests, args.start)),
            ("SSTF", sstf(requests, args.start)),
            ("SCAN", scan(requests, args.start, args.disk_size)),
            ("C-SCAN", cscan(requests, args.start, args.disk_size)),
        ]
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for name, total in reports:
        print(_report(name, requests, total))
    return 0


if __name__ == "__main__":
    sys.exit(main())