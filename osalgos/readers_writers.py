"""Readers-writers simulation with optional reader-preference synchronisation."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Sequence

MAX_READERS = 5
MAX_WRITERS = 2
_DELAY = 0.0001


class SharedResource:
    """An integer shared by reader and writer threads.

    When ``synchronized`` is true, readers share access and writers get it alone;
    otherwise accesses interleave freely and writes may be lost.
    """

    def __init__(self, synchronized: bool = True, value: int = 0) -> None:
        self.synchronized = synchronized
        self.value = value
        self.log: list[str] = []
        self._read_count = 0
        self._read_mutex = threading.Lock()
        self._write_sem = threading.Semaphore(1)
        self._log_lock = threading.Lock()

    def _record(self, line: str) -> None:
        with self._log_lock:
            self.log.append(line)

    def read(self, reader_id: int) -> tuple[int, int]:
        """Read the value twice with a short pause; returns both readings."""
        if self.synchronized:
            with self._read_mutex:
                self._read_count += 1
                if self._read_count == 1:
                    self._write_sem.acquire()
        try:
            before = self.value
            self._record(f"Reader {reader_id}: (before read) shared_data = {before}")
            time.sleep(_DELAY)
            after = self.value
            self._record(f"Reader {reader_id}: (after read) shared_data = {after}")
        finally:
            if self.synchronized:
                with self._read_mutex:
                    self._read_count -= 1
                    if self._read_count == 0:
                        self._write_sem.release()
        return before, after

    def write(self, writer_id: int) -> int:
        """Add 10 to the value via a read-pause-write sequence; returns the value written."""
        if self.synchronized:
            self._write_sem.acquire()
        try:
            current = self.value
            time.sleep(_DELAY)
            self.value = current + 10
            written = self.value
            self._record(f"Writer {writer_id}: wrote shared_data = {written}")
        finally:
            if self.synchronized:
                self._write_sem.release()
        return written


def run_simulation(
    synchronized: bool = True,
    readers: int = MAX_READERS,
    writers: int = MAX_WRITERS,
    seed: int | None = None,
) -> SharedResource:
    """Start readers and writers in a random order, wait for all, return the resource."""
    if readers < 0 or writers < 0:
        raise ValueError("thread counts must not be negative")
    rng = random.Random(seed)
    resource = SharedResource(synchronized)
    threads: list[threading.Thread] = []
    started_readers = started_writers = 0
    for _ in range(readers + writers):
        choose_reader = rng.randrange(2) == 1
        if (choose_reader and started_readers < readers) or started_writers >= writers:
            started_readers += 1
            thread = threading.Thread(target=resource.read, args=(started_readers,))
        else:
            started_writers += 1
            thread = threading.Thread(target=resource.write, args=(started_writers,))
        thread.start()
        threads.append(thread)
        time.sleep(_DELAY)
    for thread in threads:
        thread.join()
    return resource


def main(argv: Sequence[str] | None = None) -> int:
    """Ask whether to synchronise, run the simulation and print its log."""
    parser = argparse.ArgumentParser(description="Readers-writers simulation")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    print(
        "Do you want to run in synchronized mode? (1 = Yes, 0 = No): ",
        end="",
        flush=True,
    )
    answer = sys.stdin.readline().strip()
    try:
        synchronized = int(answer) != 0
    except ValueError:
        print(f"\nerror: expected 0 or 1, got {answer!r}", file=sys.stderr)
        return 1

    resource = run_simulation(synchronized, seed=args.seed)
    print()
    for line in resource.log:
        print(line)
    print(f"Final value of shared_data = {resource.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())