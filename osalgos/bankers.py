"""Banker's algorithm: find a safe sequence for a resource allocation state."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO


class UnsafeStateError(Exception):
    """Raised when no safe sequence exists; ``completed`` holds the processes that could finish."""

    def __init__(self, completed: Sequence[int]) -> None:
        super().__init__("system is not in a safe state (deadlock may occur)")
        self.completed = tuple(completed)


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Return process indices in an order in which every process can finish.

    Processes are scanned repeatedly in index order; each one whose need fits the
    currently available resources finishes at once and releases its allocation.
    """
    alloc = [list(row) for row in allocation]
    maxima = [list(row) for row in maximum]
    work = list(available)
    if len(alloc) != len(maxima):
        raise ValueError("allocation and maximum matrices differ in process count")
    for row in (*alloc, *maxima):
        if len(row) != len(work):
            raise ValueError("every matrix row must have one entry per resource")

    need = [[m - a for a, m in zip(a_row, m_row)] for a_row, m_row in zip(alloc, maxima)]
    finished = [False] * len(alloc)
    sequence: list[int] = []
    while len(sequence) < len(alloc):
        progressed = False
        for index, (needed, held) in enumerate(zip(need, alloc)):
            if finished[index]:
                continue
            if all(n <= w for n, w in zip(needed, work)):
                work = [w + h for w, h in zip(work, held)]
                sequence.append(index)
                finished[index] = True
                progressed = True
        if not progressed:
            raise UnsafeStateError(sequence)
    return sequence


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    values = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise ValueError("unexpected end of input")
        values.append(int(token))
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read an allocation state from standard input and report whether it is safe."""
    parser = argparse.ArgumentParser(description="Banker's algorithm")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    try:
        print("Enter number of processes: ", end="", flush=True)
        (n,) = _read_ints(tokens, 1)
        print("Enter number of resources: ", end="", flush=True)
        (m,) = _read_ints(tokens, 1)

        print("\nEnter Allocation Matrix:")
        allocation = []
        for i in range(n):
            print(f"Process {i}: ", end="", flush=True)
            allocation.append(_read_ints(tokens, m))

        print("\nEnter Maximum Matrix:")
        maximum = []
        for i in range(n):
            print(f"Process {i}: ", end="", flush=True)
            maximum.append(_read_ints(tokens, m))

        print("\nEnter Available Resources:")
        available = _read_ints(tokens, m)
        sequence = safe_sequence(allocation, maximum, available)
    except UnsafeStateError:
        print("\nSystem is not in a safe state (deadlock may occur).")
        return 0
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print("\nSystem is in a safe state.")
    print("Safe sequence is: " + "".join(f"P{i} " for i in sequence))
    return 0


if __name__ == "__main__":
    sys.exit(main())