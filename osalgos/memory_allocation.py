"""Contiguous memory allocation: first, best, next and worst fit."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, Sequence, TextIO

Allocation = list["int | None"]
Picker = Callable[[list[int], int], "int | None"]


def _allocate(blocks: Sequence[int], processes: Sequence[int], pick: Picker) -> Allocation:
    free = list(blocks)
    allocation: Allocation = []
    for size in processes:
        slot = pick(free, size)
        if slot is not None:
            free[slot] -= size
        allocation.append(slot)
    return allocation


def _fitting(free: list[int], size: int) -> list[int]:
    return [index for index, room in enumerate(free) if room >= size]


def first_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the first block with room; returns block indices or None."""
    return _allocate(
        blocks, processes, lambda free, size: next(iter(_fitting(free, size)), None)
    )


def best_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the smallest block with room."""
    return _allocate(
        blocks,
        processes,
        lambda free, size: min(_fitting(free, size), key=free.__getitem__, default=None),
    )


def worst_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the largest block with room."""
    return _allocate(
        blocks,
        processes,
        lambda free, size: max(_fitting(free, size), key=free.__getitem__, default=None),
    )


def next_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Like first fit, but each search starts at the block used last and wraps around."""
    last = 0

    def pick(free: list[int], size: int) -> int | None:
        nonlocal last
        for index in [*range(last, len(free)), *range(last)]:
            if free[index] >= size:
                last = index
                return index
        return None

    return _allocate(blocks, processes, pick)


def format_allocation(
    title: str, processes: Sequence[int], allocation: Sequence[int | None]
) -> str:
    """Render an allocation as a table with 1-based process and block numbers."""
    lines = [f"{title}:", "Process No.\tProcess Size\tBlock No."]
    for number, (size, block) in enumerate(zip(processes, allocation, strict=True), 1):
        where = "Not Allocated" if block is None else str(block + 1)
        lines.append(f"{number}\t\t{size}\t\t{where}")
    return "\n".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return int(token)


_PAIRS = {
    "first-best": (("First Fit Allocation", first_fit), ("Best Fit Allocation", best_fit)),
    "next-worst": (("Next Fit Allocation", next_fit), ("Worst Fit Allocation", worst_fit)),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read block and process sizes from standard input and print two allocations."""
    parser = argparse.ArgumentParser(description="Memory allocation simulator")
    parser.add_argument("strategies", choices=sorted(_PAIRS))
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    try:
        count = _read_int(tokens, "Enter number of memory blocks: ")
        print("Enter size of each memory block:")
        blocks = [_read_int(tokens, f"Block {n}: ") for n in range(1, count + 1)]
        count = _read_int(tokens, "Enter number of processes: ")
        print("Enter size of each process:")
        processes = [_read_int(tokens, f"Process {n}: ") for n in range(1, count + 1)]
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    for title, strategy in _PAIRS[args.strategies]:
        print()
        print()
        print(format_allocation(title, processes, strategy(blocks, processes)))
    return 0


if __name__ == "__main__":
    sys.exit(main())