"""Page replacement algorithms: FIFO, LRU and optimal."""

from __future__ import annotations

import argparse
import itertools
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

DEFAULT_FRAMES = 3
EXAMPLE_PAGES = (7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 3)

Memory = list["int | None"]
SlotChooser = Callable[[Memory, Sequence[int], int], int]


@dataclass(frozen=True)
class PageReplacementResult:
    """The frame contents after every access, and the number of page faults."""

    pages: tuple[int, ...]
    snapshots: tuple[tuple[int | None, ...], ...]
    faults: int

    @property
    def hits(self) -> int:
        return len(self.pages) - self.faults


def _simulate(
    pages: Iterable[int], frames: int, choose_slot: SlotChooser
) -> PageReplacementResult:
    if frames <= 0:
        raise ValueError("number of frames must be positive")
    sequence = tuple(pages)
    memory: Memory = [None] * frames
    snapshots = []
    faults = 0
    for position, page in enumerate(sequence):
        if page not in memory:
            faults += 1
            memory[choose_slot(memory, sequence, position)] = page
        snapshots.append(tuple(memory))
    return PageReplacementResult(sequence, tuple(snapshots), faults)


def fifo(pages: Iterable[int], frames: int = DEFAULT_FRAMES) -> PageReplacementResult:
    """Replace pages in the order they were loaded, cycling through the frames."""
    if frames <= 0:
        raise ValueError("number of frames must be positive")
    slots = itertools.cycle(range(frames))
    return _simulate(pages, frames, lambda memory, sequence, position: next(slots))


def _least_recent(memory: Memory, sequence: Sequence[int], position: int) -> int:
    last_use: dict[int, int] = {}
    for index, page in enumerate(sequence[:position]):
        last_use[page] = index
    for slot, page in enumerate(memory):
        if page not in last_use:
            return slot
    return min(range(len(memory)), key=lambda slot: last_use[memory[slot]])


def lru(pages: Iterable[int], frames: int = DEFAULT_FRAMES) -> PageReplacementResult:
    """Replace the page whose last use lies furthest in the past."""
    return _simulate(pages, frames, _least_recent)


def _farthest_next_use(memory: Memory, sequence: Sequence[int], position: int) -> int:
    if None in memory:
        return memory.index(None)
    next_use: dict[int, int] = {}
    for offset, page in enumerate(sequence[position + 1 :]):
        next_use.setdefault(page, offset)
    for slot, page in enumerate(memory):
        if page not in next_use:
            return slot
    return max(range(len(memory)), key=lambda slot: next_use[memory[slot]])


def optimal(
    pages: Iterable[int], frames: int = DEFAULT_FRAMES
) -> PageReplacementResult:
    """Fill empty frames first, then replace the page used furthest in the future."""
    return _simulate(pages, frames, _farthest_next_use)


def format_trace(result: PageReplacementResult) -> str:
    """Render the frame contents after each access and the fault total."""
    lines = []
    for page, snapshot in zip(result.pages, result.snapshots):
        cells = "".join(" - " if frame is None else f"{frame} " for frame in snapshot)
        lines.append(f"Page {page} accessed: {cells}")
    lines.append("")
    lines.append(f"Total page faults: {result.faults}")
    return "\n".join(lines)


_ALGORITHMS = {"fifo": fifo, "lru": lru, "optimal": optimal}


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate a page replacement algorithm on a page access sequence."""
    parser = argparse.ArgumentParser(description="Page replacement simulator")
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("pages", nargs="*", type=int)
    parser.add_argument("-f", "--frames", type=int, default=DEFAULT_FRAMES)
    args = parser.parse_args(argv)
    pages = args.pages or list(EXAMPLE_PAGES)

    try:
        result = _ALGORITHMS[args.algorithm](pages, args.frames)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Page Access Sequence: " + "".join(f"{page} " for page in pages))
    print()
    print(format_trace(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())