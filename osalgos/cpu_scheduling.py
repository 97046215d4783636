"""CPU scheduling algorithms: FCFS, SJF, priority, SRTF, preemptive priority and round robin."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence, TextIO


@dataclass(frozen=True)
class Process:
    """A process submitted for scheduling."""

    pid: int
    arrival: int
    burst: int
    priority: int | None = None


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the timing results of a schedule."""

    process: Process
    waiting: int
    turnaround: int
    completion: int | None = None
    start: int | None = None

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def arrival(self) -> int:
        return self.process.arrival

    @property
    def burst(self) -> int:
        return self.process.burst

    @property
    def priority(self) -> int | None:
        return self.process.priority


@dataclass(frozen=True)
class Schedule:
    """Per-process results in report order, plus the Gantt chart as a list of pids."""

    processes: tuple[ScheduledProcess, ...]
    gantt: tuple[int, ...]

    def _require_processes(self) -> None:
        if not self.processes:
            raise ValueError("schedule has no processes")

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        self._require_processes()
        return sum(p.waiting for p in self.processes) / len(self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        self._require_processes()
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def _sequential(ordered: Sequence[Process], respect_arrival: bool) -> Schedule:
    """Run processes back to back in the given order."""
    results: list[ScheduledProcess] = []
    prev_waiting = prev_burst = prev_completion = 0
    for position, proc in enumerate(ordered):
        if position == 0:
            waiting = 0
            completion: int | None = proc.burst
        elif respect_arrival:
            waiting = max(prev_completion - proc.arrival, 0)
            completion = waiting + proc.burst + proc.arrival
        else:
            waiting = prev_waiting + prev_burst
            completion = None
        if not respect_arrival:
            completion = None
        results.append(
            ScheduledProcess(proc, waiting, waiting + proc.burst, completion)
        )
        prev_waiting, prev_burst = waiting, proc.burst
        if completion is not None:
            prev_completion = completion
    return Schedule(tuple(results), tuple(p.pid for p in ordered))


def _require_priorities(processes: Iterable[Process]) -> None:
    for proc in processes:
        if proc.priority is None:
            raise ValueError(f"process P{proc.pid} has no priority")


def fcfs(processes: Iterable[Process], respect_arrival: bool = True) -> Schedule:
    """First come, first served.

    With ``respect_arrival`` the CPU idles until a late process arrives;
    without it, each process waits for the sum of the bursts before it.
    """
    ordered = sorted(processes, key=lambda p: p.arrival)
    return _sequential(ordered, respect_arrival)


def sjf_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Shortest job first, non-preemptive, timed back to back."""
    items = list(processes)
    for i in range(len(items)):
        chosen = i
        for j in range(i + 1, len(items)):
            candidate, current = items[j], items[chosen]
            if candidate.arrival <= current.arrival and candidate.burst < current.burst:
                chosen = j
        items[i], items[chosen] = items[chosen], items[i]
    return _sequential(items, respect_arrival=False)


def priority_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Priority scheduling (lower value first), ties broken by arrival."""
    items = list(processes)
    _require_priorities(items)
    ordered = sorted(items, key=lambda p: (p.priority, p.arrival))
    return _sequential(ordered, respect_arrival=True)


def _preemptive(
    ordered: Sequence[Process], rank: Callable[[Process, int], int]
) -> Schedule:
    """Unit-step preemptive simulation picking the ready process of lowest rank."""
    for proc in ordered:
        if proc.burst <= 0:
            raise ValueError(f"process P{proc.pid} needs a positive burst time")
    remaining = [p.burst for p in ordered]
    starts: dict[int, int] = {}
    completions: dict[int, int] = {}
    time = 0
    while len(completions) < len(ordered):
        ready = [
            i for i, p in enumerate(ordered) if p.arrival <= time and remaining[i] > 0
        ]
        if not ready:
            time = min(
                p.arrival for i, p in enumerate(ordered) if i not in completions
            )
            continue
        chosen = min(ready, key=lambda i: rank(ordered[i], remaining[i]))
        if remaining[chosen] == ordered[chosen].burst:
            starts.setdefault(chosen, time)
        remaining[chosen] -= 1
        time += 1
        if remaining[chosen] == 0:
            completions[chosen] = time

    results = []
    for i, proc in enumerate(ordered):
        turnaround = completions[i] - proc.arrival
        results.append(
            ScheduledProcess(
                proc,
                waiting=turnaround - proc.burst,
                turnaround=turnaround,
                completion=completions[i],
                start=starts[i],
            )
        )
    return Schedule(tuple(results), tuple(p.pid for p in ordered))


def sjf_preemptive(processes: Iterable[Process]) -> Schedule:
    """Shortest remaining time first."""
    ordered = sorted(processes, key=lambda p: (p.arrival, p.burst))
    return _preemptive(ordered, lambda proc, left: left)


def priority_preemptive(processes: Iterable[Process]) -> Schedule:
    """Preemptive priority scheduling (lower value first)."""
    items = list(processes)
    _require_priorities(items)
    ordered = sorted(items, key=lambda p: (p.arrival, p.priority))
    return _preemptive(ordered, lambda proc, left: proc.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round robin with the given time quantum; the Gantt chart lists every dispatch."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    procs = list(processes)
    remaining = [p.burst for p in procs]
    completions: dict[int, int] = {}
    queue: deque[int] = deque()
    admitted: set[int] = set()
    dispatches: list[int] = []
    time = 0

    def admit(ready: Callable[[Process], bool]) -> None:
        for i, proc in enumerate(procs):
            if i not in admitted and ready(proc):
                queue.append(i)
                admitted.add(i)

    admit(lambda p: p.arrival == 0)
    while len(completions) < len(procs):
        if not queue:
            time += 1
            admit(lambda p: p.arrival <= time)
            continue
        current = queue.popleft()
        dispatches.append(procs[current].pid)
        if remaining[current] > quantum:
            time += quantum
            remaining[current] -= quantum
        else:
            time += remaining[current]
            remaining[current] = 0
            completions[current] = time
        admit(lambda p: p.arrival <= time)
        if current not in completions:
            queue.append(current)

    results = []
    for i, proc in enumerate(procs):
        turnaround = completions[i] - proc.arrival
        results.append(
            ScheduledProcess(
                proc,
                waiting=turnaround - proc.burst,
                turnaround=turnaround,
                completion=completions[i],
            )
        )
    return Schedule(tuple(results), tuple(dispatches))


def format_schedule(schedule: Schedule, title: str) -> str:
    """Render a schedule as a table with averages and a Gantt chart."""
    show_priority = bool(schedule.processes) and all(
        p.priority is not None for p in schedule.processes
    )
    show_timeline = bool(schedule.processes) and all(
        p.start is not None for p in schedule.processes
    )
    header = ["PID", "Arrival", "Burst"]
    if show_priority:
        header.append("Priority")
    if show_timeline:
        header += ["Start", "Completion"]
    header += ["Waiting", "Turnaround"]

    lines = [f"{title}:", "\t".join(header)]
    for p in schedule.processes:
        row = [f"P{p.pid}", str(p.arrival), str(p.burst)]
        if show_priority:
            row.append(str(p.priority))
        if show_timeline:
            row += [str(p.start), str(p.completion)]
        row += [str(p.waiting), str(p.turnaround)]
        lines.append("\t".join(row))

    if schedule.processes:
        lines.append("")
        lines.append(f"Average Waiting Time = {schedule.average_waiting():.2f}")
        lines.append(f"Average Turnaround Time = {schedule.average_turnaround():.2f}")
    lines.append("")
    chart = "".join(f"| P{pid} " for pid in schedule.gantt) + "|"
    lines.append(f"Gantt Chart: {chart}")
    return "\n".join(lines)


_WITH_PRIORITY = {"fcfs-priority", "priority", "priority-preemptive"}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, count: int) -> list[int]:
    print(prompt, end="", flush=True)
    values = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise ValueError("unexpected end of input")
        values.append(int(token))
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes from standard input and print the chosen schedules."""
    parser = argparse.ArgumentParser(description="CPU scheduling simulator")
    parser.add_argument(
        "algorithm",
        choices=[
            "fcfs-sjf",
            "rr",
            "fcfs-priority",
            "priority",
            "srtf",
            "priority-preemptive",
        ],
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    with_priority = args.algorithm in _WITH_PRIORITY

    try:
        (count,) = _ask(tokens, "Enter number of processes: ", 1)
        processes = []
        for pid in range(1, count + 1):
            if with_priority:
                arrival, burst, priority = _ask(
                    tokens,
                    f"Enter Arrival Time, Burst Time, and Priority for Process {pid}: ",
                    3,
                )
            else:
                arrival, burst = _ask(
                    tokens, f"Enter Arrival Time and Burst Time for Process {pid}: ", 2
                )
                priority = None
            processes.append(Process(pid, arrival, burst, priority))

        reports: list[tuple[Schedule, str]] = []
        if args.algorithm == "fcfs-sjf":
            reports.append((fcfs(processes, respect_arrival=False), "FCFS Scheduling"))
            reports.append(
                (sjf_non_preemptive(processes), "SJF (Non-Preemptive) Scheduling")
            )
        elif args.algorithm == "rr":
            (quantum,) = _ask(tokens, "Enter Time Quantum: ", 1)
            reports.append((round_robin(processes, quantum), "Round Robin Scheduling"))
        elif args.algorithm == "fcfs-priority":
            reports.append((fcfs(processes, respect_arrival=True), "FCFS Scheduling"))
            reports.append(
                (
                    priority_non_preemptive(processes),
                    "Priority Scheduling (Non-Preemptive)",
                )
            )
        elif args.algorithm == "priority":
            reports.append(
                (
                    priority_non_preemptive(processes),
                    "Priority Scheduling (Non-Preemptive)",
                )
            )
        elif args.algorithm == "srtf":
            reports.append((sjf_preemptive(processes), "SJF (Preemptive) Scheduling"))
        else:
            reports.append(
                (priority_preemptive(processes), "Priority Scheduling (Preemptive)")
            )
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    for schedule, title in reports:
        print()
        print()
        print(format_schedule(schedule, title))
    return 0


if __name__ == "__main__":
    sys.exit(main())