# osalgos

Small simulations of the algorithms met in an operating-systems course. Each
algorithm is a plain Python function that returns its result, and each area has
a command that prints a report.

| Module | Contents |
| --- | --- |
| `osalgos.cpu_scheduling` | FCFS, SJF (non-preemptive), priority (non-preemptive), shortest remaining time first, preemptive priority, round robin |
| `osalgos.page_replacement` | FIFO, LRU, optimal |
| `osalgos.disk_scheduling` | FIFO, SSTF, SCAN, C-SCAN |
| `osalgos.memory_allocation` | first fit, best fit, next fit, worst fit |
| `osalgos.bankers` | Banker's algorithm safe-sequence search |
| `osalgos.fileutils` | line-by-line file copy and substring search |
| `osalgos.ipc` | one message each way between a parent and a child process over pipes |
| `osalgos.readers_writers` | readers–writers threads, with or without synchronisation |

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## CPU scheduling

Processes are `Process(pid, arrival, burst, priority=None)` records. Every
scheduler returns a `Schedule`: its `processes` are `ScheduledProcess` entries
(with `waiting`, `turnaround` and, where the algorithm tracks them,
`completion` and `start`) in the order they are reported, and its `gantt` is a
tuple of pids. `average_waiting()` and `average_turnaround()` give the means
and raise `ValueError` for an empty schedule.

```python
from osalgos.cpu_scheduling import Process, round_robin, format_schedule

processes = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
schedule = round_robin(processes, quantum=2)
print(format_schedule(schedule, "Round Robin Scheduling"))
print(schedule.average_waiting(), schedule.average_turnaround())
```

- `fcfs(processes, respect_arrival=True)` runs processes in arrival order. With
  `respect_arrival=False` each process simply waits for the bursts before it.
- `sjf_non_preemptive(processes)` orders by burst among processes arriving no
  later, then times them back to back.
- `priority_non_preemptive(processes)` runs lower priority values first, ties
  broken by arrival.
- `sjf_preemptive(processes)` and `priority_preemptive(processes)` simulate one
  time unit at a time; their `gantt` lists the processes in arrival order. Both
  need positive burst times.
- `round_robin(processes, quantum)` lists every dispatch in `gantt`; the
  quantum must be positive.

The priority schedulers raise `ValueError` if a process has no priority.

## Page replacement

`fifo`, `lru` and `optimal` take a page reference string and a frame count
(default 3) and return a `PageReplacementResult` with `pages`, the frame
`snapshots` after each access (`None` for an empty frame), `faults` and `hits`.

```python
from osalgos import page_replacement

pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 3]
result = page_replacement.lru(pages, frames=3)
print(page_replacement.format_trace(result))
```

## Disk scheduling

Each function returns the total head movement.

```python
from osalgos import disk_scheduling

requests = [176, 79, 34, 60, 92, 11, 41, 114]
disk_scheduling.fifo(requests, start=50)
disk_scheduling.sstf(requests, start=50)
disk_scheduling.scan(requests, start=50, disk_size=200)
disk_scheduling.cscan(requests, start=50, disk_size=200)
```

`scan` moves only toward higher tracks and does not reverse, so requests below
the start are not serviced. `cscan` sweeps to the last track, jumps to track 0
without counting the jump, and sweeps up again. Both raise `ValueError` for a
track outside the disk.

## Memory allocation

`first_fit`, `best_fit`, `next_fit` and `worst_fit` take block sizes and
process sizes and return, for each process, the 0-based index of its block or
`None` if it did not fit. `format_allocation` prints 1-based numbers.

```python
from osalgos import memory_allocation

blocks = [100, 500, 200, 300, 600]
processes = [212, 417, 112, 426]
allocation = memory_allocation.best_fit(blocks, processes)
print(memory_allocation.format_allocation("Best Fit Allocation", processes, allocation))
```

## Banker's algorithm

`safe_sequence(allocation, maximum, available)` returns process indices in a
safe order, or raises `UnsafeStateError` (whose `completed` holds the processes
that could finish). Mismatched matrix sizes raise `ValueError`.

```python
from osalgos.bankers import safe_sequence, UnsafeStateError

try:
    order = safe_sequence(allocation=[[0, 1], [2, 0]],
                          maximum=[[1, 2], [3, 2]],
                          available=[1, 1])
except UnsafeStateError:
    print("System is not in a safe state")
```

## Files, pipes and threads

- `fileutils.copy_file(source, destination)` copies line by line, ending every
  line with a newline, and returns the line count. `fileutils.grep(pattern,
  path)` returns `(line_number, line)` pairs for lines containing the string.
- `ipc.exchange_messages(message, reply)` starts a child process, sends it
  `message` over one pipe, receives `reply` over another, and returns what the
  child and the parent received.
- `readers_writers.run_simulation(synchronized=True, readers=5, writers=2,
  seed=None)` starts readers and writers in a random order on a
  `SharedResource` and returns it once all threads finish; its `log` holds the
  reported reads and writes and `value` the final number. Each write adds 10.
  Without synchronisation, writes can be lost.

## Commands

| Command | Input and options |
| --- | --- |
| `osalgos-cpu ALGORITHM` | `fcfs-sjf`, `rr`, `fcfs-priority`, `priority`, `srtf` or `priority-preemptive`; reads the processes (and quantum) from standard input |
| `osalgos-pages ALGORITHM [PAGE ...] [--frames N]` | `fifo`, `lru` or `optimal`; uses an example reference string when no pages are given |
| `osalgos-disk [TRACK ...] [--start N] [--disk-size N]` | prints FIFO, SSTF, SCAN and C-SCAN totals; uses an example queue when no tracks are given |
| `osalgos-memory STRATEGIES` | `first-best` or `next-worst`; reads block and process sizes from standard input |
| `osalgos-bankers` | reads the matrices and available resources from standard input |
| `osalgos-files copy SOURCE DESTINATION` / `osalgos-files grep PATTERN FILE` | copy a file or print matching lines |
| `osalgos-ipc [--message TEXT] [--reply TEXT]` | exchange one message each way |
| `osalgos-rw [--seed N]` | asks on standard input whether to synchronise (1 or 0) |

For example:

```
osalgos-pages optimal 1 2 3 4 1 2 5 --frames 3
echo "3  0 5  1 3  2 1  2" | osalgos-cpu rr
osalgos-files grep "deadlock" notes.txt
```

## Limits

The simulations are teaching models: SCAN does not reverse direction, the
preemptive schedulers and round robin advance time in whole units, and the
commands read whitespace-separated integers rather than files in any
particular format.