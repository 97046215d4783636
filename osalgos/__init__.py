"""Simulations of operating-system algorithms: scheduling, paging, allocation, deadlock avoidance, pipes and threads."""

__version__ = "0.1.0"

__all__ = [
    "bankers",
    "cpu_scheduling",
    "disk_scheduling",
    "fileutils",
    "ipc",
    "memory_allocation",
    "page_replacement",
    "readers_writers",
]